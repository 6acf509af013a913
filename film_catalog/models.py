"""
Data models for the Film Catalog.
Defines the core data structures used throughout the system.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, asdict  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Any, Dict, Optional  # optional values and JSON-like dicts


@dataclass(frozen=True)
class Movie:
	"""
	Represents a single movie record of the catalog.
	Records are immutable once loaded; pirate rendering produces new instances.
	"""
	id: int  # unique positive identifier
	movie_name: str  # display name, never rewritten
	director: str  # director name (free text)
	year: int  # release year (e.g., 1994)
	genre: str  # genre label, may hold several words (e.g., "Crime/Drama")
	description: str  # short synopsis
	duration: int  # runtime in minutes
	imdb_rating: float  # quality score on a 0-10 scale

	def to_dict(self) -> Dict[str, Any]:
		"""Serialize with the camelCase keys used by the data file and the JSON API."""
		return {
			'id': self.id,
			'movieName': self.movie_name,
			'director': self.director,
			'year': self.year,
			'genre': self.genre,
			'description': self.description,
			'duration': self.duration,
			'imdbRating': self.imdb_rating,
		}


@dataclass(frozen=True)
class SearchCriteria:
	"""
	The optional name / id / genre triple used to filter the catalog.
	Blank strings and non-positive ids count as absent.
	"""
	name: Optional[str] = None  # case-insensitive substring of the movie name
	id: Optional[int] = None  # exact identifier
	genre: Optional[str] = None  # case-insensitive substring of the genre label

	@property
	def has_name(self) -> bool:
		return self.name is not None and bool(self.name.strip())

	@property
	def has_id(self) -> bool:
		return self.id is not None and self.id > 0

	@property
	def has_genre(self) -> bool:
		return self.genre is not None and bool(self.genre.strip())

	def describe(self) -> str:
		"""
		Human-readable summary such as "name: Prison, genre: Drama".
		Only supplied fields appear; values are echoed exactly as received.
		"""
		parts = []
		if self.has_name:
			parts.append(f"name: {self.name}")
		if self.has_id:
			parts.append(f"id: {self.id}")
		if self.has_genre:
			parts.append(f"genre: {self.genre}")
		return ', '.join(parts)


@dataclass(frozen=True)
class Review:
	"""A single user review attached to a movie."""
	movie_id: int
	user_name: str
	rating: float
	comment: str
	avatar: Optional[str] = None

	def to_dict(self) -> Dict[str, Any]:
		return asdict(self)
