"""
Data loading module.
Reads the static movie (and review) data files and turns them into immutable records.
Loading never raises: a missing or malformed file yields an empty list and an error log.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # parse the data files
from typing import Any, Dict, List, Union  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our data classes used across the project
from .models import Movie, Review  # structured records

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles loading and validating catalog data.
	Accepts either a JSON array file (movies.json) or JSON Lines (one object per line).
	"""

	# Keys every movie entry must expose
	REQUIRED_FIELDS = ('id', 'movieName', 'director', 'year', 'genre', 'description', 'duration', 'imdbRating')

	def load_movies(self, filepath: Union[str, Path]) -> List[Movie]:
		"""
		Load movies from disk, preserving file order.
		Entries with a duplicate or non-positive id are skipped; the first occurrence wins.
		"""
		filepath = Path(filepath)  # normalize path
		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		try:
			entries = self._read_entries(filepath)  # raw dicts in file order
		except FileNotFoundError:
			logger.error(f"[DataLoader] Movie data file not found: {filepath}")  # missing resource
			return []
		except (OSError, ValueError) as e:
			logger.error(f"[DataLoader] Failed to load movies from {filepath}: {e}")  # unreadable or not JSON
			return []

		movies: List[Movie] = []  # accumulator for parsed records
		seen_ids = set()  # enforce identifier uniqueness
		for position, data in enumerate(entries, 1):  # keep track of position for diagnostics
			try:
				movie = self._parse_movie_data(data)  # convert dict -> Movie
			except (KeyError, TypeError, ValueError) as e:
				logger.warning(f"[DataLoader] Skipping malformed movie at entry {position}: {e}")
				continue  # move on

			if movie.id <= 0:
				logger.warning(f"[DataLoader] Skipping movie '{movie.movie_name}' with non-positive id {movie.id}")
				continue
			if movie.id in seen_ids:
				logger.warning(f"[DataLoader] Skipping duplicate id {movie.id} ('{movie.movie_name}')")
				continue

			seen_ids.add(movie.id)
			movies.append(movie)  # collect

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def load_reviews(self, filepath: Union[str, Path]) -> List[Review]:
		"""Load reviews; like movies, a missing or broken file simply means no reviews."""
		filepath = Path(filepath)
		try:
			entries = self._read_entries(filepath)
		except FileNotFoundError:
			logger.info(f"[DataLoader] No reviews file at {filepath}")
			return []
		except (OSError, ValueError) as e:
			logger.error(f"[DataLoader] Failed to load reviews from {filepath}: {e}")
			return []

		reviews = []
		for position, data in enumerate(entries, 1):
			try:
				reviews.append(Review(
					movie_id=int(data['movieId']),
					user_name=str(data['userName']),
					rating=float(data['rating']),
					comment=str(data.get('comment', '')),
					avatar=data.get('avatar'),
				))
			except (KeyError, TypeError, ValueError) as e:
				logger.warning(f"[DataLoader] Skipping malformed review at entry {position}: {e}")
		logger.info(f"[DataLoader] Loaded {len(reviews)} reviews.")
		return reviews

	def _read_entries(self, filepath: Path) -> List[Dict[str, Any]]:
		"""
		Return the list of raw JSON objects stored in the file.
		A .jsonl file is read line by line; anything else must hold a JSON array.
		"""
		with open(filepath, 'r', encoding='utf-8') as f:
			if filepath.suffix == '.jsonl':
				return [json.loads(line) for line in f if line.strip()]  # one object per non-empty line
			content = json.load(f)

		if not isinstance(content, list):
			raise ValueError(f"expected a JSON array, got {type(content).__name__}")
		return content

	def _parse_movie_data(self, data: Dict[str, Any]) -> Movie:
		"""
		Convert a raw dictionary (from file) into a strongly-typed Movie object.
		Every field is required; a missing key raises KeyError.
		"""
		if not isinstance(data, dict):
			raise TypeError(f"entry is {type(data).__name__}, not an object")

		missing = [key for key in self.REQUIRED_FIELDS if key not in data]
		if missing:
			raise KeyError(f"missing fields {missing}")

		return Movie(
			id=int(data['id']),  # numeric identifier
			movie_name=str(data['movieName']),  # display name kept verbatim
			director=str(data['director']),
			year=int(data['year']),
			genre=str(data['genre']),
			description=str(data['description']),
			duration=int(data['duration']),  # minutes
			imdb_rating=float(data['imdbRating']),  # 0-10 score
		)

	def get_all_genres(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all unique genre labels in the dataset."""
		return sorted({movie.genre for movie in movies if movie.genre})

	def get_all_directors(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all unique director names in the dataset."""
		return sorted({movie.director for movie in movies if movie.director})
