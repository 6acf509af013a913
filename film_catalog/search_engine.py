"""
Search engine module.
Filters the catalog by name, id, and genre and returns matches in catalog order.
"""

from typing import List, Optional  # type annotations for clarity

# Import project modules for data structures and storage
from .models import Movie, SearchCriteria  # core data classes
from .catalog_store import CatalogStore  # immutable movie collection

# Import loguru for console logging
from loguru import logger  # simple structured logger


class SearchEngine:
	"""
	Multi-criteria filter over a CatalogStore.
	Every supplied criterion must hold (AND); absent or blank criteria impose no constraint.
	Results keep catalog order and are never re-sorted.
	"""
	def __init__(self, catalog: CatalogStore):
		self.catalog = catalog  # read-only data source

	def is_valid_search(self, criteria: SearchCriteria) -> bool:
		"""True if at least one criterion is usable (non-blank name/genre or positive id)."""
		return criteria.has_name or criteria.has_id or criteria.has_genre

	def search(self, criteria: SearchCriteria) -> List[Movie]:
		"""
		Return all movies matching every supplied criterion.
		Callers are expected to check is_valid_search first; an all-empty
		criteria tuple matches the whole catalog.
		"""
		logger.info(
			f"[Search] Searching movies with criteria - name: {criteria.name}, id: {criteria.id}, genre: {criteria.genre}"
		)

		# Normalize the string criteria once instead of per movie
		name_needle = criteria.name.strip().lower() if criteria.has_name else None
		genre_needle = criteria.genre.strip().lower() if criteria.has_genre else None
		wanted_id = criteria.id if criteria.has_id else None

		results: List[Movie] = []  # accumulator
		for movie in self.catalog.load_all():  # catalog order
			# Name: partial, case-insensitive
			if name_needle is not None and name_needle not in movie.movie_name.lower():
				continue

			# Id: exact match
			if wanted_id is not None and movie.id != wanted_id:
				continue

			# Genre: partial, case-insensitive
			if genre_needle is not None and genre_needle not in movie.genre.lower():
				continue

			logger.debug(f"[Search] Candidate kept | movie={movie.movie_name} ({movie.id})")
			results.append(movie)  # collect

		logger.info(f"[Search] Found {len(results)} movies matching search criteria")  # summary
		return results

	def search_by_name(self, name: Optional[str]) -> List[Movie]:
		"""Name-only search; a blank name returns no movies without scanning the catalog."""
		if name is None or not name.strip():
			return []
		return self.search(SearchCriteria(name=name))

	def search_by_genre(self, genre: Optional[str]) -> List[Movie]:
		"""Genre-only search; a blank genre returns no movies without scanning the catalog."""
		if genre is None or not genre.strip():
			return []
		return self.search(SearchCriteria(genre=genre))

	def get_all_movies(self) -> List[Movie]:
		return list(self.catalog.load_all())

	def get_movie_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
		return self.catalog.get_by_id(movie_id)
