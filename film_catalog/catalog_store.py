"""
Catalog store module.
Holds the immutable list of movies plus an id index for direct lookup.
"""

import threading  # guards the one-time lazy initialisation
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union

from loguru import logger  # console logger

from . import settings
from .data_loader import DataLoader
from .models import Movie


class CatalogStore:
	"""
	Read-only collection of movies in file order, indexed by id.
	Never mutated after construction, so concurrent readers need no locking.
	"""

	def __init__(self, movies: Iterable[Movie]):
		self._movies: Tuple[Movie, ...] = tuple(movies)  # frozen ordered sequence
		self._movies_by_id: Dict[int, Movie] = {}  # id -> Movie for O(1) lookup
		for movie in self._movies:
			# First occurrence wins, matching the loader's duplicate rule
			self._movies_by_id.setdefault(movie.id, movie)
		logger.debug(f"[Catalog] Store ready with {len(self._movies)} movies")

	@classmethod
	def from_file(cls, filepath: Union[str, Path]) -> 'CatalogStore':
		"""Build a store from a data file; a broken file gives an empty store."""
		return cls(DataLoader().load_movies(filepath))

	def load_all(self) -> Tuple[Movie, ...]:
		"""Return every movie in catalog order."""
		return self._movies

	def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
		"""Return the movie with this id, or None for absent, non-positive, or unknown ids."""
		if movie_id is None or movie_id <= 0:
			return None
		return self._movies_by_id.get(movie_id)

	def __len__(self) -> int:
		return len(self._movies)


# Process-wide catalog, created on first use and kept for the process lifetime
_CATALOG: Optional[CatalogStore] = None
_CATALOG_LOCK = threading.Lock()


def get_catalog() -> CatalogStore:
	"""Return the shared catalog, loading it from the configured data file on first call."""
	global _CATALOG
	if _CATALOG is None:
		with _CATALOG_LOCK:
			if _CATALOG is None:  # another thread may have won the race
				logger.info(f"[Catalog] Initialising shared catalog from {settings.MOVIES_PATH}")
				_CATALOG = CatalogStore.from_file(settings.MOVIES_PATH)
	return _CATALOG
