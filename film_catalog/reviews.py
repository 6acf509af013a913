"""
Review store.
Groups reviews by movie id for the details views.
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Union

from loguru import logger

from .data_loader import DataLoader
from .models import Review


class ReviewStore:
	"""Read-only reviews grouped by movie id, in file order."""

	def __init__(self, reviews: Iterable[Review]):
		grouped: Dict[int, List[Review]] = defaultdict(list)
		for review in reviews:
			grouped[review.movie_id].append(review)
		self._reviews_by_movie = dict(grouped)
		logger.debug(f"[Reviews] Store ready for {len(self._reviews_by_movie)} movies")

	@classmethod
	def from_file(cls, filepath: Union[str, Path]) -> 'ReviewStore':
		return cls(DataLoader().load_reviews(filepath))

	def get_reviews_for_movie(self, movie_id: int) -> List[Review]:
		return list(self._reviews_by_movie.get(movie_id, []))
