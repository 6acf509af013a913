"""
Search service.
Glues the search engine and the pirate language module together for the two
response shapes served by the API: the JSON payload and the HTML page.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger

from .models import Movie, SearchCriteria
from .pirate_language import (
	Chooser,
	create_pirate_error_message,
	create_pirate_search_message,
	is_pirate_mode,
	to_pirate_movie,
)
from .search_engine import SearchEngine

# Wording differs slightly between the JSON API and the HTML form
API_STYLE = 'api'
PAGE_STYLE = 'page'

INVALID_SEARCH_MESSAGES = {
	API_STYLE: "At least one search parameter (name, id, or genre) must be provided",
	PAGE_STYLE: "Please provide at least one search criterion (name, ID, or genre)",
}

SEARCH_FAILED_MESSAGES = {
	API_STYLE: "An error occurred while searching for movies",
	PAGE_STYLE: "An error occurred while searching for movies. Please try again.",
}

_NO_MATCH_TEMPLATES = {
	API_STYLE: "No movies found matching the search criteria: {criteria}",
	PAGE_STYLE: "No movies found matching your search criteria: {criteria}",
}


@dataclass
class SearchOutcome:
	"""Everything a presentation layer needs to render one search request."""
	success: bool
	pirate_mode: bool
	movies: List[Movie] = field(default_factory=list)
	message: Optional[str] = None  # summary shown on success
	error: Optional[str] = None  # set when the request was rejected or failed
	search_criteria: str = ''  # e.g. "name: Prison, genre: Drama"

	@property
	def count(self) -> int:
		return len(self.movies)

	def to_payload(self) -> Dict[str, Any]:
		"""JSON body for the search API."""
		if not self.success:
			return {'success': False, 'error': self.error}
		return {
			'success': True,
			'message': self.message,
			'count': self.count,
			'movies': [movie.to_dict() for movie in self.movies],
			'pirateMode': self.pirate_mode,
		}


def plain_search_message(count: int, search_criteria: str, style: str = API_STYLE) -> str:
	"""Plain-language summary, no pirate vocabulary and no random phrases."""
	if count == 0:
		return _NO_MATCH_TEMPLATES[style].format(criteria=search_criteria)
	return f"Found {count} movie(s) matching: {search_criteria}"


def error_message(error: str, pirate_mode: bool, chooser: Chooser = random.choice) -> str:
	"""Return the error as-is, or its pirate version when pirate mode is on."""
	if pirate_mode:
		return create_pirate_error_message(error, chooser=chooser)
	return error


def run_search(
	engine: SearchEngine,
	criteria: SearchCriteria,
	pirate_param: Optional[str] = None,
	style: str = API_STYLE,
	chooser: Chooser = random.choice,
) -> SearchOutcome:
	"""
	Validate, search, and (in pirate mode) translate the results.
	Invalid criteria produce an unsuccessful outcome instead of an exception.
	"""
	pirate_mode = is_pirate_mode(pirate_param, criteria.name)  # the name doubles as the keyword probe

	if not engine.is_valid_search(criteria):
		logger.info(f"[Search] Rejected search without usable criteria (pirate={pirate_mode})")
		return SearchOutcome(
			success=False,
			pirate_mode=pirate_mode,
			error=error_message(INVALID_SEARCH_MESSAGES[style], pirate_mode, chooser=chooser),
		)

	movies = engine.search(criteria)
	if pirate_mode:
		movies = [to_pirate_movie(movie) for movie in movies]

	search_criteria = criteria.describe()
	if pirate_mode:
		message = create_pirate_search_message(len(movies), search_criteria, chooser=chooser)
	else:
		message = plain_search_message(len(movies), search_criteria, style=style)

	return SearchOutcome(
		success=True,
		pirate_mode=pirate_mode,
		movies=movies,
		message=message,
		search_criteria=search_criteria,
	)
