"""
Pirate language module.
Decides when pirate mode is active and rewrites text, movies, and status messages
into pirate vocabulary.

Rewriting is deterministic; only the greeting and ending phrases are picked at
random, through an injectable ``chooser`` so callers can pin them.
"""

import random  # phrase selection
import re  # whole-word, case-insensitive replacement
from dataclasses import replace  # copy a frozen Movie with new field values
from types import MappingProxyType  # read-only view over the vocabulary
from typing import Callable, Optional, Sequence, Tuple

from loguru import logger  # console logging

from .models import Movie

Chooser = Callable[[Sequence[str]], str]

# Canonical word -> pirate phrase, in the order the replacements are applied.
# Replacements run one after another over the same text, so a later entry can
# match words produced by an earlier one; the order is part of the behaviour.
PIRATE_TRANSLATIONS = MappingProxyType({
	'films': 'treasures',
	'movie': 'treasure',
	'year': 'year of sailing',
	'director': 'captain',
	'rating': "crew's approval",
	'description': 'tale',
	'back': 'return to ship',
	'film': 'treasure',
	'error': 'trouble on the high seas',
	'movies': 'treasures',
	'duration': 'length of voyage',
	'search': 'hunt',
	'view': 'examine',
	'found': 'discovered',
	'find': 'discover',
	'parameter': 'compass reading',
	'genre': 'type of adventure',
	'invalid': 'cursed',
	'details': 'treasure map',
	'no results': 'no treasure found',
	'not found': 'lost at sea',
	'results': 'bounty',
	'parameters': 'compass readings',
})

# Pre-compiled (pattern, replacement) pairs; \b on both sides keeps matches to whole words
_REPLACEMENTS: Tuple[Tuple[re.Pattern, str], ...] = tuple(
	(re.compile(r'\b' + re.escape(original) + r'\b', re.IGNORECASE), pirate)
	for original, pirate in PIRATE_TRANSLATIONS.items()
)

# Substrings in free text that switch pirate mode on
PIRATE_KEYWORDS = ('pirate', 'arrr', 'ahoy', 'treasure')

PIRATE_GREETINGS = (
	'Ahoy matey!',
	'Avast ye!',
	'Batten down the hatches!',
	'Shiver me timbers!',
)

PIRATE_ENDINGS = (
	'Arrr!',
	'Yo ho ho!',
	'Savvy?',
	'Aye aye, captain!',
)


def is_pirate_mode(pirate_param: Optional[str], search_text: Optional[str]) -> bool:
	"""
	Decide whether pirate mode is on.
	An explicit "true" (any case) or "1" wins outright; otherwise the search
	text is scanned for any pirate keyword (plain substring, any case).
	"""
	if pirate_param is not None:
		flag = str(pirate_param)
		if flag.lower() == 'true' or flag == '1':
			return True

	if search_text is not None:
		lower_text = search_text.lower()
		return any(keyword in lower_text for keyword in PIRATE_KEYWORDS)

	return False


def to_pirate_language(text: Optional[str]) -> Optional[str]:
	"""Replace every whole-word vocabulary term; None and blank text come back untouched."""
	if text is None or not text.strip():
		return text

	logger.debug(f"[Pirate] Converting text to pirate language: {text}")

	pirate_text = text
	for pattern, pirate in _REPLACEMENTS:
		# Callable replacement so apostrophes or backslashes are never read as group references
		pirate_text = pattern.sub(lambda _match, value=pirate: value, pirate_text)
	return pirate_text


def to_pirate_movie(movie: Optional[Movie]) -> Optional[Movie]:
	"""
	Return a pirate copy of a movie: director, genre, and description are rewritten,
	while the name, id, and numeric fields are kept as they are.
	"""
	if movie is None:
		return None

	return replace(
		movie,
		director=to_pirate_language(movie.director),
		genre=to_pirate_language(movie.genre),
		description=to_pirate_language(movie.description),
	)


def add_pirate_greeting(message: Optional[str], chooser: Chooser = random.choice) -> str:
	"""Prefix a greeting; blank messages always get the first greeting."""
	if message is None or not message.strip():
		return f"{PIRATE_GREETINGS[0]} {message or ''}"
	return f"{chooser(PIRATE_GREETINGS)} {message}"


def add_pirate_ending(message: Optional[str], chooser: Chooser = random.choice) -> str:
	"""Append an ending; blank messages always get the first ending."""
	if message is None or not message.strip():
		return f"{message or ''} {PIRATE_ENDINGS[0]}"
	return f"{message} {chooser(PIRATE_ENDINGS)}"


def create_pirate_search_message(count: int, search_criteria: str, chooser: Chooser = random.choice) -> str:
	"""Summarize a search outcome in pirate speak."""
	if count == 0:
		message = f"No treasure found with yer compass readings: {search_criteria}"
	elif count == 1:
		message = f"Found 1 treasure matching yer hunt: {search_criteria}"
	else:
		message = f"Discovered {count} treasures in yer bounty hunt: {search_criteria}"
	return add_pirate_ending(message, chooser=chooser)


def create_pirate_error_message(error: Optional[str], chooser: Chooser = random.choice) -> str:
	"""Greeting + "Trouble on the high seas!" + the error rewritten into pirate vocabulary."""
	return add_pirate_greeting(f"Trouble on the high seas! {to_pirate_language(error) or ''}".rstrip(), chooser=chooser)
