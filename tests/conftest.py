"""
Shared fixtures: a small in-memory catalog so tests never depend on data/movies.json.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from film_catalog.catalog_store import CatalogStore
from film_catalog.models import Movie
from film_catalog.search_engine import SearchEngine


SAMPLE_MOVIES = [
	Movie(1, "The Prison Escape", "John Director", 1994, "Drama", "Two men find hope in a prison movie", 142, 5.0),
	Movie(2, "The Family Boss", "Michael Filmmaker", 1972, "Crime/Drama", "A crime family saga", 175, 5.0),
	Movie(3, "Pirate Adventure", "Captain Hook", 2022, "Adventure", "A pirate tale", 110, 4.0),
	Movie(4, "Laugh Out Loud", "Nancy Filmmaker", 2015, "Comedy", "A comedian on the road", 98, 3.5),
]


@pytest.fixture
def movies():
	return list(SAMPLE_MOVIES)


@pytest.fixture
def catalog(movies):
	return CatalogStore(movies)


@pytest.fixture
def engine(catalog):
	return SearchEngine(catalog)


def first_choice(options):
	"""Deterministic stand-in for random.choice."""
	return options[0]
