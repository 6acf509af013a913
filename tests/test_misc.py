"""
Tests for the small helpers: movie icons, review grouping, and the catalog check script.
"""

from film_catalog import settings
from film_catalog.models import Review
from film_catalog.movie_icons import DEFAULT_ICON, get_movie_icon
from film_catalog.reviews import ReviewStore
from scripts.check_catalog import main as check_catalog


def test_movie_icons():
	assert get_movie_icon("Pirate's Treasure") == "🏴‍☠️"
	assert get_movie_icon("The Prison Escape") == "🔒"
	assert get_movie_icon("Laugh Out Loud") == DEFAULT_ICON
	assert get_movie_icon(None) == DEFAULT_ICON


def test_reviews_grouped_by_movie():
	store = ReviewStore([Review(1, "a", 4.0, "x"), Review(2, "b", 3.0, "y"), Review(1, "c", 5.0, "z")])
	assert [r.user_name for r in store.get_reviews_for_movie(1)] == ["a", "c"]
	assert store.get_reviews_for_movie(3) == []


def test_check_catalog_script(tmp_path):
	assert check_catalog([str(settings.DATA_DIR / "movies.json")]) == 0
	assert check_catalog([str(tmp_path / "missing.json")]) == 1
