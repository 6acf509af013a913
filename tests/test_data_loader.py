"""
Tests for DataLoader: parsing, duplicate ids, and soft failure on bad files.
"""

import json

from film_catalog import settings
from film_catalog.data_loader import DataLoader


def _entry(movie_id, name="Some Movie"):
	return {
		"id": movie_id, "movieName": name, "director": "Someone", "year": 2000,
		"genre": "Drama", "description": "Text", "duration": 100, "imdbRating": 4.5,
	}


def test_loads_bundled_catalog():
	movies = DataLoader().load_movies(settings.DATA_DIR / "movies.json")
	assert len(movies) >= 10
	assert movies[0].movie_name == "The Prison Escape"
	assert len({m.id for m in movies}) == len(movies)


def test_parses_all_fields(tmp_path):
	path = tmp_path / "movies.json"
	path.write_text(json.dumps([_entry(7, "Dream Heist")]), encoding="utf-8")

	movie = DataLoader().load_movies(path)[0]
	assert movie.id == 7
	assert movie.movie_name == "Dream Heist"
	assert movie.duration == 100
	assert movie.imdb_rating == 4.5


def test_duplicate_ids_keep_first(tmp_path):
	path = tmp_path / "movies.json"
	path.write_text(json.dumps([_entry(1, "First"), _entry(2), _entry(1, "Second")]), encoding="utf-8")

	movies = DataLoader().load_movies(path)
	assert [m.id for m in movies] == [1, 2]
	assert movies[0].movie_name == "First"


def test_skips_malformed_and_non_positive_entries(tmp_path):
	broken = _entry(3)
	del broken["genre"]
	path = tmp_path / "movies.json"
	path.write_text(json.dumps([_entry(0), broken, "not an object", _entry(4)]), encoding="utf-8")

	assert [m.id for m in DataLoader().load_movies(path)] == [4]


def test_jsonl_is_accepted(tmp_path):
	path = tmp_path / "movies.jsonl"
	path.write_text("\n".join(json.dumps(_entry(i)) for i in (5, 6)) + "\n\n", encoding="utf-8")

	assert [m.id for m in DataLoader().load_movies(path)] == [5, 6]


def test_missing_file_yields_empty_list(tmp_path):
	assert DataLoader().load_movies(tmp_path / "nope.json") == []


def test_malformed_file_yields_empty_list(tmp_path):
	path = tmp_path / "movies.json"
	path.write_text("{not json", encoding="utf-8")
	assert DataLoader().load_movies(path) == []

	path.write_text(json.dumps({"id": 1}), encoding="utf-8")  # object instead of array
	assert DataLoader().load_movies(path) == []


def test_reviews_load_and_missing_file(tmp_path):
	path = tmp_path / "reviews.json"
	path.write_text(json.dumps([
		{"movieId": 1, "userName": "Ann", "rating": 4.0, "comment": "Nice"},
		{"movieId": "x", "userName": "Bad", "rating": 1.0},
	]), encoding="utf-8")

	reviews = DataLoader().load_reviews(path)
	assert len(reviews) == 1
	assert reviews[0].user_name == "Ann"
	assert DataLoader().load_reviews(tmp_path / "missing.json") == []
