"""
Tests for SearchEngine: validation, substring matching, and order preservation.
"""

import pytest

from film_catalog.models import SearchCriteria


@pytest.mark.parametrize("criteria", [
	SearchCriteria(),
	SearchCriteria(name="", genre="   "),
	SearchCriteria(id=0),
	SearchCriteria(id=-3),
])
def test_empty_criteria_are_invalid_but_match_everything(engine, movies, criteria):
	assert engine.is_valid_search(criteria) is False
	assert engine.search(criteria) == movies


@pytest.mark.parametrize("criteria", [
	SearchCriteria(name="x"),
	SearchCriteria(id=1),
	SearchCriteria(genre="drama"),
])
def test_any_usable_field_is_valid(engine, criteria):
	assert engine.is_valid_search(criteria) is True


def test_name_is_trimmed_and_case_insensitive(engine):
	for name in ("Prison", "  Prison  ", "prison", "PRISON ESC"):
		results = engine.search(SearchCriteria(name=name))
		assert [m.id for m in results] == [1]


def test_every_name_substring_matches(engine, movies):
	target = movies[1]
	for start in range(len(target.movie_name)):
		needle = target.movie_name[start:start + 3]
		if needle.strip():
			assert target in engine.search(SearchCriteria(name=needle.swapcase()))


def test_genre_substring_keeps_catalog_order(engine):
	assert [m.id for m in engine.search(SearchCriteria(genre="drama"))] == [1, 2]


def test_id_is_exact(engine):
	assert [m.id for m in engine.search(SearchCriteria(id=3))] == [3]
	assert engine.search(SearchCriteria(id=42)) == []


def test_criteria_are_combined_with_and(engine):
	assert [m.id for m in engine.search(SearchCriteria(name="the", genre="crime"))] == [2]
	assert engine.search(SearchCriteria(name="Prison", id=2)) == []


def test_non_positive_id_is_ignored(engine):
	assert [m.id for m in engine.search(SearchCriteria(name="family", id=0))] == [2]


def test_no_match_returns_empty_list(engine):
	assert engine.search(SearchCriteria(name="NonExistent")) == []


def test_single_field_helpers_short_circuit(engine, monkeypatch):
	def fail(*args, **kwargs):
		raise AssertionError("catalog should not be scanned")

	monkeypatch.setattr(engine.catalog, "load_all", fail)
	assert engine.search_by_name(None) == []
	assert engine.search_by_name("  ") == []
	assert engine.search_by_genre("") == []
	assert engine.search_by_genre(None) == []


def test_single_field_helpers_delegate(engine):
	assert [m.id for m in engine.search_by_name("pirate")] == [3]
	assert [m.id for m in engine.search_by_genre("COMEDY")] == [4]


def test_describe_lists_supplied_fields_only():
	assert SearchCriteria(name="Prison", id=2, genre="Drama").describe() == "name: Prison, id: 2, genre: Drama"
	assert SearchCriteria(genre="Comedy", id=0).describe() == "genre: Comedy"
	assert SearchCriteria(name="  ").describe() == ""
