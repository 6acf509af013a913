"""
Tests for CatalogStore lookups and the lazily created shared catalog.
"""

from film_catalog import catalog_store, settings
from film_catalog.catalog_store import CatalogStore, get_catalog


def test_load_all_preserves_order(catalog, movies):
	assert list(catalog.load_all()) == movies
	assert len(catalog) == 4


def test_get_by_id(catalog):
	assert catalog.get_by_id(2).movie_name == "The Family Boss"
	assert catalog.get_by_id(99) is None
	assert catalog.get_by_id(0) is None
	assert catalog.get_by_id(-1) is None
	assert catalog.get_by_id(None) is None


def test_from_missing_file_is_empty(tmp_path):
	store = CatalogStore.from_file(tmp_path / "missing.json")
	assert len(store) == 0
	assert store.load_all() == ()


def test_shared_catalog_is_built_once(monkeypatch):
	monkeypatch.setattr(catalog_store, "_CATALOG", None)
	monkeypatch.setattr(settings, "MOVIES_PATH", settings.DATA_DIR / "movies.json")

	first = get_catalog()
	assert get_catalog() is first
	assert first.get_by_id(1).movie_name == "The Prison Escape"
