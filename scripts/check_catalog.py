"""
Validate the movie data file and print a short summary.

This script:
1) Loads movies from the configured data file
2) Reports genres, directors, and the year range
3) Exits non-zero when the catalog is empty

Usage:
    python -m scripts.check_catalog [path/to/movies.json]
"""

import sys  # argv and exit code

from loguru import logger  # console logging

from film_catalog import settings  # default data path
from film_catalog.data_loader import DataLoader  # data ingestion
from film_catalog.logging_setup import configure_logging  # console sink


def main(argv=None) -> int:
	configure_logging()
	argv = sys.argv[1:] if argv is None else argv
	data_path = argv[0] if argv else settings.MOVIES_PATH

	# Headline banner for visibility in console
	logger.info("=" * 60)
	logger.info("Catalog check")
	logger.info("=" * 60)

	loader = DataLoader()
	movies = loader.load_movies(data_path)
	if not movies:
		logger.error(f"[Check] No movies loaded from {data_path}")
		return 1

	years = [m.year for m in movies]
	logger.info(f"[OK] {len(movies)} movies, years {min(years)}-{max(years)}")
	logger.info(f"[OK] Genres: {', '.join(loader.get_all_genres(movies))}")
	logger.info(f"[OK] Directors: {len(loader.get_all_directors(movies))}")
	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())
