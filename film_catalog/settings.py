"""
Runtime configuration.
Values come from environment variables (a local .env file is honoured) with sensible defaults.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
TEMPLATES_DIR = BASE_DIR / "templates"

MOVIES_PATH = Path(os.getenv("FILM_CATALOG_DATA_PATH", DATA_DIR / "movies.json"))
REVIEWS_PATH = Path(os.getenv("FILM_CATALOG_REVIEWS_PATH", DATA_DIR / "reviews.json"))

LOG_LEVEL = os.getenv("FILM_CATALOG_LOG_LEVEL", "INFO").upper()

API_URL = os.getenv("FILM_CATALOG_API_URL", "http://localhost:8000")
