"""
FastAPI server exposing the film catalog.
Endpoints:
- GET /health: basic health check
- GET /movies: HTML list of the whole catalog
- GET /movies/search?name=&id=&genre=&pirate=: JSON search results
- GET /movies/search/form?name=&id=&genre=&pirate=: HTML search results
- GET /movies/{id}/details: HTML details page with reviews
- GET /api/movies/{id}: JSON lookup of one movie with its icon and reviews

Startup loads the catalog and reviews once; they are read-only afterwards.
"""

# Import standard libraries for timing
import time  # measure startup latency
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, Query, Request  # FastAPI primitives
from fastapi.responses import HTMLResponse, JSONResponse  # explicit response types
from fastapi.templating import Jinja2Templates  # HTML pages
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for data loading and search
from film_catalog import settings  # paths and log level
from film_catalog.catalog_store import get_catalog  # shared read-only catalog
from film_catalog.logging_setup import configure_logging  # console sink setup
from film_catalog.models import Movie, SearchCriteria  # records and criteria
from film_catalog.movie_icons import get_movie_icon  # decorative icon per movie
from film_catalog.pirate_language import is_pirate_mode  # mode detection for failures
from film_catalog.reviews import ReviewStore  # reviews per movie
from film_catalog.search_engine import SearchEngine  # multi-criteria filter
from film_catalog.search_service import (
	API_STYLE,
	PAGE_STYLE,
	SEARCH_FAILED_MESSAGES,
	error_message,
	run_search,
)

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Film Catalog API", version="1.0.0")  # web app
templates = Jinja2Templates(directory=str(settings.TEMPLATES_DIR))  # page templates

# Globals that hold the search engine, reviews, and measured startup time
ENGINE: Optional[SearchEngine] = None  # will point to the initialized engine
REVIEWS: Optional[ReviewStore] = None  # reviews grouped per movie
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	id: int  # unique id
	movieName: str  # display name
	director: str  # director (pirate-translated in pirate mode)
	year: int  # release year
	genre: str  # genre label
	description: str  # synopsis
	duration: int  # minutes
	imdbRating: float  # 0-10 score


class ReviewOut(BaseModel):
	userName: str
	rating: float
	comment: str
	avatar: Optional[str] = None


# Pydantic model for a successful search payload
class SearchResponse(BaseModel):
	success: bool  # always True here
	message: str  # human-readable summary (pirate or plain)
	count: int  # number of movies returned
	movies: List[MovieOut]  # matches in catalog order
	pirateMode: bool  # whether pirate vocabulary was applied


# Pydantic model for a failed request
class ErrorResponse(BaseModel):
	success: bool = False
	error: str


class MovieLookupResponse(BaseModel):
	movie: MovieOut
	icon: str
	reviews: List[ReviewOut]


def _movie_out(movie: Movie) -> MovieOut:
	return MovieOut(**movie.to_dict())


def get_engine() -> SearchEngine:
	"""Return the search engine, building it from the shared catalog on first use."""
	global ENGINE
	if ENGINE is None:
		ENGINE = SearchEngine(get_catalog())
	return ENGINE


def get_reviews() -> ReviewStore:
	global REVIEWS
	if REVIEWS is None:
		REVIEWS = ReviewStore.from_file(settings.REVIEWS_PATH)
	return REVIEWS


# FastAPI startup hook to initialize the catalog once
@app.on_event("startup")
async def startup_event():
	"""Load catalog and reviews and log how long it took."""
	global STARTUP_TIME_S  # refer to module-level global
	configure_logging()  # single console sink
	start = time.time()  # start timer for startup latency

	logger.info("[API] Startup: loading catalog and reviews...")  # log intent
	engine = get_engine()
	get_reviews()

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(engine.catalog)} movies.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"movie_count": len(ENGINE.catalog) if ENGINE is not None else 0,  # catalog size
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/movies", response_class=HTMLResponse)
async def list_movies(request: Request):
	"""Render the full catalog."""
	logger.info("[API] Fetching movies")
	return templates.TemplateResponse(request, "movies.html", {
		"movies": get_engine().get_all_movies(),
		"pirate_mode": False,
	})


# JSON search endpoint
@app.get("/movies/search", response_model=SearchResponse, responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def search_movies_api(
	name: Optional[str] = Query(None, description="Partial movie name, case-insensitive"),
	id: Optional[int] = Query(None, description="Exact movie id"),
	genre: Optional[str] = Query(None, description="Partial genre, case-insensitive"),
	pirate: Optional[str] = Query(None, description="'true' or '1' to enable pirate mode"),
):
	"""Search by any combination of name, id, and genre."""
	logger.info(f"[API] Search request - name: {name}, id: {id}, genre: {genre}, pirate: {pirate}")

	try:
		outcome = run_search(get_engine(), SearchCriteria(name=name, id=id, genre=genre), pirate, style=API_STYLE)
	except Exception as e:
		logger.exception(f"[API] Error during movie search: {e}")
		message = error_message(SEARCH_FAILED_MESSAGES[API_STYLE], is_pirate_mode(pirate, name))
		return JSONResponse(status_code=500, content=ErrorResponse(error=message).model_dump())

	if not outcome.success:
		return JSONResponse(status_code=400, content=ErrorResponse(error=outcome.error).model_dump())

	return SearchResponse(**outcome.to_payload())


# HTML search endpoint
@app.get("/movies/search/form", response_class=HTMLResponse)
async def search_movies_form(
	request: Request,
	name: Optional[str] = None,
	id: Optional[int] = None,
	genre: Optional[str] = None,
	pirate: Optional[str] = None,
):
	"""Render search results; invalid input falls back to the whole catalog with an error banner."""
	logger.info(f"[API] Form search request - name: {name}, id: {id}, genre: {genre}, pirate: {pirate}")
	engine = get_engine()

	try:
		outcome = run_search(engine, SearchCriteria(name=name, id=id, genre=genre), pirate, style=PAGE_STYLE)
	except Exception as e:
		logger.exception(f"[API] Error during form movie search: {e}")
		pirate_mode = is_pirate_mode(pirate, name)
		return templates.TemplateResponse(request, "movies.html", {
			"error": error_message(SEARCH_FAILED_MESSAGES[PAGE_STYLE], pirate_mode),
			"movies": engine.get_all_movies(),
			"pirate_mode": pirate_mode,
		})

	if not outcome.success:
		return templates.TemplateResponse(request, "movies.html", {
			"error": outcome.error,
			"movies": engine.get_all_movies(),
			"pirate_mode": outcome.pirate_mode,
		})

	return templates.TemplateResponse(request, "movies.html", {
		"movies": outcome.movies,
		"search_message": outcome.message,
		"is_search_result": True,
		"pirate_mode": outcome.pirate_mode,
		"search_criteria": outcome.search_criteria,
	})


@app.get("/movies/{movie_id}/details", response_class=HTMLResponse)
async def movie_details(request: Request, movie_id: int):
	"""Render one movie with its icon and reviews, or a not-found page."""
	logger.info(f"[API] Fetching details for movie ID: {movie_id}")
	movie = get_engine().get_movie_by_id(movie_id)
	if movie is None:
		logger.warning(f"[API] Movie with ID {movie_id} not found")
		return templates.TemplateResponse(request, "error.html", {
			"title": "Movie Not Found",
			"message": f"Movie with ID {movie_id} was not found.",
		}, status_code=404)

	return templates.TemplateResponse(request, "movie-details.html", {
		"movie": movie,
		"movie_icon": get_movie_icon(movie.movie_name),
		"all_reviews": get_reviews().get_reviews_for_movie(movie.id),
	})


@app.get("/api/movies/{movie_id}", response_model=MovieLookupResponse, responses={404: {"model": ErrorResponse}})
async def lookup_movie(movie_id: int):
	"""JSON variant of the details page."""
	movie = get_engine().get_movie_by_id(movie_id)
	if movie is None:
		logger.warning(f"[API] Lookup miss for movie ID {movie_id}")
		return JSONResponse(status_code=404, content=ErrorResponse(error=f"Movie with ID {movie_id} was not found.").model_dump())

	reviews = [
		ReviewOut(userName=r.user_name, rating=r.rating, comment=r.comment, avatar=r.avatar)
		for r in get_reviews().get_reviews_for_movie(movie.id)
	]
	return MovieLookupResponse(movie=_movie_out(movie), icon=get_movie_icon(movie.movie_name), reviews=reviews)
