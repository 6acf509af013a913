"""
Streamlit UI for the Film Catalog.
Calls the local FastAPI server at http://localhost:8000 to fetch search results,
or runs the search locally against data/movies.json like the API does.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from film_catalog import settings  # default API URL
from film_catalog.catalog_store import get_catalog  # shared catalog
from film_catalog.models import SearchCriteria  # criteria triple
from film_catalog.search_engine import SearchEngine  # filtering
from film_catalog.search_service import run_search  # validation + pirate rendering

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Film Catalog", layout="wide")  # wide layout

# Main page title
st.title("🎬 Film Catalog")  # friendly header

# Cache the local engine so we only load the catalog once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> Optional[SearchEngine]:
	"""Create a local SearchEngine over the shared catalog."""
	engine = SearchEngine(get_catalog())
	if len(engine.catalog) == 0:
		st.error("Local catalog is empty; check the movie data file.")  # loader logged the cause
		return None
	return engine

# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	api_url = st.text_input("API URL", settings.API_URL)  # where the API lives
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app will run fully locally.")
	pirate = st.toggle("Pirate mode 🏴‍☠️", value=False)  # explicit pirate flag

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # probe failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

# Initialize local engine only when needed (user toggle or API not available)
local_engine: Optional[SearchEngine] = None  # placeholder
if use_local or not api_available:
	local_engine = init_local_engine()
	if local_engine is not None:
		st.sidebar.success("Local engine ready.")  # success note
	else:
		st.sidebar.error("Local engine failed to initialize.")  # error note

# Search inputs; every field is optional but at least one is required
col_name, col_id, col_genre = st.columns([3, 1, 2])
with col_name:
	name = st.text_input("Name", placeholder="e.g., Prison")
with col_id:
	movie_id = st.number_input("ID", min_value=0, step=1, value=0)
with col_genre:
	genre = st.text_input("Genre", placeholder="e.g., Drama")

search_btn = st.button("Search", type="primary")  # triggers a search

if search_btn:
	with st.spinner("Searching..."):
		try:
			if local_engine is not None:
				# Local mode: run the full pipeline inside this process
				criteria = SearchCriteria(name=name or None, id=int(movie_id) or None, genre=genre or None)
				outcome = run_search(local_engine, criteria, "true" if pirate else None)
				payload = outcome.to_payload()
			else:
				# API mode: send only the fields the user filled in
				params = {"name": name or None, "id": int(movie_id) or None, "genre": genre or None, "pirate": "true" if pirate else None}
				resp = requests.get(f"{api_url}/movies/search", params={k: v for k, v in params.items() if v is not None}, timeout=30)
				payload = resp.json()  # 400 responses carry an error body too

			if not payload.get("success"):
				st.error(payload.get("error", "Search failed"))
			else:
				st.success(payload["message"])
				st.divider()  # visual separator

				# Render each movie as a text card
				for movie in payload.get("movies", []):
					st.subheader(f"{movie['movieName']} ({movie['year']})")  # title + year
					st.caption(f"ID {movie['id']} | {movie['duration']} min | Rating {movie['imdbRating']}")
					st.write(f"Director: {movie['director']}")
					st.write(f"Genre: {movie['genre']}")
					st.write(movie['description'])
					st.divider()  # separator

		except requests.RequestException as e:  # network/API errors
			st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label
