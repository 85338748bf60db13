from .config import settings
from .repositories.movie_store import MovieStore
from .seed_data import load_seed_movies

# Process-wide state, (re)built on startup
class AppState:
    movie_store: MovieStore = MovieStore()

state = AppState()

def init_resources():
    """Initialize the movie store"""
    movies = load_seed_movies() if settings.SEED_MOVIES else []
    state.movie_store = MovieStore(movies)

def close_resources():
    """Drop all in-memory movies"""
    state.movie_store = MovieStore()

# Dependencies
async def get_movie_store() -> MovieStore:
    return state.movie_store
