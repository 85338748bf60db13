import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from movies_api.main import app
from movies_api.dependencies import get_movie_store
from movies_api.repositories.movie_store import MovieStore
from movies_api.schemas.movie import Movie

@pytest.fixture
def movie_payload():
    return {
        "title": "Spirited Away",
        "year": 2001,
        "director": "Hayao Miyazaki",
        "duration": 125,
        "poster": "https://image.tmdb.org/t/p/w500/39wmItIWsg5sZMyRUHLkWBcuVCM.jpg",
        "genre": ["Fantasy", "Adventure"],
        "rate": 8.6
    }

@pytest.fixture
def sample_movies():
    return [
        Movie(
            id="m_godfather",
            title="The Godfather",
            year=1972,
            director="Francis Ford Coppola",
            duration=175,
            poster="https://image.tmdb.org/t/p/w500/3bhkrj58Vtu7enYsRolD1fZdja1.jpg",
            genre=["Crime", "Drama"],
            rate=9.2,
        ),
        Movie(
            id="m_alien",
            title="Alien",
            year=1979,
            director="Ridley Scott",
            duration=117,
            poster="https://image.tmdb.org/t/p/w500/vfrQk5IPloGg1v9Rzbh2Eg3VGyM.jpg",
            genre=["Horror", "Sci-Fi"],
            rate=8.5,
        ),
    ]

@pytest.fixture
def movie_store(sample_movies):
    return MovieStore(sample_movies)

@pytest_asyncio.fixture
async def client(movie_store):
    app.dependency_overrides[get_movie_store] = lambda: movie_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}
