import logging
from typing import List

from .schemas.movie import Movie

logger = logging.getLogger(__name__)

# Initial catalogue loaded into the store at startup
MOVIES = [
    {
        "id": "dcdd0fad-a94c-4810-8acc-5f108d3b18c3",
        "title": "The Shawshank Redemption",
        "year": 1994,
        "director": "Frank Darabont",
        "duration": 142,
        "poster": "https://i.ebayimg.com/images/g/4goAAOSwMyBe7hnQ/s-l1200.webp",
        "genre": ["Drama"],
        "rate": 9.3
    },
    {
        "id": "c8a7d63f-3b04-44d3-9d95-8782fd7dcfaf",
        "title": "The Dark Knight",
        "year": 2008,
        "director": "Christopher Nolan",
        "duration": 152,
        "poster": "https://image.tmdb.org/t/p/w500/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
        "genre": ["Action", "Crime", "Drama"],
        "rate": 9.0
    },
    {
        "id": "5ad1a235-0d9c-410a-b32b-220d91689a08",
        "title": "Inception",
        "year": 2010,
        "director": "Christopher Nolan",
        "duration": 148,
        "poster": "https://image.tmdb.org/t/p/w500/9gk7admal4zlWH9O46ggyEBDs5e.jpg",
        "genre": ["Action", "Adventure", "Sci-Fi"],
        "rate": 8.8
    },
    {
        "id": "241bf55d-b649-4109-af7c-0e6890ded3fc",
        "title": "Pulp Fiction",
        "year": 1994,
        "director": "Quentin Tarantino",
        "duration": 154,
        "poster": "https://www.themoviedb.org/t/p/original/vQWk5YBFWF4bZaofAbv0tShwBvQ.jpg",
        "genre": ["Crime", "Drama"],
        "rate": 8.9
    },
    {
        "id": "9e6106f0-848b-4810-a11a-3d832a5610f9",
        "title": "Forrest Gump",
        "year": 1994,
        "director": "Robert Zemeckis",
        "duration": 142,
        "poster": "https://i.ebayimg.com/images/g/qR8AAOSwkvRZzuMD/s-l1600.jpg",
        "genre": ["Drama", "Comedy"],
        "rate": 8.8
    },
    {
        "id": "6a360a18-c645-4b47-9a7b-2a71babbf3e0",
        "title": "The Matrix",
        "year": 1999,
        "director": "Lana Wachowski",
        "duration": 136,
        "poster": "https://image.tmdb.org/t/p/w500/f89U3ADr1oiB1s9GkdPOEpQZw5.jpg",
        "genre": ["Action", "Sci-Fi"],
        "rate": 8.7
    },
    {
        "id": "04986507-b3ed-442c-8ae7-4c5df804f896",
        "title": "The Lord of the Rings: The Fellowship of the Ring",
        "year": 2001,
        "director": "Peter Jackson",
        "duration": 178,
        "poster": "https://image.tmdb.org/t/p/w500/6oom5QYQ2yQTMJIbnvbkBL9cHo6.jpg",
        "genre": ["Action", "Adventure", "Fantasy"],
        "rate": 8.8
    },
    {
        "id": "7e3fd5ab-60ff-4ae2-92b6-9597f0308d1b",
        "title": "The Silence of the Lambs",
        "year": 1991,
        "director": "Jonathan Demme",
        "duration": 118,
        "poster": "https://image.tmdb.org/t/p/w500/uS9m8OBk1A8eM9I042bx8XXpqAq.jpg",
        "genre": ["Crime", "Horror", "Thriller"],
        "rate": 8.6
    },
]

def load_seed_movies() -> List[Movie]:
    movies = [Movie.model_validate(m) for m in MOVIES]
    logger.info(f"Loaded {len(movies)} seed movies")
    return movies
