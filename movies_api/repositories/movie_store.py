import logging
import threading
from typing import Any, Dict, Iterable, List, Optional

from ..exceptions import MovieConflictError
from ..schemas.movie import Movie

logger = logging.getLogger(__name__)

class MovieStore:
    """
    In-memory, insertion-ordered collection of movies.

    Every operation holds the same lock, so readers never observe a
    half-applied mutation even when handlers run on worker threads.
    Stored movies are frozen models; updates replace the stored instance.
    """
    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._lock = threading.Lock()
        self._movies: List[Movie] = []
        for movie in movies or ():
            self.insert(movie)

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def list(self) -> List[Movie]:
        with self._lock:
            return list(self._movies)

    def list_by_genre(self, genre: str) -> List[Movie]:
        """Case-insensitive exact match against any of a movie's genres"""
        wanted = genre.lower()
        with self._lock:
            return [
                movie for movie in self._movies
                if any(g.lower() == wanted for g in movie.genre)
            ]

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            index = self._index_of(movie_id)
            return self._movies[index] if index is not None else None

    def insert(self, movie: Movie) -> Movie:
        with self._lock:
            if self._index_of(movie.id) is not None:
                raise MovieConflictError(movie.id)
            self._movies.append(movie)
        logger.info("Movie created", extra={"movie_id": movie.id})
        return movie

    def update_by_id(self, movie_id: str, fields: Dict[str, Any]) -> Optional[Movie]:
        changes = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return None
            # Re-validate so merged records keep the stored field types
            updated = Movie.model_validate({**self._movies[index].model_dump(), **changes})
            self._movies[index] = updated
        logger.info("Movie updated", extra={"movie_id": movie_id})
        return updated

    def delete_by_id(self, movie_id: str) -> bool:
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return False
            del self._movies[index]
        logger.info("Movie deleted", extra={"movie_id": movie_id})
        return True

    def _index_of(self, movie_id: str) -> Optional[int]:
        # Caller must hold the lock
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None
