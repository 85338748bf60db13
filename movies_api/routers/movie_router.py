import uuid
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from typing import Any, List, Optional

from ..dependencies import get_movie_store
from ..exceptions import MovieNotFoundException
from ..repositories.movie_store import MovieStore
from ..schemas.movie import FieldError, MessageResponse, Movie, ValidationErrorResponse
from ..services.validation import validate_create, validate_update

router = APIRouter(prefix="/movies", tags=["movies"])

def validation_error_response(errors: List[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ValidationErrorResponse(error=errors).model_dump(),
    )

@router.get("", response_model=List[Movie])
async def list_movies(
    genre: Optional[str] = None,
    store: MovieStore = Depends(get_movie_store)
):
    """
    List all movies, or only those tagged with `genre` (case-insensitive)
    """
    if genre:
        return store.list_by_genre(genre)
    return store.list()

@router.get("/{movie_id}", response_model=Movie, responses={404: {"model": MessageResponse}})
async def get_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)):
    movie = store.find_by_id(movie_id)
    if movie is None:
        raise MovieNotFoundException(movie_id)
    return movie

@router.post(
    "",
    response_model=Movie,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
)
async def create_movie(
    payload: Any = Body(...),
    store: MovieStore = Depends(get_movie_store)
):
    """
    Create a movie. The id is always generated here, never taken from the body.
    """
    result = validate_create(payload)
    if not result.success:
        return validation_error_response(result.errors)

    movie = Movie(id=str(uuid.uuid4()), **result.data.model_dump())
    return store.insert(movie)

@router.patch(
    "/{movie_id}",
    response_model=Movie,
    responses={400: {"model": ValidationErrorResponse}, 404: {"model": MessageResponse}},
)
async def update_movie(
    movie_id: str,
    payload: Any = Body(...),
    store: MovieStore = Depends(get_movie_store)
):
    """
    Merge the supplied fields over the stored movie
    """
    result = validate_update(payload)
    if not result.success:
        return validation_error_response(result.errors)

    movie = store.update_by_id(movie_id, result.data)
    if movie is None:
        raise MovieNotFoundException(movie_id)
    return movie

@router.delete("/{movie_id}", response_model=MessageResponse, responses={404: {"model": MessageResponse}})
async def delete_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)):
    if not store.delete_by_id(movie_id):
        raise MovieNotFoundException(movie_id)
    return {"message": "Movie deleted"}
