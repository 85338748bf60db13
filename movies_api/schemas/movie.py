from datetime import date
from typing import Annotated, List, Literal, get_args

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

Genre = Literal[
    "Action",
    "Adventure",
    "Crime",
    "Comedy",
    "Drama",
    "Fantasy",
    "Horror",
    "Thriller",
    "Sci-Fi",
]
GENRES = get_args(Genre)

MIN_YEAR = 1900

_url_adapter = TypeAdapter(AnyUrl)


def check_not_future(year: int) -> int:
    current_year = date.today().year
    if year > current_year:
        raise ValueError(f"Year must not be after {current_year}")
    return year


def check_url(value: str) -> str:
    """Accept any absolute URL but keep the caller's spelling of it."""
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Poster must be a valid URL") from None
    return value


Title = Annotated[str, Field(min_length=1)]
Year = Annotated[int, Field(ge=MIN_YEAR), AfterValidator(check_not_future)]
Director = Annotated[str, Field(min_length=1)]
Duration = Annotated[int, Field(gt=0)]
Poster = Annotated[str, AfterValidator(check_url)]
Genres = Annotated[List[Genre], Field(min_length=1)]
Rate = Annotated[float, Field(ge=0, le=10)]


class MovieCreate(BaseModel):
    """Body of POST /movies"""
    model_config = ConfigDict(strict=True, extra="forbid")

    title: Title
    year: Year
    director: Director
    duration: Duration
    poster: Poster
    genre: Genres
    rate: Rate = 0


class MovieUpdate(BaseModel):
    """Body of PATCH /movies/{id}.

    Defaults are not validated, so an omitted field stays None and is left
    out of the patch, while an explicit null fails its type check.
    """
    model_config = ConfigDict(strict=True, extra="forbid")

    title: Title = None
    year: Year = None
    director: Director = None
    duration: Duration = None
    poster: Poster = None
    genre: Genres = None
    rate: Rate = None


class Movie(BaseModel):
    """Stored movie record"""
    model_config = ConfigDict(frozen=True)

    id: str
    title: Title
    year: Year
    director: Director
    duration: Duration
    poster: Poster
    genre: Genres
    rate: Rate = 0


class FieldError(BaseModel):
    """Single violated constraint"""
    field: str
    issue: str


class ValidationErrorResponse(BaseModel):
    error: List[FieldError]


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    movies: int
