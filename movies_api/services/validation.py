"""
Validation of untyped request bodies into movie payloads.

Both entry points are pure: they never raise for bad input and never touch
the store. Failures come back as a list of every violated constraint.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import ValidationError

from ..exceptions import field_errors
from ..schemas.movie import FieldError, MovieCreate, MovieUpdate

T = TypeVar("T")

@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    success: bool
    data: Optional[T] = None
    errors: List[FieldError] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T) -> "ValidationResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, exc: ValidationError) -> "ValidationResult[T]":
        return cls(success=False, errors=[FieldError(**e) for e in field_errors(exc.errors())])

def validate_create(data: Any) -> ValidationResult[MovieCreate]:
    """All fields required except rate, which defaults to 0"""
    try:
        return ValidationResult.ok(MovieCreate.model_validate(data))
    except ValidationError as exc:
        return ValidationResult.fail(exc)

def validate_update(data: Any) -> ValidationResult[Dict[str, Any]]:
    """
    Returns only the fields present in the input. An empty object is a
    valid patch that changes nothing.
    """
    try:
        patch = MovieUpdate.model_validate(data)
    except ValidationError as exc:
        return ValidationResult.fail(exc)
    return ValidationResult.ok(patch.model_dump(exclude_unset=True))
