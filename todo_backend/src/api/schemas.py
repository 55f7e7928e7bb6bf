from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

TITLE_REQUIRED = "Title is required"


def _clean_title(value: Optional[str]) -> Optional[str]:
    """Trim a title, rejecting blank values. None passes through unchanged."""
    if value is None:
        return None
    s = value.strip()
    if not s:
        raise ValueError(TITLE_REQUIRED)
    return s


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "completed": False,
            }
        }
    )

    # Optional at the type level so a missing title reports the same
    # error as a blank one.
    title: Optional[str] = Field(
        default=None,
        description="Short title for the todo item; trimmed, must not be blank",
        validate_default=True,
    )
    completed: bool = Field(default=False, description="Completion status flag")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> str:
        s = _clean_title(v)
        if s is None:
            raise ValueError(TITLE_REQUIRED)
        return s


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; omitted or null fields keep their stored value.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "completed": True,
            }
        }
    )

    title: Optional[str] = Field(default=None, description="New title; must not be blank if given")
    completed: Optional[bool] = Field(default=None, description="New completion status")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        return _clean_title(v)


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy milk",
                "completed": False,
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    completed: bool = Field(..., description="Completion status flag")


# PUBLIC_INTERFACE
class TodoDeleted(BaseModel):
    """
    Confirmation returned after deleting a Todo item.
    """

    message: str = Field(default="Todo deleted", description="Confirmation message")
    todo: TodoOut = Field(..., description="The deleted todo item")


# PUBLIC_INTERFACE
class HealthStatus(BaseModel):
    """Static service health payload."""

    status: str = Field(default="healthy")
    version: str = Field(default="1.0.0")


class ErrorDetail(BaseModel):
    field: str = Field(..., description="Dotted location of the invalid value; empty for the whole body")
    message: str
    type: str = Field(..., description="Validation error type")


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Human readable error message")
    detail: Optional[List[ErrorDetail]] = Field(
        default=None, description="Per-field problems; only present on validation errors"
    )
