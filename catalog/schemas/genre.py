"""
Genre Pydantic Schemas

Schemas for genre-related API operations.
Follows the same pattern as Author schemas.
"""

from pydantic import BaseModel, ConfigDict, Field


class GenreBase(BaseModel):
    """Base schema with shared genre fields."""

    name: str = Field(
        ...,
        max_length=100,
        description="Genre name",
        examples=["Programming", "Mystery", "Romance"],
    )


class GenreCreate(GenreBase):
    """Schema for creating a new genre."""
    pass


class GenreUpdate(BaseModel):
    """Schema for updating an existing genre. All fields optional."""

    name: str | None = Field(
        default=None,
        max_length=100,
        description="Genre name",
    )


class GenreResponse(GenreBase):
    """Schema for genre responses."""

    id: int = Field(..., description="Unique identifier")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Programming",
            }
        },
    )


class GenreListResponse(BaseModel):
    """One page of genres."""

    data: list[GenreResponse] = Field(..., description="Genres on the requested page")
