"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Pydantic v2 Features Used:
- model_config: New way to configure models (replaces Config class)
- Field(): Define constraints and metadata
- ConfigDict: Type-safe configuration
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthorBase(BaseModel):
    """
    Base schema with shared author fields.

    Contains fields common to create and response schemas.
    """

    name: str = Field(
        ...,  # ... means required (no default)
        max_length=255,
        description="Author's full name",
        examples=["Robert C. Martin", "Martin Fowler"],
    )

    year: int = Field(
        ...,
        description="Author's birth year",
        examples=[1952, 1963],
    )


class AuthorCreate(AuthorBase):
    """
    Schema for creating a new author.

    Inherits all fields from AuthorBase; both are required.
    """
    pass


class AuthorUpdate(BaseModel):
    """
    Schema for updating an existing author.

    All fields are optional because of PATCH semantics: only the fields
    the client sends are written.
    """

    name: str | None = Field(
        default=None,
        max_length=255,
        description="Author's full name",
    )

    year: int | None = Field(
        default=None,
        description="Author's birth year",
    )


class AuthorResponse(AuthorBase):
    """
    Schema for author responses (what the API returns).

    Flat record: authors never carry nested data.

    model_config with from_attributes=True allows creating this schema
    from SQLAlchemy model instances.
    """

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Robert C. Martin",
                "year": 1952,
            }
        },
    )


class AuthorListResponse(BaseModel):
    """One page of authors."""

    data: list[AuthorResponse] = Field(
        ...,
        description="Authors on the requested page",
    )
