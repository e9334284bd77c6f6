"""
Note Schemas.

Pydantic schemas for note API request/response validation.
Field names are camelCase on the wire and snake_case in Python.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        description="Note title",
        examples=["Groceries"],
    )
    content: str = Field(
        ...,
        description="Note content, usually a speech transcript",
        examples=["milk eggs bread"],
    )


class NoteUpdate(BaseModel):
    """Schema for updating an existing note. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, description="Note title")
    content: str | None = Field(default=None, description="Note content")

    @field_validator("title", "content", mode="before")
    @classmethod
    def _reject_explicit_null(cls, value: object) -> object:
        # Defaults are not validated, so this only sees values sent by the client
        if value is None:
            raise ValueError("must be a string when provided")
        return value


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: int = Field(description="Note identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="Creation timestamp (UTC)")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
