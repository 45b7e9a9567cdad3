"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    name: str | None = Field(
        default=None,
        description="React component name (defaults to the configured name)",
    )

    @field_validator("name")
    @classmethod
    def _name_is_identifier(cls, v: str | None) -> str | None:
        if v is not None and not v.isidentifier():
            raise ValueError(f"{v!r} is not a valid component name")
        return v
