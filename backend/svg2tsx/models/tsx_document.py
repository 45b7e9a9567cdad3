"""Converted TSX document model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TsxDocument(BaseModel):
    """Result of converting one SVG file into a React component."""

    component_name: str
    # Root <svg> attributes after renaming, values still quoted
    root_attributes: dict[str, str] = Field(default_factory=dict)
    # Cleaned body markup, one element line per entry
    body_lines: list[str] = Field(default_factory=list)
    tsx: str = ""
