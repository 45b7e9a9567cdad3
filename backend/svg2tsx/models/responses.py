"""API response models."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    attribute_mappings: int = 0


class ConvertResponse(BaseModel):
    tsx: str
    component_name: str
    root_attributes: int = 0
    body_lines: int = 0
