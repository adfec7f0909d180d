"""
Compose module schemas.
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .options import PrintOptions


class GeneratePdfRequest(BaseModel):
    """Request body for POST /generate-pdf."""

    header: str | None = Field(None, description="Header image URL or path")
    body: str = Field("", description="HTML body; may contain {original_cv}")
    footer: str | None = Field(None, description="Footer image URL or path")
    watermark: str | None = Field(None, description="Watermark image URL or path")
    original_cv: str | None = Field(
        None, description="URL or path of a PDF whose pages are spliced into the body"
    )

    @field_validator("body", mode="before")
    @classmethod
    def _body_to_str(cls, value: Any) -> str:
        # Missing, null or non-string bodies render as empty
        if not value or not isinstance(value, str):
            return ""
        return value

    @field_validator("header", "footer", "watermark", "original_cv", mode="before")
    @classmethod
    def _empty_to_none(cls, value: Any) -> str | None:
        if not value or not isinstance(value, str):
            return None
        return value


@dataclass(frozen=True)
class ComposedDocument:
    """Final HTML and the print options that match it."""
    html: str
    options: PrintOptions
