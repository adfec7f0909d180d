"""Compose module - layout, pagination and print options for the PDF."""

from .options import BLANK_TEMPLATE, PageMargins, PrintOptions
from .parts import RenderedPart, scale_part
from .schemas import ComposedDocument, GeneratePdfRequest
from .service import PageComposer, inject_watermark, wrap_body
from .splice import DocumentSplicer, compose_pages, content_box, split_template

__all__ = [
    "BLANK_TEMPLATE",
    "ComposedDocument",
    "DocumentSplicer",
    "GeneratePdfRequest",
    "PageComposer",
    "PageMargins",
    "PrintOptions",
    "RenderedPart",
    "compose_pages",
    "content_box",
    "inject_watermark",
    "scale_part",
    "split_template",
    "wrap_body",
]
