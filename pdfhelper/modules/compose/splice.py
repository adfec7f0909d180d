"""
External document splicing.

The body template may contain one splice point, the literal
``{original_cv}`` token. The rasterized pages of the external document
are inserted there as fixed-size blocks. Page breaks go only *between*
page blocks; a break before the first or after the last block makes
Chromium emit an extra blank page.

A literal ``{original_cv}`` in user content cannot be told apart from
an intended splice point. Only the first occurrence is used; any later
ones stay in the output as plain text.
"""

from typing import Protocol

from pdfhelper.shared.logging import get_logger

from .options import DEFAULT_MARGIN, PageMargins
from .parts import PAGE_WIDTH

logger = get_logger(__name__)

PLACEHOLDER = "{original_cv}"
# A4 height in points at 72 DPI
PAGE_HEIGHT = 842
# Point to pixel factor at the renderer's internal resolution
PT_TO_PX = 1.33
PAGE_BREAK = '<div style="page-break-after:always;"></div>'


class Rasterizer(Protocol):
    async def rasterize(self, source: str) -> list[str]: ...


def split_template(body_html: str) -> tuple[str, str | None]:
    """
    Locate the splice point.

    Returns:
        (before, after); after is None when the body has no placeholder
    """
    before, found, after = body_html.partition(PLACEHOLDER)
    if not found:
        return body_html, None
    return before, after


def content_box(margins: PageMargins, page_width: int = PAGE_WIDTH) -> tuple[float, float]:
    """Pixel (width, height) available to one page image between the margins."""
    width = page_width * PT_TO_PX
    height = (PAGE_HEIGHT - margins.top - margins.bottom) * PT_TO_PX
    return width, height


def _fragment(html: str) -> str:
    return f'<div style="margin-left:{DEFAULT_MARGIN}px;margin-right:{DEFAULT_MARGIN}px">{html}</div>'


def _page_block(src: str, width: float, height: float) -> str:
    return (
        f'<div style="width:{width:.2f}px;height:{height:.2f}px;position:relative;">'
        f'<img src="{src}" style="width:100%;height:100%;"></div>'
    )


def compose_pages(pages: list[str], body_html: str, margins: PageMargins) -> str:
    """
    Build the <main> block: body before the splice point, the page
    images, then the rest of the body. Without a placeholder the pages
    follow the body.
    """
    width, height = content_box(margins)
    pages_html = PAGE_BREAK.join(_page_block(src, width, height) for src in pages)

    before, after = split_template(body_html)
    html = _fragment(before) + pages_html
    if after is not None:
        html += _fragment(after)

    return f"<main>{html}</main>"


class DocumentSplicer:
    """Rasterizes an external document and splices it into the body."""

    def __init__(self, rasterizer: Rasterizer):
        self.rasterizer = rasterizer

    async def splice(self, source: str, body_html: str, margins: PageMargins) -> str:
        """
        Raises:
            RasterizationError: from the rasterizer
        """
        pages = await self.rasterizer.rasterize(source)
        logger.info(
            f"Splicing {len(pages)} page(s), margins top={margins.top} bottom={margins.bottom}"
        )
        return compose_pages(pages, body_html, margins)
