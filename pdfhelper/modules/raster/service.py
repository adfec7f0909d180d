"""
Page rasterizer - render each page of a PDF to a PNG data URI using PyMuPDF.
"""

import asyncio
import base64

import fitz  # PyMuPDF
import httpx

from pdfhelper.config import Settings, get_settings
from pdfhelper.modules.assets.fetch import fetch_source, resolve_source
from pdfhelper.shared.errors import RasterizationError
from pdfhelper.shared.logging import get_logger

logger = get_logger(__name__)

ERROR_MESSAGE = "Original CV file is not valid"


def rasterize_pdf(data: bytes, scale: float) -> list[str]:
    """
    Render every page of a PDF document.

    Args:
        data: Raw PDF bytes
        scale: Upscale factor applied to the native page size

    Returns:
        One data:image/png;base64 URI per page, in page order
    """
    pages: list[str] = []
    matrix = fitz.Matrix(scale, scale)

    with fitz.open(stream=data, filetype="pdf") as doc:
        if doc.page_count == 0:
            raise ValueError("Document has no pages")

        for page in doc:
            pix = page.get_pixmap(matrix=matrix, alpha=False)
            encoded = base64.b64encode(pix.tobytes("png")).decode("ascii")
            pages.append(f"data:image/png;base64,{encoded}")

    return pages


class PageRasterizer:
    """Fetches an external document and rasterizes its pages."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.transport = transport

    async def rasterize(self, source: str) -> list[str]:
        """
        Raises:
            RasterizationError: document unreachable or unreadable
        """
        url = resolve_source(source, self.settings.app_url)

        try:
            data = await fetch_source(
                url, timeout=self.settings.fetch_timeout, transport=self.transport
            )
            # PyMuPDF is CPU bound; keep the event loop free
            pages = await asyncio.to_thread(rasterize_pdf, data, self.settings.raster_scale)
        except (httpx.HTTPError, httpx.InvalidURL, fitz.FileDataError, RuntimeError, ValueError) as e:
            logger.warning(f"Rasterization failed ({url}): {e}")
            raise RasterizationError(ERROR_MESSAGE) from e

        logger.info(f"Rasterized {len(pages)} page(s) from {url}")
        return pages
