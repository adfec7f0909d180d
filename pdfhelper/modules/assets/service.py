"""
Image resolver - fetch an image source and turn it into an ImageAsset.
"""

import base64
import io

import httpx
from PIL import Image, UnidentifiedImageError

from pdfhelper.config import Settings, get_settings
from pdfhelper.shared.errors import InvalidAssetError
from pdfhelper.shared.logging import get_logger

from .fetch import fetch_source, resolve_source
from .schemas import ImageAsset

logger = get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "Error reading in file"

# Multi-picture JPEGs (phones, cameras) are plain JPEG to a browser
MIME_OVERRIDES = {"MPO": "image/jpeg"}


def probe_image(data: bytes) -> tuple[int, int, str]:
    """
    Sniff image bytes.

    Returns:
        (width, height, mime)

    Raises:
        ValueError: bytes are not a recognized image format
    """
    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
            fmt = img.format or ""
            mime = MIME_OVERRIDES.get(fmt) or Image.MIME.get(fmt, "")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ValueError(f"Unrecognized image data: {e}") from e

    if not mime.startswith("image/"):
        raise ValueError(f"File is not an image ({mime or 'unknown type'})")

    return width, height, mime


class ImageResolver:
    """Resolves header/footer/watermark sources into embeddable images."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.transport = transport

    async def resolve(self, source: str, error_message: str | None = None) -> ImageAsset:
        """
        Fetch and validate an image.

        Args:
            source: Absolute https URL or path relative to the app URL
            error_message: Message for the InvalidAssetError raised on failure

        Raises:
            InvalidAssetError: unreachable, not an image, or non-image MIME
        """
        url = resolve_source(source, self.settings.app_url)

        try:
            data = await fetch_source(
                url, timeout=self.settings.fetch_timeout, transport=self.transport
            )
            width, height, mime = probe_image(data)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning(f"Asset rejected ({url}): {e}")
            raise InvalidAssetError(error_message or DEFAULT_ERROR_MESSAGE) from e

        encoded = base64.b64encode(data).decode("ascii")
        logger.info(f"Resolved asset {url}: {mime} {width}x{height}")
        return ImageAsset(
            data_uri=f"data:{mime};base64,{encoded}",
            width=width,
            height=height,
            mime=mime,
        )
