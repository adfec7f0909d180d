"""
Error taxonomy for the PDF pipeline.

Every error carries a user-facing message. The HTTP layer exposes only
that message, never the error type.
"""

from typing import Any


class PdfHelperError(Exception):
    """Base error for all pipeline failures."""

    code = "PDF_HELPER_ERROR"
    http_status = 403

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class InvalidAssetError(PdfHelperError):
    """Asset unreachable, unrecognized, or not an image."""

    code = "INVALID_ASSET"


class RasterizationError(PdfHelperError):
    """External document could not be rasterized into page images."""

    code = "RASTERIZATION_FAILED"


class RenderError(PdfHelperError):
    """Renderer failed to load content or produce a PDF."""

    code = "RENDER_FAILED"
