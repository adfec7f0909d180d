"""
Page composer - assembles the final HTML and print options.
"""

import asyncio

from pdfhelper.modules.assets import ImageAsset, ImageResolver
from pdfhelper.modules.raster import PageRasterizer
from pdfhelper.shared.logging import get_logger

from .options import PrintOptions
from .parts import scale_part
from .schemas import ComposedDocument, GeneratePdfRequest
from .splice import DocumentSplicer

logger = get_logger(__name__)

HEADER_ERROR = "Header file is not valid"
FOOTER_ERROR = "Footer file is not valid"
WATERMARK_ERROR = "Watermark file is not valid"

WATERMARK_SIZE = 280
WATERMARK_OPACITY = 0.25


def wrap_body(body_html: str) -> str:
    """Plain body without an external document; print margins give the inset."""
    return f"<main>{body_html}</main>"


def inject_watermark(html: str, data_uri: str) -> str:
    """
    Prepend a fixed, centered overlay. Fixed elements repeat on every
    printed page, unlike header/footer templates which clip the image.
    """
    overlay = (
        '<div style="position:fixed;top:50%;left:50%;'
        "transform:translate(-50%,-50%);"
        f"width:{WATERMARK_SIZE}px;height:{WATERMARK_SIZE}px;"
        f'opacity:{WATERMARK_OPACITY};z-index:10;pointer-events:none;">'
        f'<img src="{data_uri}" style="width:100%;height:100%;" /></div>'
    )
    return f"{overlay}{html}"


class PageComposer:
    """Builds a ComposedDocument from a generate request."""

    def __init__(
        self,
        resolver: ImageResolver | None = None,
        splicer: DocumentSplicer | None = None,
    ):
        self.resolver = resolver or ImageResolver()
        self.splicer = splicer or DocumentSplicer(PageRasterizer())

    async def _resolve(self, source: str | None, error_message: str) -> ImageAsset | None:
        if not source:
            return None
        return await self.resolver.resolve(source, error_message)

    async def _resolve_assets(
        self, request: GeneratePdfRequest
    ) -> tuple[ImageAsset | None, ImageAsset | None, ImageAsset | None]:
        """
        Fetch header, footer and watermark concurrently. The first failure
        cancels the fetches still in flight and is raised as-is.
        """
        try:
            async with asyncio.TaskGroup() as tg:
                header = tg.create_task(self._resolve(request.header, HEADER_ERROR))
                footer = tg.create_task(self._resolve(request.footer, FOOTER_ERROR))
                watermark = tg.create_task(self._resolve(request.watermark, WATERMARK_ERROR))
        except ExceptionGroup as eg:
            raise eg.exceptions[0] from None

        return header.result(), footer.result(), watermark.result()

    async def compose(self, request: GeneratePdfRequest) -> ComposedDocument:
        """
        Raises:
            InvalidAssetError: header, footer or watermark rejected
            RasterizationError: external document unreadable
        """
        has_external = bool(request.original_cv)
        options = PrintOptions.baseline(external_document=has_external)

        header, footer, watermark = await self._resolve_assets(request)

        if header:
            part = scale_part(header, "header")
            options = options.with_header(part.markup, part.height)

        if footer:
            part = scale_part(footer, "footer")
            options = options.with_footer(part.markup, part.height)

        if has_external:
            html = await self.splicer.splice(request.original_cv, request.body, options.margins)
        else:
            html = wrap_body(request.body)

        if watermark:
            html = inject_watermark(html, watermark.data_uri)

        options = options.ensure_complete()
        logger.info(
            f"Composed document: header={bool(header)} footer={bool(footer)} "
            f"watermark={bool(watermark)} external={has_external} margins={options.margins}"
        )
        return ComposedDocument(html=html, options=options)
