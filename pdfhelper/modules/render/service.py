"""Render service - HTML to PDF using Playwright."""

from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from pdfhelper.config import Settings, get_settings
from pdfhelper.modules.compose.options import PrintOptions
from pdfhelper.shared.errors import RenderError
from pdfhelper.shared.logging import get_logger

logger = get_logger(__name__)


def build_launch_options(settings: Settings) -> dict[str, Any]:
    """Chromium launch arguments; production uses the system browser unsandboxed."""
    options: dict[str, Any] = {"headless": True}
    if settings.is_production:
        options["executable_path"] = settings.chromium_executable
        options["args"] = ["--no-sandbox"]
    return options


class RenderService:
    """Service for rendering composed HTML to PDF using Playwright."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    async def render(self, html: str, options: PrintOptions) -> bytes:
        """
        Render HTML content to PDF bytes.

        A browser is launched for this call only and closed on every exit
        path, including cancellation.

        Args:
            html: Composed HTML document
            options: Print options matching the document

        Returns:
            PDF bytes

        Raises:
            RenderError: browser launch, page load or PDF generation failed
        """
        options = options.ensure_complete()
        timeout = self.settings.render_timeout_ms

        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(**build_launch_options(self.settings))

                try:
                    page = await browser.new_page()

                    # Embedded data URIs and layout must settle before printing
                    await page.set_content(html, wait_until="networkidle", timeout=timeout)

                    pdf_bytes = await page.pdf(**options.to_pdf_kwargs())

                    logger.info(f"Generated PDF: {len(pdf_bytes)} bytes")
                    return pdf_bytes

                finally:
                    await browser.close()

        except PlaywrightError as e:
            logger.error(f"PDF render failed: {e}")
            raise RenderError(f"PDF rendering failed: {e.message}") from e
