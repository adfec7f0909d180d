"""
Shared fixtures: settings, fake network, fake renderer, test client.
"""

import io
from collections.abc import Callable, Iterator

import fitz  # PyMuPDF
import httpx
import pytest
from fastapi.testclient import TestClient
from PIL import Image

from pdfhelper.app import build_app
from pdfhelper.config import Settings, init_settings, reset_settings
from pdfhelper.modules.assets import ImageResolver
from pdfhelper.modules.compose import DocumentSplicer, PageComposer, PrintOptions
from pdfhelper.modules.raster import PageRasterizer
from pdfhelper.modules.render.router import get_composer, get_renderer

BASE_URL = "http://assets.test"
FAKE_PDF = b"%PDF-1.4\n% fake\n"


def png_bytes(width: int, height: int, fmt: str = "PNG") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), (200, 30, 30)).save(buf, format=fmt)
    return buf.getvalue()


def pdf_bytes(page_count: int) -> bytes:
    doc = fitz.open()
    for i in range(page_count):
        page = doc.new_page(width=595, height=842)
        page.insert_text((72, 72), f"Page {i + 1}")
    data = doc.tobytes()
    doc.close()
    return data


# Path -> (status, content type, body)
ROUTES: dict[str, tuple[int, str, bytes]] = {
    "/assets/header.png": (200, "image/png", png_bytes(1200, 200)),
    "/assets/footer.jpg": (200, "image/jpeg", png_bytes(1192, 300, fmt="JPEG")),
    "/assets/logo.png": (200, "image/png", png_bytes(300, 100)),
    "/assets/mark.gif": (200, "image/gif", png_bytes(64, 64, fmt="GIF")),
    "/assets/notes.txt": (200, "text/plain", b"just some text, not an image"),
    "/docs/cv.pdf": (200, "application/pdf", pdf_bytes(3)),
    "/docs/single.pdf": (200, "application/pdf", pdf_bytes(1)),
    "/docs/broken.pdf": (200, "application/pdf", b"%PDF-1.4 truncated garbage"),
}


def _handler(request: httpx.Request) -> httpx.Response:
    status, content_type, body = ROUTES.get(
        request.url.path, (404, "text/plain", b"not found")
    )
    return httpx.Response(status, headers={"Content-Type": content_type}, content=body)


class FakeRenderer:
    """Stands in for Playwright; records what it was asked to print."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, PrintOptions]] = []
        self.pdf = FAKE_PDF

    async def render(self, html: str, options: PrintOptions) -> bytes:
        options.ensure_complete()
        self.calls.append((html, options))
        return self.pdf


@pytest.fixture
def settings() -> Iterator[Settings]:
    settings = Settings(app_url=BASE_URL, raster_scale=0.5, log_level="DEBUG")
    init_settings(settings)
    yield settings
    reset_settings()


@pytest.fixture
def transport() -> httpx.MockTransport:
    return httpx.MockTransport(_handler)


@pytest.fixture
def resolver(settings: Settings, transport: httpx.MockTransport) -> ImageResolver:
    return ImageResolver(settings, transport=transport)


@pytest.fixture
def rasterizer(settings: Settings, transport: httpx.MockTransport) -> PageRasterizer:
    return PageRasterizer(settings, transport=transport)


@pytest.fixture
def composer(resolver: ImageResolver, rasterizer: PageRasterizer) -> PageComposer:
    return PageComposer(resolver=resolver, splicer=DocumentSplicer(rasterizer))


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def client(
    settings: Settings, composer: PageComposer, renderer: FakeRenderer
) -> TestClient:
    app = build_app(settings)
    app.dependency_overrides[get_composer] = lambda: composer
    app.dependency_overrides[get_renderer] = lambda: renderer
    return TestClient(app)


@pytest.fixture
def make_png() -> Callable[[int, int], bytes]:
    return png_bytes


@pytest.fixture
def make_pdf() -> Callable[[int], bytes]:
    return pdf_bytes
