"""Render module routes."""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from pdfhelper.modules.compose import GeneratePdfRequest, PageComposer
from pdfhelper.shared.errors import PdfHelperError
from pdfhelper.shared.logging import get_logger
from .service import RenderService

logger = get_logger(__name__)
router = APIRouter(tags=["render"])

FALLBACK_MESSAGE = "Server error"


def get_composer() -> PageComposer:
    """Dependency injection for the composer."""
    return PageComposer()


def get_renderer() -> RenderService:
    """Dependency injection for the renderer."""
    return RenderService()


@router.post("/generate-pdf")
async def generate_pdf(
    request: GeneratePdfRequest,
    composer: PageComposer = Depends(get_composer),
    renderer: RenderService = Depends(get_renderer),
) -> Response:
    """
    Compose the request into HTML and render it to PDF.

    Any failure answers 403 with {"message": ...}; no partial PDF is sent.
    Pipeline errors go to the app-level PdfHelperError handler.
    """
    try:
        document = await composer.compose(request)
        pdf_bytes = await renderer.render(document.html, document.options)

    except PdfHelperError:
        raise
    except Exception as e:
        logger.warning(f"PDF generation failed: {type(e).__name__}: {e}")
        return JSONResponse(
            status_code=403,
            content={"message": str(e) or FALLBACK_MESSAGE},
        )

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": 'attachment; filename="document.pdf"',
            "Content-Length": str(len(pdf_bytes)),
        },
    )
