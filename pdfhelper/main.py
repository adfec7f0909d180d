"""
PdfHelper entrypoint - serves the app with uvicorn.
"""

import uvicorn

from pdfhelper.app import build_app
from pdfhelper.config import get_settings
from pdfhelper.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)

    logger.info(
        f"PdfHelper listening on {settings.host}:{settings.port} "
        f"(environment={settings.environment}, app_url={settings.app_url or '-'})"
    )

    uvicorn.run(
        build_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
