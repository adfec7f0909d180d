"""Render module - HTML to PDF rendering using Playwright."""

from .router import router
from .service import RenderService, build_launch_options

__all__ = ["router", "RenderService", "build_launch_options"]
