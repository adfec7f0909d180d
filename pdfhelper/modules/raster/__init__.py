"""Raster module - turn a multi-page document into page images."""

from .service import PageRasterizer, rasterize_pdf

__all__ = ["PageRasterizer", "rasterize_pdf"]
