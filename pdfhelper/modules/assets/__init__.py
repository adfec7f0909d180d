"""Assets module - fetch and validate header/footer/watermark images."""

from .fetch import fetch_source, resolve_source
from .schemas import ImageAsset
from .service import ImageResolver, probe_image

__all__ = ["ImageAsset", "ImageResolver", "fetch_source", "probe_image", "resolve_source"]
