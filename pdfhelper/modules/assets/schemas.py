"""Assets module types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageAsset:
    """An image ready to embed: data URI plus native pixel size."""
    data_uri: str
    width: int
    height: int
    mime: str
