"""
Header/footer band markup sized to the page width.
"""

import math
from dataclasses import dataclass
from typing import Literal

from pdfhelper.modules.assets.schemas import ImageAsset

# A4 width in CSS px at Chromium's print resolution
PAGE_WIDTH = 596
# Narrower images are kept at native width instead of being stretched
MIN_SCALED_WIDTH = 380
SMALL_PART_HEIGHT = 80
# Cancels the print engine's own template padding
EDGE_OFFSET = -16

PartRole = Literal["header", "footer"]

_EDGE_SIDE = {"header": "top", "footer": "bottom"}


@dataclass(frozen=True)
class RenderedPart:
    markup: str
    width: int
    height: int


def scale_part(image: ImageAsset, role: PartRole, page_width: int = PAGE_WIDTH) -> RenderedPart:
    """
    Build the template markup for a header or footer image.

    Images without a usable width, or narrower than MIN_SCALED_WIDTH,
    get a fixed 80px band. Wider images are scaled to exactly the page
    width with their aspect ratio kept, and pulled toward the page edge.
    """
    if not image.width or image.width < MIN_SCALED_WIDTH:
        width = image.width or page_width
        return RenderedPart(
            markup=(
                f'<{role}><img style="width:{width}px;height:{SMALL_PART_HEIGHT}px" '
                f'src="{image.data_uri}"></{role}>'
            ),
            width=width,
            height=SMALL_PART_HEIGHT,
        )

    ratio = image.width / page_width
    height = math.ceil(image.height / ratio)
    side = _EDGE_SIDE[role]

    return RenderedPart(
        markup=(
            f'<{role} style="margin-{side}:{EDGE_OFFSET}px">'
            f'<img style="width:{page_width}px;height:{height}px" '
            f'src="{image.data_uri}"></{role}>'
        ),
        width=page_width,
        height=height,
    )
