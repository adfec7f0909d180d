"""
Print options for the renderer, built as immutable values.

Each step returns a new PrintOptions. Header and footer templates are
always set together: Chromium fills a missing one with its own
boilerplate (page url, page numbers) as soon as header/footer display
is on.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from pdfhelper.shared.errors import RenderError

PAGE_FORMAT = "A4"
DEFAULT_MARGIN = 72
# Gap between an image band and the body content
PART_GAP = 36

BLANK_TEMPLATE = '<div style="font-size:0;width:100%">&nbsp;</div>'


@dataclass(frozen=True)
class PageMargins:
    """Page margins in CSS pixels as Chromium's print engine takes them."""
    top: int = DEFAULT_MARGIN
    bottom: int = DEFAULT_MARGIN
    left: int = DEFAULT_MARGIN
    right: int = DEFAULT_MARGIN

    def to_css(self) -> dict[str, str]:
        return {
            "top": f"{self.top}px",
            "bottom": f"{self.bottom}px",
            "left": f"{self.left}px",
            "right": f"{self.right}px",
        }


@dataclass(frozen=True)
class PrintOptions:
    page_format: str = PAGE_FORMAT
    print_background: bool = True
    prefer_css_page_size: bool = True
    display_header_footer: bool = False
    header_template: str = ""
    footer_template: str = ""
    margins: PageMargins = field(default_factory=PageMargins)

    @classmethod
    def baseline(cls, external_document: bool = False) -> "PrintOptions":
        """
        Starting options before any header/footer is applied.

        With an external document the horizontal margins are zero; the
        spliced fragments carry their own padding.
        """
        if external_document:
            return cls(margins=PageMargins(left=0, right=0))
        return cls()

    def with_header(self, markup: str, height: int) -> "PrintOptions":
        return replace(
            self,
            display_header_footer=True,
            header_template=markup,
            footer_template=self.footer_template or BLANK_TEMPLATE,
            margins=replace(self.margins, top=height + PART_GAP),
        )

    def with_footer(self, markup: str, height: int) -> "PrintOptions":
        return replace(
            self,
            display_header_footer=True,
            header_template=self.header_template or BLANK_TEMPLATE,
            footer_template=markup,
            margins=replace(self.margins, bottom=height + PART_GAP),
        )

    def ensure_complete(self) -> "PrintOptions":
        """Final check before the options reach the renderer."""
        if self.display_header_footer and not (
            self.header_template and self.footer_template
        ):
            raise RenderError("Header and footer templates must both be set")
        return self

    def to_pdf_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for playwright's Page.pdf()."""
        kwargs: dict[str, Any] = {
            "format": self.page_format,
            "print_background": self.print_background,
            "prefer_css_page_size": self.prefer_css_page_size,
            "display_header_footer": self.display_header_footer,
            "margin": self.margins.to_css(),
        }
        if self.display_header_footer:
            kwargs["header_template"] = self.header_template
            kwargs["footer_template"] = self.footer_template
        return kwargs
