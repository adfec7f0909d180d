"""PdfHelper - HTML to PDF composition service."""

__version__ = "0.1.0"
