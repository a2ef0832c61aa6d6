class PdfError(Exception):
    """Base exception for PDF engine adapters."""


class PdfExtractionError(PdfError):
    """Raised when a document or page cannot be read for text."""


class PdfRenderError(PdfError):
    """Raised when a page cannot be rendered into a single-page PDF."""
