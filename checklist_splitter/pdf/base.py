from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class PdfTextDocument(ABC):
    """An opened source document that yields text page by page."""

    @property
    @abstractmethod
    def page_count(self) -> int:
        """Total number of pages in the document."""

    @abstractmethod
    def extract_text(self, page_number: int) -> str:
        """Extract plain text of a single page.

        Args:
            page_number: 1-based page ordinal.

        Returns:
            Page text; empty string when the page carries no text.

        Raises:
            PdfExtractionError: if the page cannot be read.
        """


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def open(self, pdf_bytes: bytes) -> AbstractContextManager[PdfTextDocument]:
        """Open PDF bytes for per-page text extraction.

        Raises:
            PdfExtractionError: if the bytes cannot be parsed as a PDF.
        """


class BasePageRenderer(ABC):
    """Contract for strategies that turn one source page into a PDF of its own."""

    name: str = ""

    @abstractmethod
    def render(self, page_number: int) -> bytes:
        """Render a single page as a standalone one-page PDF.

        Args:
            page_number: 1-based page ordinal.

        Raises:
            PdfRenderError: if the page cannot be rendered.
        """
