import io
from collections.abc import Iterator
from contextlib import contextmanager

import pdfplumber
from pdfplumber.pdf import PDF

from checklist_splitter.pdf.base import BasePdfExtractor, PdfTextDocument
from checklist_splitter.pdf.exceptions import PdfExtractionError


class PdfPlumberDocument(PdfTextDocument):
    def __init__(self, pdf: PDF) -> None:
        self._pdf = pdf

    @property
    def page_count(self) -> int:
        try:
            return len(self._pdf.pages)
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not list pages: {exc}") from exc

    def extract_text(self, page_number: int) -> str:
        try:
            page = self._pdf.pages[page_number - 1]
        except Exception as exc:
            raise PdfExtractionError(
                f"pdfplumber extraction failed on page {page_number}: {exc}"
            ) from exc
        try:
            return page.extract_text() or ""
        except Exception as exc:
            raise PdfExtractionError(
                f"pdfplumber extraction failed on page {page_number}: {exc}"
            ) from exc
        finally:
            page.close()


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts page text from PDF using pdfplumber."""

    @contextmanager
    def open(self, pdf_bytes: bytes) -> Iterator[PdfTextDocument]:
        try:
            pdf = pdfplumber.open(io.BytesIO(pdf_bytes))
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not open document: {exc}") from exc
        try:
            yield PdfPlumberDocument(pdf)
        finally:
            pdf.close()
