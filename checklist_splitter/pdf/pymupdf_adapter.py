from collections.abc import Iterator
from contextlib import contextmanager

import pymupdf

from checklist_splitter.pdf.base import BasePdfExtractor, PdfTextDocument
from checklist_splitter.pdf.exceptions import PdfExtractionError


class PyMuPdfDocument(PdfTextDocument):
    def __init__(self, doc: pymupdf.Document) -> None:
        self._doc = doc

    @property
    def page_count(self) -> int:
        return int(self._doc.page_count)

    def extract_text(self, page_number: int) -> str:
        try:
            return str(self._doc[page_number - 1].get_text())
        except Exception as exc:
            raise PdfExtractionError(
                f"pymupdf extraction failed on page {page_number}: {exc}"
            ) from exc


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts page text from PDF using PyMuPDF."""

    @contextmanager
    def open(self, pdf_bytes: bytes) -> Iterator[PdfTextDocument]:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not open document: {exc}") from exc
        try:
            yield PyMuPdfDocument(doc)
        finally:
            doc.close()
