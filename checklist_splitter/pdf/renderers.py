"""Single-page PDF rendering strategies backed by PyMuPDF."""

import pymupdf

from checklist_splitter.pdf.base import BasePageRenderer
from checklist_splitter.pdf.exceptions import PdfRenderError


def _page_index(source: pymupdf.Document, page_number: int) -> int:
    if not 1 <= page_number <= source.page_count:
        raise PdfRenderError(
            f"page {page_number} is out of range (document has {source.page_count} pages)"
        )
    return page_number - 1


class StructuralCopyRenderer(BasePageRenderer):
    """Copies the page object graph into a new document, keeping vector content."""

    name = "copy"

    def __init__(self, source: pymupdf.Document) -> None:
        self._source = source

    def render(self, page_number: int) -> bytes:
        index = _page_index(self._source, page_number)
        try:
            with pymupdf.open() as out:  # type: ignore[no-untyped-call]
                out.insert_pdf(self._source, from_page=index, to_page=index)
                return bytes(out.tobytes(garbage=3, deflate=True))
        except Exception as exc:
            raise PdfRenderError(
                f"structural copy failed on page {page_number}: {exc}"
            ) from exc


class RasterizeRenderer(BasePageRenderer):
    """Fallback: embeds a bitmap of the page into a new page of the same size."""

    name = "raster"

    def __init__(self, source: pymupdf.Document, dpi: int = 150) -> None:
        self._source = source
        self._dpi = dpi

    def render(self, page_number: int) -> bytes:
        index = _page_index(self._source, page_number)
        try:
            page = self._source[index]
            pixmap = page.get_pixmap(dpi=self._dpi, alpha=False)
            with pymupdf.open() as out:  # type: ignore[no-untyped-call]
                target = out.new_page(width=page.rect.width, height=page.rect.height)
                target.insert_image(target.rect, pixmap=pixmap)
                return bytes(out.tobytes(deflate=True))
        except Exception as exc:
            raise PdfRenderError(f"rasterizing failed on page {page_number}: {exc}") from exc
