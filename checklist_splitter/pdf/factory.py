from collections.abc import Iterator
from contextlib import contextmanager

import pymupdf

from checklist_splitter.config.settings import Settings
from checklist_splitter.logging.logger import Log
from checklist_splitter.pdf.base import BasePageRenderer, BasePdfExtractor
from checklist_splitter.pdf.exceptions import PdfRenderError
from checklist_splitter.pdf.pdfplumber_adapter import PdfPlumberAdapter
from checklist_splitter.pdf.pymupdf_adapter import PyMuPdfAdapter
from checklist_splitter.pdf.renderers import RasterizeRenderer, StructuralCopyRenderer


class PdfExtractorFactory:
    """Creates the correct PDF text extractor based on settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


class PageRendererFactory:
    """Opens a source document and picks the page rendering strategy."""

    STRATEGIES = ("auto", "copy", "raster")

    def __init__(self, settings: Settings) -> None:
        strategy = settings.render_strategy.lower()
        if strategy not in self.STRATEGIES:
            raise ValueError(
                f"Unknown render strategy '{strategy}'. Choose from: {list(self.STRATEGIES)}"
            )
        self._strategy = strategy
        self._dpi = settings.raster_dpi

    @contextmanager
    def open(self, pdf_bytes: bytes) -> Iterator[BasePageRenderer]:
        """Yield a renderer bound to the opened document; closes it on exit.

        Raises:
            PdfRenderError: if the bytes cannot be opened as a PDF.
        """
        try:
            source = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfRenderError(f"pymupdf could not open document: {exc}") from exc
        try:
            renderer = self.select(source)
            Log.info(f"Rendering pages with '{renderer.name}' strategy")
            yield renderer
        finally:
            source.close()

    def select(self, source: pymupdf.Document) -> BasePageRenderer:
        if self._strategy == "copy":
            return StructuralCopyRenderer(source)
        if self._strategy == "raster":
            return RasterizeRenderer(source, dpi=self._dpi)
        if self.supports_structural_copy(source):
            return StructuralCopyRenderer(source)
        Log.warning("Structural page copy not possible for this document, rasterizing pages")
        return RasterizeRenderer(source, dpi=self._dpi)

    @staticmethod
    def supports_structural_copy(source: pymupdf.Document) -> bool:
        """Pre-flight probe: try copying the first page into a scratch document."""
        if not source.is_pdf or source.needs_pass or source.page_count < 1:
            return False
        try:
            with pymupdf.open() as scratch:  # type: ignore[no-untyped-call]
                scratch.insert_pdf(source, from_page=0, to_page=0)
                scratch.tobytes()
        except Exception as exc:
            Log.debug(f"Structural copy probe failed: {exc}")
            return False
        return True
