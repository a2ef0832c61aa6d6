import os
import tempfile
from pathlib import Path

from checklist_splitter.archive.assembler import ArchiveAssembler, archive_filename
from checklist_splitter.logging.logger import Log
from checklist_splitter.naming.address import normalize_address
from checklist_splitter.naming.models import PackType
from checklist_splitter.pdf.base import BasePdfExtractor
from checklist_splitter.pdf.exceptions import PdfError
from checklist_splitter.pdf.factory import PageRendererFactory
from checklist_splitter.processor.exceptions import (
    ArchiveWriteError,
    InvalidDocumentError,
    InvalidInputError,
)
from checklist_splitter.processor.file_loader import FileLoader
from checklist_splitter.processor.pipeline import PipelineContext, PipelineStep
from checklist_splitter.processor.splitter import run_job

PDF_SIGNATURE = b"%PDF-"
SIGNATURE_SEARCH_WINDOW = 1024


class LogFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        Log.error(
            f"Job for {context.request.input_path.name} failed: {context.error_message}"
        )
        return context


class ValidateInputStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        address = normalize_address(context.request.address)
        if not address:
            raise InvalidInputError("Enter the address")
        try:
            context.pack_type = PackType.parse(context.request.pack_type)
        except ValueError as exc:
            raise InvalidInputError(str(exc)) from exc
        context.address = address
        Log.info(f"Job for '{address}' using {context.pack_type.value} rules")
        return context


class LoadDocumentStep(PipelineStep):
    def __init__(self, file_loader: FileLoader) -> None:
        self._file_loader = file_loader

    def run(self, context: PipelineContext) -> PipelineContext:
        path = context.request.input_path
        if path.suffix.lower() != ".pdf":
            raise InvalidInputError("Please supply a single Inspection Checklist PDF")
        try:
            context.raw_bytes = self._file_loader.load(path)
        except FileNotFoundError as exc:
            raise InvalidInputError(str(exc)) from exc
        Log.info(f"Loaded {len(context.raw_bytes)} bytes from {path.name}")
        return context


class ValidateDocumentStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        if PDF_SIGNATURE not in context.raw_bytes[:SIGNATURE_SEARCH_WINDOW]:
            raise InvalidDocumentError(
                f"{context.request.input_path.name} is not a PDF document"
            )
        return context


class SplitPagesStep(PipelineStep):
    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        renderer_factory: PageRendererFactory,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._renderer_factory = renderer_factory

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.pack_type is None:
            raise ValueError("PipelineContext.pack_type must be set before splitting")
        try:
            with (
                self._pdf_extractor.open(context.raw_bytes) as text_document,
                self._renderer_factory.open(context.raw_bytes) as renderer,
            ):
                context.blobs = run_job(
                    page_count=text_document.page_count,
                    address=context.address,
                    pack_type=context.pack_type,
                    page_extractor=text_document.extract_text,
                    page_renderer=renderer.render,
                )
        except PdfError as exc:
            raise InvalidDocumentError(f"Could not open document: {exc}") from exc
        return context


class AssembleArchiveStep(PipelineStep):
    def __init__(self, assembler: ArchiveAssembler) -> None:
        self._assembler = assembler

    def run(self, context: PipelineContext) -> PipelineContext:
        context.archive_bytes = self._assembler.assemble(context.blobs)
        Log.info(
            f"Assembled archive with {len(context.blobs)} entries "
            f"({len(context.archive_bytes)} bytes)"
        )
        return context


class WriteArchiveStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        output_dir = context.request.output_dir
        path = output_dir / archive_filename(context.address)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            fd, raw_temp_path = tempfile.mkstemp(
                suffix=".tmp.zip", prefix=".archive_", dir=str(output_dir)
            )
        except OSError as exc:
            raise ArchiveWriteError(f"Could not write {path}: {exc}") from exc
        temp_path = Path(raw_temp_path)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(context.archive_bytes)
            temp_path.replace(path)
        except OSError as exc:
            temp_path.unlink(missing_ok=True)
            raise ArchiveWriteError(f"Could not write {path}: {exc}") from exc
        context.archive_path = path
        Log.info(f"Wrote {path}")
        return context
