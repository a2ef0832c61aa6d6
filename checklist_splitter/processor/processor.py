from collections.abc import Sequence

from checklist_splitter.archive.assembler import ArchiveAssembler
from checklist_splitter.config.settings import Settings
from checklist_splitter.logging.logger import Log
from checklist_splitter.pdf.factory import PageRendererFactory, PdfExtractorFactory
from checklist_splitter.processor.file_loader import FileLoader
from checklist_splitter.processor.models import JobRequest
from checklist_splitter.processor.pipeline import PipelineContext, PipelineStep
from checklist_splitter.processor.steps import (
    AssembleArchiveStep,
    LoadDocumentStep,
    LogFailureStep,
    SplitPagesStep,
    ValidateDocumentStep,
    ValidateInputStep,
    WriteArchiveStep,
)


class Processor:
    """Orchestrates the checklist pipeline.

    Pipeline: validate input -> load -> validate document -> split
    -> assemble archive -> write archive.
    """

    def __init__(self, steps: Sequence[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = list(steps)
        self._failed_step = failed_step

    def process(self, request: JobRequest) -> PipelineContext:
        """Run every step for one job; on failure run the failed step and re-raise."""
        Log.info(f"Processing {request.input_path}")
        context = PipelineContext(request=request)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise
        return context


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    pdf_extractor = PdfExtractorFactory.create(settings)
    renderer_factory = PageRendererFactory(settings)
    assembler = ArchiveAssembler(compresslevel=settings.archive_compresslevel)
    steps: list[PipelineStep] = [
        ValidateInputStep(),
        LoadDocumentStep(file_loader=FileLoader()),
        ValidateDocumentStep(),
        SplitPagesStep(pdf_extractor=pdf_extractor, renderer_factory=renderer_factory),
        AssembleArchiveStep(assembler=assembler),
        WriteArchiveStep(),
    ]
    return Processor(steps=steps, failed_step=LogFailureStep())
