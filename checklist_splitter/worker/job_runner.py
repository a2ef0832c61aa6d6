from checklist_splitter.logging.logger import Log
from checklist_splitter.processor.exceptions import (
    InvalidDocumentError,
    InvalidInputError,
    PageProcessingError,
    ProcessorError,
)
from checklist_splitter.processor.models import JobRequest
from checklist_splitter.processor.processor import Processor

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID_INPUT = 2
EXIT_INVALID_DOCUMENT = 3
EXIT_PAGE_FAILED = 4


class JobRunner:
    """Run one job and translate its outcome into a user message and exit code."""

    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def run(self, request: JobRequest) -> int:
        """Execute a single job. No retries: source corruption is not transient."""
        try:
            context = self._processor.process(request)
        except InvalidInputError as exc:
            Log.error(f"Invalid input: {exc}. Correct it and retry.")
            return EXIT_INVALID_INPUT
        except InvalidDocumentError as exc:
            Log.error(f"{exc}. Re-export or re-save the source file and retry.")
            return EXIT_INVALID_DOCUMENT
        except PageProcessingError as exc:
            Log.error(f"Processing failed on page {exc.page_number}: {exc}")
            return EXIT_PAGE_FAILED
        except ProcessorError as exc:
            Log.error(f"Processing failed: {exc}")
            return EXIT_FAILED
        Log.info(f"Job completed: {len(context.blobs)} files in {context.archive_path}")
        return EXIT_OK
