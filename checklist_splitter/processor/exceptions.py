class ProcessorError(Exception):
    """Base exception for all job processing errors."""


class InvalidInputError(ProcessorError):
    """Raised when the address, pack type or input file is not acceptable."""


class InvalidDocumentError(ProcessorError):
    """Raised when the input is not a recognizable PDF document."""


class PageProcessingError(ProcessorError):
    """Raised when text extraction or rendering fails on a specific page."""

    def __init__(self, page_number: int, message: str) -> None:
        super().__init__(f"Page {page_number}: {message}")
        self.page_number = page_number


class ArchiveWriteError(ProcessorError):
    """Raised when the output archive cannot be written to disk."""
