from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from checklist_splitter.naming.models import PackType
from checklist_splitter.processor.models import JobRequest, NamedBlob


@dataclass(slots=True)
class PipelineContext:
    request: JobRequest
    address: str = ""
    pack_type: PackType | None = None
    raw_bytes: bytes = b""
    blobs: list[NamedBlob] = field(default_factory=list)
    archive_bytes: bytes = b""
    archive_path: Path | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
