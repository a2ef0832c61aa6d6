from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class JobRequest:
    """Inputs supplied by the boundary (CLI, tests) for one job."""

    input_path: Path
    address: str
    pack_type: str
    output_dir: Path


@dataclass(frozen=True)
class NamedBlob:
    """A single-page PDF paired with its final, job-unique filename."""

    filename: str
    data: bytes
