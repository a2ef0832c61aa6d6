import io
import zipfile
from collections.abc import Sequence

from checklist_splitter.processor.models import NamedBlob


def archive_filename(address: str) -> str:
    """Conventional name of the downloadable archive for an address."""
    return f"{address} - PROCESSED_CHECKLIST.zip"


class ArchiveAssembler:
    """Packs named single-page PDFs into one ZIP, preserving order."""

    def __init__(self, compresslevel: int = 6) -> None:
        self._compresslevel = compresslevel

    def assemble(self, blobs: Sequence[NamedBlob]) -> bytes:
        buf = io.BytesIO()
        with zipfile.ZipFile(
            buf, "w", zipfile.ZIP_DEFLATED, compresslevel=self._compresslevel
        ) as zf:
            for blob in blobs:
                zf.writestr(blob.filename, blob.data)
        return buf.getvalue()
