"""Per-page loop that turns a checklist PDF into named single-page blobs."""

from collections.abc import Callable

from checklist_splitter.logging.logger import Log
from checklist_splitter.naming.address import normalize_address
from checklist_splitter.naming.classifier import checklist_name, classify
from checklist_splitter.naming.models import JobState, PackType
from checklist_splitter.naming.uniquifier import uniquify
from checklist_splitter.processor.exceptions import (
    InvalidDocumentError,
    InvalidInputError,
    PageProcessingError,
)
from checklist_splitter.processor.models import NamedBlob

PageExtractor = Callable[[int], str]
PageRenderer = Callable[[int], bytes]


def run_job(
    page_count: int,
    address: str,
    pack_type: str | PackType,
    page_extractor: PageExtractor,
    page_renderer: PageRenderer,
) -> list[NamedBlob]:
    """Split, classify and name every page of one checklist.

    Page 1 is always emitted as the inspection checklist. Pages 2..N with
    blank text are dropped; the rest are classified in ascending order so
    numbered categories count in encounter order.

    Args:
        page_count: Total pages in the source document.
        address: Site address; normalized here, must not end up empty.
        pack_type: "AC_GOLD" or "BMD_PACK".
        page_extractor: Returns the text of a 1-based page.
        page_renderer: Returns single-page PDF bytes of a 1-based page.

    Returns:
        NamedBlobs, checklist first, then remaining pages in page order.

    Raises:
        InvalidInputError: empty address or unsupported pack type.
        InvalidDocumentError: document has no pages.
        PageProcessingError: extraction or rendering failed on a page.
    """
    normalized = normalize_address(address)
    if not normalized:
        raise InvalidInputError("Address is required")
    try:
        pack = PackType.parse(pack_type)
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from exc
    if page_count < 1:
        raise InvalidDocumentError("Document has no pages")

    state = JobState()
    blobs = [
        NamedBlob(
            filename=uniquify(checklist_name(normalized), state.used_names),
            data=_render(page_renderer, 1),
        )
    ]

    for page_number in range(2, page_count + 1):
        text = _extract(page_extractor, page_number)
        if not text.strip():
            Log.debug(f"Skipping blank page {page_number}")
            continue
        classification = classify(text, pack, state.counters, normalized)
        filename = uniquify(classification.templated_name, state.used_names)
        blobs.append(NamedBlob(filename=filename, data=_render(page_renderer, page_number)))
        Log.debug(f"Page {page_number} -> {filename} ({classification.category.value})")

    Log.info(
        f"Split {page_count} pages into {len(blobs)} files "
        f"({page_count - len(blobs)} blank pages skipped)"
    )
    return blobs


def _extract(page_extractor: PageExtractor, page_number: int) -> str:
    try:
        return page_extractor(page_number)
    except Exception as exc:
        raise PageProcessingError(page_number, f"text extraction failed: {exc}") from exc


def _render(page_renderer: PageRenderer, page_number: int) -> bytes:
    try:
        return page_renderer(page_number)
    except Exception as exc:
        raise PageProcessingError(page_number, f"rendering failed: {exc}") from exc
