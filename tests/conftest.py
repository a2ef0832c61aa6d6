import io
from collections.abc import Callable, Sequence

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


def build_pdf(pages: Sequence[str]) -> bytes:
    """Render one page per entry; an empty entry produces a blank page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in pages:
        for offset, line in enumerate(text.splitlines()):
            c.drawString(72, 720 - offset * 18, line)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def make_pdf() -> Callable[[Sequence[str]], bytes]:
    return build_pdf


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    return build_pdf(["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return build_pdf(["Page one content", "Page two content"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return build_pdf([""])


@pytest.fixture()
def ac_gold_pdf_bytes() -> bytes:
    """Checklist cover, a void BMD page, a blank page and two MTW pages."""
    return build_pdf(
        [
            "INSPECTION CHECKLIST",
            "Void inspection\nbmd works required",
            "",
            "routine maintenance",
            "Kitchen tap washer",
        ]
    )
