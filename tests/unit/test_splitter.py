from unittest.mock import MagicMock

import pytest

from checklist_splitter.naming.models import PackType
from checklist_splitter.processor.exceptions import (
    InvalidDocumentError,
    InvalidInputError,
    PageProcessingError,
)
from checklist_splitter.processor.splitter import run_job


def _fake_document(texts: list[str]) -> tuple[MagicMock, MagicMock]:
    """Extractor/renderer pair over 1-based page texts."""
    extractor = MagicMock(side_effect=lambda n: texts[n - 1])
    renderer = MagicMock(side_effect=lambda n: f"%PDF-page-{n}".encode())
    return extractor, renderer


def _run(texts: list[str], pack_type: str = "AC_GOLD", address: str = "10 Elm Rd") -> list:
    extractor, renderer = _fake_document(texts)
    return run_job(len(texts), address, pack_type, extractor, renderer)


class TestAcGoldScenario:
    def test_names_pages(self) -> None:
        blobs = _run(["anything", "Please note: bmd works required", "routine maintenance"])
        assert [b.filename for b in blobs] == [
            "10 ELM RD - INSPECTION CHECKLIST.pdf",
            "10 ELM RD - VOID BMD WORKS.pdf",
            "10 ELM RD - AC GOLD MTW (1).pdf",
        ]

    def test_pairs_each_name_with_its_page(self) -> None:
        blobs = _run(["cover", "BMD WORKS REQUIRED", "mtw"])
        assert [b.data for b in blobs] == [b"%PDF-page-1", b"%PDF-page-2", b"%PDF-page-3"]

    def test_duplicate_unnumbered_names_are_uniquified(self) -> None:
        blobs = _run(["cover", "BMD WORKS REQUIRED", "bmd works required"], address="X")
        assert [b.filename for b in blobs[1:]] == [
            "X - VOID BMD WORKS.pdf",
            "X - VOID BMD WORKS (2).pdf",
        ]


class TestBmdPackScenario:
    def test_names_pages(self) -> None:
        blobs = _run(
            ["cover", "Recharge Work Needed", "bathroom", "kitchen"],
            pack_type="BMD_PACK",
            address="5 Oak Ave",
        )
        assert [b.filename for b in blobs] == [
            "5 OAK AVE - INSPECTION CHECKLIST.pdf",
            "5 OAK AVE - VOID RECHARGEABLE WORKS.pdf",
            "5 OAK AVE - VOID BMD WORKS (1).pdf",
            "5 OAK AVE - VOID BMD WORKS (2).pdf",
        ]

    def test_accepts_pack_type_member(self) -> None:
        extractor, renderer = _fake_document(["cover", "kitchen"])
        blobs = run_job(2, "A", PackType.BMD_PACK, extractor, renderer)
        assert blobs[1].filename == "A - VOID BMD WORKS (1).pdf"


class TestBlankPages:
    def test_first_page_never_inspected_and_always_emitted(self) -> None:
        extractor, renderer = _fake_document(["", "mtw"])
        blobs = run_job(2, "A", "AC_GOLD", extractor, renderer)
        assert blobs[0].filename == "A - INSPECTION CHECKLIST.pdf"
        assert 1 not in [c.args[0] for c in extractor.call_args_list]

    def test_blank_pages_are_dropped_without_touching_counters(self) -> None:
        extractor, renderer = _fake_document(["cover", "a", "   \n\t", "", "b"])
        blobs = run_job(5, "A", "AC_GOLD", extractor, renderer)
        assert [b.filename for b in blobs] == [
            "A - INSPECTION CHECKLIST.pdf",
            "A - AC GOLD MTW (1).pdf",
            "A - AC GOLD MTW (2).pdf",
        ]
        rendered = [c.args[0] for c in renderer.call_args_list]
        assert rendered == [1, 2, 5]

    @pytest.mark.parametrize(
        "texts",
        [
            ["c"],
            ["c", ""],
            ["c", "x", "", "y", " ", "z"],
            ["c", "", "", ""],
        ],
    )
    def test_emits_one_blob_per_non_blank_page_plus_checklist(self, texts: list[str]) -> None:
        blank = sum(1 for t in texts[1:] if not t.strip())
        blobs = _run(texts)
        assert len(blobs) == 1 + (len(texts) - 1 - blank)
        assert len({b.filename for b in blobs}) == len(blobs)


class TestJobScope:
    def test_state_does_not_leak_between_jobs(self) -> None:
        first = _run(["cover", "mtw", "mtw"])
        second = _run(["cover", "mtw", "mtw"])
        assert [b.filename for b in first] == [b.filename for b in second]


class TestInvalidInput:
    @pytest.mark.parametrize("address", ["", "  ", "?!"])
    def test_rejects_empty_address(self, address: str) -> None:
        extractor, renderer = _fake_document(["cover"])
        with pytest.raises(InvalidInputError, match="Address"):
            run_job(1, address, "AC_GOLD", extractor, renderer)
        renderer.assert_not_called()

    def test_rejects_unknown_pack_type(self) -> None:
        extractor, renderer = _fake_document(["cover"])
        with pytest.raises(InvalidInputError, match="Unsupported pack type"):
            run_job(1, "A", "GOLD", extractor, renderer)

    def test_rejects_document_without_pages(self) -> None:
        extractor, renderer = _fake_document([])
        with pytest.raises(InvalidDocumentError):
            run_job(0, "A", "AC_GOLD", extractor, renderer)


class TestPageFailures:
    def test_extraction_error_carries_page_number(self) -> None:
        def extractor(n: int) -> str:
            if n == 3:
                raise RuntimeError("corrupt content stream")
            return "text"

        with pytest.raises(PageProcessingError) as exc_info:
            run_job(4, "A", "AC_GOLD", extractor, lambda n: b"%PDF")
        assert exc_info.value.page_number == 3
        assert "corrupt content stream" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_render_error_on_checklist_page(self) -> None:
        renderer = MagicMock(side_effect=OSError("cannot render"))
        with pytest.raises(PageProcessingError) as exc_info:
            run_job(2, "A", "AC_GOLD", lambda n: "text", renderer)
        assert exc_info.value.page_number == 1
