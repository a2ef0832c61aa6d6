import logging

import pytest

from checklist_splitter.logging.logger import Log


@pytest.fixture()
def logger():  # type: ignore[no-untyped-def]
    target = logging.getLogger("checklist_splitter")
    handlers, level = list(target.handlers), target.level
    target.handlers.clear()
    yield target
    target.handlers[:] = handlers
    target.setLevel(level)


class TestLogConfigure:
    def test_sets_level_case_insensitively(self, logger: logging.Logger) -> None:
        Log.configure("debug")
        assert logger.level == logging.DEBUG

    def test_adds_a_single_handler(self, logger: logging.Logger) -> None:
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(logger.handlers) == 1


class TestLogMessages:
    def test_routes_levels(self, logger: logging.Logger, caplog: pytest.LogCaptureFixture) -> None:
        logger.setLevel(logging.DEBUG)
        with caplog.at_level(logging.DEBUG, logger="checklist_splitter"):
            Log.debug("Skipping blank page 3")
            Log.info("Wrote archive")
            Log.warning("rasterizing pages")
            Log.error("Job failed")

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            ("DEBUG", "Skipping blank page 3"),
            ("INFO", "Wrote archive"),
            ("WARNING", "rasterizing pages"),
            ("ERROR", "Job failed"),
        ]
