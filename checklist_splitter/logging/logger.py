import logging
import sys


class Log:
    """Process-wide logger for job progress and failures."""

    _logger: logging.Logger = logging.getLogger("checklist_splitter")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str) -> None:
        """Log a job or step milestone."""
        cls._logger.info(message)

    @classmethod
    def error(cls, message: str) -> None:
        """Log a failure reported to the user."""
        cls._logger.error(message)

    @classmethod
    def warning(cls, message: str) -> None:
        """Log a degraded path, e.g. rasterizing instead of copying pages."""
        cls._logger.warning(message)

    @classmethod
    def debug(cls, message: str) -> None:
        """Log per-page detail such as skipped blanks and assigned names."""
        cls._logger.debug(message)
