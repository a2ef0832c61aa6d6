import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from checklist_splitter.config.settings import Settings
from checklist_splitter.logging.logger import Log
from checklist_splitter.naming.models import PackType
from checklist_splitter.processor.models import JobRequest
from checklist_splitter.processor.processor import build_processor
from checklist_splitter.worker.job_runner import JobRunner


def parse_args(argv: Sequence[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="checklist-splitter",
        description=(
            "Split an Inspection Checklist PDF into named single-page PDFs "
            "and package them into a ZIP archive."
        ),
    )
    parser.add_argument("input", type=Path, help="Path to the Inspection Checklist PDF")
    parser.add_argument("--address", required=True, help="Site address used in file names")
    parser.add_argument(
        "--pack-type",
        required=True,
        choices=[p.value for p in PackType],
        help="Classification rules for pages after the checklist",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=settings.output_dir,
        help="Directory for the output archive (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> processor -> run one job."""
    settings = Settings()
    Log.configure(settings.log_level)
    args = parse_args(argv, settings)

    processor = build_processor(settings)
    runner = JobRunner(processor)
    return runner.run(
        JobRequest(
            input_path=args.input,
            address=args.address,
            pack_type=args.pack_type,
            output_dir=args.output_dir,
        )
    )


if __name__ == "__main__":
    sys.exit(main())
