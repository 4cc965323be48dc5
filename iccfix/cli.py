"""Command that restores and corrects the ICC index files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from iccfix.correction import LineTooLongError, copy_text_file, correct_file
from iccfix.formatting import format_general_level, format_items

GENERAL_FILE = "indices_icc_general_capitulos.csv"
ITEMS_FILE = "Indices_items_obra.csv"

EXIT_OK = 0
EXIT_FILE_ERROR = 1
EXIT_LINE_TOO_LONG = 2
EXIT_MALFORMED = 3


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="iccfix",
        description="Correct the general and construction-item ICC index files.",
    )
    parser.add_argument("--files-dir", default="archivos", help="directory of the files to correct")
    parser.add_argument("--backup-dir", default="backup", help="directory of the pristine copies")
    parser.add_argument("--general", default=GENERAL_FILE, help="name of the general-level file")
    parser.add_argument("--items", default=ITEMS_FILE, help="name of the construction-items file")
    parser.add_argument(
        "--no-restore",
        action="store_true",
        help="correct the files in place without restoring them from the backup first",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Restore the files from the backup directory, then correct them."""
    args = _parser().parse_args(argv)
    files_dir = Path(args.files_dir)
    backup_dir = Path(args.backup_dir)
    jobs = [(args.general, format_general_level), (args.items, format_items)]

    try:
        if not args.no_restore:
            for name, _ in jobs:
                copy_text_file(files_dir / name, backup_dir / name)
        for name, formatter in jobs:
            correct_file(files_dir / name, formatter)
    except LineTooLongError as error:
        print(f"iccfix: {error}", file=sys.stderr)
        return EXIT_LINE_TOO_LONG
    except OSError as error:
        print(f"iccfix: {error}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except ValueError as error:
        print(f"iccfix: {error}", file=sys.stderr)
        return EXIT_MALFORMED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())