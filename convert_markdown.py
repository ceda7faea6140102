"""Convert a Markdown tree into a SCORM course package."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from config_loader import ConfigError, resolve_runtime_paths
from courseware import build_course

MISSING_INPUT_MESSAGE = "Please provide the path to the markdown files."


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Return CLI arguments for the course builder."""

    parser = argparse.ArgumentParser(
        description=(
            "Render Markdown files into course pages under resources/, then"
            " regenerate imsmanifest.xml and the pageArray of"
            " config/index.html."
        ),
    )
    parser.add_argument(
        "input_dir",
        nargs="?",
        help="Directory holding the Markdown sources.",
    )
    parser.add_argument("--config", help="Path to config JSON file.")
    parser.add_argument(
        "--base-dir",
        help=(
            "Override the package directory that holds resources/,"
            " imsmanifest.xml and config/index.html."
        ),
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``convert-markdown`` CLI."""

    args = parse_args(argv)
    if not args.input_dir:
        print(MISSING_INPUT_MESSAGE, file=sys.stderr)
        return 1

    try:
        package_layout = resolve_runtime_paths(
            input_dir=args.input_dir,
            config_path=args.config,
            base_dir=args.base_dir,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    build_course(package_layout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
