"""Command-line front door for lazydash.

Parses CLI options, merges mouse settings from config with flag overrides,
and dispatches into the dashboard or the mouse tracer.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from collections.abc import Sequence
from pathlib import Path

from .mouse import MouseSettings
from .runtime import run_dashboard, run_trace
from .runtime.config import load_mouse_settings


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazydash",
        description="Browse a directory in a mouse-driven split-pane terminal dashboard.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to open. Defaults to current directory.")
    parser.add_argument(
        "--trace-mouse",
        action="store_true",
        help="Print decoded mouse events and classified actions instead of the dashboard.",
    )
    parser.add_argument(
        "--double-click-ms",
        type=_positive_int,
        default=None,
        help="Maximum delay between the presses of a double-click.",
    )
    parser.add_argument(
        "--scroll-delta",
        type=_positive_int,
        default=None,
        help="Lines moved per wheel notch.",
    )
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def resolve_settings(args: argparse.Namespace) -> MouseSettings:
    """Config-file settings with command-line overrides applied."""
    settings = load_mouse_settings()
    if args.double_click_ms is not None:
        settings = dataclasses.replace(settings, double_click_seconds=args.double_click_ms / 1000.0)
    if args.scroll_delta is not None:
        settings = dataclasses.replace(settings, scroll_delta=args.scroll_delta)
    return settings


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazydash.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. A file path opens its parent directory.
    """
    args = build_parser().parse_args(argv)

    if args.log_file is not None:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    settings = resolve_settings(args)
    if args.trace_mouse:
        if args.path is not None:
            raise SystemExit("Cannot combine positional path with --trace-mouse.")
        run_trace(settings)
        return

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    root = path if path.is_dir() else path.parent
    run_dashboard(root, settings)


if __name__ == "__main__":
    main()
