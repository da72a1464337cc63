"""Command-line front door for gameshelf.

Parses CLI options, resolves the manifest, and either prints it or starts the
interactive launcher.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .app import run_app
from .logging_setup import setup_logging
from .manifest import MANIFEST_CONFIG_NAME, EngineConfig, init_config
from .render import UITheme, available_theme_names, resolve_theme
from .render.ansi import clip_ansi_line, display_width, pad_ansi_line

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def format_manifest(config: EngineConfig, theme: UITheme, max_cols: int) -> str:
    """Render tabs and their games as indexed plain-terminal lines."""
    out: list[str] = []
    for tab_idx, tab in enumerate(config.tabs):
        out.append(clip_ansi_line(f"{theme.title}{tab_idx}:{tab.name}{theme.reset}", max_cols) + theme.reset)
        if not tab.items:
            out.append(clip_ansi_line(f"  {theme.dim}(no games){theme.reset}", max_cols) + theme.reset)
            continue
        index_w = len(str(len(tab.items) - 1))
        name_w = max(display_width(item.name) for item in tab.items)
        for item_idx, item in enumerate(tab.items):
            name = pad_ansi_line(f"{theme.item_name}{item.name}{theme.reset}", name_w)
            row = f"  {theme.item_index}{item_idx:>{index_w}}{theme.reset}  {name}  {theme.item_path}{item.path}"
            out.append(clip_ansi_line(row, max_cols) + theme.reset)
    return "".join(line + "\n" for line in out)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the tabbed program launcher."""
    parser = argparse.ArgumentParser(
        description="Browse programs grouped into tabs and launch them from the terminal."
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        default=None,
        help=f"Manifest path (default: nearest {MANIFEST_CONFIG_NAME} in this or a parent directory).",
    )
    parser.add_argument(
        "--tick-rate",
        type=_positive_int,
        default=None,
        metavar="MS",
        help="Redraw interval in milliseconds for this session (overrides the manifest).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--list", action="store_true", help="Print tabs and games, then exit.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write the session log to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.verbose)
    config, manifest_path = init_config(Path.cwd(), args.manifest)

    if args.list:
        theme = resolve_theme(args.theme, no_color=args.no_color or not sys.stdout.isatty())
        columns = shutil.get_terminal_size((80, 24)).columns
        sys.stdout.write(format_manifest(config, theme, max(1, columns)))
        return

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        raise SystemExit("gameshelf needs an interactive terminal (use --list to print the manifest).")

    tick_seconds = args.tick_rate / 1000.0 if args.tick_rate is not None else None
    run_app(config, manifest_path, resolve_theme(args.theme, no_color=args.no_color), tick_seconds)


if __name__ == "__main__":
    main()
