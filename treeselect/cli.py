"""Command-line front door for treeselect.

Builds a tree from a directory or a JSON file, runs the prompt on the
controlling terminal, and prints the selected value(s) one per line.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from . import config as user_config
from .config import PromptConfig
from .errors import PromptAbortedError, TreeSelectorError
from .prompt import tree_selector
from .sources import directory_tree, json_tree
from .theme import available_theme_names, resolve_theme

EXIT_CANCELED = 1
EXIT_ABORTED = 130


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
        prog="treeselect",
        description="Pick one or more entries from a tree in the terminal.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to browse. Defaults to current directory.")
    parser.add_argument("--json", metavar="FILE", help="Browse a JSON tree file instead of a directory.")
    parser.add_argument("--message", default=None, help="Prompt message.")
    parser.add_argument("--multiple", action="store_true", help="Select several values; <space> toggles.")
    parser.add_argument("--loop", action="store_true", default=None, help="Wrap around at list ends.")
    parser.add_argument("--allow-cancel", action="store_true", help="Allow <esc> or q to cancel.")
    parser.add_argument("--page-size", type=_positive_int, default=None, help="Visible rows per page.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", default=None, help="Disable color output.")
    parser.add_argument("--all", action="store_true", help="Show hidden directory entries.")
    parser.add_argument("--log-file", metavar="PATH", help="Write diagnostic logs to PATH.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details (with --log-file).")
    return parser


def _configure_logging(log_file: str | None, verbose: bool) -> None:
    # The prompt owns the terminal, so logs only ever go to a file.
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_config(args: argparse.Namespace) -> PromptConfig:
    """Combine CLI arguments with user defaults into a prompt config.

    Command-line flags win over values from the user config file.
    """
    if args.json is not None:
        json_path = Path(args.json)
        if not json_path.is_file():
            raise SystemExit(f"File not found: {json_path}")
        tree = json_tree(json_path)
        message = args.message or f"Select from {json_path.name}"
    else:
        root = Path(args.path) if args.path is not None else Path.cwd()
        if not root.is_dir():
            raise SystemExit(f"Directory not found: {root}")
        tree = directory_tree(root, show_hidden=args.all)
        message = args.message or f"Select from {tree.name}"

    page_size = args.page_size if args.page_size is not None else user_config.load_page_size()
    loop = args.loop if args.loop is not None else user_config.load_loop()
    no_color = args.no_color if args.no_color is not None else user_config.load_no_color()
    theme_name = args.theme if args.theme is not None else user_config.load_theme_name()

    return PromptConfig(
        message=message,
        tree=tree,
        page_size=page_size if page_size is not None else user_config.DEFAULT_PAGE_SIZE,
        loop=loop,
        allow_cancel=args.allow_cancel,
        multiple=args.multiple,
        theme=resolve_theme(theme_name, no_color=no_color or not sys.stdout.isatty()),
    )


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the prompt, and print the answer.

    Returns the process exit status: 0 on selection, 1 on cancel, 130 when
    interrupted.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_file, args.verbose)
    if not sys.stdin.isatty():
        raise SystemExit("treeselect needs an interactive terminal on stdin.")

    prompt_config = build_config(args)
    try:
        answer = asyncio.run(tree_selector(prompt_config))
    except PromptAbortedError:
        return EXIT_ABORTED
    except TreeSelectorError as exc:
        raise SystemExit(str(exc)) from exc

    if answer is None:
        return EXIT_CANCELED
    values = answer if isinstance(answer, list) else [answer]
    for value in values:
        sys.stdout.write(f"{value}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
