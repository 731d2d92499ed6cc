# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""env-tool: a simple tool to show and set entries of .env files."""

from __future__ import annotations

import argparse
import sys

from .envfile import (
    WARN_PREFIX,
    EnvFileError,
    EnvFileNotFoundError,
    InvalidAssignmentError,
    resolve_env_path,
    warn,
)
from .reader import read_assignments
from .styles import Styles
from .writer import prompt_for_value, upsert

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE = 2

COMMANDS: dict[str, str] = {
    "show": "show",
    "list": "show",
    "set": "set",
    "config": "set",
}

EXAMPLES = """\
examples:
  env-tool show
  env-tool show API_KEY --path ./some/directory
  env-tool set SOME_KEY some_value
  env-tool set SOME_KEY '"quoted value"'
  env-tool set ANOTHER_KEY --path /specific/directory

When VALUE is omitted you are prompted for it and the answer is saved in
double quotes. Values given on the command line are saved exactly as given,
including any surrounding single or double quotes.
"""


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--path",
        nargs="?",
        const="",
        default=".",
        help="Directory containing the .env file, or the file itself (default: current directory)",
    )
    common.add_argument("--no-color", action="store_true", help="Disable coloured output")

    parser = argparse.ArgumentParser(
        prog="env-tool",
        usage="env-tool <command> [options] [args]",
        description=__doc__,
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Print help information")
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    show = sub.add_parser(
        "show",
        aliases=["list"],
        parents=[common],
        help="Show the assignments of the .env file, or a single KEY",
    )
    show.add_argument("key", nargs="?", help="Only show this key")

    set_ = sub.add_parser(
        "set",
        aliases=["config"],
        parents=[common],
        help="Set or update KEY in the .env file, prompting when VALUE is omitted",
    )
    set_.add_argument("key", nargs="?", help="The name of the property to add or update")
    set_.add_argument("value", nargs="?", help="The value to store (prompted for when omitted)")
    return parser


def _error(message: str) -> None:
    print(f"{WARN_PREFIX} error: {message}", file=sys.stderr)


def _resolve_path_option(path: str) -> str:
    if not path:
        warn("'--path' flag provided but no path specified. Using current directory.")
        return "."
    return path


def cmd_show(args: argparse.Namespace, styles: Styles) -> int:
    env_path = resolve_env_path(_resolve_path_option(args.path))
    try:
        assignments = read_assignments(env_path, args.key)
    except EnvFileNotFoundError:
        warn(f".env file not found: {env_path}")
        return EXIT_OK

    print(styles.note(f"Showing: {env_path}"))
    found = False
    for assignment in assignments:
        found = True
        print(f"{styles.key(assignment.key)}: {styles.value(assignment.value)}")

    if args.key is not None and not found:
        warn(f"Key '{args.key}' not found in {env_path}")
    return EXIT_OK


def cmd_set(args: argparse.Namespace, styles: Styles) -> int:
    path = _resolve_path_option(args.path)
    result = upsert(
        path,
        args.key,
        args.value,
        ask=lambda key: prompt_for_value(key, styles),
    )
    print(
        styles.italic("Set ")
        + styles.key(result.key)
        + styles.italic(" to ")
        + styles.value(result.value)
        + styles.italic(" in ")
        + styles.note(str(result.path))
    )
    return EXIT_OK


HANDLERS = {
    "show": cmd_show,
    "set": cmd_set,
}


def main(argv: list[str]) -> int:
    parser = build_parser()

    if not argv or argv[0] in ("-h", "--help"):
        parser.print_help()
        return EXIT_OK

    command = COMMANDS.get(argv[0])
    if command is None:
        _error(f"Unknown command: {argv[0]}")
        parser.print_help()
        return EXIT_USAGE

    args = parser.parse_args(argv)
    if command == "set" and args.key is None:
        _error(f"'{argv[0]}' command requires a key name.")
        parser.print_help()
        return EXIT_USAGE

    styles = Styles.for_stream(sys.stdout, disabled=args.no_color)
    try:
        return HANDLERS[command](args, styles)
    except InvalidAssignmentError as exc:
        _error(str(exc))
        return EXIT_USAGE
    except EnvFileError as exc:
        _error(str(exc))
        return EXIT_IO_ERROR


def run() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":  # pragma: no cover - exercised via callers
    run()
