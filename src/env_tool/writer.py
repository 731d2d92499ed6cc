# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Update or append a KEY=value pair inside an env-style file.

Existing ordering, comments and unrelated lines are kept verbatim; the
first assignment of the target key is replaced, otherwise a new line is
appended at the end of the file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from .envfile import (
    EnvFile,
    EnvFileError,
    InvalidAssignmentError,
    PathLike,
    Warn,
    is_comment_or_blank,
    parse_line,
    resolve_env_path,
    warn,
)
from .styles import PLAIN, Styles

Ask = Callable[[str], str]


@dataclass(frozen=True)
class UpsertResult:
    key: str
    value: str
    path: Path
    created: bool
    replaced: bool


def prompt_for_value(key: str, styles: Styles = PLAIN) -> str:
    """Ask on the terminal for a value; end of input counts as empty."""
    try:
        answer = input(styles.prompt(f"Enter a new value for {key}: "))
    except EOFError:
        print()
        answer = ""
    return answer.strip()


def format_value(key: str, value: Optional[str], ask: Ask = prompt_for_value) -> str:
    # Explicit values are stored as given, quoted or not.
    if value is not None:
        return value
    return f'"{ask(key)}"'


def check_key(key: str) -> None:
    """Reject keys that would not parse back to themselves once written."""
    line = f"{key}=x"
    if "\n" in key or "\r" in key or is_comment_or_blank(line):
        raise InvalidAssignmentError(f"invalid key {key!r}")
    parsed = parse_line(line)
    if parsed is None or parsed.key != key:
        raise InvalidAssignmentError(f"invalid key {key!r}")


def check_value(key: str, value: str) -> None:
    if "\n" in value or "\r" in value:
        raise InvalidAssignmentError(f"value for {key} must be a single line")


def upsert(
    path: PathLike,
    key: str,
    value: Optional[str] = None,
    ask: Ask = prompt_for_value,
    warn: Warn = warn,
) -> UpsertResult:
    check_key(key)
    formatted = format_value(key, value, ask)
    check_value(key, formatted)

    env_path = resolve_env_path(path)
    created = False
    if not env_path.exists():
        try:
            env_path.touch()
        except OSError as exc:
            raise EnvFileError(f"cannot create {env_path}: {exc.strerror or exc}") from exc
        created = True

    env_file = EnvFile.load(env_path)
    replaced = env_file.set(key, formatted, warn=warn)
    env_file.save()
    return UpsertResult(key, formatted, env_path, created, replaced)
