# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Read KEY=value assignments from an env-style file."""

from __future__ import annotations

from typing import Iterator, List, Optional

from .envfile import (
    Assignment,
    EnvFileNotFoundError,
    PathLike,
    Warn,
    is_comment_or_blank,
    parse_line,
    read_lines,
    resolve_env_path,
    warn,
)


def read_assignments(path: PathLike, key: Optional[str] = None, warn: Warn = warn) -> Iterator[Assignment]:
    """Return an iterator over the assignments of the file at ``path``.

    The file is read up front, so a missing target raises
    ``EnvFileNotFoundError`` here rather than on first iteration. With
    ``key`` set, at most the first matching assignment is produced.
    """
    env_path = resolve_env_path(path)
    if not env_path.is_file():
        raise EnvFileNotFoundError(f"No .env file found at {env_path}")
    return _iter_assignments(read_lines(env_path), key, warn)


def _iter_assignments(raw_lines: List[bytes], key: Optional[str], warn: Warn) -> Iterator[Assignment]:
    for number, raw in enumerate(raw_lines, start=1):
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            warn(f"Error reading line {number}: {exc.reason}")
            continue
        if is_comment_or_blank(line):
            continue

        assignment = parse_line(line)
        if key is not None:
            if assignment is not None and assignment.key == key:
                yield assignment
                return
            continue
        if assignment is None:
            warn(f"Line {number} is not in KEY=VALUE format.")
            continue
        yield assignment


def find_assignment(path: PathLike, key: str, warn: Warn = warn) -> Optional[Assignment]:
    return next(read_assignments(path, key, warn), None)
