# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Line model shared by the reader and writer for env-style files."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Union

ENV_FILENAME = ".env"
WARN_PREFIX = "[env-tool]"

PathLike = Union[str, Path]
Warn = Callable[[str], None]


class EnvFileError(Exception):
    """Raised when the target file cannot be created, read, decoded or written."""


class EnvFileNotFoundError(EnvFileError):
    """Raised when a file to be read does not exist or is not a regular file."""


class InvalidAssignmentError(ValueError):
    """Raised for a key or value that would not read back as the same assignment."""


def warn(message: str) -> None:
    print(f"{WARN_PREFIX} Warning: {message}", file=sys.stderr)


@dataclass(frozen=True)
class Assignment:
    key: str
    value: str

    def render(self) -> str:
        return f"{self.key}={self.value}"


def is_comment_or_blank(line: str) -> bool:
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def parse_line(line: str) -> Optional[Assignment]:
    """Split ``line`` on its first ``=`` into a stripped key and value.

    Returns ``None`` when there is no ``=``. The key is not validated, so
    ``=value`` yields an empty key.
    """
    key, sep, value = line.strip().partition("=")
    if not sep:
        return None
    return Assignment(key.strip(), value.strip())


def resolve_env_path(path: PathLike) -> Path:
    """Directories resolve to their ``.env``; anything else is used as given."""
    target = Path(path)
    if target.is_dir():
        return target / ENV_FILENAME
    return target


def read_lines(path: Path) -> List[bytes]:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise EnvFileError(f"cannot read {path}: {exc.strerror or exc}") from exc
    # Only \n ends a line; a lone \r stays part of the text.
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return [line[:-1] if line.endswith(b"\r") else line for line in lines]


@dataclass
class RawLine:
    text: str
    assignment: Optional[Assignment] = None

    @classmethod
    def from_text(cls, text: str) -> "RawLine":
        if is_comment_or_blank(text):
            return cls(text)
        return cls(text, parse_line(text))


@dataclass
class EnvFile:
    """Ordered, formatting-preserving contents of one env file."""

    path: Path
    lines: List[RawLine] = field(default_factory=list)

    @classmethod
    def load(cls, path: Path) -> "EnvFile":
        lines: List[RawLine] = []
        for number, raw in enumerate(read_lines(path), start=1):
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise EnvFileError(f"{path}: line {number} is not valid UTF-8 ({exc.reason})") from exc
            lines.append(RawLine.from_text(text))
        return cls(path, lines)

    def set(self, key: str, value: str, warn: Warn = warn) -> bool:
        """Replace the first live assignment of ``key`` or append one.

        Later assignments of the same key are left untouched and reported
        through ``warn``. Returns True when an existing line was replaced.
        """
        replaced = False
        for number, line in enumerate(self.lines, start=1):
            if line.assignment is None or line.assignment.key != key:
                continue
            if replaced:
                warn(f"Duplicate assignment of {key} on line {number} left unchanged.")
                continue
            assignment = Assignment(key, value)
            self.lines[number - 1] = RawLine(assignment.render(), assignment)
            replaced = True

        if not replaced:
            assignment = Assignment(key, value)
            self.lines.append(RawLine(assignment.render(), assignment))
        return replaced

    def dumps(self) -> str:
        return "".join(f"{line.text}\n" for line in self.lines)

    def save(self) -> None:
        try:
            with self.path.open("w", encoding="utf-8", newline="\n") as fh:
                fh.write(self.dumps())
        except OSError as exc:
            raise EnvFileError(f"cannot write {self.path}: {exc.strerror or exc}") from exc
