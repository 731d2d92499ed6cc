# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""Show and update KEY=value entries of .env files.

The parsing and rewriting logic lives in :mod:`env_tool.envfile`; the
command-line surface in :mod:`env_tool.cli` is a thin layer on top of
:func:`env_tool.reader.read_assignments` and :func:`env_tool.writer.upsert`.
"""

from .envfile import (
    Assignment,
    EnvFile,
    EnvFileError,
    EnvFileNotFoundError,
    InvalidAssignmentError,
    parse_line,
    resolve_env_path,
)
from .reader import find_assignment, read_assignments
from .writer import UpsertResult, format_value, upsert

__version__ = "0.1.0"

__all__: list[str] = [
    "Assignment",
    "EnvFile",
    "EnvFileError",
    "EnvFileNotFoundError",
    "InvalidAssignmentError",
    "UpsertResult",
    "find_assignment",
    "format_value",
    "parse_line",
    "read_assignments",
    "resolve_env_path",
    "upsert",
]
