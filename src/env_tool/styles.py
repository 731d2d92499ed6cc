# SPDX-FileCopyrightText: 2025 Blackcat Informatics® Inc.
# SPDX-License-Identifier: MIT

"""ANSI styling for terminal output, with a plain no-op variant."""

from __future__ import annotations

from typing import TextIO

RESET = "\x1b[0m"

PROMPT = "\x1b[90m"
ITALIC = "\x1b[3m"
NOTE = "\x1b[90;3m"
KEY = "\x1b[1;34m"
VALUE = "\x1b[1;3;32m"


class Styles:
    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    @classmethod
    def for_stream(cls, stream: TextIO, disabled: bool = False) -> "Styles":
        isatty = getattr(stream, "isatty", None)
        return cls(enabled=not disabled and bool(isatty and isatty()))

    def _wrap(self, code: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"{code}{text}{RESET}"

    def prompt(self, text: str) -> str:
        return self._wrap(PROMPT, text)

    def italic(self, text: str) -> str:
        return self._wrap(ITALIC, text)

    def note(self, text: str) -> str:
        return self._wrap(NOTE, text)

    def key(self, text: str) -> str:
        return self._wrap(KEY, text)

    def value(self, text: str) -> str:
        return self._wrap(VALUE, text)


PLAIN = Styles(enabled=False)
