"""Error type and coloured error reporting."""

from __future__ import annotations

import os
import sys
from typing import TextIO

RED = "\033[1;31m"
RESET = "\033[0m"


def format_error(error_code: int = 0, message: str | None = None) -> str:
    """Build the text of an error from an errno value and/or a message.

    With both, the system description comes first, joined by ": ".
    With neither, the result is empty.
    """
    if error_code and message is not None:
        return f"{os.strerror(error_code)}: {message}"
    if error_code:
        return os.strerror(error_code)
    if message is not None:
        return message
    return ""


class CubError(Exception):
    """Raised when a scene, texture or display cannot be set up."""

    def __init__(self, message: str | None = None, error_code: int = 0) -> None:
        self.message = message
        self.error_code = error_code
        super().__init__(format_error(error_code, message))


def report(error: BaseException | str, stream: TextIO | None = None) -> None:
    """Write an error in bold red to ``stream`` (standard error by default)."""
    text = error if isinstance(error, str) else str(error)
    if not text:
        return
    out = sys.stderr if stream is None else stream
    out.write(f"{RED}{text}\n{RESET}")