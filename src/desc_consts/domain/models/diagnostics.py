#!/usr/bin/env python3

"""Source positions and error reporting for description processing.

Every component reports problems through an ``ErrorHandler`` callback instead
of raising, so that a single pass can surface all problems at once. The caller
decides what to do with them; ``ErrorCollector`` keeps them in a list and
``logging_handler`` is the documented default sink.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from ...infrastructure.logging import get_logger

logger = get_logger("desc_consts")


@dataclass(frozen=True)
class Pos:
    """Position in a source file."""

    file: str = ""
    line: int = 0
    col: int = 0

    def __str__(self) -> str:
        if not self.file:
            return ""
        if self.col:
            return f"{self.file}:{self.line}:{self.col}"
        return f"{self.file}:{self.line}"


ErrorHandler = Callable[[Pos, str], None]


def logging_handler(pos: Pos, msg: str) -> None:
    """Default error sink: log the diagnostic and carry on."""
    location = str(pos)
    if location:
        logger.error(f"{location}: {msg}")
    else:
        logger.error(msg)


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem."""

    pos: Pos
    msg: str

    def __str__(self) -> str:
        location = str(self.pos)
        return f"{location}: {self.msg}" if location else self.msg


@dataclass
class ErrorCollector:
    """Error handler that records every diagnostic it receives.

    Optionally forwards each diagnostic to another handler, which makes it
    usable as a counting wrapper around a caller-supplied callback.
    """

    forward: ErrorHandler | None = None
    errors: list[Diagnostic] = field(default_factory=list)

    def __call__(self, pos: Pos, msg: str) -> None:
        self.errors.append(Diagnostic(pos, msg))
        if self.forward is not None:
            self.forward(pos, msg)

    @property
    def count(self) -> int:
        return len(self.errors)

    def __bool__(self) -> bool:
        return bool(self.errors)

    def messages(self) -> list[str]:
        return [d.msg for d in self.errors]
