from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ArgvError(Exception):
    """Base error envelope. Prefer returning/printing these rather than raising raw exceptions."""

    code: str
    message: str
    file: Optional[str] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.file:
            parts.append(self.file)
        if self.path:
            parts.append(self.path)
        loc = ":".join(parts) if parts else "<argv>"
        return f"{loc}: {self.code}: {self.message}"


class ArgvAllocationError(ArgvError):
    pass


@dataclass(frozen=True)
class ResponseFileError(ArgvError):
    """One of the two conditions that stop expansion for good.

    `prog` is argv[0] as it was when expansion began; `diagnostic()` renders
    the fixed message written to stderr by the terminating variant.
    """

    prog: str = ""

    def diagnostic(self) -> str:
        return f"{self.prog}: error: {self.message}\n"


def allocation_error(what: str) -> ArgvAllocationError:
    return ArgvAllocationError(
        code="E_ALLOCATION",
        message=f"out of memory while {what}",
    )
