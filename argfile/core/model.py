from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


QuoteMode = Literal["none", "single", "double"]

# C-locale isspace(); str.isspace() would also accept unicode separators.
SPACE_CHARS: frozenset[str] = frozenset(" \t\n\v\f\r")


@dataclass(frozen=True)
class ResponseFile:
    path: str
    contents: str
    tokens: list[str]

    @property
    def count(self) -> int:
        return len(self.tokens)
