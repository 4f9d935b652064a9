from __future__ import annotations

from pathlib import Path

from argfile.core.model import SPACE_CHARS


_ESCAPED: frozenset[str] = SPACE_CHARS | {"'", '"', "\\"}


def quote_arg(arg: str) -> str:
    """Escape arg so build_argv reads it back as a single argument."""
    if arg == "":
        return '""'
    return "".join("\\" + ch if ch in _ESCAPED else ch for ch in arg)


def write_argv(argv: list[str], path: str | Path) -> None:
    """Write argv as a response file, one argument per line."""
    p = Path(path)
    if str(p.parent) not in (".", ""):
        p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        for arg in argv:
            f.write(quote_arg(arg))
            f.write("\n")
