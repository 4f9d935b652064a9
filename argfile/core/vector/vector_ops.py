from __future__ import annotations

from typing import Optional

from argfile.core.errors import allocation_error


def dup_argv(argv: Optional[list[str]]) -> Optional[list[str]]:
    """Return an independent copy of argv, or None when argv is None."""
    if argv is None:
        return None
    try:
        # str is immutable, so a new list is a full copy.
        return list(argv)
    except MemoryError as e:
        raise allocation_error("duplicating argument vector") from e


def free_argv(argv: Optional[list[str]]) -> None:
    """Release every argument and empty the vector in place."""
    if argv is None:
        return
    argv.clear()
