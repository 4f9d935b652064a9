from __future__ import annotations

from pathlib import Path
from typing import Optional

from argfile.core.logging import get_logger
from argfile.core.model import ResponseFile
from argfile.core.tokenize.build_argv import build_argv, only_whitespace


logger = get_logger(__name__)


def read_response_file(path: str) -> Optional[ResponseFile]:
    """Read and tokenize a response file.

    Returns None when the file cannot be opened or read; callers treat that
    as "not a response file" and keep the @token as-is. Empty or
    whitespace-only files produce a record with no tokens.
    """

    p = Path(path)
    try:
        # newline="" keeps bytes as written; surrogateescape never fails a decode.
        with p.open("r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            contents = f.read()
    except (OSError, ValueError) as e:
        logger.debug("response_file_unreadable", path=path, error=str(e))
        return None

    # Stop at an embedded NUL, like the C string the contents used to be.
    contents = contents.split("\0", 1)[0]

    if only_whitespace(contents):
        return ResponseFile(path=path, contents=contents, tokens=[])
    return ResponseFile(path=path, contents=contents, tokens=build_argv(contents))
