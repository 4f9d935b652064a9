from __future__ import annotations

from argfile.core.errors import allocation_error
from argfile.core.model import SPACE_CHARS, QuoteMode


def consume_whitespace(text: str, pos: int) -> int:
    """Return the index of the first non-whitespace character at or after pos."""
    n = len(text)
    while pos < n and text[pos] in SPACE_CHARS:
        pos += 1
    return pos


def only_whitespace(text: str) -> bool:
    return consume_whitespace(text, 0) == len(text)


def build_argv(text: str) -> list[str]:
    """Split text into arguments using shell-like quoting.

    Fields are separated by whitespace and may be wrapped in single or double
    quotes, which are stripped. A backslash copies the next character
    verbatim, even inside single quotes. Unterminated quotes run to the end
    of the input, and a trailing lone backslash is dropped.

    An empty or whitespace-only string yields a single empty argument.
    """

    argv: list[str] = []
    quote: QuoteMode = "none"
    escaped = False
    n = len(text)

    try:
        pos = consume_whitespace(text, 0)
        while True:
            arg: list[str] = []
            while pos < n:
                ch = text[pos]
                if ch in SPACE_CHARS and quote == "none" and not escaped:
                    break
                if escaped:
                    escaped = False
                    arg.append(ch)
                elif ch == "\\":
                    escaped = True
                elif quote == "single":
                    if ch == "'":
                        quote = "none"
                    else:
                        arg.append(ch)
                elif quote == "double":
                    if ch == '"':
                        quote = "none"
                    else:
                        arg.append(ch)
                elif ch == "'":
                    quote = "single"
                elif ch == '"':
                    quote = "double"
                else:
                    arg.append(ch)
                pos += 1

            argv.append("".join(arg))
            pos = consume_whitespace(text, pos)
            if pos >= n:
                break
    except MemoryError as e:
        raise allocation_error("building argument vector") from e

    return argv
