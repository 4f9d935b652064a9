from __future__ import annotations

import os
import stat
import sys

from argfile.core.errors import ArgvError, ResponseFileError, allocation_error
from argfile.core.expand.expand_config import DEFAULT_ITERATION_LIMIT
from argfile.core.io.read_response_file import read_response_file
from argfile.core.logging import get_logger
from argfile.core.vector.vector_ops import dup_argv


logger = get_logger(__name__)


def _is_directory(filename: str) -> bool:
    """True only when filename can be stat()ed and is a directory.

    Any stat failure means "not a directory"; the read that follows then
    fails too and the token is kept.
    """
    if not filename:
        return False
    try:
        st = os.stat(filename)
    except (OSError, ValueError):
        return False
    return stat.S_ISDIR(st.st_mode)


def try_expand_argv(
    argc: int,
    argv: list[str],
    *,
    iteration_limit: int = DEFAULT_ITERATION_LIMIT,
) -> tuple[int, list[str]]:
    """Expand @file arguments in argv[1:argc].

    Returns (argc, argv). When no @file was expanded the caller's own list is
    returned; otherwise a new list is built on the first splice and the
    caller's list is left untouched.

    Raises ResponseFileError when an @file names a directory or when the
    iteration budget runs out.
    """

    if argc < 0 or argc > len(argv):
        raise ArgvError(
            code="E_ARGC_MISMATCH",
            message=f"argc={argc} does not fit an argument list of length {len(argv)}",
            path="argc",
        )
    if iteration_limit < 1:
        raise ArgvError(
            code="E_ITERATION_LIMIT",
            message=f"iteration_limit must be >= 1, got {iteration_limit}",
            path="iteration_limit",
        )

    original = argv
    prog = argv[0] if argc > 0 else ""
    remaining = iteration_limit

    i = 1
    while i < argc:
        token = argv[i]
        if not token.startswith("@"):
            i += 1
            continue

        filename = token[1:]
        if _is_directory(filename):
            logger.debug("response_file_fatal", path=filename, reason="directory")
            raise ResponseFileError(
                code="E_ARGFILE_DIRECTORY",
                message="@-file refers to a directory",
                file=filename,
                prog=prog,
            )

        remaining -= 1
        if remaining == 0:
            logger.debug("response_file_fatal", path=filename, reason="too_many")
            raise ResponseFileError(
                code="E_ARGFILE_TOO_MANY",
                message="too many @-files encountered",
                file=filename,
                prog=prog,
            )

        rf = read_response_file(filename)
        if rf is None:
            i += 1
            continue

        if argv is original:
            argv = dup_argv(argv)
            assert argv is not None

        try:
            argv[i : i + 1] = rf.tokens
        except MemoryError as e:
            raise allocation_error("splicing response file arguments") from e
        argc += rf.count - 1

        if rf.count:
            logger.debug(
                "response_file_expanded",
                path=filename,
                token_count=rf.count,
                argc=argc,
                remaining=remaining,
            )
        else:
            logger.debug("response_file_empty", path=filename, argc=argc)
        # Rescan position i: the spliced tokens may name response files too.

    return argc, argv


def expand_argv(
    argc: int,
    argv: list[str],
    *,
    iteration_limit: int = DEFAULT_ITERATION_LIMIT,
) -> tuple[int, list[str]]:
    """Like try_expand_argv, but report fatal conditions and exit with status 1."""
    try:
        return try_expand_argv(argc, argv, iteration_limit=iteration_limit)
    except ResponseFileError as e:
        sys.stderr.write(e.diagnostic())
        sys.stderr.flush()
        raise SystemExit(1) from e


def expand_args(argv: list[str], *, iteration_limit: int = DEFAULT_ITERATION_LIMIT) -> list[str]:
    """Expand a whole argument list; argv[0] is the program name."""
    _, out = expand_argv(len(argv), argv, iteration_limit=iteration_limit)
    return out
