"""Buffer sizing for descriptor copies: page size, block size and multiplier."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping

BASE_BUFFER_SIZE = 256 * 1024
FALLBACK_PAGE_SIZE = 4096
MULTIPLIER_VARIABLE = "CAT5_MULT"

_LEADING_NUMBER = re.compile(r"\s*\+?(\d+)")


def page_size() -> int:
    """Return the system memory page size, or 4096 if it cannot be determined."""
    try:
        size = os.sysconf("SC_PAGE_SIZE")
    except (AttributeError, ValueError, OSError):
        return FALLBACK_PAGE_SIZE
    return size if size > 0 else FALLBACK_PAGE_SIZE


def multiplier_from_env(environ: Mapping[str, str] | None = None) -> int:
    """Read the buffer multiplier from ``CAT5_MULT``; anything unusable gives 1.

    Like ``strtoul``, leading whitespace is skipped and trailing junk after the
    digits is ignored. Zero and values without leading digits fall back to 1.
    """
    if environ is None:
        environ = os.environ
    raw = environ.get(MULTIPLIER_VARIABLE)
    if raw is None:
        return 1
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return 1
    value = int(match.group(1))
    return value if value > 0 else 1


def buffer_size(pagesize: int, blocksize: int, multiplier: int = 1) -> int:
    """Return 256 KiB times ``multiplier``, rounded up to max(pagesize, blocksize)."""
    alignment = max(pagesize, blocksize)
    if alignment <= 0:
        raise ValueError("page size or block size must be positive")
    if multiplier <= 0:
        raise ValueError("multiplier must be positive")
    size = BASE_BUFFER_SIZE * multiplier
    remainder = size % alignment
    if remainder:
        size += alignment - remainder
    return size


def block_size(fd: int, pagesize: int) -> int:
    """Return the preferred I/O block size of ``fd``.

    If the descriptor cannot be examined, a diagnostic is written to stderr
    and ``pagesize`` is returned instead.
    """
    try:
        info = os.fstat(fd)
    except OSError as exc:
        print(f"fstat: {exc.strerror}", file=sys.stderr)
        return pagesize
    blksize = getattr(info, "st_blksize", 0)
    return blksize if blksize > 0 else pagesize