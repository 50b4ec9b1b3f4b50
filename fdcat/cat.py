"""Concatenate files or standard input onto a file descriptor."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping, Sequence

from fdcat.buffers import block_size, buffer_size, multiplier_from_env, page_size

STDIN_FILENO = 0
STDOUT_FILENO = 1


class CopyError(Exception):
    """A read or write failed while copying between descriptors."""

    def __init__(self, stage: str, error: OSError) -> None:
        super().__init__(f"{stage}: {error.strerror or error}")
        self.stage = stage
        self.error = error


def _write_all(fd_out: int, data: memoryview) -> None:
    while data:
        try:
            written = os.write(fd_out, data)
        except OSError as exc:
            raise CopyError("write", exc) from exc
        data = data[written:]


def copy_fd(fd_in: int, fd_out: int, bufsize: int) -> int:
    """Copy everything from ``fd_in`` to ``fd_out`` in chunks of ``bufsize``.

    Returns the number of bytes copied. Short writes are completed; a failed
    read or write raises :class:`CopyError`.
    """
    if bufsize <= 0:
        raise ValueError("buffer size must be positive")
    total = 0
    while True:
        try:
            chunk = os.read(fd_in, bufsize)
        except OSError as exc:
            raise CopyError("read", exc) from exc
        if not chunk:
            return total
        _write_all(fd_out, memoryview(chunk))
        total += len(chunk)


def _advise_sequential(fd: int) -> None:
    advise = getattr(os, "posix_fadvise", None)
    if advise is None:
        return
    try:
        advise(fd, 0, 0, os.POSIX_FADV_SEQUENTIAL)
    except OSError as exc:
        print(f"posix_fadvise(SEQUENTIAL) failed: {exc.strerror}", file=sys.stderr)


def cat_fd(
    fd_in: int,
    fd_out: int,
    pagesize: int | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Copy ``fd_in`` to ``fd_out`` with a buffer sized for the input.

    Returns the number of bytes copied; raises :class:`CopyError` on failure.
    """
    if pagesize is None:
        pagesize = page_size()
    blocksize = block_size(fd_in, pagesize)
    if fd_in != STDIN_FILENO:
        _advise_sequential(fd_in)
    bufsize = buffer_size(pagesize, blocksize, multiplier_from_env(environ))
    return copy_fd(fd_in, fd_out, bufsize)


def cat_paths(
    paths: Iterable[str],
    fd_out: int,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Copy each path (``-`` meaning standard input) to ``fd_out`` in order.

    With no paths, standard input is copied. Failures are reported on stderr
    and the remaining paths are still processed. Returns 0 on success, 1 if
    anything failed.
    """
    pagesize = page_size()
    paths = list(paths)
    if not paths:
        try:
            cat_fd(STDIN_FILENO, fd_out, pagesize, environ)
        except CopyError as exc:
            print(exc, file=sys.stderr)
            return 1
        return 0

    status = 0
    for path in paths:
        if path == "-":
            fd = STDIN_FILENO
        else:
            try:
                fd = os.open(path, os.O_RDONLY)
            except OSError as exc:
                print(f"{path}: {exc.strerror}", file=sys.stderr)
                status = 1
                continue
        try:
            cat_fd(fd, fd_out, pagesize, environ)
        except CopyError as exc:
            print(exc, file=sys.stderr)
            status = 1
        finally:
            if fd != STDIN_FILENO:
                try:
                    os.close(fd)
                except OSError as exc:
                    print(f"close: {exc.strerror}", file=sys.stderr)
                    status = 1
    return status


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: concatenate the named files onto standard output."""
    if argv is None:
        argv = sys.argv[1:]
    return cat_paths(argv, STDOUT_FILENO, os.environ)


if __name__ == "__main__":
    sys.exit(main())