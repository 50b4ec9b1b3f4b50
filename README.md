# fdcat

`fdcat` copies files, or standard input, to standard output, much like `cat`.
It reads and writes in large buffers. The buffer size starts at 256 KiB and
is rounded up to a multiple of whichever is larger: the system page size or
the input's preferred block size.

## Installation

```
pip install .
```

## Command line

```
fdcat [FILE ...]
```

- When you give no arguments, `fdcat` reads standard input.
- A single `-` stands for standard input wherever it appears in the list.
- Files are written out in the order you give them.
- If a file cannot be opened, `fdcat` reports it on standard error, continues
  with the remaining files, and exits with status 1 at the end.
- If a read or write fails, `fdcat` reports it on standard error, stops copying
  that input, goes on to the next one, and exits with status 1.
- If all inputs are copied, the exit status is 0.

Examples:

```
fdcat notes.txt
fdcat header.txt - footer.txt < body.txt
```

### Buffer size

Set the environment variable `CAT5_MULT` to a positive integer to multiply
the 256 KiB base buffer. Leading whitespace and a leading `+` are accepted,
and anything after the digits is ignored. A missing value, zero, or a value
that does not start with digits leaves the multiplier at 1.

```
CAT5_MULT=4 fdcat big.bin > copy.bin
```

Where the platform provides `os.posix_fadvise`, `fdcat` tells the kernel that
the files it opens will be read sequentially. It does not do this for
standard input. A failure is reported on standard error and does not stop the
copy.

## Library use

```python
import os
from fdcat.buffers import page_size, block_size, buffer_size, multiplier_from_env
from fdcat.cat import CopyError, copy_fd, cat_fd, cat_paths

pagesize = page_size()
size = buffer_size(pagesize, block_size(0, pagesize), multiplier_from_env(os.environ))
status = cat_paths(["a.txt", "b.txt"], 1, os.environ)
```

`fdcat.buffers`:

- `page_size()` returns the system page size. If the size cannot be
  determined, it returns 4096.
- `multiplier_from_env(environ)` reads `CAT5_MULT` from the mapping you pass.
  It uses `os.environ` when you pass `None`.
- `buffer_size(pagesize, blocksize, multiplier=1)` returns 256 KiB × multiplier,
  rounded up to `max(pagesize, blocksize)`. It raises `ValueError` for a
  non-positive alignment or multiplier.
- `block_size(fd, pagesize)` returns the descriptor's `st_blksize`. If `fstat`
  fails, it reports the error on stderr and returns `pagesize`.

`fdcat.cat`:

- `copy_fd(fd_in, fd_out, bufsize)` copies one descriptor to another until end
  of file, completing short writes. It returns the number of bytes copied and
  raises `CopyError` if a read or write fails.
- `cat_fd(fd_in, fd_out, pagesize=None, environ=None)` sizes the buffer for
  the input, then calls `copy_fd`. It returns the number of bytes copied and
  raises `CopyError` on failure.
- `cat_paths(paths, fd_out, environ=None)` copies each path in turn, with `-`
  meaning standard input. With no paths, it copies standard input. It returns
  0 on success and 1 if anything failed.
- `CopyError` carries `stage` (`"read"` or `"write"`) and the underlying
  `OSError` as `error`.
- `main(argv=None)` is the entry point the `fdcat` command calls. It returns
  the exit status.

## What it does not do

`fdcat` takes no options. It has no line numbering, no display of
non-printing characters, and no squeezing of blank lines. Every argument
other than `-` is treated as a file name.