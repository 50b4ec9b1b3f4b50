import os

import pytest

from fdcat.cat import CopyError, cat_fd, cat_paths, copy_fd, main


@pytest.fixture
def out_file(tmp_path):
    path = tmp_path / "out"
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC)
    yield path, fd
    os.close(fd)


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return path


@pytest.mark.parametrize("bufsize", [1, 7, 256 * 1024])
def test_copy_fd_round_trip(tmp_path, out_file, bufsize):
    data = bytes(range(256)) * 40
    src = _write(tmp_path, "in", data)
    out_path, out_fd = out_file
    fd = os.open(src, os.O_RDONLY)
    try:
        assert copy_fd(fd, out_fd, bufsize) == len(data)
    finally:
        os.close(fd)
    assert out_path.read_bytes() == data


def test_copy_fd_empty_input(tmp_path, out_file):
    src = _write(tmp_path, "in", b"")
    out_path, out_fd = out_file
    fd = os.open(src, os.O_RDONLY)
    try:
        assert copy_fd(fd, out_fd, 16) == 0
    finally:
        os.close(fd)
    assert out_path.read_bytes() == b""


def test_copy_fd_rejects_zero_buffer(out_file):
    with pytest.raises(ValueError):
        copy_fd(0, out_file[1], 0)


def test_copy_fd_read_error(tmp_path, out_file):
    fd = os.open(tmp_path / "wo", os.O_WRONLY | os.O_CREAT)
    try:
        with pytest.raises(CopyError) as info:
            copy_fd(fd, out_file[1], 16)
    finally:
        os.close(fd)
    assert info.value.stage == "read"


def test_copy_fd_write_error(tmp_path):
    src = _write(tmp_path, "in", b"hello")
    fd_in = os.open(src, os.O_RDONLY)
    fd_out = os.open(src, os.O_RDONLY)
    try:
        with pytest.raises(CopyError) as info:
            copy_fd(fd_in, fd_out, 16)
    finally:
        os.close(fd_in)
        os.close(fd_out)
    assert info.value.stage == "write"


def test_cat_fd_with_multiplier(tmp_path, out_file):
    data = b"abc" * 1000
    src = _write(tmp_path, "in", data)
    out_path, out_fd = out_file
    fd = os.open(src, os.O_RDONLY)
    try:
        copied = cat_fd(fd, out_fd, 4096, {"CAT5_MULT": "3"})
    finally:
        os.close(fd)
    assert copied == len(data)
    assert out_path.read_bytes() == data


def test_cat_paths_concatenates_in_order(tmp_path, out_file):
    first = _write(tmp_path, "a", b"first\n")
    second = _write(tmp_path, "b", b"second\n")
    out_path, out_fd = out_file
    assert cat_paths([str(first), str(second), str(first)], out_fd, {}) == 0
    assert out_path.read_bytes() == b"first\nsecond\nfirst\n"


def test_cat_paths_missing_file_continues(tmp_path, out_file, capsys):
    good = _write(tmp_path, "good", b"ok")
    missing = tmp_path / "missing"
    out_path, out_fd = out_file
    assert cat_paths([str(missing), str(good)], out_fd, {}) == 1
    assert out_path.read_bytes() == b"ok"
    assert str(missing) in capsys.readouterr().err


def test_cat_paths_dash_reads_stdin(tmp_path, out_file):
    file_part = _write(tmp_path, "f", b"file;")
    out_path, out_fd = out_file
    read_end, write_end = os.pipe()
    os.write(write_end, b"piped;")
    os.close(write_end)
    saved = os.dup(0)
    os.dup2(read_end, 0)
    os.close(read_end)
    try:
        status = cat_paths([str(file_part), "-"], out_fd, {})
    finally:
        os.dup2(saved, 0)
        os.close(saved)
    assert status == 0
    assert out_path.read_bytes() == b"file;piped;"


def test_main_writes_to_stdout(tmp_path, capfd):
    src = _write(tmp_path, "in", b"to stdout\n")
    assert main([str(src)]) == 0
    assert capfd.readouterr().out == "to stdout\n"


def test_main_reports_missing_file(tmp_path, capfd):
    missing = tmp_path / "nope"
    assert main([str(missing)]) == 1
    captured = capfd.readouterr()
    assert captured.out == ""
    assert str(missing) in captured.err