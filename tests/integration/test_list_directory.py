import os
import sys
from pathlib import Path

import pytest

from vibecommander.domain.entries import (
    DirectoryEntry,
    FileEntry,
    SymlinkEntry,
    UnreadableEntry,
)
from vibecommander.domain.errors import (
    InvalidPathError,
    IoError,
    NotFoundError,
    PermissionDeniedError,
    VibeCommanderError,
)
from vibecommander.services import list_directory

needs_symlinks = pytest.mark.skipif(
    sys.platform.startswith("win"), reason="symlinks need privileges on Windows"
)


def write_file(p: Path, data: bytes = b"") -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(data)


def test_mixed_listing_order(tmp_path: Path):
    (tmp_path / "alpha_dir").mkdir()
    (tmp_path / "beta_dir").mkdir()
    write_file(tmp_path / "charlie.txt")
    write_file(tmp_path / "alpha.txt")
    write_file(tmp_path / "Beta.txt")

    entries = list_directory(str(tmp_path))

    assert [e.name for e in entries] == [
        "alpha_dir",
        "beta_dir",
        "alpha.txt",
        "Beta.txt",
        "charlie.txt",
    ]
    assert all(not isinstance(e, UnreadableEntry) for e in entries)


def test_file_metadata(tmp_path: Path):
    f = tmp_path / "data.bin"
    write_file(f, b"x" * 1234)
    os.utime(f, (1_600_000_000, 1_600_000_000))

    (entry,) = list_directory(tmp_path)

    assert entry == FileEntry(
        name="data.bin", path=str(f), size=1234, modified=1_600_000_000
    )


def test_directory_entry(tmp_path: Path):
    (tmp_path / "sub").mkdir()
    (entry,) = list_directory(tmp_path)
    assert isinstance(entry, DirectoryEntry)
    assert entry.modified is not None and entry.modified > 0


def test_empty_directory_is_empty_list(tmp_path: Path):
    assert list_directory(tmp_path) == []


def test_missing_path_is_not_found(tmp_path: Path):
    missing = str(tmp_path / "does" / "not" / "exist")
    with pytest.raises(NotFoundError) as excinfo:
        list_directory(missing)
    assert excinfo.value.path == missing


@pytest.mark.skipif(
    not hasattr(os, "geteuid") or os.geteuid() == 0,
    reason="needs POSIX permissions and a non-root user",
)
def test_permission_denied(tmp_path: Path):
    restricted = tmp_path / "restricted"
    restricted.mkdir()
    restricted.chmod(0o000)
    try:
        with pytest.raises(PermissionDeniedError) as excinfo:
            list_directory(str(restricted))
    finally:
        restricted.chmod(0o755)
    assert excinfo.value.path == str(restricted)


def test_null_byte_is_rejected_without_crashing():
    with pytest.raises(VibeCommanderError) as excinfo:
        list_directory("/path/with\0null")
    assert isinstance(excinfo.value, (InvalidPathError, IoError))


def test_listing_a_file_is_an_io_error(tmp_path: Path):
    f = tmp_path / "plain.txt"
    write_file(f, b"hi")
    with pytest.raises(IoError) as excinfo:
        list_directory(str(f))
    assert excinfo.value.path == str(f)


@needs_symlinks
def test_broken_symlink_is_listed(tmp_path: Path):
    write_file(tmp_path / "valid.txt", b"content")
    target = "/nonexistent/target/that/does/not/exist"
    os.symlink(target, tmp_path / "broken_link")

    entries = list_directory(str(tmp_path))

    names = [e.name for e in entries]
    assert "valid.txt" in names and "broken_link" in names
    broken = next(e for e in entries if e.name == "broken_link")
    assert isinstance(broken, SymlinkEntry)
    assert broken.target == target
    assert broken.target_is_dir is False


@needs_symlinks
def test_symlink_to_directory_sorts_first(tmp_path: Path):
    real = tmp_path / "zz_real"
    real.mkdir()
    write_file(tmp_path / "aaa.txt")
    os.symlink(str(real), tmp_path / "mm_link")

    entries = list_directory(tmp_path)

    assert [e.name for e in entries] == ["mm_link", "zz_real", "aaa.txt"]
    link = entries[0]
    assert isinstance(link, SymlinkEntry)
    assert link.target_is_dir is True
    assert link.target == str(real)


@needs_symlinks
def test_symlink_to_file_sorts_with_files(tmp_path: Path):
    write_file(tmp_path / "b.txt", b"12345")
    os.symlink("b.txt", tmp_path / "a_link")

    entries = list_directory(tmp_path)

    assert [e.name for e in entries] == ["a_link", "b.txt"]
    assert isinstance(entries[0], SymlinkEntry)
    assert entries[0].target == "b.txt"
    assert entries[0].target_is_dir is False


def test_unicode_names_round_trip(tmp_path: Path):
    names = ["日本語.txt", "émoji_🎉.txt"]
    for n in names:
        write_file(tmp_path / n)
    (tmp_path / "中文目录").mkdir()

    entries = list_directory(str(tmp_path))
    by_name = {e.name: e for e in entries}

    assert entries[0].name == "中文目录"
    for n in names + ["中文目录"]:
        assert n in by_name
        assert by_name[n].name.encode("utf-8") == n.encode("utf-8")


def test_path_ends_with_name_and_sizes_non_negative(tmp_path: Path):
    write_file(tmp_path / "one.txt", b"1")
    write_file(tmp_path / "two.txt")
    (tmp_path / "three").mkdir()

    for e in list_directory(tmp_path):
        assert Path(e.path).name == e.name
        assert os.path.dirname(e.path) == str(tmp_path)
        if isinstance(e, (FileEntry, SymlinkEntry)):
            assert e.size >= 0


def test_repeated_calls_see_fresh_state(tmp_path: Path):
    assert list_directory(tmp_path) == []
    write_file(tmp_path / "new.txt")
    assert [e.name for e in list_directory(tmp_path)] == ["new.txt"]
