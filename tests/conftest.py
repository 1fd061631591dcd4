import stat
from types import SimpleNamespace
from typing import Optional

import pytest


class FakeChild:
    """Stand-in for os.DirEntry so the classifier can be driven without a disk."""

    def __init__(
        self,
        name: str,
        *,
        mode: int = stat.S_IFREG | 0o644,
        size: int = 0,
        mtime_ns: Optional[int] = 1_700_000_000_000_000_000,
        symlink: bool = False,
        target_is_dir: bool = False,
        stat_error: Optional[OSError] = None,
        is_symlink_error: Optional[OSError] = None,
        is_dir_error: Optional[OSError] = None,
        parent: str = "/fake",
    ):
        self.name = name
        self.path = f"{parent}/{name}"
        self._mode = (stat.S_IFLNK | 0o777) if symlink else mode
        self._size = size
        self._mtime_ns = mtime_ns
        self._symlink = symlink
        self._target_is_dir = target_is_dir
        self._stat_error = stat_error
        self._is_symlink_error = is_symlink_error
        self._is_dir_error = is_dir_error

    def stat(self, *, follow_symlinks: bool = True):
        if self._stat_error is not None:
            raise self._stat_error
        return SimpleNamespace(
            st_mode=self._mode, st_size=self._size, st_mtime_ns=self._mtime_ns
        )

    def is_symlink(self) -> bool:
        if self._is_symlink_error is not None:
            raise self._is_symlink_error
        return self._symlink

    def is_dir(self, *, follow_symlinks: bool = True) -> bool:
        if self._is_dir_error is not None:
            raise self._is_dir_error
        if self._symlink:
            return follow_symlinks and self._target_is_dir
        return stat.S_ISDIR(self._mode)


@pytest.fixture
def fake_child():
    return FakeChild
