# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import logging
import os
import stat as statmod
from typing import Callable, Optional, Union

from ..domain.entries import (
    DirectoryEntry,
    Entry,
    FileEntry,
    SymlinkEntry,
    UnreadableEntry,
)
from ..ports.filesystem import RawEntry

logger = logging.getLogger(__name__)


def _default_readlink(path: Union[str, bytes]) -> str:
    return os.fsdecode(os.readlink(path))


def modified_seconds(st: os.stat_result) -> Optional[int]:
    """Whole seconds since the Unix epoch, or None if unavailable or pre-epoch."""
    mtime_ns = getattr(st, "st_mtime_ns", None)
    if mtime_ns is None:
        mtime = getattr(st, "st_mtime", None)
        if mtime is None:
            return None
        mtime_ns = int(mtime * 1e9)
    if mtime_ns < 0:
        return None
    return int(mtime_ns // 1_000_000_000)


def classify(
    child: RawEntry,
    readlink: Callable[[Union[str, bytes]], str] = _default_readlink,
) -> Entry:
    """
    Turn one raw directory child into an Entry. Never raises OSError.

    Metadata is read without following links so that a broken symlink still
    yields its own size/mtime; the link target is then resolved separately
    to decide `target_is_dir`.
    """
    name = os.fsdecode(child.name)
    path = os.fsdecode(child.path)

    try:
        meta = child.stat(follow_symlinks=False)
    except OSError as e:
        logger.warning("classify: metadata read failed for %s: %s", path, e)
        return UnreadableEntry(name=name, path=path, reason=str(e))

    try:
        is_link = child.is_symlink()
    except OSError:
        is_link = statmod.S_ISLNK(meta.st_mode)

    modified = modified_seconds(meta)

    if is_link:
        try:
            target = readlink(child.path)
        except (OSError, ValueError) as e:
            logger.debug("classify: readlink failed for %s: %s", path, e)
            target = ""
        try:
            target_is_dir = child.is_dir(follow_symlinks=True)
        except OSError:
            target_is_dir = False
        return SymlinkEntry(
            name=name,
            path=path,
            size=max(0, int(meta.st_size)),
            modified=modified,
            target=target,
            target_is_dir=bool(target_is_dir),
        )

    if statmod.S_ISDIR(meta.st_mode):
        return DirectoryEntry(name=name, path=path, modified=modified)

    return FileEntry(
        name=name,
        path=path,
        size=max(0, int(meta.st_size)),
        modified=modified,
    )
