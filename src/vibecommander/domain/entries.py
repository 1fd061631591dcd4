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

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Optional


@dataclass(frozen=True)
class Entry:
    """
    One classified child of a listed directory.

    Concrete variants are FileEntry, DirectoryEntry, SymlinkEntry and
    UnreadableEntry. More variants may be added later, so callers should
    fall back gracefully on a kind they do not recognise.
    """

    kind: ClassVar[str] = ""

    name: str
    path: str

    @property
    def is_dir(self) -> bool:
        """True for entries that should be listed with the directories."""
        return False


@dataclass(frozen=True)
class FileEntry(Entry):
    """A regular file."""

    kind: ClassVar[str] = "File"

    size: int = 0
    modified: Optional[int] = None


@dataclass(frozen=True)
class DirectoryEntry(Entry):
    """A directory. Directory sizes are not reported."""

    kind: ClassVar[str] = "Directory"

    modified: Optional[int] = None

    @property
    def is_dir(self) -> bool:
        return True


@dataclass(frozen=True)
class SymlinkEntry(Entry):
    """
    A symbolic link.

    `size` and `modified` describe the link itself. `target` is the raw link
    text (empty when it could not be read) and may point nowhere;
    `target_is_dir` is True only when the link resolved to a directory.
    """

    kind: ClassVar[str] = "Symlink"

    size: int = 0
    modified: Optional[int] = None
    target: str = ""
    target_is_dir: bool = False

    @property
    def is_dir(self) -> bool:
        return self.target_is_dir


@dataclass(frozen=True)
class UnreadableEntry(Entry):
    """A child whose metadata could not be fetched."""

    kind: ClassVar[str] = "Unreadable"

    reason: str = ""


ENTRY_TYPES: dict[str, type[Entry]] = {
    cls.kind: cls for cls in (FileEntry, DirectoryEntry, SymlinkEntry, UnreadableEntry)
}


# --- wire format --------------------------------------------------------------


def entry_to_dict(entry: Entry) -> dict[str, Any]:
    """Serialise an entry as an internally tagged mapping ({"type": ..., fields})."""
    data: dict[str, Any] = {"type": entry.kind}
    for f in fields(entry):
        data[f.name] = getattr(entry, f.name)
    return data


def entry_from_dict(data: dict[str, Any]) -> Entry:
    """
    Rebuild an entry produced by `entry_to_dict`.

    Raises:
        ValueError: if the tag is missing or unknown, or a field is missing.
    """
    tag = data.get("type")
    cls = ENTRY_TYPES.get(tag) if isinstance(tag, str) else None
    if cls is None:
        raise ValueError(f"Unknown entry type: {tag!r}")

    kwargs = {}
    for f in fields(cls):
        if f.name in data:
            kwargs[f.name] = data[f.name]
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise ValueError(f"Malformed {tag} entry: {e}") from e
