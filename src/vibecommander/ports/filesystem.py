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

import os
from abc import ABC, abstractmethod
from typing import ContextManager, Iterator, Protocol, Union


class RawEntry(Protocol):
    """
    The slice of os.DirEntry the classifier relies on.
    Synthetic filesystems in tests provide objects with the same surface.
    """

    @property
    def name(self) -> Union[str, bytes]: ...

    @property
    def path(self) -> Union[str, bytes]: ...

    def is_symlink(self) -> bool: ...

    def is_dir(self, *, follow_symlinks: bool = True) -> bool: ...

    def stat(self, *, follow_symlinks: bool = True) -> os.stat_result: ...


class FilesystemPort(ABC):
    """Abstract interface for read-only directory access."""

    @abstractmethod
    def scandir(self, path: str) -> ContextManager[Iterator[RawEntry]]:
        """
        Open `path` as a directory and return a context manager yielding an
        iterator of its immediate children.

        Raises OSError (or ValueError for malformed path text) when the
        directory cannot be opened.
        """
        raise NotImplementedError

    @abstractmethod
    def readlink(self, path: Union[str, bytes]) -> str:
        """Return the raw target text of the symlink at `path`."""
        raise NotImplementedError
