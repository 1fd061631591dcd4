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
from typing import ContextManager, Iterator, Union

from ...ports.filesystem import FilesystemPort, RawEntry


class LocalFS(FilesystemPort):
    """Local filesystem adapter backed by os.scandir."""

    def scandir(self, path: str) -> ContextManager[Iterator[RawEntry]]:
        # ScandirIterator is both the iterator and its own context manager.
        return os.scandir(path)

    def readlink(self, path: Union[str, bytes]) -> str:
        return os.fsdecode(os.readlink(path))
