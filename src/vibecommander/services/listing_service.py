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
from typing import Optional, Union

from ..adapters.filesystem.local_fs import LocalFS
from ..domain.entries import Entry
from ..domain.errors import map_io_error
from ..ports.filesystem import FilesystemPort
from .classifier import classify
from .ordering import sort_entries

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]


class ListingService:
    """
    Lists one directory level:
      - opens the directory through the FilesystemPort (fail fast)
      - skips children whose enumeration step fails
      - classifies every remaining child (unreadable children are kept)
      - returns the entries in display order

    Note:
      * No retries and no caching; every call hits the filesystem.
      * Safe to call concurrently; the service holds no mutable state.
    """

    def __init__(self, fs: Optional[FilesystemPort] = None) -> None:
        self._fs = fs or LocalFS()

    def list(self, path: PathArg) -> list[Entry]:
        """
        List the immediate children of `path`.

        Raises:
            NotFoundError, PermissionDeniedError, InvalidPathError, IoError:
                if the directory cannot be opened.
        """
        path_str = os.fsdecode(os.fspath(path))
        entries: list[Entry] = []
        skipped = 0

        try:
            with self._fs.scandir(path_str) as children:
                iterator = iter(children)
                while True:
                    try:
                        child = next(iterator)
                    except StopIteration:
                        break
                    except OSError as e:
                        skipped += 1
                        logger.debug(
                            "ListingService.list: skipped a child of %s: %s", path_str, e
                        )
                        continue
                    entries.append(classify(child, readlink=self._fs.readlink))
        except (OSError, ValueError) as e:
            logger.info("ListingService.list: cannot open %s: %s", path_str, e)
            raise map_io_error(e, path_str) from e

        logger.debug(
            "ListingService.list: %s -> %d entries (%d skipped)",
            path_str,
            len(entries),
            skipped,
        )
        return sort_entries(entries)


def list_directory(path: PathArg, fs: Optional[FilesystemPort] = None) -> list[Entry]:
    """List `path` with the local filesystem unless another port is given."""
    return ListingService(fs).list(path)
