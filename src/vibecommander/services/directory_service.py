# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from typing import Optional

from ..adapters.opener.system_opener import SystemOpener
from ..domain.entries import Entry
from ..ports.filesystem import FilesystemPort
from ..ports.opener import OpenerPort
from .listing_service import ListingService, PathArg
from .startup_service import get_initial_directory


class DirectoryService:
    """
    The operations a presentation layer needs: list a directory, find the
    starting directory, open a file externally.
    """

    def __init__(
        self,
        fs: Optional[FilesystemPort] = None,
        opener: Optional[OpenerPort] = None,
    ) -> None:
        self._listing = ListingService(fs)
        self._opener = opener or SystemOpener()

    def list_directory(self, path: PathArg) -> list[Entry]:
        return self._listing.list(path)

    def get_initial_directory(self) -> str:
        return get_initial_directory()

    def open_file(self, path: str) -> None:
        self._opener.open_path(path)


def open_file(path: str) -> None:
    """Open `path` with the system default application."""
    SystemOpener().open_path(path)
