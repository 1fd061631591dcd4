# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from abc import ABC, abstractmethod


class OpenerPort(ABC):
    """Opens a path with whatever application the platform associates with it."""

    @abstractmethod
    def open_path(self, path: str) -> None:
        """
        Hand `path` to the default application.

        Raises:
            OpenFailedError: when the launch fails.
        """
        raise NotImplementedError
