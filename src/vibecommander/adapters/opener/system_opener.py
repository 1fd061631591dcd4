# Licensed under the Apache License, Version 2.0
from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import Callable, Optional

from ...domain.errors import (
    OpenFailedError,
    OpenFailedReason,
    classify_open_failure,
    classify_open_oserror,
)
from ...ports.opener import OpenerPort

logger = logging.getLogger(__name__)

LAUNCH_TIMEOUT_S = 30


class SystemOpener(OpenerPort):
    """
    Opens paths with the platform default handler:
      - Windows: os.startfile
      - macOS:   `open <path>`
      - others:  `xdg-open <path>`

    The failure reason is taken from the OSError errno when the launch raises,
    otherwise sniffed from the launcher's stderr (best effort).
    """

    def __init__(
        self,
        platform: Optional[str] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        self._platform = platform or sys.platform
        self._runner = runner

    def _command(self, path: str) -> list[str]:
        if self._platform == "darwin":
            return ["open", path]
        return ["xdg-open", path]

    def open_path(self, path: str) -> None:
        if not os.path.exists(path):
            raise OpenFailedError(path, OpenFailedReason.NOT_FOUND)

        if self._platform.startswith("win"):
            try:
                os.startfile(path)  # type: ignore[attr-defined]
            except OSError as e:
                logger.warning("SystemOpener: startfile failed for %s: %s", path, e)
                raise OpenFailedError(path, classify_open_oserror(e)) from e
            return

        cmd = self._command(path)
        try:
            proc = self._runner(
                cmd, capture_output=True, text=True, timeout=LAUNCH_TIMEOUT_S
            )
        except FileNotFoundError as e:
            # The launcher itself is missing, not the target.
            logger.warning("SystemOpener: launcher %s unavailable: %s", cmd[0], e)
            raise OpenFailedError(path, OpenFailedReason.NO_DEFAULT_APP) from e
        except OSError as e:
            logger.warning("SystemOpener: %s failed for %s: %s", cmd[0], path, e)
            raise OpenFailedError(path, classify_open_oserror(e)) from e
        except subprocess.TimeoutExpired as e:
            logger.warning("SystemOpener: %s timed out for %s", cmd[0], path)
            raise OpenFailedError(path, OpenFailedReason.UNKNOWN) from e

        if proc.returncode != 0:
            message = (proc.stderr or proc.stdout or "").strip()
            logger.warning(
                "SystemOpener: %s exited %s for %s: %s",
                cmd[0],
                proc.returncode,
                path,
                message,
            )
            raise OpenFailedError(path, classify_open_failure(message))

        logger.debug("SystemOpener: opened %s via %s", path, cmd[0])
