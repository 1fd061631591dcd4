# Licensed under the Apache License, Version 2.0
from __future__ import annotations

import logging
import os
from pathlib import Path

from ..domain.errors import IoError

logger = logging.getLogger(__name__)

INITIAL_DIR_ENV = "VIBECOMMANDER_INITIAL_DIR"


def get_initial_directory() -> str:
    """
    Directory to show first.

    `VIBECOMMANDER_INITIAL_DIR` wins when it names an existing directory;
    otherwise the user's home directory is used.

    Raises:
        IoError: if no home directory can be determined.
    """
    override = os.getenv(INITIAL_DIR_ENV)
    if override:
        candidate = Path(override).expanduser()
        if candidate.is_dir():
            return str(candidate)
        logger.warning(
            "%s=%r is not a directory; falling back to home", INITIAL_DIR_ENV, override
        )

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise IoError(f"Could not determine home directory: {e}") from e
    return str(home)
