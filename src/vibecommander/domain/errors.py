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

import errno
from enum import Enum
from typing import Any, Optional


class OpenFailedReason(str, Enum):
    """Why opening a path in an external application failed (best effort)."""

    PERMISSION_DENIED = "PermissionDenied"
    NOT_FOUND = "NotFound"
    NO_DEFAULT_APP = "NoDefaultApp"
    UNKNOWN = "Unknown"

    @property
    def phrase(self) -> str:
        return _REASON_PHRASES[self]


_REASON_PHRASES = {
    OpenFailedReason.PERMISSION_DENIED: "permission denied",
    OpenFailedReason.NOT_FOUND: "file not found",
    OpenFailedReason.NO_DEFAULT_APP: "no default application",
    OpenFailedReason.UNKNOWN: "unknown error",
}


class VibeCommanderError(Exception):
    """Base exception for domain-specific errors."""

    kind = "Error"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind}


class NotFoundError(VibeCommanderError):
    """The path does not exist."""

    kind = "NotFound"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Not found: {path}")

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "path": self.path}


class PermissionDeniedError(VibeCommanderError):
    """Access to the path was refused."""

    kind = "PermissionDenied"

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Permission denied: {path}")

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "path": self.path}


class InvalidPathError(VibeCommanderError):
    """The path text itself is unusable (e.g. embedded NUL)."""

    kind = "InvalidPath"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid path: {message}")

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "message": self.message}


class IoError(VibeCommanderError):
    """Catch-all for other I/O failures."""

    kind = "Io"

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.message = message
        self.path = path
        super().__init__(f"IO error: {message}")

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "message": self.message, "path": self.path}


class OpenFailedError(VibeCommanderError):
    """Opening a path with the default application failed."""

    kind = "OpenFailed"

    def __init__(self, path: str, reason: OpenFailedReason) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to open: {path}")

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "path": self.path, "reason": self.reason.value}


# --- mapping ------------------------------------------------------------------

_NOT_FOUND_ERRNOS = {errno.ENOENT}
_PERMISSION_ERRNOS = {errno.EACCES, errno.EPERM}


def map_io_error(err: BaseException, path: str) -> VibeCommanderError:
    """
    Translate a low-level failure for `path` into the domain taxonomy.

    OSError is switched on its errno; ValueError (raised by os functions for
    paths with embedded NUL bytes or unencodable characters) becomes
    InvalidPathError. Everything else is an IoError carrying the original text.
    """
    if isinstance(err, ValueError):
        return InvalidPathError(f"{err}: {path!r}")

    if isinstance(err, OSError):
        if isinstance(err, FileNotFoundError) or err.errno in _NOT_FOUND_ERRNOS:
            return NotFoundError(path)
        if isinstance(err, PermissionError) or err.errno in _PERMISSION_ERRNOS:
            return PermissionDeniedError(path)

    return IoError(str(err), path)


def classify_open_failure(message: str) -> OpenFailedReason:
    """
    Guess why an external launcher failed from its free-text error output.

    This is a heuristic over human-readable text and can misclassify, in
    particular on non-English locales. Prefer `classify_open_oserror` when a
    structured OSError is available.
    """
    lower = (message or "").lower()
    if "permission" in lower or "access denied" in lower:
        return OpenFailedReason.PERMISSION_DENIED
    if "not found" in lower or "no such file" in lower:
        return OpenFailedReason.NOT_FOUND
    if "no application" in lower or "no default" in lower:
        return OpenFailedReason.NO_DEFAULT_APP
    return OpenFailedReason.UNKNOWN


def classify_open_oserror(err: OSError) -> OpenFailedReason:
    """Classify an OSError raised while launching, using errno first."""
    if isinstance(err, FileNotFoundError) or err.errno in _NOT_FOUND_ERRNOS:
        return OpenFailedReason.NOT_FOUND
    if isinstance(err, PermissionError) or err.errno in _PERMISSION_ERRNOS:
        return OpenFailedReason.PERMISSION_DENIED
    return classify_open_failure(str(err))


def format_error(err: VibeCommanderError) -> str:
    """User-facing one-line message for an error."""
    if isinstance(err, (PermissionDeniedError, NotFoundError)):
        return str(err)
    if isinstance(err, (InvalidPathError, IoError)):
        return err.message
    if isinstance(err, OpenFailedError):
        return f"Failed to open {err.path}: {err.reason.phrase}"
    return str(err) or err.kind
