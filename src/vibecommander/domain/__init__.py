from .entries import (
    DirectoryEntry,
    Entry,
    FileEntry,
    SymlinkEntry,
    UnreadableEntry,
    entry_from_dict,
    entry_to_dict,
)
from .errors import (
    InvalidPathError,
    IoError,
    NotFoundError,
    OpenFailedError,
    OpenFailedReason,
    PermissionDeniedError,
    VibeCommanderError,
    classify_open_failure,
    format_error,
    map_io_error,
)

__all__ = [
    "DirectoryEntry",
    "Entry",
    "FileEntry",
    "SymlinkEntry",
    "UnreadableEntry",
    "entry_from_dict",
    "entry_to_dict",
    "InvalidPathError",
    "IoError",
    "NotFoundError",
    "OpenFailedError",
    "OpenFailedReason",
    "PermissionDeniedError",
    "VibeCommanderError",
    "classify_open_failure",
    "format_error",
    "map_io_error",
]
