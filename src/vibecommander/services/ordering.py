# Licensed under the Apache License, Version 2.0
from __future__ import annotations

from typing import Iterable

from ..domain.entries import Entry


def sort_key(entry: Entry) -> tuple[bool, str]:
    return (not entry.is_dir, entry.name.lower())


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """
    Return entries in display order: directory-like entries first, then by
    lowercased name. The sort is stable, so names that differ only by case
    keep their input order.
    """
    return sorted(entries, key=sort_key)
