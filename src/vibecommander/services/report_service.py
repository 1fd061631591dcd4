# Licensed under the Apache License, Version 2.0 (the "License");
# ...
from __future__ import annotations

import csv
import io
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from ..domain.entries import (
    DirectoryEntry,
    Entry,
    FileEntry,
    SymlinkEntry,
    UnreadableEntry,
    entry_to_dict,
)

FORMATS: tuple[str, ...] = ("table", "json", "ndjson", "csv")

CSV_FIELDS = [
    "type",
    "name",
    "path",
    "size",
    "modified",
    "target",
    "target_is_dir",
    "reason",
]


def _fmt_modified(modified: Optional[int]) -> str:
    if modified is None:
        return "-"
    return datetime.fromtimestamp(modified, tz=timezone.utc).strftime("%Y-%m-%d %H:%M")


def _table_row(entry: Entry) -> tuple[str, str, str, str]:
    if isinstance(entry, DirectoryEntry):
        return "d", "-", _fmt_modified(entry.modified), entry.name + "/"
    if isinstance(entry, SymlinkEntry):
        suffix = "/" if entry.target_is_dir else ""
        label = f"{entry.name}{suffix} -> {entry.target or '?'}"
        return "l", str(entry.size), _fmt_modified(entry.modified), label
    if isinstance(entry, FileEntry):
        return "f", str(entry.size), _fmt_modified(entry.modified), entry.name
    if isinstance(entry, UnreadableEntry):
        return "?", "-", "-", f"{entry.name} ({entry.reason})"
    # Kinds added later still get a row.
    return "?", "-", "-", entry.name


class ReportService:
    """
    Renders a listing for people (table) or tools (JSON/NDJSON/CSV).

    Notes:
      - JSON: one array of tagged entry objects.
      - NDJSON: one tagged entry object per line.
      - CSV: one row per entry; stable column order, empty cells for fields
        the variant does not have.
    """

    def render(self, entries: Iterable[Entry], fmt: str = "table") -> str:
        """
        Return the listing as text.

        Raises:
            ValueError: if an unsupported format is requested.
        """
        fmt = (fmt or "table").lower()
        rows: Sequence[Entry] = list(entries)

        if fmt == "table":
            table = [_table_row(e) for e in rows]
            if not table:
                return ""
            size_w = max(len(r[1]) for r in table)
            lines = [
                f"{kind}  {size.rjust(size_w)}  {mod:<16}  {label}"
                for kind, size, mod, label in table
            ]
            return "\n".join(lines) + "\n"

        payload = [entry_to_dict(e) for e in rows]

        if fmt == "json":
            return json.dumps(payload, ensure_ascii=False, indent=2)

        if fmt == "ndjson":
            text = "\n".join(json.dumps(d, ensure_ascii=False) for d in payload)
            return text + ("\n" if text else "")

        if fmt == "csv":
            buf = io.StringIO()
            writer = csv.DictWriter(
                buf, fieldnames=CSV_FIELDS, extrasaction="ignore", lineterminator="\n"
            )
            writer.writeheader()
            for d in payload:
                writer.writerow(self._csv_row(d))
            return buf.getvalue()

        raise ValueError(f"Unsupported format: {fmt}")

    def write(self, entries: Iterable[Entry], out: Path, fmt: str = "json") -> Path:
        """
        Write the listing to `out` in the specified format.

        Returns:
            The path written.
        """
        text = self.render(entries, fmt)
        out.parent.mkdir(parents=True, exist_ok=True)
        # surrogateescape keeps undecodable file names intact on disk.
        out.write_text(text, encoding="utf-8", errors="surrogateescape")
        return out

    @staticmethod
    def _csv_row(d: dict[str, Any]) -> dict[str, Any]:
        row = {k: d.get(k) for k in CSV_FIELDS}
        return {k: ("" if v is None else v) for k, v in row.items()}
