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

from pathlib import Path
from typing import NoReturn, Optional
import logging

import typer

from ..domain.errors import (
    InvalidPathError,
    IoError,
    NotFoundError,
    OpenFailedError,
    PermissionDeniedError,
    VibeCommanderError,
    format_error,
)
from ..services import DirectoryService, ReportService
from ..services.report_service import FORMATS

from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(help="Vibe Commander CLI - list directories and open files")

logger = logging.getLogger(__name__)

EXIT_CODES: dict[type, int] = {
    NotFoundError: 2,
    PermissionDeniedError: 3,
    InvalidPathError: 4,
    IoError: 5,
    OpenFailedError: 6,
}


# ------------------------------
# Helpers
# ------------------------------


def _parse_fmt(fmt: Optional[str]) -> str:
    """
    Normalise --fmt and reject unknown values with a Typer BadParameter.
    """
    value = (fmt or "table").strip().lower()
    if value not in FORMATS:
        raise typer.BadParameter(
            f"Unknown format: {value}. Valid options: {', '.join(FORMATS)}"
        )
    return value


def _fail(err: VibeCommanderError) -> NoReturn:
    typer.echo(format_error(err), err=True)
    raise typer.Exit(code=EXIT_CODES.get(type(err), 1))


def _set_verbose(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")


def _wire() -> tuple[DirectoryService, ReportService]:
    """
    Minimal composition root:
      LocalFS + SystemOpener behind DirectoryService, plus ReportService
    """
    return DirectoryService(), ReportService()


# ------------------------------
# CLI Commands
# ------------------------------


@app.command("ls")
def ls(
    path: Optional[str] = typer.Argument(
        None, help="Directory to list. Defaults to the initial directory."
    ),
    fmt: str = typer.Option(
        "table",
        "--fmt",
        help="Output format: table, json, ndjson or csv.",
        case_sensitive=False,
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "--output",
        help="Write the listing to this path instead of stdout. If a directory is "
        "provided, the file will be named 'listing.<fmt>' inside it.",
        resolve_path=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    List one directory: directories first, then files, case-insensitive.
    """
    _set_verbose(verbose)
    fmt = _parse_fmt(fmt)
    directory, report = _wire()

    try:
        target_dir = path if path is not None else directory.get_initial_directory()
        entries = directory.list_directory(target_dir)
    except VibeCommanderError as e:
        _fail(e)

    if out is None:
        typer.echo(report.render(entries, fmt), nl=False)
        return

    # - --out DIR  -> DIR/listing.<fmt>
    # - --out FILE -> FILE
    target = out / f"listing.{fmt}" if out.is_dir() else out
    written = report.write(entries, target, fmt=fmt)
    typer.echo(f"Wrote {len(entries)} entries ({fmt}) to {written}")


@app.command("open")
def open_(
    path: str = typer.Argument(..., help="File or directory to open."),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Open a path with the system default application.
    """
    _set_verbose(verbose)
    directory, _ = _wire()
    try:
        directory.open_file(path)
    except VibeCommanderError as e:
        _fail(e)
    typer.echo(f"Opened {path}")


@app.command()
def home():
    """
    Print the directory the browser starts in.
    """
    directory, _ = _wire()
    try:
        typer.echo(directory.get_initial_directory())
    except VibeCommanderError as e:
        _fail(e)
