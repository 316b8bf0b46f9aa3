"""Command line interface for orgnav."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from orgnav.config import DEFAULT_EXTENSIONS, NavConfig
from orgnav.document import OrgDocument
from orgnav.errors import OrgNavError
from orgnav.formatters import (
    BacklinkFormatter,
    Formatter,
    HeadingFormatter,
    MatchFormatter,
    display_path,
)
from orgnav.links import extract_links
from orgnav.models import LinkKind
from orgnav.navigator import Navigator


console = Console()
app = typer.Typer(help="orgnav - jump around Org notes with ripgrep and fd")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_navigator(
    directory: Optional[Path], extensions: Optional[List[str]], timeout: Optional[float]
) -> Navigator:
    config = NavConfig(
        directory=directory,
        extensions=tuple(extensions) if extensions else DEFAULT_EXTENSIONS,
        timeout=timeout,
    )
    return Navigator(config)


def _fail(exc: OrgNavError) -> NoReturn:
    console.print(str(exc), style="red", markup=False, highlight=False)
    raise typer.Exit(code=1)


def _no_matches() -> None:
    console.print("[yellow]No matches found.[/yellow]")


def _print_plain(formatter: Formatter, items: Iterable) -> None:
    for item in items:
        console.print(formatter.format(item), markup=False, highlight=False)


DirOption = typer.Option(None, "--dir", "-d", help="Root directory of the notes")
ExtOption = typer.Option(None, "--ext", "-e", help="File extension to search (repeatable)")
TimeoutOption = typer.Option(None, "--timeout", help="Seconds before a search is abandoned")
PlainOption = typer.Option(False, "--plain", help="One fixed-width line per result")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose logging")


@app.command()
def files(
    directory: Optional[Path] = DirOption,
    ext: Optional[List[str]] = ExtOption,
    timeout: Optional[float] = TimeoutOption,
    verbose: bool = VerboseOption,
) -> None:
    """List note files under the root directory."""
    _setup_logging(verbose)
    navigator = _build_navigator(directory, ext, timeout)
    try:
        paths = navigator.files()
    except OrgNavError as exc:
        _fail(exc)
    if not paths:
        _no_matches()
        return
    root = navigator.root()
    for path in paths:
        console.print(display_path(path, root), markup=False, highlight=False)


@app.command()
def grep(
    query: str = typer.Argument(..., help="Regular expression to search for"),
    directory: Optional[Path] = DirOption,
    ext: Optional[List[str]] = ExtOption,
    timeout: Optional[float] = TimeoutOption,
    plain: bool = PlainOption,
    verbose: bool = VerboseOption,
) -> None:
    """Search note contents."""
    _setup_logging(verbose)
    navigator = _build_navigator(directory, ext, timeout)
    try:
        records = navigator.grep(query)
    except OrgNavError as exc:
        _fail(exc)
    if not records:
        _no_matches()
        return

    root = navigator.root()
    if plain:
        _print_plain(MatchFormatter(navigator.config, root), records)
        return

    width = navigator.config.title_width
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("File")
    table.add_column("Line")
    table.add_column("Col")
    table.add_column("Text")
    for record in records:
        table.add_row(
            display_path(record.file, root),
            str(record.line),
            str(record.column),
            record.text.strip()[:width],
        )
    console.print(table)


@app.command()
def headings(
    directory: Optional[Path] = DirOption,
    tagged: bool = typer.Option(False, "--tagged", "-t", help="Only headings with tags"),
    ext: Optional[List[str]] = ExtOption,
    timeout: Optional[float] = TimeoutOption,
    plain: bool = PlainOption,
    verbose: bool = VerboseOption,
) -> None:
    """List outline headings, optionally only tagged ones."""
    _setup_logging(verbose)
    navigator = _build_navigator(directory, ext, timeout)
    try:
        found = navigator.headings(tagged_only=tagged)
    except OrgNavError as exc:
        _fail(exc)
    if not found:
        _no_matches()
        return

    root = navigator.root()
    if plain:
        _print_plain(HeadingFormatter(navigator.config, root), found)
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Heading")
    table.add_column("Tags")
    table.add_column("Location")
    for heading in found:
        table.add_row(
            "*" * heading.level + " " + heading.title,
            ":".join(heading.tags) if heading.tags else "",
            f"{display_path(heading.file, root)}:{heading.line}",
        )
    console.print(table)


@app.command()
def links(
    path: Path = typer.Argument(..., help="Org file to read", exists=True, dir_okay=False),
    kind: Optional[LinkKind] = typer.Option(None, "--kind", "-k", help="Restrict to one link kind"),
    plain: bool = typer.Option(False, "--plain", help="Print bare targets, one per line"),
    verbose: bool = VerboseOption,
) -> None:
    """Show the links contained in one document."""
    _setup_logging(verbose)
    if plain:
        targets = list(extract_links(OrgDocument.from_path(path), kind))
        if not targets:
            _no_matches()
            return
        for target in targets:
            console.print(target, markup=False, highlight=False)
        return

    found = Navigator().links(path, kind)
    if not found:
        _no_matches()
        return
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Kind")
    table.add_column("Target")
    table.add_column("Description")
    for link in found:
        table.add_row(link.kind.value, link.raw, link.description or "")
    console.print(table)


@app.command()
def backlinks(
    target: Path = typer.Argument(..., help="File whose inbound links are wanted"),
    directory: Optional[Path] = DirOption,
    ext: Optional[List[str]] = ExtOption,
    timeout: Optional[float] = TimeoutOption,
    plain: bool = PlainOption,
    verbose: bool = VerboseOption,
) -> None:
    """Find documents linking to TARGET (matched by file name only)."""
    _setup_logging(verbose)
    navigator = _build_navigator(directory, ext, timeout)
    try:
        found = navigator.backlinks(target)
    except OrgNavError as exc:
        _fail(exc)
    if not found:
        _no_matches()
        return

    root = navigator.root()
    if plain:
        _print_plain(BacklinkFormatter(navigator.config, root), found)
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Description")
    table.add_column("Location")
    for backlink in found:
        table.add_row(
            backlink.description or "",
            f"{display_path(backlink.file, root)}:{backlink.line}",
        )
    console.print(table)
