"""Display formatting for query results.

Formatters turn records into single-line strings sized to the configured
column widths. They are independent from the query layer; callers pick the
formatter matching the record type they hold.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generic, TypeVar

from orgnav.config import NavConfig
from orgnav.models import Backlink, Heading, Link, MatchRecord

T = TypeVar("T")

ELLIPSIS = "…"


def fit(text: str, width: int) -> str:
    """Truncate or pad ``text`` to exactly ``width`` characters."""
    text = " ".join(text.split())
    if len(text) > width:
        return text[: max(width - 1, 0)] + ELLIPSIS
    return text.ljust(width)


def display_path(path: Path, root: Path | None) -> str:
    if root is not None:
        try:
            return os.path.relpath(path, root)
        except ValueError:
            pass
    return str(path)


class Formatter(Generic[T]):
    """Base formatter; subclasses implement :meth:`format`."""

    def __init__(self, config: NavConfig | None = None, root: Path | None = None) -> None:
        self.config = config or NavConfig()
        self.root = root

    def location(self, path: Path, line: int) -> str:
        return fit(f"{display_path(path, self.root)}:{line}", self.config.path_width)

    def format(self, item: T) -> str:
        raise NotImplementedError


class MatchFormatter(Formatter[MatchRecord]):
    def format(self, item: MatchRecord) -> str:
        return f"{self.location(item.file, item.line)}  {fit(item.text, self.config.title_width)}".rstrip()


class HeadingFormatter(Formatter[Heading]):
    def format(self, item: Heading) -> str:
        title = fit("*" * item.level + " " + item.title, self.config.title_width)
        tags = ":" + ":".join(item.tags) + ":" if item.tags else ""
        return f"{title}  {self.location(item.file, item.line)}  {tags}".rstrip()


class LinkFormatter(Formatter[Link]):
    def format(self, item: Link) -> str:
        label = fit(item.description or item.target, self.config.title_width)
        return f"{label}  [{item.kind.value}] {item.raw}"


class BacklinkFormatter(Formatter[Backlink]):
    def format(self, item: Backlink) -> str:
        label = fit(item.description or "", self.config.title_width)
        return f"{label}  {self.location(item.file, item.line)}".rstrip()
