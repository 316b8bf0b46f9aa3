"""Core orgnav data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(slots=True, frozen=True)
class MatchRecord:
    """One line of search output."""

    file: Path
    line: int
    column: int
    text: str


@dataclass(slots=True, frozen=True)
class Heading:
    """An outline heading found in the corpus."""

    file: Path
    line: int
    title: str
    tags: tuple[str, ...] | None = None
    level: int = 1


class LinkKind(str, Enum):
    FILE = "file"
    URL = "url"
    FUZZY = "fuzzy"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class Link:
    """A typed link taken from a document's structure."""

    kind: LinkKind
    scheme: str
    target: str
    description: str | None = None

    @property
    def raw(self) -> str:
        return f"{self.scheme}:{self.target}"


@dataclass(slots=True, frozen=True)
class Backlink:
    """A link elsewhere in the corpus pointing at a given document."""

    file: Path
    line: int
    column: int
    description: str | None = None
