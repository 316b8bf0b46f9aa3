"""Heading and tag lookup across the corpus."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from orgnav.document import (
    ANY_HEADING,
    ANY_HEADING_PATTERN,
    TAGGED_HEADING,
    TAGGED_HEADING_PATTERN,
    split_tags,
)
from orgnav.models import Heading, MatchRecord
from orgnav.parser import iter_lines, parse_output
from orgnav.search import Searcher

LOGGER = logging.getLogger(__name__)

# Title and tag cluster are joined with this separator in normalized output.
FIELD_SEPARATOR = "  "
FIELD_SPLIT = re.compile(r"\s{2,}")


def split_heading_text(text: str) -> tuple[str, tuple[str, ...] | None]:
    """Split normalized heading text into ``(title, tags)``."""
    parts = FIELD_SPLIT.split(text.strip(), maxsplit=1)
    title = parts[0]
    tags = split_tags(parts[1]) if len(parts) > 1 else None
    return title, tags


def normalize_heading(text: str, tagged_only: bool = False) -> str | None:
    """Rewrite a raw heading line as ``title`` or ``title  tag:tag``.

    Returns ``None`` when ``text`` is not a heading (or carries no tags while
    ``tagged_only`` is set).
    """
    pattern = TAGGED_HEADING if tagged_only else ANY_HEADING
    match = pattern.match(text)
    if match is None:
        return None
    title = match.group(2).strip()
    cluster = match.group(3)
    if cluster and split_tags(cluster):
        return f"{title}{FIELD_SEPARATOR}{cluster.strip(':')}"
    if tagged_only:
        return None
    return title


class HeadingIndexer:
    """Finds outline headings, optionally only the tagged ones."""

    def __init__(self, searcher: Searcher) -> None:
        self.searcher = searcher

    def _records(self, directory: Path | str | None, tagged_only: bool) -> List[MatchRecord]:
        pattern = TAGGED_HEADING_PATTERN if tagged_only else ANY_HEADING_PATTERN
        return list(parse_output(self.searcher.search(pattern, directory)))

    def find_heading_lines(
        self, directory: Path | str | None = None, tagged_only: bool = False
    ) -> List[str]:
        """Return ``<path> <line>:<col>:<normalized heading>`` lines."""
        lines: List[str] = []
        for record in self._records(directory, tagged_only):
            normalized = normalize_heading(record.text, tagged_only)
            if normalized is None:
                LOGGER.debug("Dropping non-heading match %s:%d", record.file, record.line)
                continue
            lines.append(f"{record.file} {record.line}:{record.column + 1}:{normalized}")
        return list(iter_lines("\n".join(lines)))

    def find_headings(
        self, directory: Path | str | None = None, tagged_only: bool = False
    ) -> List[Heading]:
        headings: List[Heading] = []
        pattern = TAGGED_HEADING if tagged_only else ANY_HEADING
        for record in self._records(directory, tagged_only):
            match = pattern.match(record.text)
            if match is None:
                continue
            tags = split_tags(match.group(3))
            if tagged_only and tags is None:
                continue
            headings.append(
                Heading(
                    file=record.file,
                    line=record.line,
                    title=match.group(2).strip(),
                    tags=tags,
                    level=len(match.group(1)),
                )
            )
        LOGGER.debug("Found %d headings", len(headings))
        return headings
