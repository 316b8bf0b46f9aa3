"""Resolution of links pointing at a document."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from orgnav.models import Backlink
from orgnav.parser import iter_lines, parse_output
from orgnav.search import Searcher

LOGGER = logging.getLogger(__name__)

# Characters that are special to both ripgrep's and Python's regex syntax.
_REGEX_SPECIALS = frozenset("\\.+*?()|[]{}^$")


def escape_regex(text: str) -> str:
    """Escape ``text`` so ripgrep and :mod:`re` both read it literally."""
    return "".join(f"\\{char}" if char in _REGEX_SPECIALS else char for char in text)


def backlink_pattern(target: Path | str) -> str:
    """Regex matching a bracket link whose target is the file name of ``target``.

    Only the bare file name is compared, so two files with the same name in
    different directories cannot be told apart. Group 1 is the description.
    """
    name = escape_regex(Path(target).name)
    return (
        r"\[\[(?:[^\[\]]*[:/])?"
        + name
        + r"(?:::[^\[\]]*)?\](?:\[([^\[\]]*)\])?\]"
    )


def extract_description(text: str, target: Path | str) -> str | None:
    """Return the description of the first link to ``target`` in ``text``."""
    match = re.search(backlink_pattern(target), text)
    if match is None or match.group(1) is None:
        return None
    return match.group(1).strip() or None


class BacklinkResolver:
    """Finds every line in the corpus that links to a given file."""

    def __init__(self, searcher: Searcher) -> None:
        self.searcher = searcher

    def find_backlink_lines(
        self, target: Path | str, directory: Path | str | None = None
    ) -> List[str]:
        return list(iter_lines(self.searcher.search(backlink_pattern(target), directory)))

    def find_backlinks(
        self, target: Path | str, directory: Path | str | None = None
    ) -> List[Backlink]:
        output = self.searcher.search(backlink_pattern(target), directory)
        backlinks = [
            Backlink(
                file=record.file,
                line=record.line,
                column=record.column,
                description=extract_description(record.text, target),
            )
            for record in parse_output(output)
        ]
        LOGGER.debug("Found %d backlinks to %s", len(backlinks), Path(target).name)
        return backlinks
