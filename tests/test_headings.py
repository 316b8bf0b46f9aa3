"""Tests for heading and tag lookup."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from orgnav.document import (
    ANY_HEADING,
    ANY_HEADING_PATTERN,
    TAGGED_HEADING,
    TAGGED_HEADING_PATTERN,
)
from orgnav.headings import HeadingIndexer, normalize_heading, split_heading_text
from orgnav.models import Heading
from orgnav.parser import parse_line

RG_OUTPUT = (
    "/notes/todo.org\x003:1:** Plan :work:urgent:\n"
    "/notes/todo.org\x005:1:* Scratch\n"
    "/notes/misc.org\x001:1:*** Trip :home@city:\n"
)


def _indexer(output: str) -> tuple[HeadingIndexer, MagicMock]:
    searcher = MagicMock()
    searcher.search.return_value = output
    return HeadingIndexer(searcher), searcher


class TestPatterns:
    """Tests for the heading regexes."""

    @pytest.mark.parametrize(
        ("line", "title", "tags"),
        [
            ("* Scratch", "Scratch", None),
            ("** Plan :work:urgent:", "Plan", "work:urgent"),
            ("*** Meeting at 10:30", "Meeting at 10:30", None),
            ("* Mixed :a_b|c@d:", "Mixed", "a_b|c@d"),
            ("* Trailing space :x:   ", "Trailing space", "x"),
        ],
    )
    def test_any_heading(self, line: str, title: str, tags: str | None) -> None:
        match = ANY_HEADING.match(line)

        assert match is not None
        assert match.group(2) == title
        assert match.group(3) == tags

    @pytest.mark.parametrize("line", ["*bold*", "text * star", "*", "", "  * indented"])
    def test_not_headings(self, line: str) -> None:
        assert ANY_HEADING.match(line) is None

    def test_tagged_requires_tags(self) -> None:
        assert TAGGED_HEADING.match("* Scratch") is None
        assert TAGGED_HEADING.match("** Plan :work:").group(3) == "work"

    @pytest.mark.parametrize("line", ["* Year :2024:", "* Café :ünïcode:"])
    def test_digits_and_non_ascii_tags_unsupported(self, line: str) -> None:
        assert TAGGED_HEADING.match(line) is None


class TestNormalizeHeading:
    """Tests for normalize_heading and split_heading_text."""

    def test_untagged(self) -> None:
        assert normalize_heading("* Scratch") == "Scratch"

    def test_tagged(self) -> None:
        assert normalize_heading("** Plan :work:urgent:") == "Plan  work:urgent"

    def test_tagged_only_drops_untagged(self) -> None:
        assert normalize_heading("* Scratch", tagged_only=True) is None

    def test_not_a_heading(self) -> None:
        assert normalize_heading("plain text") is None

    def test_split(self) -> None:
        assert split_heading_text("Plan  work:urgent") == ("Plan", ("work", "urgent"))

    def test_split_untagged(self) -> None:
        assert split_heading_text("Scratch") == ("Scratch", None)

    def test_split_idempotent(self) -> None:
        """Re-splitting the same normalized output yields the same pair."""
        normalized = normalize_heading("** Plan :work:urgent:")

        assert split_heading_text(normalized) == split_heading_text(normalized)
        title, tags = split_heading_text(normalized)
        assert split_heading_text(f"{title}  {':'.join(tags)}") == (title, tags)


class TestHeadingIndexer:
    """Tests for HeadingIndexer."""

    def test_any_heading_query(self) -> None:
        indexer, searcher = _indexer(RG_OUTPUT)

        headings = indexer.find_headings(Path("/notes"))

        searcher.search.assert_called_once_with(ANY_HEADING_PATTERN, Path("/notes"))
        assert headings == [
            Heading(Path("/notes/todo.org"), 3, "Plan", ("work", "urgent"), 2),
            Heading(Path("/notes/todo.org"), 5, "Scratch", None, 1),
            Heading(Path("/notes/misc.org"), 1, "Trip", ("home@city",), 3),
        ]

    def test_tagged_only_query(self) -> None:
        indexer, searcher = _indexer(RG_OUTPUT)

        headings = indexer.find_headings(tagged_only=True)

        searcher.search.assert_called_once_with(TAGGED_HEADING_PATTERN, None)
        titles = [h.title for h in headings]
        assert "Scratch" not in titles
        assert titles == ["Plan", "Trip"]

    def test_heading_lines_reparse(self) -> None:
        """Normalized lines round-trip through parse_line and split_heading_text."""
        indexer, _ = _indexer(RG_OUTPUT)

        lines = indexer.find_heading_lines()

        assert lines[0] == "/notes/todo.org 3:1:Plan  work:urgent"
        record = parse_line(lines[0])
        assert record.column == 0
        assert split_heading_text(record.text) == ("Plan", ("work", "urgent"))
        assert parse_line(lines[1]).text == "Scratch"

    def test_tagged_heading_lines(self) -> None:
        indexer, _ = _indexer(RG_OUTPUT)

        lines = indexer.find_heading_lines(tagged_only=True)

        assert lines == [
            "/notes/todo.org 3:1:Plan  work:urgent",
            "/notes/misc.org 1:1:Trip  home@city",
        ]

    def test_no_matches(self) -> None:
        indexer, _ = _indexer("")

        assert indexer.find_headings() == []
        assert indexer.find_heading_lines() == []
