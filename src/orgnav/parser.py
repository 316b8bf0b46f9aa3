"""Parsing of search tool output lines."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

from orgnav.errors import UnparsableLineError
from orgnav.models import MatchRecord

LOGGER = logging.getLogger(__name__)

# The path ends at the first space or NUL that is followed by "<digits>:<digits>:".
MATCH_LINE = re.compile(r"^(?P<path>.+?)[ \x00](?P<line>\d+):(?P<col>\d+):(?P<text>.*)$", re.DOTALL)


def parse_line(line: str) -> MatchRecord:
    """Parse ``<path> <line>:<col>:<text>`` into a :class:`MatchRecord`.

    The search tool numbers columns from 1; the record's column is 0-based.
    """
    match = MATCH_LINE.match(line.rstrip("\r\n"))
    if match is None:
        raise UnparsableLineError(line)
    line_no = int(match.group("line"))
    column = int(match.group("col"))
    if line_no < 1 or column < 1:
        raise UnparsableLineError(line)
    return MatchRecord(
        file=Path(match.group("path")),
        line=line_no,
        column=column - 1,
        text=match.group("text"),
    )


def iter_lines(output: str) -> Iterator[str]:
    """Yield non-empty, trimmed lines of tool output."""
    for raw in output.split("\n"):
        stripped = raw.strip()
        if stripped:
            yield stripped


def parse_output(output: str) -> Iterator[MatchRecord]:
    """Parse every line of ``output``, skipping the ones that do not fit.

    Matched text is kept as the tool printed it; only blank lines are dropped.
    """
    for raw in output.split("\n"):
        line = raw.rstrip("\r")
        if not line.strip():
            continue
        try:
            yield parse_line(line)
        except UnparsableLineError:
            LOGGER.warning("Skipping unparsable search output: %r", line)
