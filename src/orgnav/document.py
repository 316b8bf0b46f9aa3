"""Structural parsing of Org documents.

Only the structure needed for navigation is recognised: headings (with their
tags) and links. Text inside source/example/export blocks, property drawers,
comment lines and fixed-width lines is skipped so that link-looking text in
code samples is not reported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Union

from orgnav.models import Link, LinkKind

# Shared by the ripgrep query and the Python-side capture, so both regex
# engines must accept these patterns.
TAG_CHARS = r"[A-Za-z|:@_]"
ANY_HEADING_PATTERN = r"^(\*+)\s+(.*?)(?:\s+:(" + TAG_CHARS + r"+):)?\s*$"
TAGGED_HEADING_PATTERN = r"^(\*+)\s+(.*?)\s+:(" + TAG_CHARS + r"+):\s*$"

ANY_HEADING = re.compile(ANY_HEADING_PATTERN)
TAGGED_HEADING = re.compile(TAGGED_HEADING_PATTERN)

BRACKET_LINK = re.compile(r"\[\[(?P<target>[^\[\]]+)\](?:\[(?P<desc>.*?)\])?\]")
PLAIN_LINK = re.compile(r"(?<![\w\[:/])(?P<scheme>https?|file):(?P<path>[^\s\[\]<>()\"']+)")
SCHEME = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.-]*):(?P<path>.*)$", re.DOTALL)

BLOCK_BEGIN = re.compile(r"^\s*#\+begin_(?P<kind>src|example|export|comment)\b", re.IGNORECASE)
DRAWER_BEGIN = re.compile(r"^\s*:PROPERTIES:\s*$", re.IGNORECASE)
DRAWER_END = re.compile(r"^\s*:END:\s*$", re.IGNORECASE)
COMMENT_LINE = re.compile(r"^\s*#(?:\s|$)")
FIXED_WIDTH_LINE = re.compile(r"^\s*:(?:\s|$)")

SCHEME_KINDS = {
    "file": LinkKind.FILE,
    "http": LinkKind.URL,
    "https": LinkKind.URL,
    "fuzzy": LinkKind.FUZZY,
}
# Org reads bracket targets shaped like paths as file links.
PATH_PREFIXES = ("/", "./", "../", "~/")

OTHER_SCHEMES = frozenset(
    {
        "attachment",
        "doi",
        "elisp",
        "file+emacs",
        "file+sys",
        "ftp",
        "help",
        "id",
        "info",
        "mailto",
        "news",
        "shell",
    }
)


@dataclass(slots=True, frozen=True)
class HeadingElement:
    line: int
    level: int
    title: str
    tags: tuple[str, ...] | None


@dataclass(slots=True, frozen=True)
class LinkElement:
    line: int
    column: int
    link: Link


Element = Union[HeadingElement, LinkElement]


def split_tags(cluster: str | None) -> tuple[str, ...] | None:
    """Split ``work:urgent`` into ``("work", "urgent")``; ``None`` if empty."""
    if not cluster:
        return None
    tags = tuple(tag for tag in cluster.split(":") if tag)
    return tags or None


def classify_target(target: str, description: str | None = None) -> Link:
    """Build a :class:`Link` from the inside of a bracket link."""
    target = target.strip()
    if target.startswith(PATH_PREFIXES):
        path = target.split("::", 1)[0]
        return Link(kind=LinkKind.FILE, scheme="file", target=path, description=description)
    if target.startswith("#"):
        return Link(kind=LinkKind.OTHER, scheme="custom-id", target=target[1:], description=description)
    if target.startswith("(") and target.endswith(")"):
        return Link(kind=LinkKind.OTHER, scheme="coderef", target=target[1:-1], description=description)
    match = SCHEME.match(target)
    if match is not None:
        scheme = match.group("scheme").lower()
        path = match.group("path")
        if scheme in SCHEME_KINDS:
            kind = SCHEME_KINDS[scheme]
            if kind is LinkKind.FILE:
                path = path.split("::", 1)[0]
            return Link(kind=kind, scheme=scheme, target=path, description=description)
        if scheme in OTHER_SCHEMES:
            return Link(kind=LinkKind.OTHER, scheme=scheme, target=path, description=description)
    # No recognised scheme: Org resolves these by searching for the text.
    return Link(kind=LinkKind.FUZZY, scheme="fuzzy", target=target, description=description)


def _links_in_line(text: str) -> Iterator[tuple[int, Link]]:
    found: List[tuple[int, Link]] = []
    masked = list(text)
    for match in BRACKET_LINK.finditer(text):
        desc = match.group("desc")
        desc = desc.strip() if desc else None
        found.append((match.start(), classify_target(match.group("target"), desc or None)))
        masked[match.start() : match.end()] = " " * (match.end() - match.start())
    for match in PLAIN_LINK.finditer("".join(masked)):
        link = classify_target(f"{match.group('scheme')}:{match.group('path')}")
        found.append((match.start(), link))
    found.sort(key=lambda item: item[0])
    yield from found


class OrgDocument:
    """Text of one Org document and the elements derived from it.

    Elements are recomputed on every call; nothing parsed is cached.
    """

    def __init__(self, text: str, path: Path | None = None) -> None:
        self.text = text
        self.path = path

    @classmethod
    def from_text(cls, text: str) -> "OrgDocument":
        return cls(text)

    @classmethod
    def from_path(cls, path: Path | str) -> "OrgDocument":
        path = Path(path)
        return cls(path.read_text(encoding="utf-8", errors="replace"), path)

    def elements(self) -> Iterator[Element]:
        block_end: re.Pattern[str] | None = None
        in_drawer = False
        for number, line in enumerate(self.text.splitlines(), start=1):
            if block_end is not None:
                if block_end.match(line):
                    block_end = None
                continue
            if in_drawer:
                if DRAWER_END.match(line):
                    in_drawer = False
                continue
            begin = BLOCK_BEGIN.match(line)
            if begin is not None:
                kind = re.escape(begin.group("kind"))
                block_end = re.compile(rf"^\s*#\+end_{kind}\b", re.IGNORECASE)
                continue
            if DRAWER_BEGIN.match(line):
                in_drawer = True
                continue
            if COMMENT_LINE.match(line) or FIXED_WIDTH_LINE.match(line):
                continue

            heading = ANY_HEADING.match(line)
            if heading is not None:
                yield HeadingElement(
                    line=number,
                    level=len(heading.group(1)),
                    title=heading.group(2).strip(),
                    tags=split_tags(heading.group(3)),
                )
            for column, link in _links_in_line(line):
                yield LinkElement(line=number, column=column, link=link)

    def headings(self) -> Iterator[HeadingElement]:
        for element in self.elements():
            if isinstance(element, HeadingElement):
                yield element

    def links(self) -> Iterator[Link]:
        for element in self.elements():
            if isinstance(element, LinkElement):
                yield element.link
