"""Entry points tying configuration to the query components."""

from __future__ import annotations

from pathlib import Path
from typing import List

from orgnav.backlinks import BacklinkResolver
from orgnav.config import NavConfig
from orgnav.document import OrgDocument
from orgnav.files import FileDiscoverer
from orgnav.headings import HeadingIndexer
from orgnav.links import iter_link_records
from orgnav.models import Backlink, Heading, Link, LinkKind, MatchRecord
from orgnav.search import Searcher


class Navigator:
    """High-level API over the note corpus described by a :class:`NavConfig`.

    Every call runs a fresh query; results are never cached.
    """

    def __init__(self, config: NavConfig | None = None) -> None:
        self.config = config or NavConfig()
        self.searcher = Searcher(self.config)
        self.discoverer = FileDiscoverer(self.config)
        self.heading_indexer = HeadingIndexer(self.searcher)
        self.backlink_resolver = BacklinkResolver(self.searcher)

    def root(self, directory: Path | str | None = None) -> Path:
        return self.config.resolve_directory(directory)

    def files(self, directory: Path | str | None = None) -> List[Path]:
        return list(self.discoverer.iter_files(directory))

    def grep(self, query: str, directory: Path | str | None = None) -> List[MatchRecord]:
        return self.searcher.search_records(query, directory)

    def headings(
        self, directory: Path | str | None = None, tagged_only: bool = False
    ) -> List[Heading]:
        return self.heading_indexer.find_headings(directory, tagged_only=tagged_only)

    def tagged_headings(self, directory: Path | str | None = None) -> List[Heading]:
        return self.headings(directory, tagged_only=True)

    def links(self, path: Path | str, link_type: LinkKind | None = None) -> List[Link]:
        return list(iter_link_records(OrgDocument.from_path(path), link_type))

    def backlinks(self, target: Path | str, directory: Path | str | None = None) -> List[Backlink]:
        return self.backlink_resolver.find_backlinks(target, directory)
