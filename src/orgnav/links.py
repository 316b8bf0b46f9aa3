"""Typed link extraction from Org documents."""

from __future__ import annotations

from typing import Iterator

from orgnav.document import OrgDocument
from orgnav.models import Link, LinkKind

URL_SCHEMES = frozenset({"http", "https", "fuzzy"})
FUZZY_PREFIX = "fuzzy:"


def iter_link_records(document: OrgDocument, link_type: LinkKind | None = None) -> Iterator[Link]:
    """Yield :class:`Link` records, optionally restricted to one kind.

    ``LinkKind.URL`` also admits fuzzy links, which older notes used for web
    addresses.
    """
    for link in document.links():
        if link_type is None:
            yield link
        elif link_type is LinkKind.URL:
            if link.scheme in URL_SCHEMES:
                yield link
        elif link.kind is link_type:
            yield link


def extract_links(document: OrgDocument, link_type: LinkKind | None = None) -> Iterator[str]:
    """Yield link targets from ``document`` as strings.

    - ``LinkKind.FILE``: the path of each ``file:`` link.
    - ``LinkKind.URL``: ``scheme:path`` for http/https/fuzzy links, with the
      ``fuzzy:`` prefix removed.
    - ``None``: every link as ``scheme:path``.
    """
    for link in iter_link_records(document, link_type):
        if link_type is LinkKind.FILE:
            value = link.target
        else:
            value = link.raw
            if link_type is LinkKind.URL and value.startswith(FUZZY_PREFIX):
                value = value[len(FUZZY_PREFIX) :]
        yield value.strip()
