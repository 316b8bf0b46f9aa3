"""orgnav - navigation primitives for Org outline notes."""

from __future__ import annotations

from orgnav.config import NavConfig
from orgnav.errors import (
    FileToolError,
    OrgNavError,
    ProcessTimeoutError,
    SearchToolError,
    ToolNotFoundError,
    UnparsableLineError,
)
from orgnav.models import Backlink, Heading, Link, LinkKind, MatchRecord
from orgnav.navigator import Navigator

__version__ = "0.1.0"

__all__ = [
    "Backlink",
    "FileToolError",
    "Heading",
    "Link",
    "LinkKind",
    "MatchRecord",
    "NavConfig",
    "Navigator",
    "OrgNavError",
    "ProcessTimeoutError",
    "SearchToolError",
    "ToolNotFoundError",
    "UnparsableLineError",
    "__version__",
]
