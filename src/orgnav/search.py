"""Recursive regex search over the note corpus with ripgrep."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from orgnav.config import NavConfig
from orgnav.errors import SearchToolError
from orgnav.models import MatchRecord
from orgnav.parser import parse_output
from orgnav.process import run_process

LOGGER = logging.getLogger(__name__)

# ripgrep: 0 = matches, 1 = no matches, anything else is an error.
EXIT_MATCHES = 0
EXIT_NO_MATCHES = 1


def type_args(extensions: Sequence[str]) -> List[str]:
    """Declare one ripgrep file type per extension and restrict the search to them.

    Each type is cleared first so ripgrep's built-in globs for the same name
    (``org`` also covers ``*.org_archive``) do not widen the search.
    """
    args: List[str] = []
    for ext in extensions:
        args.extend(["--type-clear", ext, "--type-add", f"{ext}:*.{ext}", "--type", ext])
    return args


def build_search_args(
    pattern: str,
    root: Path,
    extensions: Sequence[str],
    extra_args: Sequence[str] = (),
    *,
    replace: str | None = None,
) -> List[str]:
    """Build the ripgrep argument list for one query.

    The pattern is passed with ``--regexp`` so that an empty pattern is legal
    and matches every line.
    """
    args = [
        "--no-config",
        "--color",
        "never",
        "--no-heading",
        "--with-filename",
        "--line-number",
        "--column",
        "--null",
        *type_args(extensions),
        "--regexp",
        pattern,
    ]
    if replace is not None:
        args.extend(["--replace", replace])
    args.extend(extra_args)
    args.append(str(root))
    return args


class Searcher:
    """Runs ripgrep queries against the configured corpus."""

    def __init__(self, config: NavConfig | None = None) -> None:
        self.config = config or NavConfig()

    def search(
        self,
        pattern: str,
        directory: Path | str | None = None,
        extra_args: Sequence[str] = (),
        *,
        replace: str | None = None,
    ) -> str:
        """Return raw ripgrep output; an empty string when nothing matched."""
        root = self.config.resolve_directory(directory)
        args = build_search_args(
            pattern, root, self.config.extensions, extra_args, replace=replace
        )
        result = run_process(
            self.config.rg_command, args, merge_stderr=True, timeout=self.config.timeout
        )
        if result.exit_code == EXIT_NO_MATCHES:
            LOGGER.debug("No matches for %r under %s", pattern, root)
            return ""
        if result.exit_code != EXIT_MATCHES:
            raise SearchToolError(result.exit_code, result.output)
        return result.output

    def search_records(
        self,
        pattern: str,
        directory: Path | str | None = None,
        extra_args: Sequence[str] = (),
    ) -> List[MatchRecord]:
        """Search and parse each output line into a :class:`MatchRecord`."""
        return list(parse_output(self.search(pattern, directory, extra_args)))
