"""Listing note files with fd."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Sequence

from orgnav.config import NavConfig
from orgnav.errors import FileToolError
from orgnav.parser import iter_lines
from orgnav.process import run_process

LOGGER = logging.getLogger(__name__)


def build_list_args(root: Path, extensions: Sequence[str]) -> List[str]:
    args = [".", str(root), "--absolute-path", "--type", "f", "--color", "never"]
    for ext in extensions:
        args.extend(["--extension", ext])
    return args


class FileDiscoverer:
    """Lists regular files under the search root that carry a configured extension."""

    def __init__(self, config: NavConfig | None = None) -> None:
        self.config = config or NavConfig()

    def list_files(self, directory: Path | str | None = None) -> str:
        root = self.config.resolve_directory(directory)
        result = run_process(
            self.config.fd_command,
            build_list_args(root, self.config.extensions),
            merge_stderr=True,
            timeout=self.config.timeout,
        )
        if result.exit_code != 0:
            raise FileToolError(result.exit_code, result.output)
        return result.output

    def iter_files(self, directory: Path | str | None = None) -> Iterator[Path]:
        """Yield absolute file paths, one per output line."""
        for line in iter_lines(self.list_files(directory)):
            yield Path(line)
