"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Union

DirectorySource = Union[Path, str, Callable[[], Union[Path, str]], None]

DEFAULT_EXTENSIONS: tuple[str, ...] = ("org",)


@dataclass(slots=True, frozen=True)
class NavConfig:
    """Read-only settings shared by every query.

    ``directory`` is the default search root. It may be a path or a
    zero-argument callable producing one; ``None`` falls back to the
    current working directory.
    """

    directory: DirectorySource = None
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    title_width: int = 60
    path_width: int = 40
    rg_command: str = "rg"
    fd_command: str = "fd"
    timeout: float | None = None

    def __post_init__(self) -> None:
        # Accept a single extension or any iterable of them; store a hashable tuple.
        raw = (self.extensions,) if isinstance(self.extensions, str) else self.extensions
        extensions = tuple(ext.lstrip(".") for ext in raw if ext.strip("."))
        if not extensions:
            raise ValueError("At least one file extension is required")
        object.__setattr__(self, "extensions", extensions)
        if self.title_width < 1 or self.path_width < 1:
            raise ValueError("Column widths must be positive")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive")

    def resolve_directory(self, explicit: Path | str | None = None) -> Path:
        """Return the absolute search root for a query."""
        if explicit is not None:
            return Path(explicit).expanduser().resolve()
        source = self.directory
        if callable(source):
            source = source()
        if source is None:
            return Path.cwd().resolve()
        return Path(source).expanduser().resolve()

    def with_overrides(self, **changes) -> "NavConfig":
        return replace(self, **changes)
