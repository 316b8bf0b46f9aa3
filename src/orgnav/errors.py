"""Exceptions raised by orgnav."""

from __future__ import annotations

_INSTALL_HINTS = {
    "rg": "install ripgrep (https://github.com/BurntSushi/ripgrep)",
    "fd": "install fd (https://github.com/sharkdp/fd)",
    "fdfind": "install fd (https://github.com/sharkdp/fd)",
}


class OrgNavError(Exception):
    """Base class for every orgnav failure."""


class ToolNotFoundError(OrgNavError):
    """An external program could not be located."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        hint = _INSTALL_HINTS.get(tool, "make sure it is installed and on PATH")
        super().__init__(f"{tool} not found: {hint}")


class ToolExitError(OrgNavError):
    """An external program exited with a status the caller does not accept."""

    tool_label = "tool"

    def __init__(self, code: int, output: str = "") -> None:
        self.code = code
        self.output = output
        message = f"{self.tool_label} failed with exit code {code}"
        detail = output.strip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class SearchToolError(ToolExitError):
    tool_label = "search"


class FileToolError(ToolExitError):
    tool_label = "file listing"


class ProcessTimeoutError(OrgNavError):
    """An external program did not finish before the configured deadline."""

    def __init__(self, command: str, timeout: float) -> None:
        self.command = command
        self.timeout = timeout
        super().__init__(f"{command} did not finish within {timeout:g}s")


class UnparsableLineError(OrgNavError, ValueError):
    """A line of search output did not have the ``<path> <line>:<col>:<text>`` shape."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Cannot parse search output line: {line!r}")
