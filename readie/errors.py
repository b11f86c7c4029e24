"""Exception hierarchy raised by readie's loaders and generators."""

from __future__ import annotations

from pathlib import Path


class ReadieError(Exception):
    """Base class for errors reported by readie."""


class ConfigParseError(ReadieError):
    """Raised when a config file does not contain valid JSON."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Failed to parse JSON in {path}: {message}")


class ConfigValidationError(ReadieError):
    """Raised when a config file parses but violates the config shape."""

    def __init__(self, path: Path, message: str, *, kind: str = "Configuration") -> None:
        self.path = path
        self.message = message
        super().__init__(f"{kind} validation failed for {path}\n{message}")


class MissingWorkspaceRootError(ReadieError):
    """Raised when the workspace root directory does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Workspace root not found at {path}")


class ReadmeWriteError(ReadieError):
    """Raised when the rendered README cannot be written to disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to write README to {path}")


class ConfigExistsError(ReadieError):
    """Raised when ``readie init`` would overwrite an existing config."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Config already exists at {path}. Use --force to overwrite.")


__all__ = [
    "ConfigExistsError",
    "ConfigParseError",
    "ConfigValidationError",
    "MissingWorkspaceRootError",
    "ReadieError",
    "ReadmeWriteError",
]
