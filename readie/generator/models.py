"""Shared dataclasses used by the README generation pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


@dc.dataclass(slots=True)
class ReadmeSections:
    """Rendered markdown blocks for one README, before assembly.

    Each attribute holds a complete block (heading included) or an empty
    string when the section has nothing to show.
    """

    banner: str = ""
    title: str = ""
    badges: str = ""
    features: str = ""
    prerequisites: str = ""
    quick_start: str = ""
    installation: str = ""
    manual_installation: str = ""
    usage: str = ""
    commands: str = ""
    global_flags: str = ""
    docs: str = ""
    quick_start_link: str = ""
    support: str = ""
    contributing: str = ""
    security: str = ""
    license: str = ""
    custom_sections: str = ""
    footer: str = ""

    def headed_blocks(self) -> list[tuple[str, str]]:
        """Return ``(toc title, block)`` pairs in document order."""
        return [
            ("Key Features", self.features),
            ("Prerequisites", self.prerequisites),
            ("Quick Start", self.quick_start),
            ("Installation", self.installation),
            ("Manual Installation", self.manual_installation),
            ("Usage", self.usage),
            ("Available Commands", self.commands),
            ("Global Flags", self.global_flags),
            ("Documentation", self.docs),
            ("Additional Quick Start", self.quick_start_link),
            ("Support", self.support),
            ("Contributing", self.contributing),
            ("Security", self.security),
            ("License", self.license),
        ]


@dc.dataclass(slots=True, frozen=True)
class GenerationResult:
    """Outcome of generating a single README.

    Attributes
    ----------
    output_path : Path
        Absolute path the README was, or would be, written to.
    updated : bool
        ``True`` when the rendered content differs from what is on disk.
    """

    output_path: Path
    updated: bool


@dc.dataclass(slots=True, frozen=True)
class WorkspaceFailure:
    """A workspace project whose generation raised."""

    name: str
    error: Exception


@dc.dataclass(slots=True)
class WorkspaceResult:
    """Aggregated outcome of a workspace generation run."""

    updated: list[str] = dc.field(default_factory=list)
    unchanged: list[str] = dc.field(default_factory=list)
    failed: list[WorkspaceFailure] = dc.field(default_factory=list)
    skipped_by_filter: list[str] = dc.field(default_factory=list)


__all__ = [
    "GenerationResult",
    "ReadmeSections",
    "WorkspaceFailure",
    "WorkspaceResult",
]
