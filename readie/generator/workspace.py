"""Generate READMEs for every project directly beneath a workspace root.

Projects are the immediate subdirectories of the root that contain the config
file. They are processed one at a time in name order; a failure in one project
is recorded and the sweep moves on. Progress is reported through an injected
:class:`WorkspaceReporter` so callers decide where messages go.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from readie._constants import DEFAULT_CONFIG_NAME
from readie.errors import MissingWorkspaceRootError

from .models import GenerationResult, WorkspaceFailure, WorkspaceResult
from .readme_generator import generate_readme

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class WorkspaceReporter(typ.Protocol):
    """Observer notified as each workspace project finishes."""

    def on_project_updated(self, name: str, result: GenerationResult) -> None:
        """Handle a project whose README was (or would be) rewritten."""

    def on_project_unchanged(self, name: str, result: GenerationResult) -> None:
        """Handle a project whose README is already current."""

    def on_project_failed(self, name: str, error: Exception) -> None:
        """Handle a project whose generation raised."""


class NullReporter:
    """Reporter that ignores every event."""

    def on_project_updated(self, name: str, result: GenerationResult) -> None:
        return None

    def on_project_unchanged(self, name: str, result: GenerationResult) -> None:
        return None

    def on_project_failed(self, name: str, error: Exception) -> None:
        return None


def parse_package_list(values: cabc.Iterable[str]) -> frozenset[str]:
    """Split repeated, comma-separated ``--package`` values into a name set.

    >>> sorted(parse_package_list(["alpha,beta", " gamma ", ","]))
    ['alpha', 'beta', 'gamma']
    """
    names: set[str] = set()
    for value in values:
        for part in value.split(","):
            name = part.strip()
            if name:
                names.add(name)
    return frozenset(names)


def discover_projects(root_dir: Path, config_name: str) -> list[Path]:
    """Return subdirectories of ``root_dir`` holding ``config_name``, by name."""
    return sorted(
        entry
        for entry in root_dir.iterdir()
        if entry.is_dir() and (entry / config_name).is_file()
    )


def generate_workspace(
    root_dir: Path,
    *,
    config_name: str = DEFAULT_CONFIG_NAME,
    package_filter: cabc.Set[str] = frozenset(),
    dry_run: bool = False,
    use_global_config: bool = True,
    reporter: WorkspaceReporter | None = None,
) -> WorkspaceResult:
    """Generate READMEs for each selected project under ``root_dir``.

    Parameters
    ----------
    root_dir : Path
        Workspace root whose immediate subdirectories are candidate projects.
    config_name : str, optional
        Config file name to look for in each project directory.
    package_filter : Set[str], optional
        Directory names to process. When empty every discovered project is
        processed; otherwise unlisted projects are reported as skipped.
    dry_run : bool, optional
        Compute changes without writing files.
    use_global_config : bool, optional
        Forwarded to :func:`generate_readme` for each project.
    reporter : WorkspaceReporter, optional
        Receives one event per processed project.

    Returns
    -------
    WorkspaceResult
        Project names grouped by outcome, plus per-project failures.

    Raises
    ------
    MissingWorkspaceRootError
        If ``root_dir`` is not an existing directory. Raised before any project
        is touched.
    """
    root = root_dir.resolve()
    if not root.is_dir():
        raise MissingWorkspaceRootError(root)
    sink = reporter if reporter is not None else NullReporter()

    result = WorkspaceResult()
    selected: list[Path] = []
    for project_dir in discover_projects(root, config_name):
        if package_filter and project_dir.name not in package_filter:
            result.skipped_by_filter.append(project_dir.name)
        else:
            selected.append(project_dir)

    for project_dir in selected:
        name = project_dir.name
        try:
            outcome = generate_readme(
                project_dir / config_name,
                dry_run=dry_run,
                use_global_config=use_global_config,
            )
        except Exception as exc:  # noqa: BLE001 - one project must not abort the sweep
            result.failed.append(WorkspaceFailure(name=name, error=exc))
            sink.on_project_failed(name, exc)
            continue
        if outcome.updated:
            result.updated.append(name)
            sink.on_project_updated(name, outcome)
        else:
            result.unchanged.append(name)
            sink.on_project_unchanged(name, outcome)
    return result


__all__ = [
    "NullReporter",
    "WorkspaceReporter",
    "discover_projects",
    "generate_workspace",
    "parse_package_list",
]
