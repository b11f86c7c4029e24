"""Cyclopts CLI entrypoint for generating README files from readie configs.

The ``readie`` console script defined here renders a single README from a
``readie.json`` (the default command), sweeps a workspace of packages with
``readie generate:workspace``, and writes a starter config with
``readie init``. Every option can also be supplied through ``READIE_*``
environment variables, which is convenient in CI.

Examples
--------
Generate the README beside ``./readie.json``:

>>> from readie.cli import main
>>> main()  # doctest: +SKIP

Check every package in a monorepo without writing anything:

>>> from readie.cli import app
>>> app(["generate:workspace", "--root", "packages", "--dry-run"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_NAME, DEFAULT_WORKSPACE_ROOT, VERSION
from .config import starter_config_text
from .errors import ConfigExistsError, ReadieError
from .generator import generate_readme, generate_workspace, parse_package_list

if typ.TYPE_CHECKING:
    from .generator import GenerationResult, WorkspaceResult

app = App(
    name="readie",
    help="Generate high-quality README files from readie.json.",
    version=VERSION,
    config=cyclopts.config.Env("READIE_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:
            return str(path)
    return str(path)


def _fail(exc: Exception) -> typ.NoReturn:
    print(str(exc), file=sys.stderr)
    raise SystemExit(1) from exc


class ConsoleReporter:
    """Print one status line per workspace project."""

    def __init__(self, *, dry_run: bool) -> None:
        self.dry_run = dry_run

    def on_project_updated(self, name: str, result: GenerationResult) -> None:
        verb = "Would update" if self.dry_run else "Generated"
        print(f"{verb} README for {name}")

    def on_project_unchanged(self, name: str, result: GenerationResult) -> None:
        print(f"No changes for {name}")

    def on_project_failed(self, name: str, error: Exception) -> None:
        print(f"Error generating README for {name}: {error}", file=sys.stderr)


@app.command(help="Generate a README from a single readie.json config file.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(name=["--config", "-c"], help="Path to readie config file")
    ] = Path(DEFAULT_CONFIG_NAME),
    output: typ.Annotated[
        Path | None,
        Parameter(name=["--output", "-o"], help="Optional output path for README"),
    ] = None,
    dry_run: typ.Annotated[
        bool, Parameter(help="Show changes without writing files")
    ] = False,
    use_global: typ.Annotated[
        bool,
        Parameter(name="--global", help="Discover and merge readie.global.json"),
    ] = True,
) -> None:
    """Render one README and report whether it changed.

    Parameters
    ----------
    config : Path, optional
        Project config to render; defaults to ``./readie.json``.
    output : Path or None, optional
        Output override; otherwise the config's ``output`` field or
        ``README.md`` beside the config is used.
    dry_run : bool, optional
        Report the outcome without writing.
    use_global : bool, optional
        ``--no-global`` disables ``readie.global.json`` discovery.
    """
    try:
        result = generate_readme(
            config,
            output_path=output,
            dry_run=dry_run,
            use_global_config=use_global,
        )
    except (ReadieError, OSError) as exc:
        _fail(exc)
    print(f"{_result_status(result, dry_run=dry_run)}: {_format_path(result.output_path)}")


app.default(generate)


@app.command(
    name="generate:workspace",
    help="Generate READMEs for projects inside a workspace root.",
)
def generate_workspace_command(
    *,
    root: typ.Annotated[
        Path, Parameter(name=["--root", "-r"], help="Workspace root directory")
    ] = Path(DEFAULT_WORKSPACE_ROOT),
    config_name: typ.Annotated[
        str, Parameter(help="Config filename to search for in each project")
    ] = DEFAULT_CONFIG_NAME,
    package: typ.Annotated[
        list[str] | None,
        Parameter(
            name=["--package", "-p"],
            help="Project name filter (repeatable, comma-separated supported)",
        ),
    ] = None,
    dry_run: typ.Annotated[
        bool, Parameter(help="Show changes without writing files")
    ] = False,
    strict: typ.Annotated[
        bool, Parameter(help="Exit with code 1 if any project fails")
    ] = False,
    use_global: typ.Annotated[
        bool,
        Parameter(name="--global", help="Discover and merge readie.global.json"),
    ] = True,
) -> None:
    """Sweep every project under ``root`` and print a summary.

    Per-project failures are reported and counted but only change the exit
    status when ``--strict`` is given. A missing root always exits with 1.
    """
    try:
        result = generate_workspace(
            root,
            config_name=config_name,
            package_filter=parse_package_list(package or []),
            dry_run=dry_run,
            use_global_config=use_global,
            reporter=ConsoleReporter(dry_run=dry_run),
        )
    except (ReadieError, OSError) as exc:
        _fail(exc)
    _print_summary(result)
    if strict and result.failed:
        raise SystemExit(1)


@app.command(help="Create a starter readie.json file in the current directory.")
def init(
    *,
    config: typ.Annotated[
        Path,
        Parameter(name=["--config", "-c"], help="Path for generated starter config"),
    ] = Path(DEFAULT_CONFIG_NAME),
    force: typ.Annotated[
        bool,
        Parameter(
            name=["--force", "-f"], help="Overwrite existing config file if it exists"
        ),
    ] = False,
) -> None:
    """Write the starter config, refusing to clobber an existing file."""
    config_path = config.resolve()
    try:
        if config_path.exists() and not force:
            raise ConfigExistsError(config_path)
        config_path.write_text(starter_config_text(), encoding="utf-8")
    except (ReadieError, OSError) as exc:
        _fail(exc)
    print(f"Created starter config: {_format_path(config_path)}")


def _result_status(result: GenerationResult, *, dry_run: bool) -> str:
    if not result.updated:
        return "No changes"
    return "Would update" if dry_run else "Generated"


def _print_summary(result: WorkspaceResult) -> None:
    print()
    print("Summary")
    print(f"- Updated: {len(result.updated)}")
    print(f"- Unchanged: {len(result.unchanged)}")
    print(f"- Failed: {len(result.failed)}")
    if result.skipped_by_filter:
        print(f"- Skipped by filter: {len(result.skipped_by_filter)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``readie`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
