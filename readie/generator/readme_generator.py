"""High-level orchestration for single-project README generation.

This module ties the pipeline together for one ``readie.json``: it loads and
validates the project config, discovers the nearest ``readie.global.json``,
reads the package name from a sibling ``package.json``, merges and
interpolates, renders markdown with :func:`render_readme`, and writes the
result only when it differs from what is already on disk.

Example
-------
>>> from pathlib import Path
>>> from readie.generator import ReadmeGenerator
>>> result = ReadmeGenerator(Path("packages/core/readie.json")).run()  # doctest: +SKIP
>>> result.updated  # doctest: +SKIP
True
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from readie._constants import DEFAULT_OUTPUT_NAME
from readie.config import (
    discover_global_config,
    load_project_config,
    merge_configs,
    read_package_name,
)
from readie.errors import ReadmeWriteError

from .models import GenerationResult
from .template import render_readme

logger = logging.getLogger(__name__)

_DEFAULT_FILE_MODE = 0o644


class ReadmeGenerator:
    """Render the README described by one project config file."""

    def __init__(
        self,
        config_path: Path,
        *,
        output_path: Path | None = None,
        dry_run: bool = False,
        use_global_config: bool = True,
    ) -> None:
        """Initialize the generator for ``config_path``.

        Parameters
        ----------
        config_path : Path
            Path to the project ``readie.json``; resolved to an absolute path.
        output_path : Path, optional
            Explicit output location, resolved against the working directory.
            Takes precedence over the config's ``output`` field.
        dry_run : bool, optional
            When ``True``, compute whether the README would change without
            writing it.
        use_global_config : bool, optional
            When ``False``, skip ``readie.global.json`` discovery entirely.
        """
        self.config_path = config_path.resolve()
        self.output_override = output_path
        self.dry_run = dry_run
        self.use_global_config = use_global_config

    def run(self) -> GenerationResult:
        """Render the README and write it when the content changed.

        Returns
        -------
        GenerationResult
            The resolved output path and whether the content differs from the
            file on disk. ``updated`` is ``True`` in dry-run mode when a write
            would have happened.

        Raises
        ------
        ConfigParseError
            If the project or global config is not valid JSON.
        ConfigValidationError
            If the project or global config violates the config shape.
        ReadmeWriteError
            If the README cannot be written.
        """
        project = load_project_config(self.config_path)
        global_config = None
        if self.use_global_config:
            global_config = discover_global_config(self.config_path.parent)
        package_name = read_package_name(self.config_path)
        config = merge_configs(global_config, project, package_name=package_name)

        output_path = self._resolve_output_path(config.output)
        content = render_readme(config).encode("utf-8")
        if _read_existing(output_path) == content:
            logger.debug("README at %s is up to date", output_path)
            return GenerationResult(output_path=output_path, updated=False)

        if not self.dry_run:
            _write_atomic(output_path, content)
        return GenerationResult(output_path=output_path, updated=True)

    def _resolve_output_path(self, configured: str | None) -> Path:
        if self.output_override is not None:
            return self.output_override.resolve()
        base_dir = self.config_path.parent
        if configured:
            return (base_dir / configured).resolve()
        return base_dir / DEFAULT_OUTPUT_NAME


def generate_readme(
    config_path: Path,
    *,
    output_path: Path | None = None,
    dry_run: bool = False,
    use_global_config: bool = True,
) -> GenerationResult:
    """Generate the README for one ``readie.json``; see :class:`ReadmeGenerator`."""
    generator = ReadmeGenerator(
        config_path,
        output_path=output_path,
        dry_run=dry_run,
        use_global_config=use_global_config,
    )
    return generator.run()


def _read_existing(path: Path) -> bytes | None:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None


def _write_atomic(path: Path, content: bytes) -> None:
    """Write ``content`` to ``path`` through a temporary file and a rename."""
    tmp: Path | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = path.stat().st_mode & 0o777 if path.exists() else _DEFAULT_FILE_MODE
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        tmp = Path(tmp_name)
        with os.fdopen(fd, "wb") as handle:
            handle.write(content)
        os.chmod(tmp, mode)
        tmp.replace(path)
    except OSError as exc:
        if tmp is not None:
            tmp.unlink(missing_ok=True)
        raise ReadmeWriteError(path) from exc


__all__ = ["ReadmeGenerator", "generate_readme"]
