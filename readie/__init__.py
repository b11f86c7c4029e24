"""Generate README files from declarative ``readie.json`` configuration.

This package exposes the ``readie`` console script along with the library
entry points it is built on: single-project generation, workspace sweeps over
a directory of packages, and the config merge and render steps underneath.

Exports
-------
- ``app``: Cyclopts application for the ``readie`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``generate_readme``: Render one README from a config file.
- ``generate_workspace``: Render READMEs for every project under a root.

Examples
--------
>>> from pathlib import Path
>>> from readie import generate_readme
>>> generate_readme(Path("readie.json"), dry_run=True)  # doctest: +SKIP
GenerationResult(output_path=PosixPath('/work/README.md'), updated=True)
"""

from __future__ import annotations

from ._constants import VERSION as __version__
from .cli import app, main
from .generator import generate_readme, generate_workspace

__all__ = ["__version__", "app", "generate_readme", "generate_workspace", "main"]
