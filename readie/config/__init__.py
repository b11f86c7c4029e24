"""Load, validate, and merge readie configuration documents.

This subpackage decodes ``readie.json`` project files and the optional
``readie.global.json`` defaults file into msgspec Structs, finds the global
file by walking up from the project directory, and merges the two layers into
a :class:`MergedConfig` with ``{{ placeholder }}`` tokens resolved. The
renderer in :mod:`readie.generator` consumes only the merged result.

Examples
--------
>>> from pathlib import Path
>>> from readie.config import load_project_config, merge_configs
>>> project = load_project_config(Path("readie.json"))  # doctest: +SKIP
>>> merge_configs(None, project).title  # doctest: +SKIP
'My Project'
"""

from .loader import (
    discover_global_config,
    find_global_config,
    load_global_config,
    load_project_config,
    read_package_name,
)
from .merge import build_placeholders, interpolate, merge_configs
from .models import (
    Badge,
    CommandEntry,
    GlobalConfig,
    GlobalFlagEntry,
    LicenseLink,
    MergedConfig,
    ProjectConfig,
)
from .starter import STARTER_CONFIG, starter_config_text

__all__ = [
    "STARTER_CONFIG",
    "Badge",
    "CommandEntry",
    "GlobalConfig",
    "GlobalFlagEntry",
    "LicenseLink",
    "MergedConfig",
    "ProjectConfig",
    "build_placeholders",
    "discover_global_config",
    "find_global_config",
    "interpolate",
    "load_global_config",
    "load_project_config",
    "merge_configs",
    "read_package_name",
    "starter_config_text",
]
