"""Load readie config documents from disk into typed structures."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import msgspec

from readie._constants import GLOBAL_CONFIG_NAME, PACKAGE_MANIFEST_NAME
from readie.errors import ConfigParseError, ConfigValidationError

from .models import GlobalConfig, ProjectConfig

logger = logging.getLogger(__name__)

_ConfigT = typ.TypeVar("_ConfigT", ProjectConfig, GlobalConfig)


class _PackageManifest(msgspec.Struct):
    """The subset of ``package.json`` readie cares about."""

    name: str | None = None


def load_project_config(path: Path) -> ProjectConfig:
    """Decode and validate a project ``readie.json`` file.

    Parameters
    ----------
    path : Path
        Location of the project config; resolved to an absolute path.

    Returns
    -------
    ProjectConfig
        The validated project document.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ConfigParseError
        If the file is not valid JSON.
    ConfigValidationError
        If the JSON does not match the project config shape, for example when
        ``title`` or ``description`` is missing.
    """
    return _decode(path, ProjectConfig, kind="Configuration")


def load_global_config(path: Path) -> GlobalConfig:
    """Decode and validate a ``readie.global.json`` file.

    Raises the same errors as :func:`load_project_config`; no field is
    required.
    """
    return _decode(path, GlobalConfig, kind="Global configuration")


def find_global_config(start_dir: Path) -> Path | None:
    """Return the nearest ``readie.global.json`` at or above ``start_dir``."""
    current = start_dir.resolve()
    while True:
        candidate = current / GLOBAL_CONFIG_NAME
        if candidate.is_file():
            logger.debug("Using global config %s", candidate)
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def discover_global_config(start_dir: Path) -> GlobalConfig | None:
    """Load the nearest global config, or return ``None`` when there is none.

    A global config that exists but fails to parse or validate raises, so a
    broken shared defaults file is never silently ignored.
    """
    path = find_global_config(start_dir)
    if path is None:
        return None
    return load_global_config(path)


def read_package_name(config_path: Path) -> str | None:
    """Return the ``name`` from the ``package.json`` beside ``config_path``.

    Lookup is best-effort: a missing, unreadable, or malformed manifest, or a
    blank name, yields ``None`` instead of an error.
    """
    manifest_path = config_path.parent / PACKAGE_MANIFEST_NAME
    try:
        manifest = msgspec.json.decode(
            manifest_path.read_bytes(), type=_PackageManifest
        )
    except (OSError, msgspec.DecodeError) as exc:
        logger.debug("No package name from %s: %s", manifest_path, exc)
        return None
    if manifest.name is None or not manifest.name.strip():
        return None
    return manifest.name


def _decode(path: Path, config_type: type[_ConfigT], *, kind: str) -> _ConfigT:
    absolute = path.resolve()
    raw = absolute.read_bytes()
    try:
        return msgspec.json.decode(raw, type=config_type)
    except msgspec.ValidationError as exc:
        raise ConfigValidationError(absolute, str(exc), kind=kind) from exc
    except msgspec.DecodeError as exc:
        raise ConfigParseError(absolute, str(exc)) from exc


__all__ = [
    "discover_global_config",
    "find_global_config",
    "load_global_config",
    "load_project_config",
    "read_package_name",
]
