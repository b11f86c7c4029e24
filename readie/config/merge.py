"""Combine project and global configs and resolve ``{{ placeholder }}`` tokens.

Precedence is decided per field: when the project document contains a key,
its value wins, and an explicit ``null`` there means "absent" rather than
"inherit". Keys the project never mentions fall back to the global document.
``customSections`` is merged key by key instead. Placeholders are substituted
once, after the merge, so a value behaves the same whichever layer it came
from.

Examples
--------
>>> from readie.config.models import GlobalConfig, ProjectConfig
>>> merged = merge_configs(
...     GlobalConfig(footer="Made for {{ title }}"),
...     ProjectConfig(title="Demo", description="A demo."),
... )
>>> merged.footer
'Made for Demo'
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from urllib.parse import quote

from msgspec import UNSET, UnsetType

from .models import GlobalConfig, MergedConfig, ProjectConfig

if typ.TYPE_CHECKING:
    import collections.abc as cabc

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")

# Characters encodeURIComponent leaves untouched besides alphanumerics and "_.-~".
_URI_COMPONENT_SAFE = "!*'()"


def merge_configs(
    global_config: GlobalConfig | None,
    project_config: ProjectConfig,
    *,
    package_name: str | None = None,
) -> MergedConfig:
    """Merge ``project_config`` over ``global_config`` and interpolate strings.

    Parameters
    ----------
    global_config : GlobalConfig or None
        Shared defaults, or ``None`` when no global config applies.
    project_config : ProjectConfig
        The project document; always authoritative for ``title`` and
        ``description``.
    package_name : str, optional
        Package name used for ``{{packageName}}`` and
        ``{{packageNameEncoded}}``; falls back to the project title when blank.

    Returns
    -------
    MergedConfig
        The merged config with placeholders resolved.
    """
    glob = global_config if global_config is not None else GlobalConfig()
    proj = project_config
    merged = MergedConfig(
        title=proj.title,
        description=proj.description,
        schema=_resolve(proj.schema, glob.schema),
        version=_resolve(proj.version, glob.version),
        output=_resolve(proj.output, glob.output),
        include_table_of_contents=_resolve(
            proj.include_table_of_contents, glob.include_table_of_contents
        ),
        features=_resolve(proj.features, glob.features),
        prerequisites=_resolve(proj.prerequisites, glob.prerequisites),
        installation=_resolve(proj.installation, glob.installation),
        manual_installation=_resolve(
            proj.manual_installation, glob.manual_installation
        ),
        usage=_resolve(proj.usage, glob.usage),
        commands=_resolve(proj.commands, glob.commands),
        global_flags=_resolve(proj.global_flags, glob.global_flags),
        badges=_resolve(proj.badges, glob.badges),
        banner=_resolve(proj.banner, glob.banner),
        quick_start=_resolve(proj.quick_start, glob.quick_start),
        support=_resolve(proj.support, glob.support),
        contributing=_resolve(proj.contributing, glob.contributing),
        security=_resolve(proj.security, glob.security),
        license=_resolve(proj.license, glob.license),
        footer=_resolve(proj.footer, glob.footer),
        docs_link=_resolve(proj.docs_link, glob.docs_link),
        quick_start_link=_resolve(proj.quick_start_link, glob.quick_start_link),
        custom_sections=_merge_custom_sections(
            proj.custom_sections, glob.custom_sections
        ),
    )
    placeholders = build_placeholders(proj.title, package_name)
    return interpolate_config(merged, placeholders)


def build_placeholders(title: str, package_name: str | None = None) -> dict[str, str]:
    """Return the token map available to ``{{ ... }}`` placeholders.

    >>> build_placeholders("My Package")["packageNameEncoded"]
    'My%20Package'
    >>> build_placeholders("X", "@c15t/react")["packageNameEncoded"]
    '%40c15t%2Freact'
    """
    trimmed = package_name.strip() if package_name else ""
    resolved = trimmed or title
    return {
        "title": title,
        "packageName": resolved,
        "packageNameEncoded": quote(resolved, safe=_URI_COMPONENT_SAFE),
    }


def interpolate(value: str, placeholders: cabc.Mapping[str, str]) -> str:
    """Replace known ``{{ name }}`` tokens in ``value``; leave unknown ones as-is."""

    def _repl(match: re.Match[str]) -> str:
        return placeholders.get(match.group(1), match.group(0))

    return PLACEHOLDER_PATTERN.sub(_repl, value)


def interpolate_config(
    config: MergedConfig, placeholders: cabc.Mapping[str, str]
) -> MergedConfig:
    """Return a copy of ``config`` with placeholders resolved in string fields.

    Only flat string fields and ``customSections`` values are rewritten; lists
    and structured values such as a license object or badges are kept as-is.
    """

    def _sub(value: str | None) -> str | None:
        return interpolate(value, placeholders) if value is not None else None

    license_value = config.license
    if isinstance(license_value, str):
        license_value = interpolate(license_value, placeholders)

    custom_sections = config.custom_sections
    if custom_sections is not None:
        custom_sections = {
            heading: interpolate(body, placeholders)
            for heading, body in custom_sections.items()
        }

    return dc.replace(
        config,
        title=interpolate(config.title, placeholders),
        description=interpolate(config.description, placeholders),
        schema=_sub(config.schema),
        version=_sub(config.version),
        output=_sub(config.output),
        banner=_sub(config.banner),
        quick_start=_sub(config.quick_start),
        security=_sub(config.security),
        license=license_value,
        footer=_sub(config.footer),
        docs_link=_sub(config.docs_link),
        quick_start_link=_sub(config.quick_start_link),
        custom_sections=custom_sections,
    )


def _resolve(project_value: typ.Any, global_value: typ.Any) -> typ.Any:
    """Pick the project value when the key is present, else the global one."""
    if project_value is not UNSET:
        return project_value
    if global_value is UNSET:
        return None
    return global_value


def _merge_custom_sections(
    project_sections: dict[str, str] | None | UnsetType,
    global_sections: dict[str, str] | None | UnsetType,
) -> dict[str, str] | None:
    """Combine custom sections key-wise, with project entries overriding."""
    inherited = global_sections if isinstance(global_sections, dict) else None
    match project_sections:
        case dict():
            return {**(inherited or {}), **project_sections}
        case None:
            return None
        case _:
            return dict(inherited) if inherited is not None else None


__all__ = [
    "PLACEHOLDER_PATTERN",
    "build_placeholders",
    "interpolate",
    "interpolate_config",
    "merge_configs",
]
