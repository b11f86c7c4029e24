"""Typed structures describing readie configuration documents.

Raw documents (``readie.json`` and ``readie.global.json``) are decoded into
msgspec Structs. Optional fields default to :data:`msgspec.UNSET` so the merge
step can tell a key that was never written apart from one explicitly set to
``null``. The merged result is a plain dataclass in which ``None`` always means
"absent".
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec
from msgspec import UNSET, UnsetType

NonEmptyStr = typ.Annotated[str, msgspec.Meta(min_length=1)]


class CommandEntry(msgspec.Struct):
    """CLI command rendered in the Available Commands section."""

    name: NonEmptyStr
    description: NonEmptyStr


class GlobalFlagEntry(msgspec.Struct):
    """CLI flag rendered in the Global Flags section."""

    flag: NonEmptyStr
    description: NonEmptyStr


class Badge(msgspec.Struct):
    """Badge image with an optional click-through link."""

    label: NonEmptyStr
    image: NonEmptyStr
    link: NonEmptyStr | None = None


class LicenseLink(msgspec.Struct):
    """License rendered as a linked label."""

    name: NonEmptyStr
    url: NonEmptyStr


License = NonEmptyStr | LicenseLink


class _SharedFields(msgspec.Struct, rename="camel", kw_only=True, omit_defaults=True):
    """Fields accepted by both project and global documents."""

    schema: str | None | UnsetType = msgspec.field(name="$schema", default=UNSET)
    version: typ.Literal["1"] | None | UnsetType = UNSET
    output: str | None | UnsetType = UNSET
    include_table_of_contents: bool | None | UnsetType = UNSET
    features: list[str] | None | UnsetType = UNSET
    prerequisites: list[str] | None | UnsetType = UNSET
    installation: list[str] | None | UnsetType = UNSET
    manual_installation: list[str] | None | UnsetType = UNSET
    usage: list[str] | None | UnsetType = UNSET
    commands: list[CommandEntry] | None | UnsetType = UNSET
    global_flags: list[GlobalFlagEntry] | None | UnsetType = UNSET
    badges: list[Badge] | None | UnsetType = UNSET
    banner: str | None | UnsetType = UNSET
    quick_start: str | None | UnsetType = UNSET
    support: list[str] | None | UnsetType = UNSET
    contributing: list[str] | None | UnsetType = UNSET
    security: str | None | UnsetType = UNSET
    license: License | None | UnsetType = UNSET
    footer: str | None | UnsetType = UNSET
    docs_link: str | None | UnsetType = UNSET
    quick_start_link: str | None | UnsetType = UNSET
    custom_sections: dict[str, str] | None | UnsetType = UNSET


class ProjectConfig(_SharedFields, kw_only=True):
    """Per-project ``readie.json`` document; ``title`` and ``description`` are required."""

    title: NonEmptyStr
    description: NonEmptyStr


class GlobalConfig(_SharedFields, kw_only=True):
    """Shared defaults from ``readie.global.json``; every field is optional."""

    title: NonEmptyStr | None | UnsetType = UNSET
    description: NonEmptyStr | None | UnsetType = UNSET


@dc.dataclass(slots=True)
class MergedConfig:
    """A project config with global defaults applied and placeholders resolved.

    Attributes
    ----------
    title : str
        Project title, always taken from the project document.
    description : str
        Project description, always taken from the project document.
    custom_sections : dict[str, str] or None
        Extra sections keyed by heading, rendered in insertion order.

    Every other attribute mirrors the field of the same name in
    :class:`ProjectConfig`; ``None`` means the field is absent.
    """

    title: str
    description: str
    schema: str | None = None
    version: str | None = None
    output: str | None = None
    include_table_of_contents: bool | None = None
    features: list[str] | None = None
    prerequisites: list[str] | None = None
    installation: list[str] | None = None
    manual_installation: list[str] | None = None
    usage: list[str] | None = None
    commands: list[CommandEntry] | None = None
    global_flags: list[GlobalFlagEntry] | None = None
    badges: list[Badge] | None = None
    banner: str | None = None
    quick_start: str | None = None
    support: list[str] | None = None
    contributing: list[str] | None = None
    security: str | None = None
    license: str | LicenseLink | None = None
    footer: str | None = None
    docs_link: str | None = None
    quick_start_link: str | None = None
    custom_sections: dict[str, str] | None = None


__all__ = [
    "Badge",
    "CommandEntry",
    "GlobalConfig",
    "GlobalFlagEntry",
    "License",
    "LicenseLink",
    "MergedConfig",
    "NonEmptyStr",
    "ProjectConfig",
]
