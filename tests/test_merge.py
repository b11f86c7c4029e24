"""Unit tests for merging project and global configs.

The cases pin down field precedence (project presence wins, explicit null
means absent), the key-wise ``customSections`` merge, and placeholder
interpolation applied once after merging.
"""

from __future__ import annotations

import typing as typ

import pytest

from readie.config import (
    Badge,
    GlobalConfig,
    LicenseLink,
    ProjectConfig,
    build_placeholders,
    interpolate,
    merge_configs,
)


def _project(**overrides: typ.Any) -> ProjectConfig:
    fields: dict[str, typ.Any] = {
        "title": "My Package",
        "description": "Project level description.",
    }
    fields.update(overrides)
    return ProjectConfig(**fields)


def test_project_value_wins_over_global() -> None:
    """A field present in the project document beats the global default."""
    merged = merge_configs(
        GlobalConfig(banner="G"), _project(title="T", description="D", banner="P")
    )

    assert merged.banner == "P", f"expected project banner, got {merged.banner!r}"


def test_global_value_fills_missing_project_field() -> None:
    """Fields the project never mentions fall back to the global layer."""
    merged = merge_configs(
        GlobalConfig(features=["Feature A"], include_table_of_contents=False),
        _project(),
    )

    assert merged.features == ["Feature A"]
    assert merged.include_table_of_contents is False


def test_project_null_means_absent() -> None:
    """An explicit null in the project blocks inheritance from the global layer."""
    merged = merge_configs(
        GlobalConfig(footer="G"), _project(title="T", description="D", footer=None)
    )

    assert merged.footer is None, f"expected footer to be absent, got {merged.footer!r}"


def test_global_null_means_absent() -> None:
    """A null in the global layer also resolves to absent."""
    merged = merge_configs(GlobalConfig(footer=None), _project())

    assert merged.footer is None


def test_title_and_description_never_inherit() -> None:
    """Title and description always come from the project document."""
    merged = merge_configs(
        GlobalConfig(title="Global title", description="Global description"),
        _project(),
    )

    assert merged.title == "My Package"
    assert merged.description == "Project level description."


def test_merge_without_global_config() -> None:
    """Passing no global config leaves unset fields absent."""
    merged = merge_configs(None, _project(usage=["Run it"]))

    assert merged.usage == ["Run it"]
    assert merged.banner is None
    assert merged.custom_sections is None


def test_custom_sections_merge_key_wise() -> None:
    """Global sections come first; project entries override by key."""
    merged = merge_configs(
        GlobalConfig(custom_sections={"A": "global a", "B": "global b"}),
        _project(custom_sections={"B": "project b", "C": "project c"}),
    )

    assert merged.custom_sections == {
        "A": "global a",
        "B": "project b",
        "C": "project c",
    }
    assert list(merged.custom_sections) == ["A", "B", "C"], (
        "expected global keys to keep their position ahead of project-only keys"
    )


def test_custom_sections_inherited_when_project_is_silent() -> None:
    """Without a project entry the global sections are used as-is."""
    merged = merge_configs(GlobalConfig(custom_sections={"Notes": "n"}), _project())

    assert merged.custom_sections == {"Notes": "n"}


def test_custom_sections_null_drops_everything() -> None:
    """An explicit null in the project removes inherited sections entirely."""
    merged = merge_configs(
        GlobalConfig(custom_sections={"Notes": "n"}), _project(custom_sections=None)
    )

    assert merged.custom_sections is None


def test_global_placeholders_interpolate_after_merge() -> None:
    """Global strings see the project's title and package name."""
    merged = merge_configs(
        GlobalConfig(
            banner='<h1 align="center">{{title}}</h1>',
            footer="Built by {{ title }} - {{packageName}} - {{packageNameEncoded}}",
            custom_sections={"Notes": "Package: {{title}}"},
        ),
        _project(),
        package_name="@c15t/react",
    )

    assert merged.banner == '<h1 align="center">My Package</h1>'
    assert merged.footer == "Built by My Package - @c15t/react - %40c15t%2Freact"
    assert merged.custom_sections == {"Notes": "Package: My Package"}


@pytest.mark.parametrize("source", ["global", "project"])
def test_interpolation_is_independent_of_value_source(source: str) -> None:
    """The same token resolves identically whichever layer supplied it."""
    if source == "global":
        merged = merge_configs(
            GlobalConfig(footer="{{title}}"), _project(title="X", description="D")
        )
    else:
        merged = merge_configs(
            None, _project(title="X", description="D", footer="{{title}}")
        )

    assert merged.footer == "X", f"expected footer 'X' from {source}, got {merged.footer!r}"


def test_project_precedence_applies_before_interpolation() -> None:
    """A project override replaces the global template before tokens resolve."""
    merged = merge_configs(
        GlobalConfig(banner="Global banner {{title}}", quick_start="Global quick start"),
        _project(banner="Project banner", quick_start="Quick start for {{title}}"),
    )

    assert merged.banner == "Project banner"
    assert merged.quick_start == "Quick start for My Package"


def test_package_name_falls_back_to_title() -> None:
    """Without a package name the encoded token uses the project title."""
    merged = merge_configs(GlobalConfig(footer="Encoded: {{packageNameEncoded}}"), _project())

    assert merged.footer == "Encoded: My%20Package"


def test_blank_package_name_falls_back_to_title() -> None:
    """A whitespace-only package name is treated as missing."""
    placeholders = build_placeholders("Title", "   ")

    assert placeholders["packageName"] == "Title"


def test_package_name_is_trimmed() -> None:
    """Surrounding whitespace is stripped from the package name."""
    placeholders = build_placeholders("Title", "  @scope/pkg  ")

    assert placeholders["packageName"] == "@scope/pkg"
    assert placeholders["packageNameEncoded"] == "%40scope%2Fpkg"


def test_unknown_tokens_are_left_verbatim() -> None:
    """Identifiers without a placeholder keep their braces."""
    text = interpolate("{{ title }} and {{ unknown }}", {"title": "T"})

    assert text == "T and {{ unknown }}"


def test_structured_and_list_values_are_not_interpolated() -> None:
    """Only flat strings and custom section bodies are rewritten."""
    merged = merge_configs(
        None,
        _project(
            features=["{{title}} is fast"],
            license=LicenseLink(name="{{title}}", url="https://example.invalid"),
            badges=[Badge(label="{{title}}", image="https://example.invalid/b.svg")],
        ),
    )

    assert merged.features == ["{{title}} is fast"]
    assert isinstance(merged.license, LicenseLink)
    assert merged.license.name == "{{title}}"
    assert merged.badges is not None
    assert merged.badges[0].label == "{{title}}"


def test_string_license_is_interpolated() -> None:
    """A text license is a flat string field."""
    merged = merge_configs(None, _project(license="MIT (c) {{title}}"))

    assert merged.license == "MIT (c) My Package"
