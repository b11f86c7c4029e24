"""Tests for the workspace sweep across many project directories."""

from __future__ import annotations

import typing as typ

import pytest

from readie.errors import ConfigValidationError, MissingWorkspaceRootError
from readie.generator import WorkspaceReporter, generate_workspace, parse_package_list
from readie.generator.workspace import discover_projects

if typ.TYPE_CHECKING:
    from pathlib import Path

    from conftest import JsonWriter
    from pytest_mock import MockerFixture


@pytest.fixture
def workspace(tmp_path: Path, write_json: JsonWriter) -> Path:
    """Create ``packages/{alpha,beta,gamma}`` each holding a valid config."""
    root = tmp_path / "packages"
    for name in ("gamma", "alpha", "beta"):
        write_json(
            root / name / "readie.json",
            {"title": name.title(), "description": f"The {name} package."},
        )
    return root


def test_discover_projects_requires_config_file(
    workspace: Path, write_json: JsonWriter
) -> None:
    """Only immediate subdirectories holding the config are projects."""
    (workspace / "docs").mkdir()
    (workspace / "notes.txt").write_text("not a project", encoding="utf-8")
    write_json(workspace / "nested" / "deeper" / "readie.json", {"title": "x"})

    names = [path.name for path in discover_projects(workspace, "readie.json")]

    assert names == ["alpha", "beta", "gamma"], f"unexpected projects {names}"


def test_every_project_is_generated(workspace: Path) -> None:
    """Without a filter every discovered project is processed in name order."""
    result = generate_workspace(workspace, use_global_config=False)

    assert result.updated == ["alpha", "beta", "gamma"]
    assert result.unchanged == []
    assert result.failed == []
    for name in result.updated:
        readme = workspace / name / "README.md"
        assert readme.read_text(encoding="utf-8").startswith(f"# {name.title()}\n")


def test_package_filter_skips_unlisted_projects(workspace: Path) -> None:
    """Filtered-out projects are counted as skipped and left untouched."""
    result = generate_workspace(
        workspace, package_filter=parse_package_list(["alpha,gamma"])
    )

    assert result.updated == ["alpha", "gamma"]
    assert result.skipped_by_filter == ["beta"]
    assert not (workspace / "beta" / "README.md").exists()


def test_filter_naming_unknown_project_processes_nothing(workspace: Path) -> None:
    """A filter that matches nothing skips every discovered project."""
    result = generate_workspace(workspace, package_filter=frozenset({"delta"}))

    assert result.updated == []
    assert result.skipped_by_filter == ["alpha", "beta", "gamma"]


def test_failing_project_does_not_stop_the_sweep(workspace: Path) -> None:
    """One invalid config is recorded while the others still generate."""
    (workspace / "beta" / "readie.json").write_text('{"title": ""}', encoding="utf-8")

    result = generate_workspace(workspace)

    assert result.updated == ["alpha", "gamma"]
    assert [failure.name for failure in result.failed] == ["beta"]
    assert isinstance(result.failed[0].error, ConfigValidationError)
    assert (workspace / "gamma" / "README.md").is_file(), (
        "expected projects after the failure to be processed"
    )


def test_second_sweep_reports_unchanged(workspace: Path) -> None:
    """Re-running over up-to-date projects writes nothing."""
    generate_workspace(workspace)

    result = generate_workspace(workspace)

    assert result.updated == []
    assert result.unchanged == ["alpha", "beta", "gamma"]


def test_dry_run_writes_nothing(workspace: Path) -> None:
    """Dry runs report would-be updates without creating files."""
    result = generate_workspace(workspace, dry_run=True)

    assert result.updated == ["alpha", "beta", "gamma"]
    assert not any((workspace / name / "README.md").exists() for name in result.updated)


def test_custom_config_name(tmp_path: Path, write_json: JsonWriter) -> None:
    """Projects are discovered by the configured file name."""
    root = tmp_path / "apps"
    write_json(root / "web" / "docs.json", {"title": "Web", "description": "d"})
    write_json(root / "api" / "readie.json", {"title": "Api", "description": "d"})

    result = generate_workspace(root, config_name="docs.json")

    assert result.updated == ["web"]


def test_reporter_receives_one_event_per_project(
    workspace: Path, mocker: MockerFixture
) -> None:
    """The reporter hears about updates, unchanged projects and failures."""
    generate_workspace(workspace, package_filter=frozenset({"alpha"}))
    (workspace / "gamma" / "readie.json").write_text("{", encoding="utf-8")
    reporter = mocker.Mock(spec=WorkspaceReporter)

    generate_workspace(workspace, reporter=reporter)

    unchanged = reporter.on_project_unchanged.call_args_list
    updated = reporter.on_project_updated.call_args_list
    failed = reporter.on_project_failed.call_args_list
    assert [call.args[0] for call in unchanged] == ["alpha"]
    assert [call.args[0] for call in updated] == ["beta"]
    assert [call.args[0] for call in failed] == ["gamma"]
    assert updated[0].args[1].output_path == (workspace / "beta" / "README.md").resolve()


def test_missing_root_raises_before_processing(tmp_path: Path) -> None:
    """A root that does not exist aborts the whole command."""
    missing = tmp_path / "nope"

    with pytest.raises(MissingWorkspaceRootError) as excinfo:
        generate_workspace(missing)

    assert excinfo.value.path == missing.resolve()
    assert "Workspace root not found" in str(excinfo.value)


def test_root_that_is_a_file_is_missing(tmp_path: Path) -> None:
    """A regular file cannot act as a workspace root."""
    root = tmp_path / "packages"
    root.write_text("", encoding="utf-8")

    with pytest.raises(MissingWorkspaceRootError):
        generate_workspace(root)
