"""Utilities for rendering and writing README files from merged configs."""

from .models import GenerationResult, ReadmeSections, WorkspaceFailure, WorkspaceResult
from .readme_generator import ReadmeGenerator, generate_readme
from .template import render_numbered_with_code_blocks, render_readme
from .toc import SlugRegistry, slugify_heading
from .workspace import (
    NullReporter,
    WorkspaceReporter,
    generate_workspace,
    parse_package_list,
)

__all__ = [
    "GenerationResult",
    "NullReporter",
    "ReadmeGenerator",
    "ReadmeSections",
    "SlugRegistry",
    "WorkspaceFailure",
    "WorkspaceReporter",
    "WorkspaceResult",
    "generate_readme",
    "generate_workspace",
    "parse_package_list",
    "render_numbered_with_code_blocks",
    "render_readme",
    "slugify_heading",
]
