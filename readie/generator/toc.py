"""Heading anchors for the generated table of contents."""

from __future__ import annotations

import re

_DISALLOWED_SLUG_CHARS = re.compile(r"[^a-z0-9 -]")
_WHITESPACE_RUN = re.compile(r"\s+")


def slugify_heading(title: str) -> str:
    """Return the GitHub-style anchor for a heading title.

    >>> slugify_heading("Quick Start")
    'quick-start'
    >>> slugify_heading("What's New?")
    'whats-new'
    """
    lowered = _DISALLOWED_SLUG_CHARS.sub("", title.lower())
    return _WHITESPACE_RUN.sub("-", lowered.strip())


class SlugRegistry:
    """Hand out anchors, suffixing repeats with ``-1``, ``-2``, and so on.

    >>> registry = SlugRegistry()
    >>> registry.unique("Quick Start"), registry.unique("Quick Start")
    ('quick-start', 'quick-start-1')
    """

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def unique(self, title: str) -> str:
        """Return the anchor for ``title``, unique within this registry."""
        base = slugify_heading(title)
        count = self._seen.get(base, 0)
        self._seen[base] = count + 1
        return base if count == 0 else f"{base}-{count}"


def render_toc(titles: list[str]) -> str:
    """Render a ``## Table of Contents`` block linking each title in order."""
    if not titles:
        return ""
    registry = SlugRegistry()
    links = "\n".join(f"- [{title}](#{registry.unique(title)})" for title in titles)
    return f"## Table of Contents\n\n{links}"


__all__ = ["SlugRegistry", "render_toc", "slugify_heading"]
