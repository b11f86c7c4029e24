"""Render a merged readie config into README markdown.

Rendering is plain string composition: each section is built as a complete
markdown block, empty blocks are dropped, and the rest are joined with one
blank line between them. Runs of three or more newlines are collapsed so the
output never contains more than one consecutive blank line.

Example
-------
>>> from readie.config import MergedConfig
>>> print(render_readme(MergedConfig(title="Demo", description="A demo.")), end="")
# Demo
<BLANKLINE>
A demo.
"""

from __future__ import annotations

import re
import typing as typ

from readie.config.models import LicenseLink

from .models import ReadmeSections
from .toc import render_toc

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from readie.config.models import Badge, MergedConfig

CODE_FENCE = "```"
BLANK_LINE_RUN = re.compile(r"\n{3,}")

DOCS_TEMPLATE = (
    "## Documentation\n\n"
    "For further information, guides, and examples visit the "
    "[reference documentation]({link})."
)
QUICK_START_LINK_TEMPLATE = (
    "## Additional Quick Start\n\nSee the full quick start guide [here]({link})."
)


def render_readme(config: MergedConfig) -> str:
    """Return README markdown for ``config``, ending in a single newline.

    Parameters
    ----------
    config : MergedConfig
        Fully merged and interpolated configuration.

    Returns
    -------
    str
        Markdown in the fixed section order: banner, title, badges,
        description, table of contents, then the content sections, custom
        sections, and footer.
    """
    sections = build_sections(config)
    toc = ""
    if config.include_table_of_contents is not False:
        toc = render_toc(toc_titles(config, sections))

    blocks = [
        sections.banner,
        sections.title,
        sections.badges,
        config.description,
        toc,
        *(block for _, block in sections.headed_blocks()),
        sections.custom_sections,
        sections.footer,
    ]
    content = "\n\n".join(block for block in blocks if _is_non_empty(block))
    return collapse_blank_lines(content).strip() + "\n"


def build_sections(config: MergedConfig) -> ReadmeSections:
    """Render every section block for ``config``."""
    banner = config.banner if _is_non_empty(config.banner) else ""
    title = "" if banner and "<h1" in banner.lower() else f"# {config.title}"
    return ReadmeSections(
        banner=banner,
        title=title,
        badges=render_badges(config.badges),
        features=render_list_section(
            "## Key Features", config.features, lambda item: f"- {item}"
        ),
        prerequisites=render_bullet_section("## Prerequisites", config.prerequisites),
        quick_start=render_heading_block("## Quick Start", config.quick_start),
        installation=render_list_section("## Installation", config.installation),
        manual_installation=render_list_section(
            "## Manual Installation", config.manual_installation
        ),
        usage=_render_usage(config.usage),
        commands=render_list_section(
            "## Available Commands",
            [f"- `{cmd.name}`: {cmd.description}" for cmd in config.commands or []],
        ),
        global_flags=render_list_section(
            "## Global Flags",
            [f"- `{flag.flag}`: {flag.description}" for flag in config.global_flags or []],
        ),
        docs=_render_link(DOCS_TEMPLATE, config.docs_link),
        quick_start_link=_render_link(
            QUICK_START_LINK_TEMPLATE, config.quick_start_link
        ),
        support=render_bullet_section("## Support", config.support),
        contributing=render_bullet_section("## Contributing", config.contributing),
        security=render_heading_block("## Security", config.security),
        license=render_license(config.license),
        custom_sections=render_custom_sections(config.custom_sections),
        footer=config.footer if _is_non_empty(config.footer) else "",
    )


def toc_titles(config: MergedConfig, sections: ReadmeSections) -> list[str]:
    """Return the titles of visible sections followed by custom section headings."""
    titles = [title for title, block in sections.headed_blocks() if _is_non_empty(block)]
    if _is_non_empty(sections.custom_sections):
        titles.extend(config.custom_sections or {})
    return titles


def render_numbered_with_code_blocks(items: cabc.Iterable[str]) -> str:
    """Number usage steps while passing fenced code blocks through untouched.

    Blank entries are skipped. Code fences do not consume a step number and are
    surrounded by blank lines. A leading ``"- "`` on a step is dropped.

    >>> print(render_numbered_with_code_blocks(["Install", "```sh\\nx\\n```", "- Run"]))
    1. Install
    <BLANKLINE>
    ```sh
    x
    ```
    <BLANKLINE>
    2. Run
    """
    lines: list[str] = []
    step = 1
    for raw_item in items:
        item = raw_item.strip()
        if not item:
            continue
        if item.startswith(CODE_FENCE):
            if lines and lines[-1] != "":
                lines.append("")
            lines.extend([item, ""])
            continue
        text = item.removeprefix("- ")
        lines.append(f"{step}. {text}")
        step += 1
    return collapse_blank_lines("\n".join(lines)).strip()


def render_bullet_section(
    heading: str,
    items: list[str] | None,
    formatter: cabc.Callable[[str], str] | None = None,
) -> str:
    """Render ``items`` under ``heading`` as a ``- item`` list by default."""
    if not items:
        return ""
    fmt = formatter or (lambda item: f"- {item}")
    body = "\n".join(fmt(item) for item in items)
    return f"{heading}\n\n{body}".strip()


def render_list_section(
    heading: str,
    items: list[str] | None,
    formatter: cabc.Callable[[str], str] | None = None,
) -> str:
    """Render ``items`` under ``heading``, one per line, unaltered by default."""
    if not items:
        return ""
    fmt = formatter or (lambda item: item)
    return f"{heading}\n\n" + "\n".join(fmt(item) for item in items)


def render_heading_block(heading: str, content: str | None) -> str:
    """Prefix ``content`` with ``heading`` unless it already opens with an H2."""
    if content is None or not content.strip():
        return ""
    if content.lstrip().startswith("## "):
        return content
    return f"{heading}\n\n{content}"


def render_badges(badges: list[Badge] | None) -> str:
    """Render badge images, wrapping each in its link when one is given."""
    if not badges:
        return ""
    rendered: list[str] = []
    for badge in badges:
        image = f"![{badge.label}]({badge.image})"
        rendered.append(f"[{image}]({badge.link})" if _is_non_empty(badge.link) else image)
    return "\n".join(rendered)


def render_license(license_value: str | LicenseLink | None) -> str:
    """Render the License section from a text block or a ``{name, url}`` link."""
    match license_value:
        case LicenseLink(name=name, url=url):
            return f"## License\n\n[{name}]({url})"
        case str():
            return render_heading_block("## License", license_value)
        case _:
            return ""


def render_custom_sections(custom_sections: dict[str, str] | None) -> str:
    """Render each custom section as its own H2 block, in mapping order."""
    if not custom_sections:
        return ""
    return "\n\n".join(
        f"## {heading}\n\n{body}" for heading, body in custom_sections.items()
    )


def collapse_blank_lines(text: str) -> str:
    """Collapse three or more consecutive newlines down to two."""
    return BLANK_LINE_RUN.sub("\n\n", text)


def _render_usage(usage: list[str] | None) -> str:
    if not usage:
        return ""
    steps = render_numbered_with_code_blocks(usage)
    return f"## Usage\n\n{steps}" if steps else ""


def _render_link(template: str, link: str | None) -> str:
    return template.format(link=link) if _is_non_empty(link) else ""


def _is_non_empty(value: str | None) -> bool:
    return isinstance(value, str) and bool(value.strip())


__all__ = [
    "build_sections",
    "collapse_blank_lines",
    "render_badges",
    "render_bullet_section",
    "render_custom_sections",
    "render_heading_block",
    "render_license",
    "render_list_section",
    "render_numbered_with_code_blocks",
    "render_readme",
    "toc_titles",
]
