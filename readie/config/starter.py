"""Starter ``readie.json`` written by ``readie init``."""

from __future__ import annotations

import msgspec

from readie._constants import DEFAULT_SCHEMA_URL

from .models import ProjectConfig

STARTER_CONFIG = ProjectConfig(
    schema=DEFAULT_SCHEMA_URL,
    version="1",
    title="My Project",
    description="A short description of what this project does.",
    include_table_of_contents=True,
    features=["Fast setup", "Clear docs", "Simple CLI usage"],
    installation=["```bash\nnpm install my-project\n```"],
    usage=["Explain basic usage in a few steps.", "```bash\nnpm run start\n```"],
    docs_link="https://example.com/docs",
)


def starter_config_text() -> str:
    """Return the starter config as indented JSON with a trailing newline."""
    encoded = msgspec.json.encode(STARTER_CONFIG)
    return msgspec.json.format(encoded, indent=2).decode("utf-8") + "\n"


__all__ = ["STARTER_CONFIG", "starter_config_text"]
