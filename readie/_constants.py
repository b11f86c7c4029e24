"""Common literal values used across readie.

These constants keep file names and defaults centralized so the loader,
generators, CLI, and tests can import the same values without drifting.
Intended for internal use within the readie package.

Examples
--------
>>> from readie import _constants
>>> _constants.GLOBAL_CONFIG_NAME
'readie.global.json'
>>> _constants.DEFAULT_OUTPUT_NAME
'README.md'
"""

DEFAULT_CONFIG_NAME = "readie.json"
GLOBAL_CONFIG_NAME = "readie.global.json"
PACKAGE_MANIFEST_NAME = "package.json"
DEFAULT_OUTPUT_NAME = "README.md"
DEFAULT_WORKSPACE_ROOT = "packages"
DEFAULT_SCHEMA_URL = "https://unpkg.com/readie/schemas/readie.schema.json"
VERSION = "0.1.0"
