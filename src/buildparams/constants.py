# topmark:header:start
#
#   project      : BuildParams
#   file         : constants.py
#   file_relpath : src/buildparams/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildParams Constants.

The message prefixes are emitted verbatim by the build engine's logger and are
treated as opaque literals: they must match the start of a message exactly,
including trailing whitespace.
"""

from __future__ import annotations

from importlib.metadata import version as get_version

BUILDPARAMS_VERSION: str = get_version("buildparams")

LOG_LEVEL_ENV_VAR: str = "BUILDPARAMS_LOG_LEVEL"

# Message prefixes emitted by the build engine
OUTPUT_ITEMS_MESSAGE_PREFIX: str = "Output Item(s): "
TASK_PARAMETER_MESSAGE_PREFIX: str = "Task Parameter:"
OUTPUT_PROPERTY_MESSAGE_PREFIX: str = "Output Property: "
ITEM_GROUP_INCLUDE_MESSAGE_PREFIX: str = "Added Item(s): "
ITEM_GROUP_REMOVE_MESSAGE_PREFIX: str = "Removed Item(s): "

# Item element attribute names
INCLUDE_ATTRIBUTE: str = "Include"
REMOVE_ATTRIBUTE: str = "Remove"

# Element name used for nested (non-collapsed) items
ITEM_ELEMENT_NAME: str = "Item"

# Name/value and metadata key/value delimiter
NAME_VALUE_DELIMITER: str = "="

# Columns a tab counts for when measuring item/metadata indentation
TAB_SIZE: int = 4

# Configuration file names
DEFAULT_CONFIG_FILE_NAME: str = "buildparams.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
