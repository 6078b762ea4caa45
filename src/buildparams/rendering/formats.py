# topmark:header:start
#
#   project      : BuildParams
#   file         : formats.py
#   file_relpath : src/buildparams/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats and machine (JSON/NDJSON) rendering of task parameters."""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from buildparams.model.parameter import TaskParameter


class OutputFormat(str, Enum):
    """Output formats supported by the CLI.

    Members:
        XML: XML document (default).
        JSON: One JSON array with all parameters.
        NDJSON: One JSON object per line, one line per parameter.
    """

    XML = "xml"
    JSON = "json"
    NDJSON = "ndjson"


def to_json_text(parameters: Iterable[TaskParameter], *, indent: int | None = 2) -> str:
    """Serialize parameters as a JSON array."""
    return json.dumps([p.to_dict() for p in parameters], indent=indent, ensure_ascii=False)


def to_ndjson_lines(parameters: Iterable[TaskParameter]) -> list[str]:
    """Serialize parameters as NDJSON, one compact JSON object per parameter."""
    return [json.dumps(p.to_dict(), ensure_ascii=False) for p in parameters]
