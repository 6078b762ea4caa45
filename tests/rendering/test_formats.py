# topmark:header:start
#
#   project      : BuildParams
#   file         : test_formats.py
#   file_relpath : tests/rendering/test_formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for JSON/NDJSON rendering of task parameters."""

from __future__ import annotations

import json

from buildparams.constants import OUTPUT_PROPERTY_MESSAGE_PREFIX, TASK_PARAMETER_MESSAGE_PREFIX
from buildparams.model.parameter import TaskParameter, create
from buildparams.rendering.formats import OutputFormat, to_json_text, to_ndjson_lines
from tests.conftest import mark_rendering


def _parameters(task_parameter_message: str) -> list[TaskParameter]:
    return [
        create(task_parameter_message, TASK_PARAMETER_MESSAGE_PREFIX),
        create(
            OUTPUT_PROPERTY_MESSAGE_PREFIX + "Configuration=Debug", OUTPUT_PROPERTY_MESSAGE_PREFIX
        ),
    ]


@mark_rendering
def test_json_array(task_parameter_message: str) -> None:
    """JSON output is an array of parameter objects in order."""
    data = json.loads(to_json_text(_parameters(task_parameter_message)))

    assert [p["name"] for p in data] == ["References", "Configuration"]
    assert data[0]["kind"] == "input_parameter"
    assert data[0]["items"][0]["metadata"] == {
        "Private": "false",
        "HintPath": "..\\lib\\Foo.dll",
    }
    assert data[1]["items"] == [{"text": "Debug", "metadata": {}}]


@mark_rendering
def test_ndjson_lines(task_parameter_message: str) -> None:
    """NDJSON output has one compact object per parameter."""
    lines: list[str] = to_ndjson_lines(_parameters(task_parameter_message))

    assert len(lines) == 2
    assert all("\n" not in line for line in lines)
    assert json.loads(lines[1])["kind"] == "output_property"


def test_output_format_values() -> None:
    """Format names are the CLI choices."""
    assert [f.value for f in OutputFormat] == ["xml", "json", "ndjson"]
