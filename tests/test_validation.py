"""
Tests for export parsing and cost validation.
"""

import pytest

from memsizer.exceptions import MalformedDocumentError
from memsizer.utils.validation import ensure_valid_cost, parse_export


def test_parse_export_skips_blank_lines() -> None:
    raw = '{"id": "1", "title": "a"}\n\n{"id": "2"}\n'

    assert parse_export(raw, "c") == [{"id": "1", "title": "a"}, {"id": "2"}]


def test_parse_export_accepts_bytes() -> None:
    assert parse_export(b'{"id": "1"}', "c") == [{"id": "1"}]


def test_parse_empty_export() -> None:
    assert parse_export("", "c") == []


def test_invalid_json_line_raises() -> None:
    with pytest.raises(MalformedDocumentError) as exc_info:
        parse_export('{"id": "1"}\n{"id": ', "books")

    assert exc_info.value.details == {"collection": "books", "line": 2}


def test_non_object_line_raises() -> None:
    with pytest.raises(MalformedDocumentError):
        parse_export("[1, 2]", "books")


@pytest.mark.parametrize("cost", [float("nan"), float("inf"), -1, None, "4", True])
def test_invalid_costs_raise(cost) -> None:
    with pytest.raises(MalformedDocumentError):
        ensure_valid_cost(cost, "f")


def test_valid_costs_pass_through() -> None:
    assert ensure_valid_cost(0, "f") == 0
    assert ensure_valid_cost(2.5, "f") == 2.5
