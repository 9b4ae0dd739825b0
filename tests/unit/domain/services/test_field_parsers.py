from __future__ import annotations

import logging

import pytest

from companies_api.domain.services.field_parsers import (
    parse_integer_field,
    parse_string_field,
    unwrap_field,
)


def test_unwrap_field_takes_first_list_element() -> None:
    assert unwrap_field(["a", "b"]) == "a"
    assert unwrap_field([]) is None
    assert unwrap_field("x") == "x"
    assert unwrap_field(None) is None


@pytest.mark.parametrize(
    ("field", "expected"),
    [
        ("123", 123),
        (["456"], 456),
        ("-7", -7),
        ("  12  ", 12),
        ("42abc", 42),
        ("1.9", 1),
    ],
)
def test_parse_integer_field_accepts_leading_digits(field: object, expected: int) -> None:
    assert parse_integer_field(field) == expected


@pytest.mark.parametrize("field", [None, "", [], [""], "invalid", "abc123"])
def test_parse_integer_field_defaults_to_zero(field: object) -> None:
    assert parse_integer_field(field) == 0


def test_parse_integer_field_reads_text_of_attribute_node() -> None:
    assert parse_integer_field([{"$": {"type": "int"}, "_": "9"}]) == 9


def test_parse_string_field_is_verbatim() -> None:
    assert parse_string_field(["  Foo Bar  "]) == "  Foo Bar  "
    assert parse_string_field("Company Name") == "Company Name"


@pytest.mark.parametrize("field", [None, "", [], [""]])
def test_parse_string_field_defaults_to_empty(field: object) -> None:
    assert parse_string_field(field) == ""


def test_defaults_are_logged_as_warnings(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="companies_api.domain.services.field_parsers")

    parse_integer_field("invalid")
    parse_string_field(None)

    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert "Invalid integer value, defaulting to 0" in messages
    assert "Missing or empty string field, defaulting to empty string" in messages
