"""Unit tests for capitalize, kebab-case, and truncate formatters."""

from __future__ import annotations

import pytest

from docsformat import FormatterInputError, capitalize_first, to_kebab_case, truncate
from docsformat.text import ELLIPSIS

SAMPLE_TEXTS = [
    "",
    "a",
    "A",
    "hello",
    "Hello",
    "camelCase",
    "PascalCase",
    "hello world",
    "hello_world",
    "HelloWorld_FooBar",
    "already-kebab",
    "HTTPServer",
    "  leading and trailing  ",
    "tabs\tand\nnewlines",
    "__double__underscores__",
    "mixed _ \t_separators",
    "straße",
    "ßtraße",
    "élan vital",
    "123abc",
    "x-Y_z W",
]


def test_capitalize_first_uppercases_lowercase_start() -> None:
    """Lowercase first letters should be uppercased."""

    assert capitalize_first("hello") == "Hello"


def test_capitalize_first_keeps_capitalized_text() -> None:
    """Already-capitalized text should be returned unchanged."""

    assert capitalize_first("Hello") == "Hello"


def test_capitalize_first_handles_empty_and_single_character() -> None:
    """Empty text stays empty and single characters are capitalized."""

    assert capitalize_first("") == ""
    assert capitalize_first("a") == "A"


def test_capitalize_first_only_touches_first_character() -> None:
    """Remaining characters should keep their original case."""

    assert capitalize_first("hELLO wORLD") == "HELLO wORLD"
    assert capitalize_first("1st place") == "1st place"


def test_capitalize_first_keeps_multi_codepoint_uppercase_unchanged() -> None:
    """Characters whose uppercase form expands should be left as-is."""

    assert capitalize_first("ßtraße") == "ßtraße"


@pytest.mark.parametrize("value", SAMPLE_TEXTS)
def test_capitalize_first_is_idempotent_and_length_preserving(value: str) -> None:
    """Capitalizing twice equals capitalizing once and never changes length."""

    once = capitalize_first(value)
    assert capitalize_first(once) == once
    assert len(once) == len(value)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("camelCase", "camel-case"),
        ("PascalCase", "pascal-case"),
        ("hello world", "hello-world"),
        ("hello_world", "hello-world"),
        ("HelloWorld_FooBar", "hello-world-foo-bar"),
        ("already-kebab", "already-kebab"),
    ],
)
def test_to_kebab_case_converts_common_formats(value: str, expected: str) -> None:
    """Kebab-case conversion should handle camel, Pascal, spaced, and snake text."""

    assert to_kebab_case(value) == expected


def test_to_kebab_case_collapses_separator_runs() -> None:
    """Runs of whitespace and underscores should become one hyphen."""

    assert to_kebab_case("hello  _\t world") == "hello-world"
    assert to_kebab_case("__private") == "-private"


def test_to_kebab_case_does_not_split_acronym_runs() -> None:
    """Consecutive capitals carry no lowercase-to-uppercase boundary."""

    assert to_kebab_case("HTTPServer") == "httpserver"
    assert to_kebab_case("parseHTTPServer") == "parse-httpserver"


def test_to_kebab_case_keeps_existing_hyphens() -> None:
    """Pre-existing hyphens are neither stripped nor collapsed."""

    assert to_kebab_case("a--b") == "a--b"
    assert to_kebab_case("-edge-") == "-edge-"


def test_to_kebab_case_handles_empty_text() -> None:
    """Empty text should map to empty text."""

    assert to_kebab_case("") == ""


@pytest.mark.parametrize("value", SAMPLE_TEXTS)
def test_to_kebab_case_output_is_a_fixed_point(value: str) -> None:
    """Converting converted text should return it unchanged."""

    once = to_kebab_case(value)
    assert to_kebab_case(once) == once


@pytest.mark.parametrize(
    ("value", "max_length", "expected"),
    [
        ("This is a long string", 10, "This is..."),
        ("Short", 10, "Short"),
        ("Exactly 10", 10, "Exactly 10"),
        ("Hello World", 5, "He..."),
        ("", 10, ""),
    ],
)
def test_truncate_fits_display_budget(value: str, max_length: int, expected: str) -> None:
    """Truncation should keep the result, ellipsis included, within budget."""

    assert truncate(value, max_length) == expected


@pytest.mark.parametrize("value", SAMPLE_TEXTS)
@pytest.mark.parametrize("max_length", [0, 1, 2, 3, 4, 7, 12, 40])
def test_truncate_length_properties(value: str, max_length: int) -> None:
    """Short text is untouched; long text is cut to exactly the budget."""

    result = truncate(value, max_length)
    if len(value) <= max_length:
        assert result == value
    else:
        assert len(result) == max_length
        if max_length >= 3:
            assert result.endswith(ELLIPSIS)
            assert result[: max_length - 3] == value[: max_length - 3]


def test_truncate_budget_of_three_is_only_ellipsis() -> None:
    """A three-character budget leaves no room for content."""

    assert truncate("Hello", 3) == "..."


@pytest.mark.parametrize(
    ("max_length", "expected"),
    [(2, ".."), (1, "."), (0, "")],
)
def test_truncate_budget_below_ellipsis_clips_marker(max_length: int, expected: str) -> None:
    """Budgets below three should return a clipped ellipsis marker."""

    assert truncate("Hello World", max_length) == expected


def test_truncate_budget_below_ellipsis_keeps_fitting_text() -> None:
    """Text already within a tiny budget should still be returned unchanged."""

    assert truncate("ab", 2) == "ab"
    assert truncate("", 0) == ""


def test_truncate_rejects_negative_budget() -> None:
    """Negative budgets should raise an input error naming the operation."""

    with pytest.raises(FormatterInputError, match="must be a non-negative integer") as exc_info:
        truncate("Hello", -1)

    assert exc_info.value.operation == "truncate"
    assert isinstance(exc_info.value, ValueError)
