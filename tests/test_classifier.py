"""Tests for the line classifier rule chain."""

import pytest

from chunking_service.services.chunking.classifier import (
    LINE_RULES,
    classify_line,
    is_code,
    is_definition,
    is_header,
    is_list_item,
    is_quote,
    is_table_row,
)
from chunking_service.services.chunking.models import SpanType


@pytest.mark.parametrize("line", ["SKILLS", "1. Introduction", "Professional Experience", "Summary"])
def test_is_header_accepts_caps_numbered_and_title_case(line: str) -> None:
    assert is_header(line)


@pytest.mark.parametrize("line", ["", "   ", "We shipped features every week", "professional experience"])
def test_is_header_rejects_prose_and_blank(line: str) -> None:
    assert not is_header(line)


def test_is_list_item_bullets_and_numbers() -> None:
    assert is_list_item("- item")
    assert is_list_item("* item")
    assert is_list_item("• item")
    assert is_list_item("3. item")
    assert not is_list_item("-item")


def test_is_code_indentation_fences_punctuation_keywords() -> None:
    assert is_code("    value")
    assert is_code("```python")
    assert is_code("`pip install`")
    assert is_code("x = compute(y)")
    assert is_code("return value")
    assert not is_code("plain words only")


def test_is_table_row_variants() -> None:
    assert is_table_row("| name | role |")
    assert is_table_row("name\tage")
    assert is_table_row("name    age")
    assert is_table_row("|---+---|")
    assert not is_table_row("name age")


def test_is_quote_variants() -> None:
    assert is_quote("> quoted")
    assert is_quote('"Stay hungry," he said')
    assert is_quote("Einstein said imagination matters")
    assert is_quote("Growth slowed according to the report")
    assert not is_quote("we wrote some code")


def test_is_definition_variants() -> None:
    assert is_definition("Python: a programming language")
    assert is_definition("Python - a programming language")
    assert is_definition("Python (language): interpreted")
    assert is_definition("Recursion means a thing calling itself")
    assert is_definition("Latency refers to delay")
    assert not is_definition("we wrote some code")


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("SKILLS", SpanType.HEADER),
        ("1. Install the package", SpanType.HEADER),
        ("- Python and Django", SpanType.LIST),
        ("    indented body", SpanType.CODE),
        ("const x = 5;", SpanType.CODE),
        ("name\tage", SpanType.TABLE),
        ("| name | role |", SpanType.TABLE),
        ('"Stay hungry, stay foolish," he said', SpanType.QUOTE),
        ("Einstein said imagination matters", SpanType.QUOTE),
        ("Python: a programming language", SpanType.DEFINITION),
        ("We shipped features every week", SpanType.CONTENT),
    ],
)
def test_classify_line_first_match_wins(line: str, expected: SpanType) -> None:
    span_type, _ = classify_line(line)

    assert span_type is expected


def test_classify_line_blank_returns_none() -> None:
    assert classify_line("") is None
    assert classify_line("  \t ") is None


def test_rule_importances() -> None:
    weights = {span_type: importance for _, span_type, importance in LINE_RULES}

    assert weights == {
        SpanType.HEADER: 1.0,
        SpanType.CODE: 0.9,
        SpanType.TABLE: 0.85,
        SpanType.DEFINITION: 0.85,
        SpanType.LIST: 0.8,
        SpanType.QUOTE: 0.8,
    }
    assert classify_line("We shipped features every week") == (SpanType.CONTENT, 0.7)
