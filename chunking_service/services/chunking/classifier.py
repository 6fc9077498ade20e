"""
Line classifier for structural segmentation.

Each predicate looks at one raw line (leading whitespace kept, trailing newline removed).
Rules are evaluated in LINE_RULES order and the first match wins: several patterns overlap,
e.g. "1. Intro" is both a numbered header and a numbered list item, and any line with
code punctuation would also pass as a definition.
"""

import re
from typing import Callable

from chunking_service.services.chunking.models import SpanType

_NUMBERED = re.compile(r"^\d+\.\s")
_TITLE_CASE = re.compile(r"^[A-Z][a-z]+(\s+[A-Z][a-z]+)*$")
_BULLET = re.compile(r"^[-*•]\s")

_INDENTED = re.compile(r"^\s{2,}\S")
_FENCE = re.compile(r"^```")
_INLINE_CODE = re.compile(r"^`[^`]+`")
_CODE_PUNCTUATION = re.compile(r"[{}();=<>+\-*/]")
_CODE_KEYWORD = re.compile(r"^(function|if|for|while|const|let|var|return|import|export)")

_PIPE_ROW = re.compile(r"\|.*\|")
_TAB = re.compile(r"\t")
_WIDE_COLUMNS = re.compile(r"^\S.*?\s{2,}\S")
_SEPARATOR_ROW = re.compile(r"^[-|+]+$")

_QUOTE_MARKER = re.compile(r"^>")
_LEADING_QUOTE = re.compile("^[\"'“”‘’]")
_QUOTED_SENTENCE = re.compile("^[A-Z][^.!?]*[\"'“”‘’]")
_ATTRIBUTION = re.compile(r"^[A-Z][^.!?]*(said|according to)")

_DEFINITION_PATTERNS = (
    re.compile(r"^[A-Z][a-z]*\s*[:=]\s"),
    re.compile("^[A-Z][a-z]*\\s*[-–]\\s"),
    re.compile(r"^[A-Z][a-z]*\s*\([^)]+\)\s*[:=]\s"),
    re.compile(r"^[A-Z][a-z]*\s*(is|means|refers to)\s"),
)


def is_header(line: str) -> bool:
    """ALL-CAPS line, "<n>. " prefix, or a Title Case word sequence."""
    s = line.strip()
    if not s:
        return False
    return s == s.upper() or bool(_NUMBERED.match(s)) or bool(_TITLE_CASE.match(s))


def is_list_item(line: str) -> bool:
    s = line.strip()
    return bool(_BULLET.match(s) or _NUMBERED.match(s))


def is_code(line: str) -> bool:
    """Indented two or more spaces, fenced or inline backticks, code punctuation, or a leading keyword."""
    if _INDENTED.match(line):
        return True
    s = line.strip()
    if not s:
        return False
    return bool(
        _FENCE.match(s) or _INLINE_CODE.match(s) or _CODE_PUNCTUATION.search(s) or _CODE_KEYWORD.match(s)
    )


def is_table_row(line: str) -> bool:
    """Pipe-delimited, tab-delimited, wide space-separated columns, or a -|+ separator row."""
    s = line.strip()
    if not s:
        return False
    return bool(_PIPE_ROW.search(s) or _TAB.search(s) or _WIDE_COLUMNS.match(s) or _SEPARATOR_ROW.match(s))


def is_quote(line: str) -> bool:
    s = line.strip()
    if not s:
        return False
    return bool(
        _QUOTE_MARKER.match(s) or _LEADING_QUOTE.match(s) or _QUOTED_SENTENCE.match(s) or _ATTRIBUTION.match(s)
    )


def is_definition(line: str) -> bool:
    """Key: value, Key - value, Key (context): value, or X is/means/refers to Y."""
    s = line.strip()
    return any(p.match(s) for p in _DEFINITION_PATTERNS)


LineRule = tuple[Callable[[str], bool], SpanType, float]

LINE_RULES: tuple[LineRule, ...] = (
    (is_header, SpanType.HEADER, 1.0),
    (is_list_item, SpanType.LIST, 0.8),
    (is_code, SpanType.CODE, 0.9),
    (is_table_row, SpanType.TABLE, 0.85),
    (is_quote, SpanType.QUOTE, 0.8),
    (is_definition, SpanType.DEFINITION, 0.85),
)

CONTENT_IMPORTANCE = 0.7


def classify_line(line: str) -> tuple[SpanType, float] | None:
    """
    Return (span type, importance) for a line, or None for a blank line.
    Lines no rule claims are CONTENT.
    """
    if not line.strip():
        return None
    for predicate, span_type, importance in LINE_RULES:
        if predicate(line):
            return span_type, importance
    return SpanType.CONTENT, CONTENT_IMPORTANCE
