"""Tests for structural segmentation into typed spans."""

from chunking_service.services.chunking.models import SpanType
from chunking_service.services.chunking.segmenter import find_spans


def test_header_list_and_content_spans() -> None:
    text = (
        "SKILLS\n"
        "- Python\n"
        "- Django\n"
        "- Postgres\n"
        "We shipped features every week\n"
        "and kept quality high"
    )

    spans = find_spans(text)

    assert [s.type for s in spans] == [SpanType.HEADER, SpanType.LIST, SpanType.CONTENT]
    assert text[spans[0].start : spans[0].end] == "SKILLS"
    assert text[spans[1].start : spans[1].end] == "- Python\n- Django\n- Postgres"
    assert text[spans[2].start : spans[2].end] == "We shipped features every week\nand kept quality high"
    assert [s.importance for s in spans] == [1.0, 0.8, 0.7]


def test_blank_line_ends_structural_run() -> None:
    text = "- a item\n\n- b item"

    spans = find_spans(text)

    assert [s.type for s in spans] == [SpanType.LIST, SpanType.LIST]
    assert [text[s.start : s.end] for s in spans] == ["- a item", "- b item"]


def test_content_accumulates_across_blank_lines() -> None:
    text = "we like tea\n\nwe like coffee"

    spans = find_spans(text)

    assert len(spans) == 1
    assert spans[0].type is SpanType.CONTENT
    assert (spans[0].start, spans[0].end) == (0, len(text))


def test_consecutive_same_type_lines_merge() -> None:
    spans = find_spans("SKILLS\nEXPERIENCE")

    assert len(spans) == 1
    assert spans[0].type is SpanType.HEADER


def test_spans_are_ordered_and_disjoint() -> None:
    text = "SUMMARY\nwe build tools\n- one thing\n- two things\n\nName\tRole\nwe ship"

    spans = find_spans(text)

    for prev, cur in zip(spans, spans[1:]):
        assert prev.end <= cur.start
    assert all(0 <= s.start < s.end <= len(text) for s in spans)


def test_empty_text_has_no_spans() -> None:
    assert find_spans("") == []
    assert find_spans("\n\n  \n") == []
