"""Structural segmenter: walks text line by line and groups classified lines into typed spans."""

from dataclasses import dataclass

from chunking_service.services.chunking.classifier import CONTENT_IMPORTANCE, classify_line
from chunking_service.services.chunking.models import Span, SpanType


@dataclass
class _OpenSpan:
    start: int
    end: int
    type: SpanType
    importance: float

    def close(self) -> Span:
        return Span(start=self.start, end=self.end, type=self.type, importance=self.importance)


def find_spans(text: str) -> list[Span]:
    """
    Return non-overlapping spans in document order.

    Consecutive lines of the same structural type form one span; a blank line or a line of
    another type ends it. Content lines, and blank lines between them, accumulate into one
    pending content span that is flushed when a structural span begins or at end of text.
    """
    spans: list[Span] = []
    run: _OpenSpan | None = None
    content: _OpenSpan | None = None

    offset = 0
    for raw_line in text.split("\n"):
        line = raw_line.rstrip("\r")
        line_start = offset
        line_end = offset + len(line.rstrip())
        offset += len(raw_line) + 1

        classified = classify_line(line)
        if classified is None:
            if run is not None:
                spans.append(run.close())
                run = None
            continue

        span_type, importance = classified
        if span_type is SpanType.CONTENT:
            if run is not None:
                spans.append(run.close())
                run = None
            if content is None:
                content = _OpenSpan(line_start, line_end, SpanType.CONTENT, CONTENT_IMPORTANCE)
            else:
                content.end = line_end
            continue

        if content is not None:
            spans.append(content.close())
            content = None
        if run is not None and run.type is span_type:
            run.end = line_end
            continue
        if run is not None:
            spans.append(run.close())
        run = _OpenSpan(line_start, line_end, span_type, importance)

    if run is not None:
        spans.append(run.close())
    if content is not None:
        spans.append(content.close())
    return spans
