"""Structure-aware chunking: packs structural spans into size-bounded chunks without splitting them."""

from chunking_service.config.chunking.models import ChunkingConfig
from chunking_service.services.chunking.classifier import CONTENT_IMPORTANCE
from chunking_service.services.chunking.models import ChunkMetadata, Span, SpanType, TextChunk
from chunking_service.services.chunking.segmenter import find_spans

SPAN_JOINER = "\n\n"


def _chunk_metadata(members: list[Span]) -> ChunkMetadata:
    """
    A chunk of one span keeps that span's type and importance. A chunk of several spans is
    generic content unless a header leads it, in which case it stays a header section.
    """
    lead = members[0]
    if len(members) == 1 or lead.type is SpanType.HEADER:
        return ChunkMetadata(chunk_type="semantic", section=lead.type.value, importance=lead.importance)
    return ChunkMetadata(chunk_type="semantic", section=SpanType.CONTENT.value, importance=CONTENT_IMPORTANCE)


def semantic_chunks(text: str, config: ChunkingConfig) -> list[TextChunk]:
    """
    Greedily accumulate span texts. Flush when the next span would exceed max_chunk_size and the
    accumulated text already meets min_chunk_size. A span longer than max_chunk_size is emitted
    verbatim as its own chunk after flushing whatever was pending.
    """
    max_size = config.max_chunk_size
    min_size = config.min_chunk_size
    chunks: list[TextChunk] = []
    buf = ""
    members: list[Span] = []
    start = 0

    def flush() -> None:
        nonlocal buf, members, start
        chunks.append(
            TextChunk(
                text=buf.strip(),
                start_index=start,
                end_index=start + len(buf),
                metadata=_chunk_metadata(members),
            )
        )
        start += len(buf)
        buf = ""
        members = []

    for span in find_spans(text):
        span_text = text[span.start : span.end].strip()
        if not span_text:
            continue
        if len(span_text) > max_size:
            if buf:
                flush()
            buf, members = span_text, [span]
            flush()
        elif buf and len(buf) + len(span_text) > max_size and len(buf) >= min_size:
            flush()
            buf, members = span_text, [span]
        else:
            buf = f"{buf}{SPAN_JOINER}{span_text}" if buf else span_text
            members.append(span)

    if buf:
        flush()
    return chunks
