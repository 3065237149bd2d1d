"""
Conversions at the edges: decoded JSON in, editor response mappings out.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .model import Chunk, ChunkKind, CompletionCandidate, CompletionRecord

logger = logging.getLogger(__name__)


def chunk_from_dict(data: Mapping[str, Any]) -> Chunk:
    """Build a Chunk from ``{"kind": ..., "text": ..., "chunks": [...]}``."""
    if not isinstance(data, Mapping):
        raise ValueError(f"chunk must be a mapping, got {type(data).__name__}")

    kind = data.get("kind")
    if not isinstance(kind, str):
        raise ValueError(f"chunk kind must be a string, got {kind!r}")

    children = None
    if kind == ChunkKind.OPTIONAL.value:
        children = tuple(chunk_from_dict(c) for c in data.get("chunks") or [])

    chunk = Chunk(kind=kind, text=str(data.get("text") or ""), children=children)
    if not isinstance(chunk.kind, ChunkKind):
        logger.debug("[Responses] Unknown chunk kind %r kept as-is", kind)
    return chunk


def candidate_from_dict(data: Mapping[str, Any]) -> CompletionCandidate:
    """Build a CompletionCandidate from a decoded JSON object.

    ``chunks`` may be missing or null, which means the analyzer produced no
    completion string for this result.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"candidate must be a mapping, got {type(data).__name__}")

    raw_chunks = data.get("chunks")
    chunks: Optional[list[Chunk]] = None
    if raw_chunks is not None:
        if not isinstance(raw_chunks, list):
            raise ValueError("candidate 'chunks' must be a list or null")
        chunks = [chunk_from_dict(c) for c in raw_chunks]

    return CompletionCandidate(
        cursor_kind=data.get("kind"),
        chunks=chunks,
        brief=str(data.get("brief_comment") or ""),
    )


def build_completion_response(record: CompletionRecord) -> dict[str, Any]:
    """Shape a record the way the editor client expects it.

    Only ``insertion_text`` is always present; empty optional fields are
    left out.
    """
    response: dict[str, Any] = {"insertion_text": record.insert_text}

    if record.display_text:
        response["menu_text"] = record.display_text
    if record.annotation:
        response["extra_menu_info"] = record.annotation
    response["kind"] = record.category.name
    if record.preview_text:
        response["detailed_info"] = record.preview_text
    if record.doc_string:
        response["extra_data"] = {"doc_string": record.doc_string}

    return response


def record_to_dict(record: CompletionRecord) -> dict[str, Any]:
    """All record fields, for debugging and golden files."""
    return {
        "category": record.category.name,
        "insert_text": record.insert_text,
        "display_text": record.display_text,
        "annotation": record.annotation,
        "preview_text": record.preview_text,
        "doc_string": record.doc_string,
        "dedup_key": record.dedup_key,
    }
