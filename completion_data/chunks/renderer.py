"""
Chunk rendering: classify chunks, turn them into text and expand optional
groups.

Required placeholders are wrapped in ``⟪ ⟫``; anything inside an optional
group (default-valued parameters and the like) uses ``⟦ ⟧`` so the UI can
tell the two apart.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from ..model import Chunk, ChunkKind

logger = logging.getLogger(__name__)

PLACEHOLDER_OPEN = "⟪"
PLACEHOLDER_CLOSE = "⟫"
OPTIONAL_PLACEHOLDER_OPEN = "⟦"
OPTIONAL_PLACEHOLDER_CLOSE = "⟧"

PLACEHOLDER_MARKERS = (
    PLACEHOLDER_OPEN,
    PLACEHOLDER_CLOSE,
    OPTIONAL_PLACEHOLDER_OPEN,
    OPTIONAL_PLACEHOLDER_CLOSE,
)

_MAIN_TEXT_KINDS = frozenset({
    ChunkKind.OPTIONAL,
    ChunkKind.TYPED_TEXT,
    ChunkKind.PLACEHOLDER,
    ChunkKind.LEFT_PAREN,
    ChunkKind.RIGHT_PAREN,
    ChunkKind.RIGHT_BRACKET,
    ChunkKind.LEFT_BRACKET,
    ChunkKind.LEFT_BRACE,
    ChunkKind.RIGHT_BRACE,
    ChunkKind.RIGHT_ANGLE,
    ChunkKind.LEFT_ANGLE,
    ChunkKind.COMMA,
    ChunkKind.COLON,
    ChunkKind.SEMI_COLON,
    ChunkKind.EQUAL,
    ChunkKind.INFORMATIVE,
    ChunkKind.HORIZONTAL_SPACE,
})


def is_main_text_chunk(kind: Union[ChunkKind, str, None]) -> bool:
    """Return True if a chunk of *kind* belongs to the signature text.

    Result types, plain text, current-parameter and vertical-space chunks
    are auxiliary, as is any kind we don't recognise.
    """
    try:
        return kind in _MAIN_TEXT_KINDS
    except TypeError:
        # unhashable garbage
        return False


def render_chunk(
    chunk: Optional[Chunk],
    opening: str = PLACEHOLDER_OPEN,
    closing: str = PLACEHOLDER_CLOSE,
) -> str:
    if chunk is None:
        return ""

    text = chunk.text or ""
    if chunk.kind == ChunkKind.PLACEHOLDER:
        return opening + text + closing
    return text


def expand_optional_group(chunk: Optional[Chunk]) -> str:
    """Render an optional group, e.g. ``⟦, int b⟧`` or ``⟦= 0⟧``.

    Nested groups recurse; every placeholder inside uses the optional
    delimiter pair regardless of depth.
    """
    if chunk is None or not chunk.children:
        return ""

    parts: list[str] = []
    for child in chunk.children:
        if child.kind == ChunkKind.OPTIONAL:
            parts.append(expand_optional_group(child))
        else:
            parts.append(render_chunk(
                child, OPTIONAL_PLACEHOLDER_OPEN, OPTIONAL_PLACEHOLDER_CLOSE,
            ))
    return "".join(parts)
