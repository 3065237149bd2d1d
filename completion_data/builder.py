"""
Completion builder: turns one analyzer candidate into a CompletionRecord.

The menu shows completions roughly like this:

    [display text]  [kind]  [annotation]
    [display text]  [kind]  [annotation]

with an optional preview window holding the brief comment and the full
signature.  All of those strings come out of a single left-to-right scan
over the candidate's chunks.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .chunks.renderer import expand_optional_group, is_main_text_chunk, render_chunk
from .chunks.spacing import ParameterSpacing
from .config import extra_space_enabled
from .model import (
    Chunk,
    ChunkKind,
    CompletionCandidate,
    CompletionRecord,
    completion_kind_for,
)
from .text.normalizers import (
    strip_double_underscores,
    strip_placeholder_markers,
    strip_qualifiers,
)

logger = logging.getLogger(__name__)


class _Accumulator:
    """Running buffers for a single candidate."""

    def __init__(self, extra_space: bool) -> None:
        self.call_parts: list[str] = []
        self.display_parts: list[str] = []
        self.result_type = ""
        self.spacing = ParameterSpacing(extra_space)

    def append_both(self, text: str) -> None:
        if text:
            self.call_parts.append(text)
            self.display_parts.append(text)


class CompletionDataBuilder:
    """Builds CompletionRecords with a fixed rendering configuration.

    Parameters
    ----------
    extra_space:
        Pad parameter lists (``foo( int x )``).  Defaults to the
        process-wide setting at the time the builder is created.
    """

    def __init__(self, extra_space: Optional[bool] = None) -> None:
        self.extra_space = extra_space_enabled() if extra_space is None else extra_space

    def build(self, candidate: CompletionCandidate) -> CompletionRecord:
        category = completion_kind_for(candidate.cursor_kind)
        chunks = candidate.chunks

        if not chunks:
            logger.debug("[Builder] Candidate without chunks (%s)", category.name)
            return CompletionRecord(category=category)

        acc = _Accumulator(self.extra_space)
        for chunk in chunks:
            self._extract_from_chunk(chunk, acc)

        # Display text drops the ugly reserved names and the markers; the
        # call text keeps its markers for the UI to style.
        display_text = strip_placeholder_markers(
            strip_double_underscores("".join(acc.display_parts)))
        insert_text = strip_double_underscores("".join(acc.call_parts))

        dedup_key = strip_qualifiers(strip_placeholder_markers(insert_text))

        brief = candidate.brief_comment() or ""
        preview_parts: list[str] = []
        if brief:
            preview_parts.append(brief + "\n")
        preview_parts.append(acc.result_type + " " + display_text + "\n")

        return CompletionRecord(
            category=category,
            insert_text=insert_text,
            display_text=display_text,
            annotation=acc.result_type,
            preview_text="".join(preview_parts),
            doc_string=brief,
            dedup_key=dedup_key,
        )

    def build_all(self, candidates: Iterable[CompletionCandidate]) -> list[CompletionRecord]:
        records = [self.build(candidate) for candidate in candidates]
        logger.debug(
            "[Builder] Built %d records (extra_space=%s)",
            len(records), self.extra_space,
        )
        return records

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _extract_from_chunk(chunk: Chunk, acc: _Accumulator) -> None:
        kind = chunk.kind

        if is_main_text_chunk(kind):
            acc.append_both(acc.spacing.spacing_before(kind))

            if kind == ChunkKind.OPTIONAL:
                acc.append_both(expand_optional_group(chunk))
            else:
                text = render_chunk(chunk)
                # Informative chunks describe the signature but are never typed
                if kind != ChunkKind.INFORMATIVE:
                    acc.call_parts.append(text)
                acc.display_parts.append(text)

        elif kind == ChunkKind.RESULT_TYPE:
            acc.result_type = render_chunk(chunk)

        elif not isinstance(kind, ChunkKind):
            logger.debug("[Builder] Ignoring unrecognised chunk kind %r", kind)


def build_completion_record(
    candidate: CompletionCandidate,
    extra_space: Optional[bool] = None,
) -> CompletionRecord:
    """Build one record, reading the process-wide settings right now."""
    return CompletionDataBuilder(extra_space).build(candidate)


def build_completion_records(
    candidates: Iterable[CompletionCandidate],
    extra_space: Optional[bool] = None,
) -> list[CompletionRecord]:
    """Build a batch of records in input order with one configuration."""
    return CompletionDataBuilder(extra_space).build_all(candidates)
