"""Tests for the JSON-in / editor-response-out adapters."""

import pytest
from completion_data.builder import build_completion_record
from completion_data.model import ChunkKind, CompletionKind, CompletionRecord
from completion_data.responses import (
    build_completion_response,
    candidate_from_dict,
    chunk_from_dict,
    record_to_dict,
)


ADD_CANDIDATE = {
    "kind": "FUNCTION_DECL",
    "brief_comment": "Adds two numbers.",
    "chunks": [
        {"kind": "ResultType", "text": "int"},
        {"kind": "TypedText", "text": "add"},
        {"kind": "LeftParen", "text": "("},
        {"kind": "Placeholder", "text": "int a"},
        {"kind": "Optional", "chunks": [
            {"kind": "Comma", "text": ", "},
            {"kind": "Placeholder", "text": "int b"},
        ]},
        {"kind": "RightParen", "text": ")"},
    ],
}


class TestChunkFromDict:
    def test_simple_chunk(self):
        chunk = chunk_from_dict({"kind": "TypedText", "text": "foo"})
        assert chunk.kind is ChunkKind.TYPED_TEXT
        assert chunk.text == "foo"
        assert chunk.children is None

    def test_optional_chunk(self):
        chunk = chunk_from_dict(ADD_CANDIDATE["chunks"][4])
        assert chunk.kind is ChunkKind.OPTIONAL
        assert [c.kind for c in chunk.children] == [ChunkKind.COMMA, ChunkKind.PLACEHOLDER]

    def test_unknown_kind_kept_raw(self):
        chunk = chunk_from_dict({"kind": "Hologram", "text": "x"})
        assert chunk.kind == "Hologram"

    def test_missing_text(self):
        assert chunk_from_dict({"kind": "LeftParen"}).text == ""

    def test_rejects_non_mapping(self):
        with pytest.raises(ValueError):
            chunk_from_dict(["TypedText", "foo"])

    def test_rejects_missing_kind(self):
        with pytest.raises(ValueError):
            chunk_from_dict({"text": "foo"})


class TestCandidateFromDict:
    def test_full_candidate(self):
        candidate = candidate_from_dict(ADD_CANDIDATE)
        assert candidate.cursor_kind == "FUNCTION_DECL"
        assert len(candidate.chunks) == 6
        assert candidate.brief_comment() == "Adds two numbers."

    def test_null_chunks(self):
        candidate = candidate_from_dict({"kind": "MACRO_DEFINITION", "chunks": None})
        assert candidate.chunks is None
        assert candidate.brief_comment() == ""

    def test_rejects_bad_chunks(self):
        with pytest.raises(ValueError):
            candidate_from_dict({"kind": "VAR_DECL", "chunks": "TypedText"})

    def test_rejects_non_mapping(self):
        with pytest.raises(ValueError):
            candidate_from_dict("FUNCTION_DECL")


class TestBuildCompletionResponse:
    def test_full_response(self):
        record = build_completion_record(candidate_from_dict(ADD_CANDIDATE), extra_space=False)
        assert build_completion_response(record) == {
            "insertion_text": "add(⟪int a⟫, ⟦int b⟧)",
            "menu_text": "add(int a, int b)",
            "extra_menu_info": "int",
            "kind": "FUNCTION",
            "detailed_info": "Adds two numbers.\nint add(int a, int b)\n",
            "extra_data": {"doc_string": "Adds two numbers."},
        }

    def test_empty_fields_omitted(self):
        record = CompletionRecord(category=CompletionKind.VARIABLE, insert_text="count_")
        assert build_completion_response(record) == {
            "insertion_text": "count_",
            "kind": "VARIABLE",
        }

    def test_record_to_dict_has_every_field(self):
        record = build_completion_record(candidate_from_dict(ADD_CANDIDATE), extra_space=False)
        data = record_to_dict(record)
        assert data["category"] == "FUNCTION"
        assert data["dedup_key"] == "add(int a, int b)"
        assert set(data) == {
            "category", "insert_text", "display_text", "annotation",
            "preview_text", "doc_string", "dedup_key",
        }
