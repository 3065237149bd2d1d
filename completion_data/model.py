"""
Data model for completion candidates and the records rendered from them.

Chunk and cursor kinds are spelled the way libclang spells them, so values
coming from ``clang.cindex`` (or JSON dumps of it) can be used directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Union


# ---------------------------------------------------------------------------
# Kinds
# ---------------------------------------------------------------------------

class ChunkKind(str, Enum):
    OPTIONAL = "Optional"
    TYPED_TEXT = "TypedText"
    TEXT = "Text"
    PLACEHOLDER = "Placeholder"
    INFORMATIVE = "Informative"
    CURRENT_PARAMETER = "CurrentParameter"
    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    LEFT_BRACKET = "LeftBracket"
    RIGHT_BRACKET = "RightBracket"
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"
    LEFT_ANGLE = "LeftAngle"
    RIGHT_ANGLE = "RightAngle"
    COMMA = "Comma"
    RESULT_TYPE = "ResultType"
    COLON = "Colon"
    SEMI_COLON = "SemiColon"
    EQUAL = "Equal"
    HORIZONTAL_SPACE = "HorizontalSpace"
    VERTICAL_SPACE = "VerticalSpace"


class CompletionKind(Enum):
    """Coarse category shown next to a completion in the menu."""
    STRUCT = 0
    CLASS = 1
    ENUM = 2
    TYPE = 3
    MEMBER = 4
    FUNCTION = 5
    VARIABLE = 6
    MACRO = 7
    PARAMETER = 8
    NAMESPACE = 9
    UNKNOWN = 10


_CURSOR_KIND_TO_COMPLETION_KIND: dict[str, CompletionKind] = {
    "STRUCT_DECL": CompletionKind.STRUCT,

    "CLASS_DECL": CompletionKind.CLASS,
    "CLASS_TEMPLATE": CompletionKind.CLASS,

    "ENUM_DECL": CompletionKind.ENUM,

    "UNEXPOSED_DECL": CompletionKind.TYPE,
    "UNION_DECL": CompletionKind.TYPE,
    "TYPEDEF_DECL": CompletionKind.TYPE,

    "FIELD_DECL": CompletionKind.MEMBER,

    "FUNCTION_DECL": CompletionKind.FUNCTION,
    "CXX_METHOD": CompletionKind.FUNCTION,
    "FUNCTION_TEMPLATE": CompletionKind.FUNCTION,
    "CONVERSION_FUNCTION": CompletionKind.FUNCTION,
    "CONSTRUCTOR": CompletionKind.FUNCTION,
    "DESTRUCTOR": CompletionKind.FUNCTION,

    "VAR_DECL": CompletionKind.VARIABLE,

    "MACRO_DEFINITION": CompletionKind.MACRO,

    "PARM_DECL": CompletionKind.PARAMETER,

    "NAMESPACE": CompletionKind.NAMESPACE,
    "NAMESPACE_ALIAS": CompletionKind.NAMESPACE,
}


def completion_kind_for(cursor_kind: Any) -> CompletionKind:
    """Map a declaration (cursor) kind to its completion category.

    Accepts a plain name such as ``"CXX_METHOD"`` or any enum-like object
    exposing ``name``.  Anything unmapped is ``CompletionKind.UNKNOWN``.
    """
    if cursor_kind is None:
        return CompletionKind.UNKNOWN
    name = getattr(cursor_kind, "name", cursor_kind)
    if not isinstance(name, str):
        return CompletionKind.UNKNOWN
    return _CURSOR_KIND_TO_COMPLETION_KIND.get(name.upper(), CompletionKind.UNKNOWN)


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Chunk:
    """One labelled piece of a candidate's signature."""
    kind: Union[ChunkKind, str]
    text: str = ""
    children: Optional[tuple[Chunk, ...]] = None  # only for ChunkKind.OPTIONAL

    def __post_init__(self) -> None:
        # Unrecognised kinds stay raw strings and never reach the main text
        if isinstance(self.kind, str) and not isinstance(self.kind, ChunkKind):
            try:
                object.__setattr__(self, "kind", ChunkKind(self.kind))
            except ValueError:
                pass
        if self.children is not None and not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def optional(cls, *children: Chunk) -> Chunk:
        return cls(ChunkKind.OPTIONAL, children=tuple(children))


@dataclass
class CompletionCandidate:
    """A single result as handed over by the semantic analyzer."""
    cursor_kind: Any = None
    chunks: Optional[Sequence[Chunk]] = None
    brief: str = ""

    def brief_comment(self) -> str:
        return self.brief or ""


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class CompletionRecord:
    """Everything the completion menu needs to show one candidate.

    For a function like ``int foo(int x)``:

    * ``insert_text``: what goes into the buffer, ``foo(⟪int x⟫)``
    * ``display_text``: the menu label, ``foo(int x)``
    * ``annotation``: extra menu info, here the return type ``int``
    * ``preview_text``: brief comment (if any) plus the full signature
    * ``doc_string``: the brief comment on its own
    * ``dedup_key``: call text without markers or cv-qualifiers
    """
    category: CompletionKind = CompletionKind.UNKNOWN
    insert_text: str = ""
    display_text: str = ""
    annotation: str = ""
    preview_text: str = ""
    doc_string: str = ""
    dedup_key: str = ""

    def _identity(self) -> tuple:
        # preview_text doesn't matter
        return self.category, self.display_text, self.annotation

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompletionRecord):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    @property
    def is_empty(self) -> bool:
        return not any((
            self.insert_text, self.display_text, self.annotation,
            self.preview_text, self.doc_string, self.dedup_key,
        ))
