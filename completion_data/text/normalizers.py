"""Text clean-up passes applied to rendered signatures."""

from __future__ import annotations

import re

from ..chunks.renderer import PLACEHOLDER_MARKERS

_CV_QUALIFIER = re.compile(r"\s*\b(?:const|volatile)\b\s*")


def strip_double_underscores(text: str) -> str:
    """Remove every ``__`` from *text*.

    Standard library headers name parameters like ``__pos``.  Any C++
    identifier containing two consecutive underscores is reserved for the
    implementation, so user code never has them and we can show ``pos``.
    """
    return text.replace("__", "")


def strip_placeholder_markers(text: str) -> str:
    for marker in PLACEHOLDER_MARKERS:
        text = text.replace(marker, "")
    return text


def strip_qualifiers(text: str) -> str:
    """Drop whole-word ``const``/``volatile`` and the whitespace around them.

    ``"const Foo &"`` becomes ``"Foo &"``; ``"const_iterator"`` is untouched.
    """
    return _CV_QUALIFIER.sub("", text)
