from __future__ import annotations

from typing import Union

from ..model import ChunkKind


class ParameterSpacing:
    """Decides where to pad a function's parameter list.

    Fed every main-text chunk of one candidate in order.  The first chunk
    after ``(`` that isn't ``)`` or informative marks the start of the
    parameters and gets a space in front of it; every ``)`` after that gets
    one too.  ``bar()`` is never padded.

    With *extra_space* disabled the returned padding is always empty, but
    the state is still tracked.
    """

    def __init__(self, extra_space: bool = False) -> None:
        self._space = " " if extra_space else ""
        self.saw_left_paren = False
        self.saw_function_params = False

    def spacing_before(self, kind: Union[ChunkKind, str]) -> str:
        if kind == ChunkKind.LEFT_PAREN:
            self.saw_left_paren = True

        elif (self.saw_left_paren
                and not self.saw_function_params
                and kind != ChunkKind.RIGHT_PAREN
                and kind != ChunkKind.INFORMATIVE):
            self.saw_function_params = True
            return self._space

        elif self.saw_function_params and kind == ChunkKind.RIGHT_PAREN:
            return self._space

        return ""
