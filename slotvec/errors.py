from __future__ import annotations

from typing import Tuple
from typing import Type


class SlotVecError(IndexError):
    code: str
    explanation: str

    def __init__(self, message: str, code: str):
        super(IndexError, self).__init__(f"{code}: {message}")
        self.code = code
        self.explanation = message

    def __reduce__(self) -> Tuple[Type[SlotVecError], Tuple[str, str]]:
        return type(self), (self.explanation, self.code)
