from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


__all__ = ("IGNORE_CASE", "ORDINAL", "KeyComparer")


def _identity(char: str) -> str:
    return char


@dataclass(slots=True, frozen=True)
class KeyComparer:
    """Character comparison rule shared by every node of a tree.

    Comparisons are done one character at a time so that folding never changes
    the length of what is being compared (``"ß".casefold()`` is ``"ss"``).
    """

    case_sensitive: bool
    fold: Callable[[str], str]

    @classmethod
    def for_case(cls, case_sensitive: bool) -> KeyComparer:
        return ORDINAL if case_sensitive else IGNORE_CASE

    def chars_equal(self, a: str, b: str) -> bool:
        return a == b or self.fold(a) == self.fold(b)

    def match_length(self, segment: str, key: str) -> int:
        """Count the leading characters of ``segment`` and ``key`` that compare equal."""
        length = 0
        for a, b in zip(segment, key, strict=False):
            if not self.chars_equal(a, b):
                break
            length += 1
        return length

    def is_prefix(self, segment: str, key: str) -> bool:
        if len(segment) > len(key):
            return False
        return self.match_length(segment, key) == len(segment)


ORDINAL = KeyComparer(case_sensitive=True, fold=_identity)
IGNORE_CASE = KeyComparer(case_sensitive=False, fold=str.casefold)
