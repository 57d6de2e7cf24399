from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def human_join(seq: Sequence[str], sep: str = ", ", conjunction: str = "or", *, oxford_comma: bool = True) -> str:
    """Join a sequence of strings into a human-readable format."""
    # hack: str is a Sequence[str], no point in joining it
    if isinstance(seq, str):
        return seq

    if (size := len(seq)) == 0:
        return ""

    if size == 1:
        return seq[0]

    if size == 2:  # noqa: PLR2004
        return f"{seq[0]} {conjunction} {seq[1]}"

    return f"{sep.join(seq[:-1])}{sep if oxford_comma else " "}{conjunction} {seq[-1]}"


def plural(count: int, singular: str, plural_form: str | None = None) -> str:
    """Format ``count`` with the matching form of a noun."""
    if count == 1:
        return f"{count} {singular}"
    return f"{count} {plural_form or singular + "s"}"
