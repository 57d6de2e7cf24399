from __future__ import annotations

__all__ = ("MISSING", "Sentinel")


class _Sentinel(type):
    def __new__(cls, name: str) -> _Sentinel:
        return super().__new__(cls, name, (), {})

    def __repr__(cls) -> str:
        return "..."

    def __bool__(cls) -> bool:
        return False

    def __hash__(cls) -> int:
        return 0

    def __eq__(cls, other: object) -> bool:
        return other is cls


type Sentinel = _Sentinel
MISSING: Sentinel = _Sentinel("MISSING")
