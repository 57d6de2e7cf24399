from __future__ import annotations

from collections.abc import ItemsView, Iterable, Iterator, KeysView, Mapping, ValuesView
from typing import cast

from prefixdict.core.node import RadixNode
from prefixdict.errors import KeyNotFoundError, ensure_key
from prefixdict.utils.comparison import KeyComparer


__all__ = ("RadixDictionary",)


type Pairs[T] = Mapping[str, T] | Iterable[tuple[str, T]]


def _pairs_of[T](items: Pairs[T]) -> Iterable[tuple[str, T]]:
    return items.items() if isinstance(items, Mapping) else items


class RadixDictionary[T](Mapping[str, T]):
    """A mapping of string keys that can be searched by key prefix.

    Keys are stored in a radix tree, so keys sharing a prefix share storage and
    every key under a prefix can be listed without scanning the whole mapping.

    Parameters
    ----------
    items: Mapping[str, T] | Iterable[tuple[str, T]] | None
        Initial contents, added in order. Later duplicates are ignored, as with :meth:`add`.
    case_sensitive: bool
        Whether keys are matched exactly or case-folded. Fixed for the lifetime of the instance.

    Notes
    -----
    Enumeration order follows insertion and split history, not lexicographic order.
    Instances are not thread-safe; concurrent writers, or readers alongside a writer,
    need external locking.
    """

    __slots__ = ("_root",)

    def __init__(self, items: Pairs[T] | None = None, *, case_sensitive: bool = True) -> None:
        self._root: RadixNode[T] = RadixNode.root(KeyComparer.for_case(case_sensitive))
        if items is not None:
            for key, value in _pairs_of(items):
                self.add(key, value)

    @property
    def case_sensitive(self) -> bool:
        return self._root.comparer.case_sensitive

    @property
    def count(self) -> int:
        return self._root.count()

    def add(self, key: str, value: T) -> bool:
        """Add ``key`` unless it is already present.

        Returns whether the value was stored.
        """
        return self._root.insert(ensure_key(key), value)

    def set(self, key: str, value: T) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        self._root.insert(ensure_key(key), value, overwrite=True)

    def update(self, items: Pairs[T], /) -> None:
        for key, value in _pairs_of(items):
            self.set(key, value)

    def contains_key(self, key: str) -> bool:
        return self._root.find(ensure_key(key)) is not None

    def try_get_value(self, key: str) -> tuple[bool, T | None]:
        """Look up ``key`` without raising when it is missing.

        Returns
        -------
        tuple[bool, T | None]
            ``(True, value)`` when found, otherwise ``(False, None)``.
        """
        node = self._root.find(ensure_key(key))
        if node is None:
            return False, None
        return True, cast("T", node.value)

    def find_by_prefix(self, prefix: str) -> Iterator[T]:
        """Lazily yield the values of every key starting with ``prefix``.

        An empty prefix yields every value.
        """
        nodes = self._root.nodes_by_prefix(ensure_key(prefix, "prefix"))
        return (cast("T", node.value) for node in nodes if node.is_end)

    def keys_with_prefix(self, prefix: str) -> Iterator[str]:
        pairs = self._root.items_by_prefix(ensure_key(prefix, "prefix"))
        return (key for key, _ in pairs)

    def items_with_prefix(self, prefix: str) -> Iterator[tuple[str, T]]:
        return self._root.items_by_prefix(ensure_key(prefix, "prefix"))

    def keys(self) -> KeysView[str]:
        return KeysView(self)

    def values(self) -> ValuesView[T]:
        return _RadixValuesView(self)

    def items(self) -> ItemsView[str, T]:
        return _RadixItemsView(self)

    def _pairs(self) -> Iterator[tuple[str, T]]:
        return self._root.items()

    def __getitem__(self, key: str) -> T:
        node = self._root.find(ensure_key(key))
        if node is None:
            raise KeyNotFoundError(key) from None
        return cast("T", node.value)

    def __setitem__(self, key: str, value: T) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        return self.contains_key(cast("str", key))

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._pairs())

    def __len__(self) -> int:
        return self._root.count()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._pairs())!r}, case_sensitive={self.case_sensitive})"


class _RadixValuesView[T](ValuesView[T]):
    __slots__ = ()

    _mapping: RadixDictionary[T]

    def __iter__(self) -> Iterator[T]:
        return (value for _, value in self._mapping._pairs())


class _RadixItemsView[T](ItemsView[str, T]):
    __slots__ = ()

    _mapping: RadixDictionary[T]

    def __iter__(self) -> Iterator[tuple[str, T]]:
        return self._mapping._pairs()

