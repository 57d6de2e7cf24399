"""Nodes of a prefix-compressed string tree.

Every node owns a key segment and an insertion-ordered list of children.
The concatenation of segments from the root down to a node is the key of the
value stored there. Only end nodes (nodes without children) hold values; when
a key ends exactly where the tree branches, its value lives in an
empty-segment child of the branch node.

Children are scanned linearly. No two children of a node start with the same
character under the tree's comparison rule, so at most one child can match a
non-empty key.

Traversals are lazy and use an explicit stack. They must not be consumed while
the same tree is being mutated.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from prefixdict.utils.comparison import ORDINAL, KeyComparer
from prefixdict.utils.sentinel import MISSING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from prefixdict.utils.sentinel import Sentinel


__all__ = ("RadixNode",)

log = logging.getLogger(__name__)


class RadixNode[T]:
    __slots__ = ("children", "comparer", "is_root", "segment", "value")

    def __init__(
        self,
        comparer: KeyComparer = ORDINAL,
        segment: str = "",
        value: T | Sentinel = MISSING,
        *,
        is_root: bool = False,
    ) -> None:
        self.comparer = comparer
        self.segment = segment
        self.value = value
        self.is_root = is_root
        self.children: list[RadixNode[T]] = []

    @classmethod
    def root(cls, comparer: KeyComparer = ORDINAL) -> RadixNode[T]:
        return cls(comparer, is_root=True)

    @property
    def is_end(self) -> bool:
        return not self.is_root and not self.children

    @property
    def is_empty(self) -> bool:
        return not self.segment

    @property
    def has_value(self) -> bool:
        return self.value is not MISSING

    def insert(self, key: str, value: T, *, overwrite: bool = False) -> bool:
        """Insert ``key`` below this node.

        Returns ``False`` without touching the tree when ``key`` is already
        present and ``overwrite`` is false.
        """
        node = self
        while key:
            if (child := node._full_match(key)) is not None:
                key = key[len(child.segment) :]
                node = child
                continue

            for index, child in enumerate(node.children):
                length = node.comparer.match_length(child.segment, key)
                if length > 0:
                    assert length < len(child.segment), "full match missed during insert"
                    node.children[index] = child._split(length, key, value)
                    return True

            if node.is_end and node.has_value:
                node._demote()
            node.children.append(node._new_child(key, value))
            return True

        return node._store(value, overwrite=overwrite)

    def find(self, key: str) -> RadixNode[T] | None:
        """Return the node holding the value for ``key``, if any."""
        node = self
        while key:
            if (child := node._full_match(key)) is None:
                return None
            key = key[len(child.segment) :]
            node = child

        if node.is_end:
            return node
        return node._value_holder()

    def nodes_by_prefix(self, prefix: str) -> Iterator[RadixNode[T]]:
        """Yield every end node whose key starts with ``prefix``."""
        for _, subtree in self._prefix_subtrees(prefix):
            yield from subtree.end_nodes()

    def items_by_prefix(self, prefix: str) -> Iterator[tuple[str, T]]:
        """Yield ``(key, value)`` for every stored key starting with ``prefix``."""
        for leading, subtree in self._prefix_subtrees(prefix):
            yield from subtree.items(leading)

    def end_nodes(self) -> Iterator[RadixNode[T]]:
        stack: list[RadixNode[T]] = [self]
        while stack:
            node = stack.pop()
            if node.is_end:
                yield node
            else:
                stack.extend(reversed(node.children))

    def items(self, prefix: str = "") -> Iterator[tuple[str, T]]:
        """Yield ``(key, value)`` for every end node under this node.

        ``prefix`` is the key leading up to this node; this node's own segment
        is appended to it.
        """
        stack: list[tuple[str, RadixNode[T]]] = [(prefix, self)]
        while stack:
            leading, node = stack.pop()
            key = leading + node.segment
            if node.is_end:
                yield key, cast("T", node.value)
            else:
                stack.extend((key, child) for child in reversed(node.children))

    def count(self) -> int:
        return sum(1 for _ in self.end_nodes())

    def _new_child(self, segment: str, value: T | Sentinel = MISSING) -> RadixNode[T]:
        return RadixNode(self.comparer, segment, value)

    def _full_match(self, key: str) -> RadixNode[T] | None:
        # empty segments only ever match the empty key
        for child in self.children:
            if child.segment and self.comparer.is_prefix(child.segment, key):
                return child
        return None

    def _value_holder(self) -> RadixNode[T] | None:
        for child in self.children:
            if child.is_empty:
                return child
        return None

    def _store(self, value: T, *, overwrite: bool) -> bool:
        if self.is_end:
            if self.has_value and not overwrite:
                return False
            self.value = value
            return True

        if (holder := self._value_holder()) is None:
            self.children.append(self._new_child("", value))
            return True
        return holder._store(value, overwrite=overwrite)

    def _split(self, length: int, key: str, value: T) -> RadixNode[T]:
        """Replace this node by a branch on the first ``length`` characters.

        The returned branch takes this node's place in its parent. Its children
        are this node, shrunk to its unshared suffix, and a new leaf for the
        unshared suffix of ``key``.
        """
        branch = self._new_child(self.segment[:length])
        log.debug("Splitting %r at %d for %r", self.segment, length, key)
        self.segment = self.segment[length:]
        branch.children.append(self)
        branch.children.append(self._new_child(key[length:], value))
        return branch

    def _demote(self) -> None:
        log.debug("Demoting end node %r to a branch", self.segment)
        self.children.append(self._new_child("", self.value))
        self.value = MISSING

    def _prefix_subtrees(self, prefix: str) -> Iterator[tuple[str, RadixNode[T]]]:
        """Yield the subtrees holding every key that starts with ``prefix``.

        Each subtree comes with the key leading up to it.
        """
        leading = ""
        node = self
        while prefix:
            if (child := node._full_match(prefix)) is None:
                break
            leading += node.segment
            prefix = prefix[len(child.segment) :]
            node = child

        if not prefix:
            yield leading, node
            return

        leading += node.segment
        for child in node.children:
            if node.comparer.match_length(child.segment, prefix) == len(prefix):
                yield leading, child

    def __str__(self) -> str:
        return "root" if self.is_root else self.segment

    def __repr__(self) -> str:
        if self.is_root:
            return f"<{type(self).__name__} root children={len(self.children)}>"
        return f"<{type(self).__name__} {self.segment!r} value={self.value!r} children={len(self.children)}>"
