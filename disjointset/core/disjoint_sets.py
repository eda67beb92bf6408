from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from loguru import logger

T = TypeVar("T", bound=Hashable)


def _same(a, b) -> bool:
    # Identity first, so values unequal to themselves (nan) still terminate.
    return a is b or a == b


class DisjointSet(Generic[T]):
    """
    Union-find over hashable elements, with full path compression and union by rank.

    Elements that were never seen are registered as new singleton sets
    the first time they are passed to `find`, `union` or `connected`.
    """

    def __init__(self, elements: Iterable[T] = ()) -> None:
        elements = list(elements)

        self.parent: dict[T, T] = {x: x for x in elements}
        self.rank: dict[T, int] = {x: 0 for x in elements}

        # Raw length, duplicates included.
        self._count = len(elements)

    def __repr__(self) -> str:
        return repr({"parent": self.parent, "rank": self.rank, "count": self.count})

    def __contains__(self, element: object) -> bool:
        return element in self.parent

    def __len__(self) -> int:
        return len(self.parent)

    def __iter__(self) -> Iterator[T]:
        return iter(self.parent)

    @property
    def count(self) -> int:
        return self._count

    def find(self, element: T, /) -> T:
        """
        Root of the set containing `element`.

        This is a mutating read: every node on the lookup path is relinked
        directly to the root.
        """

        if element not in self.parent:
            logger.debug(f"registering new element {element!r}")
            self.parent[element] = element
            self.rank[element] = 0
            self._count += 1
            return element

        root = element
        while not _same(par := self.parent[root], root):
            root = par

        while not _same(par := self.parent[element], root):
            self.parent[element] = root
            element = par

        return root

    def union(self, a: T, b: T, /) -> bool:
        """
        Merge the sets of `a` and `b`. Returns False if they were already one set.

        On equal rank the root of `b` goes under the root of `a`.
        """

        root_a = self.find(a)
        root_b = self.find(b)

        if _same(root_a, root_b):
            return False

        rank_a = self.rank[root_a]
        rank_b = self.rank[root_b]

        if rank_a < rank_b:
            self.parent[root_a] = root_b
        elif rank_a > rank_b:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1

        self._count -= 1
        assert self._count >= 0, self._count

        logger.debug(f"merged {a!r} and {b!r}, {self._count} sets left")
        return True

    def connected(self, a: T, b: T, /) -> bool:
        return _same(self.find(a), self.find(b))

    def groups(self) -> dict[T, list[T]]:
        """
        Each root mapped to the members of its set, in registration order.
        """

        output: dict[T, list[T]] = {}
        for element in list(self.parent):
            output.setdefault(self.find(element), []).append(element)
        return output
