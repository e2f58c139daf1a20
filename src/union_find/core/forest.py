"""Arena-backed disjoint-set forest.

Elements live in flat lists and are addressed by integer handles, so a set
is merged by rewriting one parent slot rather than by moving node objects.
Path compression and union by size/rank are opt-in through ForestConfig;
with the defaults the forest behaves like the plain node chains in
union_find.core.node.
"""

import logging
from typing import Generic, Iterator, TypeVar

from union_find.core.config import ForestConfig, UnionStrategy
from union_find.error.exceptions import UnknownHandleError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DisjointSetForest(Generic[T]):
    """Disjoint sets stored as parallel lists indexed by handle.

    Attributes:
        config: Behaviour switches (compression, union strategy).
        dereferences: Running count of parent links followed by find().
    """

    def __init__(self, config: ForestConfig | None = None) -> None:
        self.config = config or ForestConfig.get_default()
        self._values: list[T] = []
        self._parent: list[int | None] = []
        self._size: list[int] = []
        self._rank: list[int] = []
        self.dereferences = 0

    def _check(self, handle: int) -> int:
        if isinstance(handle, bool) or not isinstance(handle, int):
            raise UnknownHandleError(handle)
        if not 0 <= handle < len(self._values):
            raise UnknownHandleError(handle)
        return handle

    def make_set(self, value: T) -> int:
        """Add `value` as a new singleton set and return its handle."""
        self._values.append(value)
        self._parent.append(None)
        self._size.append(1)
        self._rank.append(0)
        return len(self._values) - 1

    def value(self, handle: int) -> T:
        return self._values[self._check(handle)]

    def parent(self, handle: int) -> int | None:
        return self._parent[self._check(handle)]

    def find(self, handle: int) -> int:
        """Return the root handle of the set containing `handle`.

        With path compression enabled, every node on the walked path is
        re-pointed directly at the root.
        """
        root = self._check(handle)
        hops = 0
        while self._parent[root] is not None:
            root = self._parent[root]
            hops += 1
        self.dereferences += hops

        if self.config.path_compression and hops > 1:
            node = handle
            while self._parent[node] is not None and self._parent[node] != root:
                next_node = self._parent[node]
                self._parent[node] = root
                node = next_node
            logger.debug("Compressed path of %d hops from %d to root %d", hops, handle, root)
        return root

    def union(self, handle: int, other: int) -> int:
        """Merge the sets containing `handle` and `other`.

        Without a balancing strategy the root of `other` becomes a child of
        the root of `handle`.

        Returns:
            Root handle of the merged set.
        """
        root = self.find(handle)
        other_root = self.find(other)
        if root == other_root:
            return root

        strategy = self.config.union_by
        if strategy == UnionStrategy.SIZE:
            if self._size[root] < self._size[other_root]:
                root, other_root = other_root, root
        elif strategy == UnionStrategy.RANK:
            if self._rank[root] < self._rank[other_root]:
                root, other_root = other_root, root
            elif self._rank[root] == self._rank[other_root]:
                self._rank[root] += 1

        self._parent[other_root] = root
        self._size[root] += self._size[other_root]
        logger.debug("Linked root %d under root %d (%s)", other_root, root, strategy.value)
        return root

    def connected(self, handle: int, other: int) -> bool:
        """Check whether two handles belong to the same set."""
        return self.find(handle) == self.find(other)

    def depth(self, handle: int) -> int:
        """Number of parent links between `handle` and its root."""
        node = self._check(handle)
        hops = 0
        while self._parent[node] is not None:
            node = self._parent[node]
            hops += 1
        return hops

    def set_size(self, handle: int) -> int:
        """Number of elements in the set containing `handle`."""
        return self._size[self.find(handle)]

    def groups(self) -> dict[int, list[int]]:
        """Get all sets as {root: [member handles]}, members ascending."""
        groups: dict[int, list[int]] = {}
        for handle in range(len(self._values)):
            groups.setdefault(self.find(handle), []).append(handle)
        return groups

    def num_groups(self) -> int:
        return sum(1 for parent in self._parent if parent is None)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._values)))

    def __contains__(self, handle: object) -> bool:
        try:
            self._check(handle)
        except UnknownHandleError:
            return False
        return True

    def __repr__(self) -> str:
        return f"DisjointSetForest(size={len(self)}, groups={self.num_groups()})"
