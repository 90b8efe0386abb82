from abc import ABC, abstractmethod
from typing import Dict, Hashable, Iterator, List, Optional, Set


class DisjointSets(ABC):
    """
    A collection of disjoint sets of hashable elements, each identified by one
    of its members (the representative).
    """

    @abstractmethod
    def is_present(self, e: Hashable) -> bool:
        """Check whether ``e`` belongs to one of the current sets."""

    @abstractmethod
    def make_set(self, e: Hashable) -> None:
        """Create a new singleton set containing ``e``."""

    @abstractmethod
    def find_set(self, e: Hashable) -> Optional[Hashable]:
        """Return the representative of the set containing ``e``."""

    @abstractmethod
    def union(self, e1: Hashable, e2: Hashable) -> None:
        """Merge the sets containing ``e1`` and ``e2``."""

    @abstractmethod
    def get_current_representatives(self) -> Set[Hashable]:
        pass

    @abstractmethod
    def get_current_elements_of_set_containing(self, e: Hashable) -> Set[Hashable]:
        pass

    @abstractmethod
    def clear(self) -> None:
        """Discard every element and set."""


class ForestDisjointSets(DisjointSets):
    """
    Union-Find (Disjoint Set) forest with path compression and union by rank.

    Elements are stored in an arena: each inserted element receives a stable
    integer handle, and the ``parent`` and ``rank`` lists are indexed by
    handle. A handle is a root when it is its own parent; roots are exactly
    the representatives of the current sets.

    Ranks are upper bounds on tree height used to choose the direction of a
    union. After path compression they are no longer exact, and the rank of a
    non-root handle is never consulted again.
    """

    def __init__(self):
        self.handles: Dict[Hashable, int] = {}
        self.items: List[Hashable] = []
        self.parent: List[int] = []
        self.rank: List[int] = []

    def is_present(self, e: Hashable) -> bool:
        """
        Check whether an element has been inserted.

        Parameters
        ----------
        e : Hashable
            The element to look up.

        Returns
        -------
        bool
            True if ``e`` was inserted since the last :meth:`clear`.
        """
        if e is None:
            raise TypeError("element must not be None")
        return e in self.handles

    def make_set(self, e: Hashable) -> None:
        """
        Insert ``e`` as a new singleton set of rank 0.

        Parameters
        ----------
        e : Hashable
            The element to insert. Must not already be present.
        """
        if self.is_present(e):
            raise ValueError(f"element {e!r} is already present")
        handle = len(self.items)
        self.handles[e] = handle
        self.items.append(e)
        self.parent.append(handle)
        self.rank.append(0)

    def find_set(self, e: Hashable) -> Optional[Hashable]:
        """
        Find the representative of the set containing ``e``.

        Every handle on the path from ``e`` to its root is re-pointed directly
        at the root, so later lookups of any of them take one step.

        Parameters
        ----------
        e : Hashable
            The element whose representative is wanted.

        Returns
        -------
        Hashable or None
            The representative, or None if ``e`` was never inserted.
        """
        if not self.is_present(e):
            return None
        return self.items[self._find(self.handles[e])]

    def union(self, e1: Hashable, e2: Hashable) -> None:
        """
        Merge the sets containing ``e1`` and ``e2``.

        The root of lower rank is attached under the root of higher rank. On a
        tie the root of ``e2`` stays the representative and its rank grows by
        one.

        Parameters
        ----------
        e1 : Hashable
            First element.
        e2 : Hashable
            Second element.
        """
        root1, root2 = self._roots_of(e1, e2)
        if root1 == root2:
            return

        if self.rank[root1] > self.rank[root2]:
            self.parent[root2] = root1
        else:
            self.parent[root1] = root2
            if self.rank[root1] == self.rank[root2]:
                self.rank[root2] += 1

    def is_connected(self, e1: Hashable, e2: Hashable) -> bool:
        """Check whether two present elements belong to the same set."""
        root1, root2 = self._roots_of(e1, e2)
        return root1 == root2

    def get_current_representatives(self) -> Set[Hashable]:
        return {
            self.items[handle]
            for handle, parent in enumerate(self.parent)
            if handle == parent
        }

    def get_current_elements_of_set_containing(self, e: Hashable) -> Set[Hashable]:
        """
        Collect the members of the set containing ``e``.

        There is no index from roots to members, so this scans every element.

        Parameters
        ----------
        e : Hashable
            A present element.

        Returns
        -------
        Set[Hashable]
            All elements sharing the representative of ``e``.
        """
        if not self.is_present(e):
            raise ValueError(f"element {e!r} is not present")
        root = self._find(self.handles[e])
        return {
            self.items[handle]
            for handle in range(len(self.items))
            if self._find(handle) == root
        }

    def number_of_sets(self) -> int:
        return sum(1 for handle, parent in enumerate(self.parent) if handle == parent)

    def clear(self) -> None:
        self.handles.clear()
        self.items.clear()
        self.parent.clear()
        self.rank.clear()

    def _find(self, handle: int) -> int:
        if self.parent[handle] != handle:
            self.parent[handle] = self._find(self.parent[handle])
        return self.parent[handle]

    def _roots_of(self, e1: Hashable, e2: Hashable):
        if e1 is None or e2 is None:
            raise TypeError("elements must not be None")
        if not self.is_present(e1):
            raise ValueError(f"element {e1!r} is not present")
        if not self.is_present(e2):
            raise ValueError(f"element {e2!r} is not present")
        return self._find(self.handles[e1]), self._find(self.handles[e2])

    def __contains__(self, e: Hashable) -> bool:
        return e is not None and e in self.handles

    def __iter__(self) -> Iterator[Set[Hashable]]:
        """
        Iterate over the current sets.

        Returns
        -------
        Iterator[Set[Hashable]]
            An iterator over sets of elements, one per representative.
        """
        groups: Dict[int, Set[Hashable]] = {}
        for handle, item in enumerate(self.items):
            groups.setdefault(self._find(handle), set()).add(item)
        return iter(groups.values())

    def __len__(self) -> int:
        """Number of elements currently stored."""
        return len(self.items)
