import numbers

import numpy as np
from numba import njit

from percolation_threshold.exceptions import InvalidArgumentError, OutOfRangeError


def is_integer(value) -> bool:
    """True for int and numpy integer scalars, False for bool and everything else."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def require_positive_int(value, name: str) -> int:
    """Return value as an int, or raise InvalidArgumentError if it is not a positive integer."""
    if not is_integer(value):
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value}")
    return int(value)


@njit(cache=True)
def find_root(parent, p):
    root = p
    while parent[root] != root:
        root = parent[root]
    # path compression
    while p != root:
        next_p = parent[p]
        parent[p] = root
        p = next_p
    return root


@njit(cache=True)
def union_by_size(parent, size, p, q):
    root_p = find_root(parent, p)
    root_q = find_root(parent, q)
    if root_p == root_q:
        return False
    # smaller tree goes under the larger one
    if size[root_p] < size[root_q]:
        parent[root_p] = root_q
        size[root_q] += size[root_p]
    else:
        parent[root_q] = root_p
        size[root_p] += size[root_q]
    return True


class WeightedQuickUnionUF:
    """
    A class for the Weighted Quick-Union-Find data structure
    with path compression.

    The parent and size arrays live in numpy arrays so the compiled
    find/union kernels can work on them in place.
    """

    def __init__(self, n: int):
        """
        Initializes an empty union-find data structure with 'n' elements
        indexed 0 through n-1. Each element is initially in its own component.

        :param n: The number of elements.
        """
        n = require_positive_int(n, "n")

        # self.parent[i] = parent of element i
        self.parent = np.arange(n, dtype=np.int64)

        # self.size[i] = number of elements in the tree rooted at i
        self.size = np.ones(n, dtype=np.int64)

        # The number of distinct components (or disjoint sets)
        self.count = n

    def __len__(self):
        return len(self.parent)

    def _validate(self, p):
        """
        Validates that p is a valid index.
        """
        n = len(self.parent)
        if p < 0 or p >= n:
            raise OutOfRangeError(f"index {p} is not between 0 and {n-1}")

    def find(self, p: int) -> int:
        """
        Returns the root (canonical element) of the set containing 'p'.
        """
        self._validate(p)
        return int(find_root(self.parent, p))

    def connected(self, p: int, q: int) -> bool:
        """
        Returns true if 'p' and 'q' are in the same component.
        """
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int):
        """
        Merges the set containing 'p' with the set containing 'q'.
        """
        self._validate(p)
        self._validate(q)

        if union_by_size(self.parent, self.size, p, q):
            # A union operation reduces the total number of components by 1
            self.count -= 1
