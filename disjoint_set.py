"""
Disjoint-Set Forest (union-find) used by the Boruvka MST builder
Path compression on find, union by rank on merge
"""

import operator


class DisjointSetForest:
    def __init__(self, size):
        """
        Initialize the forest
        size: number of elements, each starting as its own component
        """
        if size < 0:
            raise ValueError(f"Forest size must be non-negative, got {size}")

        self.size = size
        self.parent = list(range(size))
        self.rank = [0] * size
        self.count = size

    def __len__(self):
        return self.size

    def _check(self, v):
        """Return v as a plain int, raising IndexError if it is not a valid index"""
        if isinstance(v, bool):
            raise IndexError(f"Vertex index {v!r} is not an integer index")
        try:
            index = operator.index(v)
        except TypeError:
            raise IndexError(f"Vertex index {v!r} is not an integer index") from None
        if not 0 <= index < self.size:
            raise IndexError(f"Vertex index {v!r} out of range [0, {self.size})")
        return index

    def root(self, v):
        """Walk to the representative of v without modifying the forest"""
        v = self._check(v)
        while self.parent[v] != v:
            v = self.parent[v]
        return v

    def find(self, v):
        """Find the representative of v, pointing every visited node at it"""
        v = self._check(v)
        root = self.root(v)

        # Path compression
        while self.parent[v] != root:
            self.parent[v], v = root, self.parent[v]

        return root

    def union(self, a, b):
        """
        Merge the components containing a and b
        Returns False if they were already in the same component
        """
        root_a = self.find(a)
        root_b = self.find(b)

        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1

        self.count -= 1
        return True

    def connected(self, a, b):
        """Check if a and b belong to the same component"""
        return self.find(a) == self.find(b)

    def components(self):
        """Return the partition as sorted lists of members, ordered by smallest member"""
        groups = {}
        for v in range(self.size):
            groups.setdefault(self.find(v), []).append(v)
        return sorted(groups.values())
