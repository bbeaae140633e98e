from collections import defaultdict
import numbers
import numpy as np


class UnionFind:
    """Helper class to implement union-find / disjoint sets algorithm
    efficiently.

    The parents array stores the indices of the parent of the
    corresponding node. The ranks array stores an upper bound on the
    height of an up-tree if the corresponding index is the index of a
    root.
    """
    def __init__(self, n):
        """Initializes a forest of n up-trees with each
        node as a root.

        Parameters:
        n (int): Number of nodes.
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral):
            raise TypeError('n must be an integer, got %r' % (n,))
        if n < 0:
            raise ValueError('n must be non-negative, got %d' % n)
        self.parents = np.arange(n)
        self.ranks = np.zeros(n, dtype=np.int64)

    def __len__(self):
        return len(self.parents)

    def union(self, i, j):
        """Unites the up-trees which contain indices i and j.
        Does union by rank: the lower up-tree is linked to the root of
        the higher one. On equal ranks the root of j is linked under
        the root of i.

        Parameters:
        i (int): Node of first up-tree.
        j (int): Node of second up-tree.

        Return:
        (bool): Whether two distinct up-trees were merged. False means
        i and j were already connected and nothing changed.
        """
        root_i, root_j = self.find(i), self.find(j)
        if root_i == root_j:
            return False

        if self.ranks[root_i] < self.ranks[root_j]:
            self.parents[root_i] = root_j
        else:
            self.parents[root_j] = root_i
            if self.ranks[root_i] == self.ranks[root_j]:
                self.ranks[root_i] += 1
        return True

    def find(self, i):
        """Returns the index of the root node of the up-tree node i
        belongs to. Does path-compression: links all nodes on the walk
        directly to the root.

        Parameters:
        i (int): Node to be found.

        Return:
        (int): Index of the root of i.
        """
        root = i
        while self.parents[root] != root:
            root = self.parents[root]

        while self.parents[i] != root:
            self.parents[i], i = root, self.parents[i]
        return int(root)

    def connected(self, i, j):
        """Returns whether nodes i and j are in the same up-tree."""
        return self.find(i) == self.find(j)

    def groups(self):
        """Returns a list of disjoint lists where each disjoint list
        contains the indices of all nodes in the
        corresponding up-tree.

        Return:
        (list): List of indices of nodes in corresponding up-tree.
        """
        roots = map(self.find, range(len(self.parents)))
        groups = defaultdict(list)
        for i, root in enumerate(roots):
            groups[root].append(i)
        return list(groups.values())
