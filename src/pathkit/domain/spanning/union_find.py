class UnionFind:
    """
    Disjoint sets over the dense id space 0..node_count-1.
    Path compression in find, union by size in unify.
    """

    def __init__(self, node_count: int):
        self.ids: list[int] = list(range(node_count))
        self.sizes: list[int] = [1] * node_count
        self.components = node_count

    def __len__(self) -> int:
        return len(self.ids)

    def find(self, p: int) -> int:
        root = p
        while root != self.ids[root]:
            root = self.ids[root]

        # second pass: repoint everything on the way up straight at the root
        while p != root:
            nxt = self.ids[p]
            self.ids[p] = root
            p = nxt

        return root

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def unify(self, p: int, q: int) -> bool:
        """Merge the sets of p and q. Returns False if they were already one set."""
        p_root, q_root = self.find(p), self.find(q)
        if p_root == q_root:
            return False

        # equal sizes keep p's root on top
        if self.sizes[p_root] < self.sizes[q_root]:
            self.sizes[q_root] += self.sizes[p_root]
            self.ids[p_root] = q_root
        else:
            self.sizes[p_root] += self.sizes[q_root]
            self.ids[q_root] = p_root

        self.components -= 1
        return True

    def size(self, id: int) -> int:
        return self.sizes[id]

    def parent(self, id: int) -> int:
        return self.ids[id]
