"""
Residual graph storage for the max-flow engine.

All edges live in one list owned by the graph. Every call to add_edge
appends a forward edge and its zero-capacity reverse edge back to back,
so the pair of forward edge k sits at indices 2k and 2k + 1 and each
edge stores the index of its partner in `rev`.
"""


class Edge:
    __slots__ = ("source", "target", "capacity", "flow", "rev")

    def __init__(self, source, target, capacity, rev):
        self.source = source
        self.target = target
        self.capacity = capacity
        self.flow = 0
        self.rev = rev

    @property
    def residual_capacity(self):
        return self.capacity - self.flow

    @property
    def is_forward(self):
        # forward edges sit at even indices, so their partner is odd
        return self.rev % 2 == 1

    def __repr__(self):
        return (f"Edge({self.source}->{self.target}, "
                f"flow={self.flow}, capacity={self.capacity})")


class ResidualGraph:
    def __init__(self, n):
        if not isinstance(n, int) or isinstance(n, bool):
            raise ValueError(f"Node count must be an integer, got {n!r}")
        if n < 2:
            raise ValueError("Network must have at least 2 nodes (source and sink)")
        self.n = n
        self.edges = []
        self.adjacency = [[] for _ in range(n)]

    def _check_node(self, node, role="Node"):
        if not isinstance(node, int) or isinstance(node, bool):
            raise ValueError(f"{role} index must be an integer, got {node!r}")
        if node < 0 or node >= self.n:
            raise ValueError(f"{role} index {node} out of range [0,{self.n - 1}]")

    def add_edge(self, u, v, capacity):
        """
        Adds u->v with the given capacity plus its reverse v->u with
        capacity 0 and returns the forward edge. Nothing is added when
        validation fails.
        """
        self._check_node(u, "Source node")
        self._check_node(v, "Destination node")
        if not isinstance(capacity, int) or isinstance(capacity, bool):
            raise ValueError(f"Capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise ValueError(f"Negative capacity {capacity} not allowed")

        idx = len(self.edges)
        forward = Edge(u, v, capacity, idx + 1)
        backward = Edge(v, u, 0, idx)
        self.edges.append(forward)
        self.edges.append(backward)
        self.adjacency[u].append(idx)
        self.adjacency[v].append(idx + 1)
        return forward

    def edges_from(self, node):
        self._check_node(node)
        return [self.edges[i] for i in self.adjacency[node]]

    def reverse(self, edge):
        return self.edges[edge.rev]

    def residual_capacity(self, edge):
        return edge.capacity - edge.flow

    def forward_edges(self):
        return self.edges[0::2]

    @property
    def edge_count(self):
        return len(self.edges) // 2

    def flow_out(self, node):
        return sum(e.flow for e in self.edges_from(node) if e.is_forward)

    def flow_in(self, node):
        # reverse edges leaving `node` pair with forward edges entering it
        return sum(self.reverse(e).flow for e in self.edges_from(node)
                   if not e.is_forward)

    def reset(self):
        for edge in self.edges:
            edge.flow = 0

    def copy(self):
        clone = ResidualGraph(self.n)
        for edge in self.forward_edges():
            clone.add_edge(edge.source, edge.target, edge.capacity)
        for mine, theirs in zip(self.edges, clone.edges):
            theirs.flow = mine.flow
        return clone

    def __repr__(self):
        return f"ResidualGraph(n={self.n}, edges={self.edge_count})"
