"""
Edmonds-Karp maximum flow.

Repeatedly finds a shortest augmenting path with BFS, pushes its
bottleneck through it and stops once the sink is unreachable in the
residual graph. Runs in O(V * E^2).
"""

from collections import deque
from dataclasses import dataclass, field


@dataclass
class FlowResult:
    value: int
    iterations: int


@dataclass
class Augmentation:
    iteration: int
    path: list
    bottleneck: int
    total: int


@dataclass
class MinCut:
    reachable: set
    unreachable: set
    edges: list = field(default_factory=list)
    capacity: int = 0


def _check_endpoints(graph, source, sink):
    for role, node in (("Source", source), ("Sink", sink)):
        if not isinstance(node, int) or isinstance(node, bool):
            raise ValueError(f"{role} must be an integer node index, got {node!r}")
        if node < 0 or node >= graph.n:
            raise ValueError(f"{role} {node} out of range [0,{graph.n - 1}]")
    if source == sink:
        raise ValueError(f"Source and sink must differ (both are {source})")


def find_augmenting_path(graph, source, sink):
    """
    Returns the edges of a shortest source->sink path that uses only
    edges with positive residual capacity, or None if the sink cannot
    be reached.
    """
    parent = [None] * graph.n
    visited = [False] * graph.n
    visited[source] = True
    queue = deque([source])

    while queue:
        u = queue.popleft()
        if u == sink:
            break
        for idx in graph.adjacency[u]:
            edge = graph.edges[idx]
            if not visited[edge.target] and edge.capacity - edge.flow > 0:
                visited[edge.target] = True
                parent[edge.target] = edge
                queue.append(edge.target)

    if not visited[sink]:
        return None

    path = []
    v = sink
    while v != source:
        edge = parent[v]
        path.append(edge)
        v = edge.source
    path.reverse()
    return path


def bottleneck(path):
    return min(edge.capacity - edge.flow for edge in path)


def augment(graph, path, amount):
    for edge in path:
        edge.flow += amount
        graph.edges[edge.rev].flow -= amount


def path_nodes(path):
    return [path[0].source] + [edge.target for edge in path]


def edmonds_karp(graph, source, sink, on_augment=None):
    """
    Computes the maximum flow from source to sink, leaving the flow of
    every edge in `graph`. Bad endpoints raise ValueError before the
    graph is touched.

    `on_augment` is called with an Augmentation after each path is
    applied; the engine itself never prints.
    """
    _check_endpoints(graph, source, sink)

    total = 0
    iterations = 0
    while True:
        path = find_augmenting_path(graph, source, sink)
        if path is None:
            break

        amount = bottleneck(path)
        augment(graph, path, amount)
        total += amount
        iterations += 1

        if on_augment is not None:
            on_augment(Augmentation(iterations, path_nodes(path), amount, total))

    return FlowResult(total, iterations)


def max_flow(graph, source, sink):
    return edmonds_karp(graph, source, sink).value


def min_cut(graph, source):
    """
    Splits nodes by residual reachability from `source`. Called after
    edmonds_karp, the forward edges crossing the split form a minimum
    cut whose capacity equals the flow value.
    """
    if not isinstance(source, int) or source < 0 or source >= graph.n:
        raise ValueError(f"Source {source!r} out of range [0,{graph.n - 1}]")

    reachable = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for edge in graph.edges_from(u):
            if edge.target not in reachable and edge.residual_capacity > 0:
                reachable.add(edge.target)
                queue.append(edge.target)

    unreachable = set(range(graph.n)) - reachable
    cut_edges = [e for e in graph.forward_edges()
                 if e.source in reachable and e.target in unreachable]
    return MinCut(reachable, unreachable, cut_edges,
                  sum(e.capacity for e in cut_edges))
