"""
Turns engine results into the JSON documents printed by the CLI and
into the human readable per-iteration trace.
"""

import sys

from .engine import min_cut


def format_success(graph, result, source, sink, include_flows=True):
    # Builds the output document for a finished run
    cut = min_cut(graph, source)
    output = {
        "status": "ok",
        "max_flow": result.value,
        "iterations": result.iterations,
        "nodes": graph.n,
        "edges": graph.edge_count,
        "source": source,
        "sink": sink,
    }

    if include_flows:
        output["flows"] = [
            {
                "from": e.source,
                "to": e.target,
                "flow": e.flow,
                "capacity": e.capacity
            }
            for e in graph.forward_edges() if e.flow > 0
        ]

    output["min_cut"] = {
        "capacity": cut.capacity,
        "source_side": sorted(cut.reachable),
        "edges": [{"from": e.source, "to": e.target} for e in cut.edges]
    }
    return output


def format_error(message):
    return {"status": "error", "message": message}


def network_stats(graph):
    edges = graph.edge_count
    return {
        "nodes": graph.n,
        "edges": edges,
        "avg_edges_per_node": round(edges / graph.n, 2)
    }


def format_path(nodes):
    return " -> ".join(str(v) for v in nodes)


class IterationTrace:
    """
    on_augment callback that writes each augmentation and the edge
    flows after it.
    """

    def __init__(self, graph, stream=None):
        self.graph = graph
        self.stream = stream if stream is not None else sys.stderr

    def write(self, text=""):
        self.stream.write(text + "\n")

    def header(self):
        self.write("Network Flow Calculation")
        self.write("=======================")

    def __call__(self, step):
        self.write()
        self.write(f"* Iteration {step.iteration}:")
        self.write(f"  Found path: {format_path(step.path)}")
        self.write(f"  Bottleneck capacity: {step.bottleneck}")
        self.write(f"  Current maximum flow: {step.total}")
        self.write(f"  Edge Flows after Iteration {step.iteration}:")
        for e in self.graph.forward_edges():
            if e.flow > 0:
                self.write(f"  Edge {e.source}->{e.target}: "
                           f"Flow = {e.flow} (Capacity = {e.capacity})")

    def summary(self, result):
        self.write()
        self.write("Final Network Flow Analysis")
        self.write("==========================")
        self.write(f"Maximum flow: {result.value}")
        self.write(f"Augmenting paths: {result.iterations}")
