"""
Independent checks for a computed flow.

check_flow inspects the residual graph left behind by the engine.
networkx_max_flow and lp_max_flow recompute the value with other
solvers so results can be cross checked.
"""

import networkx as nx
import numpy as np
from networkx.algorithms.flow import edmonds_karp as nx_edmonds_karp
from scipy.optimize import linprog

from .engine import min_cut

TOLERANCE = 1e-6


def check_flow(graph, source, sink, value):
    """
    Returns a list of human readable violations; empty means the flow
    is feasible and maximum.
    """
    violations = []

    for e in graph.forward_edges():
        if e.flow < 0 or e.flow > e.capacity:
            violations.append(
                f"capacity: edge {e.source}->{e.target} has flow {e.flow} "
                f"outside [0, {e.capacity}]"
            )
        rev = graph.reverse(e)
        if e.flow != -rev.flow:
            violations.append(
                f"antisymmetry: edge {e.source}->{e.target} flow {e.flow} "
                f"but reverse flow {rev.flow}"
            )

    for node in range(graph.n):
        if node in (source, sink):
            continue
        inflow = graph.flow_in(node)
        outflow = graph.flow_out(node)
        if inflow != outflow:
            violations.append(
                f"conservation: node {node} receives {inflow} but sends {outflow}"
            )

    net = graph.flow_out(source) - graph.flow_in(source)
    if net != value:
        violations.append(f"value: source sends net {net} but reported {value}")

    cut = min_cut(graph, source)
    if sink in cut.reachable:
        violations.append("min-cut: sink still reachable in the residual graph")
    elif cut.capacity != value:
        violations.append(f"min-cut: cut capacity {cut.capacity} != flow {value}")

    return violations


def to_networkx(graph):
    # DiGraph cannot hold parallel edges, so their capacities are merged
    G = nx.DiGraph()
    G.add_nodes_from(range(graph.n))
    for e in graph.forward_edges():
        if e.source == e.target:
            continue
        if G.has_edge(e.source, e.target):
            G[e.source][e.target]['capacity'] += e.capacity
        else:
            G.add_edge(e.source, e.target, capacity=e.capacity)
    return G


def networkx_max_flow(graph, source, sink):
    G = to_networkx(graph)
    value, _ = nx.maximum_flow(
        G, source, sink, capacity='capacity', flow_func=nx_edmonds_karp
    )
    return int(value)


def lp_max_flow(graph, source, sink):
    """
    Solves max flow as a linear program: one variable per edge bounded
    by its capacity, conservation at every inner node, maximise the net
    outflow of the source.
    """
    edges = graph.forward_edges()
    if not edges:
        return 0

    inner = [v for v in range(graph.n) if v not in (source, sink)]
    row_of = {v: i for i, v in enumerate(inner)}

    c_objective = np.zeros(len(edges))
    A_eq = np.zeros((len(inner), len(edges)))

    for j, e in enumerate(edges):
        if e.source == source:
            c_objective[j] -= 1.0
        if e.target == source:
            c_objective[j] += 1.0
        if e.source in row_of:
            A_eq[row_of[e.source], j] -= 1.0
        if e.target in row_of:
            A_eq[row_of[e.target], j] += 1.0

    bounds = [(0, e.capacity) for e in edges]

    res = linprog(
        c=c_objective,
        A_eq=A_eq if inner else None,
        b_eq=np.zeros(len(inner)) if inner else None,
        bounds=bounds,
        method='highs'
    )
    if not res.success:
        raise RuntimeError(f"LP solver failed: {res.message}")

    value = -res.fun
    if abs(value) < TOLERANCE:
        value = 0.0
    return int(round(value))
