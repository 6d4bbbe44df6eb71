"""
Reads networks in the plain text format:

    n
    from to capacity
    ...

Nodes are numbered 0..n-1. Blank lines are skipped.
"""

import os
import re

from .graph import ResidualGraph

NATURAL_NAME = re.compile(r"(.*?)([0-9]+)\.txt$")


class ParseError(ValueError):
    def __init__(self, message, line=None):
        if line is not None:
            message = f"Line {line}: {message}"
        super().__init__(message)
        self.line = line


def _to_int(token, line, what):
    try:
        return int(token)
    except ValueError:
        raise ParseError(f"Invalid format: {what} {token!r} is not an integer", line)


def parse_network(text):
    lines = text.splitlines()
    header = None
    for lineno, raw in enumerate(lines, 1):
        if raw.strip():
            header = (lineno, raw.strip())
            break
    if header is None:
        raise ParseError("Empty file or unable to read first line")

    lineno, first = header
    try:
        n = int(first)
    except ValueError:
        raise ParseError(f"First line must contain the number of nodes, got {first!r}", lineno)
    if n <= 1:
        raise ParseError("Network must have at least 2 nodes (source and sink)", lineno)

    graph = ResidualGraph(n)

    for lineno, raw in enumerate(lines[lineno:], lineno + 1):
        tokens = raw.split()
        if not tokens:
            continue
        if len(tokens) != 3:
            raise ParseError(
                f"Expected 3 values (from, to, capacity), found {len(tokens)}", lineno
            )

        u = _to_int(tokens[0], lineno, "source node")
        v = _to_int(tokens[1], lineno, "destination node")
        capacity = _to_int(tokens[2], lineno, "capacity")

        if u < 0 or u >= n:
            raise ParseError(f"Source node index {u} out of range [0,{n - 1}]", lineno)
        if v < 0 or v >= n:
            raise ParseError(f"Destination node index {v} out of range [0,{n - 1}]", lineno)
        if capacity < 0:
            raise ParseError(f"Negative capacity {capacity} not allowed", lineno)

        graph.add_edge(u, v, capacity)

    return graph


def read_network(path):
    with open(path, 'r', encoding='utf-8') as f:
        return parse_network(f.read())


def natural_key(name):
    # "ladder_10.txt" sorts after "ladder_2.txt"
    match = NATURAL_NAME.match(name)
    if match:
        return (match.group(1), int(match.group(2)), name)
    return (name, -1, name)


def list_network_files(directory):
    names = [name for name in os.listdir(directory)
             if name.endswith('.txt') and os.path.isfile(os.path.join(directory, name))]
    return [os.path.join(directory, name) for name in sorted(names, key=natural_key)]
