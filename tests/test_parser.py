import os
import sys
import tempfile

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from maxflow.graph import ResidualGraph  # noqa: E402
from maxflow.parser import (  # noqa: E402
    ParseError, list_network_files, parse_network, read_network
)


def parse_error(text):
    try:
        parse_network(text)
    except ParseError as e:
        return e
    raise AssertionError(f"expected ParseError for {text!r}")


def test_parses_edges_in_order():
    graph = parse_network("4\n0 1 3\n\n0 2 2\n  1 3 2  \n")
    assert graph.n == 4
    assert [(e.source, e.target, e.capacity) for e in graph.forward_edges()] == [
        (0, 1, 3), (0, 2, 2), (1, 3, 2)
    ]


def test_leading_blank_lines_are_skipped():
    graph = parse_network("\n\n3\n0 2 1\n")
    assert graph.n == 3
    assert graph.edge_count == 1


def test_error_messages_carry_line_numbers():
    assert str(parse_error("")) == "Empty file or unable to read first line"
    assert parse_error("abc\n").line == 1
    assert str(parse_error("1\n")) == "Line 1: Network must have at least 2 nodes (source and sink)"
    assert str(parse_error("3\n0 1 2\n0 x 1\n")).startswith("Line 3: Invalid format")
    assert str(parse_error("3\n0 1 2 4\n")) == "Line 2: Expected 3 values (from, to, capacity), found 4"
    assert str(parse_error("3\n-1 1 2\n")) == "Line 2: Source node index -1 out of range [0,2]"
    assert str(parse_error("3\n0 3 2\n")) == "Line 2: Destination node index 3 out of range [0,2]"
    assert str(parse_error("3\n0 1 -2\n")) == "Line 2: Negative capacity -2 not allowed"


def test_parse_error_is_value_error():
    assert issubclass(ParseError, ValueError)


def test_graph_construction_errors_leave_graph_unchanged():
    for n in (0, 1, "4", 2.5):
        try:
            ResidualGraph(n)
        except ValueError:
            continue
        raise AssertionError(f"ResidualGraph({n!r}) should fail")

    graph = ResidualGraph(3)
    for args in ((0, 3, 1), (-1, 1, 1), (0, 1, -5), (0, 1, 1.5)):
        try:
            graph.add_edge(*args)
        except ValueError:
            continue
        raise AssertionError(f"add_edge{args} should fail")
    assert graph.edges == []
    assert graph.adjacency == [[], [], []]


def test_reverse_edges_are_paired():
    graph = ResidualGraph(3)
    forward = graph.add_edge(0, 2, 9)
    backward = graph.reverse(forward)
    assert (backward.source, backward.target, backward.capacity) == (2, 0, 0)
    assert graph.reverse(backward) is forward
    assert forward.is_forward and not backward.is_forward
    assert graph.edges_from(2) == [backward]


def test_copy_is_independent():
    graph = parse_network("2\n0 1 5\n")
    graph.edges[0].flow = 5
    graph.edges[1].flow = -5
    clone = graph.copy()
    assert [e.flow for e in clone.edges] == [5, -5]
    clone.reset()
    assert graph.edges[0].flow == 5


def test_read_network_and_natural_listing():
    with tempfile.TemporaryDirectory() as tmp:
        for name in ("net_10.txt", "net_2.txt", "net_1.txt", "notes.md"):
            with open(os.path.join(tmp, name), 'w', encoding='utf-8') as f:
                f.write("2\n0 1 4\n")
        files = list_network_files(tmp)
        assert [os.path.basename(p) for p in files] == ["net_1.txt", "net_2.txt", "net_10.txt"]
        assert read_network(files[0]).edge_count == 1


if __name__ == "__main__":
    tests = [(name, fn) for name, fn in sorted(globals().items())
             if name.startswith("test_") and callable(fn)]
    failed = 0
    for name, fn in tests:
        try:
            fn()
            print(f"PASS {name}")
        except AssertionError as e:
            failed += 1
            print(f"FAIL {name}: {e}")
    print(f"{len(tests) - failed}/{len(tests)} passed")
    sys.exit(1 if failed else 0)
