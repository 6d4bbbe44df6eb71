"""
Command line front end: reads a network, runs Edmonds-Karp between the
source and the sink and prints the result as JSON.
"""

import sys
import json
import os
import argparse
try:
    import networkx  # noqa: F401
    import numpy  # noqa: F401
    import scipy  # noqa: F401
except ImportError as e:
    sys.stderr.write(f"Error: {e.name!r} is required. Please install it with 'pip install networkx numpy scipy'\n")
    print(json.dumps({"status": "error", "message": f"Missing required library: {e.name}"}, indent=2))
    sys.exit(1)

from .bench import run_benchmark
from .engine import edmonds_karp
from .parser import ParseError, list_network_files, parse_network, read_network
from .report import IterationTrace, format_error, format_success, network_stats
from .verify import check_flow, lp_max_flow, networkx_max_flow

# networks at least this large are not traced unless asked for
VERBOSE_EDGE_LIMIT = 4000


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="maxflow",
        description="Maximum flow between a source and a sink (Edmonds-Karp)."
    )
    parser.add_argument("path", nargs="?", default="-",
                        help="network file, directory of network files, or - for stdin")
    parser.add_argument("--source", type=int, default=0, help="source node (default 0)")
    parser.add_argument("--sink", type=int, default=None, help="sink node (default n-1)")
    parser.add_argument("--pick", type=int, default=None,
                        help="1-based index of the file to use when PATH is a directory")
    parser.add_argument("--verbose", action="store_true",
                        help="trace every augmenting path on stderr")
    parser.add_argument("--no-flows", action="store_true",
                        help="leave per-edge flows out of the output")
    parser.add_argument("--verify", action="store_true",
                        help="check the flow and compare with networkx and an LP")
    parser.add_argument("--benchmark", type=int, default=0, metavar="N",
                        help="rerun the computation N times and report timings")
    return parser


def choose_file(directory, pick):
    # lists network files and returns the selected one
    files = list_network_files(directory)
    if not files:
        raise ValueError(f"No network files found in {os.path.abspath(directory)}")

    if pick is None:
        sys.stderr.write("Available network files:\n")
        for i, path in enumerate(files, 1):
            sys.stderr.write(f"{i}. {os.path.basename(path)}\n")
        sys.stderr.write(f"Enter the number of the file you want to use (1-{len(files)}): ")
        sys.stderr.flush()
        answer = sys.stdin.readline().strip()
        try:
            pick = int(answer)
        except ValueError:
            raise ValueError(f"Invalid input {answer!r}. Please enter a number.")

    if pick < 1 or pick > len(files):
        raise ValueError(f"Invalid file selection. Please enter a number between 1 and {len(files)}.")
    return files[pick - 1]


def load_network(path, pick):
    if path == "-":
        return parse_network(sys.stdin.read()), None
    if os.path.isdir(path):
        path = choose_file(path, pick)
    return read_network(path), path


def solve_network(graph, source, sink, verbose=False, include_flows=True,
                  verify=False, benchmark=0):
    # runs the engine and assembles the output document
    trace = None
    if verbose:
        trace = IterationTrace(graph)
        trace.header()

    try:
        result = edmonds_karp(graph, source, sink, on_augment=trace)
    except ValueError as e:
        return format_error(f"Invalid source/sink: {e}")

    if trace is not None:
        trace.summary(result)

    output = format_success(graph, result, source, sink, include_flows)
    output["stats"] = network_stats(graph)

    if verify:
        try:
            output["verification"] = {
                "violations": check_flow(graph, source, sink, result.value),
                "networkx": networkx_max_flow(graph, source, sink),
                "lp": lp_max_flow(graph, source, sink)
            }
        except (RuntimeError, ValueError) as e:
            return format_error(f"Verification failed: {e}")

    if benchmark:
        # a separate copy keeps the reported flows intact
        try:
            output["benchmark"] = run_benchmark(graph.copy(), source, sink, benchmark).as_dict()
        except (RuntimeError, ValueError) as e:
            return format_error(f"Benchmark failed: {e}")

    return output


def main(argv=None):
    """
    Main entry point. Reads the network, solves, prints to stdout.
    """
    args = build_arg_parser().parse_args(argv)

    try:
        graph, path = load_network(args.path, args.pick)
    except OSError as e:
        output = format_error(f"Could not read network: {e}")
        print(json.dumps(output, indent=2))
        sys.exit(1)
    except ParseError as e:
        output = format_error(f"Failed to parse network: {e}")
        print(json.dumps(output, indent=2))
        sys.exit(1)
    except ValueError as e:
        output = format_error(str(e))
        print(json.dumps(output, indent=2))
        sys.exit(1)

    sink = args.sink if args.sink is not None else graph.n - 1
    verbose = args.verbose or (graph.edge_count < VERBOSE_EDGE_LIMIT and sys.stderr.isatty())

    output = solve_network(
        graph, args.source, sink,
        verbose=verbose,
        include_flows=not args.no_flows,
        verify=args.verify,
        benchmark=args.benchmark
    )
    if path is not None and output["status"] == "ok":
        output["input"] = os.path.basename(path)

    print(json.dumps(output, indent=2))
    if output["status"] != "ok":
        sys.exit(1)


if __name__ == "__main__":
    main()
