"""Edmonds-Karp maximum flow over an integer capacity network."""

from .engine import FlowResult, edmonds_karp, max_flow, min_cut
from .graph import Edge, ResidualGraph
from .parser import ParseError, parse_network, read_network

__version__ = "1.0.0"
