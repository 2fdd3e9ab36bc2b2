#!/usr/bin/env python3
"""
CLI for structural graph properties.

Graphs are given as tokens "vertex:neighbour,neighbour"; a bare "vertex"
token adds an isolated vertex.

Usage:
    python main.py analyze a:b,c b:c            # Summary of all properties
    python main.py lexbfs a:b,c b:c,d,e c:d d:e # LexBFS ordering
    python main.py orient a:b,g b:c c:d d:e,f e:f f:g
    python main.py complement a:b,c b:c,d,e c:d d:e
"""

import argparse
import logging
import sys

from graphprops import GraphError, UndirectedGraph


def parse_adjacency(tokens: list[str]) -> dict[str, list[str]]:
    """
    Turn "v:w1,w2" tokens into an adjacency mapping.

    Args:
        tokens: Command line graph tokens

    Returns:
        Mapping vertex -> list of neighbours, in token order
    """
    adjacency: dict[str, list[str]] = {}
    for token in tokens:
        vertex, _, rest = token.partition(":")
        if not vertex:
            raise argparse.ArgumentTypeError(f"Missing vertex in token {token!r}")
        neighbors = [w for w in rest.split(",") if w]
        adjacency.setdefault(vertex, []).extend(neighbors)
    return adjacency


def _format_edges(edges) -> str:
    return ", ".join(f"{u}-{v}" for u, v in edges) or "(none)"


def cmd_analyze(graph: UndirectedGraph):
    """Print a summary of the graph's structural properties."""
    print(f"Vertices: {len(graph)}")
    print(f"Edges: {len(graph.edges())}")
    print()
    print(f"  complete:      {graph.is_complete()}")
    print(f"  bipartite:     {graph.is_bipartite()}")
    print(f"  chordal:       {graph.is_chordal()}")
    print(f"  comparability: {graph.is_comparability()}")


def cmd_lexbfs(graph: UndirectedGraph):
    """Print the LexBFS ordering and the elimination ordering if one exists."""
    print(f"LexBFS: {' '.join(map(str, graph.lexicographic_bfs()))}")
    peo = graph.perfect_elimination_ordering()
    if peo is None:
        print("Perfect elimination ordering: none (graph is not chordal)")
    else:
        print(f"Perfect elimination ordering: {' '.join(map(str, peo))}")


def cmd_orient(graph: UndirectedGraph):
    """Print a transitive orientation."""
    orientation = graph.transitive_orientation()
    if orientation is None:
        print("No transitive orientation: graph is not a comparability graph")
        return
    print("Transitive orientation:")
    for u, v in orientation.sorted_edges():
        print(f"  {u} -> {v}")


def cmd_complement(graph: UndirectedGraph):
    """Print the edges of the complement."""
    print(f"Complement edges: {_format_edges(graph.complement().sorted_edges())}")


COMMANDS = {
    "analyze": cmd_analyze,
    "lexbfs": cmd_lexbfs,
    "orient": cmd_orient,
    "complement": cmd_complement,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Structural properties of simple undirected graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    for name, func in COMMANDS.items():
        sub = subparsers.add_parser(name, help=func.__doc__)
        sub.add_argument("graph", nargs="*", help="Graph tokens of the form v:w1,w2")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        graph = UndirectedGraph(parse_adjacency(args.graph))
        COMMANDS[args.command](graph)
    except (GraphError, argparse.ArgumentTypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
