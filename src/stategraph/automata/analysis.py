"""Reachability and productivity analysis over an automaton graph."""

import logging
from collections import deque
from collections.abc import Iterable

import networkx as nx

from .primitives import State, neighbors_outgoing

logger = logging.getLogger(__name__)


def reachable(graph: nx.DiGraph, state: State) -> set[State]:
    """Find every state reachable from `state` through at least one edge.

    Breadth-first search over outgoing edges. The start state is only part of
    the result when some cycle leads back to it.

    Args:
        graph: Adjacency graph of the automaton
        state: State to start from

    Returns:
        Set of discovered states (empty if `state` is not in the graph)
    """
    discovered: set[State] = set()
    if state not in graph:
        return discovered

    queue = deque([state])
    while queue:
        current = queue.popleft()
        for neighbor in neighbors_outgoing(graph, current):
            if neighbor not in discovered:
                discovered.add(neighbor)
                queue.append(neighbor)

    logger.debug(f"{len(discovered)} state(s) reachable from {state}")
    return discovered


def is_productive(graph: nx.DiGraph, final_states: Iterable[State], state: State) -> bool:
    """Check whether some final state is reachable from `state`.

    Uses `reachable`, so a final state without a path back to itself is not
    productive.
    """
    reached = reachable(graph, state)
    return any(final in reached for final in final_states)


def productive_states(graph: nx.DiGraph, final_states: Iterable[State]) -> list[State]:
    """List the productive states of the graph in node insertion order."""
    finals = list(final_states)
    return [state for state in graph.nodes if is_productive(graph, finals, state)]
