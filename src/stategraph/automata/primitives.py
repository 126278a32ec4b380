"""Graph primitives for edge-list automata.

`State` and `Symbol` wrap caller-supplied identifiers so that states and
transition symbols can't be mixed up when they share a value type. Equality,
ordering and hashing all delegate to the wrapped value.
"""

from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from typing import Any

import networkx as nx

# Edge attribute holding the transition symbol in the adjacency graph
SYMBOL_ATTR = "symbol"


@dataclass(frozen=True, order=True)
class State:
    """An automaton state."""
    value: Hashable

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Symbol:
    """An automaton transition symbol."""
    value: Hashable

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Transition:
    """A transition from `source` to `destination` through `symbol`.

    Raw values are wrapped on construction, so `Transition("A", "B", "x")`
    equals `Transition(State("A"), State("B"), Symbol("x"))`.
    """
    source: State
    destination: State
    symbol: Symbol

    def __post_init__(self):
        if not isinstance(self.source, State):
            object.__setattr__(self, "source", State(self.source))
        if not isinstance(self.destination, State):
            object.__setattr__(self, "destination", State(self.destination))
        if not isinstance(self.symbol, Symbol):
            object.__setattr__(self, "symbol", Symbol(self.symbol))

    @classmethod
    def of(cls, source: Any, destination: Any, symbol: Any) -> "Transition":
        """Build a transition from raw values."""
        return cls(source, destination, symbol)


def neighbors_outgoing(graph: nx.DiGraph, node: State) -> Iterator[State]:
    """Iterate the nodes reached by edges leaving `node`."""
    return graph.successors(node)


def neighbors_incoming(graph: nx.DiGraph, node: State) -> Iterator[State]:
    """Iterate the nodes with an edge pointing at `node`."""
    return graph.predecessors(node)


def edge_symbol(graph: nx.DiGraph, source: State, destination: State) -> Symbol | None:
    """Get the symbol stored on the edge `source -> destination`, if any."""
    data = graph.get_edge_data(source, destination)
    if data is None:
        return None
    return data.get(SYMBOL_ATTR)
