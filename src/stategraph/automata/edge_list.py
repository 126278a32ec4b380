"""Edge-list automata: explicit state, initial, final and transition sets.

The transition relation is kept twice: as an ordered set of `Transition`
triples, and as a `networkx.DiGraph` used for traversal. The graph holds a
single edge per (source, destination) pair, so adding a second transition
between the same two states overwrites the symbol stored on the graph edge
while both triples stay in the transition set.

```python
from stategraph.automata import DFA, Transition

dfa = DFA()
dfa.add_initial_state("A")
dfa.add_final_state("C")
dfa.add_transition(Transition.of("A", "B", "x"))
dfa.add_transition(Transition.of("B", "C", "y"))

dfa.reachable("A")      # {State(value='B'), State(value='C')}
dfa.is_productive("C")  # False, C has no outgoing edge
```
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import networkx as nx

from . import analysis
from .primitives import SYMBOL_ATTR, State, Symbol, Transition, edge_symbol

logger = logging.getLogger(__name__)


def _as_state(state: Any) -> State:
    return state if isinstance(state, State) else State(state)


class FiniteAutomaton(ABC):
    """Common storage and analysis for deterministic and nondeterministic automata.

    All collections keep insertion order so that exports are reproducible.
    """

    def __init__(self):
        self._states: dict[State, None] = {}
        self._initial_states: dict[State, dict[str, None]] = {}
        self._final_states: dict[State, dict[str, None]] = {}
        self._transitions: dict[Transition, None] = {}
        self._graph = nx.DiGraph()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(states={len(self._states)}, "
            f"initial={len(self._initial_states)}, final={len(self._final_states)}, "
            f"transitions={len(self._transitions)})"
        )

    @property
    def states(self) -> list[State]:
        return list(self._states)

    @property
    def initial_states(self) -> list[State]:
        return list(self._initial_states)

    @property
    def final_states(self) -> list[State]:
        return list(self._final_states)

    @property
    def initial_labels(self) -> dict[State, list[str]]:
        """Display labels attached to each initial state."""
        return {state: list(labels) for state, labels in self._initial_states.items()}

    @property
    def final_labels(self) -> dict[State, list[str]]:
        """Display labels attached to each final state."""
        return {state: list(labels) for state, labels in self._final_states.items()}

    @property
    def transitions(self) -> list[Transition]:
        return list(self._transitions)

    @property
    def graph(self) -> nx.DiGraph:
        """The adjacency graph, edges carry their symbol under `symbol`."""
        return self._graph

    def add_state(self, state: Any) -> State:
        """Add a state to the automaton and return its canonical node."""
        node = _as_state(state)
        self._states.setdefault(node, None)
        self._graph.add_node(node)
        return node

    def add_initial_state(self, state: Any, *labels: str) -> State:
        """Add an initial state, also adding it to the general state set.

        Args:
            state: State (or raw identifier) to mark as initial
            *labels: Optional display labels for the start marker edge

        Returns:
            The canonical state node
        """
        node = self.add_state(state)
        entry = self._initial_states.setdefault(node, {})
        for label in labels:
            entry.setdefault(label, None)
        return node

    def add_final_state(self, state: Any, *labels: str) -> State:
        """Add a final state, also adding it to the general state set."""
        node = self.add_state(state)
        entry = self._final_states.setdefault(node, {})
        for label in labels:
            entry.setdefault(label, None)
        return node

    def add_transition(self, transition: Transition) -> Symbol | None:
        """Add a transition to the automaton.

        Returns:
            The symbol previously stored on the graph edge between the same
            source and destination, or None if there was no such edge
        """
        source = self.add_state(transition.source)
        destination = self.add_state(transition.destination)
        self._transitions.setdefault(transition, None)

        previous = edge_symbol(self._graph, source, destination)
        if previous is not None and previous != transition.symbol:
            logger.debug(
                f"Edge {source} -> {destination}: "
                f"symbol {previous} replaced by {transition.symbol}"
            )
        self._graph.add_edge(source, destination, **{SYMBOL_ATTR: transition.symbol})
        return previous

    def reachable(self, state: Any) -> set[State]:
        """Generate the set of states reachable from `state`.

        The start state itself is excluded unless a cycle leads back to it.
        """
        return analysis.reachable(self._graph, _as_state(state))

    def is_productive(self, state: Any) -> bool:
        """Check if a state is productive.

        Intersects the states reachable from `state` with the final state
        set. A final state with no path back to itself is reported as not
        productive.
        """
        return analysis.is_productive(self._graph, self._final_states, _as_state(state))

    def productive_states(self) -> list[State]:
        """List all productive states in insertion order."""
        return analysis.productive_states(self._graph, self._final_states)

    @abstractmethod
    def delta(self) -> dict:
        """Transition table keyed by source state, then symbol."""
        pass


class DeterministicFiniteAutomaton(FiniteAutomaton):
    """Automaton with at most one destination per (source, symbol)."""

    def delta(self) -> dict[State, dict[Symbol, State]]:
        """Transition function as `{source: {symbol: destination}}`.

        A later transition for the same source and symbol wins.
        """
        table: dict[State, dict[Symbol, State]] = {}
        for transition in self._transitions:
            table.setdefault(transition.source, {})[transition.symbol] = transition.destination
        return table


class NondeterministicFiniteAutomaton(FiniteAutomaton):
    """Automaton allowing several destinations per (source, symbol)."""

    def delta(self) -> dict[State, dict[Symbol, list[State]]]:
        """Transition relation as `{source: {symbol: [destinations]}}`."""
        table: dict[State, dict[Symbol, list[State]]] = {}
        for transition in self._transitions:
            destinations = table.setdefault(transition.source, {}).setdefault(transition.symbol, [])
            if transition.destination not in destinations:
                destinations.append(transition.destination)
        return table


DFA = DeterministicFiniteAutomaton
NFA = NondeterministicFiniteAutomaton
