"""Intermediate automata with decision nodes and label overrides.

This representation describes automata derived from state-transition
declarations where an operation may lead to one of several outcomes. The
transition relation maps an optional source state (None is the initial
pseudo-state) and a transition symbol to a destination `Node`:

- `Direct` wraps a single `StateNode`. A `StateNode` whose state is None is the
  terminal pseudo-state.
- `Decision` wraps an ordered sequence of `StateNode` branches reached
  without consuming another symbol.

A `StateNode` may carry a label override in its `Metadata`. For direct
destinations the override replaces the drawn node name; for decision
branches it becomes the branch edge text.
"""

import logging
from collections.abc import Hashable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Metadata:
    """Display metadata attached to a destination state."""
    transition_label: str | None = None


@dataclass(frozen=True)
class StateNode:
    """A destination state, None standing for the terminal pseudo-state."""
    state: Hashable | None
    metadata: Metadata = field(default_factory=Metadata)

    @classmethod
    def labeled(cls, state: Hashable | None, label: str | None) -> "StateNode":
        return cls(state, Metadata(transition_label=label))

    @property
    def label(self) -> str | None:
        return self.metadata.transition_label

    @property
    def is_terminal(self) -> bool:
        return self.state is None


@dataclass(frozen=True)
class Direct:
    """Deterministic destination: exactly one state node."""
    node: StateNode


@dataclass(frozen=True)
class Decision:
    """Branch point: one of several state nodes, in order."""
    branches: tuple[StateNode, ...]

    def __post_init__(self):
        object.__setattr__(self, "branches", tuple(self.branches))


Node = Union[Direct, Decision]


def as_node(value: Any) -> Node:
    """Normalize a destination value into a `Node`.

    - a `Direct` or `Decision` is returned unchanged
    - a `StateNode` becomes `Direct`
    - None becomes `Direct` to the terminal pseudo-state
    - a list becomes a `Decision`, items may be states or `StateNode`s
    - anything else, tuples included, is a state and becomes `Direct`
    """
    if isinstance(value, (Direct, Decision)):
        return value
    if isinstance(value, StateNode):
        return Direct(value)
    if isinstance(value, list):
        return Decision(tuple(
            item if isinstance(item, StateNode) else StateNode(item)
            for item in value
        ))
    return Direct(StateNode(value))


@dataclass(frozen=True)
class Transition:
    """Transition symbol. Equality and hashing only consider the symbol."""
    symbol: Hashable

    def __str__(self) -> str:
        return str(self.symbol)


class IntermediateAutomaton:
    """Automaton keyed by optional source state and transition symbol."""

    def __init__(self):
        self._states: dict[Hashable, None] = {}
        self._choices: dict[Hashable, None] = {}
        self._delta: dict[Hashable | None, dict[Transition, Node]] = {}

    def __repr__(self) -> str:
        return (
            f"IntermediateAutomaton(states={len(self._states)}, "
            f"choices={len(self._choices)}, sources={len(self._delta)})"
        )

    @property
    def states(self) -> list:
        return list(self._states)

    @property
    def choices(self) -> list:
        return list(self._choices)

    @property
    def delta(self) -> dict[Hashable | None, dict[Transition, Node]]:
        return {source: dict(transitions) for source, transitions in self._delta.items()}

    def add_state(self, state: Hashable) -> bool:
        """Add a state. Returns True if it was not present yet."""
        if state in self._states:
            return False
        self._states[state] = None
        return True

    def add_choice(self, choice: Hashable) -> bool:
        """Mark a state as a choice. Returns True if it was not marked yet."""
        if choice in self._choices:
            return False
        self._choices[choice] = None
        return True

    def add_transition(self, source: Hashable | None, transition: Any, destination: Any) -> None:
        """Set the destination for `(source, transition)`.

        A destination already stored for the same source and symbol is
        replaced.

        Args:
            source: Source state, None for the initial pseudo-state
            transition: `Transition` or raw symbol
            destination: `Node` or any value accepted by `as_node`
        """
        if not isinstance(transition, Transition):
            transition = Transition(transition)
        node = as_node(destination)

        transitions = self._delta.setdefault(source, {})
        if transition in transitions:
            logger.debug(f"Replacing destination of ({source}, {transition})")
        transitions[transition] = node

    def transitions(self) -> Iterator[tuple[Hashable | None, Transition, Node]]:
        """Iterate `(source, transition, node)` triples in insertion order."""
        for source, transitions in self._delta.items():
            for transition, node in transitions.items():
                yield source, transition, node

    def extend(self, triples: Iterable[tuple[Hashable | None, Any, Any]]) -> None:
        """Add several `(source, transition, destination)` triples."""
        for source, transition, destination in triples:
            self.add_transition(source, transition, destination)
