"""Conversion of automata into `DiagramSpec`s."""

import logging

from ..automata.edge_list import FiniteAutomaton
from ..automata.intermediate import IntermediateAutomaton
from .interpret import interpret_transition
from .models import DiagramSpec, EdgeSpec, MarkerSpec

logger = logging.getLogger(__name__)


def _markers(labels: dict) -> list[MarkerSpec]:
    markers = []
    for state, state_labels in labels.items():
        if not state_labels:
            markers.append(MarkerSpec(str(state)))
        for label in state_labels:
            markers.append(MarkerSpec(str(state), label))
    return markers


def from_finite_automaton(automaton: FiniteAutomaton, title: str = "Automata") -> DiagramSpec:
    """Build a diagram from an edge-list automaton.

    Every initial and final state gets one marker per label (one unlabeled
    marker if it has none). Nondeterministic transitions expand to one edge
    per destination.
    """
    spec = DiagramSpec(title=title)
    for state in automaton.states:
        spec.add_state(str(state))

    spec.initial_markers = _markers(automaton.initial_labels)
    spec.final_markers = _markers(automaton.final_labels)

    for source, transitions in automaton.delta().items():
        for symbol, destinations in transitions.items():
            if not isinstance(destinations, list):
                destinations = [destinations]
            for destination in destinations:
                spec.add_edge(EdgeSpec(str(source), str(destination), str(symbol)))

    logger.info(
        f"Converted {type(automaton).__name__} with {len(spec.states)} states "
        f"and {len(spec.edges)} edges"
    )
    return spec


def from_intermediate(automaton: IntermediateAutomaton, title: str = "Automata") -> DiagramSpec:
    """Build a diagram from an intermediate automaton.

    Raises:
        MalformedAutomatonError: If a start edge leads to the end
            pseudo-state or to a decision
    """
    spec = DiagramSpec(title=title, pseudo_states=True)
    for choice in automaton.choices:
        spec.add_choice(str(choice))
    for state in automaton.states:
        spec.add_state(str(state))

    for source, transition, node in automaton.transitions():
        for edge in interpret_transition(source, transition, node):
            spec.add_edge(edge)

    logger.info(
        f"Converted IntermediateAutomaton with {len(spec.states)} states, "
        f"{len(spec.choices)} choices and {len(spec.edges)} edges"
    )
    return spec


def to_diagram_spec(automaton, title: str = "Automata") -> DiagramSpec:
    """Build a diagram from either automaton representation.

    A `DiagramSpec` is returned unchanged.
    """
    if isinstance(automaton, DiagramSpec):
        return automaton
    if isinstance(automaton, IntermediateAutomaton):
        return from_intermediate(automaton, title)
    if isinstance(automaton, FiniteAutomaton):
        return from_finite_automaton(automaton, title)
    raise TypeError(f"Cannot build a diagram from {type(automaton).__name__}")
