"""Automaton graph models.

Two representations are provided:

- edge-list automata (`DFA`, `NFA`) with explicit initial and final state sets,
  supporting reachability and productivity queries
- `IntermediateAutomaton`, which adds decision nodes and per-destination label
  overrides, for automata built from possibly-conditional transition
  declarations
"""

from .edge_list import (
    DFA,
    NFA,
    DeterministicFiniteAutomaton,
    FiniteAutomaton,
    NondeterministicFiniteAutomaton,
)
from .intermediate import (
    Decision,
    Direct,
    IntermediateAutomaton,
    Metadata,
    Node,
    StateNode,
    as_node,
)
from .intermediate import Transition as IntermediateTransition
from .primitives import State, Symbol, Transition

__all__ = [
    "DFA",
    "NFA",
    "DeterministicFiniteAutomaton",
    "NondeterministicFiniteAutomaton",
    "FiniteAutomaton",
    "State",
    "Symbol",
    "Transition",
    "IntermediateAutomaton",
    "IntermediateTransition",
    "Metadata",
    "Node",
    "StateNode",
    "Direct",
    "Decision",
    "as_node",
]
