"""stategraph - Finite-state automaton graphs and diagram exporters.

stategraph models automata as graphs, answers reachability and productivity
questions about them, and renders them as Graphviz, PlantUML or Mermaid text.
"""

__version__ = "0.1.0"
__author__ = "stategraph"
__description__ = "Finite-state automaton graphs rendered as textual diagrams"

from stategraph.automata import (
    DFA,
    NFA,
    Decision,
    Direct,
    IntermediateAutomaton,
    State,
    StateNode,
    Symbol,
)
from stategraph.config import StategraphConfig
from stategraph.export import DiagramExporter

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "DFA",
    "NFA",
    "Decision",
    "Direct",
    "DiagramExporter",
    "IntermediateAutomaton",
    "State",
    "StateNode",
    "StategraphConfig",
    "Symbol",
]
