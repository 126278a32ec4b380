"""Diagram export for automata.

Supports Graphviz (DOT), PlantUML and Mermaid state diagrams. Both automaton
representations are first converted to a `DiagramSpec`, which the renderers
turn into text.
"""

from .convert import from_finite_automaton, from_intermediate, to_diagram_spec
from .dot import DotRenderer
from .framework import DiagramExporter, DiagramRenderer
from .interpret import interpret_transition
from .mermaid import MermaidRenderer
from .models import DiagramSpec, EdgeSpec, MarkerSpec, PseudoState
from .plantuml import PlantUmlRenderer
from .writer import write_file

__all__ = [
    "DiagramExporter",
    "DiagramRenderer",
    "DiagramSpec",
    "EdgeSpec",
    "MarkerSpec",
    "PseudoState",
    "DotRenderer",
    "PlantUmlRenderer",
    "MermaidRenderer",
    "from_finite_automaton",
    "from_intermediate",
    "to_diagram_spec",
    "interpret_transition",
    "write_file",
]
