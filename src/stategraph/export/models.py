"""Format-neutral diagram models shared by all renderers."""

from dataclasses import dataclass, field
from enum import Enum


class PseudoState(Enum):
    """Synthetic diagram endpoints that are not automaton states."""
    START = "start"
    END = "end"


Endpoint = str | PseudoState


@dataclass
class EdgeSpec:
    """A directed diagram edge, optionally labeled."""
    source: Endpoint
    destination: Endpoint
    label: str | None = None


@dataclass
class MarkerSpec:
    """Initial or final marker attached to a state of an edge-list automaton."""
    state: str
    label: str | None = None


@dataclass
class DiagramSpec:
    """Complete diagram description, ready for rendering.

    `pseudo_states` asks renderers that draw explicit start and end nodes to
    declare them: the start node before anything else and the end node last.
    """
    title: str = "Automata"
    choices: list[str] = field(default_factory=list)
    states: list[str] = field(default_factory=list)
    initial_markers: list[MarkerSpec] = field(default_factory=list)
    final_markers: list[MarkerSpec] = field(default_factory=list)
    edges: list[EdgeSpec] = field(default_factory=list)
    pseudo_states: bool = False

    def add_choice(self, name: str) -> None:
        if name not in self.choices:
            self.choices.append(name)

    def add_state(self, name: str) -> None:
        if name not in self.states:
            self.states.append(name)

    def add_edge(self, edge: EdgeSpec) -> None:
        self.edges.append(edge)

    def node_names(self) -> list[str]:
        """All state names in declaration order: choices, states, markers, then edges."""
        names: dict[str, None] = {}
        for name in self.choices + self.states:
            names.setdefault(name, None)
        for marker in self.initial_markers + self.final_markers:
            names.setdefault(marker.state, None)
        for edge in self.edges:
            for endpoint in (edge.source, edge.destination):
                if not isinstance(endpoint, PseudoState):
                    names.setdefault(endpoint, None)
        return list(names)

    @property
    def plain_states(self) -> list[str]:
        """States that are not also declared as choices."""
        return [state for state in self.states if state not in self.choices]
