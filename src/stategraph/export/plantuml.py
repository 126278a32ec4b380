"""PlantUML state diagram renderer."""

import logging

from .framework import DiagramRenderer, safe_ids
from .models import DiagramSpec, EdgeSpec, Endpoint, PseudoState

logger = logging.getLogger(__name__)

PSEUDO_NODE = "[*]"


class PlantUmlRenderer(DiagramRenderer):
    """PlantUML state diagram renderer.

    `[*]` stands for both the start and the end pseudo-state.
    """

    @property
    def format_name(self) -> str:
        return "plantuml"

    def get_file_extension(self) -> str:
        return ".puml"

    def render(self, spec: DiagramSpec) -> str:
        """Render diagram specification as a PlantUML state diagram."""
        ids = safe_ids(spec)
        lines = ["@startuml", "hide empty description"]

        for choice in spec.choices:
            lines.append(f"state {ids[choice]} <<choice>>")
        for state in spec.plain_states:
            lines.append(f"state {ids[state]}")

        for marker in spec.initial_markers:
            lines.append(self._render_edge(EdgeSpec(PseudoState.START, marker.state, marker.label), ids))
        for marker in spec.final_markers:
            lines.append(self._render_edge(EdgeSpec(marker.state, PseudoState.END, marker.label), ids))

        for edge in spec.edges:
            lines.append(self._render_edge(edge, ids))

        lines.append("@enduml")
        logger.debug(f"Rendered PlantUML diagram with {len(spec.edges)} edges")
        return "\n".join(lines) + "\n"

    def _render_edge(self, edge: EdgeSpec, ids: dict[str, str]) -> str:
        line = f"{self._endpoint(edge.source, ids)} --> {self._endpoint(edge.destination, ids)}"
        if edge.label:
            line += f" : {self._escape_label(edge.label)}"
        return line

    def _endpoint(self, endpoint: Endpoint, ids: dict[str, str]) -> str:
        if isinstance(endpoint, PseudoState):
            return PSEUDO_NODE
        return ids[endpoint]

    def _escape_label(self, label: str) -> str:
        return label.replace("\n", "\\n")
