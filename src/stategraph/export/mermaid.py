"""Mermaid state diagram renderer."""

import logging

from .framework import DiagramRenderer, safe_ids
from .models import DiagramSpec, EdgeSpec, Endpoint, PseudoState

logger = logging.getLogger(__name__)


class MermaidRenderer(DiagramRenderer):
    """Mermaid `stateDiagram-v2` renderer."""

    @property
    def format_name(self) -> str:
        return "mermaid"

    def get_file_extension(self) -> str:
        return ".mmd"

    def render(self, spec: DiagramSpec) -> str:
        """Render diagram specification as a Mermaid state diagram."""
        ids = safe_ids(spec)
        lines = ["stateDiagram-v2"]

        # Choices must be declared before they appear in an edge
        for choice in spec.choices:
            lines.append(f"    state {ids[choice]} <<choice>>")
        for state in spec.plain_states:
            lines.append(f"    {ids[state]}")

        for marker in spec.initial_markers:
            lines.append(f"    {self._render_edge(EdgeSpec(PseudoState.START, marker.state, marker.label), ids)}")
        for marker in spec.final_markers:
            lines.append(f"    {self._render_edge(EdgeSpec(marker.state, PseudoState.END, marker.label), ids)}")

        for edge in spec.edges:
            lines.append(f"    {self._render_edge(edge, ids)}")

        logger.debug(f"Rendered Mermaid diagram with {len(spec.edges)} edges")
        return "\n".join(lines) + "\n"

    def _render_edge(self, edge: EdgeSpec, ids: dict[str, str]) -> str:
        line = f"{self._endpoint(edge.source, ids)} --> {self._endpoint(edge.destination, ids)}"
        if edge.label:
            line += f" : {self._escape_label(edge.label)}"
        return line

    def _endpoint(self, endpoint: Endpoint, ids: dict[str, str]) -> str:
        if isinstance(endpoint, PseudoState):
            return "[*]"
        return ids[endpoint]

    def _escape_label(self, label: str) -> str:
        """Escape label for Mermaid rendering."""
        # A line break ends the transition statement
        return label.replace("\n", " ").replace(";", ",")
