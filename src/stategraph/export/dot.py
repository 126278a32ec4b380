"""Graphviz DOT renderer."""

import logging
import re

from ..config import RenderConfig
from .framework import DiagramRenderer
from .models import DiagramSpec, EdgeSpec, Endpoint, PseudoState

logger = logging.getLogger(__name__)

INITIAL_NODE = "_initial_"
FINAL_NODE = "_final_"
SPECIAL_NODE_STYLE = 'label="", fillcolor=black, fixedsize=true, height=0.25, style=filled'

_PLAIN_ID = re.compile(r"^(?:[A-Za-z_][A-Za-z0-9_]*|-?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?))$")
_KEYWORDS = {"node", "edge", "graph", "digraph", "subgraph", "strict"}


def quote(text: str) -> str:
    """Quote a DOT identifier or label unless it is a plain ID or number."""
    if _PLAIN_ID.match(text) and text.lower() not in _KEYWORDS:
        return text
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class DotRenderer(DiagramRenderer):
    """Graphviz digraph renderer."""

    def __init__(self, config: RenderConfig | None = None):
        self.config = config or RenderConfig()

    @property
    def format_name(self) -> str:
        return "dot"

    def get_file_extension(self) -> str:
        return ".dot"

    def render(self, spec: DiagramSpec) -> str:
        """Render diagram specification as a Graphviz digraph."""
        lines = [f"digraph {quote(spec.title)} {{"]
        lines.append(
            f'  graph [pad="{self.config.pad:g}", nodesep="{self.config.nodesep:g}", '
            f'ranksep="{self.config.ranksep:g}"];'
        )

        # Start node goes first so layout places it first
        if spec.pseudo_states:
            lines.append(f"  {INITIAL_NODE} [{SPECIAL_NODE_STYLE}, shape=circle];")

        for choice in spec.choices:
            lines.append(f"  {quote(choice)} [shape=diamond];")

        for i, marker in enumerate(spec.initial_markers):
            lines.append(f'  {INITIAL_NODE}{i} [label="", shape="plaintext"];')
            lines.append(
                f"  {INITIAL_NODE}{i} -> {quote(marker.state)} [label={quote(marker.label or '')}];"
            )

        for marker in spec.final_markers:
            node = quote(marker.state)
            lines.append(f'  {node} [style="bold"];')
            lines.append(f"  {node} -> {node} [label={quote(marker.label or '')}, style=dashed];")

        for edge in spec.edges:
            lines.append(f"  {self._render_edge(edge)}")

        # End node goes last so layout places it last
        if spec.pseudo_states:
            lines.append(f"  {FINAL_NODE} [{SPECIAL_NODE_STYLE}, shape=doublecircle];")

        lines.append("}")
        logger.debug(f"Rendered DOT diagram with {len(spec.edges)} edges")
        return "\n".join(lines) + "\n"

    def _render_edge(self, edge: EdgeSpec) -> str:
        source = self._endpoint(edge.source)
        destination = self._endpoint(edge.destination)
        if edge.label is None:
            return f"{source} -> {destination};"
        return f"{source} -> {destination} [label={quote(edge.label)}];"

    def _endpoint(self, endpoint: Endpoint) -> str:
        if endpoint is PseudoState.START:
            return INITIAL_NODE
        if endpoint is PseudoState.END:
            return FINAL_NODE
        return quote(endpoint)
