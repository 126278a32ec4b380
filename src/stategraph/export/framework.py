"""Diagram export framework: renderer interface and exporter registry."""

import logging
import re
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path

from ..config import StategraphConfig, create_default_config
from .convert import to_diagram_spec
from .models import DiagramSpec
from .writer import write_file

logger = logging.getLogger(__name__)

_UNSAFE_ID_CHARS = re.compile(r"[^a-zA-Z0-9_]")


def safe_ids(spec: DiagramSpec) -> dict[str, str]:
    """Map every state name of `spec` to an identifier-safe node id.

    Characters outside `[a-zA-Z0-9_]` become `_`. A name whose id is already
    taken by another name gets a numeric suffix (`a_b`, `a_b_2`, ...).
    """
    ids: dict[str, str] = {}
    taken: set[str] = set()
    for name in spec.node_names():
        base = _UNSAFE_ID_CHARS.sub("_", name)
        candidate = base
        suffix = 2
        while candidate in taken:
            candidate = f"{base}_{suffix}"
            suffix += 1
        if candidate != base:
            logger.warning(f"Node '{name}' drawn as '{candidate}', '{base}' is already in use")
        ids[name] = candidate
        taken.add(candidate)
    return ids


class DiagramRenderer(ABC):
    """Abstract base class for diagram renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the output format."""
        pass

    @abstractmethod
    def render(self, spec: DiagramSpec) -> str:
        """Render diagram specification to string format."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass


class DiagramExporter:
    """Converts automata to diagrams with a chosen renderer."""

    def __init__(self, config: StategraphConfig | None = None, register_defaults: bool = True):
        self.config = config or create_default_config()
        self.renderers: dict[str, DiagramRenderer] = {}
        if register_defaults:
            self._register_default_renderers()

    def _register_default_renderers(self) -> None:
        # Imported here: renderer modules import this one for the base class
        from .dot import DotRenderer
        from .mermaid import MermaidRenderer
        from .plantuml import PlantUmlRenderer

        self.add_renderer(DotRenderer(self.config.render))
        self.add_renderer(PlantUmlRenderer())
        self.add_renderer(MermaidRenderer())

    def add_renderer(self, renderer: DiagramRenderer) -> None:
        """Add a diagram renderer."""
        self.renderers[renderer.format_name] = renderer

    def get_renderer(self, format_name: str | Enum | None = None) -> DiagramRenderer:
        """Look up a renderer, defaulting to the configured format.

        Raises:
            ValueError: If no renderer is registered for the format
        """
        if format_name is None:
            format_name = self.config.render.default_format
        if isinstance(format_name, Enum):
            format_name = format_name.value

        if format_name not in self.renderers:
            available = list(self.renderers.keys())
            raise ValueError(f"Unknown format '{format_name}'. Available: {available}")
        return self.renderers[format_name]

    def build_spec(self, automaton) -> DiagramSpec:
        """Convert an automaton into a diagram specification."""
        return to_diagram_spec(automaton, title=self.config.render.graph_name)

    def render(self, automaton, format_name: str | Enum | None = None) -> str:
        """Render an automaton (or a prepared `DiagramSpec`) to diagram text.

        Args:
            automaton: Edge-list automaton, intermediate automaton or DiagramSpec
            format_name: Output format ('dot', 'plantuml', 'mermaid'),
                defaults to the configured format

        Returns:
            Rendered diagram as string
        """
        renderer = self.get_renderer(format_name)
        spec = self.build_spec(automaton)
        logger.info(f"Rendering diagram with {renderer.format_name} renderer")
        return renderer.render(spec)

    def export(self, automaton, path: str | Path, format_name: str | Enum | None = None) -> Path:
        """Render an automaton and write the text to `path`.

        Raises:
            ExportWriteError: If the file cannot be written
        """
        return write_file(self.render(automaton, format_name), path)
