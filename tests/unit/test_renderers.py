"""Unit tests for the DOT, PlantUML and Mermaid renderers."""

import logging

import pytest

from stategraph.automata import NFA, IntermediateAutomaton, StateNode, Transition
from stategraph.config import RenderConfig
from stategraph.errors import MalformedAutomatonError
from stategraph.export import (
    DiagramSpec,
    DotRenderer,
    EdgeSpec,
    MermaidRenderer,
    PlantUmlRenderer,
    PseudoState,
    to_diagram_spec,
)
from stategraph.export.dot import quote
from stategraph.export.framework import safe_ids

DOT_SPECIAL = 'label="", fillcolor=black, fixedsize=true, height=0.25, style=filled'


class TestDotRenderer:
    """Test Graphviz output."""

    def test_edge_list_automaton(self, abc_dfa):
        text = DotRenderer().render(to_diagram_spec(abc_dfa))
        assert text == (
            "digraph Automata {\n"
            '  graph [pad="0.25", nodesep="0.75", ranksep="1"];\n'
            '  _initial_0 [label="", shape="plaintext"];\n'
            '  _initial_0 -> A [label=""];\n'
            '  C [style="bold"];\n'
            '  C -> C [label="", style=dashed];\n'
            "  A -> B [label=x];\n"
            "  B -> C [label=y];\n"
            "}\n"
        )

    def test_labeled_markers(self):
        nfa = NFA()
        nfa.add_initial_state("A", "start", "boot")
        nfa.add_final_state("A", "done")
        text = DotRenderer().render(to_diagram_spec(nfa))
        assert "_initial_0 -> A [label=start];" in text
        assert "_initial_1 -> A [label=boot];" in text
        assert "A -> A [label=done, style=dashed];" in text

    def test_nfa_expands_destinations(self):
        nfa = NFA()
        nfa.add_transition(Transition.of("A", "B", "x"))
        nfa.add_transition(Transition.of("A", "C", "x"))
        text = DotRenderer().render(to_diagram_spec(nfa))
        assert "A -> B [label=x];" in text
        assert "A -> C [label=x];" in text

    def test_intermediate_automaton(self, decision_automaton):
        text = DotRenderer().render(to_diagram_spec(decision_automaton))
        assert text == (
            "digraph Automata {\n"
            '  graph [pad="0.25", nodesep="0.75", ranksep="1"];\n'
            f"  _initial_ [{DOT_SPECIAL}, shape=circle];\n"
            "  S [shape=diamond];\n"
            "  _initial_ -> Init [label=new];\n"
            "  A -> S [label=check];\n"
            "  S -> T;\n"
            "  S -> _final_ [label=timeout];\n"
            "  T -> _final_ [label=stop];\n"
            f"  _final_ [{DOT_SPECIAL}, shape=doublecircle];\n"
            "}\n"
        )

    def test_decision_branches_hide_symbol(self):
        automaton = IntermediateAutomaton()
        automaton.add_choice("S")
        automaton.add_transition("S", "go", [StateNode("T"), StateNode.labeled(None, "timeout")])
        text = DotRenderer().render(to_diagram_spec(automaton))

        assert "  S -> T;\n" in text
        assert "  S -> _final_ [label=timeout];\n" in text
        assert "go" not in text

    def test_start_marker_first_and_end_marker_last(self, decision_automaton):
        lines = DotRenderer().render(to_diagram_spec(decision_automaton)).splitlines()
        assert lines[2].startswith("  _initial_ [")
        assert lines[-2].startswith("  _final_ [")

    def test_choice_declared_before_edges(self, decision_automaton):
        text = DotRenderer().render(to_diagram_spec(decision_automaton))
        assert text.index("S [shape=diamond];") < text.index("->")

    def test_graph_attributes_from_config(self, abc_dfa):
        config = RenderConfig(graph_name="Drone", pad=0.5, nodesep=1, ranksep=2.5)
        text = DotRenderer(config).render(to_diagram_spec(abc_dfa, title="Drone"))
        assert text.startswith("digraph Drone {\n")
        assert 'graph [pad="0.5", nodesep="1", ranksep="2.5"];' in text

    def test_malformed_start_edge(self):
        automaton = IntermediateAutomaton()
        automaton.add_transition(None, "new", None)
        with pytest.raises(MalformedAutomatonError):
            DotRenderer().render(to_diagram_spec(automaton))


class TestDotQuoting:
    """Test DOT identifier quoting."""

    @pytest.mark.parametrize("text", ["A", "_state_1", "42", "-1.5", ".5"])
    def test_plain_ids_unquoted(self, text):
        assert quote(text) == text

    @pytest.mark.parametrize("text,expected", [
        ("", '""'),
        ("two words", '"two words"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("node", '"node"'),
        ("Graph", '"Graph"'),
    ])
    def test_quoted(self, text, expected):
        assert quote(text) == expected

    def test_labels_with_spaces(self):
        spec = DiagramSpec(edges=[EdgeSpec("A", "B", "on click")])
        assert 'A -> B [label="on click"];' in DotRenderer().render(spec)


class TestPlantUmlRenderer:
    """Test PlantUML output."""

    def test_edge_list_automaton(self, abc_dfa):
        text = PlantUmlRenderer().render(to_diagram_spec(abc_dfa))
        assert text == (
            "@startuml\n"
            "hide empty description\n"
            "state A\n"
            "state B\n"
            "state C\n"
            "[*] --> A\n"
            "C --> [*]\n"
            "A --> B : x\n"
            "B --> C : y\n"
            "@enduml\n"
        )

    def test_intermediate_automaton(self, decision_automaton):
        text = PlantUmlRenderer().render(to_diagram_spec(decision_automaton))
        assert text == (
            "@startuml\n"
            "hide empty description\n"
            "state S <<choice>>\n"
            "state A\n"
            "state T\n"
            "[*] --> Init : new\n"
            "A --> S : check\n"
            "S --> T\n"
            "S --> [*] : timeout\n"
            "T --> [*] : stop\n"
            "@enduml\n"
        )

    def test_labeled_markers(self):
        nfa = NFA()
        nfa.add_initial_state("A", "start")
        nfa.add_final_state("B", "done")
        text = PlantUmlRenderer().render(to_diagram_spec(nfa))
        assert "[*] --> A : start\n" in text
        assert "B --> [*] : done\n" in text

    def test_unsafe_names(self):
        spec = DiagramSpec(states=["my state"], edges=[EdgeSpec("my state", "next-one", "go")])
        text = PlantUmlRenderer().render(spec)
        assert "state my_state\n" in text
        assert "my_state --> next_one : go\n" in text

    def test_colliding_names_stay_distinct(self, caplog):
        spec = DiagramSpec(states=["a b", "a-b", "a_b"], edges=[EdgeSpec("a b", "a_b", "go")])
        with caplog.at_level(logging.WARNING):
            text = PlantUmlRenderer().render(spec)

        assert "state a_b\nstate a_b_2\nstate a_b_3\n" in text
        assert "a_b --> a_b_3 : go\n" in text
        assert "already in use" in caplog.text


class TestSafeIds:
    """Test node id allocation for PlantUML and Mermaid."""

    def test_safe_names_unchanged(self):
        spec = DiagramSpec(states=["A", "B_1"])
        assert safe_ids(spec) == {"A": "A", "B_1": "B_1"}

    def test_edge_endpoints_are_included(self):
        spec = DiagramSpec(edges=[EdgeSpec(PseudoState.START, "x y"), EdgeSpec("x y", PseudoState.END)])
        assert safe_ids(spec) == {"x y": "x_y"}

    def test_suffix_skips_taken_ids(self):
        spec = DiagramSpec(states=["a_b_2", "a_b", "a b"])
        assert safe_ids(spec) == {"a_b_2": "a_b_2", "a_b": "a_b", "a b": "a_b_3"}


class TestMermaidRenderer:
    """Test Mermaid output."""

    def test_edge_list_automaton(self, abc_dfa):
        text = MermaidRenderer().render(to_diagram_spec(abc_dfa))
        assert text == (
            "stateDiagram-v2\n"
            "    A\n"
            "    B\n"
            "    C\n"
            "    [*] --> A\n"
            "    C --> [*]\n"
            "    A --> B : x\n"
            "    B --> C : y\n"
        )

    def test_intermediate_automaton(self, decision_automaton):
        text = MermaidRenderer().render(to_diagram_spec(decision_automaton))
        assert text == (
            "stateDiagram-v2\n"
            "    state S <<choice>>\n"
            "    A\n"
            "    T\n"
            "    [*] --> Init : new\n"
            "    A --> S : check\n"
            "    S --> T\n"
            "    S --> [*] : timeout\n"
            "    T --> [*] : stop\n"
        )

    def test_start_edge_uses_override(self):
        automaton = IntermediateAutomaton()
        automaton.add_state("A")
        automaton.add_transition(None, "new", StateNode.labeled("A", "Init"))
        text = MermaidRenderer().render(to_diagram_spec(automaton))
        assert "[*] --> Init : new" in text
        assert "[*] --> A" not in text

    def test_colliding_names_stay_distinct(self):
        spec = DiagramSpec(states=["a b", "a_b"], edges=[EdgeSpec("a_b", "a b")])
        text = MermaidRenderer().render(spec)
        assert "    a_b\n    a_b_2\n" in text
        assert "    a_b_2 --> a_b\n" in text


class TestRendererMetadata:
    """Test format names and extensions."""

    @pytest.mark.parametrize("renderer,name,extension", [
        (DotRenderer(), "dot", ".dot"),
        (PlantUmlRenderer(), "plantuml", ".puml"),
        (MermaidRenderer(), "mermaid", ".mmd"),
    ])
    def test_metadata(self, renderer, name, extension):
        assert renderer.format_name == name
        assert renderer.get_file_extension() == extension
