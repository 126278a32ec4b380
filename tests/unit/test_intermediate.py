"""Unit tests for the intermediate automaton model."""

import pytest

from stategraph.automata.intermediate import (
    Decision,
    Direct,
    IntermediateAutomaton,
    Metadata,
    StateNode,
    Transition,
    as_node,
)


class TestStateNode:
    """Test destination state nodes."""

    def test_defaults(self):
        node = StateNode("A")
        assert node.state == "A"
        assert node.label is None
        assert node.is_terminal is False

    def test_terminal(self):
        assert StateNode(None).is_terminal is True

    def test_labeled(self):
        node = StateNode.labeled("A", "Init")
        assert node.metadata == Metadata(transition_label="Init")
        assert node.label == "Init"


class TestAsNode:
    """Test normalization of destination values."""

    def test_plain_state(self):
        assert as_node("A") == Direct(StateNode("A"))

    def test_none_is_terminal(self):
        assert as_node(None) == Direct(StateNode(None))

    def test_state_node(self):
        node = StateNode.labeled("A", "x")
        assert as_node(node) == Direct(node)

    def test_list_is_decision(self):
        node = as_node(["A", StateNode.labeled(None, "timeout")])
        assert isinstance(node, Decision)
        assert node.branches == (StateNode("A"), StateNode.labeled(None, "timeout"))

    def test_tuple_is_a_state(self):
        assert as_node(("B", 2)) == Direct(StateNode(("B", 2)))

    def test_existing_node_unchanged(self):
        decision = Decision((StateNode("A"),))
        assert as_node(decision) is decision

    def test_decision_branches_become_tuple(self):
        decision = Decision([StateNode("A"), StateNode("B")])
        assert decision.branches == (StateNode("A"), StateNode("B"))


class TestTransition:
    """Test intermediate transitions."""

    def test_equality_over_symbol(self):
        assert Transition("go") == Transition("go")
        assert hash(Transition("go")) == hash(Transition("go"))
        assert Transition("go") != Transition("stop")

    def test_str(self):
        assert str(Transition("go")) == "go"


class TestIntermediateAutomaton:
    """Test intermediate automaton construction."""

    def test_add_state_reports_novelty(self):
        automaton = IntermediateAutomaton()
        assert automaton.add_state("A") is True
        assert automaton.add_state("A") is False
        assert automaton.states == ["A"]

    def test_add_choice_reports_novelty(self):
        automaton = IntermediateAutomaton()
        assert automaton.add_choice("S") is True
        assert automaton.add_choice("S") is False
        assert automaton.choices == ["S"]

    def test_add_transition_accepts_raw_values(self):
        automaton = IntermediateAutomaton()
        automaton.add_transition("A", "go", "B")
        assert automaton.delta == {"A": {Transition("go"): Direct(StateNode("B"))}}

    def test_add_transition_replaces_same_key(self):
        automaton = IntermediateAutomaton()
        automaton.add_transition("A", Transition("go"), "B")
        automaton.add_transition("A", Transition("go"), "C")
        assert list(automaton.transitions()) == [
            ("A", Transition("go"), Direct(StateNode("C")))
        ]

    def test_different_symbols_coexist(self):
        automaton = IntermediateAutomaton()
        automaton.add_transition("A", "go", "B")
        automaton.add_transition("A", "stop", None)
        assert len(list(automaton.transitions())) == 2

    def test_none_source_is_initial(self):
        automaton = IntermediateAutomaton()
        automaton.add_transition(None, "new", "A")
        assert None in automaton.delta

    def test_transitions_in_insertion_order(self):
        automaton = IntermediateAutomaton()
        automaton.extend([
            (None, "new", "A"),
            ("A", "go", ["B", None]),
            ("B", "stop", None),
        ])
        sources = [source for source, _, _ in automaton.transitions()]
        assert sources == [None, "A", "B"]

    def test_delta_is_a_copy(self):
        automaton = IntermediateAutomaton()
        automaton.add_transition("A", "go", "B")
        automaton.delta["A"].clear()
        assert len(list(automaton.transitions())) == 1

    def test_tuple_state_identifiers(self):
        automaton = IntermediateAutomaton()
        automaton.add_transition(("A", 1), "go", ("B", 2))
        assert list(automaton.transitions()) == [
            (("A", 1), Transition("go"), Direct(StateNode(("B", 2))))
        ]

    @pytest.mark.parametrize("destination", ["B", None, ["B", "C"]])
    def test_destination_forms(self, destination):
        automaton = IntermediateAutomaton()
        automaton.add_transition("A", "go", destination)
        (_, _, node), = automaton.transitions()
        assert isinstance(node, (Direct, Decision))
