"""Shared fixtures for stategraph tests."""

import pytest

from stategraph.automata import DFA, IntermediateAutomaton, StateNode, Transition


@pytest.fixture
def abc_dfa():
    """A -x-> B -y-> C with A initial and C final."""
    dfa = DFA()
    dfa.add_initial_state("A")
    dfa.add_state("B")
    dfa.add_final_state("C")
    dfa.add_transition(Transition.of("A", "B", "x"))
    dfa.add_transition(Transition.of("B", "C", "y"))
    return dfa


@pytest.fixture
def decision_automaton():
    """Choice S branching to T or to the terminal pseudo-state."""
    automaton = IntermediateAutomaton()
    automaton.add_state("A")
    automaton.add_state("S")
    automaton.add_state("T")
    automaton.add_choice("S")
    automaton.add_transition(None, "new", StateNode.labeled("A", "Init"))
    automaton.add_transition("A", "check", "S")
    automaton.add_transition("S", "go", [StateNode("T"), StateNode.labeled(None, "timeout")])
    automaton.add_transition("T", "stop", None)
    return automaton
