"""Interpretation of intermediate transitions as diagram edges.

Every renderer draws intermediate automata through `interpret_transition`,
so the rules for pseudo-states, decisions and label overrides live in one
place:

- a direct destination draws one edge labeled with the transition symbol,
  pointing at the label override when there is one, else at the state, or at
  the end pseudo-state when the state is absent
- a decision draws one edge per branch to the branch state (or the end
  pseudo-state); the edge text is the branch label override and the
  transition symbol is never shown
- from the start pseudo-state only a direct destination to a real state is
  valid
"""

from collections.abc import Hashable

from ..automata.intermediate import Decision, Direct, Node, StateNode, Transition
from ..errors import MalformedAutomatonError
from .models import EdgeSpec, Endpoint, PseudoState


def _direct_target(node: StateNode) -> Endpoint:
    if node.is_terminal:
        return PseudoState.END
    if node.label is not None:
        return node.label
    return str(node.state)


def _branch_target(node: StateNode) -> Endpoint:
    if node.is_terminal:
        return PseudoState.END
    return str(node.state)


def interpret_transition(
    source: Hashable | None, transition: Transition, node: Node
) -> list[EdgeSpec]:
    """Turn one `(source, transition, node)` entry into diagram edges.

    Raises:
        MalformedAutomatonError: If the start pseudo-state leads to the end
            pseudo-state or to a decision
        TypeError: If `node` is neither `Direct` nor `Decision`
    """
    symbol = str(transition)

    if source is None:
        if isinstance(node, Direct):
            if node.node.is_terminal:
                raise MalformedAutomatonError(
                    f"invalid transition '{symbol}': start pseudo-state -> end pseudo-state"
                )
            return [EdgeSpec(PseudoState.START, _direct_target(node.node), symbol)]
        if isinstance(node, Decision):
            raise MalformedAutomatonError(
                f"invalid transition '{symbol}': start pseudo-state -> decision"
            )
        raise TypeError(f"Unknown destination node type: {type(node).__name__}")

    origin = str(source)
    if isinstance(node, Direct):
        return [EdgeSpec(origin, _direct_target(node.node), symbol)]
    if isinstance(node, Decision):
        return [
            EdgeSpec(origin, _branch_target(branch), branch.label)
            for branch in node.branches
        ]
    raise TypeError(f"Unknown destination node type: {type(node).__name__}")
