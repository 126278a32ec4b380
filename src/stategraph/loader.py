"""Automaton documents: JSON descriptions of automata, validated with Pydantic.

Edge-list automata:

```json
{
  "kind": "dfa",
  "states": ["A", "B", "C"],
  "initial": ["A"],
  "final": [{"state": "C", "labels": ["done"]}],
  "transitions": [
    {"source": "A", "symbol": "x", "destination": "B"},
    {"source": "B", "symbol": "y", "destination": "C"}
  ]
}
```

Intermediate automata (a null source is the initial pseudo-state, a null
destination the terminal one):

```json
{
  "kind": "intermediate",
  "states": ["A", "S", "T"],
  "choices": ["S"],
  "transitions": [
    {"source": null, "symbol": "new", "destination": {"state": "A", "label": "Init"}},
    {"source": "S", "symbol": "go", "destination": {"decision": [
      {"state": "T"}, {"state": null, "label": "timeout"}
    ]}}
  ]
}
```
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .automata.edge_list import DFA, NFA, FiniteAutomaton
from .automata.intermediate import Decision, IntermediateAutomaton, StateNode
from .automata.primitives import Transition
from .errors import AutomatonDocumentError

logger = logging.getLogger(__name__)

StateId = Union[str, int]


class MarkerEntry(BaseModel):
    """Initial or final state with optional marker labels."""
    state: StateId
    labels: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class EdgeEntry(BaseModel):
    """Edge-list transition."""
    source: StateId
    symbol: StateId
    destination: StateId

    model_config = ConfigDict(extra="forbid")


class EdgeListDocument(BaseModel):
    """Deterministic or nondeterministic edge-list automaton."""
    kind: Literal["dfa", "nfa"]
    states: list[StateId] = Field(default_factory=list)
    initial: list[Union[StateId, MarkerEntry]] = Field(default_factory=list)
    final: list[Union[StateId, MarkerEntry]] = Field(default_factory=list)
    transitions: list[EdgeEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class BranchEntry(BaseModel):
    """Destination state with an optional label override."""
    state: StateId | None = None
    label: str | None = None

    model_config = ConfigDict(extra="forbid")


class DecisionEntry(BaseModel):
    """Ordered decision branches."""
    decision: list[BranchEntry]

    model_config = ConfigDict(extra="forbid")


class IntermediateEdgeEntry(BaseModel):
    """Intermediate transition."""
    source: StateId | None = None
    symbol: StateId
    destination: Union[StateId, BranchEntry, DecisionEntry, None] = None

    model_config = ConfigDict(extra="forbid")


class IntermediateDocument(BaseModel):
    """Intermediate automaton with choices and decisions."""
    kind: Literal["intermediate"]
    states: list[StateId] = Field(default_factory=list)
    choices: list[StateId] = Field(default_factory=list)
    transitions: list[IntermediateEdgeEntry] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


AutomatonDocument = Annotated[
    Union[EdgeListDocument, IntermediateDocument], Field(discriminator="kind")
]

_document_adapter = TypeAdapter(AutomatonDocument)


def _build_edge_list(document: EdgeListDocument) -> FiniteAutomaton:
    automaton = DFA() if document.kind == "dfa" else NFA()
    for state in document.states:
        automaton.add_state(state)
    for entry in document.initial:
        if isinstance(entry, MarkerEntry):
            automaton.add_initial_state(entry.state, *entry.labels)
        else:
            automaton.add_initial_state(entry)
    for entry in document.final:
        if isinstance(entry, MarkerEntry):
            automaton.add_final_state(entry.state, *entry.labels)
        else:
            automaton.add_final_state(entry)
    for edge in document.transitions:
        automaton.add_transition(Transition.of(edge.source, edge.destination, edge.symbol))
    return automaton


def _destination(value):
    if isinstance(value, DecisionEntry):
        return Decision(tuple(
            StateNode.labeled(branch.state, branch.label) for branch in value.decision
        ))
    if isinstance(value, BranchEntry):
        return StateNode.labeled(value.state, value.label)
    return value


def _build_intermediate(document: IntermediateDocument) -> IntermediateAutomaton:
    automaton = IntermediateAutomaton()
    for state in document.states:
        automaton.add_state(state)
    for choice in document.choices:
        automaton.add_choice(choice)
    automaton.extend(
        (edge.source, edge.symbol, _destination(edge.destination))
        for edge in document.transitions
    )
    return automaton


def parse_automaton(data: dict) -> FiniteAutomaton | IntermediateAutomaton:
    """Build an automaton from a decoded automaton document.

    Raises:
        AutomatonDocumentError: If the document does not match the schema
    """
    try:
        document = _document_adapter.validate_python(data)
    except ValidationError as e:
        raise AutomatonDocumentError(f"Invalid automaton document: {e}") from e

    if isinstance(document, IntermediateDocument):
        automaton = _build_intermediate(document)
    else:
        automaton = _build_edge_list(document)
    logger.debug(f"Parsed {automaton!r}")
    return automaton


def load_automaton(path: str | Path) -> FiniteAutomaton | IntermediateAutomaton:
    """Load an automaton document from a JSON file.

    Raises:
        AutomatonDocumentError: If the file is missing, not valid JSON or
            does not match the schema
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise AutomatonDocumentError(f"Automaton document not found: {path}") from e
    except json.JSONDecodeError as e:
        raise AutomatonDocumentError(f"Invalid JSON in automaton document {path}: {e}") from e

    logger.info(f"Loading automaton document {path}")
    return parse_automaton(data)
