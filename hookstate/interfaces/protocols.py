# hookstate/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from hookstate.interfaces.types import EventID, StateID


@runtime_checkable
class WorkflowSpec(Protocol):
    """
    Workflow introspection protocol for type checking.

    Properties / Methods:
        state_names: The names of every declared state.
        events_for(state): Mapping of the events leaving a state to whatever
            the engine associates with them (usually the target state).

    Runtime Invariants:
    - The set of declared states does not change once the host class is
      defined; hosts cache the event set derived from it.

    Error Handling:
    - events_for() returns an empty mapping (or None) for terminal states
      rather than raising.
    """

    @property
    def state_names(self) -> Iterable[StateID]:
        """Names of all declared states, in declaration order."""
        ...

    def events_for(self, state: StateID) -> Mapping[EventID, Any]:
        """Return the events declared on the given state."""
        ...
