# hookstate/plugins/transitions_engine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from transitions import EventData, Machine

from hookstate.interfaces.types import EventID, StateID

logger = logging.getLogger(__name__)

_TRANSITION_FIELDS = ("trigger", "source", "dest", "conditions", "unless", "before", "after", "prepare")

TransitionSpec = Union[Mapping[str, Any], Sequence[Any]]


def _state_name(state: Any) -> StateID:
    if isinstance(state, (str, Enum)):
        return state
    if isinstance(state, Mapping):
        return state["name"]
    return state.name


def _as_dict(transition: TransitionSpec) -> Dict[str, Any]:
    if isinstance(transition, Mapping):
        return dict(transition)
    return dict(zip(_TRANSITION_FIELDS, transition))


class WorkflowDefinition:
    """
    Declarative workflow backed by the ``transitions`` library.

    States and transitions use the vocabulary of ``transitions.Machine``.
    A definition is declared once on the host class (it satisfies
    WorkflowSpec, so the hook mixins can check event names against it) and
    bound to each host instance, which yields the engine driving that
    instance.

    Example:
        class Door(Callbackable):
            workflow = WorkflowDefinition(
                states=["open", "closed"],
                transitions=[{"trigger": "close", "source": "open", "dest": "closed"}],
                initial="open",
            )

            def __init__(self):
                self.machine = self.workflow.bind(self, after="_after_transition")
    """

    def __init__(
        self,
        states: Iterable[Any],
        transitions: Iterable[TransitionSpec],
        initial: Optional[StateID] = None,
    ) -> None:
        """
        :param states: State names, enums, or ``transitions`` state dicts.
        :param transitions: Transition dicts or positional lists.
        :param initial: Initial state; defaults to the first declared state.
        """
        self._states: Tuple[Any, ...] = tuple(states)
        if not self._states:
            raise ValueError("A workflow needs at least one state.")
        self._state_names: Tuple[StateID, ...] = tuple(_state_name(s) for s in self._states)
        self._transitions: List[Dict[str, Any]] = [_as_dict(t) for t in transitions]
        self._initial = initial if initial is not None else self._state_names[0]
        self._events = self._index_events()

    def _index_events(self) -> Dict[StateID, Dict[EventID, Any]]:
        events: Dict[StateID, Dict[EventID, Any]] = {name: {} for name in self._state_names}
        for transition in self._transitions:
            source = transition["source"]
            if source == "*":
                sources: Iterable[Any] = self._state_names
            elif isinstance(source, (list, tuple, set, frozenset)):
                sources = [_state_name(s) for s in source]
            else:
                sources = [_state_name(source)]
            for name in sources:
                if name not in events:
                    raise ValueError(f"Transition {transition['trigger']!r} leaves undeclared state {name!r}.")
                dest = transition.get("dest")
                events[name][transition["trigger"]] = name if dest == "=" else dest
        return events

    @property
    def state_names(self) -> Tuple[StateID, ...]:
        return self._state_names

    @property
    def initial(self) -> StateID:
        return self._initial

    def events_for(self, state: StateID) -> Mapping[EventID, Any]:
        """Events leaving ``state``, mapped to their destination."""
        return MappingProxyType(self._events.get(state, {}))

    def bind(
        self,
        model: Any,
        before: Optional[Any] = None,
        after: Optional[Any] = None,
        **machine_kwargs: Any,
    ) -> Machine:
        """
        Create a ``transitions.Machine`` driving ``model``.

        ``before`` and ``after`` become the machine-wide before/after state
        change callbacks; pass method names of the model or callables. Each
        receives the engine's EventData (``send_event`` is always on), which
        ``transition_args`` turns into TransitionContext fields. Any error
        raised by ``before`` aborts the transition and leaves the state as is.

        Extra keyword arguments are forwarded to ``Machine``; automatic
        ``to_<state>`` triggers are off unless requested.
        """
        options: Dict[str, Any] = {"auto_transitions": False}
        options.update(machine_kwargs)
        options["send_event"] = True
        logger.debug("Binding workflow with states %s to %s", self._state_names, type(model).__name__)
        return Machine(
            model=model,
            states=list(self._states),
            transitions=[dict(t) for t in self._transitions],
            initial=self._initial,
            before_state_change=before,
            after_state_change=after,
            **options,
        )


def transition_args(event_data: EventData) -> Dict[str, Any]:
    """
    Keyword arguments for ``WorkflowHooks.to_event_args`` describing the
    transition in ``event_data``.

    Keyword arguments given to the trigger land in ``args``, positional ones
    in ``positional_args``.
    """
    transition = event_data.transition
    return {
        "from_state": transition.source,
        "to_state": transition.dest,
        "triggering_event": event_data.event.name,
        "args": dict(event_data.kwargs),
        "positional_args": tuple(event_data.args),
    }
