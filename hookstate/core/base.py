# hookstate/core/base.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, ClassVar, FrozenSet, Iterable, Mapping, Optional, Tuple, Type

from hookstate.core.context import TransitionContext
from hookstate.core.errors import UnknownEventError, WorkflowNotDefinedError
from hookstate.interfaces.protocols import WorkflowSpec
from hookstate.interfaces.types import EventID, StateID


def collect_events(spec: WorkflowSpec) -> FrozenSet[EventID]:
    """
    Union of the events declared on every state of ``spec``.

    States without outgoing events (``None`` or empty) contribute nothing.
    """
    events = set()
    for state_name in spec.state_names:
        declared = spec.events_for(state_name)
        if declared:
            events.update(declared.keys())
    return frozenset(events)


class WorkflowHooks:
    """
    Common base of the hook mixins.

    Host classes declare their workflow through the ``workflow`` class
    attribute (anything satisfying WorkflowSpec) or by overriding
    ``workflow_spec``. ``instance_aliases`` lists extra names under which
    the host instance appears in every TransitionContext.
    """

    workflow: ClassVar[Optional[WorkflowSpec]] = None
    instance_aliases: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def workflow_spec(cls) -> WorkflowSpec:
        """
        :raises WorkflowNotDefinedError: If the host declared no workflow.
        """
        if cls.workflow is None:
            raise WorkflowNotDefinedError(
                f"{cls.__name__} does not declare a workflow.", {"host": cls.__name__}
            )
        return cls.workflow

    @classmethod
    def declared_events(cls) -> FrozenSet[EventID]:
        """
        Events declared by the host workflow, computed once per class.
        """
        cached = cls.__dict__.get("_declared_events")
        if cached is None:
            cached = collect_events(cls.workflow_spec())
            cls._declared_events = cached
        return cached

    @classmethod
    def _check_event(cls, event: EventID, error_cls: Type[UnknownEventError]) -> None:
        if event not in cls.declared_events():
            raise error_cls(event)

    def to_event_args(
        self,
        from_state: Optional[StateID],
        to_state: Optional[StateID],
        triggering_event: EventID,
        args: Optional[Mapping[str, Any]] = None,
        positional_args: Iterable[Any] = (),
    ) -> TransitionContext:
        """
        Build the context handed to hooks for a transition of this instance.
        """
        return TransitionContext(
            instance=self,
            from_state=from_state,
            to_state=to_state,
            triggering_event=triggering_event,
            args=args or {},
            positional_args=tuple(positional_args),
            aliases=tuple(type(self).instance_aliases),
        )
