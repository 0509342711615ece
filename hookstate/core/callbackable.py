# hookstate/core/callbackable.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional

from hookstate.core.base import WorkflowHooks
from hookstate.core.context import TransitionContext
from hookstate.core.errors import AddCallbackError
from hookstate.core.registry import HookRegistry
from hookstate.interfaces.types import Action, EventID

logger = logging.getLogger(__name__)


class Callbackable(WorkflowHooks):
    """
    Mixin that attaches before and after callbacks to the events of a host
    workflow.

    Before callbacks run ahead of the state change, after callbacks once it
    has committed. Neither can veto a transition; use Validatable for that.
    The host calls ``execute_before_callbacks`` and ``execute_after_callbacks``
    from its own transition hooks.
    """

    _before_callbacks: ClassVar[HookRegistry[Action]]
    _after_callbacks: ClassVar[HookRegistry[Action]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._before_callbacks = HookRegistry(f"{cls.__name__}.before_callbacks")
        cls._after_callbacks = HookRegistry(f"{cls.__name__}.after_callbacks")

    @classmethod
    def attach_before_callback(cls, event: EventID, callback: Optional[Action] = None) -> Any:
        """
        Run ``callback`` before ``event`` changes the state.

        When ``callback`` is omitted a decorator is returned instead.

        :param event: An event declared by the host workflow.
        :param callback: Callable receiving the TransitionContext.
        :raises AddCallbackError: If the event is not part of the workflow.
        """
        return cls._attach(cls._before_callbacks, event, callback)

    @classmethod
    def attach_after_callback(cls, event: EventID, callback: Optional[Action] = None) -> Any:
        """
        Run ``callback`` after ``event`` has changed the state.

        When ``callback`` is omitted a decorator is returned instead.

        :param event: An event declared by the host workflow.
        :param callback: Callable receiving the TransitionContext.
        :raises AddCallbackError: If the event is not part of the workflow.
        """
        return cls._attach(cls._after_callbacks, event, callback)

    @classmethod
    def attach_before_callbacks(cls, callbacks: Optional[Mapping[EventID, Iterable[Action]]]) -> None:
        """
        Re-attach before callbacks in bulk, e.g. a ``before_callbacks()``
        snapshot taken before ``clear_all_before_callbacks()``.
        """
        cls._replay(cls._before_callbacks, callbacks)

    @classmethod
    def attach_after_callbacks(cls, callbacks: Optional[Mapping[EventID, Iterable[Action]]]) -> None:
        """
        Re-attach after callbacks in bulk, e.g. an ``after_callbacks()``
        snapshot taken before ``clear_all_after_callbacks()``.
        """
        cls._replay(cls._after_callbacks, callbacks)

    @classmethod
    def clear_all_before_callbacks(cls) -> None:
        cls._before_callbacks.clear_all()

    @classmethod
    def clear_all_after_callbacks(cls) -> None:
        cls._after_callbacks.clear_all()

    @classmethod
    def before_callbacks(cls) -> Dict[EventID, List[Action]]:
        """Snapshot of the before callbacks, ``{event: [callback, ...]}``."""
        return cls._before_callbacks.snapshot()

    @classmethod
    def after_callbacks(cls) -> Dict[EventID, List[Action]]:
        """Snapshot of the after callbacks, ``{event: [callback, ...]}``."""
        return cls._after_callbacks.snapshot()

    def execute_before_callbacks(self, triggering_event: EventID, context: TransitionContext) -> None:
        """
        Call the before callbacks of ``triggering_event`` in attachment order.

        An error raised by a callback propagates and skips the rest.
        """
        self._run(type(self)._before_callbacks, triggering_event, context)

    def execute_after_callbacks(self, triggering_event: EventID, context: TransitionContext) -> None:
        """
        Call the after callbacks of ``triggering_event`` in attachment order.

        An error raised by a callback propagates and skips the rest.
        """
        self._run(type(self)._after_callbacks, triggering_event, context)

    @classmethod
    def _attach(cls, registry: HookRegistry[Action], event: EventID, callback: Optional[Action]) -> Any:
        cls._check_event(event, AddCallbackError)
        if callback is None:

            def decorator(fn: Action) -> Action:
                cls._append(registry, event, fn)
                return fn

            return decorator

        cls._append(registry, event, callback)
        return None

    @classmethod
    def _replay(cls, registry: HookRegistry[Action], callbacks: Optional[Mapping[EventID, Iterable[Action]]]) -> None:
        if not callbacks:
            return
        for event, entries in callbacks.items():
            cls._check_event(event, AddCallbackError)
            for callback in entries:
                cls._append(registry, event, callback)

    @staticmethod
    def _append(registry: HookRegistry[Action], event: EventID, callback: Any) -> None:
        # event already checked
        if not callable(callback):
            raise TypeError(f"Callback for {event!r} must be callable, got {callback!r}.")
        registry.append(event, callback)

    @staticmethod
    def _run(registry: HookRegistry[Action], triggering_event: EventID, context: TransitionContext) -> None:
        callbacks = registry.get(triggering_event)
        logger.debug("Running %d %s for event %r", len(callbacks), registry.name, triggering_event)
        for callback in callbacks:
            callback(context)
