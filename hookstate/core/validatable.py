# hookstate/core/validatable.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, List, Mapping, Optional, Union

from hookstate.core.base import WorkflowHooks
from hookstate.core.context import TransitionContext
from hookstate.core.errors import AddValidationError, TransitionHalted
from hookstate.core.registry import HookRegistry
from hookstate.interfaces.types import EventID, Predicate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Validator:
    """A predicate that may veto a transition, and the reason given when it does."""

    reason: str
    conditional: Predicate


@dataclass(frozen=True)
class Allowed:
    """Outcome of a validator run that lets the transition proceed."""

    @property
    def halted(self) -> bool:
        return False


@dataclass(frozen=True)
class Halted:
    """Outcome of a validator run that vetoes the transition."""

    reason: str

    @property
    def halted(self) -> bool:
        return True


ValidationOutcome = Union[Allowed, Halted]

ValidatorEntry = Union[Validator, Mapping[str, Any]]


class Validatable(WorkflowHooks):
    """
    Mixin that attaches validators to the events of a host workflow.

    Validators run before a transition; the first one whose conditional
    returns a falsy value halts the transition with its reason. The host
    wires ``execute_validators`` into its before-transition hook.

    Example:
        class Order(Validatable):
            workflow = WorkflowDefinition(...)

        Order.attach_validator("close", "Order has open lines", lambda ctx: not ctx.instance.lines)
    """

    _validators: ClassVar[HookRegistry[Validator]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._validators = HookRegistry(f"{cls.__name__}.validators")

    @classmethod
    def attach_validator(
        cls, event: EventID, reason: str, conditional: Optional[Predicate] = None
    ) -> Any:
        """
        Attach a validator to ``event``.

        When ``conditional`` is omitted a decorator is returned instead.

        :param event: An event declared by the host workflow.
        :param reason: Reason carried by TransitionHalted if the conditional fails.
        :param conditional: Callable receiving the TransitionContext.
        :raises AddValidationError: If the event is not part of the workflow.
        """
        cls._check_event(event, AddValidationError)
        if conditional is None:

            def decorator(fn: Predicate) -> Predicate:
                cls._append_validator(event, reason, fn)
                return fn

            return decorator

        cls._append_validator(event, reason, conditional)
        return None

    @classmethod
    def _append_validator(cls, event: EventID, reason: str, conditional: Any) -> None:
        # event already checked
        if not callable(conditional):
            raise TypeError(f"Validator {reason!r} for {event!r} needs a callable conditional, got {conditional!r}.")
        cls._validators.append(event, Validator(reason=reason, conditional=conditional))

    @classmethod
    def attach_validators(cls, validators: Optional[Mapping[EventID, Iterable[ValidatorEntry]]]) -> None:
        """
        Attach many validators at once, typically to restore a snapshot taken
        with ``validators()`` before ``clear_all_validators()``.

        Entries may be Validator instances or mappings with ``reason`` and
        ``conditional`` keys. An empty or missing mapping does nothing.

        :raises AddValidationError: On the first event not part of the workflow.
        :raises TypeError: If an entry's conditional is not callable.
        """
        if not validators:
            return

        for event, entries in validators.items():
            cls._check_event(event, AddValidationError)
            for entry in entries:
                if isinstance(entry, Validator):
                    cls._append_validator(event, entry.reason, entry.conditional)
                else:
                    cls._append_validator(event, entry["reason"], entry["conditional"])

    @classmethod
    def clear_all_validators(cls) -> None:
        """Remove every validator attached to the host class."""
        cls._validators.clear_all()

    @classmethod
    def validators(cls) -> Dict[EventID, List[Validator]]:
        """Snapshot of the attached validators, ``{event: [Validator, ...]}``."""
        return cls._validators.snapshot()

    def run_validators(self, triggering_event: EventID, context: TransitionContext) -> ValidationOutcome:
        """
        Evaluate the validators of ``triggering_event`` in attachment order.

        Stops at the first failing conditional; later validators are not
        evaluated. Errors raised by a conditional propagate unchanged.
        """
        for validator in type(self)._validators.get(triggering_event):
            if not validator.conditional(context):
                return Halted(validator.reason)
        return Allowed()

    def execute_validators(self, triggering_event: EventID, context: TransitionContext) -> bool:
        """
        Run the validators and halt the transition if one fails.

        :return: True if every validator passed.
        :raises TransitionHalted: Carrying the failing validator's reason.
        """
        outcome = self.run_validators(triggering_event, context)
        if outcome.halted:
            logger.info("Transition %r halted: %s", triggering_event, outcome.reason)
            raise TransitionHalted(outcome.reason)
        return True
