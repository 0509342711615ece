# hookstate/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Dict, Optional


class HookStateError(Exception):
    """
    Base exception class for errors raised by the hookstate library.

    :param message: Human readable description of the error.
    :param details: Optional dictionary of additional context.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnknownEventError(HookStateError):
    """
    Raised when a hook is attached to an event the host workflow does not declare.
    """

    def __init__(self, event: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f"{event} does not exist in the workflow.", {"event": event})
        self.event = event


class AddCallbackError(UnknownEventError):
    """
    Raised when a before or after callback targets an undeclared event.
    """


class AddValidationError(UnknownEventError):
    """
    Raised when a validator targets an undeclared event.
    """


class TransitionHalted(HookStateError):
    """
    Raised from a host's before-transition hook to veto the transition.

    The workflow engine lets the error escape the triggering call, so the
    transition never commits and the model keeps its current state.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason, {"reason": reason})
        self.reason = reason


class WorkflowNotDefinedError(HookStateError):
    """
    Raised when a host class uses hooks without declaring a workflow.
    """
