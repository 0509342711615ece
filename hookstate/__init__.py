"""hookstate: validators and before/after callbacks for workflow transitions

This package lets a host class that owns a state machine attach hooks to the
events of its workflow without touching the engine that executes transitions.

Responsibilities:
    - Validators that can halt a transition with a reason
    - Before and after callbacks run around a transition
    - Initiators, single-method action classes usable as callbacks

Interactions:
    - Host classes through the Validatable and Callbackable mixins
    - The workflow engine (``transitions``) through the host's own
      before/after state change hooks
    - Logging system for diagnostics

Cross-cutting Concerns:
    Thread Safety:
        - Registries are per host class and guarded by a lock
        - Hooks run outside the lock, on the caller's thread

    Error Handling:
        - Structured error hierarchy rooted at HookStateError
        - User hook errors propagate unchanged

    Logging:
        - Module loggers under the ``hookstate`` namespace
        - No handlers installed by the library
"""

from hookstate.core import (
    AddCallbackError,
    AddValidationError,
    Callbackable,
    HookStateError,
    Initiator,
    TransitionContext,
    TransitionHalted,
    UnknownEventError,
    Validatable,
    WorkflowNotDefinedError,
)

__version__ = "0.1.0"

__all__ = [
    "AddCallbackError",
    "AddValidationError",
    "Callbackable",
    "HookStateError",
    "Initiator",
    "TransitionContext",
    "TransitionHalted",
    "UnknownEventError",
    "Validatable",
    "WorkflowNotDefinedError",
]
