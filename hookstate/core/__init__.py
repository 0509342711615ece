"""
Core package providing event-scoped hook registries for host workflows.

Architecture:
- HookRegistry keeps an ordered list of hooks per event for one host class
- Validatable vetoes transitions through validators
- Callbackable runs side effects before and after transitions
- Initiator adapts single-method action classes into callbacks

Cross-cutting:
- Structured errors rooted at HookStateError
- Module level loggers, no handlers installed
- Registry access serialized with a per-registry lock
"""

from .base import WorkflowHooks, collect_events
from .callbackable import Callbackable
from .context import TransitionContext
from .errors import (
    AddCallbackError,
    AddValidationError,
    HookStateError,
    TransitionHalted,
    UnknownEventError,
    WorkflowNotDefinedError,
)
from .initiator import Initiator
from .registry import HookRegistry
from .validatable import Allowed, Halted, Validatable, ValidationOutcome, Validator

__all__ = [
    "AddCallbackError",
    "AddValidationError",
    "Allowed",
    "Callbackable",
    "Halted",
    "HookRegistry",
    "HookStateError",
    "Initiator",
    "TransitionContext",
    "TransitionHalted",
    "UnknownEventError",
    "Validatable",
    "ValidationOutcome",
    "Validator",
    "WorkflowHooks",
    "WorkflowNotDefinedError",
    "collect_events",
]
