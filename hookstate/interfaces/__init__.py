"""
Interfaces consumed from, and exposed to, the host workflow.

The workflow engine is an external collaborator. These protocols describe
the small surface hookstate needs from it: the declared states and the
events leaving each of them.
"""

from .protocols import WorkflowSpec
from .types import Action, EventID, Predicate, StateID

__all__ = ["Action", "EventID", "Predicate", "StateID", "WorkflowSpec"]
