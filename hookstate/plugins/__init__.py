"""
Optional integrations: a workflow engine binding and reusable validators.
"""

from .custom_validators import InstanceAttribute, Negate, RequiresArgs
from .transitions_engine import WorkflowDefinition, transition_args

__all__ = ["InstanceAttribute", "Negate", "RequiresArgs", "WorkflowDefinition", "transition_args"]
