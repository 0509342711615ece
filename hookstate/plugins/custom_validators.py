# hookstate/plugins/custom_validators.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any

from hookstate.core.context import TransitionContext
from hookstate.interfaces.types import Predicate


class RequiresArgs:
    """
    Conditional that passes only when the trigger forwarded every named
    keyword argument.
    """

    def __init__(self, *names: str) -> None:
        self.names = names

    def __call__(self, context: TransitionContext) -> bool:
        return all(name in context.args for name in self.names)


class InstanceAttribute:
    """
    Conditional comparing an attribute of the host instance with an expected value.
    """

    def __init__(self, name: str, expected: Any = True) -> None:
        self.name = name
        self.expected = expected

    def __call__(self, context: TransitionContext) -> bool:
        return getattr(context.instance, self.name, None) == self.expected


class Negate:
    """Inverts another conditional."""

    def __init__(self, conditional: Predicate) -> None:
        self.conditional = conditional

    def __call__(self, context: TransitionContext) -> bool:
        return not self.conditional(context)
