# hookstate/core/initiator.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

from hookstate.core.context import TransitionContext


class Initiator:
    """
    A one-shot action started by a transition.

    Subclasses implement ``initiate`` using the arguments captured at
    construction. ``call()`` adapts the class into a callback, so it can be
    attached directly:

        Order.attach_after_callback("close", WorkOrderCreator.call())

    Every transition builds a fresh instance; nothing survives between calls.
    """

    def __init__(self, **args: Any) -> None:
        """
        :param args: The transition context, flattened to keyword arguments.
        """
        self._args = MappingProxyType(dict(args))

    @classmethod
    def call(cls) -> Callable[[Union[TransitionContext, Mapping[str, Any]]], None]:
        """
        Return a callback that constructs the initiator from the context it
        receives and runs ``initiate``.
        """

        def _initiate(context: Union[TransitionContext, Mapping[str, Any]]) -> None:
            if isinstance(context, TransitionContext):
                kwargs = context.as_kwargs()
            else:
                kwargs = dict(context)
            cls(**kwargs).initiate()

        return _initiate

    @property
    def args(self) -> Mapping[str, Any]:
        """Read-only view of the captured arguments."""
        return self._args

    def initiate(self) -> None:
        """
        Perform the action.
        """
        raise NotImplementedError("You must implement the initiate method.")
