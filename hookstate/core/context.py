# hookstate/core/context.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from hookstate.interfaces.types import EventID, StateID


@dataclass(frozen=True)
class TransitionContext:
    """
    Everything a validator or callback learns about one transition attempt.

    A context is assembled once per attempt and handed, unchanged, to every
    hook registered for the triggering event. Hosts that prefer a domain name
    for the instance (``order`` rather than ``instance``) list it in
    ``aliases``; each alias resolves to ``instance`` on attribute access.
    """

    instance: Any
    from_state: Optional[StateID]
    to_state: Optional[StateID]
    triggering_event: EventID
    args: Mapping[str, Any] = field(default_factory=dict, hash=False)
    positional_args: Tuple[Any, ...] = ()
    aliases: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Frozen: assign through object.__setattr__ to wrap args read-only.
        object.__setattr__(self, "args", MappingProxyType(dict(self.args or {})))
        object.__setattr__(self, "positional_args", tuple(self.positional_args))
        object.__setattr__(self, "aliases", tuple(self.aliases))

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails.
        if name != "aliases" and name in self.aliases:
            return self.instance
        raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r}")

    def as_kwargs(self) -> Dict[str, Any]:
        """
        Flatten the context into keyword arguments, aliases included.
        """
        kwargs: Dict[str, Any] = {"instance": self.instance}
        for alias in self.aliases:
            kwargs[alias] = self.instance
        kwargs.update(
            from_state=self.from_state,
            to_state=self.to_state,
            triggering_event=self.triggering_event,
            args=self.args,
            positional_args=self.positional_args,
        )
        return kwargs
