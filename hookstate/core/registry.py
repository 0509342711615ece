# hookstate/core/registry.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import DefaultDict, Dict, Generic, List, TypeVar

from hookstate.interfaces.types import EventID

logger = logging.getLogger(__name__)

H = TypeVar("H")


class HookRegistry(Generic[H]):
    """
    Ordered, per-event store of hooks owned by a single host class.

    Entries for an event keep their insertion order, which is also their
    execution order. An event seen for the first time maps to an empty
    list. Single entries cannot be removed; ``clear_all`` resets every event.

    Thread safety: mutation and reads go through an RLock, and ``get``
    hands out a copy, so an execution in progress iterates a stable snapshot
    even while another thread attaches hooks. The hooks themselves run
    outside the lock.
    """

    def __init__(self, name: str) -> None:
        """
        :param name: Label used in log messages (e.g. "validators").
        """
        self._name = name
        self._lock = threading.RLock()
        self._hooks: DefaultDict[EventID, List[H]] = defaultdict(list)

    @property
    def name(self) -> str:
        return self._name

    def get(self, event: EventID) -> List[H]:
        """
        Return a copy of the hooks registered for ``event``, oldest first.
        """
        with self._lock:
            return list(self._hooks[event])

    def append(self, event: EventID, hook: H) -> None:
        """
        Register ``hook`` after any hooks already attached to ``event``.
        """
        with self._lock:
            self._hooks[event].append(hook)
            logger.debug("Attached %s hook #%d for event %r", self._name, len(self._hooks[event]), event)

    def clear_all(self) -> None:
        """
        Drop every hook for every event.
        """
        with self._lock:
            self._hooks = defaultdict(list)
        logger.debug("Cleared all %s hooks", self._name)

    def snapshot(self) -> Dict[EventID, List[H]]:
        """
        Copy of the registry shaped ``{event: [hooks]}``, skipping empty events.

        The result can be fed back into the matching bulk-attach operation.
        """
        with self._lock:
            return {event: list(hooks) for event, hooks in self._hooks.items() if hooks}

    def __len__(self) -> int:
        with self._lock:
            return sum(len(hooks) for hooks in self._hooks.values())

    def __repr__(self) -> str:
        return f"HookRegistry(name={self._name!r}, hooks={len(self)})"
