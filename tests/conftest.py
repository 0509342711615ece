# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Mapping

import pytest

from hookstate.core.callbackable import Callbackable
from hookstate.core.validatable import Validatable
from hookstate.plugins.transitions_engine import WorkflowDefinition, transition_args


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "stress: mark test as a stress test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


class StubWorkflow:
    """A WorkflowSpec without an engine behind it."""

    def __init__(self, events: Dict[str, Mapping[str, Any]]):
        self._events = events

    @property
    def state_names(self):
        return list(self._events)

    def events_for(self, state):
        return self._events[state]


@pytest.fixture
def stub_workflow() -> StubWorkflow:
    """open --close--> closed --reopen--> open, archived is terminal."""
    return StubWorkflow(
        {
            "open": {"close": "closed"},
            "closed": {"reopen": "open", "archive": "archived"},
            "archived": None,
        }
    )


@pytest.fixture
def validatable_cls(stub_workflow):
    """A fresh Validatable host class per test."""

    class MockValidatable(Validatable):
        workflow = stub_workflow

    return MockValidatable


@pytest.fixture
def callbackable_cls(stub_workflow):
    """A fresh Callbackable host class per test."""

    class MockCallbackable(Callbackable):
        workflow = stub_workflow

    return MockCallbackable


def door_definition() -> WorkflowDefinition:
    return WorkflowDefinition(
        states=["open", "closed"],
        transitions=[{"trigger": "close", "source": "open", "dest": "closed"}],
        initial="open",
    )


@pytest.fixture
def door_cls():
    """
    A two-state door driven by the ``transitions`` engine, wired the way a
    host is expected to wire hookstate: validators and before callbacks in
    the before-state-change hook, after callbacks in the after hook.
    """
    definition = door_definition()

    class Door(Callbackable, Validatable):
        workflow = definition
        instance_aliases = ("door",)

        def __init__(self):
            self.flag = False
            self.initiated = False
            self.machine = self.workflow.bind(
                self, before="_before_transition", after="_after_transition"
            )

        def _before_transition(self, event_data):
            context = self.to_event_args(**transition_args(event_data))
            self.execute_validators(context.triggering_event, context)
            self.execute_before_callbacks(context.triggering_event, context)

        def _after_transition(self, event_data):
            context = self.to_event_args(**transition_args(event_data))
            self.execute_after_callbacks(context.triggering_event, context)

    return Door
