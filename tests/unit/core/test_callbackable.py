# tests/unit/core/test_callbackable.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hookstate.core.callbackable import Callbackable
from hookstate.core.errors import AddCallbackError


def _context(host, event="close"):
    return host.to_event_args("open", "closed", event, {"by": "test"})


@pytest.mark.parametrize("phase", ["before", "after"])
@pytest.mark.parametrize("event", ["close", "reopen", "archive"])
def test_attach_to_declared_event(callbackable_cls, phase, event):
    callback = MagicMock()
    getattr(callbackable_cls, f"attach_{phase}_callback")(event, callback)
    assert getattr(callbackable_cls, f"{phase}_callbacks")() == {event: [callback]}


@pytest.mark.parametrize("phase", ["before", "after"])
def test_attach_to_undeclared_event(callbackable_cls, phase):
    with pytest.raises(AddCallbackError, match="explode does not exist in the workflow.") as excinfo:
        getattr(callbackable_cls, f"attach_{phase}_callback")("explode", MagicMock())
    assert excinfo.value.event == "explode"
    assert getattr(callbackable_cls, f"{phase}_callbacks")() == {}


def test_before_and_after_are_separate(callbackable_cls):
    before, after = MagicMock(), MagicMock()
    callbackable_cls.attach_before_callback("close", before)
    callbackable_cls.attach_after_callback("close", after)

    host = callbackable_cls()
    ctx = _context(host)
    host.execute_before_callbacks("close", ctx)
    before.assert_called_once_with(ctx)
    after.assert_not_called()

    host.execute_after_callbacks("close", ctx)
    after.assert_called_once_with(ctx)
    before.assert_called_once()


def test_callbacks_run_in_insertion_order(callbackable_cls):
    calls = []
    for name in ("c1", "c2", "c3"):
        callbackable_cls.attach_after_callback("close", lambda ctx, n=name: calls.append(n))

    host = callbackable_cls()
    host.execute_after_callbacks("close", _context(host))
    assert calls == ["c1", "c2", "c3"]


def test_decorator_form(callbackable_cls):
    calls = []

    @callbackable_cls.attach_before_callback("close")
    def remember(ctx):
        calls.append(ctx.triggering_event)

    host = callbackable_cls()
    host.execute_before_callbacks("close", _context(host))
    assert calls == ["close"]
    assert remember.__name__ == "remember"


def test_callback_error_aborts_run(callbackable_cls):
    first = MagicMock(side_effect=RuntimeError("boom"))
    second = MagicMock()
    callbackable_cls.attach_after_callback("close", first)
    callbackable_cls.attach_after_callback("close", second)

    host = callbackable_cls()
    with pytest.raises(RuntimeError, match="boom"):
        host.execute_after_callbacks("close", _context(host))
    second.assert_not_called()


def test_callbacks_receive_forwarded_args(callbackable_cls):
    seen = {}
    callbackable_cls.attach_after_callback("close", lambda ctx: seen.update(ctx.args))
    host = callbackable_cls()
    host.execute_after_callbacks("close", _context(host))
    assert seen == {"by": "test"}


def test_clear_all_after_callbacks(callbackable_cls):
    after, before = MagicMock(), MagicMock()
    callbackable_cls.attach_after_callback("close", after)
    callbackable_cls.attach_before_callback("close", before)
    callbackable_cls.clear_all_after_callbacks()

    host = callbackable_cls()
    host.execute_after_callbacks("close", _context(host))
    host.execute_before_callbacks("close", _context(host))
    after.assert_not_called()
    before.assert_called_once()


def test_clear_all_before_callbacks(callbackable_cls):
    before = MagicMock()
    callbackable_cls.attach_before_callback("close", before)
    callbackable_cls.clear_all_before_callbacks()

    host = callbackable_cls()
    host.execute_before_callbacks("close", _context(host))
    before.assert_not_called()
    with pytest.raises(AddCallbackError):
        callbackable_cls.attach_before_callback("explode", before)


def test_bulk_before_populates_before_registry(callbackable_cls):
    first, second = MagicMock(), MagicMock()
    callbackable_cls.attach_before_callbacks({"close": [first, second]})
    assert callbackable_cls.before_callbacks() == {"close": [first, second]}
    assert callbackable_cls.after_callbacks() == {}


def test_snapshot_round_trip(callbackable_cls):
    a, b, c = MagicMock(), MagicMock(), MagicMock()
    callbackable_cls.attach_after_callback("close", a)
    callbackable_cls.attach_after_callback("close", b)
    callbackable_cls.attach_after_callback("archive", c)
    snapshot = callbackable_cls.after_callbacks()

    callbackable_cls.clear_all_after_callbacks()
    assert callbackable_cls.after_callbacks() == {}
    callbackable_cls.attach_after_callbacks(snapshot)
    assert callbackable_cls.after_callbacks() == snapshot


@pytest.mark.parametrize("bulk", [None, {}])
def test_bulk_attach_empty_is_noop(callbackable_cls, bulk):
    kept = MagicMock()
    callbackable_cls.attach_before_callback("close", kept)
    callbackable_cls.attach_before_callbacks(bulk)
    callbackable_cls.attach_after_callbacks(bulk)
    assert callbackable_cls.before_callbacks() == {"close": [kept]}
    assert callbackable_cls.after_callbacks() == {}


def test_registries_are_per_class(stub_workflow):
    class First(Callbackable):
        workflow = stub_workflow

    class Second(Callbackable):
        workflow = stub_workflow

    callback = MagicMock()
    First.attach_after_callback("close", callback)
    second = Second()
    second.execute_after_callbacks("close", _context(second))
    callback.assert_not_called()
    assert Second.after_callbacks() == {}


@pytest.mark.property
@given(st.lists(st.integers(), max_size=20))
def test_before_callbacks_keep_order(tags):
    class Host(Callbackable):
        workflow = type(
            "Spec", (), {"state_names": ["open"], "events_for": lambda self, state: {"close": "closed"}}
        )()

    calls = []
    for tag in tags:
        Host.attach_before_callback("close", lambda ctx, t=tag: calls.append(t))

    host = Host()
    host.execute_before_callbacks("close", _context(host))
    assert calls == tags


@pytest.mark.parametrize("phase", ["before", "after"])
def test_decorator_form_rejects_undeclared_event_immediately(callbackable_cls, phase):
    with pytest.raises(AddCallbackError, match="explode does not exist in the workflow."):
        getattr(callbackable_cls, f"attach_{phase}_callback")("explode")


@pytest.mark.parametrize("phase", ["before", "after"])
def test_bulk_attach_rejects_undeclared_event_without_callback(callbackable_cls, phase):
    with pytest.raises(AddCallbackError):
        getattr(callbackable_cls, f"attach_{phase}_callbacks")({"explode": [None]})
    assert getattr(callbackable_cls, f"{phase}_callbacks")() == {}


@pytest.mark.parametrize("phase", ["before", "after"])
def test_bulk_attach_rejects_non_callable(callbackable_cls, phase):
    with pytest.raises(TypeError, match="must be callable"):
        getattr(callbackable_cls, f"attach_{phase}_callbacks")({"close": [None]})
    assert getattr(callbackable_cls, f"{phase}_callbacks")() == {}
