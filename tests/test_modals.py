import json
import logging

import pytest

from clusterbot import modals


class RecordingUpdater:
    def __init__(self, fail=False):
        self.calls = []
        self.fail = fail

    def update_view(self, view, external_id, hash, view_id):
        self.calls.append((view, external_id, hash, view_id))
        if self.fail:
            raise RuntimeError("update failed")
        return {"ok": True}


def _callback(values=None, actions=None):
    return {
        "view": {"id": "V1", "hash": "H1", "state": {"values": values or {}}},
        "actions": actions or [],
    }


LOGGER = logging.getLogger("test")


def test_for_view_and_follow_ups():
    view = {"type": "modal"}
    flow = modals.for_view("launch", view)
    assert flow.identifier == "launch"
    assert flow.view == view
    handler = object()
    full = flow.with_follow_ups({"view_submission": handler})
    assert isinstance(full, modals.FlowWithViewAndFollowUps)
    assert full.identifier == "launch"
    assert full.view == view
    assert full.follow_ups["view_submission"] is handler


def test_button_press_updates_view():
    updater = RecordingUpdater()
    view = {"type": "modal", "private_metadata": "next"}
    handler = modals.update_view_for_button_press("id", "btn", updater, view)
    callback = _callback(actions=[{"type": "button", "value": "btn"}])
    assert handler.handle(callback, LOGGER) == (True, None)
    assert updater.calls == [(view, "", "H1", "V1")]


def test_button_press_ignores_other_buttons():
    updater = RecordingUpdater()
    handler = modals.update_view_for_button_press("id", "btn", updater, {})
    assert handler.handle(_callback(actions=[{"type": "button", "value": "x"}]), LOGGER) == (
        False,
        None,
    )
    assert handler.handle(_callback(), LOGGER) == (False, None)
    assert updater.calls == []


def test_button_press_update_failure_raises():
    updater = RecordingUpdater(fail=True)
    handler = modals.update_view_for_button_press("id", "btn", updater, {})
    with pytest.raises(RuntimeError):
        handler.handle(_callback(actions=[{"type": "button", "value": "btn"}]), LOGGER)


def test_pending_and_not_enabled_views():
    pending = modals.pending_jira_view()
    assert pending["private_metadata"] == "jira_pending"
    assert pending["title"]["text"] == "Creating Jira Issue..."
    disabled = modals.not_enabled_view()
    assert disabled["private_metadata"] == "jira_pending"
    assert "not implemented" in disabled["blocks"][0]["text"]["text"]


def test_jira_view_links_key():
    view = modals.jira_view("ABC-1")
    assert view["private_metadata"] == "jira"
    text = view["blocks"][0]["text"]["text"]
    assert text.endswith("ABC-1|ABC-1>")
    assert text.startswith("A Jira issue was filed: <")


def test_error_view_text():
    view = modals.error_view("create bug", ValueError("boom"))
    assert view["private_metadata"] == "error"
    assert view["blocks"][0]["text"]["text"] == "We encountered an error trying to create bug:\n>boom"


def test_values_for():
    values = {
        "title": {"a": {"type": "plain_text_input", "value": "My title"}},
        "who": {"b": {"type": "users_select", "selected_user": "U1"}},
        "pick": {"c": {"type": "static_select", "selected_option": {"value": "v1"}}},
        "ignored": {"d": {"type": "plain_text_input", "value": "skip"}},
    }
    result = modals.values_for(_callback(values), "title", "who", "pick", "missing")
    assert result == {
        "title": "My title",
        "who_users_select": "U1",
        "pick_static_select": "v1",
    }


def test_to_bullet_list():
    assert modals.to_bullet_list("one\n\n  two  \n") == "* one\n* two"
    assert modals.to_bullet_list("") == ""


def test_callback_selection_and_input():
    values = {
        "platform": {
            "a": {"selected_option": {"value": "aws", "text": {"text": "AWS"}}}
        },
        "user": {"b": {"selected_user": "U2"}},
        "version": {"c": {"value": "4.18"}},
    }
    callback = _callback(values)
    assert modals.callback_selection(callback) == {"platform": "AWS", "user": "U2"}
    assert modals.callback_input(callback) == {"version": "4.18"}
    assert modals.callback_input_all(callback) == {
        "platform": "AWS",
        "user": "U2",
        "version": "4.18",
    }


def test_callback_input_all_prefers_input():
    values = {
        "k": {
            "a": {"selected_option": {"value": "x", "text": {"text": "sel"}}},
            "b": {"value": "typed"},
        }
    }
    assert modals.callback_input_all(_callback(values)) == {"k": "typed"}


def test_callback_multiple_select():
    values = {
        "params": {
            "a": {"selected_options": [{"value": "fips"}, {"value": "techpreview"}]},
            "b": {"selected_options": [{"value": "ovn"}]},
        },
        "empty": {"c": {"selected_options": []}},
    }
    assert modals.callback_multiple_select(_callback(values)) == {
        "params": ["fips", "techpreview", "ovn"]
    }


def test_validation_error_encoding():
    raw = modals.validation_error({"pr": "invalid PR(s)"})
    assert json.loads(raw) == {"response_action": "errors", "errors": {"pr": "invalid PR(s)"}}


def test_build_options():
    options = modals.build_options(["aws", "gcp", "azure"], {"gcp"})
    assert [option["value"] for option in options] == ["aws", "azure"]
    assert options[0]["text"] == {"type": "plain_text", "text": "aws"}
    assert len(modals.build_options(["a", "b"], None)) == 2
    assert modals.build_options([], None) == []