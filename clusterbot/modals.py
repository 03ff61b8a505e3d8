"""Modal view registration, shared modal views and helpers for reading submitted modal state."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Protocol

from clusterbot.interactions import Handler, PartialHandler, partial_handler_func

BLOCK_ID_TITLE = "title"
IDENTIFIER_JIRA = "jira"
IDENTIFIER_JIRA_PENDING = "jira_pending"
IDENTIFIER_ERROR = "error"

JIRA_BROWSE_URL = "https://jira.example.com/browse/"

PLAIN_TEXT_INPUT = "plain_text_input"
OPT_TYPE_CHANNELS = "channels_select"
OPT_TYPE_CONVERSATIONS = "conversations_select"
OPT_TYPE_USER = "users_select"
OPT_TYPE_STATIC = "static_select"

RESPONSE_ACTION_UPDATE = "update"
RESPONSE_ACTION_ERRORS = "errors"

_log = logging.getLogger(__name__)


class ViewUpdater(Protocol):
    """The part of a Slack client that updates an open modal view."""

    def update_view(
        self, view: Mapping[str, Any], external_id: str, hash: str, view_id: str
    ) -> Any: ...


@dataclass
class FlowWithView:
    """First registration step: a modal view and the identifier routing its callbacks."""

    identifier: str
    view: dict[str, Any]

    def with_follow_ups(
        self, follow_ups: Mapping[str, Handler]
    ) -> "FlowWithViewAndFollowUps":
        """Attach handlers, keyed by interaction type, for what the user does in the modal."""
        return FlowWithViewAndFollowUps(self.identifier, self.view, dict(follow_ups))


@dataclass
class FlowWithViewAndFollowUps(FlowWithView):
    """A modal view together with its follow-up handlers."""

    follow_ups: dict[str, Handler] = field(default_factory=dict)


def for_view(identifier: str, view: Mapping[str, Any]) -> FlowWithView:
    """Begin registering a modal view under an identifier."""
    return FlowWithView(identifier, dict(view))


def update_view_for_button_press(
    identifier: str, button_id: str, updater: ViewUpdater, view: Mapping[str, Any]
) -> PartialHandler:
    """Handle a press of the identified button by replacing the open view with ``view``."""

    def handle(callback: Mapping[str, Any], logger: Any) -> tuple[bool, Optional[bytes]]:
        log = logger or _log
        actions = callback.get("actions") or []
        if actions:
            action = actions[0]
            if action.get("type") == "button" and action.get("value") == button_id:
                log.debug(
                    "The %s button was pressed, updating the View for handler %s",
                    button_id,
                    identifier,
                )
                current = callback.get("view") or {}
                try:
                    updater.update_view(
                        view, "", current.get("hash", ""), current.get("id", "")
                    )
                except Exception:
                    log.warning("Failed to update a modal View.", exc_info=True)
                    raise
                return True, None
        return False, None

    return partial_handler_func(identifier, handle)


def _plain(text: str) -> dict[str, Any]:
    return {"type": "plain_text", "text": text}


def _markdown_section(text: str) -> dict[str, Any]:
    return {"type": "section", "text": {"type": "mrkdwn", "text": text}}


def pending_jira_view() -> dict[str, Any]:
    """Placeholder shown while a Jira issue is being filed."""
    return {
        "type": "modal",
        "private_metadata": IDENTIFIER_JIRA_PENDING,
        "title": _plain("Creating Jira Issue..."),
        "blocks": [
            _markdown_section("A Jira issue is being filed, please do not close this window...")
        ],
    }


def not_enabled_view() -> dict[str, Any]:
    """Placeholder shown when filing Jira issues is disabled."""
    return {
        "type": "modal",
        "private_metadata": IDENTIFIER_JIRA_PENDING,
        "title": _plain("Creating Jira Issue..."),
        "blocks": [
            _markdown_section(
                "This feature is not implemented. Please contact #forum-ocp-crt for more details"
            )
        ],
    }


def jira_view(key: str) -> dict[str, Any]:
    """Modal linking to the Jira issue that was just created."""
    return {
        "type": "modal",
        "private_metadata": IDENTIFIER_JIRA,
        "title": _plain("Jira Issue Created"),
        "close": _plain("OK"),
        "blocks": [
            _markdown_section(f"A Jira issue was filed: <{JIRA_BROWSE_URL}{key}|{key}>")
        ],
    }


def error_view(action: str, error: Any) -> dict[str, Any]:
    """Modal telling the user that an action failed."""
    return {
        "type": "modal",
        "private_metadata": IDENTIFIER_ERROR,
        "title": _plain("Error Occurred"),
        "close": _plain("OK"),
        "blocks": [
            _markdown_section(f"We encountered an error trying to {action}:\n>{error}")
        ],
    }


def _state_values(callback: Mapping[str, Any]) -> dict[str, dict[str, Any]]:
    view = callback.get("view") or {}
    state = view.get("state") or {}
    return state.get("values") or {}


def _actions(block: Optional[Mapping[str, Any]]) -> Iterable[Mapping[str, Any]]:
    return (block or {}).values()


def _selected_option_value(action: Mapping[str, Any]) -> str:
    return (action.get("selected_option") or {}).get("value", "") or ""


def values_for(callback: Mapping[str, Any], *block_ids: str) -> dict[str, str]:
    """Collect submitted values for the given block ids.

    Plain text inputs are keyed by their block id; selections are keyed by
    the block id joined to the select type, as a block may hold several.
    """
    state = _state_values(callback)
    values: dict[str, str] = {}
    for block_id in block_ids:
        for action in _actions(state.get(block_id)):
            kind = action.get("type", "")
            if kind == PLAIN_TEXT_INPUT:
                values[block_id] = action.get("value", "") or ""
            elif kind == OPT_TYPE_CHANNELS:
                values[f"{block_id}_{kind}"] = action.get("selected_channel", "") or ""
            elif kind == OPT_TYPE_CONVERSATIONS:
                values[f"{block_id}_{kind}"] = action.get("selected_conversation", "") or ""
            elif kind == OPT_TYPE_USER:
                values[f"{block_id}_{kind}"] = action.get("selected_user", "") or ""
            elif kind == OPT_TYPE_STATIC:
                values[f"{block_id}_{kind}"] = _selected_option_value(action)
    return values


def to_bullet_list(text: str) -> str:
    """Turn each non-blank line into a ``* item`` bullet."""
    return "\n".join(f"* {line.strip()}" for line in text.split("\n") if line.strip())


def callback_selection(callback: Mapping[str, Any]) -> dict[str, str]:
    """Selected option labels and selected users, keyed by block id."""
    selections: dict[str, str] = {}
    for key, block in _state_values(callback).items():
        for action in _actions(block):
            option = action.get("selected_option") or {}
            if option.get("value"):
                selections[key] = (option.get("text") or {}).get("text", "") or ""
            if action.get("selected_user"):
                selections[key] = action["selected_user"]
    return selections


def callback_input(callback: Mapping[str, Any]) -> dict[str, str]:
    """Non-empty text input values, keyed by block id."""
    inputs: dict[str, str] = {}
    for key, block in _state_values(callback).items():
        for action in _actions(block):
            if action.get("value"):
                inputs[key] = action["value"]
    return inputs


def callback_multiple_select(callback: Mapping[str, Any]) -> dict[str, list[str]]:
    """Values of multi-select choices, keyed by block id."""
    selected: dict[str, list[str]] = {}
    for key, block in _state_values(callback).items():
        selections: list[str] = []
        for action in _actions(block):
            options = action.get("selected_options") or []
            if options:
                selections.extend(option.get("value", "") for option in options)
                selected[key] = selections
    return selected


def callback_input_all(callback: Mapping[str, Any]) -> dict[str, str]:
    """Selections and text inputs merged; text inputs win on a shared key."""
    merged = dict(callback_selection(callback))
    merged.update(callback_input(callback))
    return merged


def validation_error(errors: Mapping[str, str]) -> bytes:
    """Encode a view submission response reporting per-block validation errors."""
    response: dict[str, Any] = {"response_action": RESPONSE_ACTION_ERRORS}
    if errors:
        response["errors"] = {key: errors[key] for key in sorted(errors)}
    return json.dumps(response, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def build_options(
    options: Iterable[str], blacklist: Optional[Iterable[str]]
) -> list[dict[str, Any]]:
    """Build select options for every entry not in the blacklist, keeping their order."""
    excluded = set(blacklist or ())
    return [
        {"text": _plain(option), "value": option}
        for option in options
        if option not in excluded
    ]