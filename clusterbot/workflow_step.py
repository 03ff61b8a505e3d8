"""Saving the configuration of the bot's workflow step."""

from __future__ import annotations

from typing import Any, Mapping

WORKFLOW_STEP_OUTPUTS: tuple[tuple[str, str, str], ...] = (
    ("issue.key", "text", "Issue Key"),
    ("issue.link", "text", "Issue Link"),
    ("issue.summary", "text", "Issue Summary Field"),
)


def step_from_app_submit(
    callback: Mapping[str, Any],
) -> tuple[dict[str, dict[str, Any]], list[dict[str, str]]]:
    """Turn a workflow step edit submission into step inputs and outputs.

    Each block of the submitted view becomes one input; when a block holds
    several actions, the last one's value is kept.
    """
    view = callback.get("view") or {}
    state = view.get("state") or {}
    values = state.get("values") or {}

    inputs: dict[str, dict[str, Any]] = {}
    for block_id, actions in values.items():
        value = ""
        for action in (actions or {}).values():
            value = action.get("value", "") or ""
        inputs[block_id] = {"value": value, "skip_variable_replacement": False}

    outputs = [
        {"name": name, "type": kind, "label": label}
        for name, kind, label in WORKFLOW_STEP_OUTPUTS
    ]
    return inputs, outputs