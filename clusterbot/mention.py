"""Replies to messages that mention the bot, pointing users at interactive workflows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

UNKNOWN_REQUEST_TEXT = (
    "Sorry, I don't know how to help with that. Here are all the things I know how to do:"
)
GUESSED_REQUEST_TEXT = "It looks like you're trying to do one of the following:"


@dataclass(frozen=True)
class _Interaction:
    identifier: str
    description: str
    button_text: str


# Interactive workflows offered in reply to a mention.
_INTERACTIONS: tuple[_Interaction, ...] = ()


def _divider() -> dict[str, Any]:
    return {"type": "divider"}


def _plain_section(text: str) -> dict[str, Any]:
    return {"type": "section", "text": {"type": "plain_text", "text": text}}


def _offer(interaction: _Interaction) -> dict[str, Any]:
    return {
        "type": "section",
        "text": {
            "type": "mrkdwn",
            "text": f"*{interaction.button_text}*\n{interaction.description}",
        },
        "accessory": {
            "type": "button",
            "text": {"type": "plain_text", "text": interaction.button_text},
            "value": interaction.identifier,
        },
    }


def response_for(message: str) -> list[dict[str, Any]]:
    """Build the Slack blocks replying to a mention with the given text."""
    blocks: list[dict[str, Any]] = []
    for interaction in _INTERACTIONS:
        if interaction.identifier in message:
            blocks.extend((_divider(), _offer(interaction)))

    if not blocks:
        blocks.append(_plain_section(UNKNOWN_REQUEST_TEXT))
        for interaction in _INTERACTIONS:
            blocks.extend((_divider(), _offer(interaction)))
    else:
        blocks.insert(0, _plain_section(GUESSED_REQUEST_TEXT))
    return blocks