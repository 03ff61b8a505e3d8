"""Small text helpers shared across the bot."""

from __future__ import annotations

LAUNCH_LABEL = "ci-chat-bot.openshift.io/launch"

CORE_OS_URL = "https://coreos.slack.com"
USER_TAG = "ci-chat-bot/user"
CHANNEL_TAG = "ci-chat-bot/channel"
EXPIRY_TIME_TAG = "ci-chat-bot/expiry-time"
REQUEST_TIME_TAG = "ci-chat-bot/request-time"


def strip_links(text: str) -> str:
    """Replace Slack-formatted links (``<url>`` or ``<url|label>``) with their visible text."""
    pieces: list[str] = []
    while True:
        start = text.find("<")
        if start == -1:
            pieces.append(text)
            break
        rest = text[start:]
        end = rest.find(">")
        if end == -1:
            pieces.append(text)
            break
        pipe = rest.find("|")
        pieces.append(text[:start])
        if pipe == -1 or pipe > end:
            pieces.append(rest[1:end])
        else:
            pieces.append(rest[pipe + 1:end])
        text = rest[end + 1:]
    return "".join(pieces)


def params_from_annotation(value: str) -> dict[str, str]:
    """Parse a comma-separated ``KEY[=VALUE]`` list into a dictionary.

    Raises ValueError for empty items or empty parameter names.
    """
    values: dict[str, str] = {}
    if not value:
        return values
    for part in value.split(","):
        if not part:
            raise ValueError("parameter may not be empty")
        key, sep, param_value = part.partition("=")
        key = key.strip()
        if not key:
            raise ValueError("parameter name may not be empty")
        values[key] = param_value if sep else ""
    return values