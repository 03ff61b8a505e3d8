"""Identifiers and context handling for the multi-step cluster launch modal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

IDENTIFIER_INITIAL_VIEW = "launch"
IDENTIFIER_3RD_STEP = "launch3rdStep"
IDENTIFIER_PR_INPUT_VIEW = "pr_input_view"
IDENTIFIER_FILTER_VERSION_VIEW = "filter_version_view"
IDENTIFIER_REGISTER_LAUNCH_MODE = "launch_mode_view"
IDENTIFIER_SELECT_VERSION = "select_version"
IDENTIFIER_SELECT_MINOR_MAJOR = "select_minor_major"

STABLE_RELEASES_PREFIX = "4-stable"
LAUNCH_FROM_PR = "pr"
LAUNCH_FROM_MAJOR_MINOR = "major_minor"
LAUNCH_FROM_STREAM = "stream"
LAUNCH_FROM_LATEST_BUILD = "latest_build"
LAUNCH_FROM_RELEASE_CONTROLLER = "release_controller_version"
LAUNCH_FROM_CUSTOM = "custom"
LAUNCH_PLATFORM = "platform"
LAUNCH_ARCHITECTURE = "architecture"
LAUNCH_PARAMETERS = "parameters"
LAUNCH_VERSION = "version"
LAUNCH_STEP_CONTEXT = "context"
DEFAULT_PLATFORM = "hypershift-hosted"
DEFAULT_ARCHITECTURE = "amd64"
LAUNCH_MODE = "launch_mode"
LAUNCH_MODE_VERSION = "version"
LAUNCH_MODE_PR = "pr"
LAUNCH_MODE_PR_KEY = "One or multiple PRs"
LAUNCH_MODE_VERSION_KEY = "A Version"
LAUNCH_MODE_CONTEXT = "Launch Mode"

_TEXT_TYPES = frozenset({"plain_text", "mrkdwn"})

_CONTEXT_KEYS = {
    LAUNCH_ARCHITECTURE: LAUNCH_ARCHITECTURE,
    LAUNCH_PLATFORM: LAUNCH_PLATFORM,
    LAUNCH_VERSION: LAUNCH_VERSION,
    LAUNCH_FROM_PR: LAUNCH_FROM_PR,
    LAUNCH_MODE_CONTEXT.lower(): LAUNCH_MODE,
    LAUNCH_FROM_STREAM.lower(): LAUNCH_FROM_STREAM,
}


@dataclass
class CallbackData:
    """Values gathered from one submission of a launch modal step."""

    input: dict[str, str] = field(default_factory=dict)
    multiple_selection: dict[str, list[str]] = field(default_factory=dict)
    context: dict[str, str] = field(default_factory=dict)


def _context_text(callback: Mapping[str, Any]) -> str:
    """Return the text of the last context block of the callback's view."""
    text = ""
    view = callback.get("view") or {}
    for block in view.get("blocks") or []:
        if block.get("type") != "context":
            continue
        elements = block.get("elements") or []
        if elements and elements[0].get("type") in _TEXT_TYPES:
            text = elements[0].get("text", "")
    return text


def callback_context(callback: Mapping[str, Any]) -> dict[str, str]:
    """Read the ``Key: value;Key: value`` context line carried between launch steps.

    Keys and values are lower-cased; unknown keys are ignored. Raises ValueError
    when a segment has no ``:`` separator (including a missing context line).
    """
    context: dict[str, str] = {}
    for segment in _context_text(callback).split(";"):
        pieces = segment.split(":")
        if len(pieces) < 2:
            raise ValueError(f"malformed launch context segment: {segment!r}")
        key = pieces[0].strip().lower()
        value = pieces[1].strip().lower()
        target = _CONTEXT_KEYS.get(key)
        if target is not None:
            context[target] = value
    return context