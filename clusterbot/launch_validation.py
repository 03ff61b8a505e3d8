"""Validation of the version-filter step of the launch modal."""

from __future__ import annotations

from typing import Optional

from clusterbot.launch_context import (
    LAUNCH_FROM_CUSTOM,
    LAUNCH_FROM_LATEST_BUILD,
    LAUNCH_FROM_STREAM,
    CallbackData,
)
from clusterbot.modals import validation_error

ONLY_ONE_PARAMETER = "Select only one parameter!"


def check_variables(*values: str) -> bool:
    """Return True when at most one of the values is non-empty."""
    return sum(1 for value in values if value) <= 1


def validate_filter_version(data: CallbackData) -> Optional[bytes]:
    """Return a validation error response when more than one version source was chosen.

    Returns None when the submission is acceptable.
    """
    chosen = {
        key: data.input.get(key, "")
        for key in (LAUNCH_FROM_LATEST_BUILD, LAUNCH_FROM_CUSTOM, LAUNCH_FROM_STREAM)
    }
    if check_variables(*chosen.values()):
        return None
    errors = {key: ONLY_ONE_PARAMETER for key, value in chosen.items() if value}
    return validation_error(errors)