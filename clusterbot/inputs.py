"""Helpers for reading and presenting command inputs."""

from __future__ import annotations

from typing import Iterable

from clusterbot.utils import strip_links


def code_slice(items: Iterable[str]) -> list[str]:
    """Wrap each item in backticks so it renders as inline code."""
    return [f"`{item}`" for item in items]


def parse_image_input(text: str) -> list[str]:
    """Split a comma-separated list of images, versions or PRs.

    Slack link markup is reduced to its visible text and every item is
    trimmed. An empty input gives an empty list. Raises ValueError when
    an item is empty.
    """
    text = text.strip()
    if not text:
        return []
    parts = [part.strip() for part in strip_links(text).split(",")]
    if any(not part for part in parts):
        raise ValueError("image inputs must not contain empty items")
    return parts