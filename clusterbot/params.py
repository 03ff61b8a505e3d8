"""Parsing of user-supplied job parameters such as ``"KEY=VALUE","OTHER=VALUE"``."""

from __future__ import annotations

import re

_MARKDOWN_LINK = re.compile(r"<(.*)\|(.*)>")


def parse_parameter_value(value: str) -> str:
    """Return the label of a Slack link ``<url|label>``, or the value unchanged."""
    found = _MARKDOWN_LINK.fullmatch(value)
    if found is not None:
        return found.group(2)
    return value


def build_job_params(params: str) -> dict[str, str]:
    """Parse a comma-separated list of double-quoted ``KEY=VALUE`` pairs.

    Typographic quotes are accepted in place of straight ones. Raises
    ValueError when the list is not quoted or an item is not ``KEY=VALUE``.
    """
    split_params: list[str] = []
    if params:
        params = params.replace("\u201c", '"').replace("\u201d", '"')
        if '"' not in params:
            raise ValueError(
                f"unable to parse `{params}` for parameters. "
                "Please ensure that you're using double quotes to enclose variables"
            )
        split_params = params.split('","')
        first = split_params[0]
        if first.startswith('"'):
            split_params[0] = first[1:]
        last = split_params[-1]
        if last.endswith('"'):
            split_params[-1] = last[:-1]

    job_params: dict[str, str] = {}
    for combined in split_params:
        pieces = combined.split("=")
        if len(pieces) != 2:
            raise ValueError(
                f"unable to interpret `{combined}` as a parameter. "
                "Please ensure that all parameters are in the form of KEY=VALUE"
            )
        key, value = pieces
        job_params[key] = parse_parameter_value(value)
    return job_params