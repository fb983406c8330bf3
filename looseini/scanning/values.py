"""Comment-stripped projection of raw option values."""

from __future__ import annotations

from typing import Iterable

from ..config import DEFAULT_COMMENT_MARKERS


def strip_comments(raw_value: str, comment_markers: Iterable[str] = DEFAULT_COMMENT_MARKERS) -> str:
    """Return `raw_value` cut at the earliest comment marker, right-trimmed.

    The marker itself is excluded. Without any marker the raw value is only
    right-trimmed, so applying the projection twice yields the same text.
    """

    cut = len(raw_value)
    for marker in comment_markers:
        position = raw_value.find(marker, 0, cut)
        if position != -1:
            cut = position
    return raw_value[:cut].rstrip()
