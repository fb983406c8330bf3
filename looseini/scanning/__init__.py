"""Line scanning components.

This package classifies physical lines into headers and options and derives
comment-stripped views of raw values.
"""

from .classifier import LineClassifier, LineKind, OptionEntry, SectionHeader
from .values import strip_comments

__all__ = [
    "LineClassifier",
    "LineKind",
    "OptionEntry",
    "SectionHeader",
    "strip_comments",
]
