"""Telemetry and observability helpers.

This package emits deterministic parse events for auditing reader behavior.
"""

from .logger import ParseLogger

__all__ = ["ParseLogger"]
