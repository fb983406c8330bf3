"""Shared typed data models for looseini.

This package contains the section and configuration types returned by the
reader.
"""

from .datatypes import Configuration, Section

__all__ = ["Configuration", "Section"]
