"""Top-level package for looseini.

This package reads lenient, legacy INI-style text into sections of raw
key/value options. The main entry points are `read` and `read_string`.
"""

from loguru import logger as _loguru_logger

from .config import OptionsLoader, ParserOptions
from .errors import FormatError
from .models import Configuration, Section
from .reader import read, read_string
from .scanning import LineClassifier, OptionEntry, SectionHeader, strip_comments

__all__ = [
    "Configuration",
    "FormatError",
    "LineClassifier",
    "OptionEntry",
    "OptionsLoader",
    "ParserOptions",
    "Section",
    "SectionHeader",
    "__version__",
    "read",
    "read_string",
    "strip_comments",
]

__version__ = "0.1.0"

_loguru_logger.disable(__name__)
