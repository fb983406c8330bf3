"""Core datatypes for parsed configurations.

Responsibilities:
- Represent sections as key-unique option maps holding raw values.
- Represent a whole parse result: one global section plus named sections in
  file order.
- Expose read-only accessors, including comment-stripped value lookups.

Key types:
- `Section`, `Configuration`.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from types import MappingProxyType
from typing import Iterator, Mapping

from ..config import DEFAULT_COMMENT_MARKERS
from ..scanning.values import strip_comments


class Section:
    """A named group of options.

    Options keep the raw value text exactly as captured. Only the reader that
    creates a section writes to it; callers get read-only views.
    """

    __slots__ = ("_name", "_options", "_comment_markers")

    def __init__(
        self,
        name: str,
        comment_markers: tuple[str, ...] = DEFAULT_COMMENT_MARKERS,
    ) -> None:
        self._name = name
        self._options: dict[str, str] = {}
        self._comment_markers = comment_markers

    @property
    def name(self) -> str:
        return self._name

    @property
    def options(self) -> Mapping[str, str]:
        """Read-only mapping of option keys to raw values."""

        return MappingProxyType(self._options)

    @property
    def comment_markers(self) -> tuple[str, ...]:
        return self._comment_markers

    def value_of(self, key: str) -> str | None:
        """Return the raw value for `key`, or `None` when the key is absent."""

        return self._options.get(key)

    def value_without_comments(self, key: str) -> str | None:
        """Return the comment-stripped value for `key`, or `None` when absent."""

        raw_value = self._options.get(key)
        if raw_value is None:
            return None
        return strip_comments(raw_value, self._comment_markers)

    def option_names(self) -> list[str]:
        return list(self._options)

    def has_option(self, key: str) -> bool:
        return key in self._options

    def _set_option(self, key: str, raw_value: str) -> None:
        # last write wins
        self._options[key] = raw_value

    def __contains__(self, key: object) -> bool:
        return key in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __repr__(self) -> str:
        return f"Section(name={self._name!r}, options={len(self._options)})"


@dataclass(frozen=True, slots=True)
class Configuration:
    """Result of one parse pass.

    Attributes:
        global_section: Implicit section holding options seen before any header.
        sections: Named sections in header order. Duplicate names are kept as
            separate entries; the global section is never listed here.
        source_label: Opaque label of the parsed source, used in diagnostics.
    """

    global_section: Section
    sections: tuple[Section, ...] = ()
    source_label: str | None = None

    def all_sections(self) -> tuple[Section, tuple[Section, ...]]:
        """Return the global section and the named sections."""

        return self.global_section, self.sections

    def section(self, name: str) -> Section | None:
        """Return the first section called `name`, searching the global section first."""

        for candidate in self:
            if candidate.name == name:
                return candidate
        return None

    def sections_named(self, name: str) -> list[Section]:
        """Return every named section called `name` in header order."""

        return [candidate for candidate in self.sections if candidate.name == name]

    def find_sections(self, pattern: str | re.Pattern[str]) -> list[Section]:
        """Return sections whose name matches `pattern` (`re.search` semantics).

        The global section is included and comes first when it matches.
        """

        compiled = re.compile(pattern)
        return [candidate for candidate in self if compiled.search(candidate.name)]

    def __iter__(self) -> Iterator[Section]:
        yield self.global_section
        yield from self.sections

    def __len__(self) -> int:
        return 1 + len(self.sections)
