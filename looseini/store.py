"""Section assembly for one parse pass.

Responsibilities:
- Own the global section and the ordered list of named sections.
- Apply classified lines to the section the cursor points at.
- Freeze the collected sections into a `Configuration`.
"""

from __future__ import annotations

from .config import ParserOptions
from .models.datatypes import Configuration, Section
from .scanning.classifier import LineKind, SectionHeader


class SectionStore:
    """Accumulate classifier output into sections.

    The current-section cursor is not kept on the store. Callers pass it into
    `apply` and keep the returned section for the next line, starting from
    `global_section`.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        """Create the global section before any line is seen."""

        self._comment_markers = (options or ParserOptions()).comment_markers
        self.global_section = Section("", self._comment_markers)
        self._sections: list[Section] = []

    def apply(self, cursor: Section, line: LineKind) -> Section:
        """Apply one classified line and return the cursor for the next line.

        A header appends a new section, even for a repeated or empty name,
        and moves the cursor to it. An option is written into `cursor`.
        """

        if isinstance(line, SectionHeader):
            section = Section(line.name, self._comment_markers)
            self._sections.append(section)
            return section

        cursor._set_option(line.key, line.raw_value)
        return cursor

    @property
    def section_count(self) -> int:
        return len(self._sections)

    def build(self, source_label: str | None = None) -> Configuration:
        """Return the assembled configuration."""

        return Configuration(
            global_section=self.global_section,
            sections=tuple(self._sections),
            source_label=source_label,
        )
