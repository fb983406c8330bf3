"""Physical line classification.

Responsibilities:
- Recognize bracketed section headers, including the lenient legacy shapes
  (`[[[name]`, unterminated `[name`, empty `[]`).
- Split everything else into an option key and raw value at the first
  accepted separator.
- Reject the narrow `foo[]` shape of a header written after other content.

Key types:
- `SectionHeader`: a line that opens a new section.
- `OptionEntry`: a line stored as an option of the current section.
- `LineClassifier`: stateless classifier bound to one `ParserOptions`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..config import ParserOptions
from ..errors import FormatError


SECTION_OPEN = "["
SECTION_CLOSE = "]"


@dataclass(frozen=True, slots=True)
class SectionHeader:
    """A header line.

    Attributes:
        name: Section name exactly as written between the brackets.
    """

    name: str


@dataclass(frozen=True, slots=True)
class OptionEntry:
    """An option line.

    Attributes:
        key: Option key, trimmed on both ends.
        raw_value: Value text with leading whitespace removed; inline comments kept.
    """

    key: str
    raw_value: str


LineKind = Union[SectionHeader, OptionEntry]


class LineClassifier:
    """Turn single physical lines into headers or option entries."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        """Bind separator and comment settings for subsequent lines."""

        self.options = options or ParserOptions()
        self._separators = self.options.separators

    def classify(self, line: str) -> LineKind:
        """Classify one line with its terminator already removed.

        Raises:
            FormatError: If the line looks like a section header that does not
                start the line, e.g. `foo[]`.
        """

        text = line.lstrip()
        if text.startswith(SECTION_OPEN):
            return SectionHeader(name=self._section_name(text))

        split_at = self._separator_index(text)
        if split_at is None:
            if self._is_misplaced_header(text):
                raise FormatError(
                    line=line,
                    hint="Section headers must start the line, e.g. `[name]`.",
                )
            return OptionEntry(key=text.strip(), raw_value="")

        return OptionEntry(
            key=text[:split_at].strip(),
            raw_value=text[split_at + 1 :].lstrip(),
        )

    @staticmethod
    def _section_name(text: str) -> str:
        """Extract the name following a run of open markers.

        Everything after the first close marker is discarded. A missing close
        marker lets the name run to the end of the line.
        """

        start = 1
        while start < len(text) and text[start] == SECTION_OPEN:
            start += 1
        end = text.find(SECTION_CLOSE, start)
        if end == -1:
            return text[start:]
        return text[start:end]

    def _separator_index(self, text: str) -> int | None:
        """Return the index of the leftmost accepted separator, if any."""

        positions = [text.find(separator) for separator in self._separators]
        found = [position for position in positions if position != -1]
        if not found:
            return None
        return min(found)

    def _is_misplaced_header(self, text: str) -> bool:
        """Return whether a separator-less line ends in a `[...]` group after content."""

        trimmed = text.rstrip()
        if trimmed.startswith(self.options.comment_markers):
            return False
        if not trimmed.endswith(SECTION_CLOSE):
            return False
        return trimmed.rfind(SECTION_OPEN) > 0
