"""Domain exceptions for parse diagnostics."""

from __future__ import annotations


class FormatError(ValueError):
    """Raised when a line has the shape of a broken section header."""

    def __init__(
        self,
        *,
        line: str,
        line_number: int | None = None,
        source: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize a line-scoped format error."""

        self.line = line
        self.line_number = line_number
        self.source = source
        self.hint = hint
        super().__init__(self._render())

    def _render(self) -> str:
        """Render `source:line_number: detail` with unavailable parts omitted."""

        location = [
            str(part) for part in (self.source, self.line_number) if part is not None
        ]
        detail = f"malformed section header: {self.line!r}"
        if not location:
            return detail
        return f"{':'.join(location)}: {detail}"

    def with_location(self, *, line_number: int, source: str | None) -> FormatError:
        """Return a copy of this error carrying line number and source label."""

        return FormatError(
            line=self.line,
            line_number=line_number,
            source=source,
            hint=self.hint,
        )
