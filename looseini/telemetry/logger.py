"""Structured parse logging utilities.

Responsibilities:
- Emit concise, deterministic phase-level parse events through `loguru`.
- Keep diagnostics free of option values; only labels and counts are logged.

`looseini` disables its loguru records on import. Hosts opt in with
`logger.enable("looseini")`, or by giving `ParseLogger` an explicit sink.
"""

from __future__ import annotations

from typing import TextIO

from loguru import logger as _loguru_logger

PACKAGE_NAME = "looseini"
_SAFE_PUNCTUATION = frozenset("-_.:/")


def _context_token(value: object) -> str:
    """Render one context value as a single shell-safe token."""

    text = str(value).strip()
    if not text:
        return "none"
    return "".join(ch if ch.isalnum() or ch in _SAFE_PUNCTUATION else "_" for ch in text)


def _render_event(level: str, stage: str, event: str, context: dict[str, object]) -> str:
    """Build the `[parse] ...` line with context keys in sorted order."""

    head = f"[parse] level={level} stage={stage} event={event}"
    tail = "".join(f" {key}={_context_token(context[key])}" for key in sorted(context))
    return head + tail


class ParseLogger:
    """Emit deterministic phase logs for reader activity.

    Without a sink, events go to whatever handlers the host configured, and
    only once the host has enabled the `looseini` records. With an explicit
    `sink`, the package records are enabled and one handler is added for that
    sink; `close()` removes exactly that handler and disables the records again.
    """

    def __init__(self, sink: TextIO | None = None, level: str = "DEBUG") -> None:
        """Initialize the logger and optionally route events to `sink`."""

        self._logger = _loguru_logger.bind(component=PACKAGE_NAME)
        self._handler_id: int | None = None
        if sink is not None:
            _loguru_logger.enable(PACKAGE_NAME)
            self._handler_id = _loguru_logger.add(
                sink,
                format="{message}",
                level=level,
                colorize=False,
                filter=PACKAGE_NAME,
            )

    def close(self) -> None:
        """Remove the handler added for an explicit sink, if any."""

        if self._handler_id is None:
            return
        _loguru_logger.remove(self._handler_id)
        self._handler_id = None
        _loguru_logger.disable(PACKAGE_NAME)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        self._logger.log(level, _render_event(level, stage, event, context))

    def log_read_start(self, source: str | None) -> None:
        self._emit("DEBUG", "start", "read", source=source or "")

    def log_section_open(self, name: str, line_number: int) -> None:
        self._emit("DEBUG", "open", "section", line_number=line_number, name=name)

    def log_read_complete(self, source: str | None, lines: int, sections: int) -> None:
        """Emit a read-complete event with line and named-section counts."""

        self._emit("INFO", "complete", "read", lines=lines, sections=sections, source=source or "")

    def log_read_failure(self, source: str | None, error_type: str, line_number: int) -> None:
        """Emit a read-failure event without the offending line text."""

        self._emit(
            "ERROR",
            "failure",
            "read",
            error_type=error_type,
            line_number=line_number,
            source=source or "",
        )
