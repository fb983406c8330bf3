"""Parse entry points.

Responsibilities:
- Turn caller-supplied streams or strings into numbered physical lines.
- Drive `LineClassifier` and `SectionStore` through one synchronous pass.
- Attach line numbers and source labels to format failures.

The reader never opens or closes sources; acquiring the stream is left to
the caller.
"""

from __future__ import annotations

import io
from typing import Iterable

from .config import ParserOptions
from .errors import FormatError
from .models.datatypes import Configuration
from .scanning.classifier import LineClassifier, SectionHeader
from .store import SectionStore
from .telemetry.logger import ParseLogger


def read(
    source: Iterable[str] | Iterable[bytes],
    label: str | None = None,
    options: ParserOptions | None = None,
    logger: ParseLogger | None = None,
) -> Configuration:
    """Parse every line of `source` into a `Configuration`.

    Args:
        source: Text stream, binary stream, or any iterable of physical lines.
            Byte lines are decoded with `options.encoding`.
        label: Opaque source label used only in diagnostics. Defaults to the
            stream's `name` attribute when it is a string.
        options: Parser settings; defaults to `ParserOptions()`.
        logger: Event logger; defaults to a `ParseLogger` on the host's loguru
            handlers, silent until `looseini` records are enabled.

    Raises:
        FormatError: On the first line shaped like a misplaced section header.
            No partial configuration is returned.
        UnicodeDecodeError: If a byte line cannot be decoded; a note names the
            line number and source label.
        TypeError: If `source` is a plain `str` or `bytes` value.
    """

    if isinstance(source, (str, bytes, bytearray)):
        raise TypeError("`source` must yield lines; use `read_string` for in-memory text.")

    resolved_options = options or ParserOptions()
    resolved_options.validate()
    source_label = label if label is not None else _stream_name(source)
    run_logger = logger or ParseLogger()

    classifier = LineClassifier(resolved_options)
    store = SectionStore(resolved_options)
    cursor = store.global_section

    run_logger.log_read_start(source_label)
    line_number = 0
    for line_number, raw_line in enumerate(source, start=1):
        try:
            decoded = _decode(raw_line, resolved_options.encoding)
        except UnicodeDecodeError as exc:
            run_logger.log_read_failure(source_label, type(exc).__name__, line_number)
            where = source_label or "<unlabeled source>"
            exc.add_note(f"while decoding line {line_number} of {where}")
            raise
        line = _strip_terminator(decoded)
        try:
            classified = classifier.classify(line)
        except FormatError as exc:
            run_logger.log_read_failure(source_label, type(exc).__name__, line_number)
            raise exc.with_location(line_number=line_number, source=source_label) from None
        if isinstance(classified, SectionHeader):
            run_logger.log_section_open(classified.name, line_number)
        cursor = store.apply(cursor, classified)

    run_logger.log_read_complete(source_label, line_number, store.section_count)
    return store.build(source_label)


def read_string(
    text: str,
    label: str | None = None,
    options: ParserOptions | None = None,
    logger: ParseLogger | None = None,
) -> Configuration:
    """Parse in-memory text. A final line terminator does not add a blank line."""

    return read(io.StringIO(text), label=label, options=options, logger=logger)


def _stream_name(source: object) -> str | None:
    name = getattr(source, "name", None)
    if isinstance(name, str):
        return name
    return None


def _decode(raw_line: str | bytes, encoding: str) -> str:
    if isinstance(raw_line, (bytes, bytearray)):
        return bytes(raw_line).decode(encoding)
    return raw_line


def _strip_terminator(line: str) -> str:
    """Drop one trailing `\\n`, then one trailing `\\r`."""

    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line
