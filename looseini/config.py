"""Parser configuration model and loaders.

Responsibilities:
- Define parser behavior switches as a typed, immutable dataclass.
- Validate marker sets, separator mode, and byte decoding up front.
- Provide loader entry points for mapping- and environment-based configuration.

Key types:
- `ParserOptions`: normalized settings for one parse pass.
- `OptionsLoader`: static construction helpers for `ParserOptions`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from typing import Any, Mapping


DEFAULT_COMMENT_MARKERS: tuple[str, ...] = ("#",)
DEFAULT_ENCODING = "utf-8"

_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_BOOLEAN_HINT = "(`true`/`false`, `1`/`0`, `yes`/`no`, `on`/`off`)"


def _normalize_optional_string(value: object) -> str | None:
    """Return stripped text, or `None` for `None` and blank values."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value
    token = _normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Settings that control how lines are classified and values are stripped.

    Attributes:
        comment_markers: Markers that start an inline comment in a value. The
            first marker found truncates the comment-stripped view. Lines
            starting with a marker are never treated as broken headers.
        extended_separators: Accept `:` as a key/value separator besides `=`.
        encoding: Codec used to decode binary sources.
    """

    comment_markers: tuple[str, ...] = DEFAULT_COMMENT_MARKERS
    extended_separators: bool = False
    encoding: str = DEFAULT_ENCODING

    @property
    def separators(self) -> tuple[str, ...]:
        """Return accepted key/value separators."""

        if self.extended_separators:
            return ("=", ":")
        return ("=",)

    def validate(self) -> None:
        """Validate option values before a parse pass."""

        if isinstance(self.comment_markers, str) or not isinstance(
            self.comment_markers, tuple
        ):
            raise ValueError("`comment_markers` must be a tuple of strings.")
        for marker in self.comment_markers:
            if not isinstance(marker, str) or not marker.strip():
                raise ValueError("`comment_markers` must not contain blank markers.")
            if marker != marker.strip():
                raise ValueError(
                    f"Comment marker {marker!r} must not carry surrounding whitespace."
                )
        if not isinstance(self.extended_separators, bool):
            raise ValueError("`extended_separators` must be a boolean.")
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError) as exc:
            raise ValueError(f"Unsupported `encoding` value `{self.encoding}`.") from exc


class OptionsLoader:
    """Factory methods for creating `ParserOptions` from external sources."""

    _SUPPORTED_KEYS = frozenset({"comment_markers", "extended_separators", "encoding"})

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any], source_label: str = "options mapping"
    ) -> ParserOptions:
        """Create validated options from a plain mapping payload."""

        unknown = sorted(set(payload).difference(OptionsLoader._SUPPORTED_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        comment_markers = DEFAULT_COMMENT_MARKERS
        if "comment_markers" in payload:
            comment_markers = OptionsLoader._markers(
                payload["comment_markers"], f"{source_label} field `comment_markers`"
            )

        extended_separators = False
        if "extended_separators" in payload:
            extended_separators = OptionsLoader._boolean(
                payload["extended_separators"], f"{source_label} field `extended_separators`"
            )

        encoding = _normalize_optional_string(payload.get("encoding")) or DEFAULT_ENCODING

        options = ParserOptions(
            comment_markers=comment_markers,
            extended_separators=extended_separators,
            encoding=encoding,
        )
        options.validate()
        return options

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ParserOptions:
        """Create validated options from `LOOSEINI_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        comment_markers = DEFAULT_COMMENT_MARKERS
        raw_markers = _normalize_optional_string(env_map.get("LOOSEINI_COMMENT_MARKERS"))
        if raw_markers is not None:
            comment_markers = OptionsLoader._markers(
                raw_markers, "Environment variable `LOOSEINI_COMMENT_MARKERS`"
            )

        extended_separators = False
        raw_extended = _normalize_optional_string(env_map.get("LOOSEINI_EXTENDED_SEPARATORS"))
        if raw_extended is not None:
            extended_separators = OptionsLoader._boolean(
                raw_extended, "Environment variable `LOOSEINI_EXTENDED_SEPARATORS`"
            )

        encoding = (
            _normalize_optional_string(env_map.get("LOOSEINI_ENCODING")) or DEFAULT_ENCODING
        )

        options = ParserOptions(
            comment_markers=comment_markers,
            extended_separators=extended_separators,
            encoding=encoding,
        )
        options.validate()
        return options

    @staticmethod
    def _markers(raw: object, label: str) -> tuple[str, ...]:
        """Normalize a marker set given as a string of characters or a list of strings.

        A string such as `"#;"` declares one single-character marker per
        non-whitespace character. Duplicates are dropped, first occurrence wins.
        """

        if isinstance(raw, str):
            candidates = [character for character in raw if not character.isspace()]
        elif isinstance(raw, (list, tuple)):
            candidates = []
            for item in raw:
                marker = _normalize_optional_string(item)
                if marker is None:
                    raise ValueError(f"{label} contains a blank marker.")
                candidates.append(marker)
        else:
            raise ValueError(f"{label} must be a string or a list of strings.")

        if not candidates:
            raise ValueError(f"{label} must declare at least one marker.")
        return tuple(dict.fromkeys(candidates))

    @staticmethod
    def _boolean(raw: object, label: str) -> bool:
        """Parse a required boolean token."""

        parsed = _parse_permissive_boolean(raw)
        if parsed is None:
            raise ValueError(f"{label} must be a boolean value {_BOOLEAN_HINT}.")
        return parsed
