"""Unit tests for parser option validation and loaders."""

from __future__ import annotations

import pytest

from looseini.config import OptionsLoader, ParserOptions


def test_default_options() -> None:
    """Defaults use `#` comments, `=` only, and UTF-8 decoding."""

    options = ParserOptions()
    options.validate()

    assert options.comment_markers == ("#",)
    assert options.separators == ("=",)
    assert options.encoding == "utf-8"


def test_from_mapping_normalizes_values() -> None:
    """Mapping loader accepts marker strings and permissive booleans."""

    options = OptionsLoader.from_mapping(
        {"comment_markers": " #;# ", "extended_separators": " yes ", "encoding": " latin-1 "}
    )

    assert options.comment_markers == ("#", ";")
    assert options.extended_separators is True
    assert options.separators == ("=", ":")
    assert options.encoding == "latin-1"


def test_from_mapping_accepts_marker_lists() -> None:
    """Multi-character markers can be given as a list."""

    options = OptionsLoader.from_mapping({"comment_markers": ["//", " ; "]})

    assert options.comment_markers == ("//", ";")


def test_from_mapping_rejects_unknown_keys_and_bad_values() -> None:
    """Mapping loader fails clearly on unsupported keys and invalid values."""

    with pytest.raises(ValueError, match=r"unsupported key\(s\): strict"):
        OptionsLoader.from_mapping({"strict": True})

    with pytest.raises(ValueError, match=r"`extended_separators` must be a boolean value"):
        OptionsLoader.from_mapping({"extended_separators": "maybe"})

    with pytest.raises(ValueError, match=r"at least one marker"):
        OptionsLoader.from_mapping({"comment_markers": "   "})

    with pytest.raises(ValueError, match=r"blank marker"):
        OptionsLoader.from_mapping({"comment_markers": ["#", " "]})

    with pytest.raises(ValueError, match=r"Unsupported `encoding` value `no-such-codec`"):
        OptionsLoader.from_mapping({"encoding": "no-such-codec"})


def test_from_env_reads_prefixed_variables() -> None:
    """Environment loader reads `LOOSEINI_*` keys and ignores blank values."""

    options = OptionsLoader.from_env(
        {
            "LOOSEINI_COMMENT_MARKERS": ";",
            "LOOSEINI_EXTENDED_SEPARATORS": "on",
            "LOOSEINI_ENCODING": "  ",
        }
    )

    assert options == ParserOptions(
        comment_markers=(";",), extended_separators=True, encoding="utf-8"
    )
    assert OptionsLoader.from_env({}) == ParserOptions()


def test_from_env_rejects_invalid_boolean() -> None:
    """Environment booleans use the same accepted tokens."""

    with pytest.raises(
        ValueError,
        match=r"Environment variable `LOOSEINI_EXTENDED_SEPARATORS` must be a boolean value",
    ):
        OptionsLoader.from_env({"LOOSEINI_EXTENDED_SEPARATORS": "2"})


def test_from_env_defaults_to_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit mapping the process environment is used."""

    monkeypatch.setenv("LOOSEINI_COMMENT_MARKERS", "!")
    monkeypatch.delenv("LOOSEINI_EXTENDED_SEPARATORS", raising=False)

    assert OptionsLoader.from_env().comment_markers == ("!",)


@pytest.mark.parametrize(
    "options",
    [
        ParserOptions(comment_markers="#"),  # type: ignore[arg-type]
        ParserOptions(comment_markers=("",)),
        ParserOptions(comment_markers=(" #",)),
        ParserOptions(extended_separators="yes"),  # type: ignore[arg-type]
    ],
)
def test_validate_rejects_malformed_options(options: ParserOptions) -> None:
    """Direct construction is validated before use."""

    with pytest.raises(ValueError):
        options.validate()
