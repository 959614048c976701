from __future__ import annotations

import pytest

from flashdeck.errors import ParseError
from flashdeck.logic.tokenizer import tokenize


def test_preamble_and_values() -> None:
    tokens = tokenize(" 1 q/What is 2+2? a/4 t/math t/easy", "q/", "a/", "t/")

    assert tokens.preamble == "1"
    assert tokens.get_value("q/") == "What is 2+2?"
    assert tokens.get_value("a/") == "4"
    assert tokens.get_all_values("t/") == ["math", "easy"]
    assert tokens.get_value("h/") is None


def test_flag_needs_leading_whitespace() -> None:
    tokens = tokenize(" q/path/a/b", "q/", "a/")

    assert tokens.get_value("q/") == "path/a/b"
    assert tokens.get_value("a/") is None


def test_no_flags_keeps_everything_in_preamble() -> None:
    tokens = tokenize("  12  ", "q/")
    assert tokens.preamble == "12"
    assert not tokens.has("q/")


def test_empty_value_is_present() -> None:
    tokens = tokenize(" q/", "q/")
    assert tokens.has("q/")
    assert tokens.get_value("q/") == ""


def test_duplicate_single_valued_prefix_rejected() -> None:
    tokens = tokenize(" q/one q/two", "q/")
    with pytest.raises(ParseError) as excinfo:
        tokens.verify_no_duplicate_prefixes_for("q/", usage="usage text")
    assert "q/" in str(excinfo.value)
    assert excinfo.value.usage == "usage text"
