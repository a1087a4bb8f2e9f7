"""Unit and property tests for pocketutils.text.strings."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pocketutils.text.strings import first_upper_case, truncate, visual_width


@pytest.mark.parametrize(
    "text, width",
    [("", 0), ("abc", 3), ("中文abc", 7), ("é", 2), ("日本語", 6), ("~\t", 2)],
)
def test_visual_width(text, width):
    assert visual_width(text) == width


def test_truncate_returns_text_within_budget():
    assert truncate("abc", 3) == "abc"
    assert truncate("中文", 4) == "中文"


def test_truncate_mixed_width():
    """The kept prefix is the first one that reaches the requested width."""
    result = truncate("中文abc", 6)
    assert result == "中文ab..."
    assert visual_width(result[:-3]) == 6


def test_truncate_never_splits_wide_character():
    assert truncate("中文字符串", 8) == "中文字符..."
    # "中" overshoots a budget of 1 and is kept whole
    assert truncate("中文", 1) == "中..."


def test_truncate_ascii():
    assert truncate("Hello World", 8) == "Hello Wo..."


@pytest.mark.parametrize(
    "text, width, expected",
    [("abc", 1, "a..."), ("abcdef", 0, "..."), ("abc", -2, "...")],
)
def test_truncate_small_budgets(text, width, expected):
    assert truncate(text, width) == expected


def test_truncate_without_qualifying_prefix_returns_text():
    """The scan stops before the last character, so this text comes back whole."""
    assert truncate("中中中", 5) == "中中中"


def test_truncate_custom_suffix():
    assert truncate("abcdefgh", 5, suffix="…") == "abcde…"
    assert truncate("abcdefgh", 4, suffix="") == "abcd"


@pytest.mark.property
@given(st.text(), st.integers(min_value=0, max_value=40))
def test_truncate_is_idempotent(text, width):
    """Truncating a truncated result under the same width changes nothing."""
    once = truncate(text, width)
    assert truncate(once, width) == once


@pytest.mark.property
@given(st.text(), st.integers(min_value=0, max_value=40))
def test_truncate_prefix_reaches_width(text, width):
    result = truncate(text, width)
    if result != text:
        prefix = result[:-3]
        assert result.endswith("...")
        assert text.startswith(prefix)
        assert visual_width(prefix) in (width, width + 1)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("hello world", "Hello World"),
        ("HELLO WORLD", "Hello World"),
        ("élan vital", "élan Vital"),
        ("a-b c_d", "A-b C_d"),
        ("", ""),
    ],
)
def test_first_upper_case(text, expected):
    assert first_upper_case(text) == expected
