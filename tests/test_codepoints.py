from __future__ import annotations

from simple_unicode_normalization_forms.codepoints import (
    ORDINAL_INDICATORS,
    classify,
    is_whitespace,
    should_avoid,
)


def test_should_avoid_non_bmp() -> None:
    assert should_avoid("\U0001D45D")
    assert should_avoid("\U0001F600")
    assert not should_avoid("�")


def test_should_avoid_controls_and_surrogates() -> None:
    for ch in ["\x00", "\x08", "\x1f", "\x7f", "\x9e", "\x9f", "\ud800"]:
        assert should_avoid(ch)


def test_should_avoid_keeps_printable_and_marks() -> None:
    for ch in ["a", "Á", "\u0301", "\u3099", "\ufe0f", "\u200d", "ア"]:
        assert not should_avoid(ch)


def test_is_whitespace_follows_white_space_property() -> None:
    for ch in ["\t", "\n", "\x0b", "\x0c", "\r", " ", "\x85", "\xa0", "\u1680", "\u2003", "\u2028", "\u3000"]:
        assert is_whitespace(ch)
    for ch in ["\x1c", "\x1f", "\u200b", "a", "_"]:
        assert not is_whitespace(ch)


def test_classify_priority_order() -> None:
    allow = frozenset(ORDINAL_INDICATORS | {"\t"})
    assert classify("\t", allow) == "allow-listed"
    assert classify(" ", allow) == "whitespace"
    assert classify("😀", allow, remove_emojis=True) == "emoji"
    assert classify("😀", allow) == "decomposable"
    assert classify("º", allow, remove_emojis=True) == "allow-listed"
    assert classify("ｘ", allow, remove_emojis=True) == "decomposable"
