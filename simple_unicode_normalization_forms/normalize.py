from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Optional, Tuple

from .codepoints import EOL_CHARS, ORDINAL_INDICATORS, TAB, WHITESPACE, should_avoid
from .emoji import is_emoji


@dataclass(frozen=True)
class NormalizationOptions:
    allow_tab: bool = False
    allow_eol: bool = True
    collapse_whitespace: bool = False
    remove_emojis: bool = False

    def allow_chars(self) -> frozenset[str]:
        chars = set(ORDINAL_INDICATORS)
        if self.allow_tab:
            chars.add(TAB)
        if self.allow_eol:
            chars.update(EOL_CHARS)
        return frozenset(chars)


REMOVE_EMOJIS_OPTIONS = NormalizationOptions(allow_eol=False, collapse_whitespace=True, remove_emojis=True)


def ensure_text(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


def decompose(ch: str) -> str:
    """Compatibility-decompose one character, keeping only BMP non-control output."""
    out = unicodedata.normalize("NFKD", ch)
    if len(out) == 1:
        return "" if should_avoid(out) else out
    return "".join(c for c in out if not should_avoid(c))


def step(
    ch: str,
    previous_was_whitespace: bool,
    allow_chars: AbstractSet[str],
    *,
    collapse_whitespace: bool,
    remove_emojis: bool,
) -> Tuple[Optional[str], bool]:
    """Decide what one input character contributes to the output.

    Returns ``(emit, next_state)`` where ``emit`` is the text to append (None
    for nothing) and ``next_state`` is whether the scan should now consider
    itself inside a whitespace run. Dropped emoji and characters whose whole
    decomposition is filtered out pass the incoming state through unchanged.
    """
    if ch in allow_chars:
        return ch, False
    if ch in WHITESPACE:
        if collapse_whitespace and previous_was_whitespace:
            return None, True
        return " ", True
    if remove_emojis and is_emoji(ch):
        return None, previous_was_whitespace
    out = decompose(ch)
    # Some compatibility forms (spacing diacritics, Arabic presentation forms)
    # decompose to a leading space, which must not extend a whitespace run.
    if collapse_whitespace and previous_was_whitespace:
        out = out.lstrip(" ")
    if not out:
        return None, previous_was_whitespace
    return out, out.endswith(" ")


def normalize(
    text: str,
    allow_chars: AbstractSet[str],
    collapse_whitespace: bool = False,
    remove_emojis: bool = False,
) -> str:
    buf: List[str] = []
    previous_was_whitespace = False
    for ch in text:
        emitted, previous_was_whitespace = step(
            ch,
            previous_was_whitespace,
            allow_chars,
            collapse_whitespace=collapse_whitespace,
            remove_emojis=remove_emojis,
        )
        if emitted:
            buf.append(emitted)
    # Decomposition split accented letters and voiced kana; put them back together.
    return unicodedata.normalize("NFC", "".join(buf)).strip(" ")


def clean(value: str, options: NormalizationOptions) -> str:
    text = ensure_text(value)
    return normalize(
        text,
        options.allow_chars(),
        collapse_whitespace=options.collapse_whitespace,
        remove_emojis=options.remove_emojis,
    ).strip()


def basic_string_clean(
    value: str,
    allow_tab: bool = False,
    allow_eol: bool = True,
    collapse_whitespace: bool = False,
    remove_emojis: bool = False,
) -> str:
    """Normalize ``value`` for matching: NFKC-like, BMP only, whitespace as spaces.

    Ordinal indicators always pass through untouched; tab and CR/LF pass
    through when ``allow_tab`` / ``allow_eol`` are set.
    """
    options = NormalizationOptions(
        allow_tab=allow_tab,
        allow_eol=allow_eol,
        collapse_whitespace=collapse_whitespace,
        remove_emojis=remove_emojis,
    )
    return clean(value, options)


def remove_emojis(value: str) -> str:
    """basic_string_clean preset that also drops emoji and collapses whitespace."""
    return clean(value, REMOVE_EMOJIS_OPTIONS)


def clean_many(values: Iterable[str], options: NormalizationOptions) -> List[str]:
    return [clean(v, options) for v in values]
