from __future__ import annotations

import unicodedata
from typing import AbstractSet, Literal

from .emoji import is_emoji


Category = Literal["allow-listed", "whitespace", "emoji", "decomposable"]


# Masculine/feminine ordinal indicators (e.g. "1º", "2ª" in Spanish addresses).
ORDINAL_INDICATORS = frozenset({"º", "ª"})
TAB = "\t"
EOL_CHARS = frozenset({"\n", "\r"})

# Unicode White_Space property. str.isspace() is not used because it also
# accepts U+001C..U+001F, which are plain controls.
WHITESPACE = frozenset(
    {
        *(chr(cp) for cp in range(0x0009, 0x000E)),
        " ",
        "\u0085",
        "\u00a0",
        "\u1680",
        *(chr(cp) for cp in range(0x2000, 0x200B)),
        "\u2028",
        "\u2029",
        "\u202f",
        "\u205f",
        "\u3000",
    }
)

BMP_MAX = 0xFFFF
_AVOIDED_CATEGORIES = frozenset({"Cc", "Cs"})


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


def should_avoid(ch: str) -> bool:
    """True for decomposition output that must not reach the buffer.

    That is anything outside the Basic Multilingual Plane, C0/C1 controls and
    lone surrogates.
    """
    if ord(ch) > BMP_MAX:
        return True
    return unicodedata.category(ch) in _AVOIDED_CATEGORIES


def classify(ch: str, allow_chars: AbstractSet[str], *, remove_emojis: bool = False) -> Category:
    if ch in allow_chars:
        return "allow-listed"
    if ch in WHITESPACE:
        return "whitespace"
    if remove_emojis and is_emoji(ch):
        return "emoji"
    return "decomposable"
