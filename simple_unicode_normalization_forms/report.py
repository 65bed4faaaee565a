from __future__ import annotations

import unicodedata

from .codepoints import classify
from .normalize import NormalizationOptions, step


def codepoint_report(text: str, options: NormalizationOptions) -> list[dict]:
    """Explain, character by character, what the pipeline does with ``text``.

    ``emitted`` is what the character contributes before the final NFC/trim;
    ``whitespace_run`` is the scan state after it.
    """
    allow = options.allow_chars()
    rows: list[dict] = []
    previous = False
    for ch in text:
        emitted, previous = step(
            ch,
            previous,
            allow,
            collapse_whitespace=options.collapse_whitespace,
            remove_emojis=options.remove_emojis,
        )
        rows.append(
            {
                "codepoint": f"U+{ord(ch):04X}",
                "name": unicodedata.name(ch, ""),
                "category": classify(ch, allow, remove_emojis=options.remove_emojis),
                "emitted": emitted or "",
                "whitespace_run": previous,
            }
        )
    return rows
