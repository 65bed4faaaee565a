from .codepoints import ORDINAL_INDICATORS, classify, is_whitespace, should_avoid
from .emoji import is_emoji
from .normalize import (
    NormalizationOptions,
    basic_string_clean,
    clean,
    normalize,
    remove_emojis,
    step,
)

__version__ = "0.1.0"

__all__ = [
    "NormalizationOptions",
    "ORDINAL_INDICATORS",
    "basic_string_clean",
    "classify",
    "clean",
    "is_emoji",
    "is_whitespace",
    "normalize",
    "remove_emojis",
    "should_avoid",
    "step",
    "__version__",
]
