"""
Token estimation.

A fixed tokens-per-character ratio per language. This is an approximation
for budgeting only, not a tokenizer: counts can be off by a wide margin
for any particular model.
"""

import math
from dataclasses import dataclass
from typing import Literal, Optional

from ..core import get_settings

Language = Literal["en", "zh"]


def tokens_per_char(language: str) -> float:
    settings = get_settings()
    return settings.tokens_per_char_zh if language == "zh" else settings.tokens_per_char_en


def estimate_tokens(text: str, language: str = "en", ratio: Optional[float] = None) -> int:
    """
    Approximate token count for text.

    Examples:
        >>> estimate_tokens("abcd", "en", ratio=0.25)
        1
        >>> estimate_tokens("", "zh")
        0
    """
    if not text:
        return 0
    return math.ceil(len(text) * (ratio if ratio is not None else tokens_per_char(language)))


@dataclass(frozen=True)
class TokenEstimate:
    component_docs: int
    examples: int
    color_info: int
    base: int

    @property
    def total(self) -> int:
        return self.component_docs + self.examples + self.color_info + self.base
