"""Character classification by Unicode script/category."""

from __future__ import annotations

import re
from typing import Callable

from fuzzy_token_estimator.core.types import CharCategory, TextComposition

# Inclusive code point ranges treated as CJK.
CJK_RANGES: tuple[tuple[int, int], ...] = (
    (0x2E80, 0x2EFF),    # CJK Radicals Supplement
    (0x3000, 0x303F),    # CJK Symbols and Punctuation
    (0x3040, 0x309F),    # Hiragana
    (0x30A0, 0x30FF),    # Katakana
    (0x3100, 0x312F),    # Bopomofo
    (0x3130, 0x318F),    # Hangul Compatibility Jamo
    (0x3190, 0x319F),    # Kanbun
    (0x31A0, 0x31BF),    # Bopomofo Extended
    (0x31C0, 0x31EF),    # CJK Strokes
    (0x31F0, 0x31FF),    # Katakana Phonetic Extensions
    (0x3200, 0x32FF),    # Enclosed CJK Letters and Months
    (0x3300, 0x33FF),    # CJK Compatibility
    (0x3400, 0x4DBF),    # CJK Unified Ideographs Extension A
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0xA000, 0xA48F),    # Yi Syllables
    (0xA490, 0xA4CF),    # Yi Radicals
    (0xAC00, 0xD7AF),    # Hangul Syllables
    (0xF900, 0xFAFF),    # CJK Compatibility Ideographs
    (0xFE30, 0xFE4F),    # CJK Compatibility Forms
    (0xFF00, 0xFFEF),    # Halfwidth and Fullwidth Forms
    (0x20000, 0x2A6DF),  # Extension B
    (0x2A700, 0x2B73F),  # Extension C
    (0x2B740, 0x2B81F),  # Extension D
    (0x2B820, 0x2CEAF),  # Extension E
    (0x2CEB0, 0x2EBEF),  # Extension F
    (0x30000, 0x3134F),  # Extension G
)

_LATIN = re.compile(r"[a-zA-Z\u00c0-\u024f\u1e00-\u1eff]")
_DIGIT = re.compile(r"[0-9\u0660-\u0669\u06f0-\u06f9]")
# Space separators and line terminators; unlike str.isspace(), excludes \x1c-\x1f
_WHITESPACE = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
)


def is_cjk(char: str) -> bool:
    if not char:
        return False
    code = ord(char[0])
    for low, high in CJK_RANGES:
        if low <= code <= high:
            return True
    return False


def _always(char: str) -> bool:
    return True


# Evaluated top to bottom; the last rule matches everything.
CLASSIFICATION_RULES: tuple[tuple[Callable[[str], bool], CharCategory], ...] = (
    (is_cjk, CharCategory.CJK),
    (lambda char: _LATIN.match(char) is not None, CharCategory.LATIN),
    (lambda char: _DIGIT.match(char) is not None, CharCategory.DIGIT),
    (lambda char: _WHITESPACE.match(char) is not None, CharCategory.WHITESPACE),
    (_always, CharCategory.SYMBOL),
)


def classify(char: str) -> CharCategory:
    for predicate, category in CLASSIFICATION_RULES:
        if predicate(char):
            return category
    return CharCategory.SYMBOL


def analyze_composition(text: str) -> TextComposition:
    """Count characters per category and compute the CJK ratio."""
    composition = TextComposition(total=len(text))
    for char in text:
        category = classify(char)
        if category is CharCategory.CJK:
            composition.cjk += 1
        elif category is CharCategory.LATIN:
            composition.latin += 1
        elif category is CharCategory.DIGIT:
            composition.digits += 1
        elif category is CharCategory.WHITESPACE:
            composition.whitespace += 1
        else:
            composition.symbols += 1
    if composition.total > 0:
        composition.cjk_ratio = composition.cjk / composition.total
    return composition


class CharacterClassifier:
    """Namespace wrapper around the module-level classification functions."""

    is_cjk = staticmethod(is_cjk)
    classify = staticmethod(classify)
    analyze_composition = staticmethod(analyze_composition)
