"""Japanese language processing module."""

from .phonetics import (
    is_hiragana_or_prolonged,
    has_punctuation,
    to_half_katakana,
    to_wide_katakana,
    to_wide_latin,
)
from .romanizer import ROMAJI_TABLE, RomajiTransliterator, romaji_to_hiragana

__all__ = [
    'ROMAJI_TABLE',
    'RomajiTransliterator',
    'romaji_to_hiragana',
    'to_wide_latin',
    'to_wide_katakana',
    'to_half_katakana',
    'has_punctuation',
    'is_hiragana_or_prolonged',
]
