"""Natural Language Processing module for yomi

This module turns typed input into readings (kana) and provides the
character-width conversions used to synthesize fallback candidates.
"""

from .base import BaseTransliterator


def get_transliterator(language: str = 'ja') -> BaseTransliterator:
    """Get a transliterator for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese)

    Returns:
        Language-specific transliterator instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.romanizer import RomajiTransliterator
        return RomajiTransliterator()
    else:
        raise ValueError(f"Unsupported language for transliteration: {language}")


__all__ = [
    'BaseTransliterator',
    'get_transliterator',
]
