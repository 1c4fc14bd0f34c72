"""Japanese character-width and character-class utilities."""

import unicodedata

import jaconv

IDEOGRAPHIC_SPACE = "　"
PROLONGED_SOUND_MARK = "ー"

# hiragana whose katakana exists only in fullwidth (ヵヶヰヱヮ)
NO_HALFWIDTH_FORM = "ゕゖゐゑゎ"

# printable ASCII (0x21-0x7E) -> fullwidth forms (0xFF01-0xFF5E)
_WIDE_LATIN_TABLE = {code: code - 0x20 + 0xFF00 for code in range(0x21, 0x7F)}
_WIDE_LATIN_TABLE[ord(" ")] = IDEOGRAPHIC_SPACE
_WIDE_LATIN_TABLE[ord("¥")] = "￥"


def to_wide_latin(text: str) -> str:
    """Map printable ASCII to the fullwidth block (space -> ideographic space, ¥ -> ￥)."""
    return text.translate(_WIDE_LATIN_TABLE)


def to_wide_katakana(text: str) -> str:
    """Convert hiragana in *text* to fullwidth katakana; other characters are kept."""
    return jaconv.hira2kata(text)


def to_half_katakana(text: str) -> str:
    """Convert hiragana in *text* to halfwidth katakana.

    Voiced and semi-voiced sounds become two code points (が -> ｶﾞ);
    characters without a halfwidth form pass through unchanged.
    """
    return jaconv.hira2hkata(text, ignore=NO_HALFWIDTH_FORM)


def is_hiragana(ch: str) -> bool:
    return "ぁ" <= ch <= "ゖ"


def is_hiragana_or_prolonged(text: str) -> bool:
    """True when *text* is non-empty and made only of hiragana and 'ー'."""
    return bool(text) and all(is_hiragana(ch) or ch == PROLONGED_SOUND_MARK for ch in text)


def has_punctuation(text: str) -> bool:
    """True when *text* contains any Unicode punctuation (ASCII or Japanese)."""
    return any(unicodedata.category(ch).startswith("P") for ch in text)
