"""Romaji to hiragana transliteration."""

from typing import List, Sequence, Tuple

from yomi.nlp.base import BaseTransliterator

_VOWELS = "aiueo"


def _row(prefix: str, kana: Sequence[str]) -> List[Tuple[str, str]]:
    """Expand one consonant row: ``prefix + a/i/u/e/o`` -> *kana* in order."""
    return [(prefix + vowel, k) for vowel, k in zip(_VOWELS, kana)]


# Rules are applied one after another, each as a global replacement over the
# whole string. Order matters: sokuon and "n" rules first, then longer romaji
# before shorter so that partial matches cannot eat the head of a longer mora.
ROMAJI_TABLE: List[Tuple[str, str]] = [
    # doubled consonant -> sokuon, the second consonant stays for the next mora
    *[(c * 2, "っ" + c) for c in "bcdfghjklmpqrstvwxyz"],

    ("n'", "ん"),
    ("nn", "ん"),

    # "n" before a consonant closes the mora
    *[("n" + c, "ん" + c) for c in "bcdfghjklmprstvwxz"],

    ("ltsu", "っ"),
    ("xtsu", "っ"),

    *_row("by", ["びゃ", "びぃ", "びゅ", "びぇ", "びょ"]),
    ("cha", "ちゃ"), ("chi", "ち"), ("chu", "ちゅ"), ("che", "ちぇ"), ("cho", "ちょ"),
    *_row("cy", ["ちゃ", "ちぃ", "ちゅ", "ちぇ", "ちょ"]),
    *_row("dh", ["でゃ", "でぃ", "でゅ", "でぇ", "でょ"]),
    *_row("dy", ["ぢゃ", "ぢぃ", "ぢゅ", "ぢぇ", "ぢょ"]),
    *_row("fy", ["ふゃ", "ふぃ", "ふゅ", "ふぇ", "ふょ"]),
    *_row("gy", ["ぎゃ", "ぎぃ", "ぎゅ", "ぎぇ", "ぎょ"]),
    *_row("hy", ["ひゃ", "ひぃ", "ひゅ", "ひぇ", "ひょ"]),
    *_row("jy", ["じゃ", "じぃ", "じゅ", "じぇ", "じょ"]),
    *_row("ky", ["きゃ", "きぃ", "きゅ", "きぇ", "きょ"]),
    *_row("ly", ["ゃ", "ぃ", "ゅ", "ぇ", "ょ"]),
    *_row("my", ["みゃ", "みぃ", "みゅ", "みぇ", "みょ"]),
    *_row("ny", ["にゃ", "にぃ", "にゅ", "にぇ", "にょ"]),
    *_row("py", ["ぴゃ", "ぴぃ", "ぴゅ", "ぴぇ", "ぴょ"]),
    *_row("ry", ["りゃ", "りぃ", "りゅ", "りぇ", "りょ"]),
    ("sha", "しゃ"), ("shi", "し"), ("shu", "しゅ"), ("she", "しぇ"), ("sho", "しょ"),
    *_row("sy", ["しゃ", "しぃ", "しゅ", "しぇ", "しょ"]),
    *_row("th", ["てゃ", "てぃ", "てゅ", "てぇ", "てょ"]),
    ("tsa", "つぁ"), ("tsi", "つぃ"), ("tsu", "つ"), ("tse", "つぇ"), ("tso", "つぉ"),
    *_row("ty", ["ちゃ", "ちぃ", "ちゅ", "ちぇ", "ちょ"]),
    *_row("vy", ["ゔゃ", "ゔぃ", "ゔゅ", "ゔぇ", "ゔょ"]),
    *_row("xy", ["ゃ", "ぃ", "ゅ", "ぇ", "ょ"]),
    *_row("zy", ["じゃ", "じぃ", "じゅ", "じぇ", "じょ"]),

    ("lka", "ゕ"), ("lke", "ゖ"),
    ("wyi", "ゐ"), ("wye", "ゑ"),
    ("xka", "ゕ"), ("xke", "ゖ"),

    ("ltu", "っ"),
    ("lwa", "ゎ"),
    ("xtu", "っ"),
    ("xwa", "ゎ"),

    *_row("b", ["ば", "び", "ぶ", "べ", "ぼ"]),
    *_row("c", ["か", "し", "く", "せ", "こ"]),
    *_row("d", ["だ", "ぢ", "づ", "で", "ど"]),
    *_row("f", ["ふぁ", "ふぃ", "ふ", "ふぇ", "ふぉ"]),
    *_row("g", ["が", "ぎ", "ぐ", "げ", "ご"]),
    *_row("h", ["は", "ひ", "ふ", "へ", "ほ"]),
    *_row("j", ["じゃ", "じ", "じゅ", "じぇ", "じょ"]),
    *_row("k", ["か", "き", "く", "け", "こ"]),
    *_row("l", ["ぁ", "ぃ", "ぅ", "ぇ", "ぉ"]),
    *_row("m", ["ま", "み", "む", "め", "も"]),
    *_row("n", ["な", "に", "ぬ", "ね", "の"]),
    *_row("p", ["ぱ", "ぴ", "ぷ", "ぺ", "ぽ"]),
    *_row("q", ["くぁ", "くぃ", "く", "くぇ", "くぉ"]),
    *_row("r", ["ら", "り", "る", "れ", "ろ"]),
    *_row("s", ["さ", "し", "す", "せ", "そ"]),
    *_row("t", ["た", "ち", "つ", "て", "と"]),
    *_row("v", ["ゔぁ", "ゔぃ", "ゔ", "ゔぇ", "ゔぉ"]),
    *_row("w", ["わ", "うぃ", "う", "うぇ", "を"]),
    *_row("x", ["ぁ", "ぃ", "ぅ", "ぇ", "ぉ"]),
    *_row("y", ["や", "い", "ゆ", "いぇ", "よ"]),
    *_row("z", ["ざ", "じ", "ず", "ぜ", "ぞ"]),

    *_row("", ["あ", "い", "う", "え", "お"]),

    ("-", "ー"),

    (",", "、"),
    (".", "。"),
    ("!", "！"),
    ("?", "？"),
    ("/", "・"),
    ("[", "「"),
    ("]", "」"),
]


def romaji_to_hiragana(text: str, table: Sequence[Tuple[str, str]] = ROMAJI_TABLE) -> str:
    """Replace romaji runs in *text* with hiragana.

    Input is lower-cased first. Every rule is a literal (not regex)
    replacement over the whole string, applied in table order. Consonants
    that do not complete a mora are left as ASCII so the caller can tell the
    input is still being typed.
    """
    s = text.lower()
    for pattern, replacement in table:
        if pattern in s:
            s = s.replace(pattern, replacement)
    return s


class RomajiTransliterator(BaseTransliterator):
    """Hepburn/kunrei-style romaji input to hiragana reading."""

    def __init__(self, table: Sequence[Tuple[str, str]] = ROMAJI_TABLE):
        self._table = list(table)

    def transliterate(self, text: str) -> str:
        return romaji_to_hiragana(text, self._table)
