"""Tests for romaji to hiragana transliteration."""
import pytest
from yomi.nlp import get_transliterator
from yomi.nlp.japanese.romanizer import ROMAJI_TABLE, RomajiTransliterator, romaji_to_hiragana


class TestRomajiToHiragana:
    """Test the rule table semantics."""

    @pytest.mark.parametrize("romaji, expected", [
        ("kya", "きゃ"),
        ("nn", "ん"),
        ("tte", "って"),
        ("a", "あ"),
        ("watashi", "わたし"),
        ("kaisha", "かいしゃ"),
        ("gakkou", "がっこう"),
        ("shinbunn", "しんぶん"),
        ("kan'i", "かんい"),
        ("konnnichiha", "こんにちは"),
        ("tsukue", "つくえ"),
        ("chotto", "ちょっと"),
        ("ra-menn", "らーめん"),
    ])
    def test_basic_conversions(self, romaji, expected):
        assert romaji_to_hiragana(romaji) == expected

    def test_is_case_insensitive(self):
        assert romaji_to_hiragana("KYA") == "きゃ"
        assert romaji_to_hiragana("WaTaShi") == "わたし"

    def test_punctuation_is_converted(self):
        assert romaji_to_hiragana("hai.") == "はい。"
        assert romaji_to_hiragana("e,") == "え、"
        assert romaji_to_hiragana("[a]") == "「あ」"
        assert romaji_to_hiragana("nani?") == "なに？"

    def test_metacharacters_are_literal(self):
        # "." must only replace a literal dot, not any character
        assert romaji_to_hiragana("ka") == "か"
        assert romaji_to_hiragana("a.i") == "あ。い"

    def test_trailing_consonant_left_untranslated(self):
        assert romaji_to_hiragana("kak") == "かk"
        assert romaji_to_hiragana("ky") == "ky"
        assert romaji_to_hiragana("n") == "n"

    def test_sokuon_precedes_plain_rules(self):
        # "kk" must become "っk" before "ka" rules see the residue
        assert romaji_to_hiragana("kka") == "っか"
        assert romaji_to_hiragana("ssha") == "っしゃ"

    def test_idempotent_on_kana(self):
        for text in ["かな", "カタカナ", "こんにちは。", "「ねこ」、ー"]:
            assert romaji_to_hiragana(text) == text
            assert romaji_to_hiragana(romaji_to_hiragana(text)) == text

    def test_empty_string(self):
        assert romaji_to_hiragana("") == ""

    def test_custom_table_applied_in_order(self):
        table = [("ab", "X"), ("a", "Y")]
        assert romaji_to_hiragana("aba", table) == "XY"


class TestRomajiTransliterator:
    """Test the transliterator object."""

    def test_table_order_sokuon_first(self):
        patterns = [pattern for pattern, _ in ROMAJI_TABLE]
        assert patterns.index("kk") < patterns.index("nn") < patterns.index("ka")
        assert patterns.index("nk") < patterns.index("kya") < patterns.index("ka")

    def test_transliterate_and_call(self):
        transliterator = RomajiTransliterator()
        assert transliterator.transliterate("neko") == "ねこ"
        assert transliterator("neko") == "ねこ"

    def test_is_resolved(self):
        transliterator = RomajiTransliterator()
        assert transliterator.is_resolved("ねこ")
        assert transliterator.is_resolved("")
        assert not transliterator.is_resolved("ねk")
        assert not transliterator.is_resolved("1")

    def test_factory(self):
        assert isinstance(get_transliterator("ja"), RomajiTransliterator)
        assert isinstance(get_transliterator("JP"), RomajiTransliterator)
        with pytest.raises(ValueError):
            get_transliterator("de")
