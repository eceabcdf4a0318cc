"""
Tests for answer normalization and matching.
"""

import pytest

from services import (
    Script,
    all_lexemes,
    applicable_forms,
    conjugate,
    fold_kanji,
    is_blank,
    is_correct,
    kanji_readings,
    to_canonical_phonetic,
    to_phonetic_script,
)


class TestPhoneticScript:
    """Tests for to_phonetic_script()."""

    def test_romaji(self):
        assert to_phonetic_script("tabemasu") == "たべます"

    def test_uppercase_romaji(self):
        assert to_phonetic_script("TABEMASU") == "たべます"

    def test_katakana(self):
        assert to_phonetic_script("タベマス") == "たべます"

    def test_half_width_katakana(self):
        assert to_phonetic_script("ﾀﾍﾞﾏｽ") == "たべます"

    def test_full_width_romaji(self):
        assert to_phonetic_script("ｔａｂｅｍａｓｕ") == "たべます"

    def test_kanji_untouched(self):
        assert to_phonetic_script("食べます") == "食べます"

    def test_mixed(self):
        assert to_phonetic_script("食bemasu") == "食べます"

    def test_ime_pending_consonant(self):
        """An unfinished consonant stays as typed."""
        assert to_phonetic_script("tabemas", ime_style=True) == "たべまs"

    def test_ime_complete_syllable(self):
        assert to_phonetic_script("tabema", ime_style=True) == "たべま"

    def test_ime_doubled_consonant(self):
        """A doubled consonant commits っ and keeps one pending letter."""
        assert to_phonetic_script("itt", ime_style=True) == "いっt"

    def test_ime_n_before_consonant(self):
        assert to_phonetic_script("kanj", ime_style=True) == "かんj"

    def test_ime_pending_y(self):
        assert to_phonetic_script("ky", ime_style=True) == "ky"


class TestCanonicalPhonetic:
    """Tests for to_canonical_phonetic()."""

    def test_strips_whitespace(self):
        assert to_canonical_phonetic(" おおきかった です ") == "おおきかったです"
        assert to_canonical_phonetic("おおきかった　です") == "おおきかったです"

    @pytest.mark.parametrize("lexeme", all_lexemes(), ids=lambda lex: lex.kana)
    def test_idempotent(self, lexeme):
        for form in applicable_forms(lexeme.kind):
            for script in Script:
                once = to_canonical_phonetic(conjugate(lexeme, form, script))
                assert to_canonical_phonetic(once) == once

    def test_kana_expectations_unchanged(self):
        assert to_canonical_phonetic("しずかじゃないです") == "しずかじゃないです"

    def test_catalog_kanji_folded(self):
        assert to_canonical_phonetic("食べます") == to_canonical_phonetic("たべます")
        assert to_canonical_phonetic("来られます") == "こられます"
        assert to_canonical_phonetic("来ます") == "きます"

    def test_alternate_kanji_folded(self):
        assert to_canonical_phonetic("出来ます") == "できます"

    def test_mixed_kanji_and_romaji(self):
        assert to_canonical_phonetic("食bemasu") == "たべます"

    def test_unknown_kanji_kept(self):
        assert to_canonical_phonetic("走ります") == "走ります"


class TestKanjiReadings:
    """Tests for the catalog reading table."""

    def test_every_catalog_spelling_folds(self):
        for lexeme in all_lexemes():
            for form in applicable_forms(lexeme.kind):
                kanji = conjugate(lexeme, form, Script.ORTHOGRAPHIC)
                kana = conjugate(lexeme, form, Script.PHONETIC)
                assert fold_kanji(kanji) == kana

    def test_dictionary_forms(self):
        assert kanji_readings()["日本人"] == "にほんじん"

    def test_kana_only_words_not_listed(self):
        assert "する" not in kanji_readings()

    def test_longest_match_first(self):
        assert fold_kanji("食べませんでした") == "たべませんでした"


class TestIsCorrect:
    """Tests for is_correct()."""

    def test_kana(self):
        assert is_correct("たべます", "たべます", "食べます")

    def test_kanji(self):
        assert is_correct("食べます", "たべます", "食べます")

    def test_romaji(self):
        assert is_correct("dekimasu", "できます", "できます")

    def test_katakana(self):
        assert is_correct("タベマス", "たべます", "食べます")

    def test_surrounding_space(self):
        assert is_correct("  たべます ", "たべます", "食べます")

    def test_wrong_form(self):
        assert not is_correct("たべました", "たべます", "食べます")

    def test_wrong_kanji(self):
        assert not is_correct("食べました", "たべます", "食べます")

    def test_alternate_kanji_for_potential(self):
        assert is_correct("出来ます", "できます", "できます")

    def test_kanji_answer_for_kana_only_expectation(self):
        """Folding lets a kanji answer match even when both expectations are kana."""
        assert is_correct("大きかったです", "おおきかったです", "おおきかったです")

    def test_either_spelling(self):
        """Both spellings are accepted even when they differ."""
        assert is_correct("きます", "きます", "来ます")
        assert is_correct("来ます", "きます", "来ます")


class TestIsBlank:
    """Tests for the no-answer gate."""

    @pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
    def test_blank(self, raw):
        assert is_blank(raw)

    def test_not_blank(self):
        assert not is_blank(" た ")
