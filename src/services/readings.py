"""Kana readings for the kanji spellings used by the catalog.

Every kanji spelling the engine can produce (dictionary forms and all
drilled forms) is paired with its kana counterpart. Only spellings whose
reading is unambiguous within the catalog are kept, so folding never
changes which answer a string stands for.
"""

import re
from functools import lru_cache

from services.engine import conjugate_all
from services.lexicon import Script, all_lexemes

# Written forms the engine never outputs but learners commonly type
_EXTRA_READINGS = {
    "出来": "でき",  # できます
}


@lru_cache(maxsize=1)
def kanji_readings() -> dict[str, str]:
    """Map each kanji spelling to its kana reading."""
    readings: dict[str, str] = {}
    ambiguous: set[str] = set()

    def add(kanji: str, kana: str) -> None:
        if kanji == kana or kanji in ambiguous:
            return
        if readings.setdefault(kanji, kana) != kana:
            del readings[kanji]
            ambiguous.add(kanji)

    for lex in all_lexemes():
        add(lex.kanji, lex.kana)
        kana_forms = conjugate_all(lex, Script.PHONETIC)
        for form, kanji in conjugate_all(lex, Script.ORTHOGRAPHIC).items():
            add(kanji, kana_forms[form])

    for kanji, kana in _EXTRA_READINGS.items():
        add(kanji, kana)
    return readings


@lru_cache(maxsize=1)
def _readings_pattern() -> re.Pattern[str]:
    # Longest first so 食べませんでした wins over 食べません
    keys = sorted(kanji_readings(), key=len, reverse=True)
    return re.compile("|".join(map(re.escape, keys)))


def fold_kanji(text: str) -> str:
    """Replace known kanji spellings in ``text`` with their kana reading.

    Examples:
        >>> fold_kanji("食べます")
        'たべます'
        >>> fold_kanji("出来ます")
        'できます'
    """
    readings = kanji_readings()
    return _readings_pattern().sub(lambda m: readings[m.group()], text)
