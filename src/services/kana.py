"""Folding of typed answers into hiragana, built on jaconv.

Romaji, katakana, half-width katakana and full-width ASCII all end up as
hiragana. For comparison, kanji spellings known to the catalog are also
folded to their reading, so 食べます and たべます compare equal.
"""

import re

import jaconv

from services.readings import fold_kanji

_ROMAJI_RUN = re.compile(r"[a-z']+")
_PENDING_CONSONANTS = re.compile(r"[bcdfghjklmnpqrstvwxyz]+$")
_WHITESPACE = re.compile(r"[\s　]+")


def _romaji_to_hiragana(text: str) -> str:
    return _ROMAJI_RUN.sub(lambda m: jaconv.alphabet2kana(m.group()), text)


def _split_pending(text: str) -> tuple[str, str]:
    """Split off trailing consonants still waiting for a vowel.

    "tabemas" -> ("tabema", "s"); a doubled n is a finished ん, other
    doubled consonants commit っ ("itt" -> ("iっ", "t")), and n before
    another consonant commits ん ("kanj" -> ("kaん", "j")).
    """
    match = _PENDING_CONSONANTS.search(text)
    if match is None or match.group() == "nn":
        return text, ""
    head, run = text[: match.start()], match.group()
    if len(run) > 1 and run[0] == "n" and run[1] not in "ny":
        return head + "ん", run[1:]
    if len(run) > 1 and run[0] == run[1]:
        return head + "っ", run[1:]
    return head, run


def to_phonetic_script(text: str, ime_style: bool = False) -> str:
    """Convert mixed romaji/kana input to hiragana.

    Args:
        text: Raw input as typed
        ime_style: Leave an unfinished trailing consonant unconverted, the
            way an input method shows it while typing.

    Returns:
        The converted text

    Examples:
        >>> to_phonetic_script("tabemasu")
        'たべます'
        >>> to_phonetic_script("タベマス")
        'たべます'
        >>> to_phonetic_script("tabemas", ime_style=True)
        'たべまs'
    """
    text = jaconv.z2h(text, kana=False, ascii=True, digit=True)
    text = jaconv.h2z(text, kana=True, ascii=False, digit=False)
    text = text.lower()

    pending = ""
    if ime_style:
        text, pending = _split_pending(text)

    text = _romaji_to_hiragana(text)
    return jaconv.kata2hira(text) + pending


def to_canonical_phonetic(text: str) -> str:
    """Fold ``text`` into the form used for answer comparison.

    Kanji spellings from the catalog are replaced by their kana reading.
    Idempotent: folding a folded string returns it unchanged.
    """
    return fold_kanji(_WHITESPACE.sub("", to_phonetic_script(text)))
