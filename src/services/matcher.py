"""Answer checking."""

from services.kana import to_canonical_phonetic


def is_blank(raw_input: str | None) -> bool:
    """True when nothing was submitted. Blank answers are never scored."""
    return raw_input is None or not raw_input.strip()


def is_correct(raw_input: str, expected_phonetic: str, expected_orthographic: str) -> bool:
    """Compare a typed answer against both spellings of the expected form.

    All three strings are folded with :func:`to_canonical_phonetic`, so
    romaji, katakana, kana and catalog kanji spellings all compare by
    reading; a kanji spelling outside the catalog only matches the kanji
    expectation verbatim.

    Examples:
        >>> is_correct("nomimasu", "のみます", "飲みます")
        True
        >>> is_correct("飲みます", "のみます", "飲みます")
        True
    """
    answer = to_canonical_phonetic(raw_input)
    return answer in (
        to_canonical_phonetic(expected_phonetic),
        to_canonical_phonetic(expected_orthographic),
    )
