"""Static lexeme catalog.

The corpus is fixed at import time and never mutated, so it can be shared
between any number of callers without locking.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto

from services.errors import InvalidLexeme, UnknownLexeme, UnsupportedScript


class Kind(StrEnum):
    """Lexical kinds (品詞) covered by the drill."""

    VERB = "verb"
    I_ADJECTIVE = "i-adjective"
    NA_ADJECTIVE = "na-adjective"
    NOUN = "noun"


class VerbClass(StrEnum):
    """Verb conjugation classes."""

    ICHIDAN = auto()    # 一段 - 食べる, 見る
    GODAN = auto()      # 五段 - 飲む, 書く
    IRREGULAR = auto()  # する, 来る


@dataclass(frozen=True, slots=True)
class Lexeme:
    """A dictionary-form entry.

    ``kana`` is always hiragana. ``kanji`` is the usual written form and
    may be identical to ``kana`` when the word is normally written in kana.
    """

    kana: str
    kanji: str
    meaning: str
    kind: Kind
    verb_class: VerbClass | None = None

    def __post_init__(self) -> None:
        if (self.kind == Kind.VERB) != (self.verb_class is not None):
            raise InvalidLexeme(
                f"{self.kana}: verb_class must be set exactly for verbs (kind={self.kind})"
            )
        if not self.kana or not self.kanji:
            raise InvalidLexeme(f"Empty spelling in lexeme: {self!r}")

    @property
    def has_kanji(self) -> bool:
        return self.kanji != self.kana


def _verb(kana: str, kanji: str, meaning: str, verb_class: VerbClass) -> Lexeme:
    return Lexeme(kana, kanji, meaning, Kind.VERB, verb_class)


LEXEMES: tuple[Lexeme, ...] = (
    # Verbs
    _verb("たべる", "食べる", "eat", VerbClass.ICHIDAN),
    _verb("みる", "見る", "see", VerbClass.ICHIDAN),
    _verb("のむ", "飲む", "drink", VerbClass.GODAN),
    _verb("はなす", "話す", "speak", VerbClass.GODAN),
    _verb("かく", "書く", "write", VerbClass.GODAN),
    _verb("いく", "行く", "go", VerbClass.GODAN),
    _verb("する", "する", "do", VerbClass.IRREGULAR),
    _verb("くる", "来る", "come", VerbClass.IRREGULAR),
    # I-adjectives
    Lexeme("おおきい", "大きい", "big", Kind.I_ADJECTIVE),
    Lexeme("ちいさい", "小さい", "small", Kind.I_ADJECTIVE),
    Lexeme("おもしろい", "面白い", "interesting", Kind.I_ADJECTIVE),
    Lexeme("さむい", "寒い", "cold", Kind.I_ADJECTIVE),
    # Na-adjectives
    Lexeme("しずか", "静か", "quiet", Kind.NA_ADJECTIVE),
    Lexeme("べんり", "便利", "convenient", Kind.NA_ADJECTIVE),
    Lexeme("げんき", "元気", "healthy/energetic", Kind.NA_ADJECTIVE),
    # Nouns
    Lexeme("がくせい", "学生", "student", Kind.NOUN),
    Lexeme("せんせい", "先生", "teacher", Kind.NOUN),
    Lexeme("にほんじん", "日本人", "Japanese person", Kind.NOUN),
)


def all_lexemes() -> tuple[Lexeme, ...]:
    """Return the whole corpus in catalog order."""
    return LEXEMES


def filter_by_kind(kinds: Iterable[Kind | str]) -> tuple[Lexeme, ...]:
    """Return the lexemes whose kind is in ``kinds``.

    An empty result is returned as-is; falling back to the full corpus is
    the sampler's decision.
    """
    wanted = {Kind(k) for k in kinds}
    return tuple(lex for lex in LEXEMES if lex.kind in wanted)


def find_lexeme(word: str) -> Lexeme:
    """Look up a lexeme by its kana or kanji spelling.

    Raises:
        UnknownLexeme: If no entry has that spelling.
    """
    for lex in LEXEMES:
        if word in (lex.kana, lex.kanji):
            return lex
    raise UnknownLexeme(f"Unknown word: {word}")


class Script(StrEnum):
    """Which spelling of a lexeme to conjugate."""

    PHONETIC = auto()      # かな
    ORTHOGRAPHIC = auto()  # 漢字かな交じり


def resolve_script(script: Script | str) -> Script:
    """Coerce ``script`` to a :class:`Script`.

    Raises:
        UnsupportedScript: For anything outside the two defined scripts.
    """
    try:
        return Script(script)
    except ValueError:
        raise UnsupportedScript(f"Unsupported script: {script!r}") from None


def spelling(lexeme: Lexeme, script: Script | str) -> str:
    """Dictionary form of ``lexeme`` in ``script``."""
    match resolve_script(script):
        case Script.PHONETIC:
            return lexeme.kana
        case Script.ORTHOGRAPHIC:
            return lexeme.kanji
