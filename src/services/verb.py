"""Japanese verb conjugation for the drill's polite and connective forms.

Supports:
- Type I (godan/五段) verbs: 飲む, 話す, 書く, 行く
- Type II (ichidan/一段) verbs: 食べる, 見る
- Irregular verbs: する, くる/来る

The general rules only ever look at the final kana of the dictionary
form. Words that break those rules (する, 来る, and 行く in the te-form)
are listed in override tables which are consulted first.
"""

from typing import NamedTuple

from services.errors import InvalidForm, MissingOverride, MissingRowMapping
from services.forms import FormKey
from services.lexicon import Lexeme, Script, VerbClass, resolve_script, spelling


class Spelling(NamedTuple):
    """A fixed string in both scripts."""

    kana: str
    kanji: str

    def select(self, script: Script) -> str:
        return self.kanji if script == Script.ORTHOGRAPHIC else self.kana


# Godan endings -> [あ段, い段, う段, え段, お段]
_HIRAGANA_TABLE = {
    "う": ["わ", "い", "う", "え", "お"],
    "く": ["か", "き", "く", "け", "こ"],
    "ぐ": ["が", "ぎ", "ぐ", "げ", "ご"],
    "す": ["さ", "し", "す", "せ", "そ"],
    "つ": ["た", "ち", "つ", "て", "と"],
    "ぬ": ["な", "に", "ぬ", "ね", "の"],
    "ぶ": ["ば", "び", "ぶ", "べ", "ぼ"],
    "む": ["ま", "み", "む", "め", "も"],
    "る": ["ら", "り", "る", "れ", "ろ"],
}

I_ROW: dict[str, str] = {tail: row[1] for tail, row in _HIRAGANA_TABLE.items()}
E_ROW: dict[str, str] = {tail: row[3] for tail, row in _HIRAGANA_TABLE.items()}

# Te-form sound changes (音便)
_TE_FORMS = {
    "う": "って",  # gemination
    "つ": "って",
    "る": "って",
    "む": "んで",  # nasalization
    "ぶ": "んで",
    "ぬ": "んで",
    "く": "いて",  # i-onbin
    "ぐ": "いで",
    "す": "して",
}

# Polite suffixes (ます and its inflections)
MASU = "ます"
MASHITA = "ました"
MASEN = "ません"
MASEN_DESHITA = "ませんでした"

_ICHIDAN_TE = "て"
_ICHIDAN_POTENTIAL = "られます"

# Lexical overrides, keyed by the kana dictionary form
_IRREGULAR_MASU_STEMS: dict[str, Spelling] = {
    "する": Spelling("し", "し"),
    "くる": Spelling("き", "来"),
}

_IRREGULAR_TE_FORMS: dict[str, Spelling] = {
    "する": Spelling("して", "して"),
    "くる": Spelling("きて", "来て"),
}

_IRREGULAR_POTENTIALS: dict[str, Spelling] = {
    "する": Spelling("できます", "できます"),
    "くる": Spelling("こられます", "来られます"),
}

# 行く takes っ音便 instead of the い音便 its く ending predicts
_GODAN_TE_EXCEPTIONS: dict[str, Spelling] = {
    "いく": Spelling("いって", "行って"),
}


def _lookup_row(table: dict[str, str], tail: str, word: str) -> str:
    if tail not in table:
        raise MissingRowMapping(f"No row mapping for godan ending {tail!r} in {word}")
    return table[tail]


def _override(table: dict[str, Spelling], verb: Lexeme, script: Script) -> str:
    if verb.kana not in table:
        raise MissingOverride(f"No override for irregular verb {verb.kana}")
    return table[verb.kana].select(script)


def has_overrides(verb: Lexeme) -> bool:
    """True if an irregular verb is covered by every override table."""
    return all(
        verb.kana in table
        for table in (_IRREGULAR_MASU_STEMS, _IRREGULAR_TE_FORMS, _IRREGULAR_POTENTIALS)
    )


def masu_stem(verb: Lexeme, script: Script | str) -> str:
    """Conjunctive stem (連用形) that ます attaches to.

    Examples:
        >>> masu_stem(find_lexeme("食べる"), Script.ORTHOGRAPHIC)
        '食べ'
        >>> masu_stem(find_lexeme("のむ"), Script.PHONETIC)
        'のみ'
    """
    script = resolve_script(script)
    base = spelling(verb, script)

    match verb.verb_class:
        case VerbClass.IRREGULAR:
            return _override(_IRREGULAR_MASU_STEMS, verb, script)
        case VerbClass.ICHIDAN:
            return base[:-1]
        case VerbClass.GODAN:
            return base[:-1] + _lookup_row(I_ROW, base[-1], base)
        case _:
            raise InvalidForm(f"{verb.kana} is not a verb")


def te_form(verb: Lexeme, script: Script | str) -> str:
    """Connective te-form (て形)."""
    script = resolve_script(script)
    base = spelling(verb, script)

    match verb.verb_class:
        case VerbClass.IRREGULAR:
            return _override(_IRREGULAR_TE_FORMS, verb, script)
        case VerbClass.ICHIDAN:
            return base[:-1] + _ICHIDAN_TE
        case VerbClass.GODAN:
            if verb.kana in _GODAN_TE_EXCEPTIONS:
                return _GODAN_TE_EXCEPTIONS[verb.kana].select(script)
            return base[:-1] + _lookup_row(_TE_FORMS, base[-1], base)
        case _:
            raise InvalidForm(f"{verb.kana} is not a verb")


def potential_form(verb: Lexeme, script: Script | str) -> str:
    """Polite potential form (可能形 + ます)."""
    script = resolve_script(script)
    base = spelling(verb, script)

    match verb.verb_class:
        case VerbClass.IRREGULAR:
            return _override(_IRREGULAR_POTENTIALS, verb, script)
        case VerbClass.ICHIDAN:
            return base[:-1] + _ICHIDAN_POTENTIAL
        case VerbClass.GODAN:
            return base[:-1] + _lookup_row(E_ROW, base[-1], base) + MASU
        case _:
            raise InvalidForm(f"{verb.kana} is not a verb")


def conjugate_verb(verb: Lexeme, form: FormKey, script: Script | str) -> str:
    """Conjugate a verb into one of the drill's verb forms.

    Args:
        verb: Verb lexeme in dictionary form
        form: Target form
        script: Which spelling to build on

    Returns:
        The conjugated surface string

    Raises:
        InvalidForm: If ``form`` is not a verb form.
    """
    match form:
        case FormKey.PRESENT:
            return masu_stem(verb, script) + MASU
        case FormKey.PAST:
            return masu_stem(verb, script) + MASHITA
        case FormKey.NEGATIVE:
            return masu_stem(verb, script) + MASEN
        case FormKey.PAST_NEGATIVE:
            return masu_stem(verb, script) + MASEN_DESHITA
        case FormKey.TE:
            return te_form(verb, script)
        case FormKey.POTENTIAL:
            return potential_form(verb, script)
        case _:
            raise InvalidForm(f"Verbs have no {form} form")
