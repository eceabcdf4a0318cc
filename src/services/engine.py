"""Conjugation entry point: (lexeme, form, script) -> surface string.

``conjugate`` is pure and total over every lexeme in the catalog and every
form applicable to its kind. ``validate_catalog`` checks the data side of
that promise and is run once at startup.
"""

import logging
from collections.abc import Iterable

from services.adjective import I_ADJECTIVE_ENDING, conjugate_copula, conjugate_i_adjective
from services.errors import InvalidForm, InvalidLexeme, MissingOverride, MissingRowMapping
from services.forms import FormKey, applicable_forms
from services.lexicon import Kind, Lexeme, Script, VerbClass, resolve_script
from services.verb import E_ROW, I_ROW, conjugate_verb, has_overrides

logger = logging.getLogger(__name__)


def conjugate(lexeme: Lexeme, form: FormKey | str, script: Script | str = Script.PHONETIC) -> str:
    """Conjugate ``lexeme`` into ``form`` using the spelling in ``script``.

    Examples:
        >>> conjugate(find_lexeme("たべる"), FormKey.PRESENT)
        'たべます'
        >>> conjugate(find_lexeme("静か"), FormKey.NEGATIVE_COPULA, Script.ORTHOGRAPHIC)
        '静かじゃないです'

    Raises:
        InvalidForm: If ``form`` is not applicable to the lexeme's kind.
        UnsupportedScript: If ``script`` is neither phonetic nor orthographic.
    """
    script = resolve_script(script)
    try:
        form = FormKey(form)
    except ValueError:
        raise InvalidForm(f"Unknown form: {form!r}") from None

    if form not in applicable_forms(lexeme.kind):
        raise InvalidForm(f"{lexeme.kana} ({lexeme.kind}) has no {form} form")

    match lexeme.kind:
        case Kind.VERB:
            return conjugate_verb(lexeme, form, script)
        case Kind.I_ADJECTIVE:
            return conjugate_i_adjective(lexeme, form, script)
        case Kind.NA_ADJECTIVE | Kind.NOUN:
            return conjugate_copula(lexeme, form, script)
        case _:
            raise InvalidForm(f"Unknown kind: {lexeme.kind}")


def conjugate_all(lexeme: Lexeme, script: Script | str = Script.PHONETIC) -> dict[FormKey, str]:
    """Every applicable form of ``lexeme``, in catalog order."""
    return {form: conjugate(lexeme, form, script) for form in applicable_forms(lexeme.kind)}


def _check_lexeme(lexeme: Lexeme) -> None:
    match lexeme.kind, lexeme.verb_class:
        case Kind.VERB, VerbClass.GODAN:
            for base in (lexeme.kana, lexeme.kanji):
                tail = base[-1]
                if tail not in I_ROW or tail not in E_ROW:
                    raise MissingRowMapping(f"{base}: ending {tail!r} missing from row tables")
        case Kind.VERB, VerbClass.ICHIDAN:
            if not (lexeme.kana.endswith("る") and lexeme.kanji.endswith("る")):
                raise InvalidLexeme(f"Ichidan verb {lexeme.kana} must end in る")
        case Kind.VERB, VerbClass.IRREGULAR:
            if not has_overrides(lexeme):
                raise MissingOverride(f"Irregular verb {lexeme.kana} has no overrides")
        case Kind.I_ADJECTIVE, _:
            if not (lexeme.kana.endswith(I_ADJECTIVE_ENDING) and lexeme.kanji.endswith(I_ADJECTIVE_ENDING)):
                raise InvalidLexeme(f"I-adjective {lexeme.kana} must end in {I_ADJECTIVE_ENDING}")


def validate_catalog(lexemes: Iterable[Lexeme]) -> int:
    """Check every lexeme can be conjugated in every applicable form.

    Returns:
        Number of lexemes checked

    Raises:
        MissingRowMapping, MissingOverride, InvalidLexeme: On the first
            defective entry.
    """
    count = 0
    for lexeme in lexemes:
        _check_lexeme(lexeme)
        for script in Script:
            conjugate_all(lexeme, script)
        count += 1
    logger.info("Validated conjugation catalog: %d lexemes", count)
    return count
