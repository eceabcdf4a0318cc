"""Japanese adjective and copula conjugation.

Supports i-adjectives (形容詞) as well as na-adjectives (形容動詞) and
nouns, which share the copula (です) forms.
"""

from services.errors import InvalidForm
from services.forms import FormKey
from services.lexicon import Kind, Lexeme, Script, spelling

I_ADJECTIVE_ENDING = "い"

# Polite copula and its inflections
DESU = "です"
DESHITA = "でした"
JANAI_DESU = "じゃないです"
JANAKATTA_DESU = "じゃなかったです"

# Particle that turns a na-adjective into an adverb (静かに)
ADVERBIAL_NI = "に"


def conjugate_i_adjective(adjective: Lexeme, form: FormKey, script: Script | str) -> str:
    """Conjugate an i-adjective.

    Raises:
        InvalidForm: If ``form`` is not an i-adjective form.
    """
    base = spelling(adjective, script)
    stem = base[:-1]

    match form:
        case FormKey.PRESENT:
            return base + DESU
        case FormKey.PAST:
            return stem + "かった" + DESU
        case FormKey.NEGATIVE:
            return stem + "くない" + DESU
        case FormKey.PAST_NEGATIVE:
            return stem + "くなかった" + DESU
        case FormKey.ADVERB:
            return stem + "く"
        case _:
            raise InvalidForm(f"I-adjectives have no {form} form")


def conjugate_copula(word: Lexeme, form: FormKey, script: Script | str) -> str:
    """Attach the copula to a na-adjective or noun.

    The word itself never changes; only the copula inflects.

    Raises:
        InvalidForm: If ``form`` is not a copula form, or is the adverb
            form requested for a noun.
    """
    base = spelling(word, script)

    match form:
        case FormKey.PRESENT_COPULA:
            return base + DESU
        case FormKey.PAST_COPULA:
            return base + DESHITA
        case FormKey.NEGATIVE_COPULA:
            return base + JANAI_DESU
        case FormKey.PAST_NEGATIVE_COPULA:
            return base + JANAKATTA_DESU
        case FormKey.ADVERB if word.kind == Kind.NA_ADJECTIVE:
            return base + ADVERBIAL_NI
        case _:
            raise InvalidForm(f"{word.kind} has no {form} form")
