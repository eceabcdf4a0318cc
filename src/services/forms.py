"""Grammatical form catalog: which forms each kind takes and how to label them."""

from enum import StrEnum, auto

from services.lexicon import Kind


class FormKey(StrEnum):
    """Forms drilled by the quiz."""

    PRESENT = auto()                # 食べます / 大きいです
    PAST = auto()                   # 食べました / 大きかったです
    NEGATIVE = auto()               # 食べません / 大きくないです
    PAST_NEGATIVE = auto()          # 食べませんでした / 大きくなかったです
    TE = auto()                     # 食べて
    POTENTIAL = auto()              # 食べられます
    ADVERB = auto()                 # 大きく / 静かに
    PRESENT_COPULA = auto()         # 静かです
    PAST_COPULA = auto()            # 静かでした
    NEGATIVE_COPULA = auto()        # 静かじゃないです
    PAST_NEGATIVE_COPULA = auto()   # 静かじゃなかったです


class Register(StrEnum):
    """Formality of a form. Display metadata only."""

    FORMAL = auto()
    CASUAL = auto()


FORMS_BY_KIND: dict[Kind, tuple[FormKey, ...]] = {
    Kind.VERB: (
        FormKey.PRESENT,
        FormKey.PAST,
        FormKey.NEGATIVE,
        FormKey.PAST_NEGATIVE,
        FormKey.TE,
        FormKey.POTENTIAL,
    ),
    Kind.I_ADJECTIVE: (
        FormKey.PRESENT,
        FormKey.PAST,
        FormKey.NEGATIVE,
        FormKey.PAST_NEGATIVE,
        FormKey.ADVERB,
    ),
    Kind.NA_ADJECTIVE: (
        FormKey.PRESENT_COPULA,
        FormKey.PAST_COPULA,
        FormKey.NEGATIVE_COPULA,
        FormKey.PAST_NEGATIVE_COPULA,
        FormKey.ADVERB,
    ),
    Kind.NOUN: (
        FormKey.PRESENT_COPULA,
        FormKey.PAST_COPULA,
        FormKey.NEGATIVE_COPULA,
        FormKey.PAST_NEGATIVE_COPULA,
    ),
}

FORM_LABELS: dict[FormKey, str] = {
    FormKey.PRESENT: "Present ('do' / 'is')",
    FormKey.PAST: "Past ('did' / 'was')",
    FormKey.NEGATIVE: "Negative ('don’t' / 'is not')",
    FormKey.PAST_NEGATIVE: "Past negative ('didn’t' / 'was not')",
    FormKey.TE: "Te-form ('and…' / connective form)",
    FormKey.POTENTIAL: "Potential ('can' / 'is possible to')",
    FormKey.ADVERB: "Adverb form ('-ly', e.g. quietly / quickly)",
    FormKey.PRESENT_COPULA: "Copula present ('is / am / are')",
    FormKey.PAST_COPULA: "Copula past ('was / were')",
    FormKey.NEGATIVE_COPULA: "Copula negative ('is not / am not / are not')",
    FormKey.PAST_NEGATIVE_COPULA: "Copula past negative ('was not / were not')",
}

# Te-form and adverb form have no register
FORM_REGISTERS: dict[FormKey, Register] = {
    FormKey.PRESENT: Register.FORMAL,
    FormKey.PAST: Register.FORMAL,
    FormKey.NEGATIVE: Register.FORMAL,
    FormKey.PAST_NEGATIVE: Register.FORMAL,
    FormKey.POTENTIAL: Register.FORMAL,
    FormKey.PRESENT_COPULA: Register.FORMAL,
    FormKey.PAST_COPULA: Register.FORMAL,
    FormKey.NEGATIVE_COPULA: Register.FORMAL,
    FormKey.PAST_NEGATIVE_COPULA: Register.FORMAL,
}


def all_kinds() -> tuple[Kind, ...]:
    return tuple(Kind)


def applicable_forms(kind: Kind | str) -> tuple[FormKey, ...]:
    """Forms a lexeme of ``kind`` can be drilled in, in display order."""
    return FORMS_BY_KIND[Kind(kind)]


def label(form: FormKey | str) -> str:
    return FORM_LABELS[FormKey(form)]


def register(form: FormKey | str) -> Register | None:
    return FORM_REGISTERS.get(FormKey(form))


def display_label(form: FormKey | str) -> str:
    """Label prefixed with its register, if it has one.

    Examples:
        >>> display_label(FormKey.PAST)
        "Formal past ('did' / 'was')"
        >>> display_label(FormKey.TE)
        "Te-form ('and…' / connective form)"
    """
    base = label(form)
    reg = register(form)
    if reg is None:
        return base
    return f"{reg.value.capitalize()} {base[:1].lower()}{base[1:]}"
