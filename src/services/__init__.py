"""Conjugation drill services module."""

from .errors import (
    ConjugationError,
    InvalidForm,
    InvalidLexeme,
    MissingOverride,
    MissingRowMapping,
    UnknownLexeme,
    UnsupportedScript,
)
from .lexicon import (
    Kind,
    Lexeme,
    Script,
    VerbClass,
    all_lexemes,
    filter_by_kind,
    find_lexeme,
)
from .forms import (
    FormKey,
    Register,
    all_kinds,
    applicable_forms,
    display_label,
    label,
    register,
)
from .engine import conjugate, conjugate_all, validate_catalog
from .sampler import Question, sample
from .readings import fold_kanji, kanji_readings
from .kana import to_canonical_phonetic, to_phonetic_script
from .matcher import is_blank, is_correct
from .session import SessionState, expected_display, grade, record_answer, toggle_kind

__all__ = [
    # Errors
    "ConjugationError",
    "InvalidForm",
    "InvalidLexeme",
    "MissingOverride",
    "MissingRowMapping",
    "UnknownLexeme",
    "UnsupportedScript",
    # Lexeme catalog
    "Kind",
    "Lexeme",
    "Script",
    "VerbClass",
    "all_lexemes",
    "filter_by_kind",
    "find_lexeme",
    # Form catalog
    "FormKey",
    "Register",
    "all_kinds",
    "applicable_forms",
    "display_label",
    "label",
    "register",
    # Conjugation
    "conjugate",
    "conjugate_all",
    "validate_catalog",
    # Drill
    "Question",
    "sample",
    "fold_kanji",
    "kanji_readings",
    "to_canonical_phonetic",
    "to_phonetic_script",
    "is_blank",
    "is_correct",
    "SessionState",
    "expected_display",
    "grade",
    "record_answer",
    "toggle_kind",
]
