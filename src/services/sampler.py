"""Random question selection."""

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass

from services.engine import conjugate
from services.forms import FormKey, applicable_forms
from services.lexicon import Kind, Lexeme, Script, all_lexemes, filter_by_kind

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Question:
    """A lexeme paired with the form the user must produce."""

    lexeme: Lexeme
    form: FormKey

    def expected(self, script: Script | str) -> str:
        return conjugate(self.lexeme, self.form, script)

    def expected_answers(self) -> tuple[str, str]:
        """(kana, kanji) answers accepted for this question."""
        return self.expected(Script.PHONETIC), self.expected(Script.ORTHOGRAPHIC)


def sample(enabled_kinds: Iterable[Kind | str] | None = None, rng: random.Random | None = None) -> Question:
    """Pick a lexeme and one of its forms uniformly at random.

    Args:
        enabled_kinds: Kinds to draw from. ``None``, an empty set, or a set
            matching nothing falls back to the whole corpus.
        rng: Source of randomness. Share one only if it is safe to call
            from every thread using it.

    Returns:
        A fresh :class:`Question`
    """
    chooser = rng if rng is not None else random
    pool = filter_by_kind(enabled_kinds) if enabled_kinds else ()
    if not pool:
        pool = all_lexemes()

    lexeme = chooser.choice(pool)
    form = chooser.choice(applicable_forms(lexeme.kind))
    logger.debug("Sampled %s / %s from %d candidates", lexeme.kana, form, len(pool))
    return Question(lexeme, form)
