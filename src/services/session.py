"""Per-user quiz state for the host, updated through pure transitions.

The core never holds on to any of this; the host passes a
:class:`SessionState` in and gets a new one back.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from services.lexicon import Kind
from services.matcher import is_blank, is_correct
from services.sampler import Question


@dataclass(frozen=True, slots=True)
class SessionState:
    """Score counters for one user."""

    correct: int = 0
    total: int = 0
    streak: int = 0

    @property
    def accuracy(self) -> int:
        """Percentage of correct answers, halves rounded up; 0 before any answer."""
        if not self.total:
            return 0
        return int(self.correct * 100 / self.total + 0.5)


def record_answer(state: SessionState, ok: bool) -> SessionState:
    """Count one scored answer. A miss resets the streak."""
    if ok:
        return replace(state, correct=state.correct + 1, total=state.total + 1, streak=state.streak + 1)
    return replace(state, total=state.total + 1, streak=0)


def grade(state: SessionState, raw_input: str | None, question: Question) -> tuple[SessionState, bool | None]:
    """Check ``raw_input`` against ``question`` and update the score.

    Returns:
        The new state and whether the answer was correct. A blank answer
        returns the state unchanged and ``None``.
    """
    if is_blank(raw_input):
        return state, None
    kana, kanji = question.expected_answers()
    ok = is_correct(raw_input, kana, kanji)
    return record_answer(state, ok), ok


def toggle_kind(enabled: Iterable[Kind | str], kind: Kind | str) -> frozenset[Kind]:
    """Turn ``kind`` on or off, keeping at least one kind enabled."""
    current = frozenset(Kind(k) for k in enabled)
    kind = Kind(kind)
    if kind in current:
        remaining = current - {kind}
        return remaining if remaining else current
    return current | {kind}


def expected_display(phonetic: str, orthographic: str) -> str:
    """Answer as shown after checking: 食べます（たべます）, or just the kana."""
    if orthographic == phonetic:
        return phonetic
    return f"{orthographic}（{phonetic}）"
