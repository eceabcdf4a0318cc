"""Errors raised by the conjugation core.

Every error here is a programming or data defect, never a transient
condition, so nothing in the core retries or recovers from them.
"""


class ConjugationError(ValueError):
    """Base class for conjugation engine defects."""


class InvalidForm(ConjugationError):
    """A form was requested that the lexeme's kind does not take."""


class MissingRowMapping(ConjugationError):
    """A godan verb ends in a kana missing from the i-row or e-row table."""


class MissingOverride(ConjugationError):
    """An irregular verb has no entry in the lexical override tables."""


class UnsupportedScript(ConjugationError):
    """A script other than phonetic/orthographic was requested."""


class InvalidLexeme(ConjugationError):
    """A lexeme violates the catalog invariants."""


class UnknownLexeme(LookupError):
    """No lexeme in the catalog has the requested spelling."""
