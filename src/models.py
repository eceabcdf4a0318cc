"""Pydantic models for the conjugation drill API requests and responses."""

from pydantic import BaseModel, Field

from services.forms import FormKey, Register
from services.lexicon import Kind, VerbClass


# ============================================================================
# Request Models
# ============================================================================


class QuestionRequest(BaseModel):
    """Request body for drawing a question."""
    kinds: list[Kind] = Field(default_factory=list, description="Kinds to draw from (empty = all)")


class ConjugateRequest(BaseModel):
    """Request body for conjugation."""
    word: str = Field(..., min_length=1, max_length=50, description="Dictionary form, in kana or kanji")
    form: FormKey = Field(..., description="Target form")


class SessionModel(BaseModel):
    """Score counters carried by the client between checks."""
    correct: int = Field(0, ge=0)
    total: int = Field(0, ge=0)
    streak: int = Field(0, ge=0)
    accuracy: int = Field(0, ge=0, le=100, description="Rounded percentage correct")


class CheckRequest(BaseModel):
    """Request body for answer checking."""
    word: str = Field(..., min_length=1, max_length=50, description="Dictionary form of the question")
    form: FormKey = Field(..., description="Form asked for")
    answer: str = Field("", max_length=200, description="User answer in romaji, kana or kanji")
    session: SessionModel | None = Field(None, description="Current score, updated in the response")


class ConvertRequest(BaseModel):
    """Request body for live romaji-to-kana conversion."""
    text: str = Field(..., max_length=200)
    ime_mode: bool = Field(True, description="Keep unfinished consonants as typed")


# ============================================================================
# Response Components
# ============================================================================


class LexemeInfo(BaseModel):
    """Catalog entry."""
    kana: str = Field(..., description="Dictionary form in hiragana")
    kanji: str = Field(..., description="Written form (may equal kana)")
    meaning: str = Field(..., description="English gloss")
    kind: Kind
    verb_class: VerbClass | None = None


class FormInfo(BaseModel):
    """Form catalog entry."""
    key: FormKey
    label: str
    formality: Register | None = Field(None, description="Register, if the form has one")
    display_label: str = Field(..., description="Label with register prefix")


# ============================================================================
# Response Models
# ============================================================================


class LexemeListResponse(BaseModel):
    """Response for /lexemes."""
    lexemes: list[LexemeInfo]
    count: int


class FormListResponse(BaseModel):
    """Response for /forms/{kind}."""
    kind: Kind
    forms: list[FormInfo]


class QuestionResponse(BaseModel):
    """Response for /question. The expected answer is not included."""
    lexeme: LexemeInfo
    form: FormInfo


class ConjugateResponse(BaseModel):
    """Response for /conjugate."""
    word: str = Field(..., description="Dictionary form (kana)")
    form: FormKey
    kana: str = Field(..., description="Conjugated form in hiragana")
    kanji: str = Field(..., description="Conjugated form in written spelling")
    display: str = Field(..., description="Kanji with kana reading, or kana alone")


class CheckResponse(BaseModel):
    """Response for /check."""
    submitted: bool = Field(..., description="False when the answer was blank")
    correct: bool | None = Field(None, description="None when not submitted")
    expected: ConjugateResponse
    session: SessionModel


class ConvertResponse(BaseModel):
    """Response for /convert."""
    text: str
