"""Conjugation drill FastAPI application - Japanese conjugation practice API."""

import random
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from log_config import configure_logging
from models import (
    CheckRequest,
    CheckResponse,
    ConjugateRequest,
    ConjugateResponse,
    ConvertRequest,
    ConvertResponse,
    FormInfo,
    FormListResponse,
    LexemeInfo,
    LexemeListResponse,
    QuestionRequest,
    QuestionResponse,
    SessionModel,
)
from services import (
    ConjugationError,
    FormKey,
    Kind,
    Lexeme,
    Question,
    SessionState,
    UnknownLexeme,
    all_kinds,
    all_lexemes,
    applicable_forms,
    display_label,
    expected_display,
    filter_by_kind,
    find_lexeme,
    grade,
    label,
    register,
    sample,
    to_phonetic_script,
    validate_catalog,
)
from settings import get_config

__version__ = "0.1.0"

log = configure_logging()


# ============================================================================
# Application Lifespan
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Validate the catalog and set up the question sampler on startup."""
    validate_catalog(all_lexemes())
    app.state.rng = random.Random(get_config().random_seed)
    log.info("Conjugation drill %s ready", __version__)
    yield


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="Conjugation Drill API",
    description="""Japanese conjugation practice API.

## Features
- **Questions**: Random word + form pairs, filterable by word kind
- **Conjugation**: Polite, te- and potential verb forms; adjective and copula forms
- **Checking**: Answers in romaji, kana or kanji
- **Input**: Live romaji-to-kana conversion

## Endpoints
- `/question` - Draw a question
- `/check` - Check an answer and update the score
- `/conjugate` - Conjugate a catalog word
- `/convert` - Romaji to kana as you type
""",
    version=__version__,
    debug=get_config().debug,
    lifespan=lifespan,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Helpers
# ============================================================================


def _lexeme_info(lexeme: Lexeme) -> LexemeInfo:
    return LexemeInfo(
        kana=lexeme.kana,
        kanji=lexeme.kanji,
        meaning=lexeme.meaning,
        kind=lexeme.kind,
        verb_class=lexeme.verb_class,
    )


def _form_info(form: FormKey) -> FormInfo:
    return FormInfo(
        key=form,
        label=label(form),
        formality=register(form),
        display_label=display_label(form),
    )


def _conjugation(question: Question) -> ConjugateResponse:
    kana, kanji = question.expected_answers()
    return ConjugateResponse(
        word=question.lexeme.kana,
        form=question.form,
        kana=kana,
        kanji=kanji,
        display=expected_display(kana, kanji),
    )


def _lookup(word: str) -> Lexeme:
    try:
        return find_lexeme(word)
    except UnknownLexeme as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "conjugation-drill", "version": __version__}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str]:
    """Detailed health check."""
    return {"status": "healthy", "version": __version__, "lexemes": str(len(all_lexemes()))}


# ============================================================================
# Catalog Endpoints
# ============================================================================


@app.get("/kinds", tags=["Catalog"])
async def kinds_endpoint() -> list[str]:
    """Word kinds that can be enabled for practice."""
    return [kind.value for kind in all_kinds()]


@app.get("/forms/{kind}", response_model=FormListResponse, tags=["Catalog"])
async def forms_endpoint(kind: Kind) -> FormListResponse:
    """Forms drilled for a word kind, with their prompt labels."""
    return FormListResponse(kind=kind, forms=[_form_info(f) for f in applicable_forms(kind)])


@app.get("/lexemes", response_model=LexemeListResponse, tags=["Catalog"])
async def lexemes_endpoint(kind: list[Kind] | None = Query(None)) -> LexemeListResponse:
    """Catalog entries, optionally restricted to some kinds."""
    lexemes = filter_by_kind(kind) if kind else all_lexemes()
    return LexemeListResponse(lexemes=[_lexeme_info(lex) for lex in lexemes], count=len(lexemes))


# ============================================================================
# Drill Endpoints
# ============================================================================


@app.post("/question", response_model=QuestionResponse, tags=["Drill"])
async def question_endpoint(request: QuestionRequest) -> QuestionResponse:
    """
    Draw a random question.

    Only words of the requested kinds are used; if none are given, or none
    match, any word can be drawn.
    """
    question = sample(request.kinds, rng=getattr(app.state, "rng", None))
    return QuestionResponse(lexeme=_lexeme_info(question.lexeme), form=_form_info(question.form))


@app.post("/check", response_model=CheckResponse, tags=["Drill"])
async def check_endpoint(request: CheckRequest) -> CheckResponse:
    """
    Check an answer.

    Romaji and katakana are folded to hiragana before comparing; either the
    kana or the kanji spelling is accepted. A blank answer is not scored and
    the session comes back unchanged.
    """
    question = Question(_lookup(request.word), request.form)
    incoming = request.session or SessionModel()
    state = SessionState(correct=incoming.correct, total=incoming.total, streak=incoming.streak)

    try:
        expected = _conjugation(question)
        state, ok = grade(state, request.answer, question)
    except ConjugationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    log.debug("Checked %r for %s/%s: %s", request.answer, question.lexeme.kana, question.form, ok)
    return CheckResponse(
        submitted=ok is not None,
        correct=ok,
        expected=expected,
        session=SessionModel(
            correct=state.correct,
            total=state.total,
            streak=state.streak,
            accuracy=state.accuracy,
        ),
    )


@app.post("/conjugate", response_model=ConjugateResponse, tags=["Conjugation"])
async def conjugate_endpoint(request: ConjugateRequest) -> ConjugateResponse:
    """Conjugate a catalog word into one of its forms, in kana and kanji."""
    question = Question(_lookup(request.word), request.form)
    try:
        return _conjugation(question)
    except ConjugationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


@app.post("/convert", response_model=ConvertResponse, tags=["Input"])
async def convert_endpoint(request: ConvertRequest) -> ConvertResponse:
    """Convert romaji/katakana input to hiragana as the user types."""
    return ConvertResponse(text=to_phonetic_script(request.text, ime_style=request.ime_mode))


# ============================================================================
# CLI Entry Point
# ============================================================================


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )
