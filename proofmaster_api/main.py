"""
FastAPI backend for ProofMaster.

Hosts the math-engine query proxy, the health check, and the session-scoped
study endpoints over the proofmaster core:
- Service layer for business logic
- Repository pattern for session storage
- Structured logging
- Flat ``{"error": ...}`` error bodies
- Dependency injection (tests override settings, HTTP session and storage)
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from functools import lru_cache
from typing import List, Optional

import requests
from fastapi import Depends, FastAPI, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from proofmaster.catalog import ExerciseCatalog, default_catalog

from .core import (
    Settings,
    get_settings,
    get_logger,
    register_error_handlers,
    settings,
    setup_logging,
)
from .models import (
    AggregateResponse,
    AnswerRequest,
    ExerciseResponse,
    ExerciseSubmitResponse,
    FlashcardDeckResponse,
    FlashcardMarkRequest,
    FlashcardRunResponse,
    HealthResponse,
    MatchingGameResponse,
    MatchRequest,
    MatchResponse,
    PracticeGradeResponse,
    PracticeProblemResponse,
    ProgressResponse,
    RapidFireAnswerResponse,
    RapidFireResponse,
    RevealResponse,
    SectionDetailResponse,
    SectionResponse,
    SessionCreatedResponse,
    TruthTableRequest,
    TruthTableSubmitResponse,
)
from .repositories import SessionRepositoryInterface, get_session_repository
from .services import QueryService, StudyService

# Setup logging
setup_logging()
logger = get_logger(__name__)


# Lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(
        "Starting ProofMaster API",
        extra_data={
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG,
            "app_id_configured": bool(settings.WOLFRAM_APP_ID),
        }
    )
    yield
    logger.info("Shutting down ProofMaster API")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Study API for Book of Proof exercises, drills and math-engine lookups",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# Register error handlers
register_error_handlers(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


# Dependency injection
_http_session: Optional[requests.Session] = None


def get_http_session() -> requests.Session:
    """Shared HTTP session for upstream calls"""
    global _http_session

    if _http_session is None:
        _http_session = requests.Session()

    return _http_session


@lru_cache()
def get_catalog() -> ExerciseCatalog:
    """Exercise catalog, built once per process"""
    return default_catalog()


def get_query_service_dep(
    app_settings: Settings = Depends(get_settings),
    http: requests.Session = Depends(get_http_session),
) -> QueryService:
    """Get query service instance"""
    return QueryService(app_settings, http)


def get_study_service_dep(
    repository: SessionRepositoryInterface = Depends(get_session_repository),
    catalog: ExerciseCatalog = Depends(get_catalog),
    app_settings: Settings = Depends(get_settings),
) -> StudyService:
    """Get study service instance"""
    return StudyService(repository, catalog, app_settings)


# Query proxy and health

@app.get("/api/query")
def query_proxy(
    q: Optional[str] = None,
    service: QueryService = Depends(get_query_service_dep)
):
    """
    Proxy a query to the math engine.

    Args:
        q: Natural-language or formula query

    Returns:
        ``{"result": text}`` on an answer, ``{"result": null, "error": ...}``
        when the engine has none
    """
    outcome = service.query(q)
    if outcome.error is not None:
        return JSONResponse(content={"result": None, "error": outcome.error})
    return JSONResponse(content={"result": outcome.result}, headers=service.cache_headers())


@app.get("/api/health", response_model=HealthResponse)
async def health_check(app_settings: Settings = Depends(get_settings)):
    """Health check endpoint"""
    return HealthResponse(
        ok=True,
        service=app_settings.SERVICE_NAME,
        timestamp=datetime.now(timezone.utc).isoformat(),
        app_id_configured=bool(app_settings.WOLFRAM_APP_ID),
    )


# Catalog

@app.get("/api/sections", response_model=List[SectionResponse])
async def list_sections(service: StudyService = Depends(get_study_service_dep)):
    """List textbook sections with definitions and exercise counts"""
    return [SectionResponse.from_domain(s, count) for s, count in service.sections()]


@app.get("/api/sections/{key}", response_model=SectionDetailResponse)
async def get_section(key: str, service: StudyService = Depends(get_study_service_dep)):
    """One section with its exercises grouped by part"""
    section, parts = service.section(key)
    count = sum(len(items) for items in parts.values())
    return SectionDetailResponse(
        section=SectionResponse.from_domain(section, count),
        parts={
            part: [ExerciseResponse.from_domain(e) for e in items]
            for part, items in parts.items()
        },
    )


@app.get("/api/exercises", response_model=List[ExerciseResponse])
async def list_exercises(
    search: Optional[str] = None,
    service: StudyService = Depends(get_study_service_dep)
):
    """List exercises in study order, optionally filtered by search text"""
    return [ExerciseResponse.from_domain(e) for e in service.exercises(search)]


@app.get("/api/exercises/{exercise_id}", response_model=ExerciseResponse)
async def get_exercise(exercise_id: str, service: StudyService = Depends(get_study_service_dep)):
    return ExerciseResponse.from_domain(service.exercise(exercise_id))


# Sessions

@app.post("/api/sessions", response_model=SessionCreatedResponse, status_code=201)
async def create_session(service: StudyService = Depends(get_study_service_dep)):
    """Start a study session with empty progress"""
    session = await service.create_session()
    return SessionCreatedResponse(session_id=session.session_id)


@app.delete("/api/sessions/{session_id}", status_code=204, response_class=Response)
async def end_session(session_id: str, service: StudyService = Depends(get_study_service_dep)):
    """End a session; its progress is discarded"""
    await service.end_session(session_id)
    return Response(status_code=204)


@app.get("/api/sessions/{session_id}/progress", response_model=ProgressResponse)
async def get_progress(session_id: str, service: StudyService = Depends(get_study_service_dep)):
    overall, sections, records = await service.progress(session_id)
    return ProgressResponse(
        overall=AggregateResponse.from_domain(overall),
        sections=sections,
        records=records,
    )


@app.post("/api/sessions/{session_id}/open/{exercise_id}", response_model=ExerciseResponse)
async def open_exercise(
    session_id: str,
    exercise_id: str,
    service: StudyService = Depends(get_study_service_dep)
):
    exercise = await service.open_exercise(session_id, exercise_id)
    return ExerciseResponse.from_domain(exercise)


@app.post("/api/sessions/{session_id}/random", response_model=ExerciseResponse)
async def open_random(session_id: str, service: StudyService = Depends(get_study_service_dep)):
    """Open a random exercise that is not yet mastered"""
    exercise = await service.open_random(session_id)
    return ExerciseResponse.from_domain(exercise)


@app.post("/api/sessions/{session_id}/navigate", response_model=ExerciseResponse)
async def navigate(
    session_id: str,
    direction: int = Query(1, description="1 for next, -1 for previous"),
    service: StudyService = Depends(get_study_service_dep)
):
    """Move to the neighbouring exercise, wrapping at both ends"""
    exercise = await service.navigate(session_id, direction)
    return ExerciseResponse.from_domain(exercise)


@app.post("/api/sessions/{session_id}/remix", response_model=ExerciseResponse)
async def remix_exercise(session_id: str, service: StudyService = Depends(get_study_service_dep)):
    """Swap the active exercise for a randomized variant"""
    exercise = await service.remix_active(session_id)
    return ExerciseResponse.from_domain(exercise)


@app.post("/api/sessions/{session_id}/submit", response_model=ExerciseSubmitResponse)
async def submit_answer(
    session_id: str,
    request: AnswerRequest,
    service: StudyService = Depends(get_study_service_dep)
):
    """
    Grade an answer to the active exercise.

    Returns:
        Verdict, the book answer, and the updated mastery record
    """
    result, mastery = await service.submit(session_id, request.answer)
    return ExerciseSubmitResponse(
        exercise_id=result.exercise_id,
        correct=result.correct,
        student_answer=result.student_answer,
        correct_answer=result.correct_answer,
        mastery=mastery,
    )


@app.post("/api/sessions/{session_id}/truth-table", response_model=TruthTableSubmitResponse)
async def submit_truth_table(
    session_id: str,
    request: TruthTableRequest,
    service: StudyService = Depends(get_study_service_dep)
):
    """Grade a filled-in truth table row by row"""
    exercise_id, result, mastery = await service.submit_truth_table(session_id, request.selections)
    return TruthTableSubmitResponse.from_domain(exercise_id, result, mastery)


@app.post("/api/sessions/{session_id}/reveal", response_model=RevealResponse)
async def reveal_answer(session_id: str, service: StudyService = Depends(get_study_service_dep)):
    exercise = await service.reveal(session_id)
    return RevealResponse.from_domain(exercise)


# Practice

@app.get("/api/practice", response_model=List[PracticeProblemResponse])
async def list_practice(service: StudyService = Depends(get_study_service_dep)):
    return [
        PracticeProblemResponse.from_domain(i, p)
        for i, p in enumerate(service.practice_problems())
    ]


@app.post("/api/practice/{index}/grade", response_model=PracticeGradeResponse)
async def grade_practice(
    index: int,
    request: AnswerRequest,
    service: StudyService = Depends(get_study_service_dep)
):
    """Classify an open-ended answer and pick the feedback line"""
    problem, result, feedback = service.grade_practice(index, request.answer)
    return PracticeGradeResponse.from_domain(problem, result, feedback)


# Drills

@app.get("/api/flashcards", response_model=List[FlashcardDeckResponse])
async def list_decks(service: StudyService = Depends(get_study_service_dep)):
    return [FlashcardDeckResponse.from_domain(d) for d in service.decks()]


@app.post("/api/sessions/{session_id}/flashcards/mark", response_model=FlashcardRunResponse)
async def mark_flashcard(
    session_id: str,
    request: FlashcardMarkRequest,
    service: StudyService = Depends(get_study_service_dep)
):
    run = await service.mark_flashcard(session_id, request.known)
    return FlashcardRunResponse.from_domain(run)


@app.post("/api/sessions/{session_id}/flashcards/{deck}", response_model=FlashcardRunResponse)
async def start_flashcards(
    session_id: str,
    deck: str,
    service: StudyService = Depends(get_study_service_dep)
):
    run = await service.start_flashcards(session_id, deck)
    return FlashcardRunResponse.from_domain(run)


@app.post("/api/sessions/{session_id}/matching", response_model=MatchingGameResponse)
async def start_matching(session_id: str, service: StudyService = Depends(get_study_service_dep)):
    game = await service.start_matching(session_id)
    return MatchingGameResponse.from_domain(game)


@app.post("/api/sessions/{session_id}/matching/match", response_model=MatchResponse)
async def match_pair(
    session_id: str,
    request: MatchRequest,
    service: StudyService = Depends(get_study_service_dep)
):
    correct, game = await service.match(session_id, request.prompt, request.answer)
    return MatchResponse(correct=correct, game=MatchingGameResponse.from_domain(game))


@app.post("/api/sessions/{session_id}/rapid-fire", response_model=RapidFireResponse)
async def start_rapid_fire(session_id: str, service: StudyService = Depends(get_study_service_dep)):
    round_ = await service.start_rapid_fire(session_id)
    return RapidFireResponse.from_domain(round_)


@app.post("/api/sessions/{session_id}/rapid-fire/answer", response_model=RapidFireAnswerResponse)
async def answer_rapid_fire(
    session_id: str,
    request: AnswerRequest,
    service: StudyService = Depends(get_study_service_dep)
):
    result, round_ = await service.answer_rapid_fire(session_id, request.answer)
    return RapidFireAnswerResponse(result=result, round=RapidFireResponse.from_domain(round_))


@app.post("/api/sessions/{session_id}/rapid-fire/next", response_model=RapidFireResponse)
async def next_rapid_fire(session_id: str, service: StudyService = Depends(get_study_service_dep)):
    round_ = await service.next_rapid_fire(session_id)
    return RapidFireResponse.from_domain(round_)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "proofmaster_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
