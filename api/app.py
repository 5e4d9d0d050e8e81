import logging
import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel

from flashcard_core.cards import CardCatalog, CardCategory
from flashcard_core.config import LOG_LEVEL, ScoringConfig
from flashcard_core.game import GameSession
from flashcard_core.scoring.similarity import classify

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Flashcard Speech Scoring Service")

# --- Global state ---
# Thresholds are read once at startup; sessions only live in memory
SCORING_CONFIG = ScoringConfig.from_env()
CATALOG = CardCatalog()
SESSION_STORE: Dict[str, GameSession] = {}

logger.info(
    "Scoring thresholds: exact>=%.2f close>=%.2f",
    SCORING_CONFIG.exact_threshold, SCORING_CONFIG.close_threshold,
)


# --- Data Models ---
class ClassifyRequest(BaseModel):
    guess: Optional[str] = None
    target: str


class ClassifyResponse(BaseModel):
    score: float
    tier: str


class SessionRequest(BaseModel):
    category: Optional[str] = None


class AnswerRequest(BaseModel):
    spoken_text: Optional[str] = None


# --- Endpoints ---

@app.get("/health")
def health_check():
    return {
        "status": "ok",
        "exact_threshold": SCORING_CONFIG.exact_threshold,
        "close_threshold": SCORING_CONFIG.close_threshold,
    }


@app.post("/classify", response_model=ClassifyResponse)
def classify_answer(req: ClassifyRequest):
    """Score a transcribed guess against a target word."""
    result = classify(req.guess, req.target, SCORING_CONFIG)
    return result.to_dict()


@app.get("/cards")
def list_cards(category: Optional[str] = None) -> List[Dict[str, Any]]:
    if category is None:
        cards = CATALOG.all()
    else:
        cards = CATALOG.by_category(_parse_category(category))
    return [c.to_dict() for c in cards]


@app.get("/cards/random")
def random_card():
    try:
        return CATALOG.random_card().to_dict()
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _parse_category(name: str) -> CardCategory:
    try:
        return CardCategory(name.lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown category: {name}")


def _get_session(session_id: str) -> GameSession:
    session = SESSION_STORE.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@app.post("/sessions", status_code=201)
def create_session(req: Optional[SessionRequest] = None):
    category = None
    if req is not None and req.category is not None:
        category = _parse_category(req.category)
    try:
        session = GameSession(catalog=CATALOG, config=SCORING_CONFIG, category=category)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    session_id = str(uuid.uuid4())
    SESSION_STORE[session_id] = session
    logger.info("Created session %s starting with %r", session_id, session.current_card.word)
    return {"session_id": session_id, **session.snapshot()}


@app.get("/sessions/{session_id}")
def get_session(session_id: str):
    return {"session_id": session_id, **_get_session(session_id).snapshot()}


@app.post("/sessions/{session_id}/answers")
def submit_answer(session_id: str, req: AnswerRequest):
    outcome = _get_session(session_id).submit_answer(req.spoken_text)
    return {"session_id": session_id, **outcome.to_dict()}


@app.delete("/sessions/{session_id}", status_code=204)
def delete_session(session_id: str):
    _get_session(session_id)
    del SESSION_STORE[session_id]
    logger.info("Deleted session %s", session_id)
    return Response(status_code=204)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
