from __future__ import annotations
from fastapi import FastAPI, HTTPException, Body, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import logging, re, uuid, typing as t

# ---- Engine imports ----
from quiz_core import config
from quiz_core.question_bank import load_questions, load_personality_types, active_questions, find_personality_type
from quiz_core.scoring import score_answers
from quiz_core.session import QuizOutcome, QuizSession, SelectionError, resolve_personality_type
from quiz_core.types import Answer, Question
from quiz_core.display import signups_to_csv
from .storage import StorageError, add_signup, list_signups, utcnow_iso

log = logging.getLogger(__name__)

QUESTIONS = load_questions()
PERSONALITY_TYPES = load_personality_types()
SESS: dict[str, QuizSession] = {}

_EMAIL_RX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

app = FastAPI(title="Personality Quiz API")

ALLOWED_ORIGINS = [
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class AnswerChoiceIn(BaseModel):
    optionId: str
    optionAlignment: str = ""
    choice: int

class AnswerIn(BaseModel):
    questionId: str
    answerChoices: list[AnswerChoiceIn] = []

class ScoreReq(BaseModel):
    answers: list[AnswerIn] = []

class SelectionReq(BaseModel):
    option_ids: list[str]

class EmailReq(BaseModel):
    email: str | None = None
    personalityTypeId: str | None = None

class AdminReq(BaseModel):
    password: str | None = None

# ---- Helpers ----
def _serialize_question(q: Question | None) -> dict[str, t.Any] | None:
    if q is None: return None
    return {
        "id": q.id,
        "questionType": q.question_type,
        "questionText": q.question_text,
        "order": q.order,
        "maxSelections": q.max_selections,
        "options": [{"optionId": o.option_id, "optionText": o.option_text} for o in q.options],
    }


def _serialize_outcome(outcome: QuizOutcome) -> dict[str, t.Any]:
    score = outcome.score
    pt = outcome.personality_type
    return {
        "personalityTypeId": score.personality_type_id or "",
        "hasResult": score.has_result,
        "usedFallback": outcome.used_fallback,
        "topScore": score.top_score,
        "traitScores": score.trait_scores,
        "personalityType": pt.to_dict() if pt else None,
    }


def _session(sid: str) -> QuizSession:
    sess = SESS.get(sid)
    if not sess: raise HTTPException(404, "session not found")
    return sess


def _require_admin(password: str | None) -> None:
    if not password or password != config.ADMIN_PASSWORD:
        raise HTTPException(401, "Invalid password")

# ---- Health ----
@app.get("/")
def root():
    return {"status": "ok", "service": "personality-quiz-api"}

@app.get("/health")
def health():
    return {
        "questions": len(active_questions(QUESTIONS)),
        "personality_types": len(PERSONALITY_TYPES),
        "debug_trace": config.DEBUG_TRACE,
    }

# ---- Catalog ----
@app.get("/quiz/questions")
def questions():
    return {"questions": [_serialize_question(q) for q in active_questions(QUESTIONS)]}

@app.get("/personality-types")
def personality_types():
    return {"personality_types": [pt.to_dict() for pt in PERSONALITY_TYPES]}

@app.get("/personality-types/{type_id}")
def personality_type(type_id: str):
    pt = find_personality_type(type_id, PERSONALITY_TYPES)
    if not pt: raise HTTPException(404, "personality type not found")
    return pt.to_dict()

# ---- Scoring ----
@app.post("/quiz/score")
def score(req: ScoreReq):
    answers = [Answer.from_dict(a.model_dump()) for a in req.answers]
    outcome = resolve_personality_type(score_answers(answers), PERSONALITY_TYPES)
    return _serialize_outcome(outcome)

# ---- Session flow ----
@app.post("/quiz/session/start")
def start_session():
    # oldest sessions go first once the cap is reached
    while SESS and len(SESS) >= config.MAX_SESSIONS:
        SESS.pop(next(iter(SESS)))
    sid = str(uuid.uuid4())
    sess = QuizSession(QUESTIONS, PERSONALITY_TYPES)
    SESS[sid] = sess
    return {"session_id": sid, "total": sess.total, "question": _serialize_question(sess.current_question)}

@app.post("/quiz/session/{sid}/answer")
def answer(sid: str, req: SelectionReq):
    sess = _session(sid)
    try:
        nxt = sess.answer(req.option_ids)
    except SelectionError as e:
        raise HTTPException(400, str(e))
    return {"done": nxt is None, "position": sess.position, "question": _serialize_question(nxt)}

@app.post("/quiz/session/{sid}/back")
def back(sid: str):
    sess = _session(sid)
    q = sess.back()
    return {"position": sess.position, "question": _serialize_question(q), "selected": sess.existing_selection()}

@app.post("/quiz/session/{sid}/finish")
def finish(sid: str):
    sess = _session(sid)
    outcome = sess.finish()
    SESS.pop(sid, None)
    return _serialize_outcome(outcome)

# ---- Email capture ----
@app.post("/api/quiz-email")
def quiz_email(payload: EmailReq = Body(...)):
    email = payload.email
    if not email or not isinstance(email, str):
        raise HTTPException(400, "Email is required")
    if not _EMAIL_RX.match(email.strip()):
        raise HTTPException(400, "Invalid email format")
    try:
        record, duplicate = add_signup(email.strip().lower(), payload.personalityTypeId)
    except StorageError:
        log.exception("signup store unavailable")
        raise HTTPException(500, "Failed to save email")
    if duplicate:
        log.info("duplicate signup ignored")
        return {"success": True, "duplicate": True}
    return {"success": True, "data": record}

@app.post("/api/quiz-emails-list")
def quiz_emails_list(payload: AdminReq = Body(...)):
    _require_admin(payload.password)
    return {"success": True, "data": list_signups()}

@app.get("/api/quiz-emails-export")
def quiz_emails_export(password: str | None = Query(None)):
    _require_admin(password)
    body = signups_to_csv(list_signups())
    filename = f"quiz-emails-{utcnow_iso()[:10]}.csv"
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename=\"{filename}\""},
    )
