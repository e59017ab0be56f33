"""FastAPI application with all routes."""
from __future__ import annotations

import json
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO, format="%(name)s | %(message)s")

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import FileResponse

from lesson_quiz.config import DEFAULTS, Settings, load_settings, save_settings
from lesson_quiz.db import SubmissionLog
from lesson_quiz.lesson import InvalidLessonError, LessonResult, build_record, process_lesson

app = FastAPI(title="Lesson Quiz")

_log = logging.getLogger("lesson_quiz.api")

# Global state (initialized on startup)
_settings: Settings | None = None
_submissions: SubmissionLog | None = None


def get_settings() -> Settings:
    assert _settings is not None
    return _settings


def get_submission_log() -> SubmissionLog:
    assert _submissions is not None
    return _submissions


@app.on_event("startup")
async def startup():
    global _settings, _submissions
    if _settings is not None:
        return  # Already initialized (e.g. by tests)
    _settings = load_settings()
    _submissions = SubmissionLog(_settings.submissions_full_path)
    _log.info("Logging submissions to %s", _settings.submissions_full_path)


# ── Static files ──────────────────────────────────────────────────────────

static_dir = Path(__file__).parent / "static"


@app.get("/")
async def index():
    return FileResponse(static_dir / "index.html")


@app.get("/style.css")
async def style():
    return FileResponse(static_dir / "style.css", media_type="text/css")


@app.get("/app.js")
async def script():
    return FileResponse(static_dir / "app.js", media_type="application/javascript")


# ── API: Generate ─────────────────────────────────────────────────────────

def _save_submission(content: str, result: LessonResult) -> None:
    """Best effort: a failed write is logged and never fails the request."""
    s = get_settings()
    if not s.save_submissions:
        return
    try:
        record = build_record(content, result, limit=s.content_log_limit)
        get_submission_log().append(record)
    except Exception as e:
        _log.warning("Could not write %s: %s", s.submissions_path, e)


@app.post("/api/generate")
async def api_generate(request: Request):
    try:
        body = await request.json() if await request.body() else {}
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = {}
    if not isinstance(body, dict):
        body = {}

    content = body.get("content")
    try:
        result = process_lesson(content, body.get("num_questions"), settings=get_settings())
    except InvalidLessonError as e:
        raise HTTPException(400, str(e))
    except Exception:
        _log.exception("Lesson processing failed")
        raise HTTPException(500, "Internal server error")

    _save_submission(content, result)
    _log.info("Generated %d questions", len(result.questions))
    return result.to_dict()


# ── API: Settings ─────────────────────────────────────────────────────────

@app.get("/api/settings")
async def api_get_settings():
    return get_settings().to_dict()


@app.put("/api/settings")
async def api_update_settings(request: Request):
    global _submissions
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(400, "Settings must be a JSON object")
    if not isinstance(body, dict):
        raise HTTPException(400, "Settings must be a JSON object")

    updates = {k: v for k, v in body.items() if k in DEFAULTS}
    for k, v in updates.items():
        expected = type(DEFAULTS[k])
        # bool is a subclass of int; reject it for integer settings
        if not isinstance(v, expected) or (expected is int and isinstance(v, bool)):
            raise HTTPException(400, f"Setting {k!r} must be of type {expected.__name__}")

    s = get_settings()
    for k, v in updates.items():
        setattr(s, k, v)
    save_settings(s)
    if _submissions is None or _submissions.path != s.submissions_full_path:
        _submissions = SubmissionLog(s.submissions_full_path)
    return s.to_dict()
