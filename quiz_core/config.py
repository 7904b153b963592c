from __future__ import annotations
import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# Scoring contract; not overridable.
FIRST_CHOICE_POINTS: int = 3
OTHER_CHOICE_POINTS: int = 1

EXPECTED_ACTIVE_QUESTIONS: int = 20
HOLLAND_QUESTION_ORDERS: tuple[int, int] = (1, 6)
BIG5_MULTI_QUESTION_ORDERS: tuple[int, int] = (7, 10)
BIG5_BINARY_QUESTION_ORDERS: tuple[int, int] = (11, 20)
BINARY_APPEARANCES_PER_TRAIT: int = 4
BINARY_PAIRING_REPEATS: int = 2

ADMIN_PASSWORD: str = "FindYourPurpose"
DATA_DIR: str = "data"
FALLBACK_TO_FIRST_TYPE: bool = True
MAX_SESSIONS: int = 1000
DEBUG_TRACE: bool = False
AUDIT_SUMMARY_PATH: str = "/tmp/catalog_audit.json"
EXPORT_DATE_FORMAT: str = "%b %d, %Y, %I:%M %p"

# // env overrides for deployments; defaults match the public site.
ADMIN_PASSWORD = _env_str("ADMIN_PASSWORD", ADMIN_PASSWORD)
DATA_DIR = _env_str("DATA_DIR", DATA_DIR)
FALLBACK_TO_FIRST_TYPE = _env_bool("FALLBACK_TO_FIRST_TYPE", FALLBACK_TO_FIRST_TYPE)
DEBUG_TRACE = _env_bool("DEBUG_TRACE", DEBUG_TRACE)
MAX_SESSIONS = _env_int("MAX_SESSIONS", MAX_SESSIONS)
AUDIT_SUMMARY_PATH = _env_str("AUDIT_SUMMARY_PATH", AUDIT_SUMMARY_PATH)
EXPECTED_ACTIVE_QUESTIONS = _env_int("EXPECTED_ACTIVE_QUESTIONS", EXPECTED_ACTIVE_QUESTIONS)
