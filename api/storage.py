"""JSON-file store for quiz email signups.

Signups live in a single JSON list under ``DATA_DIR``. Writes go through a
temp file and an atomic replace; a process-wide lock serialises updates.
"""

from __future__ import annotations

import json
import logging
import os
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from quiz_core import config

log = logging.getLogger(__name__)

DATA_ROOT = Path(os.getenv("DATA_DIR", config.DATA_DIR)).resolve()
SIGNUPS_PATH = DATA_ROOT / "quiz_emails.json"

_LOCK = threading.Lock()


class StorageError(RuntimeError):
    """Raised when the signup store cannot be read safely for an update."""


def _read_json(path: Path, default: Any) -> Any:
    if not path.exists():
        return default
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        log.exception("could not read %s", path)
        return default


def _load_rows_strict(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        return []
    try:
        rows = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise StorageError(f"could not read {path}") from e
    if not isinstance(rows, list):
        raise StorageError(f"{path} does not hold a list")
    return rows


def _write_json(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    tmp.replace(path)


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def add_signup(email: str, personality_type_id: Optional[str]) -> Tuple[Dict[str, Any], bool]:
    """Store a signup. Returns ``(record, duplicate)``; emails are unique.

    Raises StorageError rather than overwrite a store it could not read.
    """

    with _LOCK:
        rows = _load_rows_strict(SIGNUPS_PATH)
        for row in rows:
            if row.get("email") == email:
                return row, True
        record = {
            "id": str(uuid.uuid4()),
            "email": email,
            "personality_type_id": personality_type_id or None,
            "created_at": utcnow_iso(),
        }
        rows.append(record)
        _write_json(SIGNUPS_PATH, rows)
    return record, False


def list_signups() -> List[Dict[str, Any]]:
    rows = _read_json(SIGNUPS_PATH, [])
    if not isinstance(rows, list):
        return []
    return sorted(rows, key=lambda r: r.get("created_at", ""), reverse=True)
