"""Admin-facing formatting for email signups."""
from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from . import config

_HEADERS: tuple[str, ...] = ("Email", "Personality Type", "Date Signed Up")


def format_personality_type(type_id: Optional[str]) -> str:
    # "Artistic_Emotional-Stability" -> "Artistic / Emotional Stability"
    if not type_id:
        return "—"
    return type_id.replace("_", " / ").replace("-", " ")


def format_date(value: str) -> str:
    try:
        dt = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return "" if value is None else str(value)
    return dt.strftime(config.EXPORT_DATE_FORMAT)


def signups_to_csv(rows: Iterable[Dict[str, Any]]) -> str:
    """Render signup records as CSV; data cells are quoted, the header is not."""

    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    buf.write(",".join(_HEADERS) + "\n")
    for row in rows:
        writer.writerow([
            row.get("email", ""),
            row.get("personality_type_id") or "",
            format_date(row.get("created_at", "")),
        ])
    return buf.getvalue()


__all__ = ["format_personality_type", "format_date", "signups_to_csv"]
