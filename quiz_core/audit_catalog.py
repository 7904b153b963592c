from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Iterable

from . import config
from .question_bank import active_questions, load_personality_types, load_questions
from .traits import (
    BIG5_ALIGNMENTS,
    HOLLAND_ALIGNMENTS,
    KNOWN_LABELS,
    get_all_personality_type_ids,
    normalize_alignment,
)
from .types import PersonalityType, Question

log = logging.getLogger(__name__)


def _in_range(order: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= order <= bounds[1]


def _check_types(personality_types: Iterable[PersonalityType]) -> dict[str, list[str]]:
    expected = get_all_personality_type_ids()
    seen = Counter(pt.id for pt in personality_types)
    return {
        "missing_types": [tid for tid in expected if tid not in seen],
        "extra_types": sorted(tid for tid in seen if tid not in expected),
        "duplicate_types": sorted(tid for tid, n in seen.items() if n > 1),
    }


def _check_question(q: Question, warnings: list[str]) -> None:
    labels = [o.option_alignment for o in q.options]
    for label in labels:
        if label not in KNOWN_LABELS:
            warnings.append(f"{q.id} option alignment {label!r} is not a known trait")

    traits = [normalize_alignment(label)[0] for label in labels]
    repeated = sorted(t for t, n in Counter(traits).items() if n > 1)
    if repeated:
        warnings.append(f"{q.id} repeats trait(s) {', '.join(repeated)}")

    if _in_range(q.order, config.HOLLAND_QUESTION_ORDERS):
        if len(q.options) != len(HOLLAND_ALIGNMENTS):
            warnings.append(f"{q.id} Holland question has {len(q.options)} options (expected {len(HOLLAND_ALIGNMENTS)})")
        if set(traits) != set(HOLLAND_ALIGNMENTS):
            warnings.append(f"{q.id} Holland question does not cover every Holland trait once")
    elif _in_range(q.order, config.BIG5_MULTI_QUESTION_ORDERS):
        if len(q.options) != len(BIG5_ALIGNMENTS):
            warnings.append(f"{q.id} Big5 multi-select question has {len(q.options)} options (expected {len(BIG5_ALIGNMENTS)})")
        if set(traits) != set(BIG5_ALIGNMENTS):
            warnings.append(f"{q.id} Big5 multi-select question does not cover every Big5 trait once")
    elif _in_range(q.order, config.BIG5_BINARY_QUESTION_ORDERS):
        if len(q.options) != 2:
            warnings.append(f"{q.id} Big5 binary question has {len(q.options)} options (expected 2)")
        if not set(traits) <= set(BIG5_ALIGNMENTS):
            warnings.append(f"{q.id} Big5 binary question uses a non-Big5 trait")


def _check_binary_coverage(binary: list[Question], warnings: list[str]) -> dict[str, int]:
    appearances: Counter[str] = Counter()
    pairings: Counter[tuple[str, ...]] = Counter()
    for q in binary:
        traits = [normalize_alignment(o.option_alignment)[0] for o in q.options]
        appearances.update(traits)
        pairings[tuple(sorted(traits))] += 1

    for trait in BIG5_ALIGNMENTS:
        if appearances[trait] != config.BINARY_APPEARANCES_PER_TRAIT:
            warnings.append(
                f"{trait} appears in {appearances[trait]} binary questions (expected {config.BINARY_APPEARANCES_PER_TRAIT})"
            )
    expected_pairings = len(binary) // config.BINARY_PAIRING_REPEATS if binary else 0
    if len(pairings) != expected_pairings:
        warnings.append(f"binary questions use {len(pairings)} distinct pairings (expected {expected_pairings})")
    for pair, n in sorted(pairings.items()):
        if n != config.BINARY_PAIRING_REPEATS:
            warnings.append(f"binary pairing {' / '.join(pair)} asked {n} times (expected {config.BINARY_PAIRING_REPEATS})")
    return dict(appearances)


def audit_catalog(
    questions: Iterable[Question],
    personality_types: Iterable[PersonalityType],
) -> dict[str, object]:
    questions = list(questions)
    types = list(personality_types)
    active = active_questions(questions)
    warnings: list[str] = []

    type_report = _check_types(types)
    for tid in type_report["missing_types"]:
        warnings.append(f"personality type {tid} is reachable but missing from the catalog")
    for tid in type_report["extra_types"]:
        warnings.append(f"personality type {tid} is in the catalog but can never be scored")
    for tid in type_report["duplicate_types"]:
        warnings.append(f"personality type {tid} appears more than once")

    if len(active) != config.EXPECTED_ACTIVE_QUESTIONS:
        warnings.append(f"{len(active)} active questions (expected {config.EXPECTED_ACTIVE_QUESTIONS})")
    orders = [q.order for q in active]
    if orders != list(range(1, len(active) + 1)):
        warnings.append(f"active question orders are not contiguous 1..{len(active)}: {orders}")

    dup_questions = sorted(qid for qid, n in Counter(q.id for q in questions).items() if n > 1)
    if dup_questions:
        warnings.append(f"duplicate question ids: {', '.join(dup_questions)}")
    dup_options = sorted(
        oid for oid, n in Counter(o.option_id for q in questions for o in q.options).items() if n > 1
    )
    if dup_options:
        warnings.append(f"duplicate option ids: {', '.join(dup_options)}")

    for q in active:
        _check_question(q, warnings)

    binary = [q for q in active if _in_range(q.order, config.BIG5_BINARY_QUESTION_ORDERS)]
    appearances = _check_binary_coverage(binary, warnings)

    counts = {
        "questions": len(questions),
        "active": len(active),
        "holland": sum(1 for q in active if _in_range(q.order, config.HOLLAND_QUESTION_ORDERS)),
        "big5_multi": sum(1 for q in active if _in_range(q.order, config.BIG5_MULTI_QUESTION_ORDERS)),
        "big5_binary": len(binary),
        "personality_types": len(types),
    }
    return {
        "counts": counts,
        "binary_appearances": appearances,
        "warnings": warnings,
        **type_report,
    }


def print_report(summary: dict[str, object]) -> None:
    print("=== Catalog Audit ===")
    counts: dict[str, int] = summary["counts"]  # type: ignore[assignment]
    for key, val in counts.items():
        print(f"  {key:<18}{val:3d}")
    appearances: dict[str, int] = summary["binary_appearances"]  # type: ignore[assignment]
    if appearances:
        print("\nBinary appearances:")
        for trait in BIG5_ALIGNMENTS:
            print(f"  {trait:<20}{appearances.get(trait, 0):3d}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")


def write_summary(summary: dict[str, object], path: Path | None = None) -> str:
    path = path or Path(config.AUDIT_SUMMARY_PATH)
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    log.info("catalog audit written to %s", path)
    return text


def main(_argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    summary = audit_catalog(load_questions(), load_personality_types())
    print_report(summary)
    write_summary(summary)
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
