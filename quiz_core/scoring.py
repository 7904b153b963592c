# quiz_core/scoring.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, Mapping, Optional

from . import config
from .traits import (
    ALL_ALIGNMENTS,
    BIG5_ALIGNMENTS,
    HOLLAND_ALIGNMENTS,
    get_all_personality_type_ids,
    normalize_alignment,
    personality_type_id,
)
from .types import Answer, ScoreResult

log = logging.getLogger(__name__)


def _points(choice: int) -> int:
    # rank 1 is the top pick; every other rank is the low tier
    return config.FIRST_CHOICE_POINTS if choice == 1 else config.OTHER_CHOICE_POINTS


def calculate_alignment_scores(answers: Iterable[Answer]) -> Dict[str, int]:
    """Tally signed points per trait.

    Every known trait starts at 0. Unknown labels get their own bucket,
    which the combined matrix never reads.
    """
    counts: Dict[str, int] = {a: 0 for a in ALL_ALIGNMENTS}
    for answer in answers:
        for choice in answer.answer_choices:
            if not choice.option_alignment:
                continue
            trait, multiplier = normalize_alignment(choice.option_alignment)
            counts[trait] = counts.get(trait, 0) + _points(choice.choice) * multiplier
    if config.DEBUG_TRACE:
        log.debug("tally %s", " ".join(f"{k}={v}" for k, v in counts.items()))
    return counts


def calculate_combined_scores(trait_scores: Mapping[str, int]) -> Dict[str, int]:
    """Holland x Big5 products keyed ``{Holland}_{Big5}`` in scan order."""
    combined: Dict[str, int] = {}
    for holland in HOLLAND_ALIGNMENTS:
        for big5 in BIG5_ALIGNMENTS:
            combined[personality_type_id(holland, big5)] = (
                trait_scores.get(holland, 0) * trait_scores.get(big5, 0)
            )
    return combined


def _select(combined: Mapping[str, int]) -> tuple[Optional[str], int]:
    best: Optional[str] = None
    best_score = 0
    # strict > keeps the first pair seen on ties; nothing <= 0 can win
    for key, score in combined.items():
        if score > best_score:
            best_score = score
            best = key
    return best, best_score


def score_answers(answers: Iterable[Answer]) -> ScoreResult:
    trait_scores = calculate_alignment_scores(answers)
    combined = calculate_combined_scores(trait_scores)
    winner, top = _select(combined)
    if config.DEBUG_TRACE:
        log.debug("winner=%s top_score=%d", winner, top)
    return ScoreResult(
        trait_scores=trait_scores,
        combined_scores=combined,
        personality_type_id=winner,
        top_score=top,
    )


def calculate_results(answers: Iterable[Answer]) -> str:
    """Return the winning personality-type id, or ``""`` when no pair scores above 0."""
    return score_answers(answers).personality_type_id or ""


__all__ = [
    "calculate_alignment_scores",
    "calculate_combined_scores",
    "calculate_results",
    "get_all_personality_type_ids",
    "score_answers",
]
