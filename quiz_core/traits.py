"""Trait vocabulary shared by scoring and catalog validation.

Both taxonomies are ordered tuples: the order drives the combined-score scan
and therefore tie-breaking, and it fixes the order of personality-type ids.
"""
from __future__ import annotations
from typing import Dict, List, Tuple

HOLLAND_ALIGNMENTS: Tuple[str, ...] = (
    "Investigative",
    "Artistic",
    "Social",
    "Enterprising",
    "Conventional",
    "Realistic",
)

BIG5_ALIGNMENTS: Tuple[str, ...] = (
    "Openness",
    "Conscientiousness",
    "Extraversion",
    "Agreeableness",
    "Emotional-Stability",
)

ALL_ALIGNMENTS: Tuple[str, ...] = HOLLAND_ALIGNMENTS + BIG5_ALIGNMENTS

# raw option label -> (trait it scores against, multiplier)
INVERTED_ALIGNMENTS: Dict[str, Tuple[str, int]] = {
    "Introversion, low Extraversion": ("Extraversion", -1),
    "Neuroticism": ("Emotional-Stability", -1),
    "Low Agreeableness": ("Agreeableness", -1),
}

KNOWN_LABELS: frozenset[str] = frozenset(ALL_ALIGNMENTS) | frozenset(INVERTED_ALIGNMENTS)


def normalize_alignment(label: str) -> Tuple[str, int]:
    """Map a raw option label to ``(canonical_trait, multiplier)``.

    Unknown labels pass through unchanged with a multiplier of +1.
    """
    return INVERTED_ALIGNMENTS.get(label, (label, 1))


def personality_type_id(holland: str, big5: str) -> str:
    return f"{holland}_{big5}"


def get_all_personality_type_ids() -> List[str]:
    return [personality_type_id(h, b) for h in HOLLAND_ALIGNMENTS for b in BIG5_ALIGNMENTS]
