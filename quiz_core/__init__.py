"""Scoring engine and static catalogs for the personality quiz."""
from .scoring import calculate_alignment_scores, calculate_combined_scores, calculate_results, score_answers
from .traits import BIG5_ALIGNMENTS, HOLLAND_ALIGNMENTS, get_all_personality_type_ids, normalize_alignment

__version__ = "0.1.0"
