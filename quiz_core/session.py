# quiz_core/session.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from . import config
from .question_bank import active_questions, find_personality_type, load_personality_types, load_questions
from .scoring import score_answers
from .types import Answer, AnswerChoice, PersonalityType, Question, ScoreResult

log = logging.getLogger(__name__)


class SelectionError(ValueError):
    """Raised when a selection does not fit the current question."""


@dataclass
class QuizOutcome:
    score: ScoreResult
    personality_type: Optional[PersonalityType]
    used_fallback: bool = False


def build_answer(question: Question, option_ids: Sequence[str]) -> Answer:
    """Turn an ordered pick list into an Answer; the first pick gets choice 1."""
    if not option_ids:
        raise SelectionError("Please select at least one option.")
    if len(set(option_ids)) != len(option_ids):
        raise SelectionError("Each option can only be picked once.")
    need = question.max_selections
    if len(option_ids) != need:
        if need == 2:
            raise SelectionError("Please select your top and second top option.")
        raise SelectionError("Please select exactly one option.")
    choices: List[AnswerChoice] = []
    for idx, oid in enumerate(option_ids):
        opt = question.option(oid)
        if opt is None:
            raise SelectionError(f"Unknown option {oid!r} for question {question.id}.")
        choices.append(AnswerChoice(option_id=oid, option_alignment=opt.option_alignment or "", choice=idx + 1))
    return Answer(question_id=question.id, answer_choices=choices)


def resolve_personality_type(
    score: ScoreResult,
    catalog: Sequence[PersonalityType],
) -> QuizOutcome:
    found = find_personality_type(score.personality_type_id or "", catalog)
    if found is not None:
        return QuizOutcome(score=score, personality_type=found)
    if config.FALLBACK_TO_FIRST_TYPE and catalog:
        log.warning(
            "no catalog match for %r (top score %d); falling back to %s",
            score.personality_type_id, score.top_score, catalog[0].id,
        )
        return QuizOutcome(score=score, personality_type=catalog[0], used_fallback=True)
    return QuizOutcome(score=score, personality_type=None)


class QuizSession:
    """Walks the active questions in order and scores once at the end."""

    def __init__(
        self,
        questions: Optional[Sequence[Question]] = None,
        personality_types: Optional[Sequence[PersonalityType]] = None,
    ):
        self.questions: List[Question] = active_questions(questions if questions is not None else load_questions())
        self.personality_types: List[PersonalityType] = list(
            personality_types if personality_types is not None else load_personality_types()
        )
        self._index = 0
        self._answers: Dict[str, Answer] = {}
        self._outcome: Optional[QuizOutcome] = None

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def position(self) -> int:
        return self._index

    @property
    def current_question(self) -> Optional[Question]:
        if 0 <= self._index < len(self.questions):
            return self.questions[self._index]
        return None

    @property
    def is_last(self) -> bool:
        return self._index == len(self.questions) - 1

    @property
    def answers(self) -> List[Answer]:
        return list(self._answers.values())

    @property
    def outcome(self) -> Optional[QuizOutcome]:
        return self._outcome

    def existing_selection(self) -> List[str]:
        q = self.current_question
        if q is None or q.id not in self._answers:
            return []
        return [c.option_id for c in self._answers[q.id].answer_choices]

    def answer(self, option_ids: Sequence[str]) -> Optional[Question]:
        """Record the picks for the current question and move on.

        Returns the next question, or None once the last one is answered
        (the session is then finished).
        """
        q = self.current_question
        if q is None:
            raise SelectionError("The quiz is already complete.")
        ans = build_answer(q, list(option_ids))
        # re-answering replaces the earlier answer and invalidates any result
        self._outcome = None
        self._answers.pop(q.id, None)
        self._answers[q.id] = ans
        if self.is_last:
            self.finish()
            return None
        self._index += 1
        return self.current_question

    def back(self) -> Optional[Question]:
        if self._index > 0:
            self._index -= 1
        return self.current_question

    def finish(self) -> QuizOutcome:
        if self._outcome is None:
            score = score_answers(self.answers)
            self._outcome = resolve_personality_type(score, self.personality_types)
            self._index = len(self.questions)
        return self._outcome
