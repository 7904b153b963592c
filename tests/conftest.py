from __future__ import annotations

import pytest

from quiz_core.question_bank import active_questions, load_personality_types, load_questions
from quiz_core.types import Answer, AnswerChoice, PersonalityType, Question


def make_answer(question_id: str, *alignments: str) -> Answer:
    """One Answer whose picks are ranked in argument order."""

    return Answer(
        question_id=question_id,
        answer_choices=[
            AnswerChoice(option_id=f"{question_id}_{idx}", option_alignment=label, choice=idx + 1)
            for idx, label in enumerate(alignments)
        ],
    )


def build_answers_for_type(holland: str, big5: str) -> list[Answer]:
    """Synthetic full quiz: both picks on the target traits wherever allowed."""

    answers: list[Answer] = []
    for q in range(1, 7):
        answers.append(make_answer(f"H{q}", holland, holland))
    for q in range(7, 11):
        answers.append(make_answer(f"B5_{q}", big5, big5))
    for q in range(1, 11):
        answers.append(make_answer(f"B5_bin{q}", big5))
    return answers


def build_real_answers(questions: list[Question], holland: str, big5: str) -> list[Answer]:
    """Answer the packaged quiz favouring one Holland and one Big5 trait.

    Multi-select questions pick the target first and the first other option
    second; binary questions pick the target when offered, else option 0.
    """

    answers: list[Answer] = []
    for q in active_questions(questions):
        target = holland if q.id.startswith("H") else big5
        primary = next((o for o in q.options if o.option_alignment == target), None)
        if q.is_binary:
            picked = [primary or q.options[0]]
        else:
            secondary = next(o for o in q.options if o.option_alignment != target)
            picked = [primary, secondary]
        answers.append(
            Answer(
                question_id=q.id,
                answer_choices=[
                    AnswerChoice(option_id=o.option_id, option_alignment=o.option_alignment, choice=i + 1)
                    for i, o in enumerate(picked)
                ],
            )
        )
    return answers


@pytest.fixture(scope="session")
def questions() -> list[Question]:
    return load_questions()


@pytest.fixture(scope="session")
def personality_types() -> list[PersonalityType]:
    return load_personality_types()
