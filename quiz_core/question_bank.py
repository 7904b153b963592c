from __future__ import annotations
import json, importlib.resources as ir
from typing import Iterable, List, Optional
from .types import Question, PersonalityType


def _read(name: str):
    data = ir.files(__package__).joinpath(f"data/{name}").read_text(encoding="utf-8")
    return json.loads(data)


def load_questions() -> List[Question]:
    return [Question.from_dict(r) for r in _read("quiz-questions.json")]


def load_personality_types() -> List[PersonalityType]:
    return [PersonalityType.from_dict(r) for r in _read("personality-types.json")]


def active_questions(questions: Iterable[Question]) -> List[Question]:
    return sorted((q for q in questions if q.active), key=lambda q: q.order)


def find_personality_type(type_id: str, catalog: Iterable[PersonalityType]) -> Optional[PersonalityType]:
    if not type_id:
        return None
    return next((pt for pt in catalog if pt.id == type_id), None)
