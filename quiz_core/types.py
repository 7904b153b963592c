from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class AnswerChoice:
    option_id: str; option_alignment: str; choice: int

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "AnswerChoice":
        return cls(
            option_id=str(raw.get("optionId", raw.get("option_id", ""))),
            option_alignment=str(raw.get("optionAlignment", raw.get("option_alignment", "")) or ""),
            choice=int(raw.get("choice", 0) or 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"optionId": self.option_id, "optionAlignment": self.option_alignment, "choice": self.choice}


@dataclass(frozen=True)
class Answer:
    question_id: str
    answer_choices: List[AnswerChoice] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Answer":
        choices = raw.get("answerChoices", raw.get("answer_choices", [])) or []
        return cls(
            question_id=str(raw.get("questionId", raw.get("question_id", ""))),
            answer_choices=[AnswerChoice.from_dict(c) for c in choices],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"questionId": self.question_id, "answerChoices": [c.to_dict() for c in self.answer_choices]}


@dataclass(frozen=True)
class QuestionOption:
    option_id: str; option_text: str; option_alignment: str

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "QuestionOption":
        return cls(
            option_id=raw["optionId"],
            option_text=raw.get("optionText", ""),
            option_alignment=raw.get("optionAlignment", ""),
        )


@dataclass(frozen=True)
class Question:
    id: str
    active: bool
    question_type: str
    question_text: str
    options: List[QuestionOption]
    order: int

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Question":
        return cls(
            id=raw["id"],
            active=bool(raw.get("active", True)),
            question_type=raw.get("questionType", ""),
            question_text=raw.get("questionText", ""),
            options=[QuestionOption.from_dict(o) for o in raw.get("options", [])],
            order=int(raw.get("order", 0)),
        )

    @property
    def is_binary(self) -> bool:
        return len(self.options) == 2

    @property
    def max_selections(self) -> int:
        return 1 if self.is_binary else 2

    def option(self, option_id: str) -> Optional[QuestionOption]:
        return next((o for o in self.options if o.option_id == option_id), None)


@dataclass(frozen=True)
class Career:
    onet_code: str; title: str; description: str = ""


@dataclass(frozen=True)
class Major:
    title: str; description: str = ""


@dataclass(frozen=True)
class PersonalityType:
    id: str
    title: str
    short_description: str = ""
    superpowers: str = ""
    recommended_careers: List[Career] = field(default_factory=list)
    possible_majors: List[Major] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "PersonalityType":
        return cls(
            id=raw["id"],
            title=raw.get("title", ""),
            short_description=raw.get("shortDescription", ""),
            superpowers=raw.get("superpowers", ""),
            recommended_careers=[
                Career(onet_code=c.get("onetCode", ""), title=c.get("title", ""), description=c.get("description", ""))
                for c in raw.get("recommendedCareers", [])
            ],
            possible_majors=[
                Major(title=m.get("title", ""), description=m.get("description", ""))
                for m in raw.get("possibleMajors", [])
            ],
        )

    @property
    def superpower_list(self) -> List[str]:
        if not self.superpowers:
            return []
        return [s.strip() for s in self.superpowers.split(" - ") if s.strip()]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "shortDescription": self.short_description,
            "superpowers": self.superpower_list,
            "recommendedCareers": [
                {"onetCode": c.onet_code, "title": c.title, "description": c.description}
                for c in self.recommended_careers
            ],
            "possibleMajors": [{"title": m.title, "description": m.description} for m in self.possible_majors],
        }


@dataclass
class ScoreResult:
    trait_scores: Dict[str, int]
    combined_scores: Dict[str, int]
    personality_type_id: Optional[str] = None
    top_score: int = 0

    @property
    def has_result(self) -> bool:
        return self.personality_type_id is not None
