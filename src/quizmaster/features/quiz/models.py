"""Modèles des quiz : questions, tentatives terminées (statistiques) et quiz sauvegardés."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from quizmaster.features.level.engine import Difficulty


@dataclass(slots=True)
class QuizQuestion:
    """Question à choix multiples ; `context` sert d'explication de la bonne réponse."""

    id: int
    question: str
    options: list[str]
    correct_answer: str
    context: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuizQuestion:
        return cls(
            id=int(data["id"]),
            question=data["question"],
            options=list(data.get("options", [])),
            correct_answer=data["correct_answer"],
            context=data.get("context", ""),
        )


@dataclass(slots=True)
class QuizStat:
    """Tentative de quiz terminée. `date` est renseignée à l'enregistrement si absente."""

    topic: str
    score: int
    total_questions: int
    difficulty: Difficulty | str
    questions: list[QuizQuestion] = field(default_factory=list)
    user_answers: list[str] = field(default_factory=list)
    date: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> QuizStat:
        return cls(
            topic=row["topic"],
            score=int(row["score"]),
            total_questions=int(row["total_questions"]),
            difficulty=row["difficulty"],
            questions=[QuizQuestion.from_dict(q) for q in row.get("questions", [])],
            user_answers=list(row.get("user_answers", [])),
            date=row.get("date"),
        )


@dataclass(slots=True)
class SavedQuiz:
    """Quiz sauvegardé et partageable ; `visibility` vaut "public" ou "private"."""

    id: str
    topic: str
    questions: list[QuizQuestion]
    created_by: str
    visibility: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> SavedQuiz:
        return cls(
            id=row["id"],
            topic=row["topic"],
            questions=[QuizQuestion.from_dict(q) for q in row["questions"]],
            created_by=row["created_by"],
            visibility=row["visibility"],
        )
