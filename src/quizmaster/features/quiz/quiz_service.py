"""Service métier des quiz : fin de tentative (statistiques + XP) et gestion des quiz sauvegardés."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from quizmaster.db.connection import get_conn
from quizmaster.db.repo import quiz_repo, stats_repo
from quizmaster.defaults import QUIZ_VISIBILITIES
from quizmaster.exceptions.domain import DomainError
from quizmaster.exceptions.quiz import InvalidQuizData, QuizNotFound, QuizTopicExists
from quizmaster.features.level.engine import xp_award_for_quiz
from quizmaster.features.progression.progression_service import LevelUpResult, ProgressionService
from quizmaster.features.quiz.models import QuizQuestion, QuizStat, SavedQuiz
from quizmaster.utils.timestamp import now_iso, now_ms

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class QuizCompletion:
    """Résultat d'une fin de quiz : XP attribuée et progression de l'utilisateur."""

    stat: QuizStat
    xp_awarded: int
    progression: LevelUpResult


def _quiz_id(topic: str) -> str:
    slug = re.sub(r"\s", "-", topic)
    return f"{now_ms()}-{slug}"


@dataclass(slots=True)
class QuizService:
    """Service métier regroupant la fin de quiz et les quiz sauvegardés (publics ou privés)."""

    progression: ProgressionService = field(default_factory=ProgressionService)

    # -------------------------- tentatives --------------------------

    def complete_quiz(self, username: str, stat: QuizStat) -> QuizCompletion:
        """Enregistre la tentative, calcule l'XP gagnée et la transmet à la progression de l'utilisateur."""
        xp = xp_award_for_quiz(stat.score, stat.total_questions, stat.difficulty)
        if stat.score > stat.total_questions:
            raise DomainError("score", stat.score, f"<= total_questions ({stat.total_questions})")

        # L'utilisateur doit exister avant d'écrire quoi que ce soit.
        self.progression.level_info(username)

        if stat.date is None:
            stat.date = now_iso()

        # Statistique et XP sont écrites dans la même transaction.
        with get_conn():
            stats_repo.stats_insert(
                username,
                topic=stat.topic,
                score=stat.score,
                total_questions=stat.total_questions,
                date=stat.date,
                difficulty=str(stat.difficulty),
                questions=[q.to_dict() for q in stat.questions],
                user_answers=list(stat.user_answers),
            )
            result = self.progression.add_xp_and_level_up(username, xp)
        log.info("%s termine %r (%d/%d, %s) : +%d XP", username, stat.topic, stat.score, stat.total_questions, stat.difficulty, xp)
        return QuizCompletion(stat=stat, xp_awarded=xp, progression=result)

    def get_quiz_stats(self, username: str) -> list[QuizStat]:
        """Retourne l'historique de l'utilisateur, la tentative la plus récente en premier."""
        return [QuizStat.from_row(r) for r in stats_repo.stats_list(username)]

    # -------------------------- quiz sauvegardés --------------------------

    def save_quiz(self, topic: str, questions: list[QuizQuestion], created_by: str, visibility: str) -> SavedQuiz:
        """Sauvegarde un quiz.

        Un sujet public doit être unique parmi les quiz publics ; un sujet privé doit être unique parmi
        les quiz privés du même auteur (comparaison insensible à la casse).
        """
        topic = (topic or "").strip()
        if not topic:
            raise InvalidQuizData("empty topic")
        if not questions:
            raise InvalidQuizData("no questions")
        if visibility not in QUIZ_VISIBILITIES:
            raise InvalidQuizData(f"unknown visibility {visibility!r}")

        if visibility == "public":
            if quiz_repo.quiz_topic_exists(topic, "public"):
                raise QuizTopicExists(topic, "public")
        elif quiz_repo.quiz_topic_exists(topic, "private", created_by=created_by):
            raise QuizTopicExists(topic, "private")

        quiz = SavedQuiz(
            id=_quiz_id(topic),
            topic=topic,
            questions=list(questions),
            created_by=created_by,
            visibility=visibility,
        )
        quiz_repo.quiz_insert(
            quiz.id,
            topic=quiz.topic,
            questions=[q.to_dict() for q in quiz.questions],
            created_by=quiz.created_by,
            visibility=quiz.visibility,
        )
        log.info("Quiz %s sauvegardé par %s (%s)", quiz.id, created_by, visibility)
        return quiz

    def update_quiz(self, quiz: SavedQuiz) -> SavedQuiz:
        """Remplace le contenu d'un quiz existant (édition des questions par un admin)."""
        if quiz.visibility not in QUIZ_VISIBILITIES:
            raise InvalidQuizData(f"unknown visibility {quiz.visibility!r}")
        ok = quiz_repo.quiz_update(
            quiz.id,
            topic=quiz.topic,
            questions=[q.to_dict() for q in quiz.questions],
            created_by=quiz.created_by,
            visibility=quiz.visibility,
        )
        if not ok:
            raise QuizNotFound(quiz.id)
        return quiz

    def delete_quiz(self, quiz_id: str) -> None:
        if not quiz_repo.quiz_delete(quiz_id):
            raise QuizNotFound(quiz_id)
        log.info("Quiz %s supprimé", quiz_id)

    def get_quiz(self, quiz_id: str) -> SavedQuiz:
        row = quiz_repo.quiz_get(quiz_id)
        if row is None:
            raise QuizNotFound(quiz_id)
        return SavedQuiz.from_row(row)

    def get_all_quizzes(self) -> list[SavedQuiz]:
        return [SavedQuiz.from_row(r) for r in quiz_repo.quiz_list()]

    def get_public_quizzes(self) -> list[SavedQuiz]:
        return [SavedQuiz.from_row(r) for r in quiz_repo.quiz_list(visibility="public")]

    def get_private_quizzes_for_user(self, username: str) -> list[SavedQuiz]:
        return [SavedQuiz.from_row(r) for r in quiz_repo.quiz_list(visibility="private", created_by=username)]
