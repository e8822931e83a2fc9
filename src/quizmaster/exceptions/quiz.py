"""Module de définition des exceptions liées aux quiz (statistiques et quiz sauvegardés)."""

from quizmaster.exceptions.base import AppError


class QuizError(AppError):
    """Base de toutes les erreurs liées aux quiz."""

class QuizNotFound(QuizError):
    """Le quiz sauvegardé demandé n'existe pas."""

    key = "errorQuizNotFound"

    def __init__(self, quiz_id: str) -> None:
        """Initialise l'exception avec l'identifiant du quiz."""
        super().__init__(f"Le quiz {quiz_id} est introuvable.")
        self.quiz_id = quiz_id

class InvalidQuizData(QuizError):
    """Le quiz à sauvegarder est incomplet (sujet vide, aucune question, visibilité inconnue)."""

    key = "errorInvalidQuizData"

    def __init__(self, reason: str) -> None:
        """Initialise l'exception avec la raison du refus."""
        super().__init__(f"Quiz invalide: {reason}")
        self.reason = reason

class QuizTopicExists(QuizError):
    """Un quiz avec le même sujet existe déjà pour cette visibilité."""

    def __init__(self, topic: str, visibility: str) -> None:
        """Initialise l'exception avec le sujet en doublon et la visibilité concernée."""
        super().__init__(f"Un quiz {visibility} existe déjà pour le sujet {topic!r}.")
        self.topic = topic
        self.visibility = visibility
        self.key = "errorQuizTopicExistsPublic" if visibility == "public" else "errorQuizTopicExistsPrivate"
