"""Module définissant les services de Quizmaster, regroupant les différentes fonctionnalités en un seul endroit pour une gestion centralisée."""

from dataclasses import dataclass, fields

from quizmaster.exceptions.internal import ServicesNotInitialized
from quizmaster.features.progression.progression_service import ProgressionService
from quizmaster.features.quiz.quiz_service import QuizService
from quizmaster.features.support.support_service import SupportService
from quizmaster.features.user.user_service import UserService


@dataclass(slots=True)
class Services:
    """Classe regroupant les services de l'application, facilitant l'accès et la gestion de ces fonctionnalités."""

    user: UserService
    progression: ProgressionService
    quiz: QuizService
    support: SupportService

    def __len__(self) -> int:
        """Retourne le nombre de services définis dans cette classe."""
        return len(fields(self))


_SERVICES: Services | None = None


def set_services(services: Services | None) -> None:
    """Enregistre (ou efface avec None) les services de l'application."""
    global _SERVICES
    _SERVICES = services


def get_services() -> Services:
    """Retourne les services initialisés par bootstrap(), ou lève ServicesNotInitialized."""
    if _SERVICES is None:
        raise ServicesNotInitialized()
    return _SERVICES
