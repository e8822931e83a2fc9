"""Module de démarrage : étapes chronométrées et construction des services."""

import logging
import time
from collections.abc import Callable
from typing import Any

from quizmaster import config
from quizmaster.app.services import Services, set_services
from quizmaster.db.schema import init_db
from quizmaster.exceptions.config import UnknownBadgeProvider
from quizmaster.features.level.badges import BadgeProvider, PlaceholderBadgeProvider
from quizmaster.features.progression.progression_service import ProgressionService
from quizmaster.features.quiz.quiz_service import QuizService
from quizmaster.features.support.support_service import SupportService
from quizmaster.features.user.user_service import UserService
from quizmaster.utils.logging import setup_logging

log = logging.getLogger(__name__)

BADGE_PROVIDERS: dict[str, Callable[[], BadgeProvider]] = {
    "placeholder": PlaceholderBadgeProvider,
}


def step(name: str, fn: Callable[[], Any], *, critical: bool = True, logger: logging.Logger | None = None) -> Any:
    """Exécute une étape de démarrage, log sa durée et relance l'erreur si l'étape est critique."""
    start = time.perf_counter()
    if logger is None:
        logger = log
    try:
        result = fn()
        ms = (time.perf_counter() - start) * 1000
        label = f"{name} ({result})" if isinstance(result, (int, str)) else name
        logger.info("✅ %-53s %8.1f ms", label, ms)
        return result
    except Exception:
        ms = (time.perf_counter() - start) * 1000
        logger.exception("❌ %-50s %8.1f ms", name, ms)
        if critical:
            raise
        return None


def make_badge_provider(name: str) -> BadgeProvider:
    """Instancie le fournisseur de badges configuré."""
    factory = BADGE_PROVIDERS.get(name.strip().lower())
    if factory is None:
        raise UnknownBadgeProvider(name)
    return factory()


def build_services(*, admin_code: str | None = None, badge_provider: BadgeProvider | None = None) -> Services:
    """Construit les services de l'application ; la progression est partagée entre le quiz et l'accès direct."""
    progression = ProgressionService(badges=badge_provider or PlaceholderBadgeProvider())
    return Services(
        user=UserService(admin_code=admin_code, leaderboard_limit=config.LEADERBOARD_LIMIT),
        progression=progression,
        quiz=QuizService(progression=progression),
        support=SupportService(),
    )


def bootstrap(*, configure_logging: bool = True) -> Services:
    """Prépare l'application : logging, schéma SQLite, services."""
    if configure_logging:
        setup_logging(config.LOG_LEVEL)

    step("Initialisation de la base de données", init_db)
    provider = step("Initialisation du fournisseur de badges", lambda: make_badge_provider(config.BADGE_PROVIDER))
    services = step(
        "Initialisation des services",
        lambda: build_services(admin_code=config.ADMIN_CODE, badge_provider=provider),
    )
    set_services(services)
    return services
