"""Module de configuration de Quizmaster, chargé de lire les variables d'environnement nécessaires au fonctionnement de l'application.

Comme le chemin de la base SQLite, le code administrateur, le niveau de log et la taille du leaderboard.
"""

import os
from typing import Final

from dotenv import load_dotenv

from quizmaster.defaults import LEADERBOARD_LIMIT as _DEFAULT_LEADERBOARD_LIMIT
from quizmaster.exceptions.config import InvalidEnvVar


def env_int_optional(name: str) -> int | None:
    """Récupère une variable d'environnement optionnelle, tente de la convertir en int, et retourne None si elle n'est pas définie."""
    value = os.getenv(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise InvalidEnvVar(name, "integer") from e


def env_str_optional(name: str) -> str | None:
    """Récupère une variable d'environnement optionnelle et retourne None si elle n'est pas définie ou est vide."""
    value = os.getenv(name)
    return value if value else None


load_dotenv()

# === Base de données ===
DB_PATH: Final[str] = env_str_optional("QUIZ_DB_PATH") or "./data/quizmaster.db"

# === Administration (optionnel) ===
# Sans code, personne ne peut devenir admin via register/promote.
ADMIN_CODE: Final[str | None] = env_str_optional("QUIZ_ADMIN_CODE")

# === Logging ===
LOG_LEVEL: Final[str] = (env_str_optional("QUIZ_LOG_LEVEL") or "INFO").upper()

# === Badges ===
BADGE_PROVIDER: Final[str] = env_str_optional("QUIZ_BADGE_PROVIDER") or "placeholder"

# === Leaderboard ===
_leaderboard_limit = env_int_optional("QUIZ_LEADERBOARD_LIMIT")
LEADERBOARD_LIMIT: Final[int] = _DEFAULT_LEADERBOARD_LIMIT if _leaderboard_limit is None else _leaderboard_limit

if LEADERBOARD_LIMIT <= 0:
    raise InvalidEnvVar("QUIZ_LEADERBOARD_LIMIT", "positive integer")
