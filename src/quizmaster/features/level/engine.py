"""Module de logique métier pour le calcul des niveaux, de la progression et des gains d'XP de quiz.

Toutes les fonctions sont pures : aucune lecture/écriture de données persistées, aucun log, aucune
dépendance à l'heure courante. Le `LevelInfo` est recalculé à chaque usage et n'est jamais stocké.
"""

import math
from dataclasses import dataclass
from enum import StrEnum

from quizmaster.defaults import (
    DEFAULT_DIFFICULTY_MULTIPLIER,
    DIFFICULTY_MULTIPLIERS,
    LEVEL_BASE_XP,
    LEVEL_GROWTH_FACTOR,
    XP_PER_CORRECT_ANSWER,
)
from quizmaster.exceptions.domain import DomainError


class Difficulty(StrEnum):
    """Niveau de difficulté d'un quiz."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


@dataclass(frozen=True, slots=True)
class LevelInfo:
    """Vue dérivée d'une XP totale : niveau, XP dans le niveau, seuil suivant et pourcentage de progression."""

    level: int
    xp_in_level: int
    xp_for_next_level: int
    progress: float
    total_xp: int


def _require_int(name: str, value: object, minimum: int) -> int:
    # bool est un int en Python : on le refuse explicitement.
    if isinstance(value, bool) or not isinstance(value, int):
        raise DomainError(name, value, "integer")
    if value < minimum:
        raise DomainError(name, value, f">= {minimum}")
    return value


def xp_required_for_level(level: int) -> int:
    """Renvoie l'XP nécessaire pour passer du niveau `level` au niveau suivant."""
    _require_int("level", level, 1)
    return math.floor(LEVEL_BASE_XP * level ** LEVEL_GROWTH_FACTOR)


def cumulative_xp_for_level(level: int) -> int:
    """Renvoie l'XP totale nécessaire pour atteindre le début du niveau `level` (0 pour le niveau 1)."""
    _require_int("level", level, 1)
    return sum(xp_required_for_level(i) for i in range(1, level))


def level_info_from_total_xp(total_xp: int) -> LevelInfo:
    """Décompose une XP totale en niveau, XP dans le niveau et seuil du niveau suivant.

    Chaque seuil vaut au moins LEVEL_BASE_XP (level ** GROWTH >= 1 pour level >= 1) et la courbe est
    croissante : chaque tour de boucle consomme donc au moins LEVEL_BASE_XP, et la boucle s'arrête
    après au plus total_xp // LEVEL_BASE_XP tours.
    """
    _require_int("total_xp", total_xp, 0)

    level = 1
    xp_for_next = xp_required_for_level(level)
    remaining = total_xp

    while remaining >= xp_for_next:
        remaining -= xp_for_next
        level += 1
        xp_for_next = xp_required_for_level(level)

    return LevelInfo(
        level=level,
        xp_in_level=remaining,
        xp_for_next_level=xp_for_next,
        progress=(remaining / xp_for_next) * 100,
        total_xp=total_xp,
    )


def levels_gained(old_total_xp: int, new_total_xp: int) -> list[int]:
    """Retourne les niveaux nouvellement atteints entre deux XP totales (liste vide si aucun passage de niveau)."""
    old_level = level_info_from_total_xp(old_total_xp).level
    new_level = level_info_from_total_xp(new_total_xp).level
    return list(range(old_level + 1, new_level + 1))


def difficulty_multiplier(difficulty: Difficulty | str) -> float:
    """Retourne le multiplicateur d'XP d'une difficulté ; une difficulté inconnue vaut 1."""
    return DIFFICULTY_MULTIPLIERS.get(difficulty, DEFAULT_DIFFICULTY_MULTIPLIER)


def xp_award_for_quiz(correct_count: int, total_questions: int, difficulty: Difficulty | str) -> int:
    """Calcule l'XP gagnée pour un quiz terminé : floor(bonnes réponses * 10 * multiplicateur).

    `total_questions` est validé mais n'entre pas dans la formule : la récompense ne dépend que du
    nombre de bonnes réponses, pas du taux de réussite.
    """
    _require_int("correct_count", correct_count, 0)
    _require_int("total_questions", total_questions, 0)
    return math.floor(correct_count * XP_PER_CORRECT_ANSWER * difficulty_multiplier(difficulty))
