"""Définit le protocole (port) de persistance utilisé par la progression.

Le module `quizmaster.db.repo.user_repo` satisfait ce protocole ; l'application peut en fournir un autre
(en mémoire, distant...) sans toucher au moteur de niveaux, qui ne connaît aucun stockage.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol


class XpStore(Protocol):
    """Stockage de l'XP, du niveau et des badges des utilisateurs."""

    def user_get_xp(self, username: str) -> int | None:
        """Retourne l'XP totale de l'utilisateur, ou None s'il n'existe pas."""
        ...

    def user_add_xp(self, username: str, delta: int, level_of: Callable[[int], int]) -> tuple[int, int] | None:
        """Ajoute delta à l'XP et enregistre le niveau `level_of(nouvelle XP)` de façon atomique.

        Retourne (ancienne XP, nouvelle XP), ou None si l'utilisateur n'existe pas.
        """
        ...

    def user_add_badges(self, username: str, badges: Iterable[tuple[int, str, str]]) -> None:
        """Ajoute des badges (level, name, svg) à l'utilisateur."""
        ...
