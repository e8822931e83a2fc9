"""Service métier de la progression : ajout d'XP, détection des passages de niveau et attribution des badges."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from quizmaster.db.repo import user_repo
from quizmaster.exceptions.domain import DomainError
from quizmaster.exceptions.user import UserNotFound
from quizmaster.features.level.badges import Badge, BadgeProvider, PlaceholderBadgeProvider, placeholder_badge
from quizmaster.features.level.engine import LevelInfo, level_info_from_total_xp, levels_gained
from quizmaster.features.progression.ports import XpStore

log = logging.getLogger(__name__)


def _level_of(total_xp: int) -> int:
    return level_info_from_total_xp(total_xp).level


@dataclass(frozen=True, slots=True)
class LevelUpResult:
    """Résultat d'un ajout d'XP : niveaux avant/après et badges obtenus pendant l'opération."""

    username: str
    old_info: LevelInfo
    new_info: LevelInfo
    new_badges: tuple[Badge, ...] = ()

    @property
    def leveled_up(self) -> bool:
        return self.new_info.level > self.old_info.level

    @property
    def xp_gained(self) -> int:
        return self.new_info.total_xp - self.old_info.total_xp


@dataclass(slots=True)
class ProgressionService:
    """Façade de la progression des utilisateurs : le moteur calcule, le store persiste, le provider dessine les badges."""

    store: XpStore = user_repo  # type: ignore[assignment]
    badges: BadgeProvider = field(default_factory=PlaceholderBadgeProvider)

    def _xp_or_raise(self, username: str) -> int:
        xp = self.store.user_get_xp(username)
        if xp is None:
            raise UserNotFound(username)
        return xp

    def level_info(self, username: str) -> LevelInfo:
        """Recalcule le LevelInfo de l'utilisateur depuis son XP stockée."""
        return level_info_from_total_xp(self._xp_or_raise(username))

    def _badge_for(self, level: int) -> Badge:
        try:
            name, svg = self.badges.generate(level)
        except Exception:
            # Le badge reste dû : l'utilisateur reçoit le badge de remplacement.
            log.exception("Échec de génération du badge du niveau %d", level)
            return placeholder_badge(level)
        return Badge(level=level, name=name, svg=svg)

    def add_xp_and_level_up(self, username: str, xp_gained: int) -> LevelUpResult:
        """Ajoute de l'XP à l'utilisateur, met à jour son niveau et attribue un badge par niveau franchi."""
        if isinstance(xp_gained, bool) or not isinstance(xp_gained, int) or xp_gained < 0:
            raise DomainError("xp_gained", xp_gained, "integer >= 0")

        change = self.store.user_add_xp(username, xp_gained, _level_of)
        if change is None:
            raise UserNotFound(username)
        old_xp, new_xp = change
        old_info = level_info_from_total_xp(old_xp)
        new_info = level_info_from_total_xp(new_xp)

        new_badges = [self._badge_for(lvl) for lvl in levels_gained(old_xp, new_xp)]
        if new_badges:
            self.store.user_add_badges(username, [(b.level, b.name, b.svg) for b in new_badges])
            log.info("%s passe du niveau %d au niveau %d", username, old_info.level, new_info.level)

        return LevelUpResult(
            username=username,
            old_info=old_info,
            new_info=new_info,
            new_badges=tuple(new_badges),
        )
