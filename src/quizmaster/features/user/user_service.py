"""Service métier des utilisateurs : inscription, avatar, promotion admin, modération et leaderboard."""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from quizmaster.db.connection import get_conn
from quizmaster.db.repo import stats_repo, support_repo, user_repo
from quizmaster.defaults import LEADERBOARD_LIMIT
from quizmaster.exceptions.domain import DomainError
from quizmaster.exceptions.user import InvalidAdminCode, InvalidUsername, UsernameTaken, UserNotFound
from quizmaster.features.level.engine import LevelInfo, level_info_from_total_xp
from quizmaster.features.user.models import User

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LeaderboardEntry:
    """Ligne du leaderboard : rang (à partir de 1), utilisateur et niveau recalculé depuis l'XP."""

    rank: int
    username: str
    xp: int
    level_info: LevelInfo


@dataclass(slots=True)
class UserService:
    """Service métier regroupant la gestion des comptes utilisateurs (hors authentification)."""

    admin_code: str | None = None
    leaderboard_limit: int = LEADERBOARD_LIMIT

    def _code_matches(self, code: str | None) -> bool:
        if not self.admin_code or code is None:
            return False
        return hmac.compare_digest(code.encode(), self.admin_code.encode())

    # -------------------------- comptes --------------------------

    def is_username_taken(self, username: str) -> bool:
        """Indique si le nom est déjà utilisé (insensible à la casse)."""
        return user_repo.user_exists(username)

    def register_user(self, username: str, *, avatar: str = "", admin_code: str | None = None) -> User:
        """Crée un utilisateur au niveau 1, sans XP ni badge ; admin si le code administrateur correspond."""
        username = (username or "").strip()
        if not username:
            raise InvalidUsername()
        if user_repo.user_exists(username):
            raise UsernameTaken(username)

        is_admin = self._code_matches(admin_code)
        user_repo.user_insert(username, avatar=avatar, is_admin=is_admin)
        log.info("Utilisateur %s inscrit (admin=%s)", username, is_admin)
        return User(username=username, avatar=avatar, is_admin=is_admin)

    def get_user(self, username: str) -> User | None:
        """Retourne l'utilisateur, ou None s'il n'existe pas."""
        row = user_repo.user_get(username)
        return User.from_row(row) if row else None

    def require_user(self, username: str) -> User:
        """Retourne l'utilisateur ou lève UserNotFound."""
        user = self.get_user(username)
        if user is None:
            raise UserNotFound(username)
        return user

    def update_avatar(self, username: str, avatar: str) -> User:
        """Remplace l'avatar SVG de l'utilisateur."""
        if not user_repo.user_set_avatar(username, avatar):
            raise UserNotFound(username)
        return self.require_user(username)

    def promote_to_admin(self, username: str, code: str) -> User:
        """Passe l'utilisateur admin si le code est correct."""
        if not self._code_matches(code):
            log.warning("Tentative de promotion admin refusée pour %s", username)
            raise InvalidAdminCode()
        if not user_repo.user_set_admin(username, True):
            raise UserNotFound(username)
        log.info("Utilisateur %s promu admin", username)
        return self.require_user(username)

    # -------------------------- administration --------------------------

    def list_users(self) -> list[User]:
        return [User.from_row(r) for r in user_repo.user_list()]

    def update_user_by_admin(self, user: User) -> User:
        """Remplace entièrement l'utilisateur (XP, niveau, badges, droits) tel qu'édité par un admin."""
        if user.xp < 0:
            raise DomainError("xp", user.xp, ">= 0")
        if user.level < 1:
            raise DomainError("level", user.level, ">= 1")
        ok = user_repo.user_replace(
            user.username,
            avatar=user.avatar,
            level=user.level,
            xp=user.xp,
            is_admin=user.is_admin,
            badges=[(b.level, b.name, b.svg) for b in user.badges],
        )
        if not ok:
            raise UserNotFound(user.username)
        log.info("Utilisateur %s modifié par un admin", user.username)
        return self.require_user(user.username)

    def delete_user(self, username: str) -> None:
        """Supprime l'utilisateur ainsi que son historique de quiz et son ticket de support."""
        with get_conn():
            if not user_repo.user_delete(username):
                raise UserNotFound(username)
            removed = stats_repo.stats_delete_for_user(username)
            support_repo.ticket_delete(username)
        log.info("Utilisateur %s supprimé (%d statistiques)", username, removed)

    # -------------------------- leaderboard --------------------------

    def get_leaderboard(self, limit: int | None = None, offset: int = 0) -> list[LeaderboardEntry]:
        """Retourne les utilisateurs triés par XP décroissante, avec rang et niveau recalculé."""
        if limit is None:
            limit = self.leaderboard_limit
        rows = user_repo.user_list_by_xp(limit, offset)
        return [
            LeaderboardEntry(rank=offset + i + 1, username=username, xp=xp, level_info=level_info_from_total_xp(xp))
            for i, (username, xp) in enumerate(rows)
        ]
