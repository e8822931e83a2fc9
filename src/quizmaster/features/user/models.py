"""Module définissant le modèle utilisateur et sa construction depuis une ligne de la base."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from quizmaster.features.level.badges import Badge


@dataclass(slots=True)
class User:
    """Utilisateur de l'application : avatar SVG, XP totale, niveau stocké et badges obtenus."""

    username: str
    avatar: str = ""
    level: int = 1
    xp: int = 0
    badges: list[Badge] = field(default_factory=list)
    is_admin: bool = False

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> User:
        return cls(
            username=row["username"],
            avatar=row.get("avatar", ""),
            level=int(row.get("level", 1)),
            xp=int(row.get("xp", 0)),
            badges=[Badge(level=int(b["level"]), name=b["name"], svg=b["svg"]) for b in row.get("badges", [])],
            is_admin=bool(row.get("is_admin", False)),
        )
