"""Module de gestion des badges de niveau : tiers, protocole de génération et badges de remplacement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from quizmaster.defaults import BADGE_TIER_COLOURS, BADGE_TIERS, PLACEHOLDER_BADGE_SVG


@dataclass(frozen=True, slots=True)
class Badge:
    """Badge attribué lorsqu'un utilisateur atteint un niveau."""

    level: int
    name: str
    svg: str


class BadgeProvider(Protocol):
    """Interface d'un générateur de badges (par exemple un service d'IA externe)."""

    def generate(self, level: int) -> tuple[str, str]:
        """Retourne (nom, svg) du badge pour le niveau donné. Peut lever une exception en cas d'échec."""
        ...


def badge_tier(level: int) -> str:
    """Retourne le tier visuel (Bronze, Silver, Gold, Platinum, Diamond) associé à un niveau."""
    for minimum, tier in BADGE_TIERS:
        if level >= minimum:
            return tier
    return BADGE_TIERS[-1][1]


def placeholder_badge(level: int) -> Badge:
    """Badge gris utilisé quand le générateur a échoué : l'utilisateur garde une trace du niveau atteint."""
    return Badge(level=level, name=f"Level {level} Badge", svg=PLACEHOLDER_BADGE_SVG)


class PlaceholderBadgeProvider:
    """Générateur déterministe : un disque à la couleur du tier avec le numéro du niveau."""

    def generate(self, level: int) -> tuple[str, str]:
        tier = badge_tier(level)
        colour = BADGE_TIER_COLOURS[tier]
        svg = (
            f'<svg viewBox="0 0 100 100"><circle cx="50" cy="50" r="45" fill="{colour}"/>'
            f'<text x="50" y="60" font-size="30" fill="white" text-anchor="middle">{level}</text></svg>'
        )
        return f"{tier} Level {level} Badge", svg
