"""Valeurs par défaut centralisées.

Objectif : ne pas dupliquer les mêmes valeurs (courbe d'XP, multiplicateurs, paliers de badges) dans plusieurs fichiers.
Le reste du code doit importer depuis ici.
"""

from __future__ import annotations

from typing import Final

# -------------------- Courbe de niveaux --------------------

# XP nécessaire pour passer du niveau N au niveau N+1 : floor(BASE * N ** GROWTH).
LEVEL_BASE_XP: Final[int] = 100
LEVEL_GROWTH_FACTOR: Final[float] = 1.1


# -------------------- XP de quiz --------------------

XP_PER_CORRECT_ANSWER: Final[int] = 10

DIFFICULTY_MULTIPLIERS: Final[dict[str, float]] = {
    "Easy": 1,
    "Medium": 1.5,
    "Hard": 2,
}

# Multiplicateur appliqué quand la difficulté est inconnue.
DEFAULT_DIFFICULTY_MULTIPLIER: Final[float] = 1


# -------------------- Badges --------------------

# (niveau minimum, tier) du plus haut au plus bas : le premier palier atteint gagne.
BADGE_TIERS: Final[tuple[tuple[int, str], ...]] = (
    (50, "Diamond"),
    (30, "Platinum"),
    (20, "Gold"),
    (10, "Silver"),
    (1, "Bronze"),
)

BADGE_TIER_COLOURS: Final[dict[str, str]] = {
    "Bronze": "#cd7f32",
    "Silver": "#c0c0c0",
    "Gold": "#ffd700",
    "Platinum": "#e5e4e2",
    "Diamond": "#b9f2ff",
}

PLACEHOLDER_BADGE_SVG: Final[str] = (
    '<svg viewBox="0 0 100 100"><circle cx="50" cy="50" r="45" fill="grey"/>'
    '<text x="50" y="60" font-size="30" fill="white" text-anchor="middle">?</text></svg>'
)


# -------------------- Quiz / support --------------------

QUIZ_VISIBILITIES: Final[tuple[str, ...]] = ("public", "private")

LEADERBOARD_LIMIT: Final[int] = 100
