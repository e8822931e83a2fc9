"""Module définissant l'erreur de domaine levée par les calculs de niveaux et d'XP."""

from quizmaster.exceptions.base import AppError


class DomainError(AppError, ValueError):
    """Valeur numérique hors de son domaine (XP, niveau ou compteur négatif, type invalide)."""

    key = "errorInvalidValue"

    def __init__(self, name: str, value: object, expected: str) -> None:
        """Initialise l'exception avec le nom du paramètre, la valeur reçue et le domaine attendu."""
        super().__init__(f"{name} invalide: {value!r} (attendu: {expected})")
        self.name = name
        self.value = value
        self.expected = expected
