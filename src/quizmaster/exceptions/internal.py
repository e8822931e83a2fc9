"""Module des exceptions internes liées à l'état et au cycle de vie de l'application."""

from quizmaster.exceptions.base import AppError


class InternalStateError(AppError):
    """Erreur interne liée à l'état/cycle de vie de l'application."""

class ServicesNotInitialized(InternalStateError):
    """Erreur indiquant que les services n'ont pas été initialisés."""

    def __init__(self) -> None:
        """Initialise l'exception avec un message indiquant que les services n'ont pas été initialisés."""
        super().__init__("Services non initialisés. Appelle bootstrap() avant d'utiliser get_services().")
