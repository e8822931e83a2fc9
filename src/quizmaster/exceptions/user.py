"""Module de définition des exceptions liées aux utilisateurs (inscription, administration, progression)."""

from quizmaster.exceptions.base import AppError


class UserError(AppError):
    """Base de toutes les erreurs liées aux utilisateurs."""

class UserNotFound(UserError):
    """L'utilisateur demandé n'existe pas."""

    key = "errorUserNotFound"

    def __init__(self, username: str) -> None:
        """Initialise l'exception avec le nom d'utilisateur recherché."""
        super().__init__(f"Utilisateur {username} introuvable.")
        self.username = username

class UsernameTaken(UserError):
    """Le nom d'utilisateur est déjà pris (comparaison insensible à la casse)."""

    key = "errorUsernameTaken"

    def __init__(self, username: str) -> None:
        """Initialise l'exception avec le nom d'utilisateur déjà utilisé."""
        super().__init__(f"Le nom d'utilisateur {username} est déjà pris.")
        self.username = username

class InvalidUsername(UserError):
    """Le nom d'utilisateur est vide."""

    key = "errorInvalidUsername"

    def __init__(self) -> None:
        """Initialise l'exception avec un message indiquant que le nom est vide."""
        super().__init__("Le nom d'utilisateur ne peut pas être vide.")

class InvalidAdminCode(UserError):
    """Le code administrateur fourni est incorrect (ou aucun code n'est configuré)."""

    key = "statsAdminFailure"

    def __init__(self) -> None:
        """Initialise l'exception avec un message générique (le code n'est jamais répété)."""
        super().__init__("Code administrateur invalide.")
