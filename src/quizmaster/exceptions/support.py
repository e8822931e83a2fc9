"""Module de définition des exceptions liées aux tickets de support."""

from quizmaster.exceptions.base import AppError


class SupportError(AppError):
    """Base de toutes les erreurs liées au support."""

class TicketNotFound(SupportError):
    """Aucun ticket n'existe pour cet utilisateur."""

    key = "errorTicketNotFound"

    def __init__(self, username: str) -> None:
        """Initialise l'exception avec le nom de l'utilisateur du ticket."""
        super().__init__(f"Aucun ticket de support pour {username}.")
        self.username = username

class TicketTurnViolation(SupportError):
    """L'utilisateur a déjà envoyé le dernier message : il doit attendre la réponse d'un admin."""

    key = "errorSupportWaitForReply"

    def __init__(self, username: str) -> None:
        """Initialise l'exception avec le nom de l'utilisateur qui doit attendre."""
        super().__init__(f"{username} doit attendre la réponse d'un admin avant de renvoyer un message.")
        self.username = username

class InvalidMessage(SupportError):
    """Le message de support est vide."""

    key = "errorEmptyMessage"

    def __init__(self) -> None:
        """Initialise l'exception avec un message indiquant que le texte est vide."""
        super().__init__("Le message ne peut pas être vide.")
