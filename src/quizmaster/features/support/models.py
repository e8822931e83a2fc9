"""Modèles du support : messages et ticket (un ticket par utilisateur)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Sender = Literal["user", "admin"]


@dataclass(slots=True)
class SupportMessage:
    sender: Sender
    text: str
    timestamp: str
    is_read: bool = False


@dataclass(slots=True)
class SupportTicket:
    """Conversation entre un utilisateur et les admins.

    L'utilisateur ne peut pas envoyer deux messages de suite : il attend la réponse d'un admin.
    """

    username: str
    messages: list[SupportMessage] = field(default_factory=list)
    last_message_from: Sender | None = None
    user_has_unread: bool = False
    admin_has_unread: bool = False

    @property
    def user_can_send(self) -> bool:
        return self.last_message_from != "user"

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> SupportTicket:
        return cls(
            username=row["username"],
            messages=[SupportMessage(**m) for m in row.get("messages", [])],
            last_message_from=row.get("last_message_from"),
            user_has_unread=bool(row.get("user_has_unread", False)),
            admin_has_unread=bool(row.get("admin_has_unread", False)),
        )
