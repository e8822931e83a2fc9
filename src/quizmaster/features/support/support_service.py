"""Service métier du support : tickets utilisateur/admin avec alternance des tours et indicateurs de lecture."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from quizmaster.db.repo import support_repo
from quizmaster.exceptions.support import InvalidMessage, TicketNotFound, TicketTurnViolation
from quizmaster.features.support.models import SupportTicket
from quizmaster.utils.timestamp import now_iso

log = logging.getLogger(__name__)


def _clean_text(text: str) -> str:
    text = (text or "").strip()
    if not text:
        raise InvalidMessage()
    return text


@dataclass(slots=True)
class SupportService:
    """Service métier regroupant les échanges de support entre utilisateurs et admins."""

    def _ticket_or_raise(self, username: str) -> SupportTicket:
        row = support_repo.ticket_get(username)
        if row is None:
            raise TicketNotFound(username)
        return SupportTicket.from_row(row)

    def get_ticket_for_user(self, username: str) -> SupportTicket:
        """Retourne le ticket de l'utilisateur, en le créant vide s'il n'existe pas encore."""
        support_repo.ticket_ensure(username)
        return self._ticket_or_raise(username)

    def get_all_tickets(self) -> list[SupportTicket]:
        return [SupportTicket.from_row(r) for r in support_repo.ticket_list()]

    def send_message_from_user(self, username: str, text: str) -> SupportTicket:
        """Ajoute un message utilisateur ; refusé si le dernier message du ticket vient déjà de l'utilisateur."""
        text = _clean_text(text)
        ticket = self.get_ticket_for_user(username)
        if not ticket.user_can_send:
            raise TicketTurnViolation(username)

        support_repo.ticket_add_message(
            username,
            sender="user",
            text=text,
            timestamp=now_iso(),
            user_has_unread=False,
            admin_has_unread=True,
        )
        log.info("Nouveau message de support de %s", username)
        return self._ticket_or_raise(username)

    def send_message_from_admin(self, username: str, text: str) -> SupportTicket:
        """Ajoute une réponse admin au ticket existant de l'utilisateur."""
        text = _clean_text(text)
        self._ticket_or_raise(username)

        support_repo.ticket_add_message(
            username,
            sender="admin",
            text=text,
            timestamp=now_iso(),
            user_has_unread=True,
            admin_has_unread=False,
        )
        log.info("Réponse admin envoyée à %s", username)
        return self._ticket_or_raise(username)

    def mark_user_messages_as_read(self, username: str) -> SupportTicket:
        """L'utilisateur a lu le ticket : les messages admin passent lus."""
        if not support_repo.ticket_mark_read(username, reader="user"):
            raise TicketNotFound(username)
        return self._ticket_or_raise(username)

    def mark_admin_messages_as_read(self, username: str) -> SupportTicket:
        """Un admin a lu le ticket : les messages utilisateur passent lus."""
        if not support_repo.ticket_mark_read(username, reader="admin"):
            raise TicketNotFound(username)
        return self._ticket_or_raise(username)
