"""Module de gestion des tickets de support (un ticket par utilisateur) et de leurs messages."""

from __future__ import annotations

from sqlite3 import Connection
from typing import Any

from quizmaster.db.connection import get_conn


def _messages_for(conn: Connection, username: str) -> list[dict[str, Any]]:
    rows = conn.execute(
        "SELECT sender, text, timestamp, is_read FROM support_messages WHERE username=? ORDER BY id",
        (username,),
    ).fetchall()
    return [
        {"sender": str(r[0]), "text": str(r[1]), "timestamp": str(r[2]), "is_read": bool(r[3])}
        for r in rows
    ]


def _row_to_ticket(conn: Connection, row) -> dict[str, Any]:
    return {
        "username": str(row["username"]),
        "messages": _messages_for(conn, str(row["username"])),
        "last_message_from": row["last_message_from"],
        "user_has_unread": bool(row["user_has_unread"]),
        "admin_has_unread": bool(row["admin_has_unread"]),
    }

# ------------ Tickets -----------

def ticket_ensure(username: str) -> None:
    """Crée un ticket vide si absent."""
    with get_conn() as conn:
        conn.execute("INSERT OR IGNORE INTO support_tickets(username) VALUES (?)", (username,))


def ticket_get(username: str) -> dict[str, Any] | None:
    """Retourne le ticket (avec ses messages dans l'ordre d'envoi) ou None."""
    with get_conn() as conn:
        row = conn.execute(
            """
            SELECT username, last_message_from, user_has_unread, admin_has_unread
            FROM support_tickets WHERE username=?
            """,
            (username,),
        ).fetchone()
        if not row:
            return None
        return _row_to_ticket(conn, row)


def ticket_list() -> list[dict[str, Any]]:
    with get_conn() as conn:
        rows = conn.execute(
            """
            SELECT username, last_message_from, user_has_unread, admin_has_unread
            FROM support_tickets ORDER BY rowid
            """
        ).fetchall()
        return [_row_to_ticket(conn, r) for r in rows]


def ticket_add_message(
    username: str,
    *,
    sender: str,
    text: str,
    timestamp: str,
    user_has_unread: bool,
    admin_has_unread: bool,
) -> None:
    """Ajoute un message et met à jour l'état du ticket (dernier émetteur, indicateurs non-lus)."""
    with get_conn() as conn:
        conn.execute(
            "INSERT INTO support_messages(username, sender, text, timestamp, is_read) VALUES (?, ?, ?, ?, 0)",
            (username, sender, text, timestamp),
        )
        conn.execute(
            """
            UPDATE support_tickets
            SET last_message_from=?, user_has_unread=?, admin_has_unread=?
            WHERE username=?
            """,
            (sender, 1 if user_has_unread else 0, 1 if admin_has_unread else 0, username),
        )


def ticket_mark_read(username: str, *, reader: str) -> bool:
    """Marque comme lus les messages de l'autre partie et efface l'indicateur non-lu du lecteur.

    reader = "user" => les messages admin sont lus ; reader = "admin" => les messages user sont lus.
    """
    flag = "user_has_unread" if reader == "user" else "admin_has_unread"
    other = "admin" if reader == "user" else "user"
    with get_conn() as conn:
        cur = conn.execute(f"UPDATE support_tickets SET {flag}=0 WHERE username=?", (username,))
        if cur.rowcount == 0:
            return False
        conn.execute(
            "UPDATE support_messages SET is_read=1 WHERE username=? AND sender=?",
            (username, other),
        )
    return True


def ticket_delete(username: str) -> bool:
    """Supprime le ticket (ses messages partent en cascade)."""
    with get_conn() as conn:
        cur = conn.execute("DELETE FROM support_tickets WHERE username=?", (username,))
    return cur.rowcount > 0
