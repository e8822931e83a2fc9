"""Module de gestion des utilisateurs et de leurs badges dans la base de données.

Les noms d'utilisateur sont comparés sans tenir compte de la casse (COLLATE NOCASE).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from sqlite3 import Connection
from typing import Any

from quizmaster.db.connection import get_conn

# ------------ Utilisateurs -----------

def _badges_for(conn: Connection, username: str) -> list[dict[str, Any]]:
    rows = conn.execute(
        "SELECT level, name, svg FROM user_badges WHERE username=? ORDER BY level",
        (username,),
    ).fetchall()
    return [{"level": int(r[0]), "name": str(r[1]), "svg": str(r[2])} for r in rows]


def _row_to_user(conn: Connection, row) -> dict[str, Any]:
    return {
        "username": str(row["username"]),
        "avatar": str(row["avatar"]),
        "level": int(row["level"]),
        "xp": int(row["xp"]),
        "is_admin": bool(row["is_admin"]),
        "badges": _badges_for(conn, str(row["username"])),
    }


def user_exists(username: str) -> bool:
    with get_conn() as conn:
        row = conn.execute("SELECT 1 FROM users WHERE username=?", (username,)).fetchone()
    return row is not None


def user_insert(username: str, *, avatar: str = "", is_admin: bool = False) -> None:
    """Crée un utilisateur au niveau 1 avec 0 XP et aucun badge."""
    with get_conn() as conn:
        conn.execute(
            "INSERT INTO users(username, avatar, level, xp, is_admin) VALUES (?, ?, 1, 0, ?)",
            (username, avatar, 1 if is_admin else 0),
        )


def user_get(username: str) -> dict[str, Any] | None:
    """Retourne l'utilisateur (avec ses badges) ou None."""
    with get_conn() as conn:
        row = conn.execute(
            "SELECT username, avatar, level, xp, is_admin FROM users WHERE username=?",
            (username,),
        ).fetchone()
        if not row:
            return None
        return _row_to_user(conn, row)


def user_list() -> list[dict[str, Any]]:
    """Retourne tous les utilisateurs, triés par nom."""
    with get_conn() as conn:
        rows = conn.execute(
            "SELECT username, avatar, level, xp, is_admin FROM users ORDER BY username"
        ).fetchall()
        return [_row_to_user(conn, r) for r in rows]


def user_list_by_xp(limit: int, offset: int = 0) -> list[tuple[str, int]]:
    """Retourne [(username, xp), ...] trié par XP décroissante (puis par nom)."""
    with get_conn() as conn:
        rows = conn.execute(
            "SELECT username, xp FROM users ORDER BY xp DESC, username LIMIT ? OFFSET ?",
            (int(limit), int(offset)),
        ).fetchall()
    return [(str(u), int(x)) for (u, x) in rows]


def user_set_avatar(username: str, avatar: str) -> bool:
    with get_conn() as conn:
        cur = conn.execute("UPDATE users SET avatar=? WHERE username=?", (avatar, username))
    return cur.rowcount > 0


def user_set_admin(username: str, is_admin: bool) -> bool:
    with get_conn() as conn:
        cur = conn.execute(
            "UPDATE users SET is_admin=? WHERE username=?",
            (1 if is_admin else 0, username),
        )
    return cur.rowcount > 0


def user_replace(
    username: str,
    *,
    avatar: str,
    level: int,
    xp: int,
    is_admin: bool,
    badges: Iterable[tuple[int, str, str]],
) -> bool:
    """Remplace entièrement un utilisateur existant (édition admin). Retourne False si absent."""
    with get_conn() as conn:
        cur = conn.execute(
            "UPDATE users SET avatar=?, level=?, xp=?, is_admin=? WHERE username=?",
            (avatar, int(level), int(xp), 1 if is_admin else 0, username),
        )
        if cur.rowcount == 0:
            return False
        conn.execute("DELETE FROM user_badges WHERE username=?", (username,))
        conn.executemany(
            "INSERT OR REPLACE INTO user_badges(username, level, name, svg) VALUES (?, ?, ?, ?)",
            [(username, int(lvl), name, svg) for (lvl, name, svg) in badges],
        )
    return True


def user_delete(username: str) -> bool:
    """Supprime l'utilisateur (ses badges partent en cascade)."""
    with get_conn() as conn:
        cur = conn.execute("DELETE FROM users WHERE username=?", (username,))
    return cur.rowcount > 0

# ------------ Progression (XP / niveau / badges) -----------

def user_get_xp(username: str) -> int | None:
    """Retourne l'XP totale de l'utilisateur, ou None s'il n'existe pas."""
    with get_conn() as conn:
        row = conn.execute("SELECT xp FROM users WHERE username=?", (username,)).fetchone()
    return int(row[0]) if row else None


def user_add_xp(username: str, delta: int, level_of: Callable[[int], int]) -> tuple[int, int] | None:
    """Ajoute delta à l'XP et enregistre le niveau `level_of(nouvelle XP)` dans la même transaction.

    Retourne (ancienne XP, nouvelle XP), ou None si l'utilisateur n'existe pas.
    """
    with get_conn() as conn:
        cur = conn.execute("UPDATE users SET xp = xp + ? WHERE username=?", (int(delta), username))
        if cur.rowcount == 0:
            return None
        (new_xp,) = conn.execute("SELECT xp FROM users WHERE username=?", (username,)).fetchone()
        new_xp = int(new_xp)
        conn.execute("UPDATE users SET level=? WHERE username=?", (int(level_of(new_xp)), username))
    return new_xp - int(delta), new_xp


def user_add_badges(username: str, badges: Iterable[tuple[int, str, str]]) -> None:
    """Ajoute des badges (level, name, svg). Un badge existant pour le même niveau est remplacé."""
    with get_conn() as conn:
        conn.executemany(
            "INSERT OR REPLACE INTO user_badges(username, level, name, svg) VALUES (?, ?, ?, ?)",
            [(username, int(lvl), name, svg) for (lvl, name, svg) in badges],
        )
