"""Module de gestion des quiz sauvegardés (publics ou privés).

Les questions sont stockées en JSON ; l'ordre de lecture est du plus récent au plus ancien.
"""

from __future__ import annotations

import json
from typing import Any

from quizmaster.db.connection import get_conn

_COLUMNS = "id, topic, questions, created_by, visibility"


def _row_to_quiz(row) -> dict[str, Any]:
    return {
        "id": str(row["id"]),
        "topic": str(row["topic"]),
        "questions": json.loads(row["questions"]),
        "created_by": str(row["created_by"]),
        "visibility": str(row["visibility"]),
    }

# ------------ Quiz sauvegardés -----------

def quiz_insert(quiz_id: str, *, topic: str, questions: list[dict[str, Any]], created_by: str, visibility: str) -> None:
    with get_conn() as conn:
        (seq,) = conn.execute("SELECT COALESCE(MAX(created_seq), 0) + 1 FROM saved_quizzes").fetchone()
        conn.execute(
            """
            INSERT INTO saved_quizzes(id, topic, questions, created_by, visibility, created_seq)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (quiz_id, topic, json.dumps(questions, ensure_ascii=False), created_by, visibility, int(seq)),
        )


def quiz_get(quiz_id: str) -> dict[str, Any] | None:
    with get_conn() as conn:
        row = conn.execute(f"SELECT {_COLUMNS} FROM saved_quizzes WHERE id=?", (quiz_id,)).fetchone()
    return _row_to_quiz(row) if row else None


def quiz_list(*, visibility: str | None = None, created_by: str | None = None) -> list[dict[str, Any]]:
    """Retourne les quiz filtrés (visibilité et/ou auteur), du plus récent au plus ancien."""
    where: list[str] = []
    params: list[str] = []
    if visibility is not None:
        where.append("visibility=?")
        params.append(visibility)
    if created_by is not None:
        where.append("created_by=?")
        params.append(created_by)

    sql = f"SELECT {_COLUMNS} FROM saved_quizzes"
    if where:
        sql += " WHERE " + " AND ".join(where)
    sql += " ORDER BY created_seq DESC"

    with get_conn() as conn:
        rows = conn.execute(sql, tuple(params)).fetchall()
    return [_row_to_quiz(r) for r in rows]


def quiz_topic_exists(topic: str, visibility: str, *, created_by: str | None = None) -> bool:
    """True si un quiz de même sujet (insensible à la casse) existe pour cette visibilité (et cet auteur si fourni)."""
    sql = "SELECT 1 FROM saved_quizzes WHERE lower(topic)=lower(?) AND visibility=?"
    params: tuple[str, ...] = (topic, visibility)
    if created_by is not None:
        sql += " AND created_by=?"
        params = (*params, created_by)

    with get_conn() as conn:
        row = conn.execute(sql + " LIMIT 1", params).fetchone()
    return row is not None


def quiz_update(quiz_id: str, *, topic: str, questions: list[dict[str, Any]], created_by: str, visibility: str) -> bool:
    """Remplace le contenu d'un quiz. Retourne False si le quiz n'existe pas."""
    with get_conn() as conn:
        cur = conn.execute(
            "UPDATE saved_quizzes SET topic=?, questions=?, created_by=?, visibility=? WHERE id=?",
            (topic, json.dumps(questions, ensure_ascii=False), created_by, visibility, quiz_id),
        )
    return cur.rowcount > 0


def quiz_delete(quiz_id: str) -> bool:
    with get_conn() as conn:
        cur = conn.execute("DELETE FROM saved_quizzes WHERE id=?", (quiz_id,))
    return cur.rowcount > 0
