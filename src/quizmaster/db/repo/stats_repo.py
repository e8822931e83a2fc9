"""Module de gestion de l'historique des quiz terminés (statistiques par utilisateur)."""

from __future__ import annotations

import json
from typing import Any

from quizmaster.db.connection import get_conn

# ------------ Statistiques -----------

def stats_insert(
    username: str,
    *,
    topic: str,
    score: int,
    total_questions: int,
    date: str,
    difficulty: str,
    questions: list[dict[str, Any]],
    user_answers: list[str],
) -> int:
    """Enregistre une tentative de quiz et retourne son identifiant."""
    with get_conn() as conn:
        cur = conn.execute(
            """
            INSERT INTO quiz_stats(username, topic, score, total_questions, date, difficulty, questions, user_answers)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                username,
                topic,
                int(score),
                int(total_questions),
                date,
                difficulty,
                json.dumps(questions, ensure_ascii=False),
                json.dumps(user_answers, ensure_ascii=False),
            ),
        )
        return int(cur.lastrowid)


def stats_list(username: str) -> list[dict[str, Any]]:
    """Retourne les tentatives d'un utilisateur, la plus récente en premier."""
    with get_conn() as conn:
        rows = conn.execute(
            """
            SELECT topic, score, total_questions, date, difficulty, questions, user_answers
            FROM quiz_stats WHERE username=? ORDER BY id DESC
            """,
            (username,),
        ).fetchall()
    return [
        {
            "topic": str(r["topic"]),
            "score": int(r["score"]),
            "total_questions": int(r["total_questions"]),
            "date": str(r["date"]),
            "difficulty": str(r["difficulty"]),
            "questions": json.loads(r["questions"]),
            "user_answers": json.loads(r["user_answers"]),
        }
        for r in rows
    ]


def stats_delete_for_user(username: str) -> int:
    """Supprime l'historique d'un utilisateur et retourne le nombre de lignes supprimées."""
    with get_conn() as conn:
        cur = conn.execute("DELETE FROM quiz_stats WHERE username=?", (username,))
    return cur.rowcount
