"""Module de création du schéma SQLite (utilisateurs, badges, statistiques, quiz sauvegardés, support)."""

from quizmaster.db.connection import get_conn


def init_db() -> None:
    """Crée les tables nécessaires si elles n'existent pas déjà."""
    with get_conn() as conn:
        conn.executescript("""
        -- -------------------- Utilisateurs --------------------
        CREATE TABLE IF NOT EXISTS users (
			username    TEXT    NOT NULL PRIMARY KEY COLLATE NOCASE,
			avatar      TEXT    NOT NULL DEFAULT '',
			level       INTEGER NOT NULL DEFAULT 1,
			xp          INTEGER NOT NULL DEFAULT 0,
			is_admin    INTEGER NOT NULL DEFAULT 0
        );

        CREATE TABLE IF NOT EXISTS user_badges (
			username    TEXT    NOT NULL COLLATE NOCASE,
			level       INTEGER NOT NULL,
			name        TEXT    NOT NULL,
			svg         TEXT    NOT NULL,
			PRIMARY KEY (username, level),
			FOREIGN KEY (username) REFERENCES users(username) ON DELETE CASCADE
        );

        -- -------------------- Statistiques de quiz --------------------
        CREATE TABLE IF NOT EXISTS quiz_stats (
			id              INTEGER PRIMARY KEY AUTOINCREMENT,
			username        TEXT    NOT NULL COLLATE NOCASE,
			topic           TEXT    NOT NULL,
			score           INTEGER NOT NULL,
			total_questions INTEGER NOT NULL,
			date            TEXT    NOT NULL,
			difficulty      TEXT    NOT NULL,
			questions       TEXT    NOT NULL DEFAULT '[]',
			user_answers    TEXT    NOT NULL DEFAULT '[]'
        );

        CREATE INDEX IF NOT EXISTS idx_quiz_stats_user ON quiz_stats(username);

        -- -------------------- Quiz sauvegardés --------------------
        CREATE TABLE IF NOT EXISTS saved_quizzes (
			id          TEXT    NOT NULL PRIMARY KEY,
			topic       TEXT    NOT NULL,
			questions   TEXT    NOT NULL,
			created_by  TEXT    NOT NULL,
			visibility  TEXT    NOT NULL CHECK (visibility IN ('public', 'private')),
			created_seq INTEGER NOT NULL
        );

        -- -------------------- Support --------------------
        CREATE TABLE IF NOT EXISTS support_tickets (
			username            TEXT    NOT NULL PRIMARY KEY COLLATE NOCASE,
			last_message_from   TEXT    CHECK (last_message_from IN ('user', 'admin')),
			user_has_unread     INTEGER NOT NULL DEFAULT 0,
			admin_has_unread    INTEGER NOT NULL DEFAULT 0
        );

        CREATE TABLE IF NOT EXISTS support_messages (
			id          INTEGER PRIMARY KEY AUTOINCREMENT,
			username    TEXT    NOT NULL COLLATE NOCASE,
			sender      TEXT    NOT NULL CHECK (sender IN ('user', 'admin')),
			text        TEXT    NOT NULL,
			timestamp   TEXT    NOT NULL,
			is_read     INTEGER NOT NULL DEFAULT 0,
			FOREIGN KEY (username) REFERENCES support_tickets(username) ON DELETE CASCADE
        );
        """)
