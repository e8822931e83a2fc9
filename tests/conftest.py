import sys
import threading
from pathlib import Path

import pytest

# Permet d'importer le package depuis "src/" quand on lance pytest a la racine du repo.
_SRC = str(Path(__file__).resolve().parents[1] / "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from quizmaster.db import connection, schema  # noqa: E402


@pytest.fixture(autouse=True)
def sqlite_tmp_db(tmp_path, monkeypatch):
    """Chaque test travaille sur sa propre base SQLite (jamais ./data/quizmaster.db)."""
    db_path = tmp_path / "data" / "quizmaster.db"
    monkeypatch.setattr(connection, "DB_PATH", str(db_path))
    schema.init_db()
    return db_path


class MemoryXpStore:
    """Store XP en memoire, conforme au port XpStore."""

    def __init__(self, users: dict[str, int] | None = None):
        self.xp: dict[str, int] = dict(users or {})
        self.levels: dict[str, int] = {}
        self.badges: dict[str, list[tuple[int, str, str]]] = {}
        self._lock = threading.Lock()

    def user_get_xp(self, username):
        return self.xp.get(username)

    def user_add_xp(self, username, delta, level_of):
        with self._lock:
            if username not in self.xp:
                return None
            old = self.xp[username]
            self.xp[username] = old + delta
            self.levels[username] = level_of(old + delta)
            return old, old + delta

    def user_add_badges(self, username, badges):
        self.badges.setdefault(username, []).extend(badges)


@pytest.fixture()
def memory_store():
    return MemoryXpStore({"alice": 0})
