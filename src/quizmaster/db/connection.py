"""Module de gestion de la connexion à la base de données SQLite."""

import os
import sqlite3
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from quizmaster.config import DB_PATH

_DB_LOCK = threading.RLock()
_CURRENT = threading.local()

@contextmanager
def get_conn() -> Iterator[sqlite3.Connection]:
    """Context manager pour obtenir une connexion à la base de données SQLite.

    Assure que les connexions sont thread-safe en utilisant un verrou, et commit si le bloc se termine sans erreur.
    Un bloc imbriqué dans le même thread réutilise la connexion ouverte : seul le bloc le plus externe
    commit, ce qui permet de regrouper plusieurs appels de repo dans une seule transaction.
    """
    with _DB_LOCK:
        current = getattr(_CURRENT, "conn", None)
        if current is not None:
            yield current
            return

        directory = os.path.dirname(DB_PATH)
        if directory:
            os.makedirs(directory, exist_ok=True)
        conn = sqlite3.connect(DB_PATH)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON;")
        _CURRENT.conn = conn
        try:
            yield conn
            conn.commit()
        finally:
            _CURRENT.conn = None
            conn.close()
