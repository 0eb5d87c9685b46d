# roastbot/core/db/base.py
from __future__ import annotations
import os, sqlite3, threading
from contextlib import contextmanager

from roastbot.core.config import settings

DB_FILENAME = "roastbot.db"

def _connect(path: str) -> sqlite3.Connection:
    con = sqlite3.connect(path, check_same_thread=False, isolation_level=None, timeout=5.0)
    con.row_factory = sqlite3.Row
    con.execute("PRAGMA journal_mode=WAL;")
    con.execute("PRAGMA foreign_keys=ON;")
    con.execute("PRAGMA synchronous=NORMAL;")
    con.execute("PRAGMA temp_store=MEMORY;")
    con.execute("PRAGMA cache_size=-20000;")
    con.execute("PRAGMA busy_timeout=5000;")
    return con

@contextmanager
def atomic(con: sqlite3.Connection, immediate: bool = True):
    # IMMEDIATE: verrou d'écriture pris avant la première lecture
    try:
        con.execute("BEGIN IMMEDIATE;" if immediate else "BEGIN;")
        yield con
        con.execute("COMMIT;")
    except Exception:
        con.execute("ROLLBACK;")
        raise

class Database:
    """
    Handle explicite vers la base SQLite (une connexion par thread).
    Construit au boot puis passé à chaque opération du domaine.
    """

    def __init__(self, path: str):
        self.path = path
        self._tls = threading.local()

    def conn(self) -> sqlite3.Connection:
        con = getattr(self._tls, "con", None)
        if con is None:
            con = _connect(self.path)
            self._tls.con = con
        return con

    @contextmanager
    def atomic(self, immediate: bool = True):
        with atomic(self.conn(), immediate) as con:
            yield con

    def migrate(self) -> int:
        from .migrations import migrate_if_needed
        return migrate_if_needed(self.conn())

    def close(self) -> None:
        con = getattr(self._tls, "con", None)
        if con is not None:
            con.close()
            self._tls.con = None

def open_database(path: str | None = None, migrate: bool = True) -> Database:
    if path is None:
        # Résoudre un chemin absolu (évite les surprises avec ./)
        data_dir = os.path.abspath(settings.data_dir)
        os.makedirs(data_dir, exist_ok=True)
        path = os.path.join(data_dir, DB_FILENAME)
    db = Database(path)
    if migrate:
        db.migrate()
    return db
