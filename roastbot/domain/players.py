import logging, sqlite3

from ..persistence import players as repo

log = logging.getLogger(__name__)

def top_by_points(db, limit: int = 10) -> list[dict]:
    try:
        return repo.top_by_points(db.conn(), int(limit))
    except sqlite3.Error:
        log.exception("Leaderboard read failed")
        return []

def count(db) -> int:
    try:
        return repo.count_players(db.conn())
    except sqlite3.Error:
        log.exception("Player count failed")
        return 0
