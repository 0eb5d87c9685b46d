import logging, sqlite3

from ..persistence import profiles as repo

log = logging.getLogger(__name__)

def count(db) -> int:
    try:
        return repo.count(db.conn())
    except sqlite3.Error:
        log.exception("Profile count failed")
        return 0
