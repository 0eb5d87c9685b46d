from __future__ import annotations
import logging, sqlite3
from typing import Optional

from ..persistence import seasons as repo
from .clock import DAY_S, resolve
from .errors import NotFound, Outcome, guarded

log = logging.getLogger(__name__)

DEFAULT_SEASON_DAYS = 30

def get_active_season(db) -> Optional[dict]:
    try:
        return repo.get_active(db.conn())
    except sqlite3.Error:
        log.exception("Active season read failed")
        return None

@guarded
def start_season(db, name: str, days: int = DEFAULT_SEASON_DAYS, now: int | None = None) -> Outcome:
    """Ouvre une nouvelle saison; l'ancienne active (s'il y en a une) est close."""
    now = resolve(now)
    with db.atomic() as con:
        repo.deactivate_all(con)
        season = repo.create(con, name.strip() or "Season", now, now + int(days) * DAY_S)
    log.info("Season started: id=%s name=%s", season["id"], season["name"])
    return Outcome.ok(f"Season **{season['name']}** started.", season=season)

@guarded
def increment_pot(db, season_id: int, amount: int) -> Outcome:
    with db.atomic() as con:
        if not repo.add_to_pot(con, season_id, amount):
            raise NotFound("Season not found")
        season = repo.get(con, season_id)
    return Outcome.ok(pot=season["current_pot_size"])
