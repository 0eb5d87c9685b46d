from __future__ import annotations
import logging, sqlite3

from ..persistence import roast_logs as repo
from .clock import DAY_S, resolve

log = logging.getLogger(__name__)

ROAST_COOLDOWN_S = DAY_S

def retry_after(db, roaster: str, target: str, now: int | None = None) -> int:
    """Secondes avant de pouvoir re-roaster la même cible (0 = libre)."""
    now = resolve(now)
    last = repo.last_roast_ts(db.conn(), roaster, target, now - ROAST_COOLDOWN_S)
    if last is None:
        return 0
    return max(0, last + ROAST_COOLDOWN_S - now)

def check_roast_cooldown(db, roaster: str, target: str, now: int | None = None) -> bool:
    """True = bloqué (déjà roasté dans les dernières 24 h). Lecture seule."""
    if db is None:
        return False
    try:
        return retry_after(db, roaster, target, now) > 0
    except sqlite3.Error:
        log.exception("Cooldown check failed for %s -> %s", roaster, target)
        return False
