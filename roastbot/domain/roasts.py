# roastbot/domain/roasts.py
from __future__ import annotations
import logging

from ..persistence import players as players_repo
from ..persistence import roast_logs as roast_logs_repo
from ..persistence import seasons as seasons_repo
from .clock import resolve
from .cooldown import ROAST_COOLDOWN_S
from .errors import Cooldown, NotFound, Outcome, guarded
from .scoring import calculate_points

log = logging.getLogger(__name__)

def is_friend_roast(roaster: str, target: str, roast_type: str) -> bool:
    return roast_type == "friend" and roaster != target

@guarded
def submit_roast(db, roaster: str, target: str, roast_type: str, pot_increment: int,
                 now: int | None = None) -> Outcome:
    """
    Points d'un roast: anti-spam 24 h, barème de la saison active, joueur crédité,
    log du roast et cagnotte de saison alimentée. Une seule transaction.
    """
    now = resolve(now)
    with db.atomic() as con:
        last = roast_logs_repo.last_roast_ts(con, roaster, target, now - ROAST_COOLDOWN_S)
        if last is not None:
            wait = last + ROAST_COOLDOWN_S - now
            raise Cooldown("You already roasted this wallet in the last 24h.", retry_after=wait)

        season = seasons_repo.get_active(con)
        if season is None:
            raise NotFound("No active season")

        quote = calculate_points(season["start_ts"], is_friend_roast(roaster, target, roast_type), now)
        player = players_repo.add_roast(con, roaster, quote["points"], now)
        roast_logs_repo.log_roast(con, roaster, target, roast_type, quote["points"], now)
        seasons_repo.add_to_pot(con, season["id"], pot_increment)

    log.info("roast %s -> %s type=%s points=%d", roaster, target, roast_type, quote["points"])
    return Outcome.ok(
        f"+{quote['points']} points ({quote['breakdown']})",
        points=quote["points"], multiplier=quote["multiplier"], breakdown=quote["breakdown"],
        season_points=player["current_season_points"], total_roasts=player["total_roasts"],
    )
