# roastbot/domain/shade.py
"""Throw shade: vol de points de saison entre deux joueurs."""
from __future__ import annotations
import logging

from ..persistence import players as players_repo
from ..persistence import attacks as attacks_repo
from .clock import resolve
from .errors import NegligibleValue, NotFound, Outcome, SelfTarget, guarded

log = logging.getLogger(__name__)

STEAL_RATE = 0.05
STEAL_CAP = 500

def steal_amount(victim_points: int) -> int:
    return min(STEAL_CAP, int(victim_points * STEAL_RATE))

@guarded
def perform_attack(db, attacker: str, victim: str, cost: int, now: int | None = None) -> Outcome:
    """
    Transfert victim -> attacker (5% des points, max 500) + ligne d'attaque,
    le tout dans une seule transaction. `cost` en centimes, juste journalisé.
    """
    now = resolve(now)
    if attacker == victim:
        raise SelfTarget("You cannot throw shade at yourself!")

    with db.atomic() as con:
        v = players_repo.get(con, victim)
        if v is None:
            raise NotFound("Victim not found")
        points = v["current_season_points"]
        if points <= 0:
            raise NegligibleValue("Victim has no points to steal")

        stolen = steal_amount(points)
        if stolen <= 0:
            raise NegligibleValue("Point value too low to steal")

        if not players_repo.take_points(con, victim, stolen):
            raise NegligibleValue("Victim has no points to steal")
        players_repo.give_points(con, attacker, stolen, now)
        attacks_repo.log_attack(con, attacker, victim, stolen, cost, now)

    log.info("attack %s -> %s stolen=%d", attacker, victim, stolen)
    return Outcome.ok(f"Successfully stole {stolen} points!", stolen=stolen)
