# roastbot/domain/scoring.py
from __future__ import annotations

from .clock import DAY_S, resolve

BASE_ROAST_POINTS = 100
FRIEND_BONUS_MULTIPLIER = 2.0
DECAY_RATE_PER_DAY = 0.05
START_MULTIPLIER = 2.0
MIN_DECAY_MULTIPLIER = 0.5

def _fmt(x: float) -> str:
    return f"{x:g}"

def calculate_points(season_start: int, is_friend_roast: bool = False, now: int | None = None) -> dict:
    """
    Points d'un roast selon l'avancée de la saison.

    multiplier = max(0.5, 2.0 - jours_écoulés * 0.05), x2.0 pour un roast d'ami
    points     = round(100 * multiplier)
    """
    days_elapsed = max(0, (resolve(now) - int(season_start)) // DAY_S)

    time_mult = max(MIN_DECAY_MULTIPLIER, START_MULTIPLIER - days_elapsed * DECAY_RATE_PER_DAY)
    time_mult = round(time_mult, 2)

    friend_mult = FRIEND_BONUS_MULTIPLIER if is_friend_roast else 1.0
    multiplier = time_mult * friend_mult
    points = int(round(BASE_ROAST_POINTS * multiplier))

    breakdown = f"Base({BASE_ROAST_POINTS}) * Time({_fmt(time_mult)}x)"
    if is_friend_roast:
        breakdown += f" * Friend({_fmt(FRIEND_BONUS_MULTIPLIER)}x)"
    return {"points": points, "multiplier": multiplier, "breakdown": breakdown}
