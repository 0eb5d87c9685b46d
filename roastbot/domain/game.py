# roastbot/domain/game.py
"""
Mini-jeu des profils: stoke / shade / cope, payés en allumettes (matches).

Chaque action = une seule transaction (BEGIN IMMEDIATE): débit conditionnel,
effet, ligne de log. Les mises à jour sont relatives (score = score + ?),
donc deux appels concurrents ne perdent aucune écriture.
"""
from __future__ import annotations
import logging

from ..persistence import profiles as profiles_repo
from ..persistence import actions as actions_repo
from ..persistence import jackpot as jackpot_repo
from .clock import resolve, today_key
from .errors import Blocked, InsufficientBalance, NotFound, Outcome, SelfTarget, guarded

log = logging.getLogger(__name__)

STOKE_COST = 1
STOKE_GAIN = 10
SHADE_COST = 1
SHADE_DAMAGE = 10
COPE_COST = 5
COPE_DURATION_S = 60 * 60     # 1 h
LEADERBOARD_SIZE = 50

def is_shielded(profile: dict, now: int) -> bool:
    until = profile.get("shield_active_until")
    return until is not None and int(until) > int(now)

def _debit_or_raise(con, wallet: str, cost: int) -> None:
    if not profiles_repo.debit_matches(con, wallet, cost):
        raise InsufficientBalance("Not enough matches")

@guarded
def stoke(db, actor: str, now: int | None = None) -> Outcome:
    now = resolve(now)
    with db.atomic() as con:
        profiles_repo.get_or_create(con, actor, now)
        _debit_or_raise(con, actor, STOKE_COST)
        profiles_repo.add_score(con, actor, STOKE_GAIN)
        actions_repo.log_action(con, actor, "stoke", STOKE_COST, now)
        p = profiles_repo.get(con, actor)
    log.debug("stoke actor=%s score=%s", actor, p["current_score"])
    return Outcome.ok(f"Stoked! +{STOKE_GAIN} Score",
                      new_score=p["current_score"], new_balance=p["matches_balance"])

@guarded
def shade(db, actor: str, target: str, now: int | None = None) -> Outcome:
    now = resolve(now)
    if actor == target:
        raise SelfTarget("You cannot throw shade at yourself!")

    blocked = False
    with db.atomic() as con:
        attacker = profiles_repo.get_or_create(con, actor, now)
        if attacker["matches_balance"] < SHADE_COST:
            raise InsufficientBalance("Not enough matches")
        victim = profiles_repo.get(con, target)
        if victim is None:
            raise NotFound("Target profile not found")

        _debit_or_raise(con, actor, SHADE_COST)
        if is_shielded(victim, now):
            # tentative gâchée: le match est consommé quand même
            blocked = True
            actions_repo.log_action(con, actor, "shade", SHADE_COST, now, target=target, outcome="blocked")
        else:
            profiles_repo.add_score(con, target, -SHADE_DAMAGE)
            actions_repo.log_action(con, actor, "shade", SHADE_COST, now, target=target)
        attacker = profiles_repo.get(con, actor)
        victim = profiles_repo.get(con, target)

    data = {"new_balance": attacker["matches_balance"], "target_score": victim["current_score"]}
    if blocked:
        log.info("shade blocked actor=%s target=%s", actor, target)
        return Outcome.fail(Blocked("Attack Blocked! Target has a shield."), **data)
    return Outcome.ok(f"Shade Thrown! Target lost {SHADE_DAMAGE} points.", **data)

@guarded
def cope(db, actor: str, now: int | None = None) -> Outcome:
    now = resolve(now)
    until = now + COPE_DURATION_S
    with db.atomic() as con:
        profiles_repo.get_or_create(con, actor, now)
        _debit_or_raise(con, actor, COPE_COST)
        profiles_repo.set_shield(con, actor, until)
        actions_repo.log_action(con, actor, "cope", COPE_COST, now)
        p = profiles_repo.get(con, actor)
    return Outcome.ok("Cope Shield Activated! Safe for 1 hour.",
                      shield_active_until=until, new_balance=p["matches_balance"])

@guarded
def claim_daily(db, actor: str, amount: int, now: int | None = None) -> Outcome:
    now = resolve(now)
    day = today_key(now)
    with db.atomic() as con:
        profiles_repo.get_or_create(con, actor, now)
        if not profiles_repo.set_daily_claim(con, actor, day):
            return Outcome(success=False, message="Daily matches already claimed today.", error="already_claimed")
        profiles_repo.add_matches(con, actor, amount)
        p = profiles_repo.get(con, actor)
    return Outcome.ok(f"+{int(amount)} matches", new_balance=p["matches_balance"])

@guarded
def grant_matches(db, wallet: str, qty: int, now: int | None = None) -> Outcome:
    if qty <= 0:
        return Outcome(success=False, message="Quantity must be positive.", error="invalid_amount")
    with db.atomic() as con:
        profiles_repo.get_or_create(con, wallet, resolve(now))
        profiles_repo.add_matches(con, wallet, qty)
        p = profiles_repo.get(con, wallet)
    return Outcome.ok(f"+{int(qty)} matches", new_balance=p["matches_balance"])

@guarded
def get_state(db, wallet: str, now: int | None = None) -> Outcome:
    """Profil (créé au besoin) + jackpot et classement de sa ligue."""
    with db.atomic() as con:
        profile = profiles_repo.get_or_create(con, wallet, resolve(now))
    con = db.conn()
    league = profile["league"]
    return Outcome.ok(
        profile=profile,
        jackpot=jackpot_repo.get_amount(con, league),
        leaderboard=profiles_repo.top_by_league(con, league, LEADERBOARD_SIZE),
    )