from __future__ import annotations
from typing import Optional

_COLS = "wallet_address, matches_balance, league, current_score, shield_active_until, last_daily_claim, created_ts"

def _row_to_profile(row) -> dict:
    return {
        "wallet_address": row[0],
        "matches_balance": int(row[1]),
        "league": row[2],
        "current_score": int(row[3]),
        "shield_active_until": int(row[4]) if row[4] is not None else None,
        "last_daily_claim": row[5] or "",
        "created_ts": int(row[6]),
    }

def get(con, wallet: str) -> Optional[dict]:
    row = con.execute(f"SELECT {_COLS} FROM profiles WHERE wallet_address=?", (wallet,)).fetchone()
    return _row_to_profile(row) if row else None

def get_or_create(con, wallet: str, now: int) -> dict:
    con.execute(
        "INSERT INTO profiles(wallet_address, created_ts) VALUES(?,?) ON CONFLICT(wallet_address) DO NOTHING",
        (wallet, int(now))
    )
    return get(con, wallet)  # type: ignore[return-value]

def debit_matches(con, wallet: str, cost: int) -> bool:
    # débit conditionnel: jamais de solde négatif
    cur = con.execute(
        "UPDATE profiles SET matches_balance = matches_balance - ? WHERE wallet_address=? AND matches_balance >= ?",
        (int(cost), wallet, int(cost))
    )
    return cur.rowcount == 1

def add_matches(con, wallet: str, qty: int) -> None:
    con.execute("UPDATE profiles SET matches_balance = matches_balance + ? WHERE wallet_address=?", (int(qty), wallet))

def add_score(con, wallet: str, delta: int) -> None:
    con.execute(
        "UPDATE profiles SET current_score = MAX(0, current_score + ?) WHERE wallet_address=?",
        (int(delta), wallet)
    )

def set_shield(con, wallet: str, until_ts: int) -> None:
    con.execute("UPDATE profiles SET shield_active_until=? WHERE wallet_address=?", (int(until_ts), wallet))

def set_daily_claim(con, wallet: str, day: str) -> bool:
    cur = con.execute(
        "UPDATE profiles SET last_daily_claim=? WHERE wallet_address=? AND last_daily_claim<>?",
        (day, wallet, day)
    )
    return cur.rowcount == 1

def top_by_league(con, league: str, limit: int = 50) -> list[dict]:
    rows = con.execute(
        f"SELECT {_COLS} FROM profiles WHERE league=? ORDER BY current_score DESC, wallet_address ASC LIMIT ?",
        (league, int(limit))
    ).fetchall()
    return [_row_to_profile(r) for r in rows]

def count(con) -> int:
    (n,) = con.execute("SELECT COUNT(*) FROM profiles").fetchone()
    return int(n)
