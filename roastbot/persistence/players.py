from __future__ import annotations
from typing import Optional

def _row_to_player(row) -> dict:
    return {
        "wallet_address": row[0],
        "current_season_points": int(row[1]),
        "total_roasts": int(row[2]),
        "last_active_ts": int(row[3]),
    }

def get(con, wallet: str) -> Optional[dict]:
    row = con.execute(
        "SELECT wallet_address, current_season_points, total_roasts, last_active_ts FROM players WHERE wallet_address=?",
        (wallet,)
    ).fetchone()
    return _row_to_player(row) if row else None

def add_roast(con, wallet: str, points: int, now: int) -> dict:
    con.execute(
        "INSERT INTO players(wallet_address, current_season_points, total_roasts, last_active_ts) VALUES(?,?,1,?) "
        "ON CONFLICT(wallet_address) DO UPDATE SET "
        "current_season_points = current_season_points + excluded.current_season_points, "
        "total_roasts = total_roasts + 1, last_active_ts = excluded.last_active_ts",
        (wallet, int(points), int(now))
    )
    return get(con, wallet)  # type: ignore[return-value]

def take_points(con, wallet: str, amount: int) -> bool:
    cur = con.execute(
        "UPDATE players SET current_season_points = current_season_points - ? "
        "WHERE wallet_address=? AND current_season_points >= ?",
        (int(amount), wallet, int(amount))
    )
    return cur.rowcount == 1

def give_points(con, wallet: str, amount: int, now: int) -> None:
    con.execute(
        "INSERT INTO players(wallet_address, current_season_points, total_roasts, last_active_ts) VALUES(?,?,0,?) "
        "ON CONFLICT(wallet_address) DO UPDATE SET "
        "current_season_points = current_season_points + excluded.current_season_points, "
        "last_active_ts = excluded.last_active_ts",
        (wallet, int(amount), int(now))
    )

def top_by_points(con, limit: int = 10) -> list[dict]:
    rows = con.execute(
        "SELECT wallet_address, current_season_points, total_roasts, last_active_ts FROM players "
        "ORDER BY current_season_points DESC, wallet_address ASC LIMIT ?",
        (int(limit),)
    ).fetchall()
    return [_row_to_player(r) for r in rows]

def count_players(con) -> int:
    (n,) = con.execute("SELECT COUNT(*) FROM players").fetchone()
    return int(n)
