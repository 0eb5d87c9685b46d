from __future__ import annotations
from typing import Optional

_COLS = "id, name, start_ts, end_ts, is_active, current_pot_size"

def _row_to_season(row) -> dict:
    return {
        "id": int(row[0]), "name": row[1],
        "start_ts": int(row[2]), "end_ts": int(row[3]),
        "is_active": bool(int(row[4])),
        "current_pot_size": int(row[5]),
    }

def get_active(con) -> Optional[dict]:
    row = con.execute(f"SELECT {_COLS} FROM seasons WHERE is_active=1 LIMIT 1").fetchone()
    return _row_to_season(row) if row else None

def get(con, season_id: int) -> Optional[dict]:
    row = con.execute(f"SELECT {_COLS} FROM seasons WHERE id=?", (int(season_id),)).fetchone()
    return _row_to_season(row) if row else None

def deactivate_all(con) -> None:
    con.execute("UPDATE seasons SET is_active=0 WHERE is_active=1")

def create(con, name: str, start_ts: int, end_ts: int) -> dict:
    cur = con.execute(
        "INSERT INTO seasons(name, start_ts, end_ts, is_active, current_pot_size) VALUES(?,?,?,1,0)",
        (name, int(start_ts), int(end_ts))
    )
    return get(con, cur.lastrowid)  # type: ignore[return-value]

def add_to_pot(con, season_id: int, amount: int) -> bool:
    cur = con.execute(
        "UPDATE seasons SET current_pot_size = current_pot_size + ? WHERE id=?",
        (int(amount), int(season_id))
    )
    return cur.rowcount == 1
