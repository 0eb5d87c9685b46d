def log_attack(con, attacker: str, victim: str, stolen: int, cost: int, now: int) -> None:
    con.execute(
        "INSERT INTO attacks(attacker_address, victim_address, points_stolen, cost_amount, created_ts) "
        "VALUES(?,?,?,?,?)",
        (attacker, victim, int(stolen), int(cost), int(now))
    )

def recent_against(con, victim: str, limit: int = 10) -> list[dict]:
    rows = con.execute(
        "SELECT attacker_address, points_stolen, cost_amount, created_ts FROM attacks "
        "WHERE victim_address=? ORDER BY id DESC LIMIT ?",
        (victim, int(limit))
    ).fetchall()
    return [{"attacker": r[0], "stolen": int(r[1]), "cost": int(r[2]), "created_ts": int(r[3])} for r in rows]
