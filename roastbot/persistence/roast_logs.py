def log_roast(con, roaster: str, target: str, roast_type: str, points: int, now: int) -> None:
    con.execute(
        "INSERT INTO roast_logs(roaster_address, target_address, roast_type, points_awarded, created_ts) "
        "VALUES(?,?,?,?,?)",
        (roaster, target, roast_type, int(points), int(now))
    )

def last_roast_ts(con, roaster: str, target: str, since_ts: int) -> int | None:
    # strictement après since_ts
    row = con.execute(
        "SELECT MAX(created_ts) FROM roast_logs WHERE roaster_address=? AND target_address=? AND created_ts>?",
        (roaster, target, int(since_ts))
    ).fetchone()
    return int(row[0]) if row and row[0] is not None else None
