def log_action(con, actor: str, action_type: str, cost: int, now: int,
               target: str | None = None, outcome: str = "success") -> None:
    con.execute(
        "INSERT INTO game_actions(actor_wallet, target_wallet, action_type, cost, outcome, created_ts) "
        "VALUES(?,?,?,?,?,?)",
        (actor, target, action_type, int(cost), outcome, int(now))
    )

def list_for(con, actor: str, limit: int = 20) -> list[dict]:
    rows = con.execute(
        "SELECT actor_wallet, target_wallet, action_type, cost, outcome, created_ts FROM game_actions "
        "WHERE actor_wallet=? ORDER BY id DESC LIMIT ?",
        (actor, int(limit))
    ).fetchall()
    return [
        {"actor": r[0], "target": r[1], "action_type": r[2], "cost": int(r[3]),
         "outcome": r[4], "created_ts": int(r[5])}
        for r in rows
    ]
