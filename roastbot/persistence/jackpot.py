def get_amount(con, league: str) -> int:
    row = con.execute("SELECT amount FROM jackpot WHERE league=?", (league,)).fetchone()
    return int(row[0]) if row else 0
