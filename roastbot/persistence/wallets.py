from typing import Optional

def link(con, user_id: str, wallet: str) -> None:
    con.execute(
        "INSERT INTO wallet_links(user_id, wallet_address) VALUES(?,?) "
        "ON CONFLICT(user_id) DO UPDATE SET wallet_address=excluded.wallet_address, linked_ts=strftime('%s','now')",
        (user_id, wallet)
    )

def wallet_for(con, user_id: str) -> Optional[str]:
    row = con.execute("SELECT wallet_address FROM wallet_links WHERE user_id=?", (user_id,)).fetchone()
    return row[0] if row else None

def user_for(con, wallet: str) -> Optional[str]:
    row = con.execute("SELECT user_id FROM wallet_links WHERE wallet_address=?", (wallet,)).fetchone()
    return row[0] if row else None
