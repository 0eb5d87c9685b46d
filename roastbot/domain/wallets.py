from __future__ import annotations
import logging, re, sqlite3
from typing import Optional

from ..persistence import wallets as repo
from ..persistence import profiles as profiles_repo
from .clock import resolve
from .errors import InvalidAddress, Outcome, guarded

log = logging.getLogger(__name__)

ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")

def normalize(address: str) -> str:
    """Adresse EVM valide -> minuscules. Lève InvalidAddress sinon."""
    s = (address or "").strip()
    if not ADDRESS_RE.match(s):
        raise InvalidAddress("Invalid wallet address format")
    return s.lower()

@guarded
def link(db, user_id: int, address: str, now: int | None = None) -> Outcome:
    wallet = normalize(address)
    with db.atomic() as con:
        owner = repo.user_for(con, wallet)
        if owner is not None and owner != str(user_id):
            raise InvalidAddress("This wallet is already linked to someone else")
        repo.link(con, str(user_id), wallet)
        profile = profiles_repo.get_or_create(con, wallet, resolve(now))
    return Outcome.ok("Wallet linked.", wallet=wallet, profile=profile)

def wallet_for(db, user_id: int) -> Optional[str]:
    try:
        return repo.wallet_for(db.conn(), str(user_id))
    except sqlite3.Error:
        log.exception("Wallet lookup failed for user %s", user_id)
        return None
