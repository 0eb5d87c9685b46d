# roastbot/modules/common/replies.py
from __future__ import annotations
from typing import Optional
from discord import Interaction

from roastbot.domain import wallets as d_wallets
from roastbot.domain.errors import Outcome

ICONS = {
    None: "✅",
    "insufficient_balance": "🪫",
    "blocked": "🛡️",
    "not_found": "🔎",
    "negligible_value": "🪙",
    "cooldown": "⏳",
    "self_target": "😅",
    "invalid_address": "❌",
    "unconfigured": "🚧",
    "storage": "⚠️",
}

def outcome_text(out: Outcome) -> str:
    icon = ICONS.get(out.error, "❌") if not out.success else ICONS[None]
    return f"{icon} {out.message}".strip()

async def reply(inter: Interaction, text: str, *, ephemeral: bool = True) -> None:
    if inter.response.is_done():
        await inter.followup.send(text, ephemeral=ephemeral)
    else:
        await inter.response.send_message(text, ephemeral=ephemeral)

async def require_db(inter: Interaction):
    db = getattr(inter.client, "db", None)
    if db is None:
        await reply(inter, outcome_text(Outcome(success=False, message="Game database not configured", error="unconfigured")))
    return db

async def require_wallet(inter: Interaction) -> Optional[str]:
    """Wallet lié au user, ou message /start et None."""
    db = await require_db(inter)
    if db is None:
        return None
    wallet = d_wallets.wallet_for(db, inter.user.id)
    if wallet is None:
        await reply(inter, "🚀 Link your wallet first with **/start**.")
    return wallet
