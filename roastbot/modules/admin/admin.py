from __future__ import annotations
import discord
from discord import app_commands, Interaction

from roastbot.core.config import settings
from roastbot.domain import game as d_game
from roastbot.domain import seasons as d_seasons
from roastbot.domain import wallets as d_wallets
from roastbot.domain.errors import GameError
from roastbot.modules.common.replies import outcome_text, reply, require_db

admin = app_commands.Group(name="admin", description="Admin tools")

def _is_admin(inter: Interaction) -> bool:
    return inter.user.id in settings.admin_ids

# /admin season_start name:<str> days:<int>
@admin.command(name="season_start", description="Open a new season (closes the current one)")
@app_commands.describe(name="Season name", days="Duration in days")
async def season_start(inter: Interaction, name: str, days: app_commands.Range[int, 1, 365] = d_seasons.DEFAULT_SEASON_DAYS):
    if not _is_admin(inter):
        await reply(inter, "❌ Admins only.")
        return
    db = await require_db(inter)
    if db is None:
        return
    out = d_seasons.start_season(db, name, days)
    await reply(inter, outcome_text(out))

# /admin grant_matches wallet:<0x…> qty:<int>
@admin.command(name="grant_matches", description="Credit matches to a wallet")
async def grant_matches(inter: Interaction, wallet: str, qty: app_commands.Range[int, 1, 10_000]):
    if not _is_admin(inter):
        await reply(inter, "❌ Admins only.")
        return
    db = await require_db(inter)
    if db is None:
        return
    try:
        addr = d_wallets.normalize(wallet)
    except GameError as e:
        await reply(inter, f"❌ {e.message}")
        return
    out = d_game.grant_matches(db, addr, int(qty))
    await reply(inter, outcome_text(out))


def register(tree: app_commands.CommandTree, guild_obj: discord.Object | None, client: discord.Client | None = None):
    # module inscrit en test-only via client.py
    if guild_obj:
        tree.add_command(admin, guild=guild_obj)
    else:
        tree.add_command(admin)
