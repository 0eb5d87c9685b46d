# roastbot/modules/game/actions.py
from __future__ import annotations
from typing import Optional
import discord
from discord import app_commands, Interaction

from roastbot.core.config import settings
from roastbot.domain import game as d_game
from roastbot.domain import wallets as d_wallets
from roastbot.domain.clock import now_ts
from roastbot.modules.common.money import fmt_usd, short_addr
from roastbot.modules.common.replies import outcome_text, reply, require_wallet

def _medal(i: int) -> str:
    return "🥇" if i == 1 else "🥈" if i == 2 else "🥉" if i == 3 else "🏅"

def format_leaderboard(rows: list[dict], limit: int = 10) -> str:
    lines = [
        f"**{i:>2}.** `{short_addr(p['wallet_address'])}` — **{p['current_score']}** {_medal(i)}"
        for i, p in enumerate(rows[:limit], start=1)
    ]
    return "\n".join(lines) or "Nobody is on the board yet 😶"

def _shield_text(profile: dict, now: int) -> str:
    if d_game.is_shielded(profile, now):
        return f"🛡️ until <t:{profile['shield_active_until']}:R>"
    return "none"

def state_embed(state: dict, now: int) -> discord.Embed:
    p = state["profile"]
    e = discord.Embed(title=f"🔥 {short_addr(p['wallet_address'])}", color=discord.Color.orange())
    e.add_field(name="🔥 Matches", value=str(p["matches_balance"]), inline=True)
    e.add_field(name="🏆 Score", value=str(p["current_score"]), inline=True)
    e.add_field(name="🛡️ Shield", value=_shield_text(p, now), inline=True)
    e.add_field(name=f"💰 Jackpot ({p['league']})", value=fmt_usd(state["jackpot"]), inline=False)
    e.add_field(name="🗑️ King of the Dumpster", value=format_leaderboard(state["leaderboard"]), inline=False)
    return e

def register(tree: app_commands.CommandTree, guild_obj: Optional[discord.Object], client: discord.Client | None = None):
    group = app_commands.Group(name="game", description="Stoke, shade and cope around the campfire")

    @group.command(name="stoke", description="Burn 1 match: +10 score")
    async def stoke(inter: Interaction):
        wallet = await require_wallet(inter)
        if wallet is None:
            return
        out = d_game.stoke(inter.client.db, wallet)
        await reply(inter, outcome_text(out), ephemeral=not out.success)

    @group.command(name="shade", description="Burn 1 match: -10 score to a rival")
    @app_commands.describe(user="Rival (must have linked a wallet)")
    async def shade(inter: Interaction, user: discord.User):
        wallet = await require_wallet(inter)
        if wallet is None:
            return
        if user.id == inter.user.id:
            await reply(inter, "😅 You cannot throw shade at yourself!")
            return
        target = d_wallets.wallet_for(inter.client.db, user.id)
        if target is None:
            await reply(inter, "🔎 That person has no wallet linked.")
            return

        out = d_game.shade(inter.client.db, wallet, target)
        if out.success:
            await reply(inter, f"{outcome_text(out)} {user.mention} is now at **{out.data['target_score']}**.", ephemeral=False)
        else:
            await reply(inter, outcome_text(out))

    @group.command(name="cope", description="Burn 5 matches: 1 hour shield")
    async def cope(inter: Interaction):
        wallet = await require_wallet(inter)
        if wallet is None:
            return
        out = d_game.cope(inter.client.db, wallet)
        await reply(inter, outcome_text(out))

    @group.command(name="daily", description="Claim your free daily matches")
    async def daily(inter: Interaction):
        wallet = await require_wallet(inter)
        if wallet is None:
            return
        out = d_game.claim_daily(inter.client.db, wallet, settings.daily_matches)
        await reply(inter, outcome_text(out))

    @group.command(name="state", description="Your profile, league jackpot and leaderboard")
    async def state(inter: Interaction):
        wallet = await require_wallet(inter)
        if wallet is None:
            return
        now = now_ts()
        out = d_game.get_state(inter.client.db, wallet, now)
        if not out.success:
            await reply(inter, outcome_text(out))
            return
        await inter.response.send_message(embed=state_embed(out.data, now), ephemeral=True)

    if guild_obj:
        tree.add_command(group, guild=guild_obj)
    else:
        tree.add_command(group)
