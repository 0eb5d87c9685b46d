# roastbot/modules/game/start.py
from __future__ import annotations
from typing import Optional
import discord
from discord import app_commands, Interaction

from roastbot.domain import wallets as d_wallets
from roastbot.modules.common.money import short_addr
from roastbot.modules.common.replies import outcome_text, reply, require_db

def register(tree: app_commands.CommandTree, guild_obj: Optional[discord.Object], client: discord.Client | None = None):

    @tree.command(name="start", description="Link your wallet and join the campfire")
    @app_commands.describe(wallet="Your wallet address (0x…)")
    @app_commands.guilds(guild_obj) if guild_obj else (lambda f: f)
    async def start(inter: Interaction, wallet: str):
        db = await require_db(inter)
        if db is None:
            return

        out = d_wallets.link(db, inter.user.id, wallet)
        if not out.success:
            await reply(inter, outcome_text(out))
            return

        p = out.data["profile"]
        e = discord.Embed(
            title="🔥 Welcome to the campfire",
            description=f"Wallet `{short_addr(out.data['wallet'])}` linked.",
            color=discord.Color.orange(),
        )
        e.add_field(name="🔥 Matches", value=str(p["matches_balance"]), inline=True)
        e.add_field(name="🏆 Score", value=str(p["current_score"]), inline=True)
        e.add_field(name="🌊 League", value=p["league"], inline=True)
        e.set_footer(text="/game daily for free matches • /roast to get roasted")
        await inter.response.send_message(embed=e, ephemeral=True)
