# roastbot/modules/roast/shade.py
from __future__ import annotations
from typing import Optional
import discord
from discord import app_commands, Interaction

from roastbot.core.config import settings
from roastbot.domain import shade as d_shade
from roastbot.domain import wallets as d_wallets
from roastbot.modules.common.money import fmt_usd
from roastbot.modules.common.replies import outcome_text, reply, require_wallet

def register(tree: app_commands.CommandTree, guild_obj: Optional[discord.Object], client: discord.Client | None = None):

    @tree.command(name="throwshade", description="Steal 5% of a rival's season points (max 500)")
    @app_commands.describe(user="Rival to steal from")
    @app_commands.guilds(guild_obj) if guild_obj else (lambda f: f)
    async def throwshade(inter: Interaction, user: discord.User):
        attacker = await require_wallet(inter)
        if attacker is None:
            return
        if user.id == inter.user.id:
            await reply(inter, "😅 You cannot throw shade at yourself!")
            return
        victim = d_wallets.wallet_for(inter.client.db, user.id)
        if victim is None:
            await reply(inter, "🔎 That person has no wallet linked.")
            return

        cost = settings.shade_cost_cents
        out = d_shade.perform_attack(inter.client.db, attacker, victim, cost)
        if not out.success:
            await reply(inter, outcome_text(out))
            return
        await reply(inter, f"🕶️ {inter.user.mention} threw shade at {user.mention} and stole **{out.data['stolen']}** points! "
                           f"(cost {fmt_usd(cost)})", ephemeral=False)
