# roastbot/modules/roast/roast.py
from __future__ import annotations
import logging
from typing import Optional
import discord
from discord import app_commands, Interaction

from roastbot.core.config import settings
from roastbot.domain import cooldown as d_cooldown
from roastbot.domain import roasts as d_roasts
from roastbot.domain import seasons as d_seasons
from roastbot.domain import wallets as d_wallets
from roastbot.domain import players as d_players
from roastbot.domain.errors import GameError, Outcome
from roastbot.modules.common.money import fmt_usd, short_addr
from roastbot.modules.common.replies import outcome_text, reply

log = logging.getLogger(__name__)

def roast_embed(target: str, roast: str, score: Outcome | None) -> discord.Embed:
    e = discord.Embed(title=f"🔥 Roast of {short_addr(target)}", description=roast, color=discord.Color.red())
    if score is not None:
        if score.success:
            e.add_field(name="🏆 Points", value=f"+{score.data['points']} • {score.data['breakdown']}", inline=False)
        else:
            e.add_field(name="🏆 Points", value=outcome_text(score), inline=False)
    return e

def register(tree: app_commands.CommandTree, guild_obj: Optional[discord.Object], client: discord.Client | None = None):

    @tree.command(name="roast", description="Roast a wallet (yours by default)")
    @app_commands.describe(wallet="(optional) wallet to roast", friend="Roasting a friend? Double points")
    @app_commands.guilds(guild_obj) if guild_obj else (lambda f: f)
    async def roast(inter: Interaction, wallet: Optional[str] = None, friend: bool = False):
        db = inter.client.db
        # sans DB (ou sans wallet lié) on roast quand même, sans score
        roaster = d_wallets.wallet_for(db, inter.user.id) if db is not None else None
        try:
            target = d_wallets.normalize(wallet) if wallet else roaster
        except GameError as e:
            await reply(inter, f"❌ {e.message}")
            return
        if target is None:
            await reply(inter, "🚀 Give me a wallet to roast, or link yours with **/start**.")
            return

        # anti-spam avant tout (pas d'effet de bord si bloqué)
        if roaster is not None and d_cooldown.check_roast_cooldown(db, roaster, target):
            await reply(inter, "⏳ You already roasted this wallet in the last 24h. Try again tomorrow.")
            return

        roast_type = "friend" if friend else "free"
        text = inter.client.roast_writer.write(target, roast_type)

        # le score ne bloque jamais le roast
        score = None
        if roaster is not None:
            score = d_roasts.submit_roast(db, roaster, target, roast_type, settings.pot_increment_cents)
            if not score.success:
                log.info("Roast scored nothing (%s): %s", score.error, score.message)
        await inter.response.send_message(embed=roast_embed(target, text, score))

    season_group = app_commands.Group(name="season", description="Current season")

    @season_group.command(name="info", description="Active season, pot and top roasters")
    async def info(inter: Interaction):
        db = inter.client.db
        if db is None:
            await reply(inter, "🚧 Game database not configured")
            return
        season = d_seasons.get_active_season(db)
        if season is None:
            await reply(inter, "😶 No active season right now.")
            return
        top = d_players.top_by_points(db, 10)
        lines = [f"**{i}.** `{short_addr(p['wallet_address'])}` — **{p['current_season_points']}**"
                 for i, p in enumerate(top, start=1)]
        e = discord.Embed(title=f"🏕️ {season['name']}", color=discord.Color.dark_gold())
        e.add_field(name="💰 Pot", value=fmt_usd(season["current_pot_size"]), inline=True)
        e.add_field(name="⏳ Ends", value=f"<t:{season['end_ts']}:R>", inline=True)
        e.add_field(name="🔥 Top roasters", value="\n".join(lines) or "Nobody yet.", inline=False)
        await inter.response.send_message(embed=e)

    if guild_obj:
        tree.add_command(season_group, guild=guild_obj)
    else:
        tree.add_command(season_group)
