# roastbot/modules/system/health.py
from __future__ import annotations
import time, platform, os, importlib.util
import discord
from discord import app_commands, Interaction

from roastbot.domain import players as d_players
from roastbot.domain import profiles as d_profiles
from roastbot.domain import seasons as d_seasons

BOT_START_TIME = time.time()

def fmt_uptime(seconds: int) -> str:
    h = seconds // 3600
    m = (seconds % 3600) // 60
    s = seconds % 60
    return f"{h}h {m}m {s}s"

def sqlite_info(db) -> dict:
    """Infos légères sur la DB (chemin, taille, journal_mode, user_version)."""
    info: dict = {}
    if db is None:
        return info
    con = db.conn()
    path = db.path
    if path and os.path.exists(path):
        info["db_path"] = path
        info["db_size_mb"] = os.path.getsize(path) / 1024**2
    (journal_mode,) = con.execute("PRAGMA journal_mode;").fetchone()
    info["journal_mode"] = str(journal_mode).upper()
    (user_version,) = con.execute("PRAGMA user_version;").fetchone()
    info["user_version"] = int(user_version or 0)
    return info

def register(tree: app_commands.CommandTree, guild_obj: discord.Object | None, client: discord.Client | None = None):
    """Expose /debug pour inspecter rapidement l'état du bot (test-only idéalement)."""

    @tree.command(name="debug", description="Bot status (latency, uptime, memory, DB, versions)")
    @app_commands.guilds(guild_obj) if guild_obj else (lambda f: f)
    async def debug_cmd(inter: Interaction):
        db = getattr(inter.client, "db", None)
        latency_ms = round(inter.client.latency * 1000) if inter.client.latency else 0
        uptime = fmt_uptime(int(time.time() - BOT_START_TIME))

        # Mémoire (optionnel si psutil dispo)
        mem_text = "n/a"
        if importlib.util.find_spec("psutil"):
            import psutil  # type: ignore
            rss_mb = psutil.Process().memory_info().rss / 1024**2
            mem_text = f"{rss_mb:.1f} MB"

        embed = discord.Embed(title="🛠️ Debug RoastBot", color=discord.Color.blurple())
        embed.add_field(name="📡 Latency", value=f"{latency_ms} ms", inline=True)
        embed.add_field(name="⏳ Uptime", value=uptime, inline=True)
        embed.add_field(name="💾 Memory", value=mem_text, inline=True)

        if db is not None:
            season = d_seasons.get_active_season(db)
            embed.add_field(name="👥 Profiles", value=str(d_profiles.count(db)), inline=True)
            embed.add_field(name="🔥 Players", value=str(d_players.count(db)), inline=True)
            embed.add_field(name="🏕️ Season", value=season["name"] if season else "none", inline=True)

            dbi = sqlite_info(db)
            if dbi.get("db_path"):
                embed.add_field(name="📂 DB", value=f"{dbi['db_path']} ({dbi['db_size_mb']:.1f} MB)", inline=False)
            embed.add_field(name="⚙️ SQLite", value=f"journal={dbi['journal_mode']} • user_version={dbi['user_version']}", inline=True)
        else:
            embed.add_field(name="📂 DB", value="not configured", inline=False)

        embed.add_field(name="🐍 Python", value=platform.python_version(), inline=True)
        embed.add_field(name="🤖 discord.py", value=discord.__version__, inline=True)
        embed.add_field(name="📅 Now", value=f"<t:{int(time.time())}:F>", inline=False)

        await inter.response.send_message(embed=embed, ephemeral=True)
