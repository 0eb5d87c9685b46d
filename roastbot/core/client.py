# roastbot/core/client.py
from __future__ import annotations
import logging, importlib, inspect
import discord
from discord import app_commands

from .config import settings
from .cache import TTLCache
from .db.base import Database, open_database
from roastbot.domain.roast_text import RoastWriter

# ── Logging
log = logging.getLogger("roastbot")

# ═══════════════════════════════════════════════════════════════════
# Où publier chaque module
MODULES_GLOBAL = [
    "roastbot.modules.game.start",
    "roastbot.modules.game.actions",
    "roastbot.modules.roast.roast",
    "roastbot.modules.roast.shade",
]

MODULES_TEST_ONLY = [
    "roastbot.modules.system.health",
    "roastbot.modules.admin.admin",
]


class RoastClient(discord.Client):
    """Client Discord qui porte les services du jeu (db, roasts) pour les commandes."""

    def __init__(self, db: Database | None, writer: RoastWriter, *, sync_scope: str = "both",
                 test_guild_ids: list[int] | None = None):
        intents = discord.Intents.default()
        super().__init__(intents=intents)
        self.db = db
        self.roast_writer = writer
        self.sync_scope = sync_scope
        self.test_guilds = [discord.Object(id=g) for g in (test_guild_ids or [])]
        self.tree = app_commands.CommandTree(self)

    # Utilitaires d'enregistrement
    def _call_with_best_signature(self, fn, guild_obj: discord.Object | None):
        candidates = [
            (self.tree, guild_obj, self),   # register(tree, guild, client)
            (self.tree, guild_obj),         # register(tree, guild)
            (self.tree,),                   # register(tree)
        ]
        for params in candidates:
            try:
                return fn(*params)
            except TypeError:
                continue
        log.warning("Impossible d'appeler %s avec une signature connue (sig=%s)", fn.__name__, inspect.signature(fn))

    def register_module(self, dotted: str, guild_obj: discord.Object | None) -> None:
        mod = importlib.import_module(dotted)
        if hasattr(mod, "register") and callable(mod.register):
            log.info("Register: %s (guild=%s)", dotted, getattr(guild_obj, "id", None))
            self._call_with_best_signature(mod.register, guild_obj)
            return
        log.warning("Module %s: pas de register() — ignoré.", dotted)

    def register_all(self) -> None:
        scope = self.sync_scope
        if scope == "guild":
            for dotted in MODULES_GLOBAL + MODULES_TEST_ONLY:
                for g in self.test_guilds:
                    self._safe_register(dotted, g)
            return
        for dotted in MODULES_GLOBAL:
            self._safe_register(dotted, None)
        for dotted in MODULES_TEST_ONLY:
            for g in self.test_guilds:
                self._safe_register(dotted, g)

    def _safe_register(self, dotted: str, guild_obj: discord.Object | None) -> None:
        try:
            self.register_module(dotted, guild_obj)
        except Exception as e:
            log.exception("Échec d'enregistrement du module %s (guild=%s): %s",
                          dotted, getattr(guild_obj, "id", None), e)

    async def setup_hook(self) -> None:
        self.register_all()
        log.info("Boot: SYNC_SCOPE=%s • TEST_GUILD_IDS=%s", self.sync_scope, [g.id for g in self.test_guilds])
        try:
            if self.sync_scope != "guild":
                synced = await self.tree.sync()
                log.info("Synced %d GLOBAL commands: %s", len(synced), [c.name for c in synced])
            for g in self.test_guilds:
                if self.sync_scope == "both":
                    self.tree.copy_global_to(guild=g)
                synced_g = await self.tree.sync(guild=g)
                log.info("Synced %d commands on guild %s: %s", len(synced_g), g.id, [c.name for c in synced_g])
        except discord.Forbidden as e:
            log.error("403 Missing Access au sync (scope applications.commands ?). %s", e)
        except discord.HTTPException as e:
            log.exception("Sync error: %s", e)

    async def on_ready(self) -> None:
        log.info("RoastBot connecté en %s", self.user)


def _test_guild_ids() -> list[int]:
    if settings.sync_scope not in ("guild", "both"):
        return []
    if settings.test_guild_ids:
        return list(settings.test_guild_ids)
    return [int(settings.guild_id)] if settings.guild_id else []


def build_client(db: Database | None = None) -> RoastClient:
    writer = RoastWriter(TTLCache(settings.roast_cache_ttl_s, settings.roast_cache_size))
    return RoastClient(db, writer, sync_scope=settings.sync_scope, test_guild_ids=_test_guild_ids())


def run():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    # 1) Migrations au boot
    db = open_database()
    log.info("DB prête: %s", db.path)

    # 2) Lancement du client
    build_client(db).run(settings.token, log_handler=None)
