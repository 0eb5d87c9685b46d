import asyncio
from types import SimpleNamespace

from roastbot.domain import players as d_players
from roastbot.domain import wallets as d_wallets
from roastbot.domain.errors import Blocked, Cooldown, Outcome
from roastbot.modules.common.replies import outcome_text
from roastbot.modules.game.actions import format_leaderboard, state_embed

from conftest import ALICE, BOB, NOW


def _profile(wallet, score, shield=None):
    return {"wallet_address": wallet, "matches_balance": 2, "league": "shrimp",
            "current_score": score, "shield_active_until": shield, "last_daily_claim": "", "created_ts": NOW}


def test_outcome_text_icons():
    assert outcome_text(Outcome.ok("Stoked! +10 Score")) == "✅ Stoked! +10 Score"
    assert outcome_text(Outcome.fail(Blocked("Attack Blocked!"))).startswith("🛡️")
    assert outcome_text(Outcome(success=False, message="x", error="weird")) == "❌ x"


def test_cooldown_outcome_carries_retry_after():
    out = Outcome.fail(Cooldown("later", retry_after=30))
    assert out.error == "cooldown"
    assert out.data["retry_after"] == 30


def test_format_leaderboard():
    text = format_leaderboard([_profile(BOB, 80), _profile(ALICE, 10)])
    lines = text.splitlines()
    assert "**80**" in lines[0] and "🥇" in lines[0]
    assert "**10**" in lines[1] and "🥈" in lines[1]
    assert format_leaderboard([]) == "Nobody is on the board yet 😶"


def test_state_embed_shows_shield():
    state = {"profile": _profile(ALICE, 30, shield=NOW + 60), "jackpot": 1250, "leaderboard": []}
    e = state_embed(state, NOW)
    fields = {f.name: f.value for f in e.fields}
    assert fields["🔥 Matches"] == "2"
    assert fields["💰 Jackpot (shrimp)"] == "$12.50"
    assert fields["🛡️ Shield"].startswith("🛡️ until")


def test_sqlite_info(db):
    from roastbot.modules.system.health import fmt_uptime, sqlite_info
    info = sqlite_info(db)
    assert info["user_version"] == 2
    assert info["journal_mode"] == "WAL"
    assert sqlite_info(None) == {}
    assert fmt_uptime(3725) == "1h 2m 5s"


def test_client_registers_global_commands():
    from roastbot.core.cache import TTLCache
    from roastbot.core.client import RoastClient
    from roastbot.domain.roast_text import RoastWriter

    client = RoastClient(None, RoastWriter(TTLCache(60)), sync_scope="global")
    client.register_all()
    names = {c.name for c in client.tree.get_commands()}
    assert names == {"start", "game", "roast", "season", "throwshade"}


class _Response:
    def __init__(self, sent):
        self._sent = sent

    def is_done(self):
        return bool(self._sent)

    async def send_message(self, content=None, **kwargs):
        self._sent.append((content, kwargs))


class _Interaction:
    def __init__(self, client, user_id=42):
        self.client = client
        self.user = SimpleNamespace(id=user_id)
        self.sent = []
        self.response = _Response(self.sent)


def _roast(client, **kwargs):
    inter = _Interaction(client)
    cmd = client.tree.get_command("roast")
    asyncio.run(cmd.callback(inter, **kwargs))
    return inter.sent


def _client(db):
    from roastbot.core.cache import TTLCache
    from roastbot.core.client import RoastClient
    from roastbot.domain.roast_text import RoastWriter, TOKEN_WALLET_ROASTS

    client = RoastClient(db, RoastWriter(TTLCache(60), choose=lambda opts: opts[0]), sync_scope="global")
    client.register_all()
    return client, TOKEN_WALLET_ROASTS[0]


class TestRoastCommand:
    def test_roasts_without_database(self):
        client, text = _client(None)
        sent = _roast(client, wallet=ALICE)
        assert len(sent) == 1
        embed = sent[0][1]["embed"]
        assert embed.description == text
        assert embed.fields == []

    def test_needs_some_wallet(self):
        client, _ = _client(None)
        sent = _roast(client)
        assert sent[0][0].startswith("🚀")
        assert sent[0][1]["ephemeral"] is True

    def test_unlinked_caller_gets_unscored_roast(self, db):
        client, text = _client(db)
        sent = _roast(client, wallet=BOB)
        assert sent[0][1]["embed"].description == text
        assert d_players.count(db) == 0

    def test_linked_caller_scores_without_season(self, db):
        d_wallets.link(db, 42, ALICE, now=NOW)
        client, text = _client(db)
        sent = _roast(client, wallet=BOB)
        embed = sent[0][1]["embed"]
        assert embed.description == text
        assert embed.fields[0].value.startswith("🔎")


def test_admin_commands_refuse_non_admins():
    from roastbot.modules.admin.admin import grant_matches

    inter = _Interaction(SimpleNamespace(db=None), user_id=999_999)
    asyncio.run(grant_matches.callback(inter, wallet=ALICE, qty=3))
    assert inter.sent == [("❌ Admins only.", {"ephemeral": True})]


def test_debug_embed_without_database():
    from roastbot.modules.system import health

    tree = _client(None)[0].tree
    health.register(tree, None)
    inter = _Interaction(SimpleNamespace(db=None, latency=0.05))
    asyncio.run(tree.get_command("debug").callback(inter))
    fields = {f.name: f.value for f in inter.sent[0][1]["embed"].fields}
    assert fields["📡 Latency"] == "50 ms"
    assert fields["📂 DB"] == "not configured"


def test_client_runs_no_background_loop():
    from roastbot.core import client as core_client
    from discord.ext import tasks

    assert not [v for v in vars(core_client).values() if isinstance(v, tasks.Loop)]
