from __future__ import annotations
import pytest

from roastbot.core.db.base import open_database
from roastbot.persistence import profiles as profiles_repo
from roastbot.persistence import players as players_repo

NOW = 1_760_000_000

ALICE = "0x" + "a" * 40
BOB = "0x" + "b" * 40
CAROL = "0x" + "c" * 40


class FakeClock:
    def __init__(self, t: float = 0.0):
        self.t = t

    def __call__(self) -> float:
        return self.t


@pytest.fixture
def db(tmp_path):
    d = open_database(str(tmp_path / "game.db"))
    yield d
    d.close()


@pytest.fixture
def make_profile(db):
    def _make(wallet: str, matches: int = 0, score: int = 0, shield_until: int | None = None) -> dict:
        with db.atomic() as con:
            profiles_repo.get_or_create(con, wallet, NOW)
            con.execute(
                "UPDATE profiles SET matches_balance=?, current_score=?, shield_active_until=? WHERE wallet_address=?",
                (matches, score, shield_until, wallet),
            )
        return profiles_repo.get(db.conn(), wallet)
    return _make


@pytest.fixture
def make_player(db):
    def _make(wallet: str, points: int) -> dict:
        with db.atomic() as con:
            players_repo.give_points(con, wallet, points, NOW)
        return players_repo.get(db.conn(), wallet)
    return _make
