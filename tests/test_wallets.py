import pytest

from roastbot.domain import wallets as d_wallets
from roastbot.domain.errors import InvalidAddress
from roastbot.modules.common.money import fmt_usd, short_addr
from roastbot.persistence import profiles as profiles_repo

from conftest import ALICE, BOB, NOW


def test_normalize_lowercases():
    assert d_wallets.normalize("0x" + "AbCdEf" * 6 + "1234") == "0x" + "abcdef" * 6 + "1234"


@pytest.mark.parametrize("bad", ["", "0x123", "a" * 42, "0x" + "g" * 40, "0x" + "a" * 41])
def test_normalize_rejects(bad):
    with pytest.raises(InvalidAddress):
        d_wallets.normalize(bad)


def test_link_creates_profile(db):
    out = d_wallets.link(db, 42, ALICE.upper().replace("0X", "0x"), now=NOW)
    assert out.success
    assert out.data["wallet"] == ALICE
    assert d_wallets.wallet_for(db, 42) == ALICE
    assert profiles_repo.get(db.conn(), ALICE)["matches_balance"] == 0


def test_relink_moves_user_to_new_wallet(db):
    d_wallets.link(db, 42, ALICE, now=NOW)
    d_wallets.link(db, 42, BOB, now=NOW)
    assert d_wallets.wallet_for(db, 42) == BOB


def test_wallet_owned_by_someone_else(db):
    d_wallets.link(db, 42, ALICE, now=NOW)
    out = d_wallets.link(db, 7, ALICE, now=NOW)
    assert out.error == "invalid_address"
    assert d_wallets.wallet_for(db, 7) is None


def test_invalid_address_outcome(db):
    assert d_wallets.link(db, 42, "nope").error == "invalid_address"


def test_formatting():
    assert fmt_usd(1250) == "$12.50"
    assert fmt_usd(5) == "$0.05"
    assert fmt_usd(-50) == "-$0.50"
    assert short_addr(ALICE) == "0xaaaa…aaaa"


def test_readers_fail_open_on_storage_errors(tmp_path, caplog):
    from roastbot.core.db.base import open_database
    from roastbot.domain import players as d_players
    from roastbot.domain import profiles as d_profiles
    from roastbot.domain import seasons as d_seasons

    bare = open_database(str(tmp_path / "empty.db"), migrate=False)
    try:
        assert d_wallets.wallet_for(bare, 42) is None
        assert d_seasons.get_active_season(bare) is None
        assert d_players.top_by_points(bare, 10) == []
        assert d_players.count(bare) == 0
        assert d_profiles.count(bare) == 0
    finally:
        bare.close()
    assert any(r.levelname == "ERROR" for r in caplog.records)
