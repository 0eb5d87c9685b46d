from roastbot.domain import shade as d_shade
from roastbot.persistence import attacks as attacks_repo
from roastbot.persistence import players as players_repo

from conftest import ALICE, BOB, NOW


def _points(db, wallet):
    p = players_repo.get(db.conn(), wallet)
    return None if p is None else p["current_season_points"]


def test_steals_five_percent(db, make_player):
    make_player(BOB, 1000)
    out = d_shade.perform_attack(db, ALICE, BOB, 50, now=NOW)
    assert out.success
    assert out.data["stolen"] == 50
    assert _points(db, BOB) == 950
    assert _points(db, ALICE) == 50
    [row] = attacks_repo.recent_against(db.conn(), BOB)
    assert row == {"attacker": ALICE, "stolen": 50, "cost": 50, "created_ts": NOW}


def test_existing_attacker_is_credited(db, make_player):
    make_player(ALICE, 10)
    make_player(BOB, 200)
    assert d_shade.perform_attack(db, ALICE, BOB, 50, now=NOW).data["stolen"] == 10
    assert _points(db, ALICE) == 20
    assert players_repo.get(db.conn(), ALICE)["total_roasts"] == 0


def test_steal_is_capped(db, make_player):
    make_player(BOB, 50_000)
    assert d_shade.perform_attack(db, ALICE, BOB, 50, now=NOW).data["stolen"] == 500
    assert _points(db, BOB) == 49_500


def test_negligible_value_mutates_nothing(db, make_player):
    make_player(BOB, 5)
    out = d_shade.perform_attack(db, ALICE, BOB, 50, now=NOW)
    assert not out.success
    assert out.error == "negligible_value"
    assert _points(db, BOB) == 5
    assert _points(db, ALICE) is None
    assert attacks_repo.recent_against(db.conn(), BOB) == []


def test_victim_without_points(db, make_player):
    make_player(BOB, 0)
    assert d_shade.perform_attack(db, ALICE, BOB, 50, now=NOW).error == "negligible_value"


def test_unknown_victim(db):
    out = d_shade.perform_attack(db, ALICE, BOB, 50, now=NOW)
    assert out.error == "not_found"
    assert _points(db, ALICE) is None


def test_self_attack_rejected(db, make_player):
    make_player(ALICE, 1000)
    assert d_shade.perform_attack(db, ALICE, ALICE, 50, now=NOW).error == "self_target"
    assert _points(db, ALICE) == 1000


def test_steal_amount():
    assert d_shade.steal_amount(1000) == 50
    assert d_shade.steal_amount(19) == 0
    assert d_shade.steal_amount(20) == 1
    assert d_shade.steal_amount(10_000) == 500
    assert d_shade.steal_amount(10_020) == 500
