import pytest

from roastbot.core.cache import TTLCache
from roastbot.domain.roast_text import TOKEN_WALLET_ROASTS, RoastWriter

from conftest import ALICE, BOB, FakeClock


def _writer(clock=None, pick=0):
    calls = []

    def choose(options):
        calls.append(options)
        return options[pick]

    return RoastWriter(TTLCache(300, 16, clock or FakeClock()), choose=choose), calls


def test_picks_a_prewritten_roast():
    w, calls = _writer(pick=2)
    assert w.write(ALICE) == TOKEN_WALLET_ROASTS[2]
    assert calls == [TOKEN_WALLET_ROASTS]


def test_cached_per_address_and_type():
    w, calls = _writer()
    first = w.write(ALICE, "free")
    assert w.write(ALICE, "free") == first
    assert len(calls) == 1
    w.write(ALICE, "friend")
    w.write(BOB, "free")
    assert len(calls) == 3


def test_cache_expires():
    clock = FakeClock()
    w, calls = _writer(clock)
    w.write(ALICE)
    clock.t = 301
    w.write(ALICE)
    assert len(calls) == 2


def test_unknown_type():
    w, _ = _writer()
    with pytest.raises(ValueError):
        w.write(ALICE, "vip")
