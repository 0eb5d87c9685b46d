from roastbot.domain.clock import DAY_S
from roastbot.domain.scoring import calculate_points

from conftest import NOW


class TestCalculatePoints:
    def test_ten_days_in(self):
        q = calculate_points(NOW - 10 * DAY_S, False, now=NOW)
        assert q["points"] == 150
        assert q["multiplier"] == 1.5
        assert q["breakdown"] == "Base(100) * Time(1.5x)"

    def test_floor_with_friend_bonus(self):
        q = calculate_points(NOW - 40 * DAY_S, True, now=NOW)
        assert q["points"] == 100
        assert q["multiplier"] == 1.0
        assert q["breakdown"] == "Base(100) * Time(0.5x) * Friend(2x)"

    def test_season_start_day(self):
        assert calculate_points(NOW, now=NOW)["points"] == 200

    def test_future_start_counts_as_day_zero(self):
        assert calculate_points(NOW + 3 * DAY_S, now=NOW)["points"] == 200

    def test_partial_days_are_truncated(self):
        # 9 jours et 23h59 écoulés -> 9 jours
        q = calculate_points(NOW - 10 * DAY_S + 1, now=NOW)
        assert q["points"] == 155

    def test_multiplier_never_below_floor(self):
        for days in (30, 31, 100, 1000):
            assert calculate_points(NOW - days * DAY_S, now=NOW)["points"] == 50
