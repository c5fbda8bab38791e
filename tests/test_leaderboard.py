"""Tests for the leaderboard assembler."""

from datetime import datetime, timezone

from nightbuzz.leaderboard import assemble_leaderboard
from nightbuzz.models import (
    BadgeType,
    Confidence,
    Direction,
    HourlyTrend,
    LeaderboardType,
    MonthlyScore,
    SignalSummary,
    SocialBuzzBoost,
    TonightScore,
    TrendingScore,
    Venue,
)
from nightbuzz.models.scoring import MonthlyBreakdown, MonthOverMonthDelta, TonightBreakdown, WeekOverWeekDelta

NOW = datetime(2026, 10, 23, 22, 0, tzinfo=timezone.utc)


def venue(venue_id: str, **overrides) -> Venue:
    return Venue(id=venue_id, name=venue_id.title(), **overrides)


def tonight(total: float, deals: float = 0.0, social_buzz=None) -> TonightScore:
    return TonightScore(
        total=total,
        breakdown=TonightBreakdown(deals=deals),
        confidence=Confidence.MEDIUM,
        signals=SignalSummary(),
        social_buzz=social_buzz,
    )


def monthly(power: float) -> MonthlyScore:
    return MonthlyScore(power_score=power, breakdown=MonthlyBreakdown())


def trending(momentum: float, direction: Direction) -> TrendingScore:
    return TrendingScore(
        momentum=momentum,
        direction=direction,
        week_over_week=WeekOverWeekDelta(),
        month_over_month=MonthOverMonthDelta(),
    )


def badge_types(entry) -> set:
    return {badge.type for badge in entry.badges}


def test_ranks_are_contiguous_and_sorted() -> None:
    """Entries are sorted by score and ranked 1..N."""
    items = [(venue("a"), tonight(50)), (venue("b"), tonight(90)), (venue("c"), tonight(70))]
    response = assemble_leaderboard(LeaderboardType.TONIGHT, items, NOW)

    assert [e.venue.id for e in response.entries] == ["b", "c", "a"]
    assert [e.rank for e in response.entries] == [1, 2, 3]
    assert response.meta.total == 3
    assert response.meta.last_updated == NOW
    assert response.period is None


def test_ties_keep_input_order() -> None:
    """Equal scores keep their input order."""
    items = [(venue("first"), tonight(60)), (venue("second"), tonight(60))]
    response = assemble_leaderboard(LeaderboardType.TONIGHT, items, NOW)

    assert [e.venue.id for e in response.entries] == ["first", "second"]
    assert [e.rank for e in response.entries] == [1, 2]


def test_rank_delta_against_previous_ranks() -> None:
    """Deltas are positive for climbers and None for newcomers."""
    items = [(venue("a"), tonight(90)), (venue("b"), tonight(80))]
    response = assemble_leaderboard(LeaderboardType.TONIGHT, items, NOW, previous_ranks={"a": 5})

    first, second = response.entries
    assert first.previous_rank == 5
    assert first.rank_delta == 4
    assert second.previous_rank is None
    assert second.rank_delta is None


def test_pagination_happens_after_ranking() -> None:
    """A page keeps the global rank of its entries."""
    items = [(venue(v), tonight(s)) for v, s in [("a", 10), ("b", 30), ("c", 20)]]
    response = assemble_leaderboard(LeaderboardType.TONIGHT, items, NOW, offset=1, limit=1)

    assert len(response.entries) == 1
    assert response.entries[0].venue.id == "c"
    assert response.entries[0].rank == 2
    assert response.meta.total == 3
    assert response.meta.offset == 1
    assert response.meta.limit == 1


def test_empty_leaderboard() -> None:
    """No candidates yields an empty page."""
    response = assemble_leaderboard(LeaderboardType.MONTHLY, [], NOW)

    assert response.entries == []
    assert response.meta.total == 0


def test_monthly_ranks_and_points() -> None:
    """Monthly scores get their rank fields and F1-style points."""
    items = [(venue("a"), monthly(70)), (venue("b"), monthly(85))]
    response = assemble_leaderboard(LeaderboardType.MONTHLY, items, NOW, previous_ranks={"a": 8})

    top, second = response.entries
    assert top.details.power_rank == 1
    assert top.points == 25
    assert second.details.power_rank == 2
    assert second.details.previous_rank == 8
    assert second.details.rank_delta == 6
    assert second.points == 18
    assert response.period.year == 2026
    assert response.period.month == 10


def test_trending_sorts_by_direction_then_magnitude() -> None:
    """Rising venues lead, then stable, then falling; bigger moves first."""
    items = [
        (venue("fall"), trending(-80, Direction.FALLING)),
        (venue("small-rise"), trending(20, Direction.RISING)),
        (venue("flat"), trending(5, Direction.STABLE)),
        (venue("big-rise"), trending(90, Direction.RISING)),
        (venue("small-fall"), trending(-15, Direction.FALLING)),
    ]
    response = assemble_leaderboard(LeaderboardType.TRENDING, items, NOW)

    assert [e.venue.id for e in response.entries] == ["big-rise", "small-rise", "flat", "fall", "small-fall"]
    assert response.entries[0].details.trending_rank == 1
    assert badge_types(response.entries[0]) == {BadgeType.HOT_STREAK}
    assert badge_types(response.entries[1]) == {BadgeType.RISING}
    assert badge_types(response.entries[2]) == set()
    assert badge_types(response.entries[3]) == {BadgeType.COOLING}


def test_badges_are_independent() -> None:
    """A venue can collect several badges at once."""
    buzz = SocialBuzzBoost(buzz_score=95, pulse=90, trend=HourlyTrend.EXPLODING, is_viral=True)
    items = [(venue("a", expert_pick_rank=2), tonight(85, deals=12, social_buzz=buzz))]
    response = assemble_leaderboard(LeaderboardType.TONIGHT, items, NOW, previous_ranks={"a": 9})

    entry = response.entries[0]
    assert badge_types(entry) == {
        BadgeType.EXPERT_PICK,
        BadgeType.HOT_TONIGHT,
        BadgeType.MOST_IMPROVED,
        BadgeType.TRENDING_ON_SOCIAL,
        BadgeType.BEST_DEALS,
    }
    assert "Expert Pick #2" in [badge.label for badge in entry.badges]


def test_badge_thresholds() -> None:
    """Badges only apply past their thresholds."""
    items = [(venue("a", expert_pick_rank=5), tonight(79.9, deals=10))]
    response = assemble_leaderboard(LeaderboardType.TONIGHT, items, NOW, previous_ranks={"a": 5})

    assert response.entries[0].badges == []


def test_rising_social_badge() -> None:
    """Strong, rising but not viral buzz earns a rising badge."""
    buzz = SocialBuzzBoost(buzz_score=50, pulse=40, trend=HourlyTrend.RISING)
    items = [(venue("a"), tonight(50, social_buzz=buzz))]
    response = assemble_leaderboard(LeaderboardType.TONIGHT, items, NOW)

    assert badge_types(response.entries[0]) == {BadgeType.RISING}


def test_monthly_climbing_and_top_badges() -> None:
    """Climbers show how many spots they gained; the leader is #1 this month."""
    items = [(venue("a"), monthly(90)), (venue("b"), monthly(80)), (venue("c"), monthly(70))]
    response = assemble_leaderboard(
        LeaderboardType.MONTHLY, items, NOW, previous_ranks={"a": 1, "b": 5, "c": 10}
    )

    top, climber, improved = response.entries
    assert badge_types(top) == {BadgeType.TOP_OF_MONTH}
    assert [badge.label for badge in top.badges] == ["#1 This Month"]
    assert badge_types(climber) == {BadgeType.CLIMBING}
    assert [badge.label for badge in climber.badges] == ["↑3 spots"]
    assert badge_types(improved) == {BadgeType.CLIMBING, BadgeType.MOST_IMPROVED}
    assert "↑7 spots" in [badge.label for badge in improved.badges]


def test_climbing_badge_is_monthly_only() -> None:
    """Tonight venues that climbed a few places earn no climbing badge."""
    items = [(venue("a"), tonight(50))]
    response = assemble_leaderboard(LeaderboardType.TONIGHT, items, NOW, previous_ranks={"a": 4})

    assert response.entries[0].rank_delta == 3
    assert response.entries[0].badges == []


def test_hot_streak_threshold() -> None:
    """Momentum of 50 upgrades a rising venue to a hot streak."""
    items = [(venue("a"), trending(50, Direction.RISING)), (venue("b"), trending(49, Direction.RISING))]
    response = assemble_leaderboard(LeaderboardType.TRENDING, items, NOW)

    assert [badge.label for badge in response.entries[0].badges] == ["🚀 Hot Streak"]
    assert [badge.label for badge in response.entries[1].badges] == ["↑ Rising"]
