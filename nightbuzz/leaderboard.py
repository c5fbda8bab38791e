"""
Leaderboard Assembler
=====================
Sorts scored venues, assigns contiguous 1-based ranks, compares against the
previous period, attaches badges and paginates.

Ranks are assigned over the full list before pagination, so a venue keeps its
rank regardless of which page it lands on. Ties keep input order.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from nightbuzz.models import (
    Badge,
    BadgeType,
    Direction,
    HourlyTrend,
    LeaderboardEntry,
    LeaderboardMeta,
    LeaderboardResponse,
    LeaderboardType,
    MonthlyScore,
    Period,
    TonightScore,
    TrendingScore,
    Venue,
)
from nightbuzz.models.leaderboard import VenueScore
from nightbuzz.scoring.monthly import calculate_points

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20

EXPERT_PICK_MAX_RANK = 4
HOT_TONIGHT_SCORE = 80
MOST_IMPROVED_DELTA = 5
BEST_DEALS_POINTS = 10
RISING_BUZZ_SCORE = 40
HOT_STREAK_MOMENTUM = 50
CLIMBING_DELTA = 3

DIRECTION_ORDER = {Direction.RISING: 0, Direction.STABLE: 1, Direction.FALLING: 2}

Candidate = Tuple[Venue, VenueScore]


def score_value(details: VenueScore) -> float:
    if isinstance(details, TonightScore):
        return details.total
    if isinstance(details, MonthlyScore):
        return details.power_score
    return details.momentum


def _sort_key(kind: LeaderboardType) -> Callable[[Candidate], tuple]:
    if kind == LeaderboardType.TRENDING:
        return lambda item: (DIRECTION_ORDER[item[1].direction], -abs(item[1].momentum))
    return lambda item: (-score_value(item[1]),)


# ============================================================================
# Badges
# ============================================================================

def _expert_pick(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    pick = venue.expert_pick_rank
    if pick is not None and pick <= EXPERT_PICK_MAX_RANK:
        return Badge(type=BadgeType.EXPERT_PICK, label=f"Expert Pick #{pick}")
    return None


def _hot_tonight(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    if isinstance(details, TonightScore) and details.total >= HOT_TONIGHT_SCORE:
        return Badge(type=BadgeType.HOT_TONIGHT, label="Hot Tonight")
    return None


def _most_improved(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    if rank_delta is not None and rank_delta >= MOST_IMPROVED_DELTA:
        return Badge(type=BadgeType.MOST_IMPROVED, label="Most Improved")
    return None


def _trending_on_social(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    if isinstance(details, TonightScore) and details.social_buzz is not None and details.social_buzz.is_viral:
        return Badge(type=BadgeType.TRENDING_ON_SOCIAL, label="🔥 Trending on Social")
    return None


def _best_deals(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    if isinstance(details, TonightScore) and details.breakdown.deals > BEST_DEALS_POINTS:
        return Badge(type=BadgeType.BEST_DEALS, label="Great Deals")
    return None


def _rising(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    if (
        isinstance(details, TrendingScore)
        and details.direction == Direction.RISING
        and details.momentum < HOT_STREAK_MOMENTUM
    ):
        return Badge(type=BadgeType.RISING, label="↑ Rising")
    if isinstance(details, TonightScore) and details.social_buzz is not None:
        buzz = details.social_buzz
        if (
            not buzz.is_viral
            and buzz.buzz_score >= RISING_BUZZ_SCORE
            and buzz.trend in (HourlyTrend.RISING, HourlyTrend.EXPLODING)
        ):
            return Badge(type=BadgeType.RISING, label="📈 Rising")
    return None


def _hot_streak(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    if (
        isinstance(details, TrendingScore)
        and details.direction == Direction.RISING
        and details.momentum >= HOT_STREAK_MOMENTUM
    ):
        return Badge(type=BadgeType.HOT_STREAK, label="🚀 Hot Streak")
    return None


def _cooling(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    if isinstance(details, TrendingScore) and details.direction == Direction.FALLING:
        return Badge(type=BadgeType.COOLING, label="↓ Cooling")
    return None


def _climbing(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    if isinstance(details, MonthlyScore) and rank_delta is not None and rank_delta >= CLIMBING_DELTA:
        return Badge(type=BadgeType.CLIMBING, label=f"↑{rank_delta} spots")
    return None


def _top_of_month(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> Optional[Badge]:
    if isinstance(details, MonthlyScore) and details.power_rank == 1:
        return Badge(type=BadgeType.TOP_OF_MONTH, label="#1 This Month")
    return None


BADGE_RULES = [
    _expert_pick,
    _top_of_month,
    _best_deals,
    _hot_tonight,
    _trending_on_social,
    _hot_streak,
    _rising,
    _cooling,
    _climbing,
    _most_improved,
]


def badges_for(venue: Venue, details: VenueScore, rank_delta: Optional[int]) -> List[Badge]:
    """Every badge whose rule matches. Rules are independent of each other."""
    badges = []
    for rule in BADGE_RULES:
        badge = rule(venue, details, rank_delta)
        if badge is not None:
            badges.append(badge)
    return badges


# ============================================================================
# Assembly
# ============================================================================

def _with_rank(kind: LeaderboardType, details: VenueScore, rank: int,
               previous_rank: Optional[int], rank_delta: Optional[int]) -> VenueScore:
    if kind == LeaderboardType.MONTHLY:
        return details.model_copy(update={
            "power_rank": rank,
            "previous_rank": previous_rank,
            "rank_delta": rank_delta,
        })
    if kind == LeaderboardType.TRENDING:
        return details.model_copy(update={"trending_rank": rank})
    return details


def assemble_leaderboard(
    kind: LeaderboardType,
    items: Sequence[Candidate],
    now: datetime,
    previous_ranks: Optional[Dict[str, int]] = None,
    offset: int = 0,
    limit: int = DEFAULT_LIMIT,
) -> LeaderboardResponse:
    """Rank (venue, score) pairs into one page of a leaderboard.

    Args:
        kind: Which leaderboard the scores belong to.
        items: Scored venues, all of the score type matching ``kind``.
        now: Timestamp of this run, used for ``last_updated`` and the period.
        previous_ranks: Venue id -> rank in the previous period.
        offset: Entries to skip after ranking.
        limit: Maximum entries to return.
    """
    previous_ranks = previous_ranks or {}
    ordered = sorted(items, key=_sort_key(kind))

    entries: List[LeaderboardEntry] = []
    for position, (venue, details) in enumerate(ordered):
        rank = position + 1
        previous_rank = previous_ranks.get(venue.id)
        rank_delta = previous_rank - rank if previous_rank is not None else None
        ranked = _with_rank(kind, details, rank, previous_rank, rank_delta)

        entries.append(LeaderboardEntry(
            rank=rank,
            venue=venue,
            score=score_value(details),
            details=ranked,
            previous_rank=previous_rank,
            rank_delta=rank_delta,
            badges=badges_for(venue, ranked, rank_delta),
            points=calculate_points(rank) if kind == LeaderboardType.MONTHLY else None,
        ))

    logger.debug("Ranked %d venues for the %s leaderboard", len(entries), kind.value)

    return LeaderboardResponse(
        type=kind,
        period=Period(year=now.year, month=now.month) if kind == LeaderboardType.MONTHLY else None,
        entries=entries[offset:offset + limit],
        meta=LeaderboardMeta(total=len(entries), offset=offset, limit=limit, last_updated=now),
    )
