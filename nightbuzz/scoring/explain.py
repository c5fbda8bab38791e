"""Human-readable explanations of scores and weights for transparency displays."""

from typing import List

from pydantic import BaseModel

from nightbuzz.models import LeaderboardType, ScoringWeights, TonightScore

from .trending import RANK_WEIGHT, RATING_WEIGHT, REVIEWS_WEIGHT, SCORE_WEIGHT

SEPARATOR = " • "
FALLBACK_EXPLANATION = "Solid local option"


class WeightDescription(BaseModel):
    name: str
    weight: float
    description: str


def _share(points: float, weight: float) -> float:
    return points / weight if weight else 0.0


def explain_tonight_score(score: TonightScore, weights: ScoringWeights) -> str:
    """One line summary such as "Excellent reviews • Open now • Buzzing on social"."""
    tonight = weights.tonight
    breakdown = score.breakdown
    parts = []

    quality = _share(breakdown.quality, tonight.quality)
    if quality >= 0.9:
        parts.append("Excellent reviews")
    elif quality >= 0.8:
        parts.append("Strong rating")

    if _share(breakdown.popularity, tonight.popularity) >= 0.7:
        parts.append("Lots of activity tonight")

    if breakdown.open_now > 0:
        parts.append("Open now")

    if _share(breakdown.deals, tonight.deals) >= 0.6:
        parts.append("Great deals tonight")

    if _share(breakdown.proximity, tonight.proximity) >= 0.8:
        parts.append("Very close to you")

    if score.social_buzz is not None:
        buzz = score.social_buzz.buzz_score
        if buzz >= 85:
            parts.append("EXPLODING on social media")
        elif buzz >= 70:
            parts.append("Buzzing on social")
        elif buzz >= 50:
            parts.append("Active on social")
        if score.social_buzz.live_now:
            parts.append("Streaming live")

    if breakdown.expert_boost > 0:
        parts.append("Expert recommended")

    return SEPARATOR.join(parts) if parts else FALLBACK_EXPLANATION


def describe_weights(weights: ScoringWeights, kind: LeaderboardType = LeaderboardType.TONIGHT) -> List[WeightDescription]:
    """List the active weights of a leaderboard with what each one rewards."""
    if kind == LeaderboardType.TONIGHT:
        tonight = weights.tonight
        return [
            WeightDescription(
                name="Popularity",
                weight=tonight.popularity,
                description="Recent reviews, check-ins, mentions and social buzz",
            ),
            WeightDescription(
                name="Quality",
                weight=tonight.quality,
                description="Rating adjusted for how many reviews back it up",
            ),
            WeightDescription(name="Open Now", weight=tonight.open_now, description="Bonus for venues currently open"),
            WeightDescription(
                name="Deals & Specials",
                weight=tonight.deals,
                description="Active happy hours and promotional offers",
            ),
            WeightDescription(name="Proximity", weight=tonight.proximity, description="Distance from your current location"),
            WeightDescription(
                name="Expert Pick",
                weight=tonight.expert_boost,
                description="Curated recommendations from local experts",
            ),
        ]

    if kind == LeaderboardType.MONTHLY:
        monthly = weights.monthly
        return [
            WeightDescription(
                name="Quality",
                weight=monthly.quality,
                description="Rating adjusted for how many reviews back it up",
            ),
            WeightDescription(
                name="Popularity",
                weight=monthly.popularity,
                description="Review velocity against last month, plus total volume",
            ),
            WeightDescription(
                name="Consistency",
                weight=monthly.consistency,
                description="How stable ratings are from review to review",
            ),
            WeightDescription(name="Deals & Specials", weight=monthly.deals, description="Quality of the venue's deals"),
            WeightDescription(
                name="Expert Pick",
                weight=monthly.expert_boost,
                description="Curated recommendations from local experts",
            ),
        ]

    # Trending momentum uses fixed multipliers rather than configurable weights
    return [
        WeightDescription(name="Rank Change", weight=RANK_WEIGHT, description="Points per place climbed since last period"),
        WeightDescription(name="Score Change", weight=SCORE_WEIGHT, description="Points per point of score gained"),
        WeightDescription(name="Review Momentum", weight=REVIEWS_WEIGHT, description="Points per extra review this week"),
        WeightDescription(name="Rating Change", weight=RATING_WEIGHT, description="Points per star of rating gained this week"),
    ]
