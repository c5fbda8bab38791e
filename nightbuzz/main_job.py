"""Batch job: score every venue in a snapshot and write the three leaderboards."""

import argparse
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Set
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, ValidationError

from nightbuzz.config import DEFAULT_OUTPUT_PATH, EXPERT_MODE, LOG_LEVEL, TIMEZONE, load_weights
from nightbuzz.geo import calculate_distance, within_radius
from nightbuzz.leaderboard import DEFAULT_LIMIT, assemble_leaderboard
from nightbuzz.models import (
    LeaderboardType,
    MonthlyInput,
    RealTimeBuzz,
    ScoringWeights,
    SignalSummary,
    SocialMention,
    TrendingInput,
    Venue,
)
from nightbuzz.scoring import calculate_monthly_score, calculate_tonight_score, calculate_trending_score
from nightbuzz.scoring.explain import explain_tonight_score
from nightbuzz.social.buzz_engine import calculate_real_time_buzz
from nightbuzz.utils import as_aware


class VenueSnapshot(BaseModel):
    """Everything the job knows about one venue for this run."""

    venue: Venue
    signals: Optional[SignalSummary] = None
    monthly: Optional[MonthlyInput] = None
    trending: Optional[TrendingInput] = None
    mentions: List[SocialMention] = Field(default_factory=list)

    model_config = {"extra": "ignore"}


class Snapshot(BaseModel):
    now: Optional[datetime] = None
    venues: List[VenueSnapshot] = Field(default_factory=list)
    previous_ranks: Dict[LeaderboardType, Dict[str, int]] = Field(default_factory=dict)

    model_config = {"extra": "ignore"}


def load_snapshot(path: Path) -> Snapshot:
    return Snapshot.model_validate(json.loads(path.read_text()))


def local_now(now: datetime, tz_name: str) -> datetime:
    """Express ``now`` in the venues' zone; naive values are read as UTC."""
    return as_aware(now).astimezone(ZoneInfo(tz_name))


def _with_distance(signals: SignalSummary, venue: Venue, center: Optional[List[float]]) -> SignalSummary:
    if center is None:
        return signals
    distance = calculate_distance(center[0], center[1], venue.latitude, venue.longitude)
    return signals.model_copy(update={"distance_miles": distance})


def score_snapshot(
    snapshot: Snapshot,
    weights: ScoringWeights,
    now: datetime,
    expert_mode: bool = False,
    center: Optional[List[float]] = None,
    radius_miles: Optional[float] = None,
    limit: int = DEFAULT_LIMIT,
) -> dict:
    """Score all venues with one weights object and one ``now``."""
    tonight, monthly, trending = [], [], []
    buzz_by_venue: Dict[str, RealTimeBuzz] = {}
    explanations: Dict[str, str] = {}

    nearby: Optional[Set[str]] = None
    if radius_miles is not None:
        if center is None:
            logging.warning("Radius of %s mi given without a center; not filtering", radius_miles)
        else:
            venues = [item.venue for item in snapshot.venues]
            nearby = {venue.id for venue in within_radius(venues, center[0], center[1], radius_miles)}

    for item in snapshot.venues:
        venue = item.venue
        multiplier = venue.expert_boost_multiplier if expert_mode else 1.0

        buzz = None
        if item.mentions:
            buzz = calculate_real_time_buzz(venue.id, item.mentions, now, weights.social)
            buzz_by_venue[venue.id] = buzz

        if item.signals is not None:
            signals = _with_distance(item.signals, venue, center)
            if nearby is not None and venue.id not in nearby:
                logging.debug("Skipping %s: %.2f mi outside radius", venue.id, signals.distance_miles)
            else:
                score = calculate_tonight_score(signals, weights, multiplier, buzz)
                tonight.append((venue, score))
                explanations[venue.id] = explain_tonight_score(score, weights)

        if item.monthly is not None:
            monthly.append((venue, calculate_monthly_score(item.monthly, weights, multiplier)))

        if item.trending is not None:
            trending.append((venue, calculate_trending_score(item.trending)))

    if not snapshot.venues:
        logging.warning("Snapshot contains no venues")

    logging.info(
        "Scored %d tonight, %d monthly, %d trending venues",
        len(tonight), len(monthly), len(trending),
    )

    boards = {
        LeaderboardType.TONIGHT: tonight,
        LeaderboardType.MONTHLY: monthly,
        LeaderboardType.TRENDING: trending,
    }
    payload = {
        "date": now.isoformat(),
        "weights_version": weights.version,
        "buzz": [buzz.model_dump(mode="json") for buzz in buzz_by_venue.values()],
        "explanations": explanations,
    }
    for kind, items in boards.items():
        response = assemble_leaderboard(
            kind,
            items,
            now,
            previous_ranks=snapshot.previous_ranks.get(kind),
            limit=limit,
        )
        payload[kind.value] = response.model_dump(mode="json")
    return payload


def write_payload(payload: dict, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False))
    logging.info("Saved %s", output_path)
    return output_path


def run_job(args: argparse.Namespace) -> Path:
    weights = load_weights(args.weights)
    snapshot = load_snapshot(args.input)
    now = local_now(snapshot.now or datetime.now(timezone.utc), args.timezone)

    payload = score_snapshot(
        snapshot,
        weights,
        now,
        expert_mode=args.expert_mode,
        center=args.center,
        radius_miles=args.radius,
        limit=args.limit,
    )
    return write_payload(payload, args.output)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score venues and build the nightlife leaderboards")
    parser.add_argument("input", type=Path, help="JSON snapshot of venues, signals and mentions")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT_PATH, help="Where to save leaderboard JSON")
    parser.add_argument("--weights", type=Path, default=None, help="Scoring weights JSON (defaults to built-in weights)")
    parser.add_argument("--expert-mode", action="store_true", default=EXPERT_MODE, help="Apply curated expert boosts")
    parser.add_argument("--center", type=float, nargs=2, metavar=("LAT", "LNG"), help="Compute distances from this point")
    parser.add_argument("--radius", type=float, default=None, help="Drop tonight venues farther than this many miles")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT, help="Entries per leaderboard")
    parser.add_argument("--timezone", type=str, default=TIMEZONE, help="IANA zone of the venues, e.g. America/Chicago")
    parser.add_argument("--log-level", type=str, default=LOG_LEVEL, help="Logging level")
    args = parser.parse_args(argv)

    if args.radius is not None and args.center is None:
        parser.error("--radius requires --center")
    try:
        ZoneInfo(args.timezone)
    except (ZoneInfoNotFoundError, ValueError):
        parser.error(f"unknown timezone: {args.timezone}")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(levelname)s %(message)s")
    try:
        output_file = run_job(args)
    except (json.JSONDecodeError, ValidationError) as exc:
        logging.error("Invalid input: %s", exc)
        raise SystemExit(1) from exc
    logging.info("Scoring job complete: %s", output_file)


if __name__ == "__main__":
    main()
