"""Social buzz constants: keyword lists, thresholds and multipliers."""

from datetime import timedelta

# Words that suggest a venue is busy / quiet. Used by both sentiment and
# activity analysis.
HIGH_ACTIVITY_KEYWORDS = [
    "packed",
    "crowded",
    "line",
    "wait",
    "full",
    "busy",
    "popping",
    "poppin",
    "lit",
    "fire",
    "crazy",
    "insane",
    "wild",
    "amazing",
    "best",
    "everyone",
    "whole town",
]

LOW_ACTIVITY_KEYWORDS = [
    "empty",
    "dead",
    "quiet",
    "slow",
    "nobody",
    "ghost town",
    "boring",
    "lame",
]

TIME_WINDOWS = {
    "realtime": timedelta(minutes=15),
    "hourly": timedelta(hours=1),
    "daily": timedelta(hours=24),
    "weekly": timedelta(days=7),
}

# Lower bounds of each activity level on the 0-100 scale
ACTIVITY_BREAKPOINTS = [
    (85, "exploding"),
    (70, "packed"),
    (50, "busy"),
    (30, "moderate"),
    (10, "slow"),
]

# Percent change (last hour vs 24h hourly average) used for trend detection
EXPLODING_THRESHOLD = 100
RISING_THRESHOLD = 20
FALLING_THRESHOLD = -20

# Follower counts, highest tier first
INFLUENCER_TIERS = [
    (1_000_000, "mega", 3.0),
    (100_000, "macro", 2.0),
    (10_000, "mid", 1.5),
    (1_000, "micro", 1.2),
]

VIDEO_MULTIPLIER = 1.3
LOCATION_TAG_MULTIPLIER = 1.5
LIVE_MULTIPLIER = 2.0

# Activity outside expected peak hours is more informative than activity
# inside them. Monday-Wednesday surprises weigh most.
OFF_PEAK_EARLY_WEEK_MULTIPLIER = 2.5
OFF_PEAK_MULTIPLIER = 1.8
EARLY_WEEK_DAYS = {0, 1, 2}
LATE_NIGHT_HOURS = range(0, 4)
LATE_NIGHT_MULTIPLIER = 1.5

PULSE_NORMALIZER = 2.0
DEFAULT_PEAK_HOUR = 21

TREND_FACTOR_MULTIPLIERS = {
    "exploding": 1.5,
    "rising": 1.2,
    "falling": 0.8,
    "dead": 0.5,
}
LIVE_BONUS = 20

# engagement_score at or above which a single post counts as viral
VIRAL_POST_ENGAGEMENT = 80
