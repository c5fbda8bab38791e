"""Leaderboard response models."""

from datetime import datetime
from typing import List, Optional, Union
from pydantic import BaseModel, Field

from .enums import BadgeType, LeaderboardType
from .scoring import MonthlyScore, TonightScore, TrendingScore
from .venue import Venue

VenueScore = Union[TonightScore, MonthlyScore, TrendingScore]


class Badge(BaseModel):
    type: BadgeType
    label: str


class LeaderboardEntry(BaseModel):
    """One ranked row. Only built by the leaderboard assembler."""
    rank: int = Field(..., ge=1)
    venue: Venue
    score: float
    details: VenueScore
    previous_rank: Optional[int] = None
    rank_delta: Optional[int] = Field(None, description="None for venues new to the board")
    badges: List[Badge] = Field(default_factory=list)
    points: Optional[int] = None

    model_config = {"frozen": True}


class Period(BaseModel):
    year: int
    month: int


class LeaderboardMeta(BaseModel):
    total: int
    offset: int = 0
    limit: int
    last_updated: datetime


class LeaderboardResponse(BaseModel):
    type: LeaderboardType
    period: Optional[Period] = None
    entries: List[LeaderboardEntry] = Field(default_factory=list)
    meta: LeaderboardMeta
