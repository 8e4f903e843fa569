"""Domain services."""

from .base import Service
from .design_service import DesignService
from .feed_service import (
    GalleryFeed,
    GallerySnapshot,
    SnapshotDiff,
    Subscription,
    diff_snapshots,
)
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .ranking import ranking_key, top_n
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "DesignService",
    "GalleryFeed",
    "GallerySnapshot",
    "JWTService",
    "ModerationService",
    "Service",
    "SnapshotDiff",
    "Subscription",
    "VoteOutcome",
    "VoteService",
    "diff_snapshots",
    "ranking_key",
    "top_n",
]
