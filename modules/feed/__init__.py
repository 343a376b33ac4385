"""
Feed module.

Merges own, public, followers-only and connections-only posts into one
newest-first home feed.
"""

from .interfaces import IFeedService
from .models import FeedResponse, FeedScope

__all__ = ["IFeedService", "FeedResponse", "FeedScope"]
