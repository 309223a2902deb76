"""
Matchup selector implementations.

Provides implementations of the MatchupSelector interface for choosing which
pair of items to compare next.

Available implementations:
- OldestPendingSelector: Offers the longest-waiting sibling pair first
"""

from .oldest_pending_selector import OldestPendingSelector

__all__ = ["OldestPendingSelector"]
