"""
Preference Ranker - Pairwise Preference Ranking

A system for ranking a list of items by asking "which do you prefer" about
pairs of them, recording the answers in a preference graph that collapses
into a single chain.
"""

from .graph import PreferenceGraph
from .interfaces import ItemFetcher, Judge, MatchupSelector
from .models import Item, Matchup, NodeId, RankedItem, Verdict
from .orchestrator import Orchestrator, RunConfig
from .ranking import RankingReader
from .session import RankingSession, SessionState

__version__ = "0.1.0"
__all__ = [
    "Item",
    "Matchup",
    "NodeId",
    "RankedItem",
    "Verdict",
    "ItemFetcher",
    "Judge",
    "MatchupSelector",
    "PreferenceGraph",
    "RankingReader",
    "RankingSession",
    "SessionState",
    "Orchestrator",
    "RunConfig",
]
