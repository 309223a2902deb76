"""
Core dataclasses for the preference ranker.

Defines the graph Node, the Item handle handed to callers, Matchup, Verdict
and RankedItem models with validation.
"""

import time
from dataclasses import dataclass, field
from typing import NewType

from .exceptions import ValidationError

NodeId = NewType("NodeId", int)

# The synthetic root always occupies the first arena slot
ROOT_ID = NodeId(0)


@dataclass
class Node:
    """One arena slot: an item (or the root) and the nodes it is preferred over."""

    node_id: NodeId
    label: str | None
    children: list[NodeId] = field(default_factory=list)
    sequence_mark: int = 0

    @property
    def is_root(self) -> bool:
        return self.label is None


@dataclass(frozen=True)
class Item:
    """A registered item as seen from outside the graph."""

    handle: NodeId
    label: str


@dataclass(frozen=True)
class Matchup:
    """
    Two sibling items offered for comparison.

    `first` is the older of the two children of `parent`.
    """

    parent: NodeId
    first: Item
    second: Item
    first_mark: int
    second_mark: int

    @property
    def recent_mark(self) -> int:
        return max(self.first_mark, self.second_mark)

    @property
    def older_mark(self) -> int:
        return min(self.first_mark, self.second_mark)

    @property
    def handles(self) -> tuple[NodeId, NodeId]:
        return (self.first.handle, self.second.handle)

    def contains(self, handle: NodeId) -> bool:
        return handle in self.handles

    def opponent(self, handle: NodeId) -> Item:
        """Return the contender facing `handle`."""
        if handle == self.first.handle:
            return self.second
        if handle == self.second.handle:
            return self.first
        raise ValidationError(f"Item {handle} is not part of this matchup")


@dataclass
class Verdict:
    """Answer to one matchup."""

    winner: NodeId
    loser: NodeId
    judge_id: str = "unknown"
    timestamp: float = field(default_factory=time.time)

    def __post_init__(self) -> None:
        """Validate verdict data."""
        if self.winner == self.loser:
            raise ValidationError("winner and loser must be different items")

    @classmethod
    def for_winner(cls, matchup: Matchup, winner: NodeId, judge_id: str = "unknown") -> "Verdict":
        """Build a verdict where `winner` beats the other side of `matchup`."""
        loser = matchup.opponent(winner)
        return cls(winner=winner, loser=loser.handle, judge_id=judge_id)


@dataclass(frozen=True)
class RankedItem:
    """One row of the final ranking."""

    rank: int
    label: str
    handle: NodeId
