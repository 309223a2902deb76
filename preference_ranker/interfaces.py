"""
Abstract base classes defining the interfaces for the preference ranker.

All interfaces are synchronous: the only suspension point is a judge waiting
for an answer.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, TypedDict

from .models import Matchup, Verdict

if TYPE_CHECKING:
    from .graph import PreferenceGraph


class NodeSnapshot(TypedDict):
    """TypedDict for one node of a graph dump."""
    node_id: int
    label: str | None  # None for the root
    sequence_mark: int
    children: list[int]


class GraphDump(TypedDict):
    """TypedDict for the diagnostic dump of a preference graph."""
    root_id: int
    counter: int
    nodes: list[NodeSnapshot]


class ItemFetcher(ABC):
    """Interface for fetching item labels to rank."""

    @abstractmethod
    def list_labels(self) -> Iterable[str]:
        """Return labels in registration order."""
        pass


class Judge(ABC):
    """Interface for answering matchups."""

    @abstractmethod
    def evaluate_matchup(self, matchup: Matchup) -> Verdict:
        """
        Synchronous evaluation of a matchup.

        May block while waiting on a human.

        Args:
            matchup: The two sibling items to compare

        Returns:
            Verdict naming the preferred item
        """
        pass


class MatchupSelector(ABC):
    """Interface for choosing which matchup to present next."""

    @abstractmethod
    def find_matchups(self, graph: "PreferenceGraph") -> Sequence[Matchup]:
        """Return every pending matchup, most due first."""
        pass

    def select_matchup(self, graph: "PreferenceGraph") -> Matchup | None:
        """
        Select the next matchup to present.

        Returns:
            The most due matchup, or None once the ranking is resolved
        """
        matchups = self.find_matchups(graph)
        if not matchups:
            return None
        return matchups[0]
