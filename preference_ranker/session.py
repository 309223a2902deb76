"""
Ranking session.

Front-end facing contract around one preference graph: collect items, hand
out matchups, accept answers and report results. A session moves through
COLLECTING -> RANKING -> RESULTS and can be reset back to COLLECTING.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

from .exceptions import InvalidPreferenceError, SessionStateError
from .graph import PreferenceGraph
from .interfaces import GraphDump, MatchupSelector
from .logging_config import get_logger
from .matchup_selectors import OldestPendingSelector
from .models import ROOT_ID, Matchup, NodeId, RankedItem
from .ranking import RankingReader


class SessionState(str, Enum):
    COLLECTING = "collecting"
    RANKING = "ranking"
    RESULTS = "results"


class RankingSession:
    """
    One interactive ranking run.

    Not thread safe: a session has exactly one writer, the caller feeding it
    answers one at a time.
    """

    def __init__(self, selector: MatchupSelector | None = None):
        """
        Initialize an empty session in the COLLECTING state.

        Args:
            selector: Matchup selector (default: OldestPendingSelector)
        """
        self.selector: MatchupSelector = selector or OldestPendingSelector()
        self.graph: PreferenceGraph = PreferenceGraph()
        self.state: SessionState = SessionState.COLLECTING
        self.labels = list[str]()
        self.judgment_count: int = 0
        self.logger: "Logger" = get_logger("ranking_session")

    def _require(self, *states: SessionState) -> None:
        if self.state not in states:
            allowed = ", ".join(s.value for s in states)
            raise SessionStateError(f"Session is {self.state.value}; expected {allowed}")

    def _transition(self, state: SessionState) -> None:
        self.logger.info(f"Session {self.state.value} -> {state.value}")
        self.state = state

    def register(self, label: str) -> NodeId:
        """Add an item to rank. Only valid while collecting."""
        self._require(SessionState.COLLECTING)
        handle = self.graph.register(label)
        self.labels.append(label)
        return handle

    def finish_collecting(self) -> None:
        """Signal that all items are registered and ranking may start."""
        self._require(SessionState.COLLECTING)
        self.logger.info(f"Collected {self.graph.item_count} items")
        self._transition(SessionState.RANKING)

    def request_next_matchup(self) -> Matchup | None:
        """
        Return the next matchup to answer.

        Returns None once nothing is left to compare, moving the session to
        RESULTS. Keeps returning None after that.
        """
        self._require(SessionState.RANKING, SessionState.RESULTS)
        if self.state is SessionState.RESULTS:
            return None

        matchup = self.selector.select_matchup(self.graph)
        if matchup is None:
            RankingReader(self.graph).ensure_complete()
            self._transition(SessionState.RESULTS)
        return matchup

    def submit_preference(self, winner: NodeId, loser: NodeId) -> None:
        """
        Record the answer to a matchup.

        Items that are siblings get a new preference edge. Items already
        ordered relative to each other are left alone, so re-answering an
        old comparison never changes the ranking, even after RESULTS.
        Anything else is a caller error.

        Raises:
            InvalidPreferenceError: unknown handle, the root, the same item
                twice, or two items that have never been comparable
        """
        self._require(SessionState.RANKING, SessionState.RESULTS)
        for handle in (winner, loser):
            _ = self.graph.node(handle)
            if handle == ROOT_ID:
                raise InvalidPreferenceError("The root cannot take part in a preference")
        if winner == loser:
            raise InvalidPreferenceError(f"Cannot prefer item {winner} over itself")

        if self.graph.are_siblings(winner, loser):
            self.graph.record_preference(winner, loser)
            self.judgment_count += 1
            self.logger.debug(
                f"Judgment {self.judgment_count}: "
                f"{self.graph.label(winner)!r} > {self.graph.label(loser)!r}"
            )
            return

        if self.graph.is_ancestor(winner, loser):
            self.logger.info(f"Preference {winner} > {loser} already resolved; ignoring")
            return
        if self.graph.is_ancestor(loser, winner):
            self.logger.warning(
                f"Preference {winner} > {loser} contradicts an earlier answer; ignoring"
            )
            return

        raise InvalidPreferenceError(
            f"Items {winner} and {loser} are not siblings in any pending matchup"
        )

    def request_results(self) -> list[RankedItem]:
        """
        Return the final ranking as (rank, label) rows.

        Also valid while RANKING once no matchup is pending.
        """
        self._require(SessionState.RANKING, SessionState.RESULTS)
        if self.state is SessionState.RANKING and self.request_next_matchup() is not None:
            raise SessionStateError("Ranking is not finished; matchups are still pending")
        return RankingReader(self.graph).ranked_items()

    def reset(self, keep_items: bool = True) -> None:
        """
        Discard the graph and return to COLLECTING.

        Args:
            keep_items: Re-register the same labels (redo) instead of
                starting with an empty item set
        """
        labels = list(self.labels) if keep_items else list[str]()
        self.graph = PreferenceGraph()
        self.labels = list[str]()
        self.judgment_count = 0
        self._transition(SessionState.COLLECTING)
        for label in labels:
            _ = self.register(label)

    def dump_graph(self) -> GraphDump:
        """Diagnostic dump of every node and its children."""
        return self.graph.dump()
