"""
Oldest-pending matchup selector.

Offers the pair whose most recent participant has waited the longest, so
no pending comparison is starved while newer ones keep getting resolved.
"""

from collections.abc import Sequence

from typing_extensions import override

from ..graph import PreferenceGraph
from ..interfaces import MatchupSelector
from ..logging_config import get_logger
from ..models import Matchup

# Module-level logger
logger = get_logger("oldest_pending_selector")


class OldestPendingSelector(MatchupSelector):
    """Selector ordering matchups by (most recent stamp, least recent stamp)."""

    @override
    def find_matchups(self, graph: PreferenceGraph) -> Sequence[Matchup]:
        """
        Collect one matchup per node with unresolved siblings.

        Within a sibling group the first two children are the oldest pair,
        because children are kept sorted by stamp.
        """
        matchups = list[Matchup]()
        for node in graph.nodes():
            if len(node.children) < 2:
                continue
            first, second = node.children[0], node.children[1]
            matchups.append(Matchup(
                parent=node.node_id,
                first=graph.item(first),
                second=graph.item(second),
                first_mark=graph.node(first).sequence_mark,
                second_mark=graph.node(second).sequence_mark,
            ))

        # sort by oldest recent, then oldest secondary; stable for arena order
        matchups.sort(key=lambda m: (m.recent_mark, m.older_mark))

        logger.debug(f"Found {len(matchups)} pending matchups")
        return matchups
