"""
Ranking reader.

Reads the final order off a resolved preference graph by following the
oldest child from the root until a node has no children.
"""

from .exceptions import RankingIncompleteError
from .graph import PreferenceGraph
from .models import Item, NodeId, RankedItem


class RankingReader:
    """Walks the chain hanging off the root of a preference graph."""

    def __init__(self, graph: PreferenceGraph):
        self.graph: PreferenceGraph = graph

    def ordered_sequence(self) -> list[Item]:
        """
        Follow the first child from the root.

        Once no matchups remain every node has at most one child, so the
        walk visits each item once. On an unresolved graph it returns the
        chain of current leaders only.
        """
        sequence = list[Item]()
        seen: set[NodeId] = set()
        node = self.graph.root
        while node.children:
            child = node.children[0]
            if child in seen:
                break
            seen.add(child)
            sequence.append(self.graph.item(child))
            node = self.graph.node(child)
        return sequence

    def ranked_items(self) -> list[RankedItem]:
        """Number the ordered sequence starting at 1."""
        return [
            RankedItem(rank=rank, label=item.label, handle=item.handle)
            for rank, item in enumerate(self.ordered_sequence(), 1)
        ]

    def is_complete(self) -> bool:
        """True if the chain holds every registered item exactly once."""
        handles = [item.handle for item in self.ordered_sequence()]
        return sorted(handles) == sorted(self.graph.item_ids())

    def ensure_complete(self) -> None:
        """Raise if the chain misses an item."""
        sequence = self.ordered_sequence()
        if len(sequence) != self.graph.item_count or not self.is_complete():
            missing = set(self.graph.item_ids()) - {item.handle for item in sequence}
            raise RankingIncompleteError(
                f"Ranking holds {len(sequence)} of {self.graph.item_count} items; "
                f"unreachable: {sorted(missing)}"
            )
