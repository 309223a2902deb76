"""
Preference graph.

Records "prefer A over B" judgments between registered items and collapses
redundant edges through sibling pruning, so the structure converges from a
shallow tree under the root toward a single chain.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

from .exceptions import InvalidPreferenceError, ValidationError
from .interfaces import GraphDump, NodeSnapshot
from .logging_config import get_logger
from .models import ROOT_ID, Item, Node, NodeId


class PreferenceGraph:
    """
    Arena of nodes addressed by integer handles.

    The root occupies slot 0 and every registered item gets the next slot.
    Each node keeps its children sorted oldest judgment first, and the graph
    owns the counter used to stamp nodes when they take part in a judgment.

    Invariant: as long as preferences are only recorded between siblings, a
    node is the child of at most one node and every item stays reachable
    from the root.
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = [Node(node_id=ROOT_ID, label=None)]
        self.counter: int = 0
        self.logger: "Logger" = get_logger("preference_graph")

    @property
    def root(self) -> Node:
        return self._nodes[ROOT_ID]

    @property
    def item_count(self) -> int:
        """Number of registered items (the root is not counted)."""
        return len(self._nodes) - 1

    def node(self, node_id: NodeId) -> Node:
        """Look up a node by handle."""
        if not 0 <= node_id < len(self._nodes):
            raise InvalidPreferenceError(f"Unknown item handle: {node_id}")
        return self._nodes[node_id]

    def nodes(self) -> list[Node]:
        """All nodes in arena order, root first."""
        return list(self._nodes)

    def item_ids(self) -> list[NodeId]:
        """Handles of all registered items in registration order."""
        return [n.node_id for n in self._nodes if not n.is_root]

    def label(self, node_id: NodeId) -> str:
        node = self.node(node_id)
        if node.label is None:
            raise InvalidPreferenceError("The root has no label")
        return node.label

    def item(self, node_id: NodeId) -> Item:
        return Item(handle=node_id, label=self.label(node_id))

    def register(self, label: str) -> NodeId:
        """
        Add an item and attach it beneath the root.

        Labels may repeat; each call creates a distinct item.

        Args:
            label: Text shown to the user for this item

        Returns:
            Handle of the new item
        """
        if not isinstance(label, str):
            raise ValidationError(f"label must be a string, got {type(label).__name__}")

        node_id = NodeId(len(self._nodes))
        self._nodes.append(Node(node_id=node_id, label=label))
        self.logger.debug(f"Registered item {node_id}: {label!r}")

        self.record_preference(ROOT_ID, node_id)
        return node_id

    def record_preference(self, winner: NodeId, loser: NodeId) -> None:
        """
        Record that `winner` is preferred over `loser`.

        Stamps both nodes with the next counter value, files `loser` under
        `winner` and drops `loser` from every node that also lists `winner`.
        Recording a node against itself is ignored.
        """
        winner_node = self.node(winner)
        loser_node = self.node(loser)

        if winner == loser:
            self.logger.warning(f"Ignoring preference of item {winner} over itself")
            return

        self.counter += 1
        winner_node.sequence_mark = self.counter
        loser_node.sequence_mark = self.counter

        if loser not in winner_node.children:
            winner_node.children.append(loser)
        # order by stamp, so less recent options are presented first
        self._sort_children(winner_node)

        for node in self._nodes:
            self._prune_sibling(node, keep=winner, drop=loser)

        self.logger.debug(f"Recorded {winner} > {loser} at mark {self.counter}")

    def _prune_sibling(self, node: Node, keep: NodeId, drop: NodeId) -> None:
        """Remove `drop` from `node.children` if `keep` is listed there too."""
        if keep in node.children and drop in node.children:
            node.children = [c for c in node.children if c != drop]
            self._sort_children(node)
            self.logger.debug(f"Pruned {drop} from node {node.node_id} in favour of {keep}")

    def _sort_children(self, node: Node) -> None:
        # list.sort is stable, so equal stamps keep insertion order
        node.children.sort(key=lambda child: self._nodes[child].sequence_mark)

    def parent_of(self, node_id: NodeId) -> NodeId | None:
        """Return the first node listing `node_id` as a child, if any."""
        _ = self.node(node_id)
        for node in self._nodes:
            if node_id in node.children:
                return node.node_id
        return None

    def parents_of(self, node_id: NodeId) -> list[NodeId]:
        """Return every node listing `node_id` as a child."""
        _ = self.node(node_id)
        return [n.node_id for n in self._nodes if node_id in n.children]

    def is_ancestor(self, ancestor: NodeId, node_id: NodeId) -> bool:
        """True if `ancestor` is reachable by walking parents up from `node_id`."""
        _ = self.node(ancestor)
        seen: set[NodeId] = set()
        current = self.parent_of(node_id)
        while current is not None and current not in seen:
            if current == ancestor:
                return True
            seen.add(current)
            current = self.parent_of(current)
        return False

    def are_siblings(self, first: NodeId, second: NodeId) -> bool:
        """True if some node currently lists both items as children."""
        if first == second:
            return False
        return any(first in n.children and second in n.children for n in self._nodes)

    def dump(self) -> GraphDump:
        """Export every node and its current children for diagnostics."""
        nodes = [
            NodeSnapshot(
                node_id=int(n.node_id),
                label=n.label,
                sequence_mark=n.sequence_mark,
                children=[int(c) for c in n.children],
            )
            for n in self._nodes
        ]
        return GraphDump(root_id=int(ROOT_ID), counter=self.counter, nodes=nodes)
