"""
Graphviz export of a preference graph dump.
"""

from .interfaces import GraphDump


def _quote(label: str) -> str:
    return '"' + label.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_dot(dump: GraphDump) -> str:
    """
    Render a graph dump as a Graphviz digraph.

    Nodes are keyed by handle and labelled with their item label, so items
    sharing a label stay distinct. The root is left out: its children appear
    as bare nodes.
    """
    lines = ["digraph {"]
    for node in dump["nodes"]:
        if node["node_id"] == dump["root_id"]:
            continue
        lines.append(f"  n{node['node_id']} [label={_quote(node['label'] or '')}];")

    for node in dump["nodes"]:
        if node["node_id"] == dump["root_id"] or not node["children"]:
            continue
        for child in node["children"]:
            lines.append(f"  n{node['node_id']} -> n{child};")

    lines.append("}")
    return "\n".join(lines) + "\n"
