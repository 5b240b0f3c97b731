"""Walk and address nodes of a parsed catalog."""

from __future__ import annotations

from typing import Iterable, Iterator

from catalogtree.schemas import CatalogNode


def iter_nodes(forest: Iterable[CatalogNode], prefix: str = "") -> Iterator[tuple[str, CatalogNode]]:
    """Yield ``(uid, node)`` pairs depth-first.

    A uid is the dot-joined index path of the node, e.g. ``"0.2.1"`` for the
    second child of the third child of the first root. Uids are stable for a
    given source as long as its structure does not change.
    """
    pending = [(prefix, list(enumerate(forest))[::-1])]
    while pending:
        parent_uid, siblings = pending[-1]
        if not siblings:
            pending.pop()
            continue
        index, node = siblings.pop()
        uid = f"{parent_uid}.{index}" if parent_uid else str(index)
        yield uid, node
        if node.children:
            pending.append((uid, list(enumerate(node.children))[::-1]))


def count_nodes(forest: Iterable[CatalogNode]) -> int:
    """Count all nodes in the forest."""
    total = 0
    pending = list(forest)
    while pending:
        node = pending.pop()
        total += 1
        pending.extend(node.children)
    return total


def find_node(forest: list[CatalogNode], uid: str) -> CatalogNode | None:
    """Return the node addressed by ``uid``, or None if there is none."""
    nodes: tuple[CatalogNode, ...] | list[CatalogNode] = forest
    node = None
    for part in uid.split("."):
        if not part.isdigit():
            return None
        index = int(part)
        if index >= len(nodes):
            return None
        node = nodes[index]
        nodes = node.children
    return node
