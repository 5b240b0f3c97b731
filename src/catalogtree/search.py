"""Default visibility and text search over a parsed catalog."""

from __future__ import annotations

from dataclasses import dataclass, field

from catalogtree.schemas import CatalogNode


@dataclass
class SearchResult:
    """Filtered forest and the uids of the nodes that matched.

    Attributes:
        forest: Pruned copy of the input forest.
        hits: Uids (index paths in the unfiltered forest) of matching nodes,
            depth-first.
    """

    forest: list[CatalogNode]
    hits: list[str] = field(default_factory=list)


def visible_forest(forest: list[CatalogNode]) -> list[CatalogNode]:
    """Drop every hidden node together with its subtree."""
    visible = []
    for node in forest:
        if node.hidden_trigger is not None:
            continue
        visible.append(node.model_copy(update={"children": tuple(visible_forest(list(node.children)))}))
    return visible


def filter_catalog(forest: list[CatalogNode], query: str) -> SearchResult:
    """Filter the forest by a case-insensitive substring query.

    A node is kept when its display text contains the query or when one of
    its descendants is kept. Hidden nodes are dropped unless the query equals
    their trigger, in which case the whole subtree is kept and the hidden
    node counts as a hit. Nested hidden nodes with a different trigger stay
    hidden. An empty query yields the default view.
    """
    needle = query.strip().lower()
    if not needle:
        return SearchResult(forest=visible_forest(forest))

    hits: list[str] = []
    kept = _filter_level(forest, needle, prefix="", revealed=False, hits=hits)
    return SearchResult(forest=kept, hits=hits)


def _filter_level(
    nodes: list[CatalogNode] | tuple[CatalogNode, ...],
    needle: str,
    *,
    prefix: str,
    revealed: bool,
    hits: list[str],
) -> list[CatalogNode]:
    kept: list[CatalogNode] = []
    for index, node in enumerate(nodes):
        uid = f"{prefix}.{index}" if prefix else str(index)
        trigger = node.hidden_trigger
        if trigger is not None and trigger.lower() != needle:
            continue

        unlocked = trigger is not None
        self_hit = unlocked or needle in node.display_text.lower()
        if self_hit:
            hits.append(uid)

        children = _filter_level(
            node.children,
            needle,
            prefix=uid,
            revealed=revealed or unlocked,
            hits=hits,
        )
        if revealed or unlocked or self_hit or children:
            kept.append(node.model_copy(update={"children": tuple(children)}))
    return kept
