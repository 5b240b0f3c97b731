"""Assemble parsed lines into a forest using their indentation depth."""

from __future__ import annotations

from dataclasses import dataclass, field

from catalogtree.config import INDENT_UNIT
from catalogtree.schemas import CatalogNode, CatalogToken


def indentation_depth(raw_line: str) -> int:
    """Return the nesting depth of a physical line.

    Every leading whitespace character counts as one column, tabs included,
    and depth is measured in units of ``INDENT_UNIT`` columns.
    """
    leading = len(raw_line) - len(raw_line.lstrip())
    return leading // INDENT_UNIT


@dataclass
class _Frame:
    """A node that may still receive children.

    Children are frozen before they are appended, so freezing a frame never
    recurses.
    """

    depth: int
    tokens: tuple[CatalogToken, ...] = ()
    url: str | None = None
    open_in_new_context: bool = True
    hidden_trigger: str | None = None
    children: list[CatalogNode] = field(default_factory=list)

    def freeze(self) -> CatalogNode:
        return CatalogNode(
            tokens=self.tokens,
            url=self.url,
            open_in_new_context=self.open_in_new_context,
            hidden_trigger=self.hidden_trigger,
            children=tuple(self.children),
        )


class TreeBuilder:
    """Build a forest from ``(depth, node)`` pairs fed in source order.

    A stack of open frames, seeded with a virtual root at depth -1, holds the
    path from the root to the last node added. A line that is indented less
    than its predecessor is attached to the nearest open frame with a smaller
    depth; an over-indented line becomes a child of the last node.
    """

    def __init__(self) -> None:
        self._root = _Frame(depth=-1)
        self._stack: list[_Frame] = [self._root]

    def add(
        self,
        depth: int,
        *,
        tokens: tuple[CatalogToken, ...] | list[CatalogToken],
        url: str | None = None,
        open_in_new_context: bool = True,
        hidden_trigger: str | None = None,
    ) -> None:
        """Attach a new node at ``depth``."""
        while self._stack[-1].depth >= depth:
            self._close_top()

        self._stack.append(
            _Frame(
                depth=depth,
                tokens=tuple(tokens),
                url=url,
                open_in_new_context=open_in_new_context,
                hidden_trigger=hidden_trigger,
            )
        )

    def _close_top(self) -> None:
        """Freeze the innermost open frame and hand it to its parent."""
        frame = self._stack.pop()
        self._stack[-1].children.append(frame.freeze())

    def add_node(self, depth: int, node: CatalogNode) -> None:
        """Attach an already built node, dropping any children it carries."""
        self.add(
            depth,
            tokens=node.tokens,
            url=node.url,
            open_in_new_context=node.open_in_new_context,
            hidden_trigger=node.hidden_trigger,
        )

    def build(self) -> list[CatalogNode]:
        """Return the finished forest as immutable nodes.

        Closes every open frame, so call it once after the last ``add``.
        """
        while len(self._stack) > 1:
            self._close_top()
        return list(self._root.children)
