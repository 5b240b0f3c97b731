"""Render parsed catalogs as HTML, plain outlines, JSON or catalog source."""

from __future__ import annotations

import json

from catalogtree.config import DEFAULT_TOKEN_TYPE, INDENT_UNIT
from catalogtree.exceptions import RenderError
from catalogtree.schemas import CatalogNode
from catalogtree.tokenizer import escape_plain_token

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RenderError(
        "BeautifulSoup4 is required for HTML rendering (pip install beautifulsoup4)."
    ) from exc

OUTPUT_FORMATS: tuple[str, ...] = ("html", "outline", "json", "catalog")


def render(forest: list[CatalogNode], fmt: str) -> str:
    """Render ``forest`` in the requested output format.

    Raises:
        RenderError: If ``fmt`` is not one of ``OUTPUT_FORMATS``.
    """
    if fmt == "html":
        return render_html(forest)
    if fmt == "outline":
        return render_outline(forest)
    if fmt == "json":
        return render_json(forest)
    if fmt == "catalog":
        return format_catalog(forest)
    raise RenderError(f"Unsupported output format: {fmt!r} (expected one of {', '.join(OUTPUT_FORMATS)})")


def render_html(forest: list[CatalogNode]) -> str:
    """Render the forest as a nested ``<ul class="branch">`` list.

    Link entries become ``<a class="node code">`` elements, all other
    entries ``<div class="node code">``. Each token is a ``<span>`` whose
    class is the token type. Hidden entries carry ``data-hidden`` and
    ``data-reveal-on`` attributes so a consumer can apply its reveal rules.
    """
    soup = BeautifulSoup("", "html.parser")
    branch = soup.new_tag("ul", attrs={"class": "branch"})
    _append_items(soup, branch, forest)
    soup.append(branch)
    return str(soup)


def _append_items(soup: BeautifulSoup, container: Tag, nodes: tuple[CatalogNode, ...] | list[CatalogNode]) -> None:
    for node in nodes:
        item = soup.new_tag("li")
        if node.hidden_trigger is not None:
            item["data-hidden"] = "true"
            item["data-reveal-on"] = node.hidden_trigger

        if node.is_link:
            head = soup.new_tag("a", attrs={"class": "node code", "href": node.url})
            if node.open_in_new_context:
                head["target"] = "_blank"
                head["rel"] = "noopener"
        else:
            head = soup.new_tag("div", attrs={"class": "node code"})

        for index, token in enumerate(node.tokens):
            if index:
                head.append(" ")
            span = soup.new_tag("span", attrs={"class": token.type or DEFAULT_TOKEN_TYPE})
            span.string = token.display
            head.append(span)
        item.append(head)

        if node.children:
            children = soup.new_tag("ul")
            _append_items(soup, children, node.children)
            item.append(children)
        container.append(item)


def render_outline(forest: list[CatalogNode], indent: int = 0) -> str:
    """Render the forest as an indented plain-text outline."""
    lines: list[str] = []
    for node in forest:
        line = "  " * indent + node.display_text
        if node.url is not None:
            line += f" <{node.url}>"
        if node.hidden_trigger is not None:
            line += f" [hidden: {node.hidden_trigger}]"
        lines.append(line)
        if node.children:
            lines.append(render_outline(list(node.children), indent + 1))
    return "\n".join(lines)


def render_json(forest: list[CatalogNode]) -> str:
    """Serialize the forest to JSON using camelCase field names."""
    return json.dumps([node.model_dump(mode="json", by_alias=True) for node in forest], indent=2)


def format_catalog(forest: list[CatalogNode]) -> str:
    """Serialize the forest back to catalog source.

    Plain tokens are re-escaped and directives are only written when they
    carry information, so parsing the result yields an equal forest.
    """
    lines: list[str] = []
    _format_level(forest, 0, lines)
    return "\n".join(lines) + ("\n" if lines else "")


def _format_level(nodes: tuple[CatalogNode, ...] | list[CatalogNode], depth: int, lines: list[str]) -> None:
    for node in nodes:
        parts = [escape_plain_token(token.text) for token in node.tokens]
        types = [token.type for token in node.tokens]
        if any(kind != DEFAULT_TOKEN_TYPE for kind in types):
            parts.append(f"@t({','.join(types)})")
        if node.hidden_trigger is not None:
            parts.append(f'@hidden("{node.hidden_trigger}")')
        if node.url is not None:
            # The quoted form takes its body literally and cannot hold a quote.
            if node.open_in_new_context and '"' not in node.url:
                parts.append(f'@u("{node.url}")')
            else:
                parts.append(f"@u({json.dumps([node.url, node.open_in_new_context], ensure_ascii=False)})")
        lines.append(" " * (INDENT_UNIT * depth) + " ".join(parts))
        _format_level(node.children, depth + 1, lines)
