"""catalogtree: parse indentation-based catalog source into a tree of entries."""

from catalogtree.directives import extract_directives
from catalogtree.exceptions import (
    CatalogError,
    CatalogNotFoundError,
    FetchError,
    RenderError,
)
from catalogtree.loader import load_catalog, load_catalog_text
from catalogtree.parser import parse_catalog, parse_catalog_with_diagnostics
from catalogtree.render import format_catalog, render, render_html, render_outline
from catalogtree.schemas import CatalogNode, CatalogToken, Diagnostic, DiagnosticKind, ParseResult
from catalogtree.search import SearchResult, filter_catalog, visible_forest
from catalogtree.tokenizer import decode_string_token, tokenize
from catalogtree.tree import count_nodes, find_node, iter_nodes
from catalogtree.tree_builder import TreeBuilder

__all__ = [
    "CatalogError",
    "CatalogNode",
    "CatalogNotFoundError",
    "CatalogToken",
    "Diagnostic",
    "DiagnosticKind",
    "FetchError",
    "ParseResult",
    "RenderError",
    "SearchResult",
    "TreeBuilder",
    "count_nodes",
    "decode_string_token",
    "extract_directives",
    "filter_catalog",
    "find_node",
    "format_catalog",
    "iter_nodes",
    "load_catalog",
    "load_catalog_text",
    "parse_catalog",
    "parse_catalog_with_diagnostics",
    "render",
    "render_html",
    "render_outline",
    "tokenize",
    "visible_forest",
]
