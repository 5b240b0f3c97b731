"""Shared schemas for catalogtree."""

from catalogtree.schemas.catalog import CatalogNode, CatalogToken
from catalogtree.schemas.diagnostics import Diagnostic, DiagnosticKind, ParseResult

__all__ = ["CatalogNode", "CatalogToken", "Diagnostic", "DiagnosticKind", "ParseResult"]
