"""Parse diagnostics and result models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from catalogtree.schemas.catalog import CatalogNode


class DiagnosticKind(str, Enum):
    """Kinds of non-fatal problems reported while parsing."""

    TYPE_COUNT_MISMATCH = "type-count-mismatch"
    DIRECTIVE_ONLY_LINE = "directive-only-line"


class Diagnostic(BaseModel):
    """A non-fatal problem found on one source line."""

    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    line_number: int = Field(..., ge=1)
    message: str
    line: str


class ParseResult(BaseModel):
    """Parsed forest together with the diagnostics collected for it."""

    model_config = ConfigDict(frozen=True)

    forest: list[CatalogNode] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
