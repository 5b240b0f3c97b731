"""Pydantic models for the catalog API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalogtree.render import OUTPUT_FORMATS
from catalogtree.schemas import CatalogNode, Diagnostic


class ParseRequest(BaseModel):
    """Request model for the /api/parse endpoint.

    Attributes
    ----------
    source : str
        Catalog source text to parse.
    query : str
        Optional search query. When set, the returned forest is filtered.

    """

    source: str = Field(..., description="Catalog source text")
    query: str = Field(default="", description="Optional search query")

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Strip surrounding whitespace from ``query``."""
        return v.strip()


class ParseResponse(BaseModel):
    """Response model for the /api/parse endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    forest: list[CatalogNode]
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    node_count: int = Field(..., alias="nodeCount")
    hits: list[str] = Field(default_factory=list)


class RenderRequest(BaseModel):
    """Request model for the /api/render endpoint."""

    source: str = Field(..., description="Catalog source text")
    format: str = Field(default="html", description=f"One of: {', '.join(OUTPUT_FORMATS)}")


class RenderResponse(BaseModel):
    """Response model for the /api/render endpoint."""

    format: str
    content: str
