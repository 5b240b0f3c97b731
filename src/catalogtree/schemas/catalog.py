"""Catalog tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from catalogtree.config import DEFAULT_TOKEN_TYPE
from catalogtree.tokenizer import decode_string_token


class CatalogToken(BaseModel):
    """One content token of a catalog entry.

    Attributes:
        text: Raw token text. Quoted string literals keep their quotes and
            escapes; plain tokens have their tokenizer escapes resolved.
        type: Free-form display class such as "kw" or "id".
    """

    model_config = ConfigDict(frozen=True)

    text: str
    type: str = DEFAULT_TOKEN_TYPE

    @property
    def display(self) -> str:
        """Token text as it should be shown to a reader."""
        return decode_string_token(self.text)


class CatalogNode(BaseModel):
    """A single catalog entry and its nested entries.

    Attributes:
        tokens: Content tokens in source order, never empty.
        url: Link target, or None when the entry is not a link.
        open_in_new_context: Whether the link should open in a new context.
            Only meaningful when ``url`` is set.
        hidden_trigger: When set, the entry and its subtree stay hidden until
            a consumer supplies this trigger.
        children: Nested entries in source order.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    tokens: tuple[CatalogToken, ...] = Field(..., min_length=1)
    url: str | None = None
    open_in_new_context: bool = Field(default=True, alias="openInNewContext")
    hidden_trigger: str | None = Field(default=None, alias="hiddenTrigger")
    children: tuple["CatalogNode", ...] = ()

    @property
    def display_text(self) -> str:
        """Decoded token texts joined by single spaces."""
        return " ".join(token.display for token in self.tokens)

    @property
    def is_link(self) -> bool:
        return self.url is not None
