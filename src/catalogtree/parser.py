"""Parse catalog source text into a forest of catalog nodes."""

from __future__ import annotations

import re
from typing import Protocol

from catalogtree.config import DEFAULT_TOKEN_TYPE
from catalogtree.directives import extract_directives
from catalogtree.schemas import CatalogNode, CatalogToken, Diagnostic, DiagnosticKind, ParseResult
from catalogtree.tokenizer import tokenize
from catalogtree.tree_builder import TreeBuilder, indentation_depth
from catalogtree.utils.logging_config import get_logger

logger = get_logger(__name__)

_LINE_BREAK_RE = re.compile(r"\r?\n")


class DiagnosticSink(Protocol):
    """Anything diagnostics can be appended to, such as a list."""

    def append(self, item: Diagnostic, /) -> None: ...


def parse_catalog(
    source_text: str,
    *,
    diagnostics: DiagnosticSink | None = None,
) -> list[CatalogNode]:
    """Parse catalog source into its root nodes.

    Blank lines are skipped. Every other line becomes one node whose depth
    is taken from its leading indentation. Malformed input never raises;
    recoverable problems are logged and, when ``diagnostics`` is given,
    appended to it.

    Args:
        source_text: The complete catalog source.
        diagnostics: Optional append-only sink for :class:`Diagnostic` records.

    Returns:
        The root nodes in source order.
    """
    builder = TreeBuilder()

    for line_number, raw_line in enumerate(_LINE_BREAK_RE.split(source_text), start=1):
        if not raw_line.strip():
            continue

        depth = indentation_depth(raw_line)
        extracted = extract_directives(raw_line.strip())
        content = extracted.content.strip()
        if not content:
            _report(
                diagnostics,
                Diagnostic(
                    kind=DiagnosticKind.DIRECTIVE_ONLY_LINE,
                    line_number=line_number,
                    message="line has directives but no content; skipped",
                    line=raw_line,
                ),
            )
            continue

        raw_tokens = tokenize(content)
        types = _resolve_types(extracted.types, len(raw_tokens))
        if extracted.types is not None and len(extracted.types) != len(raw_tokens):
            _report(
                diagnostics,
                Diagnostic(
                    kind=DiagnosticKind.TYPE_COUNT_MISMATCH,
                    line_number=line_number,
                    message=f"@t count ({len(extracted.types)}) != tokens ({len(raw_tokens)})",
                    line=raw_line,
                ),
            )

        builder.add(
            depth,
            tokens=tuple(CatalogToken(text=text, type=kind) for text, kind in zip(raw_tokens, types)),
            url=extracted.url,
            open_in_new_context=extracted.open_in_new_context,
            hidden_trigger=extracted.hidden_trigger,
        )

    return builder.build()


def parse_catalog_with_diagnostics(source_text: str) -> ParseResult:
    """Parse catalog source and collect its diagnostics."""
    diagnostics: list[Diagnostic] = []
    forest = parse_catalog(source_text, diagnostics=diagnostics)
    return ParseResult(forest=forest, diagnostics=diagnostics)


def _resolve_types(types: tuple[str, ...] | None, count: int) -> list[str]:
    """Pad or truncate ``types`` to ``count`` entries."""
    resolved = [kind or DEFAULT_TOKEN_TYPE for kind in (types or ())[:count]]
    resolved.extend([DEFAULT_TOKEN_TYPE] * (count - len(resolved)))
    return resolved


def _report(diagnostics: DiagnosticSink | None, diagnostic: Diagnostic) -> None:
    logger.warning(
        "%s on line %d: %s",
        diagnostic.kind.value,
        diagnostic.line_number,
        diagnostic.message,
        extra={"source_line": diagnostic.line},
    )
    if diagnostics is not None:
        diagnostics.append(diagnostic)
