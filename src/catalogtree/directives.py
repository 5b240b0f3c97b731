"""Extract trailing ``@name(args)`` directives from catalog lines."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Union

_QUOTED_BODY_RE = re.compile(r'^\s*"([^"]*)"\s*$')


@dataclass(frozen=True)
class TypeListDirective:
    """``@t(kw, id, ...)``: per-token display types."""

    types: tuple[str, ...]


@dataclass(frozen=True)
class HiddenDirective:
    """``@hidden("trigger")``: hide the entry until ``trigger`` is given."""

    trigger: str


@dataclass(frozen=True)
class LinkDirective:
    """``@u("path")`` or ``@u(["path", false])``: link target."""

    url: str
    open_in_new_context: bool = True


@dataclass(frozen=True)
class UnknownDirective:
    """A directive with an unrecognized name. It is stripped and otherwise ignored."""

    name: str
    body: str


Directive = Union[TypeListDirective, HiddenDirective, LinkDirective, UnknownDirective]


@dataclass(frozen=True)
class DirectiveSpan:
    """Location of one ``@name(body)`` occurrence in a line."""

    name: str
    body: str
    start: int
    end: int


@dataclass
class ExtractedLine:
    """A line with its directives removed and resolved.

    Attributes:
        content: Text before the earliest directive, right-trimmed.
        directives: Resolved directives in source order. Malformed
            ``@hidden`` and ``@u`` bodies are absent.
        types: Token types from the last ``@t`` directive, or None.
        hidden_trigger: Trigger from the last valid ``@hidden``, or None.
        url: Target from the last valid ``@u``, or None.
        open_in_new_context: New-context flag belonging to ``url``.
    """

    content: str
    directives: list[Directive] = field(default_factory=list)
    types: tuple[str, ...] | None = None
    hidden_trigger: str | None = None
    url: str | None = None
    open_in_new_context: bool = True


def scan_directives(line: str) -> list[DirectiveSpan]:
    """Find every ``@name(body)`` occurrence, left to right.

    ``name`` is one or more ASCII letters and ``body`` contains no
    parenthesis. An ``@`` escaped with a backslash never starts a directive.
    Scanning resumes after each match, so occurrences never overlap.
    """
    spans: list[DirectiveSpan] = []
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch != "@":
            i += 1
            continue

        span = _match_directive_at(line, i)
        if span is None:
            i += 1
            continue
        spans.append(span)
        i = span.end
    return spans


def _match_directive_at(line: str, start: int) -> DirectiveSpan | None:
    n = len(line)
    pos = start + 1
    while pos < n and line[pos].isascii() and line[pos].isalpha():
        pos += 1
    if pos == start + 1 or pos >= n or line[pos] != "(":
        return None
    name = line[start + 1 : pos]

    body_start = pos + 1
    close = body_start
    while close < n and line[close] not in "()":
        close += 1
    if close >= n or line[close] != ")":
        return None
    return DirectiveSpan(name=name, body=line[body_start:close], start=start, end=close + 1)


def extract_directives(line: str) -> ExtractedLine:
    """Strip trailing directives from ``line`` and resolve their effects.

    Everything from the earliest directive onwards is removed, so directives
    are expected to form a trailing group. Unknown names are removed without
    any further effect. When a kind repeats, the last occurrence wins.
    """
    spans = scan_directives(line)
    if not spans:
        return ExtractedLine(content=line.rstrip())

    extracted = ExtractedLine(content=line[: spans[0].start].rstrip())
    for span in spans:
        directive = parse_directive(span.name, span.body)
        if directive is None:
            continue
        extracted.directives.append(directive)
        if isinstance(directive, TypeListDirective):
            extracted.types = directive.types
        elif isinstance(directive, HiddenDirective):
            extracted.hidden_trigger = directive.trigger or None
        elif isinstance(directive, LinkDirective):
            extracted.url = directive.url or None
            extracted.open_in_new_context = directive.open_in_new_context
    return extracted


def parse_directive(name: str, body: str) -> Directive | None:
    """Resolve one directive. Returns None for a malformed known directive."""
    lowered = name.lower()
    body = body.strip()
    if lowered == "t":
        return _parse_type_list(body)
    if lowered == "hidden":
        return _parse_hidden(body)
    if lowered == "u":
        return _parse_link(body)
    return UnknownDirective(name=name, body=body)


def _parse_type_list(body: str) -> TypeListDirective:
    types = []
    for part in body.split(","):
        part = part.strip()
        if not part:
            continue
        types.append(part.removeprefix('"').removesuffix('"'))
    return TypeListDirective(types=tuple(types))


def _parse_hidden(body: str) -> HiddenDirective | None:
    match = _QUOTED_BODY_RE.match(body)
    if not match:
        return None
    return HiddenDirective(trigger=match.group(1))


def _parse_link(body: str) -> LinkDirective | None:
    if not body.startswith("["):
        match = _QUOTED_BODY_RE.match(body)
        if match:
            return LinkDirective(url=match.group(1))
        # Bare argument list: @u("path", false)
        body = f"[{body}]"

    try:
        value = json.loads(body)
    except ValueError:
        return None
    if not isinstance(value, list) or not value or not isinstance(value[0], str):
        return None
    flag = value[1] if len(value) >= 2 else True
    return LinkDirective(url=value[0], open_in_new_context=flag if isinstance(flag, bool) else True)
