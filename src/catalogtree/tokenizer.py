"""Split catalog content lines into raw tokens and decode string literals."""

from __future__ import annotations

_QUOTE = '"'
_ESCAPE = "\\"
_SEPARATORS = frozenset(" \t")
# Characters that an escape outside a string turns into plain token text.
_LITERAL_ESCAPES = frozenset(" \t@\\")


def tokenize(line: str) -> list[str]:
    """Split one content line into raw tokens.

    Tokens are separated by runs of spaces or tabs. A double quote starts a
    string literal that runs to the next unescaped quote (or the end of the
    line) and is kept verbatim, quotes and escapes included. Outside a
    literal, a backslash escapes space, tab, ``@`` and backslash; any other
    escape is kept as written.

    Args:
        line: Content with indentation and directives already removed.

    Returns:
        The raw tokens in source order. Empty tokens are never produced.
    """
    tokens: list[str] = []
    buf: list[str] = []
    in_string = False
    i = 0
    n = len(line)

    def flush() -> None:
        if buf:
            tokens.append("".join(buf))
            buf.clear()

    while i < n:
        ch = line[i]

        if in_string:
            if ch == _ESCAPE and i + 1 < n:
                buf.append(line[i : i + 2])
                i += 2
                continue
            buf.append(ch)
            if ch == _QUOTE:
                in_string = False
            i += 1
            continue

        if ch == _QUOTE:
            flush()
            buf.append(ch)
            in_string = True
            i += 1
            continue

        if ch == _ESCAPE:
            if i + 1 >= n:
                buf.append(ch)
                i += 1
            elif line[i + 1] in _LITERAL_ESCAPES:
                buf.append(line[i + 1])
                i += 2
            else:
                buf.append(line[i : i + 2])
                i += 2
            continue

        if ch in _SEPARATORS:
            flush()
            i += 1
            continue

        buf.append(ch)
        i += 1

    flush()
    return tokens


def is_string_literal(token: str) -> bool:
    """Return True when ``token`` is a complete quote-delimited literal."""
    return len(token) >= 2 and token[0] == _QUOTE and token[-1] == _QUOTE


def decode_string_token(token: str) -> str:
    """Return the display form of a raw token.

    Quote-delimited tokens lose their delimiters and have ``\\\\`` collapsed
    to a single backslash. Every other escape is kept as written. Tokens that
    are not quote-delimited are returned unchanged.
    """
    if not is_string_literal(token):
        return token

    body = token[1:-1]
    out: list[str] = []
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch == _ESCAPE and i + 1 < n:
            nxt = body[i + 1]
            out.append(nxt if nxt == _ESCAPE else ch + nxt)
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def escape_plain_token(token: str) -> str:
    """Escape a plain token so that :func:`tokenize` reads it back unchanged.

    Quoted literals are returned verbatim.
    """
    if token.startswith(_QUOTE):
        return token
    out: list[str] = []
    i = 0
    n = len(token)
    while i < n:
        ch = token[i]
        # A kept ``\"`` escape must stay as written or the quote would open
        # a literal.
        if ch == _ESCAPE and i + 1 < n and token[i + 1] == _QUOTE:
            out.append(token[i : i + 2])
            i += 2
            continue
        out.append(_ESCAPE + ch if ch in _LITERAL_ESCAPES else ch)
        i += 1
    return "".join(out)
