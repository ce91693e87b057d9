from __future__ import annotations

import re

_LINE_CONTINUATION = re.compile(r"\\\r?\n")
_DOUBLE_QUOTE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}
_DOUBLE_QUOTE_ENCODE = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}
# Line breaks inside single quotes would be taken for line continuations.
_DOUBLE_QUOTE_ONLY = frozenset("'\n\r")


def _normalize(raw: str) -> str:
    return _LINE_CONTINUATION.sub(" ", raw.strip())


def tokenize(raw: str) -> list[str]:
    """Split a shell-style command line into tokens.

    Only the subset of shell quoting that pasted curl commands use is honoured:
    single quotes are literal, double quotes understand backslash escapes, and a
    quote only opens a quoted token at the start of a token. An unterminated
    quote yields the partial token instead of an error.
    """
    s = _normalize(raw)
    tokens: list[str] = []
    i = 0
    n = len(s)
    while i < n:
        while i < n and s[i].isspace():
            i += 1
        if i >= n:
            break

        ch = s[i]
        buf: list[str] = []
        if ch == "'":
            i += 1
            while i < n and s[i] != "'":
                buf.append(s[i])
                i += 1
            i += 1
        elif ch == '"':
            i += 1
            while i < n and s[i] != '"':
                if s[i] == "\\" and i + 1 < n:
                    i += 1
                    buf.append(_DOUBLE_QUOTE_ESCAPES.get(s[i], s[i]))
                else:
                    buf.append(s[i])
                i += 1
            i += 1
        else:
            while i < n and not s[i].isspace():
                buf.append(s[i])
                i += 1
        tokens.append("".join(buf))
    return tokens


def _needs_quoting(token: str) -> bool:
    if not token or token[0] in {"'", '"'}:
        return True
    return any(c.isspace() for c in token)


def _quote_token(token: str) -> str:
    if not _needs_quoting(token):
        return token
    if not _DOUBLE_QUOTE_ONLY.intersection(token):
        return f"'{token}'"
    escaped = "".join(_DOUBLE_QUOTE_ENCODE.get(c, c) for c in token)
    return f'"{escaped}"'


def join_tokens(tokens: list[str]) -> str:
    """Render tokens back into a command line that ``tokenize`` splits the same way."""
    return " ".join(_quote_token(t) for t in tokens)
