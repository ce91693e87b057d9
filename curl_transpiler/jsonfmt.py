from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2


@dataclass(frozen=True)
class DecodedJson:
    value: Any


@dataclass(frozen=True)
class LiteralStyle:
    null: str
    true: str
    false: str


JS_STYLE = LiteralStyle(null="null", true="true", false="false")
PYTHON_STYLE = LiteralStyle(null="None", true="True", false="False")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    # 1e400 overflows to inf, which no target can spell as a literal.
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def decode_json_body(body: str | None) -> DecodedJson | None:
    """Decode a request body that looks like JSON.

    Returns ``None`` when the body is absent or does not decode; callers then
    render the body as an opaque string instead.
    """
    if body is None:
        return None
    try:
        value = json.loads(body, parse_float=_finite_float, parse_constant=_reject_constant)
    except ValueError as e:
        logger.debug("body is not valid JSON, rendering it as a string: %s", e)
        return None
    return DecodedJson(value=value)


def quote(text: str) -> str:
    # JSON string syntax is also a valid string literal in JS, Python and Go.
    # U+2028/U+2029 end a line in JS, so they are escaped too.
    return (
        json.dumps(text, ensure_ascii=False)
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def pretty_json(value: Any, *, indent: int = DEFAULT_INDENT) -> str:
    return json.dumps(value, indent=indent, ensure_ascii=False)


def render_literal(
    value: Any,
    *,
    style: LiteralStyle,
    indent: int = DEFAULT_INDENT,
    level: int = 0,
) -> str:
    """Render a decoded JSON tree as a nested map/list literal.

    ``level`` is the indentation depth of the line the literal starts on, so
    the closing bracket lines up with it when embedded in generated code.
    """
    if value is None:
        return style.null
    if value is True:
        return style.true
    if value is False:
        return style.false
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, (int, float)):
        return json.dumps(value)

    inner = " " * (indent * (level + 1))
    outer = " " * (indent * level)
    if isinstance(value, dict):
        if not value:
            return "{}"
        items = [
            f"{inner}{quote(str(k))}: "
            f"{render_literal(v, style=style, indent=indent, level=level + 1)}"
            for k, v in value.items()
        ]
        return "{\n" + ",\n".join(items) + "\n" + outer + "}"
    if isinstance(value, list):
        if not value:
            return "[]"
        items = [
            f"{inner}{render_literal(v, style=style, indent=indent, level=level + 1)}"
            for v in value
        ]
        return "[\n" + ",\n".join(items) + "\n" + outer + "]"
    raise TypeError(f"unsupported JSON value: {type(value).__name__}")
