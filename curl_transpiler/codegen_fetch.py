from __future__ import annotations

from curl_transpiler.jsonfmt import JS_STYLE, decode_json_body, quote, render_literal
from curl_transpiler.schemas import NormalizedRequest

INDENT = "  "


def _body_expr(req: NormalizedRequest, body: str) -> str:
    if req.is_json:
        decoded = decode_json_body(body)
        if decoded is not None:
            literal = render_literal(decoded.value, style=JS_STYLE, level=1)
            return f"JSON.stringify({literal})"
    return quote(body)


def generate_js_fetch(req: NormalizedRequest) -> str:
    options: list[str] = []
    if req.method != "GET":
        options.append(f"{INDENT}method: {quote(req.method)},")

    header_entries = list(req.headers.items())
    if req.auth is not None:
        header_entries.append(("Authorization", req.auth.authorization_header()))
    if header_entries:
        options.append(f"{INDENT}headers: {{")
        for k, v in header_entries:
            options.append(f"{INDENT * 2}{quote(k)}: {quote(v)},")
        options.append(f"{INDENT}}},")

    if req.body is not None:
        options.append(f"{INDENT}body: {_body_expr(req, req.body)},")

    lines = [f"const response = await fetch({quote(req.url)}, {{"]
    lines.extend(options)
    lines.append("});")
    lines.append("const data = await response.json();")
    lines.append("console.log(data);")
    return "\n".join(lines)
