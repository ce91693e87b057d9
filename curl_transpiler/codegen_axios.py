from __future__ import annotations

from curl_transpiler.jsonfmt import JS_STYLE, decode_json_body, quote, render_literal
from curl_transpiler.schemas import NormalizedRequest

INDENT = "  "


def _data_expr(req: NormalizedRequest, body: str) -> str:
    if req.is_json:
        decoded = decode_json_body(body)
        if decoded is not None:
            # axios serializes plain objects as JSON on its own.
            return render_literal(decoded.value, style=JS_STYLE, level=1)
    return quote(body)


def generate_js_axios(req: NormalizedRequest) -> str:
    config = [
        f"{INDENT}method: {quote(req.method.lower())},",
        f"{INDENT}url: {quote(req.url)},",
    ]
    if req.auth is not None:
        config.append(f"{INDENT}auth: {{")
        config.append(f"{INDENT * 2}username: {quote(req.auth.user)},")
        config.append(f"{INDENT * 2}password: {quote(req.auth.password)},")
        config.append(f"{INDENT}}},")
    if req.headers:
        config.append(f"{INDENT}headers: {{")
        for k, v in req.headers.items():
            config.append(f"{INDENT * 2}{quote(k)}: {quote(v)},")
        config.append(f"{INDENT}}},")
    if req.body is not None:
        config.append(f"{INDENT}data: {_data_expr(req, req.body)},")

    lines = ["import axios from 'axios';", "", "const response = await axios({"]
    lines.extend(config)
    lines.append("});")
    lines.append("console.log(response.data);")
    return "\n".join(lines)
