from __future__ import annotations

from curl_transpiler.jsonfmt import PYTHON_STYLE, decode_json_body, quote, render_literal
from curl_transpiler.schemas import NormalizedRequest

INDENT = "    "

# Verbs that have a module-level helper in requests.
_VERB_HELPERS = {"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"}


def generate_python_requests(req: NormalizedRequest) -> str:
    lines = ["import requests", ""]
    kwargs: list[str] = []

    if req.headers:
        lines.append("headers = {")
        for k, v in req.headers.items():
            lines.append(f"{INDENT}{quote(k)}: {quote(v)},")
        lines.append("}")
        lines.append("")
        kwargs.append("headers=headers")

    if req.auth is not None:
        kwargs.append(f"auth=({quote(req.auth.user)}, {quote(req.auth.password)})")

    if req.body is not None:
        decoded = decode_json_body(req.body) if req.is_json else None
        if decoded is not None:
            literal = render_literal(decoded.value, style=PYTHON_STYLE, indent=len(INDENT))
            lines.append(f"payload = {literal}")
            kwargs.append("json=payload")
        else:
            lines.append(f"data = {quote(req.body)}")
            kwargs.append("data=data")
        lines.append("")

    lines.append(f"url = {quote(req.url)}")
    lines.append("")

    if req.method in _VERB_HELPERS:
        args = ", ".join(["url", *kwargs])
        lines.append(f"response = requests.{req.method.lower()}({args})")
    else:
        args = ", ".join([quote(req.method), "url", *kwargs])
        lines.append(f"response = requests.request({args})")
    lines.append("print(response.json())")
    return "\n".join(lines)
