from __future__ import annotations

from curl_transpiler.jsonfmt import decode_json_body, pretty_json, quote
from curl_transpiler.schemas import NormalizedRequest


def _go_string(text: str) -> str:
    # Raw strings keep pretty-printed JSON readable; they cannot hold backticks or CR.
    if "`" not in text and "\r" not in text:
        return f"`{text}`"
    return quote(text)


def _body_literal(req: NormalizedRequest, body: str) -> str:
    if req.is_json:
        decoded = decode_json_body(body)
        if decoded is not None:
            return _go_string(pretty_json(decoded.value))
    return quote(body)


def generate_go(req: NormalizedRequest) -> str:
    imports = ['"fmt"', '"io"', '"net/http"']
    if req.body is not None:
        imports.append('"strings"')

    lines = ["package main", "", "import ("]
    lines.extend(f"\t{imp}" for imp in imports)
    lines.extend([")", "", "func main() {", f"\turl := {quote(req.url)}", ""])

    if req.body is not None:
        lines.append(f"\tbody := strings.NewReader({_body_literal(req, req.body)})")
        lines.append(f"\treq, err := http.NewRequest({quote(req.method)}, url, body)")
    else:
        lines.append(f"\treq, err := http.NewRequest({quote(req.method)}, url, nil)")
    lines.extend(["\tif err != nil {", "\t\tpanic(err)", "\t}", ""])

    for k, v in req.headers.items():
        lines.append(f"\treq.Header.Set({quote(k)}, {quote(v)})")
    if req.auth is not None:
        lines.append(f"\treq.SetBasicAuth({quote(req.auth.user)}, {quote(req.auth.password)})")
    if req.headers or req.auth is not None:
        lines.append("")

    lines.extend(
        [
            "\tclient := &http.Client{}",
            "\tresp, err := client.Do(req)",
            "\tif err != nil {",
            "\t\tpanic(err)",
            "\t}",
            "\tdefer resp.Body.Close()",
            "",
            "\trespBody, err := io.ReadAll(resp.Body)",
            "\tif err != nil {",
            "\t\tpanic(err)",
            "\t}",
            "\tfmt.Println(string(respBody))",
            "}",
        ]
    )
    return "\n".join(lines)
