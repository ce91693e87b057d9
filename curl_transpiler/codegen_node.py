from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import quote as url_quote, urlsplit

from curl_transpiler.jsonfmt import JS_STYLE, decode_json_body, quote, render_literal
from curl_transpiler.schemas import NormalizedRequest

logger = logging.getLogger(__name__)

INDENT = "  "
DEFAULT_PORTS = {"https": 443, "http": 80}
# Characters a browser URL parser leaves unescaped in a path or query.
PATH_SAFE = "/%:@!$&'()*+,;="
QUERY_SAFE = PATH_SAFE + "?"


@dataclass(frozen=True)
class UrlParts:
    protocol: str
    hostname: str
    port: int
    path: str

    @property
    def explicit_port(self) -> bool:
        return self.port != DEFAULT_PORTS[self.protocol]


def split_url(url: str) -> UrlParts | None:
    """Split a URL into the pieces ``http.request`` options need.

    Returns ``None`` when the URL has no host, an invalid port, or a scheme that
    node has no core transport module for.
    """
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError:
        return None
    protocol = parts.scheme.lower()
    if protocol not in DEFAULT_PORTS or not parts.hostname:
        return None
    path = url_quote(parts.path or "/", safe=PATH_SAFE)
    if parts.query:
        path += "?" + url_quote(parts.query, safe=QUERY_SAFE)
    return UrlParts(
        protocol=protocol,
        hostname=parts.hostname,
        port=port if port is not None else DEFAULT_PORTS[protocol],
        path=path,
    )


def _post_data_expr(req: NormalizedRequest, body: str) -> str:
    if req.is_json:
        decoded = decode_json_body(body)
        if decoded is not None:
            return f"JSON.stringify({render_literal(decoded.value, style=JS_STYLE)})"
    return quote(body)


def _fallback(url: str) -> str:
    return "\n".join(
        [
            f"// Could not fully parse the URL: {quote(url)}",
            "// Please adjust hostname, path and port below.",
            "const https = require('https');",
            "// ... (manual setup required)",
        ]
    )


def generate_node(req: NormalizedRequest) -> str:
    parts = split_url(req.url)
    if parts is None:
        logger.debug("cannot split URL %r, emitting fallback skeleton", req.url)
        return _fallback(req.url)

    module = parts.protocol
    lines = [f"const {module} = require('{module}');", ""]
    if req.body is not None:
        lines.append(f"const postData = {_post_data_expr(req, req.body)};")
        lines.append("")

    lines.append("const options = {")
    lines.append(f"{INDENT}hostname: {quote(parts.hostname)},")
    if parts.explicit_port:
        lines.append(f"{INDENT}port: {parts.port},")
    lines.append(f"{INDENT}path: {quote(parts.path)},")
    lines.append(f"{INDENT}method: {quote(req.method)},")

    # Values are JS expressions, already quoted where they are string literals.
    header_entries = [(k, quote(v)) for k, v in req.headers.items()]
    if req.body is not None:
        header_entries.append(("Content-Length", "Buffer.byteLength(postData)"))
    if req.auth is not None:
        header_entries.append(("Authorization", quote(req.auth.authorization_header())))
    if header_entries:
        lines.append(f"{INDENT}headers: {{")
        for k, expr in header_entries:
            lines.append(f"{INDENT * 2}{quote(k)}: {expr},")
        lines.append(f"{INDENT}}},")
    lines.append("};")
    lines.append("")

    lines.extend(
        [
            f"const req = {module}.request(options, (res) => {{",
            f"{INDENT}let data = '';",
            f"{INDENT}res.on('data', (chunk) => {{ data += chunk; }});",
            f"{INDENT}res.on('end', () => {{ console.log(JSON.parse(data)); }});",
            "});",
            "",
            "req.on('error', (e) => { console.error(e); });",
        ]
    )
    if req.body is not None:
        lines.append("req.write(postData);")
    lines.append("req.end();")
    return "\n".join(lines)
