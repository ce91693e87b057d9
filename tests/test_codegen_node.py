from __future__ import annotations

import pytest

from curl_transpiler.codegen_node import generate_node, split_url
from curl_transpiler.jsonfmt import quote
from curl_transpiler.parser import parse_command


def test_basic_auth_renders_encoded_header():
    out = generate_node(parse_command("curl https://api.example.com/secure -u admin:secret"))
    assert out.startswith("const https = require('https');\n")
    assert '    "Authorization": "Basic YWRtaW46c2VjcmV0",' in out
    assert "port:" not in out
    assert '  path: "/secure",' in out
    assert '  method: "GET",' in out


def test_plain_body_full_output():
    out = generate_node(parse_command("curl https://x.test/items -d 'plaintext, not json'"))
    assert out == "\n".join(
        [
            "const https = require('https');",
            "",
            'const postData = "plaintext, not json";',
            "",
            "const options = {",
            '  hostname: "x.test",',
            '  path: "/items",',
            '  method: "POST",',
            "  headers: {",
            '    "Content-Length": Buffer.byteLength(postData),',
            "  },",
            "};",
            "",
            "const req = https.request(options, (res) => {",
            "  let data = '';",
            "  res.on('data', (chunk) => { data += chunk; });",
            "  res.on('end', () => { console.log(JSON.parse(data)); });",
            "});",
            "",
            "req.on('error', (e) => { console.error(e); });",
            "req.write(postData);",
            "req.end();",
        ]
    )


def test_content_length_follows_user_headers_and_precedes_auth():
    req = parse_command("curl https://x.test -H 'A: 1' -u u:p -d 'x'")
    lines = generate_node(req).splitlines()
    a = lines.index('    "A": "1",')
    length = lines.index('    "Content-Length": Buffer.byteLength(postData),')
    auth = next(i for i, line in enumerate(lines) if '"Authorization"' in line)
    assert a < length < auth


def test_json_body_uses_object_literal():
    req = parse_command("curl https://x.test --json '{\"a\":[1,2]}'")
    out = generate_node(req)
    assert 'const postData = JSON.stringify({\n  "a": [\n    1,\n    2\n  ]\n});' in out


def test_http_with_custom_port_and_query():
    out = generate_node(parse_command("curl http://localhost:3000/api?x=1&y=2"))
    assert out.startswith("const http = require('http');")
    assert "  port: 3000," in out
    assert '  path: "/api?x=1&y=2",' in out
    assert "http.request(options" in out
    assert "req.write" not in out
    assert "headers:" not in out


def test_default_ports_are_not_rendered():
    assert "port:" not in generate_node(parse_command("curl https://x.test:443/"))
    assert "port:" not in generate_node(parse_command("curl http://x.test:80/"))
    assert "  port: 80," in generate_node(parse_command("curl https://x.test:80/"))


def test_empty_path_becomes_root():
    assert '  path: "/",' in generate_node(parse_command("curl https://x.test"))
    assert '  path: "/?q=1",' in generate_node(parse_command("curl https://x.test?q=1"))


@pytest.mark.parametrize(
    "url",
    ["example.com/path", "ftp://files.example.com/a", "http://x.test:abc/", "http://[::1/"],
)
def test_unparseable_url_degrades_to_skeleton(url: str):
    out = generate_node(parse_command(f"curl {url}"))
    assert out == "\n".join(
        [
            f"// Could not fully parse the URL: {quote(url)}",
            "// Please adjust hostname, path and port below.",
            "const https = require('https');",
            "// ... (manual setup required)",
        ]
    )


def test_split_url_parts():
    parts = split_url("HTTPS://Example.COM:8443/a/b?c=d")
    assert parts is not None
    assert (parts.protocol, parts.hostname, parts.port, parts.path) == (
        "https",
        "example.com",
        8443,
        "/a/b?c=d",
    )
    assert parts.explicit_port is True


def test_fallback_keeps_url_inside_the_comment():
    out = generate_node(parse_command('curl "bad\\nconsole.log(1)"'))
    lines = out.splitlines()
    assert lines[0] == '// Could not fully parse the URL: "bad\\nconsole.log(1)"'
    assert all(
        line.startswith("//") or line == "const https = require('https');" for line in lines
    )
    assert "console.log(1)" not in lines


def test_path_and_query_are_percent_encoded():
    out = generate_node(parse_command("curl 'https://x.test/a b?q=x y'"))
    assert '  path: "/a%20b?q=x%20y",' in out


def test_existing_escapes_and_reserved_characters_are_kept():
    parts = split_url("https://x.test/caf%C3%A9/é;v=1?a=b&c=%2F&d=?e")
    assert parts is not None
    assert parts.path == "/caf%C3%A9/%C3%A9;v=1?a=b&c=%2F&d=?e"
