from __future__ import annotations

import pytest

from curl_transpiler.codegen import GENERATORS, generate
from curl_transpiler.parser import parse_command
from curl_transpiler.schemas import Target


def test_every_target_has_a_generator():
    assert set(GENERATORS) == set(Target)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("js-fetch", Target.JS_FETCH),
        ("promise-fetch", Target.JS_FETCH),
        ("Axios", Target.JS_AXIOS),
        ("object-config-client", Target.JS_AXIOS),
        ("scripting-session", Target.PYTHON_REQUESTS),
        ("python", Target.PYTHON_REQUESTS),
        ("compiled-request-builder", Target.GO),
        (" golang ", Target.GO),
        ("raw-transport", Target.NODEJS),
        ("nodejs", Target.NODEJS),
        (Target.GO, Target.GO),
    ],
)
def test_target_resolution(value, expected: Target):
    assert Target.resolve(value) is expected


def test_unknown_target_is_rejected():
    with pytest.raises(ValueError, match="unknown target 'cobol'"):
        Target.resolve("cobol")


def test_target_labels():
    assert [t.label for t in Target] == [
        "JavaScript (Fetch)",
        "JavaScript (Axios)",
        "Python (Requests)",
        "Go",
        "Node.js",
    ]


def test_generate_dispatches_by_string():
    req = parse_command("curl https://x.test")
    assert generate(req, "python-requests").startswith("import requests")
    assert generate(req, Target.GO).startswith("package main")


@pytest.mark.parametrize("target", list(Target))
def test_plain_body_is_an_opaque_string_everywhere(target: Target):
    req = parse_command("curl https://x.test -d 'plaintext, not json'")
    assert req.is_json is False
    out = generate(req, target)
    assert '"plaintext, not json"' in out
    assert "JSON.stringify" not in out
    assert "json=payload" not in out


@pytest.mark.parametrize("target", list(Target))
def test_absent_body_renders_no_body_construct(target: Target):
    out = generate(parse_command("curl -X POST https://x.test"), target)
    for marker in ("body:", "data:", 'data = "', "payload", "strings.NewReader", "postData"):
        assert marker not in out


@pytest.mark.parametrize("target", list(Target))
def test_auth_is_rendered_exactly_once(target: Target):
    out = generate(parse_command("curl https://x.test -u admin:secret"), target)
    native = ("admin" in out and "secret" in out) and "YWRtaW46c2VjcmV0" not in out
    header = "Basic YWRtaW46c2VjcmV0" in out and '"secret"' not in out
    assert native != header
    assert out.count("YWRtaW46c2VjcmV0") <= 1
