from __future__ import annotations

import pytest

from curl_transpiler.api import PARSE_ERROR_MESSAGE, Conversion, convert, convert_all
from curl_transpiler.errors import CurlParseError, ParseFailure
from curl_transpiler.schemas import Target


def test_blank_input_clears_output_without_error():
    assert convert("   \n", Target.GO) == Conversion(output="", error="")
    assert convert("", Target.GO).ok is False


def test_unparseable_input_reports_fixed_message():
    for raw in ("not-a-curl-command", "curl", "curl -v -s"):
        result = convert(raw, Target.JS_FETCH)
        assert result.output == ""
        assert result.error == PARSE_ERROR_MESSAGE


def test_successful_conversion():
    result = convert("curl https://api.example.com/users", "python")
    assert result.ok
    assert result.error == ""
    assert "requests.get(url)" in result.output


def test_convert_defaults_to_fetch():
    assert convert("curl https://x.test").output.startswith("const response = await fetch(")


def test_convert_all_renders_every_target_from_one_parse():
    rendered = convert_all("curl https://x.test -d 'a=1'")
    assert list(rendered) == list(Target)
    assert rendered[Target.GO].startswith("package main")
    assert rendered[Target.NODEJS].startswith("const https = require('https');")


def test_convert_all_raises_on_failure():
    with pytest.raises(CurlParseError) as exc:
        convert_all("curl")
    assert exc.value.failure is ParseFailure.MISSING_URL
