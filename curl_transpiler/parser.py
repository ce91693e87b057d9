from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from curl_transpiler.errors import CurlParseError, ParseFailure
from curl_transpiler.lexer import tokenize
from curl_transpiler.schemas import BasicAuth, NormalizedRequest, classify_content

logger = logging.getLogger(__name__)

COMMAND_KEYWORD = "curl"


@dataclass
class RequestBuilder:
    url: str = ""
    method: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None
    auth: BasicAuth | None = None

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def build(self) -> NormalizedRequest:
        method = self.method.strip() or ("POST" if self.body is not None else "GET")
        is_json, is_form = classify_content(headers=self.headers, body=self.body)
        return NormalizedRequest(
            url=self.url,
            method=method,
            headers=dict(self.headers),
            body=self.body,
            auth=self.auth,
            is_json=is_json,
            is_form_urlencoded=is_form,
        )


@dataclass(frozen=True)
class FlagHandler:
    consumes_argument: bool
    apply: Callable[[RequestBuilder, str], None]


def _set_method(b: RequestBuilder, arg: str) -> None:
    b.method = arg.upper()


def _set_header(b: RequestBuilder, arg: str) -> None:
    name, sep, value = arg.partition(":")
    if not sep:
        logger.debug("ignoring header without a colon: %r", arg)
        return
    b.set_header(name.strip(), value.strip())


def _set_body(b: RequestBuilder, arg: str) -> None:
    b.body = arg


def _set_auth(b: RequestBuilder, arg: str) -> None:
    user, _, password = arg.partition(":")
    b.auth = BasicAuth(user=user, password=password)


def _set_json(b: RequestBuilder, arg: str) -> None:
    b.body = arg
    b.set_header("Content-Type", "application/json")
    b.set_header("Accept", "application/json")


def _set_form(b: RequestBuilder, arg: str) -> None:
    # First form field wins; later ones are consumed without effect.
    if b.body is None:
        b.body = arg


def _header_setter(name: str) -> Callable[[RequestBuilder, str], None]:
    def apply(b: RequestBuilder, arg: str) -> None:
        b.set_header(name, arg)

    return apply


def _noop(b: RequestBuilder, arg: str) -> None:
    return None


def _flags(names: tuple[str, ...], handler: FlagHandler) -> dict[str, FlagHandler]:
    return {name: handler for name in names}


FLAG_TABLE: dict[str, FlagHandler] = {
    **_flags(("-X", "--request"), FlagHandler(True, _set_method)),
    **_flags(("-H", "--header"), FlagHandler(True, _set_header)),
    **_flags(
        ("-d", "--data", "--data-raw", "--data-binary", "--data-ascii"),
        FlagHandler(True, _set_body),
    ),
    **_flags(("-u", "--user"), FlagHandler(True, _set_auth)),
    **_flags(("--json",), FlagHandler(True, _set_json)),
    **_flags(("--form", "-F"), FlagHandler(True, _set_form)),
    **_flags(("-b", "--cookie"), FlagHandler(True, _header_setter("Cookie"))),
    **_flags(("-A", "--user-agent"), FlagHandler(True, _header_setter("User-Agent"))),
    **_flags(("-e", "--referer"), FlagHandler(True, _header_setter("Referer"))),
    **_flags(
        (
            "--compressed",
            "-L",
            "--location",
            "-k",
            "--insecure",
            "-s",
            "--silent",
            "-v",
            "--verbose",
            "-i",
            "--include",
        ),
        FlagHandler(False, _noop),
    ),
}


def parse(tokens: Sequence[str]) -> NormalizedRequest | ParseFailure:
    if not tokens or tokens[0].lower() != COMMAND_KEYWORD:
        return ParseFailure.NOT_A_COMMAND

    builder = RequestBuilder()
    i = 1
    while i < len(tokens):
        tok = tokens[i]
        handler = FLAG_TABLE.get(tok)
        if handler is not None:
            arg = ""
            if handler.consumes_argument:
                i += 1
                arg = tokens[i] if i < len(tokens) else ""
            handler.apply(builder, arg)
        elif not tok.startswith("-"):
            if not builder.url:
                builder.url = tok
        else:
            logger.debug("ignoring unsupported flag %r", tok)
        i += 1

    if not builder.url:
        return ParseFailure.MISSING_URL
    return builder.build()


def parse_command(raw: str) -> NormalizedRequest:
    result = parse(tokenize(raw))
    if isinstance(result, ParseFailure):
        raise CurlParseError(result)
    return result
