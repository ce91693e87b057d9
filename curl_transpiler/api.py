from __future__ import annotations

import logging
from dataclasses import dataclass

from curl_transpiler.codegen import GENERATORS, generate
from curl_transpiler.errors import ParseFailure
from curl_transpiler.lexer import tokenize
from curl_transpiler.parser import parse, parse_command
from curl_transpiler.schemas import Target

logger = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = (
    "Could not parse the cURL command. Make sure it starts with 'curl' and includes a URL."
)


@dataclass(frozen=True)
class Conversion:
    output: str
    error: str

    @property
    def ok(self) -> bool:
        return bool(self.output)


def convert(raw: str, target: Target | str = Target.JS_FETCH) -> Conversion:
    """Convert a curl command into code for one target.

    Blank input is not an error: it clears both output and message. A command
    that cannot be parsed produces the user-facing message and no output.
    """
    resolved = Target.resolve(target)
    if not raw.strip():
        return Conversion(output="", error="")
    result = parse(tokenize(raw))
    if isinstance(result, ParseFailure):
        logger.info("conversion rejected: %s", result.message)
        return Conversion(output="", error=PARSE_ERROR_MESSAGE)
    return Conversion(output=generate(result, resolved), error="")


def convert_all(raw: str) -> dict[Target, str]:
    request = parse_command(raw)
    return {target: render(request) for target, render in GENERATORS.items()}
