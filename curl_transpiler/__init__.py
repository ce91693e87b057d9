from __future__ import annotations

from curl_transpiler.api import PARSE_ERROR_MESSAGE, Conversion, convert, convert_all
from curl_transpiler.codegen import GENERATORS, generate
from curl_transpiler.errors import CurlParseError, ParseFailure
from curl_transpiler.lexer import join_tokens, tokenize
from curl_transpiler.parser import FLAG_TABLE, parse, parse_command
from curl_transpiler.samples import get_sample, load_samples
from curl_transpiler.schemas import BasicAuth, NormalizedRequest, Target, classify_content

__all__ = [
    "__version__",
    # Lexing / parsing
    "tokenize",
    "join_tokens",
    "parse",
    "parse_command",
    "FLAG_TABLE",
    # Schemas
    "NormalizedRequest",
    "BasicAuth",
    "Target",
    "classify_content",
    # Errors
    "ParseFailure",
    "CurlParseError",
    # Code generation
    "GENERATORS",
    "generate",
    # Facade
    "Conversion",
    "convert",
    "convert_all",
    "PARSE_ERROR_MESSAGE",
    # Samples
    "load_samples",
    "get_sample",
]

__version__ = "0.1.0"
