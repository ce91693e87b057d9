from __future__ import annotations

import logging
from collections.abc import Callable

from curl_transpiler.codegen_axios import generate_js_axios
from curl_transpiler.codegen_fetch import generate_js_fetch
from curl_transpiler.codegen_go import generate_go
from curl_transpiler.codegen_node import generate_node
from curl_transpiler.codegen_requests import generate_python_requests
from curl_transpiler.schemas import NormalizedRequest, Target

logger = logging.getLogger(__name__)

Generator = Callable[[NormalizedRequest], str]

GENERATORS: dict[Target, Generator] = {
    Target.JS_FETCH: generate_js_fetch,
    Target.JS_AXIOS: generate_js_axios,
    Target.PYTHON_REQUESTS: generate_python_requests,
    Target.GO: generate_go,
    Target.NODEJS: generate_node,
}


def generate(request: NormalizedRequest, target: Target | str) -> str:
    resolved = Target.resolve(target)
    logger.debug("generating %s code for %s %s", resolved.value, request.method, request.url)
    return GENERATORS[resolved](request)
