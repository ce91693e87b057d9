from __future__ import annotations

import base64
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class Target(str, Enum):
    JS_FETCH = "js-fetch"
    JS_AXIOS = "js-axios"
    PYTHON_REQUESTS = "python-requests"
    GO = "go"
    NODEJS = "nodejs"

    @property
    def label(self) -> str:
        return _TARGET_LABELS[self]

    @classmethod
    def resolve(cls, value: "Target | str") -> "Target":
        if isinstance(value, Target):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        if key in _TARGET_ALIASES:
            return _TARGET_ALIASES[key]
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"unknown target {value!r} (expected one of: {choices})")


_TARGET_LABELS = {
    Target.JS_FETCH: "JavaScript (Fetch)",
    Target.JS_AXIOS: "JavaScript (Axios)",
    Target.PYTHON_REQUESTS: "Python (Requests)",
    Target.GO: "Go",
    Target.NODEJS: "Node.js",
}

# Role names plus the short spellings people type on the command line.
_TARGET_ALIASES = {
    "promise-fetch": Target.JS_FETCH,
    "fetch": Target.JS_FETCH,
    "object-config-client": Target.JS_AXIOS,
    "axios": Target.JS_AXIOS,
    "scripting-session": Target.PYTHON_REQUESTS,
    "python": Target.PYTHON_REQUESTS,
    "requests": Target.PYTHON_REQUESTS,
    "compiled-request-builder": Target.GO,
    "golang": Target.GO,
    "raw-transport": Target.NODEJS,
    "node": Target.NODEJS,
}


class BasicAuth(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: str
    password: str = ""

    def authorization_header(self) -> str:
        creds = f"{self.user}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(creds).decode("ascii")


class NormalizedRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = Field(default_factory=dict)
    body: str | None = None
    auth: BasicAuth | None = None
    is_json: bool = False
    is_form_urlencoded: bool = False

    @field_validator("url")
    @classmethod
    def _non_empty_url(cls, v: str) -> str:
        if not v:
            raise ValueError("url must be a non-empty string")
        return v

    @field_validator("method")
    @classmethod
    def _upper_method(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("method must be a non-empty string")
        return v

    @field_validator("headers", mode="after")
    @classmethod
    def _read_only_headers(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(v))

    @field_serializer("headers")
    def _dump_headers(self, v: Mapping[str, str]) -> dict[str, str]:
        return dict(v)


def classify_content(*, headers: Mapping[str, str], body: str | None) -> tuple[bool, bool]:
    content_type = ""
    for key, value in headers.items():
        if key.lower() == "content-type":
            content_type = value
    stripped = body.lstrip() if body is not None else ""
    is_json = "application/json" in content_type or stripped.startswith(("{", "["))
    is_form = "application/x-www-form-urlencoded" in content_type
    return is_json, is_form
