from __future__ import annotations

from enum import Enum


class ParseFailure(str, Enum):
    NOT_A_COMMAND = "not_a_command"
    MISSING_URL = "missing_url"

    @property
    def message(self) -> str:
        if self is ParseFailure.NOT_A_COMMAND:
            return "input is empty or does not start with 'curl'"
        return "no URL found in the curl command"


class CurlParseError(ValueError):
    def __init__(self, failure: ParseFailure) -> None:
        self.failure = failure
        super().__init__(failure.message)
