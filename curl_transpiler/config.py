from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from curl_transpiler.schemas import Target

PROJECT_DIR = Path(__file__).resolve().parents[1]


@dataclass(frozen=True)
class TranspilerSettings:
    default_target: Target = Target.JS_FETCH
    samples_path: Path | None = None
    log_level: str = "WARNING"


def _dotenv_path() -> str | None:
    bundled = PROJECT_DIR / ".env"
    if bundled.exists():
        return str(bundled)
    return find_dotenv(usecwd=True) or None


def load_settings(*, env_file: str | Path | None = None) -> TranspilerSettings:
    """Read settings from the environment after merging a ``.env`` file into it.

    ``env_file`` overrides the lookup, which otherwise tries a ``.env`` beside the
    package and then searches upward from the working directory. Variables that
    are already set win over the file.
    """
    path = env_file if env_file is not None else _dotenv_path()
    if path is not None:
        load_dotenv(path)
    raw_target = (os.getenv("CURL_TRANSPILER_TARGET") or "").strip()
    raw_samples = (os.getenv("CURL_TRANSPILER_SAMPLES") or "").strip()
    return TranspilerSettings(
        default_target=Target.resolve(raw_target) if raw_target else Target.JS_FETCH,
        samples_path=Path(raw_samples) if raw_samples else None,
        log_level=(os.getenv("CURL_TRANSPILER_LOG_LEVEL") or "WARNING").strip().upper(),
    )
