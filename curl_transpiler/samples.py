from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

BUNDLED_SAMPLES = Path(__file__).resolve().parent / "samples.yaml"


def _validate(data: Any, *, path: Path) -> dict[str, str]:
    if not isinstance(data, dict) or not data:
        raise ValueError(f"samples file must be a non-empty YAML mapping: {path}")
    samples: dict[str, str] = {}
    for label, command in data.items():
        if not isinstance(command, str) or not command.strip():
            raise ValueError(f"sample {label!r} must be a non-empty string")
        samples[str(label)] = command
    return samples


def load_samples(path: Path | None = None) -> dict[str, str]:
    path = path or BUNDLED_SAMPLES
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return _validate(data, path=path)


def get_sample(label: str, samples: dict[str, str] | None = None) -> str:
    samples = samples if samples is not None else load_samples()
    try:
        return samples[label]
    except KeyError:
        available = ", ".join(repr(k) for k in samples)
        raise KeyError(f"unknown sample {label!r} (available: {available})") from None
