from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from curl_transpiler.api import PARSE_ERROR_MESSAGE, convert, convert_all
from curl_transpiler.config import TranspilerSettings, load_settings
from curl_transpiler.errors import CurlParseError
from curl_transpiler.parser import parse_command
from curl_transpiler.samples import get_sample, load_samples
from curl_transpiler.schemas import Target

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _target(value: str) -> Target:
    try:
        return Target.resolve(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _setup_logging(level: str) -> None:
    logger = logging.getLogger("curl_transpiler")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)


def _load_samples(*, path: Path | None, settings: TranspilerSettings) -> dict[str, str]:
    try:
        return load_samples(path or settings.samples_path)
    except (OSError, ValueError) as e:
        raise SystemExit(f"cannot load samples: {e}") from e


def _read_command(args: argparse.Namespace, *, settings: TranspilerSettings) -> str:
    if getattr(args, "sample", None):
        samples = _load_samples(path=args.samples, settings=settings)
        try:
            return get_sample(args.sample, samples)
        except KeyError as e:
            raise SystemExit(str(e.args[0])) from e
    if args.file is not None:
        return args.file.read_text(encoding="utf-8")
    if args.command:
        return args.command
    return sys.stdin.read()


def _add_input_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("command", nargs="?", default=None, help="curl command (reads stdin if omitted)")
    p.add_argument("--file", type=_existing_path, default=None, help="read the command from a file")


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        raise SystemExit(f"invalid configuration: {e}") from e

    ap = argparse.ArgumentParser(prog="curl-transpiler")
    ap.add_argument("--log-level", type=str, default=settings.log_level)
    sub = ap.add_subparsers(dest="cmd", required=True)

    conv_p = sub.add_parser("convert", help="convert a curl command into client code")
    _add_input_args(conv_p)
    conv_p.add_argument("--sample", type=str, default=None, help="convert a bundled sample by label")
    conv_p.add_argument("--samples", type=_existing_path, default=None, help="samples YAML file")
    conv_p.add_argument("--target", type=_target, default=settings.default_target)
    conv_p.add_argument("--all", action="store_true", help="render every target")

    parse_p = sub.add_parser("parse", help="print the normalized request as JSON")
    _add_input_args(parse_p)

    samples_p = sub.add_parser("samples", help="list bundled example commands")
    samples_p.add_argument("--samples", type=_existing_path, default=None, help="samples YAML file")
    samples_p.add_argument("--show", type=str, default=None, help="print one sample by label")

    sub.add_parser("targets", help="list supported target languages")

    args = ap.parse_args(argv)
    _setup_logging(args.log_level)

    if args.cmd == "convert":
        raw = _read_command(args, settings=settings)
        if args.all:
            try:
                rendered = convert_all(raw)
            except CurlParseError as e:
                raise SystemExit(PARSE_ERROR_MESSAGE) from e
            blocks = [f"===== {t.label} =====\n{code}" for t, code in rendered.items()]
            print("\n\n".join(blocks))
            return 0
        result = convert(raw, args.target)
        if result.error:
            raise SystemExit(result.error)
        if not result.ok:
            raise SystemExit("empty input (pass a curl command, --file, --sample or stdin)")
        print(result.output)
        return 0

    if args.cmd == "parse":
        raw = _read_command(args, settings=settings)
        try:
            request = parse_command(raw)
        except CurlParseError as e:
            raise SystemExit(f"{PARSE_ERROR_MESSAGE} ({e})") from e
        print(request.model_dump_json(indent=2))
        return 0

    if args.cmd == "samples":
        samples = _load_samples(path=args.samples, settings=settings)
        if args.show:
            try:
                print(get_sample(args.show, samples))
            except KeyError as e:
                raise SystemExit(str(e.args[0])) from e
            return 0
        for label in samples:
            print(label)
        return 0

    if args.cmd == "targets":
        for t in Target:
            print(f"{t.value}\t{t.label}")
        return 0

    raise SystemExit(f"unknown command: {args.cmd}")
