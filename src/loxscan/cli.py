"""Command-line interface for loxscan."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from loxscan.debug import FORMATS, dump_tokens
from loxscan.errors import StreamReporter
from loxscan.scanner import scan

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_DATAERR = 65
EXIT_NOINPUT = 66

CONFIG_NAME = "loxscan.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    script: Path | None
    fmt: str
    verbose: bool
    prompt: str


class ConfigError(ValueError):
    """Raised when a config value cannot be used."""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="loxscan",
        description="Scan Lox source and print its tokens",
    )
    p.add_argument("script", nargs="?", help="Lox source file (default: interactive prompt)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Token output format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Show source context for each error",
    )
    p.add_argument("--prompt", metavar="TEXT", help='Prompt text (default: "> ")')
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    script = Path(args.script) if args.script else None
    search_dir = script.parent if script is not None else Path(".")
    if not search_dir.parts:
        search_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, search_dir)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file: {exc}") from exc

    fmt = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_fmt = cfg_output.get("format")
        if isinstance(cfg_fmt, str):
            if cfg_fmt not in FORMATS:
                raise ConfigError(f"invalid output format in config: {cfg_fmt}")
            fmt = cfg_fmt
    if args.format is not None:
        fmt = args.format

    verbose = False
    cfg_diag = config.get("diagnostics")
    if isinstance(cfg_diag, dict):
        cfg_verbose = cfg_diag.get("verbose")
        if isinstance(cfg_verbose, bool):
            verbose = cfg_verbose
    if args.verbose is not None:
        verbose = args.verbose

    prompt = "> "
    cfg_prompt = config.get("prompt")
    if isinstance(cfg_prompt, dict):
        cfg_text = cfg_prompt.get("text")
        if isinstance(cfg_text, str):
            prompt = cfg_text
    if args.prompt is not None:
        prompt = args.prompt

    return CliOptions(script=script, fmt=fmt, verbose=verbose, prompt=prompt)


def run(
    source: str, options: CliOptions, filename: str = "input.lox", out: TextIO | None = None
) -> bool:
    """Scan *source*, print its tokens, and return True if errors were reported."""
    reporter = StreamReporter(source, filename, verbose=options.verbose)
    tokens = scan(source, reporter)
    dump_tokens(tokens, file=out, fmt=options.fmt)
    return reporter.had_error


def run_file(script: Path, options: CliOptions) -> int:
    try:
        source = script.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: unable to read {script}: {exc}", file=sys.stderr)
        return EXIT_NOINPUT

    if run(source, options, str(script)):
        return EXIT_DATAERR
    return EXIT_OK


def run_prompt(options: CliOptions, stdin: TextIO | None = None) -> int:
    """Scan one line at a time until end of input; errors do not end the session."""
    inp = stdin if stdin is not None else sys.stdin
    try:
        while True:
            sys.stdout.write(options.prompt)
            sys.stdout.flush()
            line = inp.readline()
            if not line:
                break
            run(line, options, "<stdin>")
    except KeyboardInterrupt:
        pass
    sys.stdout.write("\n")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/2/65/66). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if options.script is None:
        return run_prompt(options)
    return run_file(options.script, options)
