"""Command-line interface for cleanstring."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cleanstring.clean import DEFAULT_PREFIX, CleanOptions, clean
from cleanstring.errors import ConfigError

CONFIG_NAME = "cleanstring.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    prefix: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="cleanstring",
        description="Strip blank edge lines and prefix markers from indented text",
    )
    p.add_argument("input", nargs="?", default="-", help="Input file (default: stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-p",
        "--prefix",
        default=None,
        metavar="MARKER",
        help=f"Prefix marker to strip (default: {DEFAULT_PREFIX!r})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump line classification to stderr")
    return p


def parse_prefix_arg(s: str) -> str:
    """Validate a --prefix value."""
    if not s:
        raise argparse.ArgumentTypeError("prefix must not be empty")
    return s


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except UnicodeDecodeError as exc:
            raise ConfigError(f"config is not valid UTF-8: {exc}", path) from exc
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}", path) from exc


def config_prefix(config: dict[str, Any], path: Path) -> str | None:
    """Return the [clean].prefix value from *config*, if set."""
    section = config.get("clean")
    if not isinstance(section, dict) or "prefix" not in section:
        return None
    prefix = section["prefix"]
    if not isinstance(prefix, str) or not prefix:
        raise ConfigError("prefix must be a non-empty string", path, key="clean.prefix")
    return prefix


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: default < config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    prefix = DEFAULT_PREFIX
    cfg_prefix = config_prefix(config, config_path or input_dir / CONFIG_NAME)
    if cfg_prefix is not None:
        prefix = cfg_prefix
    if args.prefix is not None:
        prefix = parse_prefix_arg(args.prefix)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        prefix=prefix,
        debug=args.debug,
    )


def read_source(input_file: Path | None) -> str:
    """Read UTF-8 input from *input_file* or stdin, keeping line endings as-is."""
    if input_file is None:
        stream = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8", newline="")
        try:
            return stream.read()
        finally:
            stream.detach()
    with open(input_file, encoding="utf-8", newline="") as f:
        return f.read()


def write_result(output_file: Path | None, text: str) -> None:
    """Write *text* to *output_file* or stdout without newline translation."""
    if output_file is None:
        sys.stdout.write(text)
        return
    with open(output_file, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def clean_file(options: CliOptions) -> str:
    """Read the input and return its cleaned text."""
    source = read_source(options.input_file)

    if options.debug:
        from cleanstring.debug import dump_lines

        dump_lines(source, options.prefix, file=sys.stderr)

    return clean(source, CleanOptions(prefix=options.prefix))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        result = clean_file(options)
        write_result(options.output_file, result + "\n" if result else "")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
