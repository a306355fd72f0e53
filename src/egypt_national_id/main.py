"""
egypt-national-id command line entry point

Run with: egypt-national-id 30101010123456
Or: python -m egypt_national_id.main --format json 30101010123456
"""

import argparse
import json
import os
import sys
from typing import Optional, Sequence

import yaml

from egypt_national_id import __version__
from egypt_national_id.config.options import (
    ParseOptions,
    load_options_from_yaml,
)
from egypt_national_id.core.national_id import EgyptianNationalId
from egypt_national_id.logging.setup import get_logger, setup_logging
from egypt_national_id.utils.text import mask_national_id, normalize_national_id

logger = get_logger(__name__)

FORMATS = ("detailed", "json", "dashes", "spaces", "brackets", "masked", "raw")


def render(national_id: EgyptianNationalId, output_format: str) -> str:
    """Render a parsed ID in one of the supported output formats."""
    if output_format == "json":
        return json.dumps(national_id.to_dict(), ensure_ascii=False, indent=2)
    if output_format == "dashes":
        return national_id.format_with_dashes()
    if output_format == "spaces":
        return national_id.format_with_spaces()
    if output_format == "brackets":
        return national_id.format_with_brackets()
    if output_format == "masked":
        return national_id.format_masked()
    if output_format == "raw":
        return str(national_id)
    return national_id.format_detailed()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="egypt-national-id",
        description="Validate and decode Egyptian National IDs.",
    )
    parser.add_argument("values", nargs="+", metavar="VALUE", help="National ID(s) to decode")
    parser.add_argument(
        "--format",
        choices=FORMATS,
        default="detailed",
        help="Output format (default: detailed)",
    )
    parser.add_argument(
        "--checksum",
        action="store_true",
        help="Also validate the best-effort check digit",
    )
    parser.add_argument("--config", help="YAML file with a 'parsing' section")
    parser.add_argument("--log-level", default=None, help="Log level (default: EGYPT_NID_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_options(args: argparse.Namespace) -> ParseOptions:
    """Combine config file, environment and flags; flags win."""
    if args.config:
        options = load_options_from_yaml(args.config)
    else:
        options = ParseOptions.from_env()
    if args.checksum:
        options = ParseOptions(validate_checksum=True)
    return options


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Decode each value and print it; return 0 only if all are valid."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = args.log_level or os.getenv("EGYPT_NID_LOG_LEVEL", "WARNING")
    setup_logging(level=level, json_format=False, stream=sys.stderr)

    try:
        options = resolve_options(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    exit_code = 0
    for raw in args.values:
        value = normalize_national_id(raw)
        result = EgyptianNationalId.parse(value, options)
        if not result.ok:
            print(f"{mask_national_id(value)}: {result.error}", file=sys.stderr)
            exit_code = 1
            continue
        print(render(result.unwrap(), args.format))

    logger.debug("Processed %d value(s), exit code %d", len(args.values), exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
