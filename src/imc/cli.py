"""Print the parse tree of IMC files as JSON.

Usage:
    imc-parse contacts.vcf
    imc-parse calendar.ics --profile icalendar --indent 2
    imc-parse a.vcf b.vcf --config imc.yaml --strict -v
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import ParserConfig, load_config
from .errors import IMCError
from .parser import parse_file


def build_config(args: argparse.Namespace) -> ParserConfig:
    """Config file values, overridden by any flags given on the command line."""
    config = load_config(args.config) if args.config else ParserConfig()
    overrides = {}
    if args.profile:
        overrides["profile"] = args.profile
    if args.strict:
        overrides["strict"] = True
    if args.no_qp:
        overrides["decode_quoted_printable"] = False
    return config.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse vCard/vCalendar/iCalendar files to JSON")
    parser.add_argument("files", nargs="+", type=Path, help="Files to parse")
    parser.add_argument(
        "--profile",
        choices=["generic", "vcard", "icalendar"],
        default=None,
        help="Value parsers to use (default: generic, or the config file's)",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument(
        "--strict", action="store_true", help="Fail on lines the parser would skip"
    )
    parser.add_argument(
        "--no-qp", action="store_true", help="Leave quoted-printable values encoded"
    )
    parser.add_argument("--encoding", default="utf-8", help="Input file encoding")
    parser.add_argument("--indent", type=int, default=None)
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        results = {}
        for path in args.files:
            block = parse_file(path, config=config, encoding=args.encoding)
            results[str(path)] = block.to_dict()
    except (IMCError, OSError, LookupError) as e:
        print(f"imc-parse: {e}", file=sys.stderr)
        return 1

    output = next(iter(results.values())) if len(results) == 1 else results
    print(json.dumps(output, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
