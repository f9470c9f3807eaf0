"""Main CLI entry point for the strict-xml command-line tool.

Provides ``parse`` to print the outline (or JSON form) of a document and
``validate`` to check a batch of files, reporting the first violation in each.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from strict_xml_parser import __version__
from strict_xml_parser.api import XMLParser
from strict_xml_parser.shared.config import ConfigError, ParserConfig
from strict_xml_parser.shared.logging import get_logger
from strict_xml_parser.tools.profiling import PerformanceProfiler

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130  # Standard exit code for SIGINT


def load_config(args: argparse.Namespace) -> ParserConfig:
    """Build the parser configuration from ``--config`` and ``--strict``."""
    config = ParserConfig()
    if args.config:
        config = ParserConfig.from_json(args.config.read_text(encoding="utf-8"))
    if args.strict:
        config = config.override(require_root_element=True, require_balanced_tags=True)
    return config


def read_document(path: Path, encoding: str) -> str:
    """Read a whole document as text."""
    return path.read_text(encoding=encoding)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="strict-xml",
        description="Strict XML parser with precise line/column error reporting"
    )

    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Quiet output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--encoding", "-e",
        default="utf-8",
        help="Text encoding of the input files (default: utf-8)"
    )
    common.add_argument(
        "--config", "-c",
        type=Path,
        help="JSON parser configuration file"
    )
    common.add_argument(
        "--strict",
        action="store_true",
        help="Require a closed root element"
    )

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse", parents=[common], help="Parse an XML file and print its tree"
    )
    parse_parser.add_argument("path", type=Path, help="XML file to parse")
    parse_parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )
    parse_parser.add_argument(
        "--inner-text",
        action="store_true",
        help="Also print the concatenated text content of the root element"
    )
    parse_parser.add_argument(
        "--profile",
        action="store_true",
        help="Report parse time and memory usage"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate", parents=[common], help="Check XML files for well-formedness"
    )
    validate_parser.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="XML files to validate"
    )
    validate_parser.add_argument(
        "--format", "-f",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)"
    )

    return parser


def cmd_parse(args: argparse.Namespace, config: ParserConfig) -> int:
    """Handle parse command."""
    parser = XMLParser(config=config)
    text = read_document(args.path, args.encoding)

    session = None
    if args.profile:
        profiler = PerformanceProfiler()
        result, session = profiler.profile_parse(text, parser=parser, session_id=args.path.name)
    else:
        result = parser.try_parse(text)

    if not result.success:
        print(f"Error: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    document = result.document
    if args.format == "json":
        output: Dict[str, Any] = {"document": document.to_dict()}
        if args.inner_text:
            output["inner_text"] = document.inner_text()
        if session is not None:
            output["profile"] = session.to_dict()
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(document.description())
        if args.inner_text:
            print(document.inner_text())
        if session is not None:
            print(
                f"{session.duration_ms:.3f} ms, "
                f"{session.throughput_chars_per_s:,.0f} chars/s, "
                f"memory delta {session.memory_delta} bytes",
                file=sys.stderr,
            )

    return EXIT_OK


def cmd_validate(args: argparse.Namespace, config: ParserConfig) -> int:
    """Handle validate command."""
    parser = XMLParser(config=config)
    results: List[Dict[str, Any]] = []

    for path in args.paths:
        try:
            text = read_document(path, args.encoding)
        except (OSError, UnicodeDecodeError) as e:
            results.append({"file": str(path), "valid": False, "error": str(e)})
            continue

        result = parser.try_parse(text)
        entry: Dict[str, Any] = {"file": str(path), "valid": result.success}
        if result.error is not None:
            entry["error"] = result.error.message
            entry["kind"] = result.error.kind.name
        results.append(entry)

    if args.format == "json":
        print(json.dumps(results, indent=2))
    else:
        valid_count = sum(1 for r in results if r["valid"])
        print(f"Validated {len(results)} files, {valid_count} valid")
        print("-" * 50)
        for entry in results:
            status = "✓" if entry["valid"] else "✗"
            print(f"{status} {entry['file']}")
            if not entry["valid"]:
                print(f"   Error: {entry['error']}")

    return EXIT_OK if all(r["valid"] for r in results) else EXIT_FAILURE


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return EXIT_FAILURE

    try:
        config = load_config(args)
    except (ConfigError, OSError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    elif args.quiet:
        logging.basicConfig(level=logging.ERROR)
    else:
        logging.basicConfig(level=config.logging_level)

    logger = get_logger(__name__, config.correlation_id, "cli")

    try:
        if args.command == "parse":
            return cmd_parse(args, config)
        if args.command == "validate":
            return cmd_validate(args, config)
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_FAILURE

    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Could not read input", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        print("\nOperation interrupted by user", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
