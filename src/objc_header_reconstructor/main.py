"""Main entry point for the ObjC Header Reconstructor."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from .application.generators import EntityKind, ObjcDumper, ObjcHeaderGenerator
from .domain.errors import ConfigurationError, ReconstructorError
from .domain.services.lookup import (
    AddressResolver,
    parse_address,
    read_addresses,
    write_matches,
)
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing
from .infrastructure.metadata import JsonBinaryMetadata, JsonSharedCache


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Reconstruct Objective-C headers from ObjC runtime metadata",
        epilog="""
Examples:
  # Write headers for one binary
  python main.py headers Widgets.json -o headers/

  # Also write headers for the private frameworks it imports
  python main.py headers Widgets.json --shared-cache cache.json --deps

  # List every class, protocol and category
  python main.py dump Widgets.json

  # Print matching classes as @interface declarations
  python main.py dump Widgets.json --class '^WG'

  # Find the function containing an address
  python main.py a2f cache.json 0x180028000 --slide 0x4000

  # Batch lookup to JSON
  python main.py a2f cache.json --in addrs.txt --out funcs.json

  # Using .env file for configuration
  echo 'BINARY_PATH=Widgets.json' > .env
  python main.py headers
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    headers = subparsers.add_parser("headers", help="Write reconstructed headers")
    headers.add_argument(
        "binary",
        type=Path,
        nargs="?",
        help="Path to the binary metadata document (optional if using .env)",
    )
    headers.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output directory for reconstructed headers (default: ./output)",
    )
    _add_cache_arguments(headers)

    dump = subparsers.add_parser("dump", help="List ObjC metadata")
    dump.add_argument(
        "binary",
        type=Path,
        nargs="?",
        help="Path to the binary metadata document (optional if using .env)",
    )
    kinds = dump.add_mutually_exclusive_group()
    kinds.add_argument("--class", dest="class_pattern", metavar="REGEX", help="Dump classes")
    kinds.add_argument("--proto", dest="proto_pattern", metavar="REGEX", help="Dump protocols")
    kinds.add_argument("--cat", dest="cat_pattern", metavar="REGEX", help="Dump categories")
    dump.add_argument(
        "--long",
        action="store_true",
        help="Print full declarations instead of one line per entity",
    )
    _add_cache_arguments(dump)

    a2f = subparsers.add_parser("a2f", help="Find the function containing an address")
    a2f.add_argument("cache", type=Path, help="Path to the shared cache document")
    a2f.add_argument("vaddr", nargs="?", help="Virtual address (0x-hex or decimal)")
    a2f.add_argument("--slide", default="0", help="ASLR slide to remove (default: 0)")
    a2f.add_argument(
        "--in",
        dest="input",
        type=Path,
        metavar="FILE",
        help="Read newline-delimited addresses from FILE",
    )
    a2f.add_argument(
        "--out",
        dest="output",
        type=Path,
        metavar="FILE",
        help="Write JSON results to FILE (default: stdout)",
    )

    return parser.parse_args(argv)


def _add_cache_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--shared-cache",
        type=Path,
        metavar="FILE",
        help="Shared cache document used for Foundation and imported frameworks",
    )
    parser.add_argument(
        "--deps",
        action="store_true",
        help="Also process imported private frameworks (requires --shared-cache)",
    )


def _dump_request(args: argparse.Namespace) -> tuple[EntityKind | None, str]:
    if args.class_pattern is not None:
        return EntityKind.CLASS, args.class_pattern
    if args.proto_pattern is not None:
        return EntityKind.PROTOCOL, args.proto_pattern
    if args.cat_pattern is not None:
        return EntityKind.CATEGORY, args.cat_pattern
    return None, ""


def run_headers(args: argparse.Namespace, config: Config) -> int:
    logger = get_logger(__name__)
    assert config.binary_path is not None

    binary = JsonBinaryMetadata.load(config.binary_path)
    cache = JsonSharedCache.open(config.shared_cache_path) if config.shared_cache_path else None

    config.ensure_output_dir()
    generator = ObjcHeaderGenerator(
        binary,
        config.output_dir,
        config.tool_version,
        image_provider=cache,
        include_dependencies=args.deps,
    )
    results = generator.generate()

    logger.info("=" * 70)
    logger.info("GENERATION SUMMARY")
    logger.info("=" * 70)
    for result in results:
        logger.info(f"  - {result.module}: {len(result.headers)} headers")
        if result.umbrella is not None:
            logger.info(f"    umbrella: {result.umbrella}")
    return 0


def run_dump(args: argparse.Namespace, config: Config) -> int:
    assert config.binary_path is not None

    binary = JsonBinaryMetadata.load(config.binary_path)
    cache = JsonSharedCache.open(config.shared_cache_path) if config.shared_cache_path else None

    kind, pattern = _dump_request(args)
    dumper = ObjcDumper(binary, image_provider=cache, include_dependencies=args.deps)
    # A filtered dump prints declarations unless asked otherwise
    verbose = args.long or kind is not None
    for entry in dumper.generate(kind=kind, pattern=pattern, verbose=verbose):
        print(entry)
    return 0


def run_a2f(args: argparse.Namespace) -> int:
    logger = get_logger(__name__)
    if args.input is None and args.vaddr is None:
        raise ConfigurationError("give a virtual address or --in FILE")

    cache = JsonSharedCache.open(args.cache)
    resolver = AddressResolver(cache, slide=parse_address(args.slide))

    if args.input is not None:
        try:
            with open(args.input, encoding="utf-8") as f:
                addrs = read_addresses(f)
        except OSError as e:
            raise ConfigurationError(f"failed to read addresses from {args.input}: {e}") from e

        matches = resolver.lookup_many(addrs)
        logger.info(f"Resolved {len(matches)} of {len(addrs)} addresses")
        if args.output is None:
            write_matches(matches, sys.stdout)
        else:
            with open(args.output, "w", encoding="utf-8") as f:
                write_matches(matches, f)
            logger.info(f"Wrote {args.output}")
        return 0

    addr = parse_address(args.vaddr)
    match = resolver.lookup(addr)
    if match is None:
        logger.error(f"{resolver.unslide(addr):#x} is not in any known function")
        return 0
    print(AddressResolver.describe(addr, match))
    return 0


@log_timing
def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point for ObjC header reconstruction and address lookup."""
    logger = get_logger(__name__)
    logger.debug("Starting ObjC Header Reconstructor main program")

    args = parse_args(argv)
    is_a2f = args.command == "a2f"

    # Load configuration
    try:
        config = Config.from_args(
            binary_path=None if is_a2f else args.binary,
            output_dir=getattr(args, "output", None) if args.command == "headers" else None,
            shared_cache_path=None if is_a2f else args.shared_cache,
            verbose=args.verbose,
        )
        config.validate(require_binary=not is_a2f)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    # Initialize logging
    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    logger.debug(f"Command: {args.command}")
    logger.debug(f"Binary: {config.binary_path}")
    logger.debug(f"Shared cache: {config.shared_cache_path}")

    try:
        if args.command == "headers":
            status = run_headers(args, config)
        elif args.command == "dump":
            status = run_dump(args, config)
        else:
            status = run_a2f(args)
    except ReconstructorError as e:
        logger.error(f"[FAILED] {e}")
        if config.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    logger.debug("Main program completed")
    sys.exit(status)


if __name__ == "__main__":
    main()
