"""Main entry point for the description constants tool."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .domain.models import ErrorCollector, logging_handler
from .domain.services import deserialize_consts_glob, serialize_consts
from .infrastructure.config import Config
from .infrastructure.elf_platform import ArchDetector, TargetArch
from .infrastructure.logging import LoggerSetup, get_logger, log_timing
from .utils.path_utils import create_const_filename


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Merge and validate per-platform description constant files",
        epilog="""
Examples:
  # Check that all amd64 const files are well formed and consistent
  desc-consts 'sys/linux/*_amd64.const' --check

  # Merge const files for the architecture of a kernel image
  desc-consts 'sys/linux/*_{arch}.const' --target-elf vmlinux -o merged.const

  # Using .env file for configuration
  echo 'CONST_GLOB=sys/linux/*_{arch}.const' > .env
  desc-consts --arch arm64
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "pattern",
        nargs="?",
        help="Glob matching const files; '{arch}' is replaced by the target "
        "architecture (optional if using .env)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write merged consts to this file "
        "(default: <output dir>/merged_<arch>.const)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Output directory for merged const files (default: ./output)",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--arch",
        type=str,
        metavar="ARCH",
        help="Target architecture, e.g. amd64 or arm64",
    )
    target.add_argument(
        "--target-elf",
        type=Path,
        metavar="ELF",
        help="Take the target architecture from this ELF file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only validate the const files, do not write anything",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def resolve_arch(args: argparse.Namespace) -> TargetArch | None:
    """Determine target architecture from --arch or --target-elf.

    Raises:
        ValueError: If the architecture is unknown
    """
    if args.arch:
        return TargetArch.from_name(args.arch)
    if args.target_elf:
        if not args.target_elf.is_file():
            raise ValueError(f"ELF file not found: {args.target_elf}")
        return ArchDetector.detect(str(args.target_elf))
    return None


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point: merge const files and write the canonical result."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            const_glob=args.pattern,
            output_dir=args.output_dir,
            arch=resolve_arch(args),
            verbose=args.verbose,
        )
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)

    pattern = config.resolved_glob
    logger.debug(f"Const glob: {pattern}")
    logger.debug(f"Target architecture: {config.arch}")

    errors = ErrorCollector(forward=logging_handler)
    consts = deserialize_consts_glob(pattern, errors)
    if consts is None:
        logger.error(f"[FAILED] {pattern}: {errors.count} error(s)")
        sys.exit(1)

    if args.check:
        logger.info(f"[OK] {len(consts)} consts are consistent")
        sys.exit(0)

    output_file = args.output
    if output_file is None:
        config.ensure_output_dir()
        output_file = config.output_dir / create_const_filename("merged", config.arch)
    else:
        output_file.parent.mkdir(parents=True, exist_ok=True)

    data = serialize_consts(consts)
    output_file.write_bytes(data)
    logger.info(f"[SUCCESS] Wrote {len(consts)} consts to {output_file}")
    logger.debug(f"Size: {len(data)} bytes")

    sys.exit(0)


if __name__ == "__main__":
    main()
