"""
CLI for compiling Solidity sources with solc.

Builds a command from the given options, optionally writes the library
file for linking, and runs the compiler (or prints the command on --dry-run).
"""

import argparse
import logging
import sys

from src.config import get_settings

from .command import CompileCommand
from .compiler import Solc
from .errors import ConfigurationError, SolcProcessError
from .runner import SolcRunner

logger = logging.getLogger(__name__)


def _split_pair(value: str, sep: str, what: str) -> tuple[str, str]:
    key, found, rest = value.partition(sep)
    if not found or not key:
        raise argparse.ArgumentTypeError(f"Invalid {what} (expected KEY{sep}VALUE): {value}")
    return key, rest


def parse_mapping(value: str) -> tuple[str, str]:
    """Parse a PREFIX=PATH import remapping."""
    return _split_pair(value, "=", "mapping")


def parse_library(value: str) -> tuple[str, str]:
    """Parse a NAME:ADDRESS library mapping."""
    return _split_pair(value, ":", "library")


def _build_command(solc: Solc, args) -> CompileCommand:
    command = solc.compile()
    for path in args.allow_path:
        command.allow_path(path)
    for prefix, path in args.mapping:
        command.add_mapping(prefix, path)
    if args.bin:
        command.bin()
    if args.abi:
        command.abi()
    if args.output:
        command.outputs(*args.output)
    if args.combined_json:
        command.combined_json(*args.combined_json.split(","))
    if args.overwrite:
        command.overwrite()
    for source in args.sources:
        command.add_source(source)

    if args.library:
        for name, address in args.library:
            solc.add_library_address(name, address)
        command.link()
    return command


def cmd_compile(args) -> int:
    """Compile sources, or print the command with --dry-run."""
    solc = Solc(args.root, output_dir=args.output_dir, settings=get_settings())

    try:
        invocation = _build_command(solc, args).execute()
    except (ConfigurationError, ValueError) as e:
        logger.error(f"Invalid command: {e}")
        return 2

    if args.dry_run:
        print(invocation.command_line())
        return 0

    if args.library:
        try:
            solc.prepare_link()
        except OSError as e:
            logger.error(f"Cannot write libraries file: {e}")
            return 2

    try:
        result = SolcRunner(solc.settings.solc_binary).run(invocation)
    except SolcProcessError as e:
        logger.error(str(e))
        return e.returncode or 1

    if result.stdout:
        print(result.stdout, end="")
    print(f"✅ Compiled {len(args.sources)} source(s)")
    return 0


def cmd_version(args) -> int:
    """Print the compiler version."""
    runner = SolcRunner(get_settings().solc_binary)
    try:
        print(runner.version())
    except SolcProcessError as e:
        print(f"❌ {e}")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build and run solc commands")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Compile command
    compile_parser = subparsers.add_parser("compile", help="Compile Solidity sources")
    compile_parser.add_argument("root", help="Working directory for solc")
    compile_parser.add_argument("sources", nargs="+", help="Source files, relative to root")
    compile_parser.add_argument("-o", "--output-dir", help="Output directory, relative to root")
    compile_parser.add_argument("--bin", action="store_true", help="Output .bin files")
    compile_parser.add_argument("--abi", action="store_true", help="Output .abi files")
    compile_parser.add_argument(
        "--output", action="append", default=[], help="Separate output kind (e.g. bin-runtime)"
    )
    compile_parser.add_argument("--combined-json", help="Comma-separated combined JSON outputs")
    compile_parser.add_argument(
        "--mapping", action="append", default=[], type=parse_mapping, help="PREFIX=PATH remapping"
    )
    compile_parser.add_argument(
        "--allow-path", action="append", default=[], help="Path solc may read imports from"
    )
    compile_parser.add_argument(
        "--library", action="append", default=[], type=parse_library, help="NAME:ADDRESS to link"
    )
    compile_parser.add_argument("--overwrite", action="store_true", help="Overwrite outputs")
    compile_parser.add_argument(
        "--dry-run", action="store_true", help="Print the command instead of running it"
    )

    # Version command
    subparsers.add_parser("version", help="Show the solc version")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(message)s")

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "compile": cmd_compile,
        "version": cmd_version,
    }

    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
