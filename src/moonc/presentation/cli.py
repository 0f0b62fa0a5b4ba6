"""CLI interface for the batch compilation driver."""
import sys
import logging
import argparse
from pathlib import Path
from typing import List, Optional, Tuple

from moonc.domain.models import BatchRequest
from moonc.domain.protocols import IConsole
from moonc.domain.exceptions import DomainException, UsageError
from moonc.infrastructure.config import ConfigLoader, DriverSettings
from moonc.infrastructure.io import SourceFileReader, OutputFileWriter, StreamConsole
from moonc.application.orchestrator import BatchCompilationOrchestrator
from moonc.application.factories import CompilerFactory
from moonc.shared.logging import setup_logger, LoggerAdapter, get_logger
from moonc.shared.metrics import MetricsCollector

HELP = (
    "Usage: moonc [options|files] ...\n"
    "\n"
    "    -h          Print this message\n"
    "    -t path     Specify where to place compiled files\n"
    "    -o file     Write output to file\n"
    "    -p          Write output to standard out\n"
    "    -b          Dump compile time (doesn't write output)\n"
    "    -l          Write line numbers from source codes\n"
    "    -v          Print version\n"
    "\n"
    "    -j N        Compile at most N files at the same time\n"
    "    --config    YAML settings file (default: moonc.yaml)\n"
    "    --verbose   Log progress and metrics to stderr\n"
    "\n"
    "-l passes line_number_args from the settings file to the compiler.\n"
    "Any other argument, dashed or not, is an input file.\n"
)

SWITCHES = frozenset(('-h', '-v', '-l', '-p', '-b', '--verbose'))

# Command line spelling -> the long form handed to argparse
VALUE_OPTIONS = {
    '-t': '--target-dir',
    '-o': '--output-file',
    '-j': '--jobs',
    '--jobs': '--jobs',
    '--config': '--config',
}


class DriverArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad flags as UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> DriverArgumentParser:
    parser = DriverArgumentParser(prog='moonc', add_help=False, allow_abbrev=False)
    parser.add_argument('-h', dest='show_help', action='store_true')
    parser.add_argument('-v', dest='show_version', action='store_true')
    parser.add_argument('-l', dest='line_numbers', action='store_true')
    parser.add_argument('-p', dest='print_output', action='store_true')
    parser.add_argument('-b', dest='dump_timing', action='store_true')
    parser.add_argument('--target-dir', dest='target_dir', metavar='path')
    parser.add_argument('--output-file', dest='output_file', metavar='file')
    parser.add_argument('--jobs', dest='jobs', type=positive_int, metavar='N')
    parser.add_argument('--config', type=Path)
    parser.add_argument('--verbose', action='store_true')
    return parser


def split_argv(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Separate option tokens from input files.

    Only exact option spellings are options, so ``-lp`` or ``--verb`` are
    file names. Option values are taken verbatim even when they start with
    a dash. Files keep their command line order.

    Returns:
        (options for the parser, input files)

    Raises:
        UsageError: If an option is missing its value
    """
    options: List[str] = []
    files: List[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token in SWITCHES:
            options.append(token)
        elif token in VALUE_OPTIONS:
            value = next(tokens, None)
            if value is None:
                raise UsageError(f"{token} expects a value")
            options.append(f"{VALUE_OPTIONS[token]}={value}")
        else:
            files.append(token)
    return options, files


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Raises:
        UsageError: If a flag is missing its value or has an invalid one
    """
    options, files = split_argv(sys.argv[1:] if argv is None else list(argv))
    args = build_parser().parse_args(options)
    args.files = files
    return args


def create_orchestrator_from_settings(
    settings: DriverSettings,
    reserve_line_numbers: bool = False,
    console: Optional[IConsole] = None,
    metrics: Optional[MetricsCollector] = None
) -> BatchCompilationOrchestrator:
    """Create orchestrator with all dependencies from settings."""
    compiler = CompilerFactory(settings).create(reserve_line_numbers=reserve_line_numbers)

    return BatchCompilationOrchestrator(
        compiler=compiler,
        console=console or StreamConsole(),
        reader=SourceFileReader(),
        writer=OutputFileWriter(serialize_writes=settings.serialize_writes),
        logger=LoggerAdapter(get_logger('orchestrator')),
        metrics=metrics or MetricsCollector(),
        max_workers=settings.max_workers,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    try:
        args = parse_args(argv)
    except UsageError:
        print(HELP, end='')
        return 1

    if args.show_help:
        print(HELP, end='')
        return 0

    setup_logger('moonc', level=logging.DEBUG if args.verbose else logging.WARNING)
    logger = get_logger(__name__)

    try:
        settings = ConfigLoader(config_path=args.config).load(overrides={
            'max_workers': args.jobs,
            'log_level': 'DEBUG' if args.verbose else None,
        })
        setup_logger('moonc', level=settings.log_level_value)

        if args.show_version:
            compiler = CompilerFactory(settings).create(probe=False)
            print(f"Moonscript version: {compiler.version()}")
            return 0

        if not args.files:
            print(HELP, end='')
            return 0

        try:
            request = BatchRequest(
                files=tuple(args.files),
                target_dir=args.target_dir,
                explicit_output_file=args.output_file,
                write_to_disk=not args.print_output,
                dump_timing=args.dump_timing,
                config=settings.compiler_config(reserve_line_numbers=args.line_numbers),
            )
        except UsageError as e:
            print(f"Error: {e}")
            print(HELP, end='')
            return 1

        metrics = MetricsCollector()
        orchestrator = create_orchestrator_from_settings(
            settings,
            reserve_line_numbers=args.line_numbers,
            metrics=metrics,
        )
        result = orchestrator.run(request)

        logger.debug(metrics.format_summary())
        return result.exit_code

    except DomainException as e:
        logger.error(f"moonc: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
