import argparse
import logging
import sys
from abc import ABC, abstractmethod
from datetime import datetime
from typing import BinaryIO

from bytestream_core.generator import GeneratorMode, normalize_seed
from bytestream_utils.common import parse_byte_count

CONSOLE_HANDLER_NAME = "bytestream-console"


def byte_count_argument(value: str) -> int:
    count = parse_byte_count(value)
    if count is None:
        raise argparse.ArgumentTypeError(f"invalid byte count '{value}' (e.g. 64, 4k, 1MiB)")
    return count


def seed_argument(value: str) -> int:
    # accepts decimal as well as 0x / 0o / 0b prefixed values
    try:
        seed = int(value, 0)
        normalize_seed(seed)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed '{value}' (64-bit integer expected)")
    return seed


class StreamToolClient(ABC):
    """Base class for a byte stream command line tool. Handles logging setup,
    argument parsing and dispatch to the `generate`, `limit` and `check` commands.
    """

    tool_name: str
    logger_prefix: str

    # Common State
    verbosity: int
    seed: int

    stdin: BinaryIO
    stdout: BinaryIO

    argument_parser: argparse.ArgumentParser
    args: argparse.Namespace

    def __init__(
        self,
        tool_name: str,
        logger_prefix: str,
        stdin: BinaryIO | None = None,
        stdout: BinaryIO | None = None,
    ):
        self.tool_name = tool_name
        self.logger_prefix = logger_prefix
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout.buffer

        self.verbosity = 0
        self.seed = 0
        self.console_handler: logging.Handler | None = None

        self.argument_parser = self.generate_parser()
        self.args = argparse.Namespace()

    def set_logger_config(self):
        logger = logging.getLogger("bytestream")
        logger.propagate = False
        verbosity = min(max(0, self.verbosity), 2)
        logging_level = {0: logging.ERROR, 1: logging.INFO, 2: logging.DEBUG}.get(
            verbosity, logging.ERROR
        )
        logger.setLevel(logging.DEBUG)

        # one console handler per process, the logger outlives any client
        for handler in list(logger.handlers):
            if handler.get_name() == CONSOLE_HANDLER_NAME:
                logger.removeHandler(handler)
        self.console_handler = logging.StreamHandler()
        self.console_handler.set_name(CONSOLE_HANDLER_NAME)
        formatter = logging.Formatter(
            f"[{self.logger_prefix} %(asctime)s ~ %(levelname)s]: %(message)s"
        )
        self.console_handler.setFormatter(formatter)
        self.console_handler.setLevel(logging_level)
        logger.addHandler(self.console_handler)

    def add_shared_flags(self, subparser: argparse.ArgumentParser):
        """Flags shared between all commands"""
        subparser.add_argument("-v", "--verbosity", default=1, choices=[0, 1, 2], type=int)

    def generate_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=self.tool_name,
            description=f"{self.tool_name}: seeded random bytes, byte budgets and line checks",
        )
        subparsers = parser.add_subparsers(required=True, dest="command")

        # --- Subcommand: generate ---
        generate_parser = subparsers.add_parser(
            "generate", help="Emit a fixed amount of seeded pseudo-random bytes"
        )
        self.add_shared_flags(generate_parser)
        generate_parser.add_argument(
            "-s", "--seed", metavar="SEED_NUM", type=seed_argument, help="seed for randomness"
        )
        generate_parser.add_argument(
            "-n",
            "--count",
            metavar="BYTES",
            type=byte_count_argument,
            default=self.default_count(),
            help="number of bytes to emit (e.g. 64, 4k, 1MiB)",
        )
        generate_parser.add_argument(
            "--mode",
            type=str,
            choices=[mode.value for mode in GeneratorMode],
            default=GeneratorMode.BYTE.value,
            help="draw one random value per byte or per 8 bytes",
        )
        generate_parser.add_argument(
            "--format", choices=["raw", "hex"], default="raw", help="output format"
        )
        generate_parser.add_argument(
            "-o", "--out", metavar="OUTPUT_FILE", type=str, help="output file (default: stdout)"
        )

        # --- Subcommand: limit ---
        limit_parser = subparsers.add_parser(
            "limit", help="Copy at most BYTES bytes from stdin to stdout"
        )
        self.add_shared_flags(limit_parser)
        limit_parser.add_argument(
            "-n", "--count", metavar="BYTES", type=byte_count_argument, required=True
        )

        # --- Subcommand: check ---
        check_parser = subparsers.add_parser(
            "check", help="Validate lines and report every violated rule"
        )
        self.add_shared_flags(check_parser)
        check_parser.add_argument(
            "lines", nargs="*", help="lines to check (default: interactive prompt on stdin)"
        )
        check_parser.add_argument(
            "--report", action="store_true", help="render a summary report of all lines"
        )

        return parser

    def start(self, argv: list[str] | None = None) -> int:
        self.args = self.argument_parser.parse_args(argv)
        self.verbosity = self.args.verbosity
        self.set_logger_config()

        # Command Dispatch
        match self.args.command:
            case "generate":
                self.seed = (
                    self.args.seed
                    if self.args.seed is not None
                    else int(datetime.now().timestamp())
                )
                return self.run_generate()
            case "limit":
                return self.run_limit()
            case "check":
                return self.run_check()
        return 2

    def default_count(self) -> int:
        return 64

    @abstractmethod
    def run_generate(self) -> int:
        """Write generated bytes, returns the exit status"""
        raise NotImplementedError()

    @abstractmethod
    def run_limit(self) -> int:
        """Forward a bounded prefix of stdin, returns the exit status"""
        raise NotImplementedError()

    @abstractmethod
    def run_check(self) -> int:
        """Validate lines, returns the exit status"""
        raise NotImplementedError()
