#!/usr/bin/env python3

import io
import logging
import sys
from pathlib import Path
from typing import BinaryIO

from bytestream_core.generator import GeneratorMode, new_generator
from bytestream_core.limit import limit
from bytestream_core.stream import Stream
from bytestream_core.validation import check_line
from bytestream_utils.adapters import ReaderStream
from bytestream_utils.cli import StreamToolClient
from bytestream_utils.common import to_hex_dump
from bytestream_utils.copy import copy
from bytestream_utils.report import CheckOutcome, CheckReportRenderer
from randbyte_tool.settings import (
    CHECK_PASSED_MESSAGE,
    CHECK_PROMPT,
    CHECK_QUIT_COMMAND,
    DEFAULT_GENERATE_COUNT,
    HEX_DUMP_WIDTH,
)

logger = logging.getLogger("bytestream")


class RandbyteClient(StreamToolClient):
    def default_count(self) -> int:
        return DEFAULT_GENERATE_COUNT

    def run_generate(self) -> int:
        mode = GeneratorMode(self.args.mode)

        logger.info(f"=== Start {self.logger_prefix} Generation ===")
        logger.info(f" * seed: {self.seed}")
        logger.info(f" * mode: {mode.value}")
        logger.info(f" * count: {self.args.count}")
        logger.info("===")

        stream = limit(new_generator(self.seed, mode), self.args.count)
        if self.args.out:
            out_file = Path(self.args.out).absolute()
            if out_file.is_dir():
                self.argument_parser.error("--out requires to be a file, found a directory!")
            out_file.parent.mkdir(parents=True, exist_ok=True)
            with out_file.open("wb") as out:
                written = self.emit(stream, out)
        else:
            written = self.emit(stream, self.stdout)
            self.stdout.flush()

        logger.info(f"=== End {self.logger_prefix} Generation ({written} bytes) ===")
        return 0

    def emit(self, stream: Stream, out: BinaryIO) -> int:
        if self.args.format == "raw":
            return copy(out, stream)

        data = io.BytesIO()
        written = copy(data, stream)
        if written > 0:
            out.write((to_hex_dump(data.getvalue(), HEX_DUMP_WIDTH) + "\n").encode("ascii"))
        return written

    def run_limit(self) -> int:
        written = copy(self.stdout, limit(ReaderStream(self.stdin), self.args.count))
        self.stdout.flush()
        logger.info(f"forwarded {written} of at most {self.args.count} bytes")
        return 0

    def run_check(self) -> int:
        if not self.args.lines:
            self.check_interactive()
            return 0

        outcomes = [CheckOutcome(line, check_line(line)) for line in self.args.lines]
        if self.args.report:
            self.write_text(CheckReportRenderer().render(outcomes))
        else:
            for outcome in outcomes:
                self.write_outcome(outcome)

        failed = sum(1 for outcome in outcomes if not outcome.passed)
        logger.info(f"{failed} of {len(outcomes)} lines failed the check")
        return 1 if failed > 0 else 0

    def check_interactive(self):
        outcomes: list[CheckOutcome] = []
        while True:
            self.write_text(CHECK_PROMPT)
            raw_line = self.stdin.readline()
            if not raw_line:
                self.write_text("\n")
                break

            line = raw_line.decode("utf-8", errors="replace").rstrip("\r\n")
            if line == CHECK_QUIT_COMMAND:
                break

            outcome = CheckOutcome(line, check_line(line))
            outcomes.append(outcome)
            self.write_outcome(outcome)

        if self.args.report and outcomes:
            self.write_text(CheckReportRenderer().render(outcomes))

    def write_outcome(self, outcome: CheckOutcome):
        if outcome.error is not None:
            self.write_text(f"{outcome.error.describe()}\n")
        else:
            self.write_text(f"{CHECK_PASSED_MESSAGE}\n")

    def write_text(self, text: str):
        self.stdout.write(text.encode("utf-8"))
        self.stdout.flush()


def app():
    cli = RandbyteClient("randbyte", "Randbyte")
    sys.exit(cli.start())


if __name__ == "__main__":
    app()
