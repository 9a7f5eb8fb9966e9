"""
Seating CLI

Reads a whole batch from a text stream (stdin by default) and prints one line
per block request followed by the number of seats left.

Example:
    $ printf 'R1C4 R1C6 R2C3 R2C7 R3C9 R3C10\\n3\\n3\\n3\\n1\\n10\\n' | seating-chart
    R1C7 - R1C9
    R2C4 - R2C6
    R3C5 - R3C7
    R1C5
    Not enough seats
    17
"""

import sys
from typing import TextIO

from src.platform.config.di import container
from src.platform.logging.loguru_io import Logger


def read_input_lines(stream: TextIO) -> list[str]:
    return [line.rstrip('\r\n') for line in stream]


def run(stream: TextIO, output: TextIO) -> int:
    input_lines = read_input_lines(stream)
    Logger.base.debug(f'[SEATING-CLI] Read {len(input_lines)} lines')

    results = container.process_batch_use_case().process_input(input_lines)
    if results is None:
        return 0

    for seat_range in results.seat_ranges:
        print(seat_range, file=output)
    print(results.seats_remaining, file=output)
    return 0


def main() -> int:
    return run(sys.stdin, sys.stdout)
