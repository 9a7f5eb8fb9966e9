"""
Process Batch Use Case - seed reservations, then allocate blocks line by line
"""

from collections.abc import Callable, Sequence
from typing import Optional

from src.platform.logging.loguru_io import Logger
from src.service.seating.app.dto import BatchResult
from src.service.seating.domain.seat_allocation import SeatAllocation
from src.service.seating.domain.seat_chart import SeatChart
from src.service.seating.domain.value_object.seat_code import (
    format_seat_range,
    parse_seat_code,
)


class ProcessBatchUseCase:
    """
    Process Batch Use Case

    Input format:
        line 1:    whitespace-separated seat codes already taken (may be empty)
        line 2..n: one requested block size per line

    Every batch runs on a fresh chart from `seat_chart_factory`.
    """

    def __init__(
        self,
        seat_chart_factory: Callable[[], SeatChart],
        not_enough_seats_message: str,
        seat_range_separator: str = ' - ',
    ) -> None:
        self.seat_chart_factory = seat_chart_factory
        self.not_enough_seats_message = not_enough_seats_message
        self.seat_range_separator = seat_range_separator

    @Logger.io
    def process_input(self, input_lines: Sequence[str]) -> Optional[BatchResult]:
        """
        Run one batch.

        Returns:
            None when there is nothing to process, otherwise the rendered
            allocations and the seats left afterwards
        """
        if not input_lines:
            return None

        seat_chart = self.seat_chart_factory()
        self._seed_reservations(seat_chart, input_lines[0])

        seat_ranges = [
            self._render(seat_chart.allocate_block(self._parse_request_size(line)))
            for line in input_lines[1:]
        ]

        Logger.base.info(
            f'[BATCH] Processed {len(seat_ranges)} requests, '
            f'{seat_chart.remaining_seats()} seats remaining'
        )
        return BatchResult(seat_ranges=seat_ranges, seats_remaining=seat_chart.remaining_seats())

    def _seed_reservations(self, seat_chart: SeatChart, seat_codes_line: str) -> None:
        for code in seat_codes_line.split():
            seat = parse_seat_code(code)
            if seat is None:
                Logger.base.warning(f'[BATCH] Skipping invalid seat code {code!r}')
                continue
            seat_chart.reserve(*seat)

    @staticmethod
    def _parse_request_size(line: str) -> Optional[int]:
        try:
            return int(line.strip())
        except ValueError:
            Logger.base.warning(f'[BATCH] Invalid block request {line!r}')
            return None

    def _render(self, allocation: Optional[SeatAllocation]) -> str:
        if allocation is None:
            return self.not_enough_seats_message
        return format_seat_range(allocation, self.seat_range_separator)
