"""
Unit tests for ProcessBatchUseCase

Tests seeding, per-line allocation rendering and the empty-input result.
"""

from unittest.mock import MagicMock

import pytest

from src.service.seating.app.command.process_batch_use_case import ProcessBatchUseCase
from src.service.seating.app.dto import BatchResult
from src.service.seating.domain.seat_allocation import SeatAllocation
from src.service.seating.domain.seat_chart import SeatChart
from test.test_constants import (
    INITIAL_SEAT_CODES,
    MAX_SEAT_REQUEST,
    NOT_ENOUGH_SEATS_MESSAGE,
    SEATING_COLS,
    SEATING_ROWS,
    TOTAL_SEATS,
)


def _make_chart() -> SeatChart:
    return SeatChart(SEATING_ROWS, SEATING_COLS, MAX_SEAT_REQUEST)


@pytest.fixture
def use_case() -> ProcessBatchUseCase:
    return ProcessBatchUseCase(
        seat_chart_factory=_make_chart,
        not_enough_seats_message=NOT_ENOUGH_SEATS_MESSAGE,
    )


class TestProcessInput:
    @pytest.mark.unit
    def test_empty_input_yields_no_result(self, use_case: ProcessBatchUseCase) -> None:
        assert use_case.process_input([]) is None

    @pytest.mark.unit
    def test_reference_batch(self, use_case: ProcessBatchUseCase) -> None:
        input_lines = [INITIAL_SEAT_CODES, '3', '3', '3', '1', '10']

        result = use_case.process_input(input_lines)

        assert result == BatchResult(
            seat_ranges=[
                'R1C7 - R1C9',
                'R2C4 - R2C6',
                'R3C5 - R3C7',
                'R1C5',
                NOT_ENOUGH_SEATS_MESSAGE,
            ],
            seats_remaining=17,
        )

    @pytest.mark.unit
    def test_seed_only(self, use_case: ProcessBatchUseCase) -> None:
        result = use_case.process_input([INITIAL_SEAT_CODES])
        assert result == BatchResult(seat_ranges=[], seats_remaining=TOTAL_SEATS - 6)

    @pytest.mark.unit
    def test_empty_seed_line(self, use_case: ProcessBatchUseCase) -> None:
        result = use_case.process_input(['', '2'])
        assert result == BatchResult(seat_ranges=['R1C6 - R1C7'], seats_remaining=TOTAL_SEATS - 2)

    @pytest.mark.unit
    def test_invalid_seat_codes_are_skipped(self, use_case: ProcessBatchUseCase) -> None:
        result = use_case.process_input(['R1C1 junk R0C0 R9C9 R1C2', '1'])
        # Only R1C1 and R1C2 are real seats
        assert result is not None
        assert result.seats_remaining == TOTAL_SEATS - 3

    @pytest.mark.unit
    @pytest.mark.parametrize('line', ['abc', '', '0', '-2', '11', '2.5'])
    def test_invalid_requests_render_sentinel(
        self, use_case: ProcessBatchUseCase, line: str
    ) -> None:
        result = use_case.process_input(['', line])
        assert result == BatchResult(
            seat_ranges=[NOT_ENOUGH_SEATS_MESSAGE], seats_remaining=TOTAL_SEATS
        )

    @pytest.mark.unit
    def test_request_line_whitespace_is_ignored(self, use_case: ProcessBatchUseCase) -> None:
        result = use_case.process_input(['', ' 1 '])
        assert result == BatchResult(seat_ranges=['R1C6'], seats_remaining=TOTAL_SEATS - 1)

    @pytest.mark.unit
    def test_each_batch_gets_a_fresh_chart(self) -> None:
        chart = MagicMock(spec=SeatChart)
        chart.allocate_block.return_value = SeatAllocation(0, 4, 6)
        chart.remaining_seats.return_value = 30
        factory = MagicMock(return_value=chart)
        use_case = ProcessBatchUseCase(
            seat_chart_factory=factory,
            not_enough_seats_message=NOT_ENOUGH_SEATS_MESSAGE,
            seat_range_separator='-',
        )

        result = use_case.process_input(['R1C1', '3'])

        factory.assert_called_once_with()
        chart.reserve.assert_called_once_with(0, 0)
        chart.allocate_block.assert_called_once_with(3)
        assert result == BatchResult(seat_ranges=['R1C5-R1C7'], seats_remaining=30)
