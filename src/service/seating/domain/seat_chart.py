"""
Seat Chart

Fixed rows x cols grid of seats plus, per row, the spans of free seats.
Block requests are placed as close as possible to the front-center seat and
never touch seats that are already reserved.

Bad input never raises here: out-of-range seats are ignored, invalid or
unsatisfiable block requests return None. A batch of requests can always
carry on after one of them fails.
"""

from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seating.domain.row_span_index import RowSpanIndex
from src.service.seating.domain.seat_allocation import SeatAllocation
from src.service.seating.domain.seat_finder import SeatFinder
from src.service.seating.domain.seat_span import SeatSpan


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@attrs.define
class SeatChart:
    rows: int
    cols: int
    max_seat_request: int
    _grid: list[list[bool]] = attrs.field(init=False, repr=False)
    _row_spans: list[RowSpanIndex] = attrs.field(init=False, repr=False)
    _reserved_count: int = attrs.field(init=False, default=0)
    _finder: SeatFinder = attrs.field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        for name in ('rows', 'cols', 'max_seat_request'):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise DomainError(f'{name} must be a positive integer, got {value!r}')

        self._grid = [[False] * self.cols for _ in range(self.rows)]
        self._row_spans = [RowSpanIndex.full_row(self.cols) for _ in range(self.rows)]
        self._finder = SeatFinder(self.cols)

    @property
    def best_seat(self) -> tuple[int, int]:
        return self._finder.best_seat

    def _is_valid_indices(self, row: Any, col: Any) -> bool:
        return (
            _is_int(row) and _is_int(col) and 0 <= row < self.rows and 0 <= col < self.cols
        )

    def reserve(self, row: int, col: int) -> None:
        """Reserve a single seat; invalid or already reserved seats are left alone."""
        if not self._is_valid_indices(row, col) or self._grid[row][col]:
            return

        self._grid[row][col] = True
        self._reserved_count += 1
        self._row_spans[row].remove_seat(col)

    def is_reserved(self, row: int, col: int) -> Optional[bool]:
        """
        Returns:
            True/False for a real seat, None when the indices are out of the chart
        """
        if not self._is_valid_indices(row, col):
            return None
        return self._grid[row][col]

    def remaining_seats(self) -> int:
        return self.rows * self.cols - self._reserved_count

    def available_spans(self, row: int) -> list[SeatSpan]:
        if not (_is_int(row) and 0 <= row < self.rows):
            return []
        return list(self._row_spans[row])

    def spans_match_grid(self) -> bool:
        """Check every row's span index against spans recomputed from the grid."""
        return all(
            RowSpanIndex.from_statuses(seat_row) == spans
            for seat_row, spans in zip(self._grid, self._row_spans, strict=True)
        )

    @Logger.io
    def allocate_block(self, requested_seats: Optional[int]) -> Optional[SeatAllocation]:
        """
        Find and reserve the best contiguous block of `requested_seats` seats.

        Returns:
            The reserved block, or None when the request is invalid or no row
            has a long enough free span. Nothing is reserved in that case.
        """
        if not _is_int(requested_seats) or not 0 < requested_seats <= self.max_seat_request:
            Logger.base.warning(
                f'[SEAT-CHART] Rejected request for {requested_seats!r} seats '
                f'(max {self.max_seat_request})'
            )
            return None

        best = self._finder.find_best_block(self._row_spans, requested_seats)
        if best is None:
            Logger.base.warning(
                f'[SEAT-CHART] Not enough seats: need {requested_seats}, '
                f'remaining={self.remaining_seats()}'
            )
            return None

        for col in range(best.first_col, best.last_col + 1):
            self.reserve(best.row, col)

        Logger.base.info(
            f'[SEAT-CHART] Allocated {requested_seats} seats | row={best.row} '
            f'cols={best.first_col}-{best.last_col} distance={best.distance}'
        )
        return SeatAllocation(row=best.row, first_col=best.first_col, last_col=best.last_col)
