"""
Seat Finder

Placement policy for block requests: where a run of N seats goes inside a free
span, how far that run is from the best seat, and which run wins across the
whole chart.

The best seat is front-center: row 0, column round(cols / 2) - 1, with halves
rounded up.
"""

from collections.abc import Iterable
from typing import Optional

import attrs

from src.service.seating.domain.seat_span import SeatSpan


BEST_SEAT_ROW = 0


def round_half_up(numerator: int, denominator: int = 2) -> int:
    """round(numerator / denominator) with .5 going up, for non-negative input."""
    return (2 * numerator + denominator) // (2 * denominator)


@attrs.define(frozen=True)
class SeatCandidate:
    row: int
    first_col: int
    last_col: int
    distance: int


class SeatFinder:
    def __init__(self, cols: int) -> None:
        self.best_col = round_half_up(cols) - 1

    @property
    def best_seat(self) -> tuple[int, int]:
        return BEST_SEAT_ROW, self.best_col

    def _closest_col(self, start: int, end: int) -> int:
        # Ties go to end
        return end if abs(self.best_col - start) >= abs(self.best_col - end) else start

    def _farthest_col(self, start: int, end: int) -> int:
        # Ties go to start
        return start if abs(self.best_col - start) >= abs(self.best_col - end) else end

    def place_in_span(self, span: SeatSpan, quantity: int) -> tuple[int, int]:
        """
        Pick the run of `quantity` seats inside `span` closest to the best column.

        Caller guarantees span.length >= quantity.

        Returns:
            (first_col, last_col) of the run
        """
        if span.length == quantity:
            return span.start, span.end

        if span.contains(self.best_col):
            # Centre on the best column, leaning left, limited by the span start
            seats_to_left = min(round_half_up(quantity), self.best_col - span.start + 1)
            seats_to_right = quantity - seats_to_left
            last_col = self.best_col + seats_to_right
            if last_col > span.end:
                # Right side would run into a reserved seat; slide back inside the span
                return span.end - quantity + 1, span.end
            return self.best_col - seats_to_left + 1, last_col

        if self._closest_col(span.start, span.end) == span.start:
            return span.start, span.start + quantity - 1
        return span.end - quantity + 1, span.end

    def placement_distance(self, row: int, first_col: int, last_col: int) -> int:
        """Manhattan distance from the best seat to the far end of the run."""
        far_col = self._farthest_col(first_col, last_col)
        return abs(row - BEST_SEAT_ROW) + abs(far_col - self.best_col)

    @staticmethod
    def pick_better(
        current: Optional[SeatCandidate], candidate: SeatCandidate
    ) -> SeatCandidate:
        """Lower distance wins; on a tie the front row wins, then the one found first."""
        if current is None:
            return candidate
        if current.distance == candidate.distance:
            return current if current.row <= candidate.row else candidate
        return current if current.distance < candidate.distance else candidate

    def find_best_block(
        self, rows_of_spans: Iterable[Iterable[SeatSpan]], quantity: int
    ) -> Optional[SeatCandidate]:
        """
        Scan every span of every row for the best run of `quantity` seats.

        Args:
            rows_of_spans: Free spans per row, row 0 first
            quantity: Seats wanted, already validated positive

        Returns:
            Best candidate, or None if no span is long enough
        """
        best: Optional[SeatCandidate] = None

        for row, spans in enumerate(rows_of_spans):
            for span in spans:
                if span.length < quantity:
                    continue
                first_col, last_col = self.place_in_span(span, quantity)
                candidate = SeatCandidate(
                    row=row,
                    first_col=first_col,
                    last_col=last_col,
                    distance=self.placement_distance(row, first_col, last_col),
                )
                best = self.pick_better(best, candidate)

        return best
