from typing import Optional

import attrs


@attrs.define(frozen=True)
class SeatSpan:
    """Contiguous run of free columns in one row, both ends inclusive."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def contains(self, col: int) -> bool:
        return self.start <= col <= self.end

    def split_around(self, col: int) -> list['SeatSpan']:
        """
        Remainders of this span once `col` is taken out.

        Returns zero, one or two spans (left then right); empty remainders are
        omitted.

        Examples:
            [0,10] - 5  → [[0,4],[6,10]]
            [0,10] - 0  → [[1,10]]
            [4,4]  - 4  → []
        """
        remainders: list[SeatSpan] = []
        if col > self.start:
            remainders.append(SeatSpan(self.start, col - 1))
        if col < self.end:
            remainders.append(SeatSpan(col + 1, self.end))
        return remainders


def compute_spans_from_statuses(seat_statuses: list[bool]) -> list[SeatSpan]:
    """
    Compute maximal free spans from one row of seat statuses.

    Args:
        seat_statuses: One entry per column, True when the seat is reserved

    Returns:
        Spans in left-to-right order
    """
    spans: list[SeatSpan] = []
    start: Optional[int] = None

    for i, reserved in enumerate(seat_statuses):
        if not reserved:
            if start is None:
                start = i
        elif start is not None:
            spans.append(SeatSpan(start, i - 1))
            start = None

    # Don't forget the last span
    if start is not None:
        spans.append(SeatSpan(start, len(seat_statuses) - 1))

    return spans
