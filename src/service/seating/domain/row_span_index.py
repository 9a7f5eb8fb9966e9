"""
Row Span Index

Free seat spans of a single row, ordered by start column.

Example (11 seats, seats 3 and 5 reserved):
    [[0,2],[4,4],[6,10]]

Lookup of the span holding a column is a binary search over the span starts,
so reserving a seat costs O(log spans) plus the list splice.
"""

from bisect import bisect_right
from collections.abc import Iterator
from typing import Optional

from src.service.seating.domain.seat_span import SeatSpan, compute_spans_from_statuses


class RowSpanIndex:
    def __init__(self, spans: Optional[list[SeatSpan]] = None) -> None:
        self._spans: list[SeatSpan] = sorted(spans or [], key=lambda span: span.start)
        # Kept in step with _spans for bisect
        self._starts: list[int] = [span.start for span in self._spans]

    @classmethod
    def full_row(cls, cols: int) -> 'RowSpanIndex':
        return cls([SeatSpan(0, cols - 1)])

    @classmethod
    def from_statuses(cls, seat_statuses: list[bool]) -> 'RowSpanIndex':
        return cls(compute_spans_from_statuses(seat_statuses))

    def __iter__(self) -> Iterator[SeatSpan]:
        return iter(self._spans)

    def __len__(self) -> int:
        return len(self._spans)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RowSpanIndex):
            return NotImplemented
        return self._spans == other._spans

    def __repr__(self) -> str:
        return f'RowSpanIndex({[[span.start, span.end] for span in self._spans]})'

    def _locate(self, col: int) -> int:
        """Position of the span containing col, or -1."""
        pos = bisect_right(self._starts, col) - 1
        if pos >= 0 and self._spans[pos].contains(col):
            return pos
        return -1

    def find(self, col: int) -> Optional[SeatSpan]:
        pos = self._locate(col)
        return self._spans[pos] if pos >= 0 else None

    def remove_seat(self, col: int) -> bool:
        """
        Take a single column out of its span.

        Returns:
            False if the column is not free in this index
        """
        pos = self._locate(col)
        if pos < 0:
            return False

        remainders = self._spans[pos].split_around(col)
        self._spans[pos : pos + 1] = remainders
        self._starts[pos : pos + 1] = [span.start for span in remainders]
        return True

    def free_count(self) -> int:
        return sum(span.length for span in self._spans)

    def longest_span(self) -> int:
        return max((span.length for span in self._spans), default=0)
