"""
Unit tests for RowSpanIndex

Tests ordered span lookup and splitting as seats of one row get reserved.
"""

import random

import pytest

from src.service.seating.domain.row_span_index import RowSpanIndex
from src.service.seating.domain.seat_span import SeatSpan


def _as_pairs(index: RowSpanIndex) -> list[list[int]]:
    return [[span.start, span.end] for span in index]


class TestRowSpanIndex:
    @pytest.mark.unit
    def test_full_row(self) -> None:
        index = RowSpanIndex.full_row(11)
        assert _as_pairs(index) == [[0, 10]]
        assert index.free_count() == 11
        assert len(index) == 1

    @pytest.mark.unit
    def test_spans_are_sorted_on_construction(self) -> None:
        index = RowSpanIndex([SeatSpan(6, 10), SeatSpan(0, 2), SeatSpan(4, 4)])
        assert _as_pairs(index) == [[0, 2], [4, 4], [6, 10]]

    @pytest.mark.unit
    def test_find(self) -> None:
        index = RowSpanIndex([SeatSpan(0, 2), SeatSpan(4, 4), SeatSpan(6, 10)])
        assert index.find(0) == SeatSpan(0, 2)
        assert index.find(4) == SeatSpan(4, 4)
        assert index.find(10) == SeatSpan(6, 10)
        assert index.find(3) is None
        assert index.find(5) is None
        assert index.find(-1) is None
        assert index.find(11) is None

    @pytest.mark.unit
    def test_remove_seat_splits_span(self) -> None:
        index = RowSpanIndex.full_row(11)
        assert index.remove_seat(3) is True
        assert index.remove_seat(5) is True
        assert _as_pairs(index) == [[0, 2], [4, 4], [6, 10]]

    @pytest.mark.unit
    def test_remove_last_seat_of_span_drops_it(self) -> None:
        index = RowSpanIndex([SeatSpan(0, 2), SeatSpan(4, 4), SeatSpan(6, 10)])
        assert index.remove_seat(4) is True
        assert _as_pairs(index) == [[0, 2], [6, 10]]
        # Lookup still works after the splice
        assert index.find(6) == SeatSpan(6, 10)

    @pytest.mark.unit
    def test_remove_taken_seat_is_rejected(self) -> None:
        index = RowSpanIndex([SeatSpan(0, 2), SeatSpan(6, 10)])
        assert index.remove_seat(4) is False
        assert _as_pairs(index) == [[0, 2], [6, 10]]

    @pytest.mark.unit
    def test_longest_span(self) -> None:
        assert RowSpanIndex([SeatSpan(0, 2), SeatSpan(6, 10)]).longest_span() == 5
        assert RowSpanIndex().longest_span() == 0

    @pytest.mark.unit
    def test_from_statuses_matches_removals(self) -> None:
        """Any removal order ends up with the same spans a fresh scan would build"""
        cols = 20
        rng = random.Random(7)
        taken = rng.sample(range(cols), 9)

        index = RowSpanIndex.full_row(cols)
        statuses = [False] * cols
        for col in taken:
            index.remove_seat(col)
            statuses[col] = True
            assert index == RowSpanIndex.from_statuses(statuses)

        spans = list(index)
        for left, right in zip(spans, spans[1:]):
            # Never touching, never overlapping
            assert right.start > left.end + 1
        assert index.free_count() == cols - len(taken)
