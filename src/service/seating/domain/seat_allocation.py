from collections.abc import Iterator

import attrs


@attrs.define(frozen=True)
class SeatAllocation:
    """A reserved block: one row, columns first_col..last_col inclusive."""

    row: int
    first_col: int
    last_col: int

    @property
    def size(self) -> int:
        return self.last_col - self.first_col + 1

    def columns(self) -> range:
        return range(self.first_col, self.last_col + 1)

    def __iter__(self) -> Iterator[int]:
        # Unpacks as (row, first_col, last_col)
        return iter((self.row, self.first_col, self.last_col))
