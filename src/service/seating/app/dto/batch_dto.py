"""
Batch DTOs

Result of running one batch of seating commands.
"""

import attrs


@attrs.define
class BatchResult:
    seat_ranges: list[str]  # One rendered line per block request, in input order
    seats_remaining: int
