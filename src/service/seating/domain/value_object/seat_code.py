"""
Seat Code

Human-readable seat labels: row and column, 1-indexed, as R<row>C<col>.

Examples:
    (0, 0)  ↔ 'R1C1'
    (2, 10) ↔ 'R3C11'
"""

import re
from typing import Any, Optional

from src.service.seating.domain.seat_allocation import SeatAllocation


SEAT_CODE_PATTERN = re.compile(r'R(\d+)C(\d+)', re.ASCII)


def format_seat_code(row: Any, col: Any) -> Optional[str]:
    """0-indexed (row, col) → 'R1C1'; None for negative or non-integer indices."""
    for value in (row, col):
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            return None
    return f'R{row + 1}C{col + 1}'


def parse_seat_code(code: Any) -> Optional[tuple[int, int]]:
    """'R1C1' → (0, 0); None when the code does not match."""
    if not isinstance(code, str):
        return None
    match = SEAT_CODE_PATTERN.fullmatch(code)
    if not match:
        return None
    return int(match.group(1)) - 1, int(match.group(2)) - 1


def format_seat_range(allocation: SeatAllocation, separator: str = ' - ') -> str:
    """
    Render a reserved block.

    Examples:
        SeatAllocation(0, 1, 1) → 'R1C2'
        SeatAllocation(0, 1, 2) → 'R1C2 - R1C3'
    """
    first = format_seat_code(allocation.row, allocation.first_col)
    if allocation.first_col == allocation.last_col:
        return f'{first}'
    return f'{first}{separator}{format_seat_code(allocation.row, allocation.last_col)}'
