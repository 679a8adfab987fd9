# hackathon_allocation/seating/room_layout.py
from __future__ import annotations

from typing import List, Tuple

from ..models import Room


class RoomLayout:
    """
    Occupancy grid for one room: `num_rows` rows of `seats_per_row` seats.

    Teams are packed left to right from seat 1 with no gaps inside a row.
    Rows are addressed 1..num_rows.
    """

    def __init__(self, room: Room):
        self.room = room
        # per row: list of team sizes in placement order
        self._rows: List[List[int]] = [[] for _ in range(room.num_rows)]
        self._used: List[int] = [0] * room.num_rows

    @property
    def room_no(self) -> str:
        return self.room.room_no

    @property
    def num_rows(self) -> int:
        return self.room.num_rows

    def capacity_of_row(self) -> int:
        return self.room.seats_per_row

    def _check_row(self, row: int) -> int:
        if not 1 <= row <= self.room.num_rows:
            raise IndexError(
                f"Row {row} out of range for room {self.room.room_no} "
                f"(1..{self.room.num_rows})."
            )
        return row - 1

    def used_seats(self, row: int) -> int:
        return self._used[self._check_row(row)]

    def remaining_seats(self, row: int) -> int:
        return self.room.seats_per_row - self.used_seats(row)

    def can_fit(self, row: int, team_size: int) -> bool:
        return self.used_seats(row) + team_size <= self.room.seats_per_row

    def place(self, row: int, team_size: int) -> int:
        """Record a team in `row` and return the seats left in that row."""
        if team_size < 1:
            raise ValueError(f"Team size must be at least 1, got {team_size}.")
        if not self.can_fit(row, team_size):
            raise ValueError(
                f"Team of size {team_size} does not fit in room {self.room.room_no} "
                f"row {row}: only {self.remaining_seats(row)} seats left."
            )
        i = row - 1
        self._rows[i].append(team_size)
        self._used[i] += team_size
        return self.room.seats_per_row - self._used[i]

    def row_teams(self, row: int) -> List[int]:
        return list(self._rows[self._check_row(row)])

    def seat_ranges(self, row: int) -> List[Tuple[int, int]]:
        """(first_seat, last_seat) per team in the row, 1-based and inclusive."""
        ranges: List[Tuple[int, int]] = []
        start = 1
        for size in self.row_teams(row):
            ranges.append((start, start + size - 1))
            start += size
        return ranges

    @property
    def used_total(self) -> int:
        return sum(self._used)

    @property
    def rows_used(self) -> int:
        return sum(1 for u in self._used if u > 0)

    @property
    def fragmented_rows(self) -> int:
        """Rows holding at least one team but not full."""
        return sum(1 for u in self._used if 0 < u < self.room.seats_per_row)

    def __repr__(self) -> str:
        return (
            f"RoomLayout({self.room.room_no}, {self.used_total}/"
            f"{self.room.total_capacity} seats used)"
        )
