# hackathon_allocation/seating/seat_allocator.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..models import Room, Team, SeatAllocation
from .room_layout import RoomLayout

logger = logging.getLogger(__name__)


def teams_from_sizes(sizes: Iterable[int]) -> List[Team]:
    return [Team(team_size=int(s)) for s in sizes]


def _best_fit_slot(
    layouts: List[RoomLayout],
    team_size: int,
) -> Optional[Tuple[RoomLayout, int]]:
    """
    Tightest (room, row) that still fits `team_size`.
    Scans rooms in declaration order, rows in order; the first slot wins ties.
    """
    best: Optional[Tuple[RoomLayout, int]] = None
    best_remaining = None

    for layout in layouts:
        for row in range(1, layout.num_rows + 1):
            remaining = layout.remaining_seats(row)
            if remaining < team_size:
                continue
            if best_remaining is None or remaining < best_remaining:
                best = (layout, row)
                best_remaining = remaining
                if remaining == team_size:
                    # exact fit cannot be beaten
                    return best

    return best


def _unplaced_message(team_size: int, max_row_capacity: int) -> str:
    if team_size > max_row_capacity:
        return f"Team of size {team_size} exceeds all available row capacities"
    return f"No remaining capacity for team of size {team_size}"


def allocate_seats_with_layouts(
    rooms: List[Room],
    teams: List[Team],
) -> Tuple[List[SeatAllocation], List[RoomLayout]]:
    """
    Best-fit-decreasing packing of teams into room rows.

      1) teams sorted largest first (stable: equal sizes keep input order)
      2) each team goes to the row with the smallest remaining seats
         that is still >= team size, across all rooms
      3) a team that fits nowhere gets a record with room_no=None

    A team is never split across rows. Records come back in processing
    order; `team_index` holds each team's position in `teams`.
    """
    layouts = [RoomLayout(room) for room in rooms]
    max_row_capacity = max((r.seats_per_row for r in rooms), default=0)

    ordered = sorted(enumerate(teams), key=lambda it: it[1].team_size, reverse=True)

    allocations: List[SeatAllocation] = []
    for idx, team in ordered:
        slot = _best_fit_slot(layouts, team.team_size)

        if slot is None:
            message = _unplaced_message(team.team_size, max_row_capacity)
            logger.warning("Team #%d (%s): %s", idx, team.team_id or "-", message)
            allocations.append(
                SeatAllocation(
                    team_size=team.team_size,
                    room_no=None,
                    row=None,
                    remaining_seats=0,
                    message=message,
                    team_id=team.team_id,
                    team_index=idx,
                )
            )
            continue

        layout, row = slot
        remaining = layout.place(row, team.team_size)
        logger.debug(
            "Team #%d size %d -> room %s row %d (%d left)",
            idx, team.team_size, layout.room_no, row, remaining,
        )
        allocations.append(
            SeatAllocation(
                team_size=team.team_size,
                room_no=layout.room_no,
                row=row,
                remaining_seats=remaining,
                message=f"Allocated to room {layout.room_no}, row {row}",
                team_id=team.team_id,
                team_index=idx,
            )
        )

    return allocations, layouts


def allocate_seats(rooms: List[Room], teams: List[Team]) -> List[SeatAllocation]:
    allocations, _ = allocate_seats_with_layouts(rooms, teams)
    return allocations


def in_input_order(allocations: List[SeatAllocation]) -> List[SeatAllocation]:
    return sorted(allocations, key=lambda a: a.team_index)
