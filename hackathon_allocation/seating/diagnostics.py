# hackathon_allocation/seating/diagnostics.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..models import Room, Team, SeatAllocation
from .room_layout import RoomLayout
from .seat_allocator import allocate_seats_with_layouts
from .solve import solve_min_rows


def calculate_total_capacity(rooms: List[Room]) -> int:
    return sum(r.total_capacity for r in rooms)


def _ceil_div(a: int, b: int) -> int:
    return (a + b - 1) // b if b > 0 else 0


def analyze_seating_feasibility(
    rooms: List[Room],
    teams: List[Team],
) -> Dict[str, Any]:
    """
    Structural checks before running the seat allocator.

    Returns a dict with:
      - 'ok': bool
      - 'messages': list[str] (human-readable diagnostics)
      - 'suggestion': str

      - 'total_capacity': int
      - 'total_seats_needed': int
      - 'max_row_capacity': int
      - 'total_rows': int
      - 'oversized_teams': List[int]  (input indices of teams wider than every row)
      - 'min_rows_lower_bound': int   (ceil(seats needed / widest row))

    'ok' only means no obvious blocker was found; best-fit can still leave
    teams unplaced when rows fragment.
    """
    messages: List[str] = []

    total_capacity = calculate_total_capacity(rooms)
    total_needed = sum(t.team_size for t in teams)
    max_row_capacity = max((r.seats_per_row for r in rooms), default=0)
    total_rows = sum(r.num_rows for r in rooms)

    if not rooms:
        messages.append("No rooms configured.")

    # ---------- 1. Teams wider than any row ----------
    oversized = [i for i, t in enumerate(teams) if t.team_size > max_row_capacity]
    for i in oversized:
        messages.append(
            f"Team #{i + 1} has {teams[i].team_size} members but the widest row "
            f"has {max_row_capacity} seats. Teams cannot be split across rows."
        )

    # ---------- 2. Global seat count ----------
    if total_needed > total_capacity:
        messages.append(
            f"{total_needed} seats needed but only {total_capacity} available "
            f"across {len(rooms)} room(s)."
        )

    # ---------- 3. Row count lower bound ----------
    min_rows = _ceil_div(total_needed, max_row_capacity)
    if rooms and min_rows > total_rows:
        messages.append(
            f"At least {min_rows} rows are needed but only {total_rows} exist."
        )

    ok = len(messages) == 0

    if ok:
        suggestion = "No structural capacity issues detected."
    else:
        suggestion = "Seating structurally infeasible. "
        if oversized:
            suggestion += "Add a room with wider rows or split oversized teams upstream. "
        if total_needed > total_capacity or (rooms and min_rows > total_rows):
            suggestion += "Add rooms or rows, or reduce the number of teams."

    return {
        "ok": ok,
        "messages": messages,
        "suggestion": suggestion.strip(),
        "total_capacity": total_capacity,
        "total_seats_needed": total_needed,
        "max_row_capacity": max_row_capacity,
        "total_rows": total_rows,
        "oversized_teams": oversized,
        "min_rows_lower_bound": min_rows,
    }


def summarize_seating(
    rooms: List[Room],
    allocations: List[SeatAllocation],
    layouts: Optional[List[RoomLayout]] = None,
) -> Dict[str, Any]:
    """
    Totals and per-room utilization for a finished allocation:
      - 'total_teams', 'allocated_teams', 'unallocated_teams', 'total_seats_used'
      - 'room_utilization': {room_no: {'used', 'total', 'percentage'}}
      - 'rows_used', 'fragmented_rows' (only when layouts are given)
    """
    placed = [a for a in allocations if a.placed]

    utilization: Dict[str, Dict[str, float]] = {
        r.room_no: {"used": 0, "total": r.total_capacity, "percentage": 0.0}
        for r in rooms
    }
    for a in placed:
        entry = utilization.setdefault(a.room_no, {"used": 0, "total": 0, "percentage": 0.0})
        entry["used"] += a.team_size

    for entry in utilization.values():
        entry["percentage"] = (
            round(100.0 * entry["used"] / entry["total"], 2) if entry["total"] else 0.0
        )

    summary: Dict[str, Any] = {
        "total_teams": len(allocations),
        "allocated_teams": len(placed),
        "unallocated_teams": len(allocations) - len(placed),
        "total_seats_used": sum(a.team_size for a in placed),
        "room_utilization": utilization,
    }

    if layouts is not None:
        summary["rows_used"] = sum(l.rows_used for l in layouts)
        summary["fragmented_rows"] = sum(l.fragmented_rows for l in layouts)

    return summary


def compare_with_optimum(
    rooms: List[Room],
    teams: List[Team],
    time_limit: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Run best-fit-decreasing and the exact MILP side by side.

    Returns:
      - 'status': solver status string ("Feasible" = time limit hit, optimum unproven)
      - 'greedy_seated' / 'optimal_seated': people seated
      - 'greedy_rows' / 'optimal_rows': rows holding at least one team
      - 'gap_rows': greedy_rows - optimal_rows (None if solver failed)
    """
    allocations, layouts = allocate_seats_with_layouts(rooms, teams)
    greedy_seated = sum(a.team_size for a in allocations if a.placed)
    greedy_rows = sum(l.rows_used for l in layouts)

    kwargs = {} if time_limit is None else {"time_limit": time_limit}
    status, assignment = solve_min_rows(rooms, teams, **kwargs)

    if status not in ("Optimal", "Feasible"):
        return {
            "status": status,
            "greedy_seated": greedy_seated,
            "greedy_rows": greedy_rows,
            "optimal_seated": None,
            "optimal_rows": None,
            "gap_rows": None,
        }

    optimal_seated = sum(teams[i].team_size for i in assignment)
    optimal_rows = len(set(assignment.values()))

    return {
        "status": status,
        "greedy_seated": greedy_seated,
        "greedy_rows": greedy_rows,
        "optimal_seated": optimal_seated,
        "optimal_rows": optimal_rows,
        "gap_rows": greedy_rows - optimal_rows,
    }
