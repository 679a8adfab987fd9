# hackathon_allocation/seating/milp_model.py
from __future__ import annotations

from typing import List, Dict, Tuple
import pulp

# (room_no, row, seats_per_row)
Slot = Tuple[str, int, int]


def build_row_slots(rooms) -> List[Slot]:
    """Every (room, row) pair in room-declaration order, rows 1-based."""
    return [
        (room.room_no, row, room.seats_per_row)
        for room in rooms
        for row in range(1, room.num_rows + 1)
    ]


def build_row_packing_model(
    team_sizes: List[int],
    slots: List[Slot],
) -> Tuple[
    pulp.LpProblem,
    Dict[Tuple[int, int], pulp.LpVariable],
    Dict[int, pulp.LpVariable],
]:
    """
    Exact packing of whole teams into rows.

    Variables:
        x[i, s] = 1 if team i sits in slot s (only created when team i fits s)
        y[s]    = 1 if slot s holds at least one team

    Rules encoded:

      1) A team sits in at most one row:
           ∀i: sum_s x[i,s] <= 1

      2) Row capacity, and a row counts as used when anyone sits in it:
           ∀s: sum_i size_i * x[i,s] <= cap_s * y[s]

    Objective (lexicographic via a big weight):
        maximize  W * sum_{i,s} size_i * x[i,s]  -  sum_s y[s]
    with W = #slots + 1, so seating one more person always beats
    saving every row.
    """
    prob = pulp.LpProblem("Hackathon_Row_Packing", pulp.LpMaximize)

    # ---------- Decision variables ----------
    x: Dict[Tuple[int, int], pulp.LpVariable] = {}
    for i, size in enumerate(team_sizes):
        for s, (_, _, cap) in enumerate(slots):
            if size <= cap:
                x[(i, s)] = pulp.LpVariable(f"x_{i}_{s}", cat="Binary")

    y: Dict[int, pulp.LpVariable] = {
        s: pulp.LpVariable(f"y_{s}", cat="Binary") for s in range(len(slots))
    }

    # ---------- Objective ----------
    weight = len(slots) + 1
    prob += (
        weight * pulp.lpSum(team_sizes[i] * var for (i, _), var in x.items())
        - pulp.lpSum(y.values())
    ), "Seat_people_then_save_rows"

    # ---------- Constraints ----------

    # (1) at most one row per team
    for i in range(len(team_sizes)):
        options = [x[(i, s)] for s in range(len(slots)) if (i, s) in x]
        if options:
            prob += pulp.lpSum(options) <= 1, f"OneRow_team_{i}"

    # (2) row capacity linked to row usage
    for s, (_, _, cap) in enumerate(slots):
        occupants = [
            team_sizes[i] * x[(i, s)] for i in range(len(team_sizes)) if (i, s) in x
        ]
        prob += pulp.lpSum(occupants) <= cap * y[s], f"RowCapacity_slot_{s}"

    return prob, x, y
