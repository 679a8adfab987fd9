# hackathon_allocation/seating/solve.py
from __future__ import annotations

from typing import List, Tuple, Dict

import pulp

from ..models import Room, Team
from ..config import MILP_TIME_LIMIT_SECONDS
from .milp_model import build_row_slots, build_row_packing_model


def solve_min_rows(
    rooms: List[Room],
    teams: List[Team],
    time_limit: int = MILP_TIME_LIMIT_SECONDS,
) -> Tuple[str, Dict[int, Tuple[str, int]]]:
    """
    Solve the row-packing MILP and return (status, assignment).

    assignment maps team index (position in `teams`) -> (room_no, row).
    Teams the optimum leaves out are absent from the mapping. status is
    "Feasible" when the time limit hit before optimality was proven.
    """
    slots = build_row_slots(rooms)
    sizes = [t.team_size for t in teams]

    if not slots or not sizes:
        return "Optimal", {}

    prob, x, _ = build_row_packing_model(sizes, slots)

    solver = pulp.PULP_CBC_CMD(msg=False, timeLimit=time_limit)
    prob.solve(solver)

    status = pulp.LpStatus[prob.status]
    # CBC stopped by timeLimit with an incumbent still reports "Optimal"
    if status == "Optimal" and prob.sol_status == pulp.LpSolutionIntegerFeasible:
        status = "Feasible"

    assignment: Dict[int, Tuple[str, int]] = {}
    if status in ("Optimal", "Feasible"):
        for (i, s), var in x.items():
            val = var.varValue
            if val is not None and val > 0.5:
                room_no, row, _ = slots[s]
                assignment[i] = (room_no, row)

    return status, assignment
