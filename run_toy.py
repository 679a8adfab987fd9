# run_toy.py

import argparse
import logging
import os

import pandas as pd

from hackathon_allocation.config import (
    DEFAULT_SEED,
    LOG_LEVEL_ENV_VAR,
    PDF_BASE_URL,
    NUM_MENTORS_DEFAULT,
    NUM_SUBMISSIONS_DEFAULT,
    NUM_ROOMS_DEFAULT,
    NUM_TEAMS_DEFAULT,
)
from hackathon_allocation.data_generation.toy_dataset import make_toy_hackathon
from hackathon_allocation.validation import (
    validate_mentors,
    validate_submissions,
    validate_rooms,
    validate_teams,
)
from hackathon_allocation.matching.mentor_allocator import allocate_with_summary
from hackathon_allocation.matching.score_matrix import build_score_matrix
from hackathon_allocation.seating.seat_allocator import (
    allocate_seats_with_layouts,
    in_input_order,
)
from hackathon_allocation.seating.diagnostics import (
    analyze_seating_feasibility,
    summarize_seating,
    compare_with_optimum,
)
from hackathon_allocation.export.exporters import (
    mentor_allocations_frame,
    seat_allocations_frame,
    write_exports,
)


def _configure_logging():
    level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if level:
        logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")


def main():
    parser = argparse.ArgumentParser(description="Toy hackathon: mentor + seat allocation")
    parser.add_argument("--mentors", type=int, default=NUM_MENTORS_DEFAULT)
    parser.add_argument("--submissions", type=int, default=NUM_SUBMISSIONS_DEFAULT)
    parser.add_argument("--rooms", type=int, default=NUM_ROOMS_DEFAULT)
    parser.add_argument("--teams", type=int, default=NUM_TEAMS_DEFAULT)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--min-score", type=float, default=None,
                        help="drop mentor allocations below this match score (%%)")
    parser.add_argument("--export", metavar="DIR", default=None,
                        help="write CSV/TSV/JSON results into DIR")
    args = parser.parse_args()

    _configure_logging()

    # ---- Generate toy data ----
    mentors, submissions, rooms, teams = make_toy_hackathon(
        num_mentors=args.mentors,
        num_submissions=args.submissions,
        num_rooms=args.rooms,
        num_teams=args.teams,
        seed=args.seed,
    )

    errors = (
        validate_mentors(mentors)
        + validate_submissions(submissions)
        + validate_rooms(rooms)
        + validate_teams(teams)
    )
    if errors:
        print("=== INPUT ERRORS ===")
        for e in errors:
            print("-", e)
        return

    pd.set_option("display.width", 160)
    pd.set_option("display.max_columns", 20)

    # ============================
    #  MENTOR ALLOCATION
    # ============================
    print("=== MENTORS ===")
    for m in mentors:
        print(f"{m.name} <{m.email}>: {', '.join(m.skills)}")
    print()

    print("=== MENTOR–SUBMISSION MATCH MATRIX (0–1) ===")
    print(build_score_matrix(mentors, submissions).round(2))
    print()

    allocations, summary = allocate_with_summary(
        mentors, submissions, min_score=args.min_score
    )

    print("=== MENTOR ALLOCATIONS ===")
    print(mentor_allocations_frame(allocations, pdf_base_url=None).to_string(index=False))
    print()

    print("=== ALLOCATION SUMMARY ===")
    print(f"- Mentors            : {summary.total_mentors}")
    print(f"- Submissions        : {summary.total_submissions}")
    print(f"- Allocated          : {summary.allocated_submissions}")
    print(f"- Average match score: {summary.average_match_score:.2f}%")
    for email, load in summary.mentor_workload.items():
        print(f"  {email}: {load} submission(s)")
    print()

    # ============================
    #  SEATING
    # ============================
    print("=== ROOMS ===")
    for r in rooms:
        print(f"{r.room_no}: {r.num_rows} rows x {r.seats_per_row} seats")
    print("Team sizes:", [t.team_size for t in teams])
    print()

    diag = analyze_seating_feasibility(rooms, teams)
    print("=== SEATING DIAGNOSTICS ===")
    if diag["messages"]:
        for msg in diag["messages"]:
            print("-", msg)
    else:
        print("- No structural capacity issues detected.")
    print(f"- Seats needed / available: {diag['total_seats_needed']} / {diag['total_capacity']}")
    print(f"- Minimum rows required   : {diag['min_rows_lower_bound']}")
    print("Suggestion:", diag["suggestion"])
    print()

    seat_allocations, layouts = allocate_seats_with_layouts(rooms, teams)

    print("=== SEAT ALLOCATIONS (input order) ===")
    print(seat_allocations_frame(in_input_order(seat_allocations)).to_string(index=False))
    print()

    # ---- Pretty print seating: room × row ----
    for layout in layouts:
        print(f"=== {layout.room_no} ===")
        for row in range(1, layout.num_rows + 1):
            sizes = layout.row_teams(row)
            label = " | ".join(str(s) for s in sizes) or "-"
            print(f"Row {row} [{layout.remaining_seats(row)} free]: {label}")
        print()

    seating = summarize_seating(rooms, seat_allocations, layouts)
    print("=== SEATING SUMMARY ===")
    print(f"- Teams placed    : {seating['allocated_teams']} / {seating['total_teams']}")
    print(f"- Seats used      : {seating['total_seats_used']}")
    print(f"- Rows used       : {seating['rows_used']} ({seating['fragmented_rows']} partially filled)")
    for room_no, u in seating["room_utilization"].items():
        print(f"  {room_no}: {u['used']}/{u['total']} ({u['percentage']:.1f}%)")
    print()

    print("=== BEST-FIT VS EXACT MILP ===")
    cmp = compare_with_optimum(rooms, teams)
    print("Solver status:", cmp["status"])
    print(f"- Best-fit: {cmp['greedy_seated']} seated in {cmp['greedy_rows']} rows")
    if cmp["optimal_rows"] is not None:
        label = "Optimum " if cmp["status"] == "Optimal" else "Best MILP"
        print(f"- {label}: {cmp['optimal_seated']} seated in {cmp['optimal_rows']} rows")
    print()

    if args.export:
        paths = write_exports(args.export, allocations, seat_allocations, pdf_base_url=PDF_BASE_URL)
        print("=== EXPORTED ===")
        for p in paths:
            print("-", p)


if __name__ == "__main__":
    main()
