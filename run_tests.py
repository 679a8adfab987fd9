# run_tests.py
from hackathon_allocation.data_generation.toy_dataset import make_toy_hackathon
from hackathon_allocation.matching.mentor_allocator import allocate_with_summary
from hackathon_allocation.seating.seat_allocator import allocate_seats, in_input_order
from hackathon_allocation.seating.diagnostics import (
    analyze_seating_feasibility,
    compare_with_optimum,
)


def run_test_case(name, num_mentors, num_submissions, num_rooms, num_teams, max_team_size=4):
    print(f"\n{'='*20}\nRUNNING TEST: {name}\n{'='*20}")

    # 1. Generate Data
    mentors, submissions, rooms, teams = make_toy_hackathon(
        num_mentors=num_mentors,
        num_submissions=num_submissions,
        num_rooms=num_rooms,
        num_teams=num_teams,
        max_team_size=max_team_size,
        seed=42,
    )
    print(f"Generated {len(mentors)} mentors, {len(submissions)} submissions, "
          f"{len(rooms)} rooms and {len(teams)} teams.")

    # 2. Mentor allocation
    allocations, summary = allocate_with_summary(mentors, submissions)
    print("\n[DEBUG] Mentor workload:")
    for email, load in summary.mentor_workload.items():
        print(f"  {email}: {load}")
    print(f"  average match score: {summary.average_match_score:.2f}%")

    # 3. Check Feasibility
    diag = analyze_seating_feasibility(rooms, teams)
    if not diag["ok"]:
        print(f"\n[WARN] Not every team can be seated: {diag['messages']}")

    # 4. Seat
    seats = allocate_seats(rooms, teams)
    unplaced = [a for a in in_input_order(seats) if not a.placed]
    print(f"\n[RESULT] Seated {len(seats) - len(unplaced)} of {len(seats)} teams")
    for a in unplaced:
        print(f"  Team #{a.team_index + 1}: {a.message}")

    # 5. Compare with the exact packing
    cmp = compare_with_optimum(rooms, teams)
    print(f"[RESULT] Solver Status: {cmp['status']}")
    if cmp["gap_rows"] is not None:
        print(f"  best-fit rows: {cmp['greedy_rows']}, optimal rows: {cmp['optimal_rows']}")


def main():
    # Test Case 1: Roomy venue
    # Goal: everyone seated, load spread over the mentors.
    run_test_case(
        name="6 Mentors, 12 Submissions, 3 Rooms",
        num_mentors=6,
        num_submissions=12,
        num_rooms=3,
        num_teams=12,
    )

    # Test Case 2: One room, many large teams (Edge Case)
    # Goal: capacity runs out and the leftovers are reported, not dropped.
    run_test_case(
        name="2 Mentors, 20 Submissions, 1 Room",
        num_mentors=2,
        num_submissions=20,
        num_rooms=1,
        num_teams=20,
        max_team_size=6,
    )


if __name__ == "__main__":
    main()
