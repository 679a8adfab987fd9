# run_interactive.py

from __future__ import annotations

from typing import List

from hackathon_allocation.models import Room, Team
from hackathon_allocation.validation import validate_rooms, validate_teams
from hackathon_allocation.seating.seat_allocator import allocate_seats, in_input_order
from hackathon_allocation.seating.diagnostics import (
    analyze_seating_feasibility,
    summarize_seating,
)


def _ask_int(prompt: str) -> int | None:
    raw = input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        print(f"'{raw}' is not a whole number.")
        return None


def _ask_room() -> Room | None:
    room_no = input("Room number: ").strip()
    seats = _ask_int("Seats per row: ")
    rows = _ask_int("Number of rows: ")
    if seats is None or rows is None:
        return None
    return Room(room_no=room_no, seats_per_row=seats, num_rows=rows)


def _ask_teams() -> List[Team]:
    raw = input("Team sizes (comma separated): ").strip()
    teams: List[Team] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            teams.append(Team(team_size=int(part)))
        except ValueError:
            print(f"Skipping '{part}': not a whole number.")
    return teams


def main():
    rooms: List[Room] = []
    teams: List[Team] = []

    print("Enter the first room.")
    room = _ask_room()
    if room is not None:
        rooms.append(room)
    teams = _ask_teams()

    while True:
        print("\n========== SESSION ==========")
        for r in rooms:
            print(f"- {r.room_no}: {r.num_rows} rows x {r.seats_per_row} seats")
        print("- Team sizes:", [t.team_size for t in teams])

        errors = validate_rooms(rooms) + validate_teams(teams)
        if errors:
            print("\n=== INPUT ERRORS ===")
            for e in errors:
                print("-", e)

        diag = analyze_seating_feasibility(rooms, teams)
        print("\n=== DIAGNOSTICS ===")
        if diag["messages"]:
            for msg in diag["messages"]:
                print("-", msg)
        else:
            print("- No structural capacity issues detected.")
        print("Suggestion:", diag["suggestion"])

        print(
            "\nChoose an action:\n"
            "  1) Add a room\n"
            "  2) Remove a room\n"
            "  3) Replace team sizes\n"
            "  4) Allocate seats\n"
            "  5) Abort\n"
        )
        choice = input("Your choice [1-5]: ").strip()

        if choice == "1":
            room = _ask_room()
            if room is not None:
                rooms.append(room)

        elif choice == "2":
            room_no = input("Room number to remove: ").strip()
            before = len(rooms)
            rooms = [r for r in rooms if r.room_no != room_no]
            if len(rooms) == before:
                print(f"No room '{room_no}'.")

        elif choice == "3":
            teams = _ask_teams()

        elif choice == "4":
            if errors:
                print("Fix the input errors above before allocating.")
                continue

            allocations = allocate_seats(rooms, teams)
            print("\n=== SEAT ALLOCATIONS ===")
            for a in in_input_order(allocations):
                if a.placed:
                    print(
                        f"Team #{a.team_index + 1} ({a.team_size}): room {a.room_no}, "
                        f"row {a.row}, {a.remaining_seats} seat(s) left in row"
                    )
                else:
                    print(f"Team #{a.team_index + 1} ({a.team_size}): {a.message}")

            summary = summarize_seating(rooms, allocations)
            print(
                f"\nPlaced {summary['allocated_teams']} of {summary['total_teams']} teams, "
                f"{summary['total_seats_used']} seats used."
            )
            for room_no, u in summary["room_utilization"].items():
                print(f"  {room_no}: {u['used']}/{u['total']} ({u['percentage']:.1f}%)")
            return

        elif choice == "5":
            print("Aborting.")
            return

        else:
            print("Invalid choice, please select 1–5.")


if __name__ == "__main__":
    main()
