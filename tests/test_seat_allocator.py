# tests/test_seat_allocator.py
import unittest
import sys
import os
from collections import defaultdict

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hackathon_allocation.models import Room, Team
from hackathon_allocation.seating.seat_allocator import (
    allocate_seats,
    allocate_seats_with_layouts,
    in_input_order,
    teams_from_sizes,
)
from hackathon_allocation.data_generation.toy_dataset import create_rooms, create_teams


class TestSeatAllocator(unittest.TestCase):

    def assert_capacity_respected(self, rooms, allocations):
        seats = {r.room_no: r.seats_per_row for r in rooms}
        used = defaultdict(int)
        for a in allocations:
            if a.placed:
                used[(a.room_no, a.row)] += a.team_size
        for (room_no, row), total in used.items():
            self.assertLessEqual(
                total, seats[room_no], f"{room_no} row {row} holds {total} people"
            )

    def test_best_fit_fills_rows_exactly(self):
        rooms = [Room(room_no="Room1", seats_per_row=4, num_rows=2)]
        allocations = allocate_seats(rooms, teams_from_sizes([4, 3, 1]))

        self.assertEqual(
            [(a.team_size, a.room_no, a.row, a.remaining_seats) for a in allocations],
            [(4, "Room1", 1, 0), (3, "Room1", 2, 1), (1, "Room1", 2, 0)],
        )

    def test_oversized_team_is_never_placed(self):
        rooms = [Room(room_no="R1", seats_per_row=4, num_rows=3)]
        allocations = allocate_seats(rooms, teams_from_sizes([5]))

        self.assertEqual(len(allocations), 1)
        self.assertIsNone(allocations[0].room_no)
        self.assertIsNone(allocations[0].row)
        self.assertFalse(allocations[0].placed)
        self.assertIn("exceeds all available row capacities", allocations[0].message)

    def test_oversized_for_every_room(self):
        rooms = [
            Room(room_no="R1", seats_per_row=4, num_rows=3),
            Room(room_no="R2", seats_per_row=6, num_rows=1),
        ]
        allocations = allocate_seats(rooms, teams_from_sizes([7, 2]))
        by_size = {a.team_size: a for a in allocations}
        self.assertIsNone(by_size[7].room_no)
        self.assertIsNotNone(by_size[2].room_no)

    def test_full_rooms_report_no_capacity(self):
        rooms = [Room(room_no="R1", seats_per_row=2, num_rows=1)]
        allocations = allocate_seats(rooms, teams_from_sizes([2, 2]))

        self.assertTrue(allocations[0].placed)
        self.assertFalse(allocations[1].placed)
        self.assertIn("No remaining capacity", allocations[1].message)

    def test_tightest_row_wins_over_first_row(self):
        rooms = [
            Room(room_no="Big", seats_per_row=6, num_rows=1),
            Room(room_no="Small", seats_per_row=3, num_rows=1),
        ]
        allocations = allocate_seats(rooms, teams_from_sizes([3]))
        self.assertEqual(allocations[0].room_no, "Small")
        self.assertEqual(allocations[0].remaining_seats, 0)

    def test_partially_filled_row_preferred(self):
        rooms = [Room(room_no="R1", seats_per_row=5, num_rows=2)]
        allocations = allocate_seats(rooms, teams_from_sizes([3, 2, 2]))

        self.assertEqual(
            [(a.team_size, a.row, a.remaining_seats) for a in allocations],
            [(3, 1, 2), (2, 1, 0), (2, 2, 3)],
        )

    def test_equal_slots_keep_declaration_order(self):
        rooms = [
            Room(room_no="A", seats_per_row=4, num_rows=2),
            Room(room_no="B", seats_per_row=4, num_rows=2),
        ]
        allocations = allocate_seats(rooms, teams_from_sizes([1]))
        self.assertEqual((allocations[0].room_no, allocations[0].row), ("A", 1))

    def test_one_record_per_team(self):
        rooms = [Room(room_no="R1", seats_per_row=3, num_rows=1)]
        teams = teams_from_sizes([1, 5, 2, 3, 1])
        allocations = allocate_seats(rooms, teams)
        self.assertEqual(len(allocations), len(teams))
        self.assertEqual(sorted(a.team_index for a in allocations), [0, 1, 2, 3, 4])

    def test_capacity_invariant_on_generated_inputs(self):
        for seed in range(5):
            rooms = create_rooms(3, seed=seed)
            teams = create_teams(30, seed=seed, max_team_size=6)
            allocations = allocate_seats(rooms, teams)

            self.assertEqual(len(allocations), len(teams))
            self.assert_capacity_respected(rooms, allocations)

    def test_records_follow_processing_order(self):
        rooms = [Room(room_no="R1", seats_per_row=4, num_rows=2)]
        teams = [Team(1, "small"), Team(3, "large")]
        allocations = allocate_seats(rooms, teams)

        self.assertEqual([a.team_id for a in allocations], ["large", "small"])
        restored = in_input_order(allocations)
        self.assertEqual([a.team_id for a in restored], ["small", "large"])
        self.assertEqual([a.team_index for a in restored], [0, 1])

    def test_no_rooms(self):
        allocations = allocate_seats([], teams_from_sizes([2]))
        self.assertIsNone(allocations[0].room_no)
        self.assertIn("exceeds", allocations[0].message)

    def test_layouts_match_records(self):
        rooms = [Room(room_no="Room1", seats_per_row=4, num_rows=2)]
        allocations, layouts = allocate_seats_with_layouts(rooms, teams_from_sizes([4, 3, 1]))

        self.assertEqual(layouts[0].row_teams(1), [4])
        self.assertEqual(layouts[0].row_teams(2), [3, 1])
        self.assertEqual(layouts[0].seat_ranges(2), [(1, 3), (4, 4)])


if __name__ == '__main__':
    unittest.main()
