# tests/test_room_layout.py
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from hackathon_allocation.models import Room
from hackathon_allocation.seating.room_layout import RoomLayout


class TestRoomLayout(unittest.TestCase):

    def setUp(self):
        self.layout = RoomLayout(Room(room_no="R1", seats_per_row=4, num_rows=2))

    def test_fresh_rows_are_empty(self):
        self.assertEqual(self.layout.capacity_of_row(), 4)
        for row in (1, 2):
            self.assertEqual(self.layout.remaining_seats(row), 4)
            self.assertEqual(self.layout.row_teams(row), [])
        self.assertEqual(self.layout.rows_used, 0)

    def test_place_returns_remaining_seats(self):
        self.assertEqual(self.layout.place(1, 3), 1)
        self.assertEqual(self.layout.place(1, 1), 0)
        self.assertEqual(self.layout.row_teams(1), [3, 1])
        self.assertEqual(self.layout.used_total, 4)

    def test_can_fit(self):
        self.layout.place(2, 3)
        self.assertTrue(self.layout.can_fit(2, 1))
        self.assertFalse(self.layout.can_fit(2, 2))
        self.assertTrue(self.layout.can_fit(1, 4))
        self.assertFalse(self.layout.can_fit(1, 5))

    def test_place_without_room_raises(self):
        self.layout.place(1, 3)
        with self.assertRaises(ValueError):
            self.layout.place(1, 2)
        # failed placement leaves the row untouched
        self.assertEqual(self.layout.row_teams(1), [3])

    def test_row_out_of_range(self):
        with self.assertRaises(IndexError):
            self.layout.place(0, 1)
        with self.assertRaises(IndexError):
            self.layout.can_fit(3, 1)

    def test_invalid_team_size(self):
        with self.assertRaises(ValueError):
            self.layout.place(1, 0)

    def test_seat_ranges_are_contiguous(self):
        self.layout.place(1, 2)
        self.layout.place(1, 1)
        self.assertEqual(self.layout.seat_ranges(1), [(1, 2), (3, 3)])

    def test_fragmentation_counters(self):
        self.layout.place(1, 4)
        self.layout.place(2, 1)
        self.assertEqual(self.layout.rows_used, 2)
        self.assertEqual(self.layout.fragmented_rows, 1)


if __name__ == '__main__':
    unittest.main()
