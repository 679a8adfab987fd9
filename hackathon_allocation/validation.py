# hackathon_allocation/validation.py
from __future__ import annotations

import re
from typing import List, Set

from .models import Mentor, Submission, Room, Team
from .config import (
    MIN_SEATS_PER_ROW,
    MAX_SEATS_PER_ROW,
    MIN_ROWS,
    MAX_ROWS,
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ValidationError(ValueError):
    """Raised by callers when input fails the checks below."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid input")


def validate_mentors(mentors: List[Mentor]) -> List[str]:
    """
    Form-level checks for the mentor list.

    Returns a list of human-readable problems (empty when valid):
      - at least one mentor
      - non-empty name and email per mentor
      - well-formed, unique email
      - at least one skill
    """
    errors: List[str] = []

    if not mentors:
        errors.append("At least one mentor is required")

    emails: Set[str] = set()
    for idx, m in enumerate(mentors, start=1):
        if not (m.name or "").strip():
            errors.append(f"Mentor {idx}: Name is required")

        email = (m.email or "").strip()
        if not email:
            errors.append(f"Mentor {idx}: Email is required")
        elif not EMAIL_PATTERN.match(email):
            errors.append(f"Mentor {idx}: Invalid email format")
        elif email in emails:
            errors.append(f'Mentor {idx}: Duplicate email "{email}"')
        else:
            emails.add(email)

        if not [s for s in m.skills if s and s.strip()]:
            errors.append(f"Mentor {idx}: At least one skill is required")

    return errors


def validate_submissions(submissions: List[Submission]) -> List[str]:
    """Team ids must be present and unique. Empty keyword lists are allowed."""
    errors: List[str] = []
    seen: Set[str] = set()

    for idx, sub in enumerate(submissions, start=1):
        team_id = (sub.team_id or "").strip()
        if not team_id:
            errors.append(f"Submission {idx}: Team ID is required")
        elif team_id in seen:
            errors.append(f'Submission {idx}: Duplicate team ID "{team_id}"')
        else:
            seen.add(team_id)

    return errors


def validate_rooms(rooms: List[Room]) -> List[str]:
    errors: List[str] = []

    if not rooms:
        errors.append("At least one room is required")

    room_numbers: Set[str] = set()
    for idx, room in enumerate(rooms, start=1):
        room_no = (room.room_no or "").strip()
        if not room_no:
            errors.append(f"Room {idx}: Room number is required")
        elif room_no in room_numbers:
            errors.append(f'Room {idx}: Duplicate room number "{room_no}"')
        else:
            room_numbers.add(room_no)

        if not MIN_SEATS_PER_ROW <= room.seats_per_row <= MAX_SEATS_PER_ROW:
            errors.append(
                f"Room {idx}: Seats per row must be between "
                f"{MIN_SEATS_PER_ROW} and {MAX_SEATS_PER_ROW}"
            )
        if not MIN_ROWS <= room.num_rows <= MAX_ROWS:
            errors.append(
                f"Room {idx}: Number of rows must be between {MIN_ROWS} and {MAX_ROWS}"
            )

    return errors


def validate_teams(teams: List[Team]) -> List[str]:
    errors: List[str] = []
    seen: Set[str] = set()

    for idx, team in enumerate(teams, start=1):
        if team.team_size < 1:
            errors.append(f"Team {idx}: Team size must be at least 1")
        if team.team_id:
            if team.team_id in seen:
                errors.append(f'Team {idx}: Duplicate team ID "{team.team_id}"')
            seen.add(team.team_id)

    return errors


def require_valid(errors: List[str]) -> None:
    if errors:
        raise ValidationError(errors)
