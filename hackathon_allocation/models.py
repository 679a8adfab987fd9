# hackathon_allocation/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any


@dataclass
class Mentor:
    name: str
    email: str
    skills: List[str] = field(default_factory=list)


@dataclass
class Submission:
    team_id: str
    keywords: List[str] = field(default_factory=list)


@dataclass
class MatchResult:
    score: float
    matched_skills: List[str] = field(default_factory=list)


@dataclass
class MentorAllocation:
    mentor_name: str
    mentor_email: str
    mentor_skills: List[str]
    team_id: str
    ppt_keywords: List[str]
    match_score: float              # raw score x 100, in [0, 100]
    matched_skills: List[str] = field(default_factory=list)
    adjusted_score: float = 0.0     # raw score minus workload penalty at pick time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mentorName": self.mentor_name,
            "mentorEmail": self.mentor_email,
            "mentorSkills": list(self.mentor_skills),
            "teamId": self.team_id,
            "pptKeywords": list(self.ppt_keywords),
            "matchScore": self.match_score,
            "matchedSkills": list(self.matched_skills),
        }


@dataclass
class AllocationSummary:
    total_mentors: int
    total_submissions: int
    allocated_submissions: int
    average_match_score: float
    mentor_workload: Dict[str, int] = field(default_factory=dict)


@dataclass
class Room:
    room_no: str
    seats_per_row: int
    num_rows: int

    @property
    def total_capacity(self) -> int:
        return self.seats_per_row * self.num_rows


@dataclass
class Team:
    team_size: int
    team_id: Optional[str] = None


@dataclass
class SeatAllocation:
    team_size: int
    room_no: Optional[str]
    row: Optional[int]              # 1-based
    remaining_seats: int
    message: str
    team_id: Optional[str] = None
    team_index: int = 0

    @property
    def placed(self) -> bool:
        return self.room_no is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "teamId": self.team_id,
            "teamSize": self.team_size,
            "roomNo": self.room_no,
            "row": self.row,
            "remainingSeatsInRowAfterPlacement": self.remaining_seats,
            "message": self.message,
        }
