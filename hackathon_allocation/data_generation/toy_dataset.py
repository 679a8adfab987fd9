# hackathon_allocation/data_generation/toy_dataset.py
from __future__ import annotations
from typing import List, Tuple
import random

from ..models import Mentor, Submission, Room, Team
from ..config import (
    NUM_MENTORS_DEFAULT,
    NUM_SUBMISSIONS_DEFAULT,
    NUM_ROOMS_DEFAULT,
    NUM_TEAMS_DEFAULT,
    SKILLS_PER_MENTOR,
    KEYWORDS_PER_SUBMISSION_MAX,
    MAX_TEAM_SIZE_DEFAULT,
    DEFAULT_SEED,
)
from .skills import get_default_skills


def create_mentors(
    num_mentors: int = NUM_MENTORS_DEFAULT,
    seed: int = DEFAULT_SEED,
    skills_per_mentor: int = SKILLS_PER_MENTOR,
) -> List[Mentor]:
    """Mentors M1..Mn with `skills_per_mentor` random skills each."""
    rng = random.Random(seed)
    vocab = get_default_skills()
    k = min(skills_per_mentor, len(vocab))

    return [
        Mentor(
            name=f"Mentor {i}",
            email=f"mentor{i}@example.com",
            skills=rng.sample(vocab, k=k),
        )
        for i in range(1, num_mentors + 1)
    ]


def create_submissions(
    num_submissions: int = NUM_SUBMISSIONS_DEFAULT,
    seed: int = DEFAULT_SEED,
    max_keywords: int = KEYWORDS_PER_SUBMISSION_MAX,
) -> List[Submission]:
    """
    Submissions T1..Tn with 0..max_keywords keywords, so some teams
    carry no extracted signal (as when extraction fails upstream).
    """
    rng = random.Random(seed + 1)
    vocab = get_default_skills()

    submissions: List[Submission] = []
    for i in range(1, num_submissions + 1):
        n = rng.randint(0, min(max_keywords, len(vocab)))
        keywords = rng.sample(vocab, k=n)
        submissions.append(Submission(team_id=f"T{i}", keywords=keywords))
    return submissions


def create_rooms(
    num_rooms: int = NUM_ROOMS_DEFAULT,
    seed: int = DEFAULT_SEED,
) -> List[Room]:
    rng = random.Random(seed + 2)
    return [
        Room(
            room_no=f"R{100 + i}",
            seats_per_row=rng.randint(4, 8),
            num_rows=rng.randint(2, 5),
        )
        for i in range(1, num_rooms + 1)
    ]


def create_teams(
    num_teams: int = NUM_TEAMS_DEFAULT,
    seed: int = DEFAULT_SEED,
    max_team_size: int = MAX_TEAM_SIZE_DEFAULT,
) -> List[Team]:
    rng = random.Random(seed + 3)
    return [
        Team(team_size=rng.randint(1, max_team_size), team_id=f"T{i}")
        for i in range(1, num_teams + 1)
    ]


def make_toy_hackathon(
    num_mentors: int = NUM_MENTORS_DEFAULT,
    num_submissions: int = NUM_SUBMISSIONS_DEFAULT,
    num_rooms: int = NUM_ROOMS_DEFAULT,
    num_teams: int = NUM_TEAMS_DEFAULT,
    seed: int = DEFAULT_SEED,
    max_team_size: int = MAX_TEAM_SIZE_DEFAULT,
) -> Tuple[List[Mentor], List[Submission], List[Room], List[Team]]:
    """
    Return mentors, submissions, rooms and teams for a demo run.
    Same seed -> same dataset.
    """
    mentors = create_mentors(num_mentors, seed=seed)
    submissions = create_submissions(num_submissions, seed=seed)
    rooms = create_rooms(num_rooms, seed=seed)
    teams = create_teams(num_teams, seed=seed, max_team_size=max_team_size)
    return mentors, submissions, rooms, teams
