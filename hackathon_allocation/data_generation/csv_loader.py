# hackathon_allocation/data_generation/csv_loader.py
from __future__ import annotations

from typing import List

import pandas as pd

from ..models import Mentor, Submission, Room, Team
from .normalize import normalize_many


def _read(path, required: List[str]) -> pd.DataFrame:
    """
    Read a CSV as strings with blank cells kept as "".
    Header matching ignores surrounding whitespace.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip() for c in df.columns]

    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing required column(s): {', '.join(missing)}")
    return df


def load_mentors_csv(path) -> List[Mentor]:
    """
    Columns: name, email, skills   (skills separated by ';' or ',')
    """
    df = _read(path, ["name", "email", "skills"])
    return normalize_many(df.to_dict(orient="records"), "mentor")


def load_submissions_csv(path) -> List[Submission]:
    """
    Columns: teamId, keywords
    """
    df = _read(path, ["teamId", "keywords"])
    return normalize_many(df.to_dict(orient="records"), "submission")


def load_rooms_csv(path) -> List[Room]:
    """
    Columns: roomNo, seatsPerRow, numRows
    """
    df = _read(path, ["roomNo", "seatsPerRow", "numRows"])
    return normalize_many(df.to_dict(orient="records"), "room")


def load_teams_csv(path) -> List[Team]:
    """
    Columns: teamSize, optional teamId
    """
    df = _read(path, ["teamSize"])
    return normalize_many(df.to_dict(orient="records"), "team")
