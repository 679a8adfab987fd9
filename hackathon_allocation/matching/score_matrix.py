# hackathon_allocation/matching/score_matrix.py
from __future__ import annotations

from typing import List

import pandas as pd

from ..models import Mentor, Submission
from .skill_matcher import score


def build_score_matrix(
    mentors: List[Mentor],
    submissions: List[Submission],
) -> pd.DataFrame:
    """
    Raw (unpenalised) match scores in [0, 1]:
    rows = team ids, columns = mentor emails.
    """
    matrix = [
        [score(m.skills, sub.keywords).score for m in mentors]
        for sub in submissions
    ]
    return pd.DataFrame(
        matrix,
        index=[sub.team_id for sub in submissions],
        columns=[m.email for m in mentors],
        dtype=float,
    )


def best_mentor_per_submission(matrix: pd.DataFrame) -> pd.Series:
    """Mentor email with the highest raw score per team (ignores workload)."""
    if matrix.empty:
        return pd.Series(dtype=object)
    return matrix.idxmax(axis=1)
