# hackathon_allocation/export/exporters.py
from __future__ import annotations

import csv
import json
import os
from typing import Any, List, Optional

import pandas as pd

from ..models import MentorAllocation, SeatAllocation
from ..config import LIST_SEPARATOR, MATCH_SCORE_DECIMALS, PDF_BASE_URL

MENTOR_COLUMNS = [
    "Mentor Name",
    "Mentor Email",
    "Mentor Skills",
    "Team ID",
    "PPT Keywords",
    "Match Score (%)",
    "Matched Skills",
]
PDF_LINK_COLUMN = "PDF Download Link"

SEAT_COLUMNS = ["Team", "Team Size", "Room", "Row", "Remaining Seats", "Message"]


def mentor_allocations_frame(
    allocations: List[MentorAllocation],
    pdf_base_url: Optional[str] = PDF_BASE_URL,
) -> pd.DataFrame:
    rows = []
    for a in allocations:
        row = [
            a.mentor_name,
            a.mentor_email,
            LIST_SEPARATOR.join(a.mentor_skills),
            a.team_id,
            LIST_SEPARATOR.join(a.ppt_keywords),
            f"{a.match_score:.{MATCH_SCORE_DECIMALS}f}",
            LIST_SEPARATOR.join(a.matched_skills),
        ]
        if pdf_base_url:
            row.append(f"{pdf_base_url}{a.team_id}")
        rows.append(row)

    columns = MENTOR_COLUMNS + ([PDF_LINK_COLUMN] if pdf_base_url else [])
    return pd.DataFrame(rows, columns=columns, dtype=object)


def seat_allocations_frame(allocations: List[SeatAllocation]) -> pd.DataFrame:
    rows = [
        [
            a.team_id if a.team_id else f"#{a.team_index + 1}",
            a.team_size,
            a.room_no if a.room_no is not None else "",
            a.row if a.row is not None else "",
            a.remaining_seats if a.placed else "",
            a.message,
        ]
        for a in allocations
    ]
    return pd.DataFrame(rows, columns=SEAT_COLUMNS, dtype=object)


def _to_csv(df: pd.DataFrame) -> str:
    # QUOTE_ALL + the default doublequote=True: every cell quoted, '"' -> '""'
    text = df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    return text.rstrip("\n")


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def _to_tsv(df: pd.DataFrame) -> str:
    lines = ["\t".join(df.columns)]
    for row in df.itertuples(index=False, name=None):
        lines.append("\t".join(_cell(v) for v in row))
    return "\n".join(lines)


def mentor_allocations_to_csv(
    allocations: List[MentorAllocation],
    pdf_base_url: Optional[str] = PDF_BASE_URL,
) -> str:
    return _to_csv(mentor_allocations_frame(allocations, pdf_base_url))


def mentor_allocations_to_tsv(
    allocations: List[MentorAllocation],
    pdf_base_url: Optional[str] = PDF_BASE_URL,
) -> str:
    return _to_tsv(mentor_allocations_frame(allocations, pdf_base_url))


def mentor_allocations_to_json(allocations: List[MentorAllocation]) -> str:
    return json.dumps([a.to_dict() for a in allocations], indent=2)


def seat_allocations_to_csv(allocations: List[SeatAllocation]) -> str:
    return _to_csv(seat_allocations_frame(allocations))


def seat_allocations_to_tsv(allocations: List[SeatAllocation]) -> str:
    return _to_tsv(seat_allocations_frame(allocations))


def seat_allocations_to_json(allocations: List[SeatAllocation]) -> str:
    return json.dumps([a.to_dict() for a in allocations], indent=2)


def write_exports(
    out_dir: str,
    mentor_allocations: List[MentorAllocation],
    seat_allocations: List[SeatAllocation],
    pdf_base_url: Optional[str] = PDF_BASE_URL,
) -> List[str]:
    """Write CSV/TSV/JSON for both result sets into `out_dir`; returns the paths."""
    os.makedirs(out_dir, exist_ok=True)

    outputs = {
        "mentor_allocations.csv": mentor_allocations_to_csv(mentor_allocations, pdf_base_url),
        "mentor_allocations.tsv": mentor_allocations_to_tsv(mentor_allocations, pdf_base_url),
        "mentor_allocations.json": mentor_allocations_to_json(mentor_allocations),
        "seat_allocations.csv": seat_allocations_to_csv(seat_allocations),
        "seat_allocations.tsv": seat_allocations_to_tsv(seat_allocations),
        "seat_allocations.json": seat_allocations_to_json(seat_allocations),
    }

    paths: List[str] = []
    for name, text in outputs.items():
        path = os.path.join(out_dir, name)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text + "\n")
        paths.append(path)
    return paths
