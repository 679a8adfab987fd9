# hackathon_allocation/data_generation/normalize.py
from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional

from ..models import Mentor, Submission, Room, Team

_SPLIT_RE = re.compile(r"[;,\n]")


def normalize_keywords(value: Any) -> List[str]:
    """
    Coerce a loosely typed keyword/skill field into a clean list.

    Accepts None, a delimited string ("a, b; c"), a list of strings, or the
    extraction-service shape {"keywords": [...], "confidence": 0.9}.
    Entries are trimmed, blanks dropped, and duplicates removed
    case-insensitively keeping the first spelling.
    """
    if value is None:
        return []
    if isinstance(value, Mapping):
        value = value.get("keywords")
        if value is None:
            return []
    if isinstance(value, str):
        items = _SPLIT_RE.split(value)
    else:
        try:
            items = list(value)
        except TypeError:
            items = [value]

    out: List[str] = []
    seen = set()
    for item in items:
        if item is None:
            continue
        text = str(item).strip()
        # pandas hands over NaN for empty cells
        if not text or text.lower() == "nan":
            continue
        key = text.lower()
        if key not in seen:
            seen.add(key)
            out.append(text)
    return out


def _text(payload: Mapping[str, Any], *keys: str, default: str = "") -> str:
    for k in keys:
        v = payload.get(k)
        if v is not None:
            text = str(v).strip()
            if text and text.lower() != "nan":
                return text
    return default


def _int(payload: Mapping[str, Any], *keys: str, default: int = 0) -> int:
    for k in keys:
        v = payload.get(k)
        if v is None:
            continue
        try:
            number = float(v)
        except (TypeError, ValueError):
            continue
        # "4.7" is not a seat count; fall through to the default so validation flags it
        if not number.is_integer():
            continue
        return int(number)
    return default


def normalize_mentor_payload(payload: Mapping[str, Any]) -> Mentor:
    return Mentor(
        name=_text(payload, "name", "mentorName"),
        email=_text(payload, "email", "mentorEmail"),
        skills=normalize_keywords(payload.get("skills", payload.get("mentorSkills"))),
    )


def normalize_submission_payload(payload: Mapping[str, Any]) -> Submission:
    keywords = payload.get("keywords", payload.get("pptKeywords"))
    return Submission(
        team_id=_text(payload, "teamId", "team_id"),
        keywords=normalize_keywords(keywords),
    )


def normalize_room_payload(payload: Mapping[str, Any]) -> Room:
    return Room(
        room_no=_text(payload, "roomNo", "room_no"),
        seats_per_row=_int(payload, "seatsPerRow", "seats_per_row"),
        num_rows=_int(payload, "numRows", "num_rows"),
    )


def normalize_team_payload(payload: Mapping[str, Any]) -> Team:
    team_id: Optional[str] = _text(payload, "teamId", "team_id") or None
    return Team(team_size=_int(payload, "teamSize", "team_size"), team_id=team_id)


def normalize_many(payloads: List[Dict[str, Any]], kind: str) -> list:
    handlers = {
        "mentor": normalize_mentor_payload,
        "submission": normalize_submission_payload,
        "room": normalize_room_payload,
        "team": normalize_team_payload,
    }
    if kind not in handlers:
        raise ValueError(f"Unknown payload kind: {kind}")
    return [handlers[kind](p or {}) for p in payloads]
