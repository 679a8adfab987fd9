# hackathon_allocation/matching/skill_matcher.py
from __future__ import annotations

from typing import Dict, Iterable, List

from ..models import MatchResult
from ..config import EXACT_MATCH_WEIGHT, PARTIAL_MATCH_WEIGHT


def normalize_term(term: str) -> str:
    return term.strip().lower()


def _normalized_index(terms: Iterable[str]) -> Dict[str, str]:
    """
    Map normalized term -> first original spelling, in input order.
    Blank terms are dropped (an empty string would substring-match anything).
    """
    index: Dict[str, str] = {}
    for t in terms:
        if t is None:
            continue
        key = normalize_term(str(t))
        if key and key not in index:
            index[key] = str(t).strip()
    return index


def score(
    mentor_skills: Iterable[str],
    keywords: Iterable[str],
    exact_weight: float = EXACT_MATCH_WEIGHT,
    partial_weight: float = PARTIAL_MATCH_WEIGHT,
) -> MatchResult:
    """
    Similarity between a mentor's skills and a submission's keywords.

      1) exact pass: normalized skill present in the normalized keywords
      2) partial pass: skill is a substring of a keyword or vice versa
         (only for skills not matched exactly)
      3) raw = exact * exact_weight + partial * partial_weight
      4) score = min(1, raw / max(#skills, #keywords))

    Matched skills keep the mentor's original spelling.
    """
    skills = _normalized_index(mentor_skills)
    kws = _normalized_index(keywords)

    if not skills or not kws:
        return MatchResult(score=0.0, matched_skills=[])

    matched: List[str] = []
    exact = 0
    partial = 0

    for skill, original in skills.items():
        if skill in kws:
            exact += 1
            matched.append(original)

    for skill, original in skills.items():
        if skill in kws:
            continue
        if any(skill in kw or kw in skill for kw in kws):
            partial += 1
            matched.append(original)

    raw = exact * exact_weight + partial * partial_weight
    value = min(1.0, raw / max(len(skills), len(kws)))

    return MatchResult(score=value, matched_skills=matched)
