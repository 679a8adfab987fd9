# hackathon_allocation/matching/mentor_allocator.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from ..models import Mentor, Submission, MentorAllocation, AllocationSummary
from ..config import WORKLOAD_PENALTY
from . import skill_matcher

logger = logging.getLogger(__name__)


def _keyword_count(sub: Submission) -> int:
    return len({skill_matcher.normalize_term(k) for k in sub.keywords if k and k.strip()})


def allocate_mentors(
    mentors: List[Mentor],
    submissions: List[Submission],
    workload_penalty: float = WORKLOAD_PENALTY,
) -> List[MentorAllocation]:
    """
    Greedy, load-aware assignment of one mentor per submission.

    Submissions with more keywords pick first. For each submission every
    mentor is scored and penalised by `workload_penalty` per submission
    already assigned to them; the strictly highest adjusted score wins, so
    on ties the mentor listed first keeps the submission.

    Every submission gets a mentor as long as `mentors` is non-empty, even
    when nothing overlaps. Callers wanting a threshold filter the result.
    Inputs are assumed validated (see validation.validate_mentors).
    """
    workload: Dict[str, int] = {m.email: 0 for m in mentors}
    allocations: List[MentorAllocation] = []

    # sorted() is stable: equal keyword counts keep input order
    ordered = sorted(submissions, key=_keyword_count, reverse=True)

    for sub in ordered:
        best: Optional[Mentor] = None
        best_adjusted = 0.0
        best_raw = 0.0
        best_matched: List[str] = []

        for m in mentors:
            result = skill_matcher.score(m.skills, sub.keywords)
            adjusted = result.score - workload_penalty * workload[m.email]

            if best is None or adjusted > best_adjusted:
                best = m
                best_adjusted = adjusted
                best_raw = result.score
                best_matched = result.matched_skills

        if best is None:
            # no mentors at all; caller validation should have caught this
            logger.warning("No mentors available for submission %s", sub.team_id)
            continue

        if best_raw <= 0.0:
            logger.warning(
                "Submission %s allocated to %s with no skill overlap",
                sub.team_id, best.email,
            )

        allocations.append(
            MentorAllocation(
                mentor_name=best.name,
                mentor_email=best.email,
                mentor_skills=list(best.skills),
                team_id=sub.team_id,
                ppt_keywords=list(sub.keywords),
                match_score=best_raw * 100.0,
                matched_skills=list(best_matched),
                adjusted_score=best_adjusted,
            )
        )
        workload[best.email] += 1
        logger.debug(
            "Submission %s -> %s (score=%.3f, adjusted=%.3f, load=%d)",
            sub.team_id, best.email, best_raw, best_adjusted, workload[best.email],
        )

    return allocations


def summarize_allocations(
    mentors: List[Mentor],
    submissions: List[Submission],
    allocations: List[MentorAllocation],
) -> AllocationSummary:
    workload: Dict[str, int] = {m.email: 0 for m in mentors}
    for a in allocations:
        workload[a.mentor_email] = workload.get(a.mentor_email, 0) + 1

    average = (
        sum(a.match_score for a in allocations) / len(allocations)
        if allocations else 0.0
    )

    return AllocationSummary(
        total_mentors=len(mentors),
        total_submissions=len(submissions),
        allocated_submissions=len(allocations),
        average_match_score=average,
        mentor_workload=workload,
    )


def allocate_with_summary(
    mentors: List[Mentor],
    submissions: List[Submission],
    min_score: Optional[float] = None,
    workload_penalty: float = WORKLOAD_PENALTY,
) -> Tuple[List[MentorAllocation], AllocationSummary]:
    """
    Run the allocation and summarise it.

    `min_score` (percent, 0-100) drops low-confidence records after the run;
    workloads in the summary then reflect only the kept records.
    """
    allocations = allocate_mentors(mentors, submissions, workload_penalty=workload_penalty)

    if min_score is not None:
        kept = [a for a in allocations if a.match_score >= min_score]
        if len(kept) < len(allocations):
            logger.info(
                "Dropped %d allocations below %.1f%%",
                len(allocations) - len(kept), min_score,
            )
        allocations = kept

    return allocations, summarize_allocations(mentors, submissions, allocations)
