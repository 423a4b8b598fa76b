"""
Degree-Level Filter

Narrows the candidate programs to the student's desired degree level before
scoring. Matching is a case-insensitive substring test against the program's
degree level, title and description.
"""

from typing import List, Optional

from .contracts import Program
from .constants import DEGREE_SYNONYMS


def normalize_desired_degree(desired_degree: Optional[str]) -> str:
    """Lower-case and strip a desired degree value; None becomes ''."""
    return (desired_degree or "").strip().lower()


def get_degree_synonyms(desired_degree: Optional[str]) -> List[str]:
    """
    Return the synonym set for a desired degree level.

    Values outside the table (legacy profile values) match on themselves.
    """
    key = normalize_desired_degree(desired_degree)
    if not key:
        return []
    return DEGREE_SYNONYMS.get(key, [key])


def program_matches_degree(program: Program, synonyms: List[str]) -> bool:
    """Check whether any synonym appears in the program's level/title/description."""
    haystacks = [
        (program.degree_level or "").lower(),
        (program.title or "").lower(),
        (program.description or "").lower(),
    ]
    return any(term in text for term in synonyms for text in haystacks)


def filter_by_degree_level(
    programs: List[Program],
    desired_degree: Optional[str]
) -> List[Program]:
    """
    Keep only programs matching the desired degree level.

    Args:
        programs: Candidate programs
        desired_degree: Student's desired degree level, may be None/empty

    Returns:
        Filtered list in the original order. The input list is returned
        unchanged when no degree level is set.
    """
    synonyms = get_degree_synonyms(desired_degree)
    if not synonyms:
        return list(programs)

    return [p for p in programs if program_matches_degree(p, synonyms)]
