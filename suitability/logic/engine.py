"""
Suitability Engine

Main orchestrator that combines the scoring components into a single pipeline.
This is the primary entry point for scoring programs.
"""

import logging
import time
import uuid
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from .classifier import get_tier_counts
from .contracts import (
    DocumentAnalysis,
    DocumentRecord,
    Program,
    StudentProfile,
    SuitabilityOutput,
    SuitabilityResult,
)
from .constants import ENGINE_VERSION
from .degree_filter import filter_by_degree_level
from .document_analyzer import analyze_documents, profile_completeness, uploaded_documents
from .evaluator import evaluate_program

logger = logging.getLogger(__name__)


def score_programs(
    profile: Optional[StudentProfile],
    documents: Optional[List[DocumentRecord]],
    programs: Optional[List[Program]]
) -> List[SuitabilityResult]:
    """
    Filter programs by the desired degree level and score each one.

    Args:
        profile: Student profile, None for a student without one
        documents: Student's document slots
        programs: Published programs joined with their institutions

    Returns:
        One SuitabilityResult per matching program, in input order
    """
    return _score_candidates(profile, analyze_documents(documents), programs)


def _score_candidates(
    profile: Optional[StudentProfile],
    analysis: DocumentAnalysis,
    programs: Optional[List[Program]]
) -> List[SuitabilityResult]:
    desired = profile.desired_degree_level if profile else None
    candidates = filter_by_degree_level(programs or [], desired)
    return [evaluate_program(profile, program, analysis) for program in candidates]


def rank_results(results: List[SuitabilityResult]) -> List[SuitabilityResult]:
    """
    Sort by score (descending) and assign 1-based ranks.
    Ties keep their input order.
    """
    ranked = sorted(results, key=lambda r: r.score, reverse=True)
    return [r.model_copy(update={"rank": i}) for i, r in enumerate(ranked, 1)]


class SuitabilityEngine:
    """
    Runs the scoring pipeline over an in-memory snapshot.

    Pipeline flow:
    1. Degree-level filtering
    2. Document completeness analysis
    3. Per-program evaluation
    4. Ranking and tier counts
    """

    def __init__(self):
        self.version = ENGINE_VERSION

    def recommend(
        self,
        profile: Optional[StudentProfile],
        documents: Optional[List[DocumentRecord]] = None,
        programs: Optional[List[Program]] = None
    ) -> SuitabilityOutput:
        """
        Score all programs for a student and assemble the output.

        Args:
            profile: Student profile (None when the student has none yet)
            documents: Student's document slots
            programs: Candidate programs

        Returns:
            SuitabilityOutput with ranked results
        """
        start_time = time.perf_counter()
        documents = documents or []
        programs = programs or []

        analysis = analyze_documents(documents)
        results = _score_candidates(profile, analysis, programs)
        ranked = rank_results(results)

        warnings = _generate_warnings(profile, documents, len(programs), len(results))
        processing_time = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"Scored {len(results)} of {len(programs)} programs "
            f"for student {profile.student_id if profile else 'anonymous'} ({processing_time:.2f}ms)"
        )

        return SuitabilityOutput(
            request_id=str(uuid.uuid4()),
            student_id=profile.student_id if profile else None,
            results=ranked,
            tier_counts=get_tier_counts(ranked),
            document_analysis=analysis,
            profile_completeness=profile_completeness(profile, documents),
            total_programs=len(programs),
            total_matching_degree=len(results),
            processing_time_ms=round(processing_time, 2),
            engine_version=self.version,
            warnings=warnings,
        )

    def recommend_from_dict(self, payload: dict) -> SuitabilityOutput:
        """
        Convenience method for API integration.

        Args:
            payload: Dict with optional "profile", "documents" and "programs" keys
        """
        profile_data = payload.get("profile")
        profile = StudentProfile(**profile_data) if profile_data is not None else None
        documents = [DocumentRecord(**d) for d in payload.get("documents") or []]
        programs = [_program_from_dict(p) for p in payload.get("programs") or []]
        return self.recommend(profile, documents, programs)


def _program_from_dict(data: Dict[str, Any]) -> Program:
    """
    Build one Program, falling back to defaults for any field that fails validation
    so a single malformed program never rejects the rest of the batch.
    """
    try:
        return Program(**data)
    except ValidationError as e:
        bad_fields = {err["loc"][0] for err in e.errors() if err["loc"]}
        logger.warning(
            f"Program {data.get('program_id')}: using defaults for invalid fields {sorted(map(str, bad_fields))}"
        )
        return Program(**{k: v for k, v in data.items() if k not in bad_fields})


def _generate_warnings(
    profile: Optional[StudentProfile],
    documents: List[DocumentRecord],
    total_programs: int,
    total_matching: int
) -> List[str]:
    """Generate any warnings for the output."""
    warnings = []

    if profile is None:
        warnings.append("No profile found. Complete your profile for personalised scores.")

    if total_programs == 0:
        warnings.append("No published programs available.")
    elif total_matching == 0:
        warnings.append("No programs match your desired degree level. Consider broadening your search.")

    if not uploaded_documents(documents):
        warnings.append("No documents uploaded yet. Scores do not include document readiness.")

    return warnings


# Convenience function for simple usage
def get_suitability(
    profile: Optional[StudentProfile],
    documents: Optional[List[DocumentRecord]] = None,
    programs: Optional[List[Program]] = None
) -> SuitabilityOutput:
    engine = SuitabilityEngine()
    return engine.recommend(profile, documents, programs)
