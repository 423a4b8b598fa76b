"""
Engine Runner

Orchestrates the stored-student flow:
1. Fetches the profile, documents and published programs via the adapter
2. Runs the suitability engine
3. Returns the scored output

This is a pure orchestration layer - NO scoring, NO business logic.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .adapter import fetch_published_programs, fetch_student_documents, fetch_student_profile
from .contracts import SuitabilityOutput
from .engine import SuitabilityEngine

logger = logging.getLogger(__name__)


def run_suitability(
    db: Session,
    student_id: str,
    limit: Optional[int] = None
) -> SuitabilityOutput:
    """
    Main entry point: score every published program for a stored student.

    Args:
        db: Database session
        student_id: Opaque student identifier
        limit: Optional cap on programs fetched

    Returns:
        SuitabilityOutput. When the data cannot be loaded the scorer is not
        invoked and the output carries a warning instead of results.
    """
    logger.info(f"🚀 Starting suitability scoring for student: {student_id}")

    try:
        profile = fetch_student_profile(db, student_id)
        documents = fetch_student_documents(db, student_id)
        programs = fetch_published_programs(db, limit=limit)
    except SQLAlchemyError as e:
        logger.error(f"Failed to load data for student {student_id}: {e}")
        return SuitabilityOutput(
            student_id=student_id,
            warnings=["Could not load data. No data available right now, please try again later."],
        )

    if profile is None:
        logger.info(f"No profile stored for student {student_id}")
    logger.info(f"📄 Documents: {len(documents)}, 🎓 Programs: {len(programs)}")

    engine = SuitabilityEngine()
    output = engine.recommend(profile, documents, programs)
    if output.student_id is None:
        output.student_id = student_id

    if output.total_matching_degree < 5:
        logger.warning(f"⚠️ Low match count: {output.total_matching_degree} programs scored")

    logger.info(f"✨ Suitability scoring complete ({output.processing_time_ms}ms)")
    return output


def get_suitability_simple(
    db: Session,
    student_id: str,
    limit: Optional[int] = None
) -> List[Dict[str, Any]]:
    """
    Simplified output format for easier consumption.

    Returns list of dicts instead of the full SuitabilityOutput.
    """
    output = run_suitability(db, student_id, limit)

    return [
        {
            "program_id": r.program_id,
            "program_title": r.program_title,
            "institution_name": r.institution_name,
            "score": r.score,
            "tier": r.tier,
            "rank": r.rank,
            "reasons": r.reasons,
        }
        for r in output.results
    ]
