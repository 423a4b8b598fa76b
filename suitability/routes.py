"""
Suitability API Routes

Exposes the suitability scorer via REST API.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.orm import Session

from db import get_db
from .logic.constants import ENGINE_VERSION, KEYWORD_TABLE_VERSION
from .logic.contracts import DocumentRecord
from .logic.document_analyzer import analyze_documents
from .logic.engine import SuitabilityEngine
from .logic.runner import run_suitability, get_suitability_simple

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/suitability", tags=["suitability"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class SuitabilityRequest(BaseModel):
    """Request body for scoring an inline snapshot."""
    profile: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Student profile; omit for a student without one",
        examples=[{
            "specialization": "Computer Science",
            "gpa": "3.6",
            "desired_degree_level": "masters",
        }],
    )
    documents: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Document slots with document_type, file_name and status",
    )
    programs: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Published programs, each with its institution embedded",
    )


class DocumentAnalysisRequest(BaseModel):
    documents: List[Dict[str, Any]] = Field(default_factory=list)


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Score programs for an inline student snapshot")
@router.post("/", summary="Score programs for an inline student snapshot", include_in_schema=False)
def score_snapshot(request: SuitabilityRequest):
    """
    Score the given programs against the given profile and documents.

    **Response:**
    - Results ranked by score, each with tier, reasons, strengths and
      improvement areas
    - Tier counts, document analysis and profile completeness
    """
    try:
        engine = SuitabilityEngine()
        try:
            output = engine.recommend_from_dict(request.model_dump())
        except ValidationError as e:
            raise HTTPException(
                status_code=400,
                detail=f"Invalid scoring payload: {str(e)}"
            )
        return output.model_dump(mode="json")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Suitability scoring failed")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


@router.get("/students/{student_id}", summary="Score published programs for a stored student")
def score_student(
    student_id: str,
    limit: Optional[int] = Query(default=None, ge=1, le=1000),
    format: str = Query(default="full", description="'full' or 'simple'"),
    db_session=Depends(get_db)
):
    """
    Load the student's profile and documents plus every published program,
    then score them. An unknown student is scored with an empty profile.
    """
    try:
        db: Session
        with db_session as db:
            if format == "simple":
                results = get_suitability_simple(db, student_id, limit)
                return {"results": results, "count": len(results)}

            output = run_suitability(db, student_id, limit)
            return output.model_dump(mode="json")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Suitability scoring failed for student {student_id}")
        return JSONResponse(
            status_code=500,
            content={"error": str(e)}
        )


@router.post("/documents/analysis", summary="Analyze document completeness")
def document_analysis(request: DocumentAnalysisRequest):
    """Completeness percentage and readiness flags for a document list."""
    try:
        documents = [DocumentRecord(**d) for d in request.documents]
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid documents: {str(e)}")

    return analyze_documents(documents).model_dump()


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Suitability engine health check")
def health_check():
    """Check if the suitability engine is operational."""
    return {
        "status": "ok",
        "engine": "suitability",
        "version": ENGINE_VERSION,
        "keyword_tables": KEYWORD_TABLE_VERSION,
    }
