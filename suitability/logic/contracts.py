"""
Data Contracts for the Suitability Scorer

Pydantic models for the scorer's inputs (StudentProfile, DocumentRecord,
Program with its Institution) and outputs (SuitabilityResult,
DocumentAnalysis, SuitabilityOutput). These contracts are the API boundary
for the scoring engine.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .constants import ENGINE_VERSION, SuitabilityTier


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

def parse_date(value: Any) -> Optional[date]:
    """Parse a date that may arrive as a date, datetime or string. Free text becomes None."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    for fmt in ["%Y-%m-%d", "%Y/%m/%d", "%d-%m-%Y", "%d/%m/%Y"]:
        try:
            return datetime.strptime(str(value).strip(), fmt).date()
        except ValueError:
            continue
    return None


class DocumentStatus(str, Enum):
    PENDING = "pending"
    UPLOADED = "uploaded"


class StudentProfile(BaseModel):
    """
    A student's profile as stored by the dashboard.
    Every field is optional; a brand new student has almost nothing filled in.
    """
    student_id: Optional[str] = None

    # Scoring inputs
    specialization: Optional[str] = None
    gpa: Optional[str] = None  # decimal string, e.g. "3.7"
    desired_degree_level: Optional[str] = None  # bachelors/masters/phd/postdoc/...

    # Contact details, only used for profile completeness
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    year_of_study: Optional[str] = None

    @field_validator("gpa", "year_of_study", mode="before")
    @classmethod
    def _numbers_to_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class DocumentRecord(BaseModel):
    """An uploaded (or still pending) document slot."""
    document_type: str = ""
    file_name: Optional[str] = None
    status: DocumentStatus = DocumentStatus.PENDING

    class Config:
        use_enum_values = True


class Institution(BaseModel):
    """Public fields of the university owning a program."""
    institution_id: Optional[str] = None
    name: str = ""
    location: Optional[str] = None
    logo_url: Optional[str] = None
    website: Optional[str] = None


class Program(BaseModel):
    """
    A published degree offering, already joined with its institution.
    """
    program_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    degree_level: Optional[str] = None
    tuition_fee: Optional[str] = None
    duration: Optional[str] = None
    delivery_mode: Optional[str] = None
    application_deadline: Optional[date] = None
    has_scholarship: Optional[bool] = False
    scholarship_percentage: Optional[str] = None
    special_requirements: Optional[str] = None
    additional_criteria: Optional[str] = None

    institution: Optional[Institution] = None

    @field_validator(
        "title", "description", "degree_level", "tuition_fee", "duration", "delivery_mode",
        "scholarship_percentage", "special_requirements", "additional_criteria",
        mode="before",
    )
    @classmethod
    def _numbers_to_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("application_deadline", mode="before")
    @classmethod
    def _lenient_deadline(cls, value):
        # stored as free text upstream, e.g. "Rolling admissions"
        return parse_date(value)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ComponentScore(BaseModel):
    """Points awarded by one scoring component."""
    component: str
    points: float = Field(ge=0.0)
    cap: float = Field(ge=0.0)
    explanation: str = ""


class SuitabilityResult(BaseModel):
    """
    Score, tier and explanation for one (student, program) pair.
    Recomputed on every request, never persisted.
    """
    program_id: Optional[str] = None
    program_title: str = ""
    institution_name: str = ""

    score: int = Field(ge=0, le=100)
    tier: SuitabilityTier

    reasons: List[str] = Field(default_factory=list, max_length=4)
    strengths: List[str] = Field(default_factory=list, max_length=3)
    improvement_areas: List[str] = Field(default_factory=list, max_length=2)

    breakdown: List[ComponentScore] = Field(default_factory=list)

    # Ranking metadata
    rank: int = 0

    class Config:
        use_enum_values = True


class DocumentAnalysis(BaseModel):
    """Completeness percentage and readiness flags for a document list."""
    completeness: int = 0  # not clamped, can exceed 100
    uploaded_count: int = 0

    has_transcripts: bool = False
    has_personal_statement: bool = False
    has_language_test: bool = False
    has_recommendation_letters: bool = False
    has_resume: bool = False
    has_portfolio: bool = False

    has_essential_docs: bool = False
    has_competitive_docs: bool = False


class SuitabilityOutput(BaseModel):
    """
    Output of a full scoring pass over a candidate set.
    """
    request_id: Optional[str] = None
    student_id: Optional[str] = None

    # Ranked by score, best first
    results: List[SuitabilityResult] = Field(default_factory=list)
    tier_counts: Dict[str, int] = Field(default_factory=dict)

    document_analysis: DocumentAnalysis = Field(default_factory=DocumentAnalysis)
    profile_completeness: int = 0

    # Summary statistics
    total_programs: int = 0
    total_matching_degree: int = 0

    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    warnings: List[str] = Field(default_factory=list)


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ComponentNotes(BaseModel):
    """
    Explanation strings emitted by one scoring component.
    Used between component scoring and result assembly.
    """
    reasons: List[str] = Field(default_factory=list)
    strengths: List[str] = Field(default_factory=list)
    improvement_areas: List[str] = Field(default_factory=list)
