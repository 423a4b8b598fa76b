"""
Data Adapter for the Suitability Scorer

Reads from the production tables (student_profiles, student_documents,
university_programs, university_profiles) and transforms rows into the
scorer's contracts.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO DB writes
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from suitability.models import (
    StudentDocumentRecord,
    StudentProfileRecord,
    UniversityProfile,
    UniversityProgram,
)
from .contracts import DocumentRecord, DocumentStatus, Institution, Program, StudentProfile, parse_date

logger = logging.getLogger(__name__)


def _normalize_status(raw: Optional[str]) -> DocumentStatus:
    """Anything other than an explicit 'uploaded' counts as pending."""
    if raw and raw.strip().lower() == DocumentStatus.UPLOADED.value:
        return DocumentStatus.UPLOADED
    return DocumentStatus.PENDING


def transform_profile(record: StudentProfileRecord) -> StudentProfile:
    return StudentProfile(
        student_id=record.user_id,
        specialization=record.specialization,
        gpa=record.gpa,
        desired_degree_level=record.desired_degree_level,
        full_name=record.full_name,
        email=record.email,
        phone=record.phone,
        country=record.country,
        year_of_study=record.year_of_study,
    )


def transform_document(record: StudentDocumentRecord) -> DocumentRecord:
    return DocumentRecord(
        document_type=record.document_type or "",
        file_name=record.file_name,
        status=_normalize_status(record.status),
    )


def transform_institution(university: Optional[UniversityProfile]) -> Optional[Institution]:
    if university is None:
        return None
    return Institution(
        institution_id=university.id,
        name=university.name or "",
        location=university.location,
        logo_url=university.logo_url,
        website=university.website,
    )


def transform_program(
    program: UniversityProgram,
    university: Optional[UniversityProfile] = None
) -> Program:
    """
    Transform a program row and its owning university into a Program.

    Args:
        program: UniversityProgram ORM object
        university: Owning UniversityProfile, if it could be joined

    Returns:
        Program with the institution denormalized onto it
    """
    return Program(
        program_id=program.id,
        title=program.title,
        description=program.description,
        degree_level=program.degree_level,
        tuition_fee=program.tuition_fee,
        duration=program.duration,
        delivery_mode=program.delivery_mode,
        application_deadline=parse_date(program.application_deadline),
        has_scholarship=bool(program.has_scholarships),
        scholarship_percentage=program.scholarship_percentage,
        special_requirements=program.special_requirements,
        additional_criteria=program.additional_criteria,
        institution=transform_institution(university),
    )


def fetch_student_profile(db: Session, student_id: str) -> Optional[StudentProfile]:
    """
    Load a student's profile. A missing profile (new student) returns None.
    """
    record = db.execute(
        select(StudentProfileRecord).where(StudentProfileRecord.user_id == student_id)
    ).scalars().first()
    return transform_profile(record) if record else None


def fetch_student_documents(db: Session, student_id: str) -> List[DocumentRecord]:
    """Load all document slots for a student, oldest first."""
    records = db.execute(
        select(StudentDocumentRecord)
        .where(StudentDocumentRecord.user_id == student_id)
        .order_by(StudentDocumentRecord.created_at, StudentDocumentRecord.id)
    ).scalars().all()
    return [transform_document(r) for r in records]


def fetch_published_programs(db: Session, limit: Optional[int] = None) -> List[Program]:
    """
    Load published programs joined with their universities.

    Programs whose row fails to transform are skipped.
    """
    query = (
        select(UniversityProgram, UniversityProfile)
        .outerjoin(UniversityProfile, UniversityProgram.university_id == UniversityProfile.id)
        .where(UniversityProgram.is_published.is_(True))
        .order_by(UniversityProgram.created_at, UniversityProgram.id)
    )
    if limit:
        query = query.limit(limit)

    rows = db.execute(query).all()
    logger.info(f"📦 Published programs fetched: {len(rows)}")

    programs = []
    for program, university in rows:
        try:
            programs.append(transform_program(program, university))
        except ValueError as e:
            logger.debug(f"Failed to transform program {program.id}: {e}")
            continue

    return programs
