"""
Pytest configuration and shared fixtures.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from suitability.logic.contracts import DocumentRecord, Institution, Program, StudentProfile
from suitability.models import (
    StudentDocumentRecord,
    StudentProfileRecord,
    UniversityProfile,
    UniversityProgram,
)


@pytest.fixture
def strong_profile() -> StudentProfile:
    """Masters-bound CS student with a high GPA."""
    return StudentProfile(
        student_id="student-a",
        specialization="Computer Science",
        gpa="3.9",
        desired_degree_level="masters",
    )


@pytest.fixture
def full_documents() -> List[DocumentRecord]:
    """Transcripts, statement, IELTS, resume and recommendation, all uploaded."""
    return [
        DocumentRecord(document_type="Academic Transcripts", file_name="transcripts.pdf", status="uploaded"),
        DocumentRecord(document_type="Personal Statement", file_name="statement.pdf", status="uploaded"),
        DocumentRecord(document_type="IELTS Score", file_name="ielts.pdf", status="uploaded"),
        DocumentRecord(document_type="CV/Resume", file_name="resume.pdf", status="uploaded"),
        DocumentRecord(document_type="Letters of Recommendation", file_name="letters.pdf", status="uploaded"),
    ]


@pytest.fixture
def institution() -> Institution:
    return Institution(institution_id="uni-1", name="Northbridge University", location="Dublin, Ireland")


@pytest.fixture
def cs_masters_program(institution) -> Program:
    return Program(
        program_id="prog-cs",
        title="Master of Computer Science",
        description="Advanced study in algorithms and systems.",
        degree_level="Master's",
        tuition_fee="$25,000 per year",
        has_scholarship=False,
        institution=institution,
    )


@pytest.fixture
def physics_phd_program(institution) -> Program:
    return Program(
        program_id="prog-phys",
        title="PhD in Physics",
        description="Doctoral research in experimental physics.",
        degree_level="PhD",
        institution=institution,
    )


@pytest.fixture
def program_payload() -> Dict[str, Any]:
    return {
        "program_id": "prog-json",
        "title": "MSc Data Science",
        "description": "Statistics, machine learning and data engineering.",
        "degree_level": "Masters",
        "tuition_fee": "Free for EU students",
        "has_scholarship": True,
        "scholarship_percentage": "50",
        "application_deadline": "2025-03-01",
        "institution": {"name": "Lakeside Institute", "location": "Berlin"},
    }


# ---------- Database ----------


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    Session = sessionmaker(bind=db_engine, autoflush=False, autocommit=False, future=True)
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded_db(db_session):
    """A student with a profile and documents plus published and draft programs."""
    created = datetime(2024, 1, 1)
    db_session.add_all([
        StudentProfileRecord(
            id="profile-1",
            user_id="student-a",
            full_name="Ada Student",
            email="ada@example.com",
            specialization="Computer Science",
            gpa="3.9",
            desired_degree_level="masters",
        ),
        StudentDocumentRecord(id="doc-1", user_id="student-a", document_type="Academic Transcripts",
                              file_name="transcripts.pdf", status="uploaded", created_at=created),
        StudentDocumentRecord(id="doc-2", user_id="student-a", document_type="Personal Statement",
                              file_name=None, status="pending", created_at=created),
        UniversityProfile(id="uni-1", name="Northbridge University", location="Dublin", is_published=True),
        UniversityProgram(id="prog-1", university_id="uni-1", title="Master of Computer Science",
                          degree_level="Master's", tuition_fee="$25,000", is_published=True,
                          application_deadline=date(2025, 3, 1), created_at=created),
        UniversityProgram(id="prog-2", university_id="uni-1", title="Bachelor of Arts in History",
                          degree_level="Bachelor", is_published=True, created_at=created),
        UniversityProgram(id="prog-3", university_id="uni-1", title="Master of Data Science",
                          degree_level="Master's", is_published=False, created_at=created),
    ])
    db_session.commit()
    return db_session


@pytest.fixture
def client(db_session):
    from fastapi.testclient import TestClient

    from db import get_db
    from main import app

    @contextmanager
    def _override():
        yield db_session

    app.dependency_overrides[get_db] = lambda: _override()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
