from sqlalchemy import Column, DateTime, String, Text

from .base import Base


class StudentProfileRecord(Base):
    __tablename__ = "student_profiles"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)

    full_name = Column(String)
    email = Column(String)
    phone = Column(String)
    country = Column(String)
    bio = Column(Text)

    # Academic
    specialization = Column(String)
    year_of_study = Column(String)
    gpa = Column(String)
    desired_degree_level = Column(String)

    created_at = Column(DateTime)
    updated_at = Column(DateTime)


class StudentDocumentRecord(Base):
    __tablename__ = "student_documents"

    id = Column(String(36), primary_key=True)
    user_id = Column(String(36), nullable=False, index=True)
    document_type = Column(String, nullable=False)
    file_name = Column(String)
    file_url = Column(String)
    status = Column(String, nullable=False, default="pending")

    created_at = Column(DateTime)
    updated_at = Column(DateTime)
