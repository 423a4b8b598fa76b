from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, String, Text

from .base import Base


class UniversityProfile(Base):
    __tablename__ = "university_profiles"

    id = Column(String(36), primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text)
    location = Column(String)
    logo_url = Column(String)
    banner_url = Column(String)
    website = Column(String)
    contact_email = Column(String)
    phone = Column(String)
    is_published = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime)
    updated_at = Column(DateTime)


class UniversityProgram(Base):
    __tablename__ = "university_programs"

    id = Column(String(36), primary_key=True)
    university_id = Column(String(36), ForeignKey("university_profiles.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(Text)
    degree_level = Column(String)
    tuition_fee = Column(String)
    duration = Column(String)
    delivery_mode = Column(String)
    application_deadline = Column(Date)

    # Scholarships
    has_scholarships = Column(Boolean, default=False)
    scholarship_percentage = Column(String)
    scholarship_amount = Column(String)
    scholarship_type = Column(String)
    scholarship_criteria = Column(Text)

    special_requirements = Column(Text)
    additional_criteria = Column(Text)
    is_published = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime)
    updated_at = Column(DateTime)
