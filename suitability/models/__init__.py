# Export all suitability models for easy imports
from .base import Base
from .student import StudentProfileRecord, StudentDocumentRecord
from .university import UniversityProfile, UniversityProgram

__all__ = [
    "Base",
    "StudentProfileRecord",
    "StudentDocumentRecord",
    "UniversityProfile",
    "UniversityProgram",
]
