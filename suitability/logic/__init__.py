"""
Suitability Logic Module

Provides the deterministic scorer that ranks university programs against a
student profile.
"""

from .contracts import (
    StudentProfile,
    DocumentRecord,
    DocumentStatus,
    Institution,
    Program,
    SuitabilityResult,
    SuitabilityOutput,
    DocumentAnalysis,
    ComponentScore,
)
from .engine import SuitabilityEngine, get_suitability, score_programs
from .constants import SuitabilityTier

__all__ = [
    # Main engine
    "SuitabilityEngine",
    "get_suitability",
    "score_programs",

    # Contracts
    "StudentProfile",
    "DocumentRecord",
    "DocumentStatus",
    "Institution",
    "Program",
    "SuitabilityResult",
    "SuitabilityOutput",
    "DocumentAnalysis",
    "ComponentScore",

    # Enums
    "SuitabilityTier",
]
