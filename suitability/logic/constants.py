"""
Scoring Engine Constants

Keyword tables, component caps, GPA estimates and tier thresholds used by the
suitability scorer. All values are deterministic with no AI/ML components.
Changing any table here changes scores; bump KEYWORD_TABLE_VERSION when you do.
"""

from enum import Enum
from typing import Dict, List, Tuple

KEYWORD_TABLE_VERSION = "2024.1"
ENGINE_VERSION = "1.0.0"

# =============================================================================
# DEGREE LEVELS
# =============================================================================

# Used by the degree-level filter (substring match on level/title/description)
DEGREE_SYNONYMS: Dict[str, List[str]] = {
    "bachelors": ["bachelor", "undergraduate", "bachelors", "ba", "bs", "bsc"],
    "masters": ["master", "masters", "graduate", "ma", "ms", "msc", "mba"],
    "phd": ["phd", "doctorate", "doctoral", "ph.d"],
    "postdoc": ["postdoc", "post-doctoral", "research"],
}

# Narrower table used for the degree-alignment component
DEGREE_ALIGNMENT_KEYWORDS: Dict[str, List[str]] = {
    "bachelors": ["bachelor"],
    "masters": ["master"],
    "phd": ["phd", "doctorate"],
    "postdoc": ["postdoc"],
}

DEGREE_LABELS: Dict[str, str] = {
    "bachelors": "bachelor's",
    "masters": "master's",
    "phd": "doctoral",
    "postdoc": "postdoctoral",
}

# =============================================================================
# GPA REQUIREMENTS
# =============================================================================

# Checked in order against the program's degree text
REQUIRED_GPA_BY_DEGREE: List[Tuple[Tuple[str, ...], float]] = [
    (("phd", "doctorate"), 3.5),
    (("master",), 3.2),
]
DEFAULT_REQUIRED_GPA = 2.8

GPA_EXCEEDS_MARGIN = 0.5
GPA_SLIGHTLY_BELOW_MARGIN = 0.3

# =============================================================================
# FIELD MATCHING
# =============================================================================

RELATED_FIELDS: Dict[str, List[str]] = {
    "computer science": ["software", "programming", "data", "ai", "machine learning", "technology"],
    "information technology": ["software", "computing", "networks", "cyber", "data", "technology"],
    "data science": ["data", "analytics", "statistics", "machine learning", "ai"],
    "engineering": ["mechanical", "electrical", "civil", "engineering", "technology", "robotics"],
    "business": ["management", "finance", "marketing", "mba", "economics", "accounting"],
    "economics": ["finance", "business", "policy", "econometrics", "accounting"],
    "medicine": ["health", "medical", "clinical", "nursing", "biomedical", "public health"],
    "biology": ["life sciences", "biotechnology", "genetics", "biomedical", "ecology"],
    "psychology": ["behavioral", "cognitive", "neuroscience", "counseling", "mental health"],
    "law": ["legal", "justice", "policy", "international relations"],
    "arts": ["design", "media", "humanities", "fine art", "music"],
    "education": ["teaching", "pedagogy", "learning", "curriculum"],
}

# =============================================================================
# DOCUMENT CATEGORIES
# =============================================================================

class DocumentCategory(str, Enum):
    """Document buckets recognised by the completeness analyzer."""
    TRANSCRIPTS = "transcripts"
    PERSONAL_STATEMENT = "personal_statement"
    LANGUAGE_TEST = "language_test"
    RECOMMENDATION_LETTERS = "recommendation_letters"
    RESUME = "resume"
    PORTFOLIO = "portfolio"


# (keywords, weight); a document may land in several buckets at once
DOCUMENT_CATEGORY_RULES: Dict[DocumentCategory, Tuple[Tuple[str, ...], int]] = {
    DocumentCategory.TRANSCRIPTS: (("transcript", "academic", "grades"), 30),
    DocumentCategory.PERSONAL_STATEMENT: (("statement", "essay", "personal", "sop"), 25),
    DocumentCategory.LANGUAGE_TEST: (("ielts", "toefl", "language", "english"), 20),
    DocumentCategory.RECOMMENDATION_LETTERS: (("recommendation", "reference", "lor"), 15),
    DocumentCategory.RESUME: (("resume", "cv", "curriculum"), 10),
    DocumentCategory.PORTFOLIO: (("portfolio", "work", "project"), 10),
}

ESSENTIAL_DOCUMENTS = [
    DocumentCategory.TRANSCRIPTS,
    DocumentCategory.PERSONAL_STATEMENT,
    DocumentCategory.LANGUAGE_TEST,
]

COMPETITIVE_DOCUMENTS = [
    DocumentCategory.RECOMMENDATION_LETTERS,
    DocumentCategory.RESUME,
]

DOCUMENT_CATEGORY_LABELS: Dict[DocumentCategory, str] = {
    DocumentCategory.TRANSCRIPTS: "academic transcripts",
    DocumentCategory.PERSONAL_STATEMENT: "personal statement",
    DocumentCategory.LANGUAGE_TEST: "language test results",
    DocumentCategory.RECOMMENDATION_LETTERS: "recommendation letters",
    DocumentCategory.RESUME: "resume",
    DocumentCategory.PORTFOLIO: "portfolio",
}

# Document slots shown on the student dashboard
EXPECTED_DOCUMENT_TYPES = [
    "Academic Transcripts",
    "CV/Resume",
    "IELTS Score",
    "Personal Statement",
    "Letters of Recommendation",
]

# =============================================================================
# PROFILE COMPLETENESS
# =============================================================================

PROFILE_COMPLETENESS_FIELDS = [
    "full_name",
    "email",
    "phone",
    "country",
    "specialization",
    "year_of_study",
    "gpa",
]
PROFILE_FIELDS_WEIGHT = 70
PROFILE_DOCUMENTS_WEIGHT = 30

# =============================================================================
# COMPONENT SCORING
# =============================================================================

BASE_SCORE = 15
MIN_SCORE = 0
MAX_SCORE = 100

COMPONENT_CAPS: Dict[str, float] = {
    "degree_alignment": 30,
    "gpa": 25,
    "specialization": 20,
    "documents": 15,
    "financial": 10,
}

DEGREE_MATCH_POINTS = 25
DEGREE_BASELINE_POINTS = 5
DEGREE_SPECIALIZATION_BONUS = 5

GPA_NEUTRAL_POINTS = 10
GPA_EXCEEDS_POINTS = 25
GPA_MEETS_POINTS = 20
GPA_SLIGHTLY_BELOW_POINTS = 10
GPA_BELOW_POINTS = 5

SPECIALIZATION_NEUTRAL_POINTS = 10
SPECIALIZATION_TITLE_POINTS = 20
SPECIALIZATION_DESCRIPTION_POINTS = 15
SPECIALIZATION_RELATED_POINTS = 10
SPECIALIZATION_DIFFERENT_POINTS = 5

SCHOLARSHIP_POINTS = 5
FREE_TUITION_POINTS = 5
FREE_TUITION_MARKERS = ("$0", "free")

MAX_REASONS = 4
MAX_STRENGTHS = 3
MAX_IMPROVEMENT_AREAS = 2

# =============================================================================
# TIERS
# =============================================================================

class SuitabilityTier(str, Enum):
    """Qualitative buckets shown by the dashboard."""
    EXCELLENT_FIT = "Excellent Fit"
    GOOD_FIT = "Good Fit"
    AVERAGE_FIT = "Average Fit"
    CHALLENGING = "Challenging"
    GROWTH_OPPORTUNITY = "Growth Opportunity"


# Inclusive lower bounds, checked from highest to lowest
TIER_THRESHOLDS: List[Tuple[SuitabilityTier, int]] = [
    (SuitabilityTier.EXCELLENT_FIT, 85),
    (SuitabilityTier.GOOD_FIT, 70),
    (SuitabilityTier.AVERAGE_FIT, 55),
    (SuitabilityTier.CHALLENGING, 40),
]
