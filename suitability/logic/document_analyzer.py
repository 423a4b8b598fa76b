"""
Document Completeness Analyzer

Derives a completeness percentage and readiness flags from a student's
document list, plus the overall profile completeness shown on the dashboard.
"""

from typing import Dict, List, Optional

from .contracts import DocumentAnalysis, DocumentRecord, DocumentStatus, StudentProfile
from .constants import (
    COMPETITIVE_DOCUMENTS,
    DOCUMENT_CATEGORY_RULES,
    ESSENTIAL_DOCUMENTS,
    EXPECTED_DOCUMENT_TYPES,
    PROFILE_COMPLETENESS_FIELDS,
    PROFILE_DOCUMENTS_WEIGHT,
    PROFILE_FIELDS_WEIGHT,
    DocumentCategory,
)


def uploaded_documents(documents: List[DocumentRecord]) -> List[DocumentRecord]:
    return [d for d in documents if d.status == DocumentStatus.UPLOADED]


def detect_categories(documents: List[DocumentRecord]) -> Dict[DocumentCategory, bool]:
    """
    Classify uploaded documents into categories.

    Document types and file names of all uploaded documents are pooled into
    one text, so a single file name can satisfy several categories.
    """
    pooled = " ".join(
        f"{doc.document_type or ''} {doc.file_name or ''}"
        for doc in uploaded_documents(documents)
    ).lower()

    return {
        category: any(keyword in pooled for keyword in keywords)
        for category, (keywords, _weight) in DOCUMENT_CATEGORY_RULES.items()
    }


def analyze_documents(documents: Optional[List[DocumentRecord]]) -> DocumentAnalysis:
    """
    Compute document completeness and readiness flags.

    Completeness is the sum of the weights of every detected category and is
    deliberately not clamped to 100.
    """
    documents = documents or []
    found = detect_categories(documents)

    completeness = sum(
        weight
        for category, (_keywords, weight) in DOCUMENT_CATEGORY_RULES.items()
        if found[category]
    )

    return DocumentAnalysis(
        completeness=completeness,
        uploaded_count=len(uploaded_documents(documents)),
        has_transcripts=found[DocumentCategory.TRANSCRIPTS],
        has_personal_statement=found[DocumentCategory.PERSONAL_STATEMENT],
        has_language_test=found[DocumentCategory.LANGUAGE_TEST],
        has_recommendation_letters=found[DocumentCategory.RECOMMENDATION_LETTERS],
        has_resume=found[DocumentCategory.RESUME],
        has_portfolio=found[DocumentCategory.PORTFOLIO],
        has_essential_docs=all(found[c] for c in ESSENTIAL_DOCUMENTS),
        has_competitive_docs=all(found[c] for c in COMPETITIVE_DOCUMENTS),
    )


def missing_categories(
    analysis: DocumentAnalysis,
    categories: List[DocumentCategory]
) -> List[DocumentCategory]:
    """Categories from `categories` not covered by the analysis, in order."""
    flags = {
        DocumentCategory.TRANSCRIPTS: analysis.has_transcripts,
        DocumentCategory.PERSONAL_STATEMENT: analysis.has_personal_statement,
        DocumentCategory.LANGUAGE_TEST: analysis.has_language_test,
        DocumentCategory.RECOMMENDATION_LETTERS: analysis.has_recommendation_letters,
        DocumentCategory.RESUME: analysis.has_resume,
        DocumentCategory.PORTFOLIO: analysis.has_portfolio,
    }
    return [c for c in categories if not flags[c]]


def profile_completeness(
    profile: Optional[StudentProfile],
    documents: Optional[List[DocumentRecord]]
) -> int:
    """
    Dashboard profile completeness: 70% profile fields, 30% uploaded documents.

    Capped at 100. The dashboard formula this mirrors has no cap, so a student
    with more than five uploaded documents could otherwise exceed 100.
    """
    if profile is None:
        return 0

    filled = sum(1 for field in PROFILE_COMPLETENESS_FIELDS if getattr(profile, field, None))
    uploaded = len(uploaded_documents(documents or []))

    value = (
        filled / len(PROFILE_COMPLETENESS_FIELDS) * PROFILE_FIELDS_WEIGHT
        + uploaded / len(EXPECTED_DOCUMENT_TYPES) * PROFILE_DOCUMENTS_WEIGHT
    )
    return min(100, int(value + 0.5))
