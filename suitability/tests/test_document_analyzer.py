"""
Tests for document completeness and profile completeness.
"""

from suitability.logic.contracts import DocumentRecord, StudentProfile
from suitability.logic.document_analyzer import analyze_documents, profile_completeness


def _uploaded(document_type, file_name=None):
    return DocumentRecord(document_type=document_type, file_name=file_name, status="uploaded")


class TestAnalyzeDocuments:

    def test_no_documents(self):
        analysis = analyze_documents([])
        assert analysis.completeness == 0
        assert analysis.uploaded_count == 0
        assert not analysis.has_essential_docs
        assert not analysis.has_competitive_docs

    def test_none_is_empty(self):
        assert analyze_documents(None).completeness == 0

    def test_full_dashboard_set(self, full_documents):
        analysis = analyze_documents(full_documents)
        assert analysis.completeness == 100
        assert analysis.uploaded_count == 5
        assert analysis.has_essential_docs
        assert analysis.has_competitive_docs
        assert not analysis.has_portfolio

    def test_pending_documents_ignored(self):
        docs = [
            DocumentRecord(document_type="Academic Transcripts", file_name="t.pdf", status="pending"),
            _uploaded("IELTS Score", "ielts.pdf"),
        ]
        analysis = analyze_documents(docs)
        assert analysis.completeness == 20
        assert not analysis.has_transcripts
        assert analysis.has_language_test

    def test_filename_in_two_categories_counts_twice(self):
        analysis = analyze_documents([_uploaded("Upload", "cv-transcript-2024.pdf")])
        assert analysis.has_transcripts
        assert analysis.has_resume
        assert analysis.completeness == 40

    def test_completeness_not_clamped(self, full_documents):
        docs = full_documents + [_uploaded("Portfolio", "project-work.pdf")]
        analysis = analyze_documents(docs)
        assert analysis.completeness == 110

    def test_matching_is_case_insensitive(self):
        analysis = analyze_documents([_uploaded("TOEFL", None)])
        assert analysis.has_language_test

    def test_essential_requires_all_three(self):
        docs = [_uploaded("Academic Transcripts"), _uploaded("Personal Statement")]
        analysis = analyze_documents(docs)
        assert analysis.completeness == 55
        assert not analysis.has_essential_docs


class TestProfileCompleteness:

    def test_no_profile(self, full_documents):
        assert profile_completeness(None, full_documents) == 0

    def test_empty_profile_no_documents(self):
        assert profile_completeness(StudentProfile(), []) == 0

    def test_complete(self, full_documents):
        profile = StudentProfile(
            full_name="Ada", email="ada@example.com", phone="123", country="IE",
            specialization="Computer Science", year_of_study="3", gpa="3.5",
        )
        assert profile_completeness(profile, full_documents) == 100

    def test_partial(self):
        profile = StudentProfile(full_name="Ada", email="ada@example.com")
        docs = [_uploaded("CV/Resume", "cv.pdf")]
        # 2/7 * 70 + 1/5 * 30 = 20 + 6
        assert profile_completeness(profile, docs) == 26

    def test_capped_when_more_than_five_documents(self, full_documents):
        profile = StudentProfile(
            full_name="Ada", email="ada@example.com", phone="123", country="IE",
            specialization="Computer Science", year_of_study="3", gpa="3.5",
        )
        docs = full_documents + [_uploaded("Portfolio", "portfolio.pdf"), _uploaded("Passport", "passport.pdf")]
        # 70 + 7/5 * 30 = 112 before the cap
        assert profile_completeness(profile, docs) == 100
