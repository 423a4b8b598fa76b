"""
Tests for the suitability HTTP endpoints.
"""


class TestScoreSnapshot:

    def test_scores_inline_payload(self, client, program_payload):
        response = client.post("/suitability", json={
            "profile": {"specialization": "Data Science", "gpa": "3.5", "desired_degree_level": "masters"},
            "documents": [{"document_type": "IELTS Score", "file_name": "ielts.pdf", "status": "uploaded"}],
            "programs": [program_payload],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["total_programs"] == 1
        assert body["results"][0]["score"] == 98
        assert body["results"][0]["tier"] == "Excellent Fit"
        assert body["tier_counts"]["Excellent Fit"] == 1

    def test_empty_payload(self, client):
        response = client.post("/suitability", json={})

        assert response.status_code == 200
        body = response.json()
        assert body["results"] == []
        assert body["warnings"]

    def test_malformed_program_does_not_reject_batch(self, client, program_payload):
        response = client.post("/suitability", json={
            "profile": {"specialization": "Data Science", "gpa": "3.5", "desired_degree_level": "masters"},
            "documents": [{"document_type": "IELTS Score", "file_name": "ielts.pdf", "status": "uploaded"}],
            "programs": [
                program_payload,
                dict(program_payload, program_id="prog-rolling", application_deadline="Rolling admissions"),
                dict(program_payload, program_id="prog-duration", duration=2),
                dict(program_payload, program_id="prog-bad-institution", institution="Lakeside"),
            ],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["total_programs"] == 4
        scores = {r["program_id"]: r["score"] for r in body["results"]}
        assert scores == {"prog-json": 98, "prog-rolling": 98, "prog-duration": 98, "prog-bad-institution": 98}
        by_id = {r["program_id"]: r for r in body["results"]}
        assert by_id["prog-bad-institution"]["institution_name"] == ""

    def test_invalid_document_status(self, client):
        response = client.post("/suitability", json={
            "documents": [{"document_type": "CV", "status": "archived"}],
        })
        assert response.status_code == 400


class TestStoredStudent:

    def test_full_format(self, client, seeded_db):
        response = client.get("/suitability/students/student-a")

        assert response.status_code == 200
        body = response.json()
        assert body["student_id"] == "student-a"
        assert [r["program_id"] for r in body["results"]] == ["prog-1"]
        assert body["results"][0]["score"] == 95

    def test_simple_format(self, client, seeded_db):
        response = client.get("/suitability/students/student-a", params={"format": "simple"})

        assert response.status_code == 200
        assert response.json()["count"] == 1


class TestDocumentAnalysis:

    def test_analysis(self, client):
        response = client.post("/suitability/documents/analysis", json={
            "documents": [{"document_type": "Upload", "file_name": "cv-transcript-2024.pdf", "status": "uploaded"}],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["completeness"] == 40
        assert body["has_transcripts"] and body["has_resume"]


def test_health(client):
    response = client.get("/suitability/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_startup_log_names_service(caplog):
    import importlib
    import logging

    import main

    caplog.set_level(logging.INFO, logger="main")
    importlib.reload(main)

    assert "Suitability API starting" in caplog.text
    assert "DATABASE_URL" not in caplog.text
