"""
Tests for degree-level filtering.
"""

import pytest

from suitability.logic.contracts import Program
from suitability.logic.degree_filter import filter_by_degree_level, get_degree_synonyms


@pytest.fixture
def mixed_programs():
    return [
        Program(program_id="1", title="Bachelor of Science in Nursing", degree_level="Bachelor"),
        Program(program_id="2", title="Master of Computer Science", degree_level="Master's"),
        Program(program_id="3", title="Doctorate in Chemistry", degree_level="Doctoral"),
        Program(program_id="4", title="MBA", degree_level=None),
        Program(program_id="5", title="Postdoctoral Fellowship", degree_level="Post-Doctoral"),
    ]


class TestNoFilter:
    """Empty desired degree leaves the list untouched."""

    @pytest.mark.parametrize("desired", [None, "", "   "])
    def test_identity(self, mixed_programs, desired):
        result = filter_by_degree_level(mixed_programs, desired)
        assert [p.program_id for p in result] == ["1", "2", "3", "4", "5"]

    def test_empty_input(self):
        assert filter_by_degree_level([], "masters") == []


class TestDegreeMatching:

    def test_masters(self, mixed_programs):
        result = filter_by_degree_level(mixed_programs, "masters")
        assert [p.program_id for p in result] == ["2", "4"]

    def test_phd_matches_doctoral_text(self, mixed_programs):
        # "post-doctoral" contains "doctoral", so the fellowship matches too
        result = filter_by_degree_level(mixed_programs, "phd")
        assert [p.program_id for p in result] == ["3", "5"]

    def test_postdoc(self, mixed_programs):
        result = filter_by_degree_level(mixed_programs, "postdoc")
        assert [p.program_id for p in result] == ["5"]

    def test_case_insensitive_desired_value(self, mixed_programs):
        result = filter_by_degree_level(mixed_programs, "  MASTERS ")
        assert [p.program_id for p in result] == ["2", "4"]

    def test_description_is_searched(self):
        program = Program(program_id="x", title="Applied Physics", description="An undergraduate course.")
        assert filter_by_degree_level([program], "bachelors") == [program]

    def test_no_match_returns_empty(self):
        program = Program(program_id="x", title="PhD in Physics", degree_level="PhD")
        assert filter_by_degree_level([program], "bachelors") == []

    def test_order_preserved(self):
        programs = [
            Program(program_id=str(i), title=f"Master of Field {i}", degree_level="Master")
            for i in range(5, 0, -1)
        ]
        result = filter_by_degree_level(programs, "masters")
        assert [p.program_id for p in result] == ["5", "4", "3", "2", "1"]


class TestSynonyms:

    def test_known_level(self):
        assert "bsc" in get_degree_synonyms("bachelors")
        assert "ph.d" in get_degree_synonyms("phd")

    def test_legacy_value_matches_itself(self):
        assert get_degree_synonyms("Diploma") == ["diploma"]

    def test_empty(self):
        assert get_degree_synonyms(None) == []
