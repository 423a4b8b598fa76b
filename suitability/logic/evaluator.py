"""
Suitability Evaluator

Scores one (student, program) pair on a 0-100 scale.

Model: base 15 plus five independently capped components, evaluated in this
order (the order also drives the order of the explanation lists):

    degree alignment   <= 30
    GPA requirement    <= 25
    field match        <= 20
    documents          <= 15
    financial bonus    <= 10

The sum is clamped to [0, 100] and rounded half up. Missing profile or
program fields fall back to neutral values; nothing here raises.
"""

import math
from typing import List, Optional, Tuple

from .classifier import classify_score
from .contracts import (
    ComponentNotes,
    ComponentScore,
    DocumentAnalysis,
    Program,
    StudentProfile,
    SuitabilityResult,
)
from .constants import (
    BASE_SCORE,
    COMPONENT_CAPS,
    DEFAULT_REQUIRED_GPA,
    DEGREE_ALIGNMENT_KEYWORDS,
    DEGREE_BASELINE_POINTS,
    DEGREE_LABELS,
    DEGREE_MATCH_POINTS,
    DEGREE_SPECIALIZATION_BONUS,
    DOCUMENT_CATEGORY_LABELS,
    ESSENTIAL_DOCUMENTS,
    FREE_TUITION_MARKERS,
    FREE_TUITION_POINTS,
    GPA_BELOW_POINTS,
    GPA_EXCEEDS_MARGIN,
    GPA_EXCEEDS_POINTS,
    GPA_MEETS_POINTS,
    GPA_NEUTRAL_POINTS,
    GPA_SLIGHTLY_BELOW_MARGIN,
    GPA_SLIGHTLY_BELOW_POINTS,
    MAX_IMPROVEMENT_AREAS,
    MAX_REASONS,
    MAX_SCORE,
    MAX_STRENGTHS,
    MIN_SCORE,
    RELATED_FIELDS,
    REQUIRED_GPA_BY_DEGREE,
    SCHOLARSHIP_POINTS,
    SPECIALIZATION_DESCRIPTION_POINTS,
    SPECIALIZATION_DIFFERENT_POINTS,
    SPECIALIZATION_NEUTRAL_POINTS,
    SPECIALIZATION_RELATED_POINTS,
    SPECIALIZATION_TITLE_POINTS,
)
from .degree_filter import normalize_desired_degree
from .document_analyzer import missing_categories


ComponentOutcome = Tuple[ComponentScore, ComponentNotes]


def score_degree_alignment(
    profile: StudentProfile,
    program: Program
) -> ComponentOutcome:
    """
    Compare the program's degree with the desired degree level.

    +25 when the degree text matches, +5 otherwise, and +5 more when the
    program title contains the student's specialization.
    """
    notes = ComponentNotes()
    desired = normalize_desired_degree(profile.desired_degree_level)
    degree_text = _degree_text(program)
    title = (program.title or "").lower()
    specialization = _specialization(profile)

    keywords = DEGREE_ALIGNMENT_KEYWORDS.get(desired, [desired] if desired else [])
    label = DEGREE_LABELS.get(desired, desired)

    if any(keyword in degree_text for keyword in keywords):
        points = DEGREE_MATCH_POINTS
        notes.reasons.append(f"Offers the {label} degree you are aiming for")
    else:
        points = DEGREE_BASELINE_POINTS
        if desired:
            notes.reasons.append(f"Degree level differs from your {label} goal")
        else:
            notes.improvement_areas.append("Set your desired degree level to sharpen matches")

    if specialization and specialization.lower() in title:
        points += DEGREE_SPECIALIZATION_BONUS
        notes.strengths.append(f"Program title matches your {specialization} specialization")

    cap = COMPONENT_CAPS["degree_alignment"]
    return ComponentScore(
        component="degree_alignment",
        points=min(cap, points),
        cap=cap,
        explanation=f"Desired: {desired or 'not set'}, Program: {degree_text or 'unknown'}"
    ), notes


def estimate_required_gpa(program: Program) -> float:
    """Typical GPA requirement for the program's degree level."""
    degree_text = _degree_text(program)
    for keywords, required in REQUIRED_GPA_BY_DEGREE:
        if any(keyword in degree_text for keyword in keywords):
            return required
    return DEFAULT_REQUIRED_GPA


def parse_gpa(raw: Optional[str]) -> Optional[float]:
    """Parse a GPA string; anything unparseable counts as missing."""
    if raw is None:
        return None
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def score_gpa(
    profile: StudentProfile,
    program: Program
) -> ComponentOutcome:
    """
    Score the student's GPA against the estimated requirement.
    """
    notes = ComponentNotes()
    gpa = parse_gpa(profile.gpa)
    required = estimate_required_gpa(program)

    # rounded so that e.g. 3.2 - 0.3 compares as 2.9
    exceeds_at = round(required + GPA_EXCEEDS_MARGIN, 2)
    slightly_below_at = round(required - GPA_SLIGHTLY_BELOW_MARGIN, 2)

    if gpa is None:
        points = GPA_NEUTRAL_POINTS
        band = "missing"
        notes.improvement_areas.append("Add your GPA to your profile for a more accurate assessment")
    elif gpa >= exceeds_at:
        points = GPA_EXCEEDS_POINTS
        band = "exceeds"
        notes.reasons.append("Strong academic record for this program")
        notes.strengths.append(f"GPA of {gpa:.2f} exceeds the typical {required:.1f} requirement")
    elif gpa >= required:
        points = GPA_MEETS_POINTS
        band = "meets"
        notes.reasons.append(f"GPA of {gpa:.2f} meets the typical {required:.1f} requirement")
    elif gpa >= slightly_below_at:
        points = GPA_SLIGHTLY_BELOW_POINTS
        band = "slightly_below"
        notes.reasons.append(f"GPA of {gpa:.2f} is slightly below the typical {required:.1f} requirement")
    else:
        points = GPA_BELOW_POINTS
        band = "below"
        notes.improvement_areas.append(f"GPA of {gpa:.2f} is below the typical {required:.1f} requirement")

    cap = COMPONENT_CAPS["gpa"]
    return ComponentScore(
        component="gpa",
        points=min(cap, points),
        cap=cap,
        explanation=f"GPA: {'n/a' if gpa is None else gpa}, Required: {required}, Band: {band}"
    ), notes


def score_specialization(
    profile: StudentProfile,
    program: Program
) -> ComponentOutcome:
    """
    Score how closely the program's field matches the student's specialization.
    """
    notes = ComponentNotes()
    specialization = _specialization(profile)
    title = (program.title or "").lower()
    description = (program.description or "").lower()

    if not specialization:
        points = SPECIALIZATION_NEUTRAL_POINTS
        match = "not_set"
        notes.improvement_areas.append("Add your specialization to your profile for closer field matches")
    elif specialization.lower() in title:
        points = SPECIALIZATION_TITLE_POINTS
        match = "title"
        notes.reasons.append(f"Directly aligned with your {specialization} background")
    elif specialization.lower() in description:
        points = SPECIALIZATION_DESCRIPTION_POINTS
        match = "description"
        notes.reasons.append(f"Curriculum covers your {specialization} interests")
    elif _has_related_field(specialization, f"{title} {description}"):
        points = SPECIALIZATION_RELATED_POINTS
        match = "related"
        notes.reasons.append(f"Related to your {specialization} background")
    else:
        points = SPECIALIZATION_DIFFERENT_POINTS
        match = "different"
        notes.reasons.append(f"A different field from your {specialization} background")

    cap = COMPONENT_CAPS["specialization"]
    return ComponentScore(
        component="specialization",
        points=min(cap, points),
        cap=cap,
        explanation=f"Specialization: {specialization or 'not set'}, Match: {match}"
    ), notes


def score_documents(analysis: DocumentAnalysis) -> ComponentOutcome:
    """
    Scale document completeness (0-100+) to at most 15 points.
    """
    notes = ComponentNotes()
    cap = COMPONENT_CAPS["documents"]
    points = min(cap, analysis.completeness * cap / 100)

    if analysis.has_essential_docs:
        notes.strengths.append("Essential application documents are ready")
    else:
        missing = missing_categories(analysis, ESSENTIAL_DOCUMENTS)
        labels = [DOCUMENT_CATEGORY_LABELS[c] for c in missing]
        notes.improvement_areas.append(f"Upload your {' and '.join(labels)}")

    if analysis.has_competitive_docs:
        notes.strengths.append("Recommendation letters and resume strengthen your application")

    return ComponentScore(
        component="documents",
        points=points,
        cap=cap,
        explanation=f"Document completeness: {analysis.completeness}%"
    ), notes


def score_financial(program: Program) -> ComponentOutcome:
    """
    Bonus for scholarships and free tuition.

    The tuition check is a literal substring test on the fee text.
    """
    notes = ComponentNotes()
    points = 0

    if program.has_scholarship:
        points += SCHOLARSHIP_POINTS
        percentage = (program.scholarship_percentage or "").strip()
        if percentage:
            if not percentage.endswith("%"):
                percentage += "%"
            notes.reasons.append(f"Scholarship available covering up to {percentage} of tuition")
        else:
            notes.reasons.append("Scholarship available")

    tuition = (program.tuition_fee or "").lower()
    if any(marker in tuition for marker in FREE_TUITION_MARKERS):
        points += FREE_TUITION_POINTS
        notes.reasons.append("Tuition-free program")

    cap = COMPONENT_CAPS["financial"]
    return ComponentScore(
        component="financial",
        points=min(cap, points),
        cap=cap,
        explanation=f"Scholarship: {bool(program.has_scholarship)}, Tuition: {program.tuition_fee or 'unknown'}"
    ), notes


def evaluate_program(
    profile: Optional[StudentProfile],
    program: Program,
    analysis: DocumentAnalysis
) -> SuitabilityResult:
    """
    Compute the suitability result for one program.

    Args:
        profile: Student profile, None for a student without one
        program: Program joined with its institution
        analysis: Output of analyze_documents for the student's documents

    Returns:
        SuitabilityResult with score, tier and truncated explanation lists
    """
    profile = profile or StudentProfile()

    outcomes: List[ComponentOutcome] = [
        score_degree_alignment(profile, program),
        score_gpa(profile, program),
        score_specialization(profile, program),
        score_documents(analysis),
        score_financial(program),
    ]

    raw = BASE_SCORE + sum(component.points for component, _ in outcomes)
    clamped = max(MIN_SCORE, min(MAX_SCORE, raw))
    score = int(math.floor(clamped + 0.5))

    reasons: List[str] = []
    strengths: List[str] = []
    improvement_areas: List[str] = []
    for _, notes in outcomes:
        reasons.extend(notes.reasons)
        strengths.extend(notes.strengths)
        improvement_areas.extend(notes.improvement_areas)

    return SuitabilityResult(
        program_id=program.program_id,
        program_title=program.title or "",
        institution_name=program.institution.name if program.institution else "",
        score=score,
        tier=classify_score(score),
        reasons=reasons[:MAX_REASONS],
        strengths=strengths[:MAX_STRENGTHS],
        improvement_areas=improvement_areas[:MAX_IMPROVEMENT_AREAS],
        breakdown=[component for component, _ in outcomes],
    )


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _degree_text(program: Program) -> str:
    """Degree level text, falling back to the title when the level is blank."""
    level = (program.degree_level or "").strip()
    return (level or program.title or "").lower()


def _specialization(profile: StudentProfile) -> str:
    return (profile.specialization or "").strip()


def _has_related_field(specialization: str, text: str) -> bool:
    """Check the related-field table for a term present in `text`."""
    spec = specialization.lower()
    for field, related_terms in RELATED_FIELDS.items():
        if field in spec and any(term in text for term in related_terms):
            return True
    return False
