from dataclasses import dataclass
from typing import Iterable, Tuple

from sgpacalc.core.grades import grade_from_marks
from sgpacalc.core.schemas import Subject


@dataclass(frozen=True)
class SubjectResult:
    name: str
    marks: int
    credits: int
    grade_points: int
    grade: str
    earned_credits: int


@dataclass(frozen=True)
class AggregateResult:
    subject_results: Tuple[SubjectResult, ...]
    total_credits: int
    total_earned_credits: int
    sgpa: float

    @property
    def subject_count(self) -> int:
        return len(self.subject_results)

    def formatted_sgpa(self, decimals: int = 2) -> str:
        return f"{self.sgpa:.{decimals}f}"


def build_subject_result(subject: Subject) -> SubjectResult:
    grade_points, grade = grade_from_marks(subject.marks)
    return SubjectResult(
        name=subject.name,
        marks=subject.marks,
        credits=subject.credits,
        grade_points=grade_points,
        grade=grade,
        earned_credits=grade_points * subject.credits,
    )


def calculate_sgpa(subjects: Iterable[Subject]) -> AggregateResult:
    """
    SGPA = Σ(grade_points * credits) / Σ(credits)

    Results keep the input order. With zero total credits the SGPA is 0.0
    rather than an error.
    """
    subject_results = tuple(build_subject_result(subject) for subject in subjects)

    total_credits = 0
    total_earned_credits = 0
    for result in subject_results:
        total_credits += result.credits
        total_earned_credits += result.earned_credits

    if total_credits == 0:
        sgpa = 0.0
    else:
        sgpa = total_earned_credits / total_credits

    return AggregateResult(
        subject_results=subject_results,
        total_credits=total_credits,
        total_earned_credits=total_earned_credits,
        sgpa=sgpa,
    )
