from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GradeRung:
    min_marks: int
    grade_points: int
    grade: str


# Sorted by min_marks, highest first. The first rung whose threshold the
# marks reach wins.
GRADE_LADDER: Tuple[GradeRung, ...] = (
    GradeRung(90, 10, "O"),
    GradeRung(80, 9, "A+"),
    GradeRung(70, 8, "A"),
    GradeRung(60, 7, "B+"),
    GradeRung(50, 6, "B"),
    GradeRung(40, 5, "C"),
    GradeRung(30, 4, "D"),
    GradeRung(20, 3, "E"),
    GradeRung(10, 2, "F"),
    GradeRung(0, 1, "F"),
)


def grade_from_marks(marks: int) -> Tuple[int, str]:
    """
    Map marks out of 100 to (grade_points, grade).

    Marks are expected in [0, 100]; anything below 0 lands on the last rung.
    """
    for rung in GRADE_LADDER:
        if marks >= rung.min_marks:
            return rung.grade_points, rung.grade
    lowest = GRADE_LADDER[-1]
    return lowest.grade_points, lowest.grade
