"""
Input records and the validation boundary in front of the SGPA engine.

Raw form values go in, frozen pydantic models come out. Anything outside the
allowed bounds is reported as a ``ValidationFailed`` carrying one
``FieldError`` per offending field.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from sgpacalc.core.errors import ErrorKind, FieldError, ValidationFailed

MAX_NAME_LENGTH = 100
MIN_MARKS = 0
MAX_MARKS = 100
MIN_CREDITS = 1
MAX_CREDITS = 10
MIN_SUBJECTS = 1
MAX_SUBJECTS = 15

_COUNT_MESSAGES = {
    "too_short": "At least one subject is required",
    "too_long": f"Maximum {MAX_SUBJECTS} subjects allowed",
}


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHERS = "others"
    PREFER_NOT_TO_SAY = "prefer-not-to-say"

    @property
    def label(self) -> str:
        return GENDER_LABELS[self]


GENDER_LABELS: Dict[Gender, str] = {
    Gender.MALE: "Male",
    Gender.FEMALE: "Female",
    Gender.OTHERS: "Others",
    Gender.PREFER_NOT_TO_SAY: "Prefer not to say",
}


class PersonalInfo(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    gender: Gender


class Subject(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    marks: int = Field(ge=MIN_MARKS, le=MAX_MARKS)
    credits: int = Field(ge=MIN_CREDITS, le=MAX_CREDITS)


def _check_subject_count(value: Any) -> Any:
    # Count the submitted rows, not just the ones that validate.
    if isinstance(value, (list, tuple)):
        if len(value) < MIN_SUBJECTS:
            raise PydanticCustomError("too_short", _COUNT_MESSAGES["too_short"])
        if len(value) > MAX_SUBJECTS:
            raise PydanticCustomError("too_long", _COUNT_MESSAGES["too_long"])
    return value


class SubjectList(BaseModel):
    model_config = ConfigDict(frozen=True)

    subjects: Tuple[Subject, ...]

    @field_validator("subjects", mode="before")
    @classmethod
    def check_subject_count(cls, value: Any) -> Any:
        return _check_subject_count(value)


class CalculationData(BaseModel):
    model_config = ConfigDict(frozen=True)

    personal_info: PersonalInfo
    subjects: Tuple[Subject, ...]

    @field_validator("subjects", mode="before")
    @classmethod
    def check_subject_count(cls, value: Any) -> Any:
        return _check_subject_count(value)


_KIND_BY_TYPE: Dict[str, ErrorKind] = {
    "missing": ErrorKind.REQUIRED,
    "string_too_short": ErrorKind.REQUIRED,
    "string_too_long": ErrorKind.ABOVE_MAXIMUM,
    "greater_than_equal": ErrorKind.BELOW_MINIMUM,
    "less_than_equal": ErrorKind.ABOVE_MAXIMUM,
    "too_short": ErrorKind.COUNT_OUT_OF_RANGE,
    "too_long": ErrorKind.COUNT_OUT_OF_RANGE,
    "enum": ErrorKind.INVALID_CHOICE,
    "int_parsing": ErrorKind.NOT_A_NUMBER,
    "int_from_float": ErrorKind.NOT_A_NUMBER,
    "int_type": ErrorKind.NOT_A_NUMBER,
}

# Error types where an empty form value means "nothing was entered".
_BLANK_MEANS_REQUIRED = {"enum", "int_parsing", "int_type", "string_type"}

_MESSAGES: Dict[Tuple[str, str, ErrorKind], str] = {
    ("personal", "name", ErrorKind.REQUIRED): "Name is required",
    ("personal", "name", ErrorKind.ABOVE_MAXIMUM): "Name is too long",
    ("personal", "gender", ErrorKind.REQUIRED): "Please select a gender",
    ("personal", "gender", ErrorKind.INVALID_CHOICE): (
        "Gender must be one of: " + ", ".join(GENDER_LABELS.values())
    ),
    ("subject", "name", ErrorKind.REQUIRED): "Subject name is required",
    ("subject", "name", ErrorKind.ABOVE_MAXIMUM): "Subject name is too long",
    ("subject", "marks", ErrorKind.REQUIRED): "Marks are required",
    ("subject", "marks", ErrorKind.BELOW_MINIMUM): f"Marks must be at least {MIN_MARKS}",
    ("subject", "marks", ErrorKind.ABOVE_MAXIMUM): f"Marks cannot exceed {MAX_MARKS}",
    ("subject", "marks", ErrorKind.NOT_A_NUMBER): "Marks must be a whole number",
    ("subject", "credits", ErrorKind.REQUIRED): "Credits are required",
    ("subject", "credits", ErrorKind.BELOW_MINIMUM): f"Credits must be at least {MIN_CREDITS}",
    ("subject", "credits", ErrorKind.ABOVE_MAXIMUM): f"Credits cannot exceed {MAX_CREDITS}",
    ("subject", "credits", ErrorKind.NOT_A_NUMBER): "Credits must be a whole number",
}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _scope_of(loc: Tuple[Any, ...]) -> Tuple[str, str]:
    parts = list(loc)
    if parts and parts[0] == "personal_info":
        parts = parts[1:]
    if parts and parts[0] == "subjects":
        if len(parts) >= 3:
            return "subject", str(parts[-1])
        return "subjects", ""
    return "personal", str(parts[-1]) if parts else ""


def _to_field_error(error: Mapping[str, Any]) -> FieldError:
    loc = tuple(error.get("loc", ()))
    error_type = str(error.get("type", ""))
    kind = _KIND_BY_TYPE.get(error_type, ErrorKind.INVALID)
    if error_type in _BLANK_MEANS_REQUIRED and _is_blank(error.get("input")):
        kind = ErrorKind.REQUIRED

    scope, field = _scope_of(loc)
    if scope == "subjects" and kind == ErrorKind.COUNT_OUT_OF_RANGE:
        message = _COUNT_MESSAGES[error_type]
    else:
        message = _MESSAGES.get((scope, field, kind), str(error.get("msg", "Invalid value")))

    return FieldError(
        field=".".join(str(part) for part in loc) or "__root__",
        kind=kind,
        message=message,
    )


def _field_errors(exc: ValidationError) -> ValidationFailed:
    return ValidationFailed(_to_field_error(err) for err in exc.errors())


def validate_personal_info(raw: Any) -> PersonalInfo:
    try:
        return PersonalInfo.model_validate(raw)
    except ValidationError as exc:
        raise _field_errors(exc) from exc


def validate_subjects(raw: Any) -> Tuple[Subject, ...]:
    """Validate an ordered list of subject rows, keeping their order."""
    if isinstance(raw, Mapping) or isinstance(raw, (str, bytes)):
        raise ValidationFailed(
            [FieldError("subjects", ErrorKind.INVALID, "Subjects must be a list")]
        )
    try:
        return SubjectList.model_validate({"subjects": list(raw)}).subjects
    except TypeError:
        raise ValidationFailed(
            [FieldError("subjects", ErrorKind.INVALID, "Subjects must be a list")]
        ) from None
    except ValidationError as exc:
        raise _field_errors(exc) from exc


def validate_calculation(raw: Any) -> CalculationData:
    try:
        return CalculationData.model_validate(raw)
    except ValidationError as exc:
        raise _field_errors(exc) from exc


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _row_value(row: Any, key: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(key)
    return getattr(row, key, None)


def count_completed_subjects(rows: Iterable[Any]) -> int:
    """
    Count subject rows that look filled in: a name, marks of at least 0 and
    positive credits. Used for the "N of M completed" hint, not validation.
    """
    completed = 0
    for row in rows:
        name = _row_value(row, "name")
        marks = _as_int(_row_value(row, "marks"))
        credits = _as_int(_row_value(row, "credits"))
        if _is_blank(name) or marks is None or credits is None:
            continue
        if marks >= 0 and credits > 0:
            completed += 1
    return completed


def subject_rows_from_models(subjects: Iterable[Subject]) -> List[Dict[str, str]]:
    """Turn stored subjects back into form rows, for navigating back."""
    return [
        {"name": subject.name, "marks": str(subject.marks), "credits": str(subject.credits)}
        for subject in subjects
    ]
