import unittest

from pydantic import ValidationError

from sgpacalc.core.errors import ErrorKind, ValidationFailed
from sgpacalc.core.schemas import (
    Gender,
    Subject,
    count_completed_subjects,
    subject_rows_from_models,
    validate_calculation,
    validate_personal_info,
    validate_subjects,
)


def _row(name="Maths", marks="80", credits="4"):
    return {"name": name, "marks": marks, "credits": credits}


class PersonalInfoValidationTests(unittest.TestCase):
    def test_valid_input_is_trimmed(self):
        info = validate_personal_info({"name": "  Asha Rao  ", "gender": "prefer-not-to-say"})
        self.assertEqual(info.name, "Asha Rao")
        self.assertEqual(info.gender, Gender.PREFER_NOT_TO_SAY)
        self.assertEqual(info.gender.label, "Prefer not to say")

    def test_blank_fields_are_required(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_personal_info({"name": "   ", "gender": ""})
        errors = ctx.exception
        self.assertEqual(set(errors.fields), {"name", "gender"})
        self.assertEqual(errors.for_field("name").kind, ErrorKind.REQUIRED)
        self.assertEqual(errors.for_field("name").message, "Name is required")
        self.assertEqual(errors.for_field("gender").kind, ErrorKind.REQUIRED)

    def test_name_too_long(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_personal_info({"name": "x" * 101, "gender": "female"})
        error = ctx.exception.for_field("name")
        self.assertEqual(error.kind, ErrorKind.ABOVE_MAXIMUM)
        self.assertEqual(error.message, "Name is too long")

    def test_name_at_limit_is_accepted(self):
        info = validate_personal_info({"name": "x" * 100, "gender": "male"})
        self.assertEqual(len(info.name), 100)

    def test_unknown_gender(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_personal_info({"name": "Sam", "gender": "robot"})
        self.assertEqual(ctx.exception.for_field("gender").kind, ErrorKind.INVALID_CHOICE)

    def test_missing_keys(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_personal_info({})
        self.assertEqual(
            {err.kind for err in ctx.exception.errors},
            {ErrorKind.REQUIRED},
        )

    def test_record_is_frozen(self):
        info = validate_personal_info({"name": "Sam", "gender": "others"})
        with self.assertRaises(ValidationError):
            info.name = "Other"


class SubjectValidationTests(unittest.TestCase):
    def test_form_strings_are_coerced(self):
        subjects = validate_subjects([_row(), _row("Physics", "100", "10")])
        self.assertEqual(subjects[0], Subject(name="Maths", marks=80, credits=4))
        self.assertEqual(subjects[1].marks, 100)
        self.assertIsInstance(subjects, tuple)

    def test_bounds_are_inclusive(self):
        subjects = validate_subjects([_row(marks=0, credits=1), _row(marks=100, credits=10)])
        self.assertEqual([(s.marks, s.credits) for s in subjects], [(0, 1), (100, 10)])

    def test_out_of_range_values_are_reported_per_field(self):
        rows = [_row(marks="-1", credits="0"), _row(marks="101", credits="11")]
        with self.assertRaises(ValidationFailed) as ctx:
            validate_subjects(rows)
        errors = ctx.exception
        self.assertEqual(errors.for_field("subjects.0.marks").kind, ErrorKind.BELOW_MINIMUM)
        self.assertEqual(errors.for_field("subjects.0.marks").message, "Marks must be at least 0")
        self.assertEqual(errors.for_field("subjects.0.credits").message, "Credits must be at least 1")
        self.assertEqual(errors.for_field("subjects.1.marks").kind, ErrorKind.ABOVE_MAXIMUM)
        self.assertEqual(errors.for_field("subjects.1.marks").message, "Marks cannot exceed 100")
        self.assertEqual(errors.for_field("subjects.1.credits").message, "Credits cannot exceed 10")
        self.assertEqual(len(errors.errors), 4)

    def test_blank_and_non_numeric_values(self):
        rows = [_row(name="", marks="", credits="abc"), _row(marks=85.5)]
        with self.assertRaises(ValidationFailed) as ctx:
            validate_subjects(rows)
        errors = ctx.exception
        self.assertEqual(errors.for_field("subjects.0.name").message, "Subject name is required")
        self.assertEqual(errors.for_field("subjects.0.marks").kind, ErrorKind.REQUIRED)
        self.assertEqual(errors.for_field("subjects.0.credits").kind, ErrorKind.NOT_A_NUMBER)
        self.assertEqual(errors.for_field("subjects.1.marks").kind, ErrorKind.NOT_A_NUMBER)

    def test_subject_count_limits(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_subjects([])
        error = ctx.exception.for_field("subjects")
        self.assertEqual(error.kind, ErrorKind.COUNT_OUT_OF_RANGE)
        self.assertEqual(error.message, "At least one subject is required")

        with self.assertRaises(ValidationFailed) as ctx:
            validate_subjects([_row() for _ in range(16)])
        error = ctx.exception.for_field("subjects")
        self.assertEqual(error.kind, ErrorKind.COUNT_OUT_OF_RANGE)
        self.assertEqual(error.message, "Maximum 15 subjects allowed")

        self.assertEqual(len(validate_subjects([_row() for _ in range(15)])), 15)

    def test_invalid_row_does_not_shrink_subject_count(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_subjects([_row(marks="120")])
        self.assertEqual(
            ctx.exception.messages(),
            {"subjects.0.marks": "Marks cannot exceed 100"},
        )

    def test_too_many_rows_reported_even_with_invalid_row(self):
        rows = [_row() for _ in range(15)] + [_row(marks="abc")]
        with self.assertRaises(ValidationFailed) as ctx:
            validate_subjects(rows)
        error = ctx.exception.for_field("subjects")
        self.assertIsNotNone(error)
        self.assertEqual(error.message, "Maximum 15 subjects allowed")

    def test_non_list_input(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_subjects({"name": "Maths"})
        self.assertEqual(ctx.exception.for_field("subjects").kind, ErrorKind.INVALID)

    def test_models_pass_through(self):
        subject = Subject(name="Art", marks=55, credits=2)
        self.assertEqual(validate_subjects([subject]), (subject,))

    def test_messages_keyed_by_field(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_subjects([_row(name="y" * 101)])
        self.assertEqual(
            ctx.exception.messages(),
            {"subjects.0.name": "Subject name is too long"},
        )


class CalculationValidationTests(unittest.TestCase):
    def test_full_payload(self):
        data = validate_calculation(
            {
                "personal_info": {"name": "Asha", "gender": "female"},
                "subjects": [_row(), _row("Physics", "72", "3")],
            }
        )
        self.assertEqual(data.personal_info.name, "Asha")
        self.assertEqual(len(data.subjects), 2)

    def test_errors_from_both_parts(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_calculation(
                {
                    "personal_info": {"name": "", "gender": "male"},
                    "subjects": [_row(credits="12")],
                }
            )
        messages = ctx.exception.messages()
        self.assertEqual(messages["personal_info.name"], "Name is required")
        self.assertEqual(messages["subjects.0.credits"], "Credits cannot exceed 10")
        self.assertNotIn("subjects", messages)

    def test_subject_count_checked_on_submitted_rows(self):
        with self.assertRaises(ValidationFailed) as ctx:
            validate_calculation(
                {
                    "personal_info": {"name": "Asha", "gender": "male"},
                    "subjects": [_row() for _ in range(16)],
                }
            )
        self.assertEqual(ctx.exception.messages()["subjects"], "Maximum 15 subjects allowed")


class CompletedSubjectsTests(unittest.TestCase):
    def test_counts_filled_rows_only(self):
        rows = [
            _row(),
            _row(name=""),
            _row(marks=""),
            _row(credits="0"),
            _row(marks="0", credits="1"),
            {},
        ]
        self.assertEqual(count_completed_subjects(rows), 2)

    def test_rows_from_models_round_trip_through_form(self):
        subjects = (Subject(name="Maths", marks=80, credits=4),)
        rows = subject_rows_from_models(subjects)
        self.assertEqual(rows, [{"name": "Maths", "marks": "80", "credits": "4"}])
        self.assertEqual(validate_subjects(rows), subjects)


if __name__ == "__main__":
    unittest.main()
