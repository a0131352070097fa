from typing import Callable, Dict, List
import flet as ft

from sgpacalc.core.errors import ValidationFailed
from sgpacalc.core.schemas import (
    MAX_CREDITS,
    MAX_MARKS,
    MAX_NAME_LENGTH,
    MAX_SUBJECTS,
    MIN_CREDITS,
    MIN_MARKS,
    MIN_SUBJECTS,
    count_completed_subjects,
    subject_rows_from_models,
)
from sgpacalc.state.app_state import AppState
from sgpacalc.state.wizard_state import WizardStage
from sgpacalc.ui.components.progress_indicator import build_progress_indicator
from sgpacalc.utils.logger import get_logger

logger = get_logger(__name__)

FIELDS = ("name", "marks", "credits")


def build_subjects_view(
    page: ft.Page,
    app_state: AppState,
    on_next: Callable[[], None],
    on_back: Callable[[], None],
) -> ft.View:
    wizard = app_state.wizard
    initial_rows = subject_rows_from_models(wizard.subjects)

    count = ft.TextField(
        label="Number of subjects",
        hint_text=f"{MIN_SUBJECTS}-{MAX_SUBJECTS}",
        width=200,
        keyboard_type=ft.KeyboardType.NUMBER,
        value=str(len(initial_rows) or MIN_SUBJECTS),
    )
    progress_text = ft.Text(size=12, color=ft.Colors.GREY_700)
    status = ft.Text(color=ft.Colors.RED_400)
    rows_column = ft.Column(spacing=12)

    row_fields: List[Dict[str, ft.TextField]] = []

    def raw_rows() -> List[Dict[str, str]]:
        return [{key: (fields[key].value or "").strip() for key in FIELDS} for fields in row_fields]

    def update_progress_text() -> None:
        progress_text.value = f"{count_completed_subjects(raw_rows())} of {len(row_fields)} completed"

    def on_field_change(_):
        update_progress_text()
        page.update()

    def build_row(index: int, values: Dict[str, str]) -> ft.Control:
        fields = {
            "name": ft.TextField(
                label="Subject Name",
                hint_text="e.g., Mathematics",
                width=280,
                max_length=MAX_NAME_LENGTH,
                value=values.get("name", ""),
                on_change=on_field_change,
            ),
            "marks": ft.TextField(
                label="Marks",
                hint_text=f"{MIN_MARKS}-{MAX_MARKS}",
                width=120,
                keyboard_type=ft.KeyboardType.NUMBER,
                value=values.get("marks", ""),
                on_change=on_field_change,
            ),
            "credits": ft.TextField(
                label="Credits",
                hint_text=f"{MIN_CREDITS}-{MAX_CREDITS}",
                width=120,
                keyboard_type=ft.KeyboardType.NUMBER,
                value=values.get("credits", ""),
                on_change=on_field_change,
            ),
        }
        row_fields.append(fields)
        return ft.Card(
            content=ft.Container(
                padding=12,
                content=ft.Column(
                    controls=[
                        ft.Text(f"Subject {index + 1}", weight=ft.FontWeight.BOLD),
                        ft.Row(wrap=True, controls=[fields[key] for key in FIELDS]),
                    ]
                ),
            )
        )

    def render_rows(rows: List[Dict[str, str]]) -> None:
        rows_column.controls.clear()
        row_fields.clear()
        for index, values in enumerate(rows):
            rows_column.controls.append(build_row(index, values))
        update_progress_text()

    def on_generate(_):
        status.value = ""
        count.error_text = None
        try:
            wanted = int((count.value or "").strip())
        except ValueError:
            count.error_text = "Enter a whole number"
            page.update()
            return
        if not MIN_SUBJECTS <= wanted <= MAX_SUBJECTS:
            count.error_text = f"Choose between {MIN_SUBJECTS} and {MAX_SUBJECTS} subjects"
            page.update()
            return

        # Keep whatever was already typed into the first rows.
        current = raw_rows()
        rows = current[:wanted] + [{} for _ in range(wanted - len(current))]
        render_rows(rows)
        page.update()

    def clear_errors() -> None:
        status.value = ""
        for fields in row_fields:
            for field in fields.values():
                field.error_text = None

    def on_calculate(_):
        clear_errors()
        try:
            wizard.submit_subjects(raw_rows())
        except ValidationFailed as exc:
            for path, message in exc.messages().items():
                parts = path.split(".")
                if len(parts) == 3 and parts[1].isdigit() and int(parts[1]) < len(row_fields):
                    row_fields[int(parts[1])][parts[2]].error_text = message
                else:
                    status.value = message
            page.update()
            return
        except Exception as exc:
            logger.exception("Could not calculate SGPA")
            status.value = f"Failed to calculate: {exc}"
            page.update()
            return

        on_next()

    render_rows(initial_rows or [{}])

    return ft.View(
        route=WizardStage.SUBJECTS.route,
        scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.AppBar(title=ft.Text(f"SGPA Calculator - {WizardStage.SUBJECTS.label}")),
            build_progress_indicator(wizard.progress),
            ft.Container(
                padding=20,
                content=ft.Column(
                    spacing=14,
                    controls=[
                        ft.Text("Subject Details", size=22, weight=ft.FontWeight.BOLD),
                        ft.Text("Enter marks out of 100 and the credits for each subject."),
                        ft.Row(
                            controls=[
                                count,
                                ft.OutlinedButton("Generate Subjects", on_click=on_generate),
                            ]
                        ),
                        progress_text,
                        rows_column,
                        status,
                        ft.Row(
                            controls=[
                                ft.OutlinedButton("Back", icon=ft.Icons.ARROW_BACK, on_click=lambda _: on_back()),
                                ft.Button("Calculate SGPA", icon=ft.Icons.CALCULATE, on_click=on_calculate),
                            ]
                        ),
                    ],
                ),
            ),
        ],
    )
