from typing import Callable
import flet as ft

from sgpacalc.core.sgpa import AggregateResult
from sgpacalc.state.app_state import AppState
from sgpacalc.state.wizard_state import WizardStage
from sgpacalc.ui.components.progress_indicator import build_progress_indicator

COLUMNS = ("Subject", "Marks", "Credits", "Grade", "Grade Points", "Earned Credits")


def _build_table(results: AggregateResult) -> ft.DataTable:
    rows = [
        ft.DataRow(
            cells=[
                ft.DataCell(ft.Text(result.name)),
                ft.DataCell(ft.Text(str(result.marks))),
                ft.DataCell(ft.Text(str(result.credits))),
                ft.DataCell(ft.Text(result.grade, weight=ft.FontWeight.BOLD)),
                ft.DataCell(ft.Text(str(result.grade_points))),
                ft.DataCell(ft.Text(str(result.earned_credits))),
            ]
        )
        for result in results.subject_results
    ]
    return ft.DataTable(columns=[ft.DataColumn(ft.Text(title)) for title in COLUMNS], rows=rows)


def build_results_view(
    page: ft.Page,
    app_state: AppState,
    on_next: Callable[[], None],
    on_back: Callable[[], None],
) -> ft.View:
    wizard = app_state.wizard
    results = wizard.results

    if results is None:
        body = [ft.Text("No results yet. Go back and enter your subjects.")]
    else:
        body = [
            ft.Row(scroll=ft.ScrollMode.AUTO, controls=[_build_table(results)]),
            ft.Divider(),
            ft.Text(f"Total Credits: {results.total_credits}"),
            ft.Text(f"Total Earned Credits: {results.total_earned_credits}"),
        ]

    return ft.View(
        route=WizardStage.RESULTS.route,
        scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.AppBar(title=ft.Text(f"SGPA Calculator - {WizardStage.RESULTS.label}")),
            build_progress_indicator(wizard.progress),
            ft.Container(
                padding=20,
                content=ft.Column(
                    spacing=14,
                    controls=[
                        ft.Text("Subject Results", size=22, weight=ft.FontWeight.BOLD),
                        *body,
                        ft.Row(
                            controls=[
                                ft.OutlinedButton("Back", icon=ft.Icons.ARROW_BACK, on_click=lambda _: on_back()),
                                ft.Button(
                                    "View Final Score",
                                    icon=ft.Icons.ARROW_FORWARD,
                                    on_click=lambda _: on_next(),
                                    disabled=results is None,
                                ),
                            ]
                        ),
                    ],
                ),
            ),
        ],
    )
