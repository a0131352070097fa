from typing import Callable
import flet as ft

from sgpacalc.config.settings import settings
from sgpacalc.core.motivation import MotivationTier
from sgpacalc.state.app_state import AppState
from sgpacalc.state.wizard_state import WizardStage
from sgpacalc.ui.components.progress_indicator import build_progress_indicator


def _accent_colors(accent: str):
    shade = accent.upper()
    return getattr(ft.Colors, f"{shade}_400", ft.Colors.BLUE_400), getattr(ft.Colors, f"{shade}_50", ft.Colors.BLUE_50)


def _summary_item(label: str, value: str) -> ft.Row:
    return ft.Row(
        controls=[
            ft.Text(f"{label}:", color=ft.Colors.GREY_700),
            ft.Text(value, weight=ft.FontWeight.W_500),
        ]
    )


def _build_motivation_card(tier: MotivationTier) -> ft.Container:
    border_color, background = _accent_colors(tier.accent)
    return ft.Container(
        padding=20,
        bgcolor=background,
        border=ft.Border(left=ft.BorderSide(4, border_color)),
        content=ft.Row(
            vertical_alignment=ft.CrossAxisAlignment.START,
            controls=[
                ft.Text(tier.emoji, size=28),
                ft.Column(
                    expand=True,
                    controls=[
                        ft.Text(tier.title, weight=ft.FontWeight.BOLD),
                        ft.Text(tier.message),
                    ],
                ),
            ],
        ),
    )


def build_final_results_view(
    page: ft.Page,
    app_state: AppState,
    on_back: Callable[[], None],
    on_start_over: Callable[[], None],
) -> ft.View:
    wizard = app_state.wizard
    results = wizard.results
    info = wizard.personal_info
    tier = wizard.motivation

    if results is None or info is None or tier is None:
        body = [ft.Text("Nothing to show yet. Start from the beginning.")]
    else:
        body = [
            ft.Container(
                padding=24,
                border_radius=12,
                bgcolor=ft.Colors.INDIGO_500,
                content=ft.Column(
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                    controls=[
                        ft.Text("Your SGPA", color=ft.Colors.WHITE),
                        ft.Text(
                            results.formatted_sgpa(settings.display_decimals),
                            size=48,
                            weight=ft.FontWeight.BOLD,
                            color=ft.Colors.WHITE,
                        ),
                        ft.Text("Semester Grade Point Average", color=ft.Colors.WHITE70),
                    ],
                ),
            ),
            ft.Card(
                content=ft.Container(
                    padding=16,
                    content=ft.Column(
                        controls=[
                            ft.Text("Academic Summary", weight=ft.FontWeight.BOLD),
                            _summary_item("Student", info.name),
                            _summary_item("Total Subjects", str(results.subject_count)),
                            _summary_item("Total Credits", str(results.total_credits)),
                            _summary_item("Grade Points Earned", str(results.total_earned_credits)),
                        ]
                    ),
                )
            ),
            _build_motivation_card(tier),
        ]

    return ft.View(
        route=WizardStage.FINAL.route,
        scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.AppBar(title=ft.Text(f"SGPA Calculator - {WizardStage.FINAL.label}")),
            build_progress_indicator(wizard.progress),
            ft.Container(
                padding=20,
                content=ft.Column(
                    spacing=16,
                    controls=[
                        ft.Text("Congratulations!", size=26, weight=ft.FontWeight.BOLD),
                        ft.Text("Here are your final academic results"),
                        *body,
                        ft.Row(
                            controls=[
                                ft.OutlinedButton(
                                    "Back to Results",
                                    icon=ft.Icons.ARROW_BACK,
                                    on_click=lambda _: on_back(),
                                ),
                                ft.Button(
                                    "Calculate Again",
                                    icon=ft.Icons.REFRESH,
                                    on_click=lambda _: on_start_over(),
                                ),
                            ]
                        ),
                    ],
                ),
            ),
        ],
    )
