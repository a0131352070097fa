from typing import Callable
import flet as ft

from sgpacalc.core.errors import ValidationFailed
from sgpacalc.core.schemas import MAX_NAME_LENGTH, Gender
from sgpacalc.state.app_state import AppState
from sgpacalc.state.wizard_state import WizardStage
from sgpacalc.ui.components.progress_indicator import build_progress_indicator
from sgpacalc.utils.logger import get_logger

logger = get_logger(__name__)


def build_personal_info_view(
    page: ft.Page,
    app_state: AppState,
    on_next: Callable[[], None],
) -> ft.View:
    wizard = app_state.wizard
    existing = wizard.personal_info

    name = ft.TextField(
        label="Full Name",
        hint_text="Enter your full name",
        width=420,
        max_length=MAX_NAME_LENGTH,
        value=existing.name if existing else "",
    )
    gender = ft.RadioGroup(
        value=existing.gender.value if existing else None,
        content=ft.Column(
            controls=[ft.Radio(value=g.value, label=g.label) for g in Gender],
        ),
    )
    gender_error = ft.Text(color=ft.Colors.RED_400, size=12)
    status = ft.Text(color=ft.Colors.RED_400)

    def clear_errors() -> None:
        name.error_text = None
        gender_error.value = ""
        status.value = ""

    def on_submit(_):
        clear_errors()
        try:
            wizard.submit_personal_info({"name": name.value or "", "gender": gender.value or ""})
        except ValidationFailed as exc:
            messages = exc.messages()
            name.error_text = messages.get("name")
            gender_error.value = messages.get("gender", "")
            page.update()
            return
        except Exception as exc:
            logger.exception("Could not submit personal info")
            status.value = f"Unexpected error: {exc}"
            page.update()
            return

        on_next()

    return ft.View(
        route=WizardStage.PERSONAL_INFO.route,
        scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.AppBar(title=ft.Text(f"SGPA Calculator - {WizardStage.PERSONAL_INFO.label}")),
            build_progress_indicator(wizard.progress),
            ft.Container(
                padding=20,
                content=ft.Column(
                    spacing=14,
                    controls=[
                        ft.Text("Personal Information", size=22, weight=ft.FontWeight.BOLD),
                        ft.Text("Tell us a little about yourself to get started."),
                        name,
                        ft.Text("Gender", weight=ft.FontWeight.W_500),
                        gender,
                        gender_error,
                        ft.Button("Next", icon=ft.Icons.ARROW_FORWARD, on_click=on_submit),
                        status,
                    ],
                ),
            ),
        ],
    )
