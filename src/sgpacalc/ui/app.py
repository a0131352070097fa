import flet as ft

from sgpacalc.config.settings import settings
from sgpacalc.core.errors import InvalidTransition
from sgpacalc.state.app_state import AppState
from sgpacalc.state.wizard_state import WizardStage
from sgpacalc.ui.views.final_results_view import build_final_results_view
from sgpacalc.ui.views.personal_info_view import build_personal_info_view
from sgpacalc.ui.views.results_view import build_results_view
from sgpacalc.ui.views.subjects_view import build_subjects_view
from sgpacalc.utils.logger import get_logger

logger = get_logger(__name__)


class SGPACalculatorApp:
    def __init__(self, page: ft.Page) -> None:
        self.page = page
        self.page.title = settings.app_title
        self.page.scroll = ft.ScrollMode.AUTO
        # One wizard per page, so browser sessions never share data.
        self.app_state = AppState()

    @property
    def wizard(self):
        return self.app_state.wizard

    def run(self) -> None:
        self.show_current_stage()

    def show_current_stage(self) -> None:
        stage = self.wizard.stage
        if stage == WizardStage.PERSONAL_INFO:
            view = build_personal_info_view(self.page, self.app_state, on_next=self.show_current_stage)
        elif stage == WizardStage.SUBJECTS:
            view = build_subjects_view(
                self.page, self.app_state, on_next=self.show_current_stage, on_back=self.handle_back
            )
        elif stage == WizardStage.RESULTS:
            view = build_results_view(
                self.page, self.app_state, on_next=self.handle_show_final, on_back=self.handle_back
            )
        else:
            view = build_final_results_view(
                self.page, self.app_state, on_back=self.handle_back, on_start_over=self.handle_start_over
            )

        self.page.views.clear()
        self.page.views.append(view)
        self.page.update()

    def handle_back(self) -> None:
        try:
            self.wizard.back()
        except InvalidTransition as exc:
            logger.warning("Ignoring back navigation: %s", exc)
        self.show_current_stage()

    def handle_show_final(self) -> None:
        try:
            self.wizard.show_final()
        except InvalidTransition as exc:
            logger.warning("Cannot show final score: %s", exc)
        self.show_current_stage()

    def handle_start_over(self) -> None:
        self.wizard.start_over()
        self.show_current_stage()


def main(page: ft.Page) -> None:
    SGPACalculatorApp(page).run()
