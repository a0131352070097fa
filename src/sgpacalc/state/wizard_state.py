"""
Session-scoped wizard state.

The wizard is a small finite state machine::

    PERSONAL_INFO --submit_personal_info--> SUBJECTS
    SUBJECTS      --submit_subjects-------> RESULTS
    RESULTS       --show_final------------> FINAL
    any stage     --back------------------> previous stage
    any stage     --start_over------------> PERSONAL_INFO (data cleared)

Validation and SGPA computation run as part of the submit transitions. A
failed submit raises ``ValidationFailed`` and leaves the state untouched.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

from sgpacalc.core.errors import InvalidTransition, ValidationFailed
from sgpacalc.core.motivation import MotivationTier, select_motivation
from sgpacalc.core.schemas import PersonalInfo, Subject, validate_personal_info, validate_subjects
from sgpacalc.core.sgpa import AggregateResult, calculate_sgpa
from sgpacalc.utils.logger import get_logger

logger = get_logger(__name__)


class WizardStage(Enum):
    PERSONAL_INFO = 1
    SUBJECTS = 2
    RESULTS = 3
    FINAL = 4

    @property
    def label(self) -> str:
        return STAGE_LABELS[self.value - 1]

    @property
    def route(self) -> str:
        return STAGE_ROUTES[self]


STAGE_LABELS: Tuple[str, ...] = ("Personal Info", "Subjects", "Results", "Final Score")

STAGE_ROUTES = {
    WizardStage.PERSONAL_INFO: "/personal-info",
    WizardStage.SUBJECTS: "/subjects",
    WizardStage.RESULTS: "/results",
    WizardStage.FINAL: "/final",
}


@dataclass(frozen=True)
class Progress:
    step: int
    total: int
    labels: Tuple[str, ...]

    @property
    def fraction(self) -> float:
        return self.step / self.total

    @property
    def caption(self) -> str:
        return f"Step {self.step} of {self.total}"

    def reached(self, index: int) -> bool:
        """Whether the label at zero-based *index* is done or current."""
        return index < self.step


def progress_for(stage: WizardStage) -> Progress:
    return Progress(step=stage.value, total=len(WizardStage), labels=STAGE_LABELS)


@dataclass
class WizardState:
    stage: WizardStage = WizardStage.PERSONAL_INFO
    personal_info: Optional[PersonalInfo] = None
    subjects: Tuple[Subject, ...] = field(default_factory=tuple)
    results: Optional[AggregateResult] = None

    @property
    def progress(self) -> Progress:
        return progress_for(self.stage)

    @property
    def motivation(self) -> Optional[MotivationTier]:
        if self.results is None:
            return None
        return select_motivation(self.results.sgpa)

    def _require_stage(self, action: str, *allowed: WizardStage) -> None:
        if self.stage not in allowed:
            raise InvalidTransition(f"Cannot {action} from stage {self.stage.name}")

    def _move_to(self, stage: WizardStage) -> None:
        logger.info("Wizard stage %s -> %s", self.stage.name, stage.name)
        self.stage = stage

    def submit_personal_info(self, raw: Any) -> PersonalInfo:
        self._require_stage("submit personal info", WizardStage.PERSONAL_INFO)
        try:
            info = validate_personal_info(raw)
        except ValidationFailed as exc:
            logger.warning("Personal info rejected: %s", exc)
            raise
        self.personal_info = info
        self._move_to(WizardStage.SUBJECTS)
        return info

    def submit_subjects(self, raw: Any) -> AggregateResult:
        self._require_stage("submit subjects", WizardStage.SUBJECTS)
        try:
            subjects = validate_subjects(raw)
        except ValidationFailed as exc:
            logger.warning("Subjects rejected: %s", exc)
            raise
        results = calculate_sgpa(subjects)
        self.subjects = subjects
        self.results = results
        logger.info(
            "Calculated SGPA %.4f over %d subjects (%d credits)",
            results.sgpa,
            results.subject_count,
            results.total_credits,
        )
        self._move_to(WizardStage.RESULTS)
        return results

    def show_final(self) -> None:
        self._require_stage("show final score", WizardStage.RESULTS)
        if self.results is None or self.personal_info is None:
            raise InvalidTransition("Final score needs personal info and calculated results")
        self._move_to(WizardStage.FINAL)

    def back(self) -> None:
        if self.stage == WizardStage.PERSONAL_INFO:
            raise InvalidTransition("Already at the first stage")
        self._move_to(WizardStage(self.stage.value - 1))

    def start_over(self) -> None:
        self.personal_info = None
        self.subjects = ()
        self.results = None
        self._move_to(WizardStage.PERSONAL_INFO)
