from dataclasses import dataclass, field
from sgpacalc.state.wizard_state import WizardState


@dataclass
class AppState:
    wizard: WizardState = field(default_factory=WizardState)
