from dataclasses import dataclass, field
import os
from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    app_title: str = field(default_factory=lambda: os.getenv("SGPA_APP_TITLE", "SGPA Calculator"))
    web_mode: bool = field(default_factory=lambda: _env_flag("SGPA_WEB"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8550")))

    log_level: str = field(default_factory=lambda: os.getenv("SGPA_LOG_LEVEL", "INFO").upper())
    display_decimals: int = field(default_factory=lambda: int(os.getenv("SGPA_DISPLAY_DECIMALS", "2")))


settings = Settings()
