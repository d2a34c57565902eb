from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Notes settings
    notes_dir: Path = Path("data/notes")

    # Network settings, defaults for requests that don't set them
    show_depth: int = Field(default=2, ge=1, le=3)
    max_branches: int = Field(default=5, ge=1)

    # Basic auth settings, auth is disabled unless both are set
    auth_username: str | None = None
    auth_password: str | None = None

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL

    @property
    def auth_enabled(self) -> bool:
        return bool(self.auth_username and self.auth_password)


settings = Settings()
