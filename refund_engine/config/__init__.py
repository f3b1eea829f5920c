"""
Application Settings
Load from environment variables
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Packaged YAML rules live next to this module
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent
DEFAULT_REVERSALS_FILE = DEFAULT_CONFIG_DIR.parent / "data" / "reversals.json"


class Settings(BaseSettings):
    """Application settings from environment"""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000

    # ======================
    # Rules
    # ======================
    # Empty means the packaged timezones.yml / rules.yml
    CONFIG_DIR: str = ""

    # ======================
    # Reversal table
    # ======================
    REVERSALS_DATA_FILE: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="forbid",
    )

    @property
    def config_dir(self) -> Path:
        return Path(self.CONFIG_DIR) if self.CONFIG_DIR else DEFAULT_CONFIG_DIR

    @property
    def reversals_data_file(self) -> Path:
        return Path(self.REVERSALS_DATA_FILE) if self.REVERSALS_DATA_FILE else DEFAULT_REVERSALS_FILE


settings = Settings()
