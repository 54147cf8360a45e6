from functools import lru_cache
from typing import List

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ----------------------------
# Shared base: every settings group reads the environment and `.env`
# ----------------------------
class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# ----------------------------
# General / App settings
# ----------------------------
class AppSettings(EnvSettings):
    app_name: str = "SimpleMockingApi"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    api_prefix: str = "/api"
    cors_origins: List[str] = ["*"]

    # Logger ("" disables the JSON file stream)
    log_file: str = "app.log"
    log_level: str = "INFO"


# ----------------------------
# User generation settings
# ----------------------------
class UserGenerationSettings(EnvSettings):
    model_config = SettingsConfigDict(env_prefix="USER_GENERATION_")

    default_count: int = Field(default=10, ge=1)
    max_count: int = Field(default=100, ge=1)

    @model_validator(mode="after")
    def check_bounds(self) -> "UserGenerationSettings":
        if self.default_count > self.max_count:
            raise ValueError(
                f"default_count ({self.default_count}) must not exceed max_count ({self.max_count})"
            )
        return self


# ----------------------------
# Initial mock data settings
# ----------------------------
class MockDataSettings(EnvSettings):
    model_config = SettingsConfigDict(env_prefix="MOCK_DATA_")

    initial_users_count: int = Field(default=5, ge=0)
    enable_initial_data: bool = True


# ----------------------------
# Top-level settings
# ----------------------------
class Settings(EnvSettings):
    app: AppSettings = Field(default_factory=AppSettings)
    user_generation: UserGenerationSettings = Field(default_factory=UserGenerationSettings)
    mock_data: MockDataSettings = Field(default_factory=MockDataSettings)


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, loaded once from the environment and `.env`."""
    return Settings()
