from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="KITCHENCONV_", extra="ignore")

    # Diagnostics
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Output
    max_suggestions: int = 5  # names shown after an unknown unit/substance
    result_precision: int = 6  # significant digits of the printed result


settings = Settings()
