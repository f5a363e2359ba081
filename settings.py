"""
Configuration settings for the BMI calculator
"""

import logging
import os
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables (BMI_ prefix)"""

    model_config = SettingsConfigDict(env_prefix="BMI_", env_file=".env", case_sensitive=False, extra="ignore")

    # Page
    page_title: str = "BMI Calculator"

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None

    # Timestamp of the Excel download filename
    timezone: str = "UTC"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def setup_logging(settings: Settings, force: bool = False):
    """
    Configure the root logger once per process.

    Streamlit reruns the page script on every interaction, so later calls
    return before any handler (and its log file) is created. Pass
    ``force=True`` to replace existing root handlers.
    """
    root = logging.getLogger()
    if root.handlers and not force:
        return

    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    # Create logs directory if needed
    log_file = settings.log_file
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

    handlers: list[logging.Handler] = []
    handlers.append(logging.StreamHandler())

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=settings.log_format,
        handlers=handlers,
        force=force,
    )
