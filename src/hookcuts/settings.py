from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

from hookcuts.config import Config


class Settings(BaseSettings):
    """Engine defaults overridable through HOOKCUTS_* environment variables."""
    min_duration_s: Optional[float] = None
    max_duration_s: Optional[float] = None
    target_duration_s: Optional[float] = None
    speaking_rate_wps: Optional[float] = None
    max_clips: Optional[int] = None
    debug: bool = False

    class Config:
        env_prefix = "HOOKCUTS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def apply_settings(cfg: Config, settings: Settings) -> Config:
    """Copy any explicitly set values from settings onto cfg."""
    if settings.min_duration_s is not None: cfg.clips.min_duration_s = settings.min_duration_s
    if settings.max_duration_s is not None: cfg.clips.max_duration_s = settings.max_duration_s
    if settings.target_duration_s is not None: cfg.clips.target_duration_s = settings.target_duration_s
    if settings.speaking_rate_wps is not None: cfg.clips.speaking_rate_wps = settings.speaking_rate_wps
    if settings.max_clips is not None: cfg.clips.max_clips = settings.max_clips
    if settings.debug: cfg.debug = True
    return cfg
