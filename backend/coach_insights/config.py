import os
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

from .scales import ScoreScale


class Settings(BaseSettings):
    api_title: str = Field("Coach Insights", alias="COACH_API_TITLE")
    min_sessions: int = Field(3, ge=1, alias="COACH_MIN_SESSIONS")
    recent_session_limit: int = Field(5, ge=1, alias="COACH_RECENT_SESSION_LIMIT")
    input_score_scale: ScoreScale = Field(ScoreScale.PERCENT, alias="COACH_INPUT_SCORE_SCALE")

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    try:
        return Settings()  # type: ignore[arg-type]
    except ValidationError as exc:
        raise RuntimeError(f"Invalid coach-insights configuration: {exc}") from exc
