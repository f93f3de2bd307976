import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Tuple

DEFAULT_JOB_DURATION_MS = 5_000


@dataclass(frozen=True)
class Settings:
    job_duration_ms: int = DEFAULT_JOB_DURATION_MS
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @property
    def job_duration(self) -> timedelta:
        return timedelta(milliseconds=self.job_duration_ms)


def parse_duration_ms(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"JOB_DURATION_MS must be an integer, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"JOB_DURATION_MS must be > 0, got {value}")
    return value


def load_settings() -> Settings:
    origins = os.environ.get("JOBPOLL_CORS_ORIGINS", "*")
    return Settings(
        job_duration_ms=parse_duration_ms(
            os.environ.get("JOB_DURATION_MS", str(DEFAULT_JOB_DURATION_MS))
        ),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
        log_level=os.environ.get("JOBPOLL_LOG_LEVEL", "INFO").upper(),
    )
