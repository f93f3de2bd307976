from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional


class JobStatus(str, Enum):
    PENDING = "pending"
    DONE = "done"


@dataclass(frozen=True)
class Job:
    id: str
    started_at: datetime


@dataclass(frozen=True)
class JobState:
    id: str
    done: bool
    started_at: datetime
    finishes_at: datetime
    result: Optional[Dict[str, Any]] = None  # only set once done

    @property
    def status(self) -> JobStatus:
        return JobStatus.DONE if self.done else JobStatus.PENDING


class JobNotFoundError(LookupError):
    def __init__(self, job_id: str) -> None:
        super().__init__(f"No such job: {job_id}")
        self.job_id = job_id
