from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel

from jobpoll.domain.models import JobState, JobStatus


class JobOut(BaseModel):
    id: str
    status: JobStatus
    done: bool
    result: Optional[Dict[str, Any]] = None
    started_at: datetime
    finishes_at: datetime

    @classmethod
    def from_state(cls, state: JobState) -> "JobOut":
        return cls(
            id=state.id,
            status=state.status,
            done=state.done,
            result=state.result,
            started_at=state.started_at,
            finishes_at=state.finishes_at,
        )
