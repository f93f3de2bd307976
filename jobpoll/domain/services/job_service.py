import logging
from datetime import timedelta

from jobpoll.domain.models import JobState
from jobpoll.domain.services.job_resolver import resolve_job
from jobpoll.infrastructure.clock import Clock, utc_now
from jobpoll.infrastructure.persistence.in_memory_repo import InMemoryJobRepository

logger = logging.getLogger(__name__)


class JobService:
    def __init__(
        self,
        repository: InMemoryJobRepository,
        duration: timedelta,
        clock: Clock = utc_now,
    ) -> None:
        self.repository = repository
        self.duration = duration
        self._clock = clock

    def create_job(self) -> JobState:
        """
        Register a new job. It starts out pending and finishes once
        ``duration`` has elapsed.
        """
        job_id = self.repository.create()
        state = resolve_job(self.repository.get(job_id), self._clock(), self.duration)
        logger.info("Created job %s (finishes at %s)", job_id, state.finishes_at.isoformat())
        return state

    def get_job(self, job_id: str) -> JobState:
        """
        Look up a job and resolve its current state.

        Raises JobNotFoundError for an unknown id.
        """
        job = self.repository.get(job_id)
        return resolve_job(job, self._clock(), self.duration)
