from threading import Lock
from typing import Callable, Dict

from jobpoll.domain.models import Job, JobNotFoundError
from jobpoll.infrastructure.clock import Clock, utc_now
from jobpoll.infrastructure.ids import generate_job_id


class InMemoryJobRepository:
    """
    Write-once, in-memory job store that lives as long as the process.

    Records are frozen and only become visible once fully built, so the lock
    only guards the mapping itself. Nothing is ever updated or deleted.
    """

    def __init__(
        self,
        clock: Clock = utc_now,
        id_factory: Callable[[], str] = generate_job_id,
    ) -> None:
        self._jobs: Dict[str, Job] = {}
        self._lock = Lock()
        self._clock = clock
        self._id_factory = id_factory

    def create(self) -> str:
        job_id = self._id_factory()
        started_at = self._clock()
        with self._lock:
            while job_id in self._jobs:
                job_id = self._id_factory()
            self._jobs[job_id] = Job(id=job_id, started_at=started_at)
        return job_id

    def get(self, job_id: str) -> Job:
        with self._lock:
            job = self._jobs.get(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    def __contains__(self, job_id: object) -> bool:
        with self._lock:
            return job_id in self._jobs

    def __len__(self) -> int:
        with self._lock:
            return len(self._jobs)
