from datetime import datetime, timedelta

from jobpoll.domain.models import Job, JobState


def is_done(job: Job, now: datetime, duration: timedelta) -> bool:
    return now >= job.started_at + duration


def resolve_job(job: Job, now: datetime, duration: timedelta) -> JobState:
    """
    Derive the externally visible state of a job at time ``now``.

    Pure: the same (job, now, duration) always yields the same state, and the
    job record is never touched. The result payload is a placeholder bag of
    fields that only exists once the job is done.
    """
    finishes_at = job.started_at + duration
    done = is_done(job, now, duration)
    return JobState(
        id=job.id,
        done=done,
        started_at=job.started_at,
        finishes_at=finishes_at,
        result={} if done else None,
    )
