import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Packages are namespace packages; make the repo root importable without an install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from jobpoll.config import Settings  # noqa: E402
from jobpoll.domain.services.job_service import JobService  # noqa: E402
from jobpoll.infrastructure.persistence.in_memory_repo import InMemoryJobRepository  # noqa: E402
from jobpoll.main import create_app  # noqa: E402

DURATION = timedelta(milliseconds=5_000)


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += timedelta(milliseconds=ms)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def repo(clock):
    return InMemoryJobRepository(clock=clock)


@pytest.fixture
def service(repo, clock):
    return JobService(repo, duration=DURATION, clock=clock)


@pytest.fixture
def client(service):
    app = create_app(Settings(job_duration_ms=5_000), job_service=service)
    return TestClient(app)
