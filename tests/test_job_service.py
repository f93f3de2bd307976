import pytest

from jobpoll.domain.models import JobNotFoundError


def test_created_job_is_pending(service):
    state = service.create_job()
    assert state.done is False
    assert state.result is None
    assert service.get_job(state.id).done is False


def test_end_to_end_scenario(service, clock):
    job_id = service.create_job().id

    clock.advance(1_000)
    state = service.get_job(job_id)
    assert (state.done, state.result) == (False, None)

    clock.advance(4_001)
    state = service.get_job(job_id)
    assert (state.done, state.result) == (True, {})

    clock.advance(60_000)
    assert service.get_job(job_id).done is True

    with pytest.raises(JobNotFoundError):
        service.get_job("job_xyz999")


def test_reads_do_not_change_the_record(service, repo, clock):
    job_id = service.create_job().id
    started_at = repo.get(job_id).started_at

    for _ in range(10):
        assert service.get_job(job_id).done is False
    assert repo.get(job_id).started_at == started_at

    clock.advance(5_000)
    for _ in range(10):
        assert service.get_job(job_id).done is True
    assert repo.get(job_id).started_at == started_at
