"""
Walk through the polling flow end to end:

1. create a job
2. read it back while it is still pending
3. sleep until the job duration has passed
4. read it again and show the result payload, then fetch the greeting

Runs against an in-process app by default, or a live server with --base-url.
"""
import argparse
import asyncio
import json
import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

import httpx

from jobpoll.config import load_settings, parse_duration_ms
from jobpoll.main import create_app

logger = logging.getLogger(__name__)


async def _read_job(client: httpx.AsyncClient, job_id: str) -> Dict[str, Any]:
    resp = await client.get(f"/api/jobs/{job_id}")
    resp.raise_for_status()
    return resp.json()


async def run_demo(client: httpx.AsyncClient, duration_ms: int) -> Dict[str, Any]:
    """
    Returns the pending read, the completed read, and the greeting fetched
    once the job has finished.
    """
    logger.info("Creating job")
    resp = await client.post("/api/jobs")
    resp.raise_for_status()
    job_id = resp.json()["id"]
    logger.info("Created job: %s", job_id)

    logger.info("Querying job (not yet complete)")
    pending = await _read_job(client, job_id)
    logger.info("Query result:\n%s", json.dumps(pending, indent=2))

    logger.info("Sleeping until job is complete (%ss)", duration_ms / 1_000)
    # finishes_at is inclusive; a small margin keeps a coarse clock from reading early
    await asyncio.sleep(duration_ms / 1_000 + 0.05)

    logger.info("Querying job (completed)")
    completed = await _read_job(client, job_id)
    logger.info("Query result:\n%s", json.dumps(completed, indent=2))

    greeting = None
    if completed["done"]:
        resp = await client.get("/api/greeting", params={"subject": "world"})
        resp.raise_for_status()
        greeting = resp.json()["greeting"]
        logger.info("Greeting: %s", greeting)

    return {"pending": pending, "completed": completed, "greeting": greeting}


async def main_async(base_url: Optional[str], duration_ms: Optional[int]) -> Dict[str, Any]:
    settings = load_settings()
    if duration_ms is not None:
        settings = replace(settings, job_duration_ms=parse_duration_ms(str(duration_ms)))

    if base_url:
        async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
            return await run_demo(client, settings.job_duration_ms)

    transport = httpx.ASGITransport(app=create_app(settings))
    async with httpx.AsyncClient(transport=transport, base_url="http://jobpoll") as client:
        return await run_demo(client, settings.job_duration_ms)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Create a job and poll it until it completes.")
    parser.add_argument("--base-url", help="poll a running server instead of an in-process app")
    parser.add_argument(
        "--duration-ms",
        type=int,
        help="job duration for the in-process app (must match the server when using --base-url)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=load_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(main_async(args.base_url, args.duration_ms))


if __name__ == "__main__":
    main()
