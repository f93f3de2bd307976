from fastapi import APIRouter, Query

from jobpoll.app.schemas.greeting import GreetingOut

router = APIRouter(prefix="/api", tags=["greeting"])


def format_greeting(subject: str) -> str:
    return f"Hello, {subject}"


@router.get("/greeting", response_model=GreetingOut)
async def greeting(subject: str = Query(...)):
    return GreetingOut(greeting=format_greeting(subject))
