from pydantic import BaseModel


class GreetingOut(BaseModel):
    greeting: str
