from pydantic import BaseModel


class SignInIn(BaseModel):
    email: str
    password: str
