from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class ContactIn(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=50)
    subject: str = Field("", max_length=300)
    message: str = Field(min_length=1, max_length=5000)
