# app/schemas/user.py
from pydantic import BaseModel, Field
from typing import Optional


class LoginRequest(BaseModel):
    name: Optional[str] = None     # present → register when the email is unseen
    email: str = Field(min_length=1)
    password: str


class UserSummary(BaseModel):
    """Client-safe projection of a user. The password hash is never included."""
    object_id: str = Field(alias="_id")
    id: str
    name: Optional[str]
    email: str

    class Config:
        populate_by_name = True

    @classmethod
    def from_user(cls, user) -> "UserSummary":
        return cls(object_id=user.id, id=user.id, name=user.name, email=user.email)


class LoginResponse(BaseModel):
    message: str
    user: UserSummary
