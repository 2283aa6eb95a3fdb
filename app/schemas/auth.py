# app/schemas/auth.py
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel


class AdminLogin(SQLModel):
    model_config = ConfigDict(extra="forbid")

    username: str
    password: str


class AdminToken(SQLModel):
    """
    Short-lived bearer token returned after a successful admin login.
    """

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
