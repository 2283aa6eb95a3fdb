# app/schemas/footer.py
from pydantic import ConfigDict, EmailStr
from sqlmodel import SQLModel


class FooterRead(SQLModel):
    copyright: str
    address: str
    phone: str
    email: str
    whatsapp: str


class FooterUpdate(SQLModel):
    """
    Full replacement of the footer text (admin form submits every field).
    """

    model_config = ConfigDict(extra="forbid")

    copyright: str
    address: str
    phone: str
    email: EmailStr
    whatsapp: str
