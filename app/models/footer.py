# app/models/footer.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field

FOOTER_ROW_ID = 1


class FooterContent(SQLModel, table=True):
    """
    Site-wide footer text. Only one row (id=1) is ever stored.
    """

    __tablename__ = "footer_content"

    id: int = Field(default=FOOTER_ROW_ID, primary_key=True)

    copyright: str = Field(default="")
    address: str = Field(default="")
    phone: str = Field(default="")
    email: str = Field(default="")
    whatsapp: str = Field(default="")

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )
