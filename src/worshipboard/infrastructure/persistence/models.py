"""SQLAlchemy ORM models for WorshipBoard."""

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlalchemy import String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utc_now() -> datetime:
    """Get current UTC time."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


# Hey future me - this is the same key/value "settings" table the admin Settings page
# writes to. Planning Center credentials live here as 'pc_client_id' and
# 'pc_client_secret'. Only this service's slice of the table is modelled.
class AppSettingModel(Base):
    """Dynamic application settings stored in DB."""

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
    )
