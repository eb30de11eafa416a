from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    # Column names kept camelCase to match the existing schema
    created_at: Mapped[datetime] = mapped_column("createdAt", DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime, nullable=False, default=utcnow, onupdate=utcnow
    )
