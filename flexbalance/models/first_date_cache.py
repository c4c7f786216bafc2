# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Cache of the first working date per API token."""

from datetime import date, datetime

from sqlalchemy import Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from flexbalance.models.base import Base


class FirstDateCache(Base):
    """First date with logged work, keyed by a digest of the API token."""

    __tablename__ = "first_date_cache"

    token_digest: Mapped[str] = mapped_column(String(64), primary_key=True)
    first_date: Mapped[date] = mapped_column(Date, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )
