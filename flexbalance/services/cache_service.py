# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""First working date cache."""

import hashlib
from datetime import date

from sqlalchemy.orm import Session

from flexbalance.models.first_date_cache import FirstDateCache


def token_digest(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def get_cached_first_date(db: Session, token: str) -> date | None:
    """Get the cached first working date for a token."""
    cached = db.get(FirstDateCache, token_digest(token))
    return cached.first_date if cached else None


def set_cached_first_date(db: Session, token: str, first_date: date) -> None:
    """Store the first working date for a token, replacing any previous one."""
    digest = token_digest(token)
    cached = db.get(FirstDateCache, digest)
    if cached is None:
        db.add(FirstDateCache(token_digest=digest, first_date=first_date))
    else:
        cached.first_date = first_date
    db.commit()
