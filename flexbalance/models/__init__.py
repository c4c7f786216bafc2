"""ORM models and enumerations."""
from flexbalance.models.base import Base
from flexbalance.models.enums import DayCategory, IgnoreKind, TimeOffType
from flexbalance.models.first_date_cache import FirstDateCache

__all__ = [
    "Base",
    "DayCategory",
    "FirstDateCache",
    "IgnoreKind",
    "TimeOffType",
]
