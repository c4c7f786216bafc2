"""Integrations with external services."""
from flexbalance.integrations.clockify import ClockifyClient

__all__ = ["ClockifyClient"]
