"""Flex time balance calculation for Clockify users."""

__version__ = "0.1.0"
