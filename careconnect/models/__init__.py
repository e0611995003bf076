"""Beanie ODM document models."""

from careconnect.models.account import Account

__all__ = ["Account"]
