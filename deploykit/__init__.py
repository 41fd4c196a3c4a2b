"""Shared enums, message records and helpers for deployment runners."""

__version__ = "0.1.0"