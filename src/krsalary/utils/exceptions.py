"""Custom exceptions for krsalary."""

from __future__ import annotations


class KrSalaryError(Exception):
    """Base exception for krsalary."""


class ConfigError(KrSalaryError):
    """Invalid or unavailable policy configuration."""


class InputError(KrSalaryError):
    """Malformed salary input."""
