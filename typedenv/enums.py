"""StrEnum definitions for type-safe constants."""

from enum import StrEnum


class EnvErrorReason(StrEnum):
    """Why a required environment lookup failed."""

    MISSING_KEY = "missing_key"
    NOT_AN_INT = "not_an_int"
    NOT_A_NUMBER = "not_a_number"
    NOT_ALLOWED = "not_allowed"


class LogSeverity(StrEnum):
    """Log severity levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
