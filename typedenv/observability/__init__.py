"""Observability helpers (log redaction)."""

from typedenv.observability.redaction import looks_sensitive_key, preview_value, redact_text

__all__ = ["looks_sensitive_key", "preview_value", "redact_text"]
