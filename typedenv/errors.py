"""Error type raised by the required accessor family."""

from __future__ import annotations

from typedenv.enums import EnvErrorReason


class EnvError(Exception):
    """A required environment variable is missing or has the wrong shape.

    Rendered as ``[<key>]: <reason>`` so the offending variable is the first
    thing in a traceback or a startup log line.
    """

    def __init__(
        self,
        key: str,
        reason: str,
        kind: EnvErrorReason = EnvErrorReason.MISSING_KEY,
    ) -> None:
        super().__init__(f"[{key}]: {reason}")
        self.key = key
        self.reason = reason
        self.kind = kind

    def __reduce__(self):
        return (type(self), (self.key, self.reason, self.kind))

    def __repr__(self) -> str:
        return f"EnvError(key={self.key!r}, reason={self.reason!r}, kind={self.kind.value!r})"


def missing_key(key: str) -> EnvError:
    return EnvError(key, "env variable not found", EnvErrorReason.MISSING_KEY)


def not_an_int(key: str) -> EnvError:
    return EnvError(key, "not an int", EnvErrorReason.NOT_AN_INT)


def not_a_number(key: str) -> EnvError:
    return EnvError(key, "not a number", EnvErrorReason.NOT_A_NUMBER)


def not_allowed(key: str, allowed: list[str]) -> EnvError:
    return EnvError(
        key,
        f"must be one of [{', '.join(allowed)}].",
        EnvErrorReason.NOT_ALLOWED,
    )
