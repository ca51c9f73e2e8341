"""Read-only environment lookup.

Accessors never touch os.environ directly; they go through an EnvSource.

Why it exists:
- Tests (and embedding applications) can bind the accessors to a plain dict
  instead of mutating the real process environment.
- Every read goes through one place, which keeps the "one lookup per call,
  no caching" rule easy to audit.

Note: This is intentionally small and synchronous. There is no set/unset;
the library only ever reads.
"""

from __future__ import annotations

import os
from collections.abc import Mapping


class EnvSource:
    """Small read-only wrapper around a str -> str mapping.

    With no mapping it reads ``os.environ`` at call time, so values changed
    by the host process between calls are always observed.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def get(self, key: str) -> str | None:
        return self.environ.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.environ

    def __repr__(self) -> str:
        target = "os.environ" if self._environ is None else f"<{type(self._environ).__name__}>"
        return f"EnvSource({target})"


def as_source(source: EnvSource | Mapping[str, str] | None) -> EnvSource:
    """Coerce an optional mapping into an EnvSource."""
    if isinstance(source, EnvSource):
        return source
    return EnvSource(source)
