"""Required and optional accessor families.

Both families share the casting rules in ``typedenv.casters`` and differ only
in what happens when a value is absent or malformed:

- ``RequiredEnv`` raises ``EnvError``.
- ``OptionalEnv`` returns ``None`` (or the caller's ``default``) and logs the
  discarded value when it was present but malformed.

Transform callables are caller-owned logic: whatever they raise propagates
from both families unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import TypeVar, cast

from pydantic import ValidationError

from typedenv import casters
from typedenv.config import EnvSettings, get_settings
from typedenv.errors import EnvError, missing_key
from typedenv.observability.redaction import preview_value
from typedenv.source import EnvSource, as_source

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=str)


class RequiredEnv:
    """Environment accessors that fail loudly.

    Every caster starts from ``get``, so a missing key is always reported as
    ``missing_key`` before any type-specific validation runs.
    """

    def __init__(self, source: EnvSource | Mapping[str, str] | None = None) -> None:
        self._source = as_source(source)

    @property
    def source(self) -> EnvSource:
        return self._source

    def __call__(self, key: str) -> str:
        return self.get(key)

    def get(self, key: str) -> str:
        """Return the raw value of *key*.

        Raises:
            EnvError: If *key* is not set.
        """
        value = self._source.get(key)
        if value is None:
            raise missing_key(key)
        return value

    def integer(self, key: str) -> int:
        return casters.to_integer(key, self.get(key))

    def number(self, key: str) -> float:
        return casters.to_number(key, self.get(key))

    def enum(self, key: str, allowed: Iterable[S]) -> S:
        """Return the raw value of *key* if it is one of *allowed*.

        Raises:
            ValueError: If *allowed* is empty.
            EnvError: If *key* is not set or its value is not allowed.
        """
        values = casters.allowed_values(allowed)
        return cast(S, casters.check_allowed(key, self.get(key), values))

    def boolean(self, key: str) -> bool:
        return casters.to_boolean(key, self.get(key))

    def array(self, key: str, separator: str = casters.DEFAULT_SEPARATOR) -> list[str]:
        casters.check_separator(separator)
        return casters.split(self.get(key), separator)

    def transform(self, key: str, fn: Callable[[str], T]) -> T:
        return fn(self.get(key))

    def transform_array(
        self,
        key: str,
        fn: Callable[[str], T],
        separator: str = casters.DEFAULT_SEPARATOR,
    ) -> list[T]:
        return [fn(item) for item in self.array(key, separator)]

    def __repr__(self) -> str:
        return f"RequiredEnv({self._source!r})"


class OptionalEnv:
    """Environment accessors that fall back to ``None`` (or ``default``).

    Absent keys and present-but-malformed values give the same result. The
    malformed case is logged (redacted) so it can still be diagnosed.
    """

    def __init__(
        self,
        source: EnvSource | Mapping[str, str] | None = None,
        settings: EnvSettings | None = None,
    ) -> None:
        self._source = as_source(source)
        self._settings = settings

    @property
    def source(self) -> EnvSource:
        return self._source

    @property
    def settings(self) -> EnvSettings:
        """Injected settings, else the process-wide ones.

        Invalid ``TYPEDENV_*`` variables fall back to the defaults: the
        optional family must not raise because of its own diagnostics.
        """
        if self._settings is not None:
            return self._settings
        try:
            return get_settings()
        except ValidationError as e:
            logger.warning("Invalid typedenv settings, using defaults: %s", e)
            return EnvSettings.model_construct()

    def __call__(self, key: str, *, default: str | None = None) -> str | None:
        return self.get(key, default=default)

    def get(self, key: str, *, default: str | None = None) -> str | None:
        value = self._source.get(key)
        return default if value is None else value

    def _cast(self, key: str, caster: Callable[[str, str], T], default: T | None) -> T | None:
        raw = self._source.get(key)
        if raw is None:
            return default
        try:
            return caster(key, raw)
        except EnvError as e:
            self._log_discarded(e, raw)
            return default

    def _log_discarded(self, error: EnvError, raw: str) -> None:
        settings = self.settings
        if not settings.log_malformed:
            return
        logger.log(
            settings.malformed_log_levelno,
            "Ignoring malformed env value for %s (%s): %s",
            error.key,
            error.kind.value,
            preview_value(
                error.key,
                raw,
                max_chars=settings.max_value_chars,
                redact=settings.redact_values,
            ),
        )

    def integer(self, key: str, *, default: int | None = None) -> int | None:
        return self._cast(key, casters.to_integer, default)

    def number(self, key: str, *, default: float | None = None) -> float | None:
        return self._cast(key, casters.to_number, default)

    def enum(self, key: str, allowed: Iterable[S], *, default: S | None = None) -> S | None:
        values = casters.allowed_values(allowed)
        value = self._cast(key, lambda k, raw: casters.check_allowed(k, raw, values), default)
        return cast("S | None", value)

    def boolean(self, key: str, *, default: bool | None = None) -> bool | None:
        return self._cast(key, casters.to_boolean, default)

    def array(
        self,
        key: str,
        separator: str = casters.DEFAULT_SEPARATOR,
        *,
        default: list[str] | None = None,
    ) -> list[str] | None:
        casters.check_separator(separator)
        raw = self._source.get(key)
        return default if raw is None else casters.split(raw, separator)

    def transform(
        self,
        key: str,
        fn: Callable[[str], T],
        *,
        default: T | None = None,
    ) -> T | None:
        raw = self._source.get(key)
        return default if raw is None else fn(raw)

    def transform_array(
        self,
        key: str,
        fn: Callable[[str], T],
        separator: str = casters.DEFAULT_SEPARATOR,
        *,
        default: list[T] | None = None,
    ) -> list[T] | None:
        items = self.array(key, separator)
        if items is None:
            return default
        return [fn(item) for item in items]

    def __repr__(self) -> str:
        return f"OptionalEnv({self._source!r})"
