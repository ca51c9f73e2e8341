"""Typed access to process environment variables.

Two accessor families share one set of casting rules:

- ``env`` / ``typedenv.required``: raise ``EnvError`` on a missing or
  malformed value.
- ``opt`` / ``typedenv.optional``: return ``None`` (or ``default``) instead.

    from typedenv import env, opt

    token = env("API_TOKEN")
    port = env.integer("PORT")
    debug = opt.boolean("DEBUG", default=False)
"""

from typedenv import optional, required
from typedenv.accessor import OptionalEnv, RequiredEnv
from typedenv.enums import EnvErrorReason
from typedenv.errors import EnvError
from typedenv.source import EnvSource

env = required.accessor
opt = optional.accessor

__all__ = [
    "EnvError",
    "EnvErrorReason",
    "EnvSource",
    "OptionalEnv",
    "RequiredEnv",
    "env",
    "opt",
    "optional",
    "required",
]
