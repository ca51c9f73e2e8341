"""Optional accessors bound to the live process environment.

    from typedenv import optional

    debug = optional.boolean("DEBUG", default=False)
    timeout = optional.number("TIMEOUT_SECONDS")

Missing and malformed values both give ``None`` (or ``default``). Exceptions
raised by transform callables still propagate.
"""

from __future__ import annotations

from typedenv.accessor import OptionalEnv

accessor = OptionalEnv()

get = accessor.get
integer = accessor.integer
number = accessor.number
enum = accessor.enum
boolean = accessor.boolean
array = accessor.array
transform = accessor.transform
transform_array = accessor.transform_array

__all__ = [
    "accessor",
    "array",
    "boolean",
    "enum",
    "get",
    "integer",
    "number",
    "transform",
    "transform_array",
]
