"""Required accessors bound to the live process environment.

    from typedenv import required

    port = required.integer("PORT")
    hosts = required.array("ALLOWED_HOSTS")

Every function raises ``EnvError`` when the variable is missing or does not
have the requested shape.
"""

from __future__ import annotations

from typedenv.accessor import RequiredEnv

accessor = RequiredEnv()

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
