# SPDX-License-Identifier: MIT
"""Text encoding of versions, and a pydantic field type built on it.

Example:
    >>> from pydantic import BaseModel
    >>> from semver_label import SemVer
    >>>
    >>> class Release(BaseModel):
    ...     version: SemVer
    >>>
    >>> Release(version="v1.2.3-rc.1").model_dump(mode="json")
    {'version': '1.2.3-rc.1'}
"""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from .semver import SEMVER_PATTERN, Version, parse


def marshal_text(version: Version) -> str:
    """Encode ``version`` in canonical form."""
    return str(version)


def unmarshal_text(data: Union[str, bytes]) -> Version:
    """Decode a version, allowing a single leading "v".

    Args:
        data: Version text; bytes are decoded as UTF-8

    Raises:
        InvalidVersionError: If the text is not a valid version
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    return parse(data.removeprefix("v"))


def _validate(value: Any) -> Version:
    if isinstance(value, Version):
        return value
    if isinstance(value, (str, bytes)):
        return unmarshal_text(value)
    raise ValueError(f"Expected a version string, got {type(value).__name__}")


# Accepts Version objects or text, always dumps the canonical string.
SemVer = Annotated[
    Version,
    PlainValidator(_validate),
    PlainSerializer(marshal_text, return_type=str),
    WithJsonSchema({"type": "string", "pattern": SEMVER_PATTERN.pattern}),
]
