# SPDX-License-Identifier: MIT
"""Structured errors for semantic version parsing.

Every parse failure is reported as an :class:`InvalidVersionError` whose
``detail`` describes what went wrong. Callers that need more than a message
can match on ``err.detail.kind``:

    >>> from semver_label import parse
    >>> try:
    ...     parse("0.1.2-a..b")
    ... except InvalidVersionError as err:
    ...     err.detail.kind, err.detail.position
    (<ErrorKind.IDENTIFIER: 'identifier'>, 2)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class ErrorKind(str, enum.Enum):
    """The category of a parse failure."""

    SYNTAX = "syntax"  # core is not exactly major.minor.patch
    NUMERIC_FIELD = "numeric-field"
    EMPTY_LABEL = "empty-label"  # "-" or "+" with nothing after it
    IDENTIFIER = "identifier"


class ErrorReason(str, enum.Enum):
    """Why a numeric field or identifier was rejected."""

    NOT_A_NUMBER = "not a number"
    LEADING_ZEROES = "leading zeroes"
    EMPTY_WORD = "empty word"
    INVALID_CHAR = "invalid char"


@dataclass(frozen=True, slots=True)
class ParseErrorDetail:
    """Details about a single parse failure.

    Attributes:
        kind: The error category
        message: Human-readable error message
        field: Core field that failed ("major", "minor" or "patch")
        label: Label that failed ("release" or "build")
        position: 1-based index of the offending identifier within its label
        reason: Why the field or identifier was rejected
        count: Number of dot-separated core fields found (SYNTAX only)
    """

    kind: ErrorKind
    message: str
    field: Optional[str] = None
    label: Optional[str] = None
    position: Optional[int] = None
    reason: Optional[ErrorReason] = None
    count: Optional[int] = None

    @classmethod
    def syntax(cls, count: int) -> ParseErrorDetail:
        return cls(
            kind=ErrorKind.SYNTAX,
            message=f"invalid version syntax: wrong length (got {count}, want 3)",
            count=count,
        )

    @classmethod
    def numeric_field(cls, field: str, reason: ErrorReason) -> ParseErrorDetail:
        return cls(
            kind=ErrorKind.NUMERIC_FIELD,
            message=f"invalid {field}: {reason.value}",
            field=field,
            reason=reason,
        )

    @classmethod
    def empty_label(cls, label: str) -> ParseErrorDetail:
        return cls(kind=ErrorKind.EMPTY_LABEL, message=f"empty {label}", label=label)

    @classmethod
    def identifier(
        cls, label: str, text: str, position: int, reason: ErrorReason
    ) -> ParseErrorDetail:
        return cls(
            kind=ErrorKind.IDENTIFIER,
            message=f"invalid {label} {text!r}: {reason.value} (pos {position})",
            label=label,
            position=position,
            reason=reason,
        )


class InvalidVersionError(ValueError):
    """Raised when a string does not follow semantic versioning.

    Attributes:
        version: The rejected input
        detail: What was wrong with it
        message: The detail message
    """

    def __init__(self, version: str, detail: ParseErrorDetail):
        self.version = version
        self.detail = detail
        self.message = detail.message
        super().__init__(self.message)

    @property
    def kind(self) -> ErrorKind:
        return self.detail.kind
