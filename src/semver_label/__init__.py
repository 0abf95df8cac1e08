# SPDX-License-Identifier: MIT
"""Semantic version parsing, cleaning, comparison and formatting.

This package parses strings in the semantic versioning grammar
(MAJOR.MINOR.PATCH[-release][+build]) into immutable Version values,
reports precise errors for strings that do not conform, repairs dirty
version-like strings, and orders versions by semver precedence.

Example:
    >>> from semver_label import parse, clean, compare_strings, new
    >>>
    >>> v = parse("1.5.3-rc1.4+modified")
    >>> str(v.core()), v.release, v.build
    ('1.5.3', 'rc1.4', 'modified')
    >>>
    >>> v.equiv(new(1, 5, 3).with_release("rc1.4"))
    True
    >>>
    >>> clean(" v1.2-rc3..1\\t")
    '1.2.0-rc3.1'
    >>>
    >>> compare_strings("v1", "1.0.0")
    0
"""

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    ErrorReason,
    InvalidVersionError,
    ParseErrorDetail,
)
from .semver import (
    SEMVER_PATTERN,
    Version,
    is_valid,
    must_parse,
    new,
    parse,
    to_string,
)
from .clean import clean
from .compare import (
    compare,
    compare_strings,
    version_key,
)
from .text import (
    SemVer,
    marshal_text,
    unmarshal_text,
)

__all__ = [
    # Errors
    "ErrorKind",
    "ErrorReason",
    "InvalidVersionError",
    "ParseErrorDetail",
    # Version model and parsing
    "Version",
    "new",
    "parse",
    "must_parse",
    "is_valid",
    "to_string",
    "SEMVER_PATTERN",
    # Cleaning
    "clean",
    # Comparison
    "compare",
    "compare_strings",
    "version_key",
    # Text encoding
    "SemVer",
    "marshal_text",
    "unmarshal_text",
]
