# SPDX-License-Identifier: MIT
"""Version comparison following semantic version precedence.

Core versions are compared numerically. A version with a release label
orders before the same core version without one (1.0.0-rc.1 < 1.0.0), and
release labels are compared identifier by identifier. Build metadata is
ignored.
"""

from __future__ import annotations

import functools
import logging
from typing import Union

from .clean import clean
from .errors import InvalidVersionError
from .semver import Version, parse, precedence

logger = logging.getLogger(__name__)


def compare(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 is equivalent to version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Note:
        Strings are parsed strictly; use :func:`compare_strings` for
        untrusted input. Build metadata is ignored.

    Examples:
        >>> compare("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare("1.2.3-four+five.six", "1.2.3-four")
        0
    """
    v1 = parse(version1) if isinstance(version1, str) else version1
    v2 = parse(version2) if isinstance(version2, str) else version2

    return precedence(v1, v2)


def compare_strings(s1: str, s2: str) -> int:
    """Compare two version-like strings in semantic version order.

    Each string is cleaned (see :func:`semver_label.clean`) and parsed on
    its own. If both parse, the result is :func:`compare` of the two
    versions. Otherwise the raw inputs, not their cleaned forms, are
    compared in ordinary lexicographic order. The fallback is deliberate
    and never raises.

    Examples:
        >>> compare_strings("v1", "1.0.0")
        0
        >>> compare_strings("nonsense", "hoo-hah")
        1
    """
    try:
        v1 = parse(clean(s1))
        v2 = parse(clean(s2))
    except InvalidVersionError as err:
        logger.debug("Comparing %r and %r as plain strings: %s", s1, s2, err)
        return (s1 > s2) - (s1 < s2)
    return compare(v1, v2)


_version_key = functools.cmp_to_key(compare)


def version_key(version: Union[str, Version]):
    """Return a sort key for a version, suitable for sorted(), min() and max().

    Strings are parsed strictly, as in :func:`compare`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _version_key(version)
