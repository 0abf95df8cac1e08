# SPDX-License-Identifier: MIT
"""Lexical clean-up of version-like strings.

Clean-up is best effort and does not validate: the result of :func:`clean`
may still be rejected by :func:`semver_label.parse`.
"""

from __future__ import annotations

import re

_LABEL_MARKER = re.compile(r"[-+]")


def clean(version_string: str) -> str:
    """Return a lexically normalized form of a semver-like string.

    The following changes are made, if possible:

    - Leading and trailing whitespace is removed.
    - A single leading "v" or "V" is removed.
    - Whitespace around core fields and identifiers is removed.
    - Omitted or empty minor and patch versions are set to "0".
    - Empty release and build identifiers are removed, and a label left
      with no identifiers is dropped along with its marker.

    If no major version is present, ``version_string`` is returned entirely
    unmodified. That includes strings where another "v" or whitespace
    follows the prefix, such as "vv1" or "v 1". Character validity and
    leading zeroes are not checked.

    The result is stable: ``clean(clean(s)) == clean(s)`` for any ``s``.

    Examples:
        >>> clean(" v1.2-rc3..1\\t")
        '1.2.0-rc3.1'
        >>> clean(".1.3")
        '.1.3'
        >>> clean("1-+bar")
        '1.0.0+bar'
    """
    base = version_string.strip()
    if base[:1] in ("v", "V"):
        base = base[1:]
        if base[:1] in ("v", "V") or base[:1].isspace():
            return version_string

    release = build = ""
    marker = _LABEL_MARKER.search(base)
    if marker:
        base, tail = base[: marker.start()], base[marker.end() :]
        if marker.group() == "-":
            release, _, build = tail.partition("+")
        else:
            build = tail

    fields = base.split(".", 2)
    if not fields[0]:
        return version_string
    fields += [""] * (3 - len(fields))

    out = ".".join(field.strip() or "0" for field in fields)
    if release := _clean_label(release):
        out += f"-{release}"
    if build := _clean_label(build):
        out += f"+{build}"
    return out


def _clean_label(text: str) -> str:
    # Whitespace-only identifiers count as empty
    words = (word.strip() for word in text.split("."))
    return ".".join(word for word in words if word)
