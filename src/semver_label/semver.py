# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Supports MAJOR.MINOR.PATCH format with optional release and build labels:
- Release (pre-release): -alpha, -alpha.1, -rc1.c030, -0.3.7
- Build metadata: +build, +build.123, +20240101

A zero :class:`Version` is ready for use and represents "0.0.0".
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import ErrorReason, InvalidVersionError, ParseErrorDetail

# Whole-string form of the grammar accepted by parse(). Unlike the core
# fields, release and build identifiers may be numeric with leading zeroes.
# Use with fullmatch(); the anchors are kept for JSON Schema consumers.
SEMVER_PATTERN = re.compile(
    r"^(?:0|[1-9][0-9]*)"
    r"\.(?:0|[1-9][0-9]*)"
    r"\.(?:0|[1-9][0-9]*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)

_DIGITS = re.compile(r"[0-9]+")
_WORD = re.compile(r"[0-9A-Za-z-]+")
_LABEL_MARKER = re.compile(r"[-+]")

CORE_FIELDS = ("major", "minor", "patch")


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Instances are immutable; every derivation returns a new value. Equality
    and hashing are structural and include build metadata, while ordering
    (``<``, :meth:`before`, :meth:`equiv`, ...) ignores it. Use :meth:`key`
    when build metadata should not distinguish two versions.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        release_words: Dot-separated release identifiers (e.g., ("rc", "1"))
        build_words: Dot-separated build identifiers (e.g., ("build", "456"))

    Raises:
        TypeError: If a core field is not an int, or a label is given as a
            string instead of a sequence of identifiers
        ValueError: If a core field is negative
        InvalidVersionError: If an identifier is empty or has characters
            outside [0-9A-Za-z-]
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    release_words: tuple[str, ...] = ()
    build_words: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in CORE_FIELDS:
            _check_core_value(name, getattr(self, name))
        for label in ("release", "build"):
            attr = f"{label}_words"
            words = getattr(self, attr)
            if isinstance(words, (str, bytes)):
                raise TypeError(
                    f"{attr} must be a sequence of identifiers, not {type(words).__name__}"
                )
            words = tuple(words)
            detail = _check_words(label, words)
            if detail is not None:
                raise InvalidVersionError(".".join(words), detail)
            object.__setattr__(self, attr, words)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.release_words:
            version += f"-{self.release}"
        if self.build_words:
            version += f"+{self.build}"
        return version

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self.after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self.before(other)

    @property
    def release(self) -> str:
        """The release label without its "-" prefix, or "" if absent."""
        return ".".join(self.release_words)

    @property
    def build(self) -> str:
        """The build metadata without its "+" prefix, or "" if absent."""
        return ".".join(self.build_words)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.release_words)

    def before(self, other: Version) -> bool:
        """Report whether this version orders before ``other``."""
        return precedence(self, other) < 0

    def after(self, other: Version) -> bool:
        """Report whether this version orders after ``other``."""
        return precedence(self, other) > 0

    def equiv(self, other: Version) -> bool:
        """Report whether this version and ``other`` are order-equivalent.

        This is distinct from ``==``: build metadata is ignored here.
        """
        return precedence(self, other) == 0

    def add(self, dmajor: int = 0, dminor: int = 0, dpatch: int = 0) -> Version:
        """Return a copy with the given offsets added to the core fields.

        Offsets that would make a field negative set it to 0 instead. Release
        and build labels are kept as they are.

        Examples:
            >>> str(Version(1, 2, 3).add(0, 1, -5))
            '1.3.0'
        """
        return dataclasses.replace(
            self,
            major=max(self.major + dmajor, 0),
            minor=max(self.minor + dminor, 0),
            patch=max(self.patch + dpatch, 0),
        )

    def with_core(self, major: int, minor: int, patch: int) -> Version:
        """Return a copy with the core version (major.minor.patch) set.

        A negative argument leaves the corresponding field unchanged, so
        ``v.with_core(-1, -1, 0)`` only resets the patch version.
        """
        return dataclasses.replace(
            self,
            major=major if major >= 0 else self.major,
            minor=minor if minor >= 0 else self.minor,
            patch=patch if patch >= 0 else self.patch,
        )

    def core(self) -> Version:
        """Return a copy with the release and build labels cleared."""
        return dataclasses.replace(self, release_words=(), build_words=())

    def with_release(self, release: str) -> Version:
        """Return a copy with the release label set.

        Empty identifiers are discarded, so ``"rc..1."`` becomes ``rc.1``.
        If ``release`` is empty the result has no release label.

        Raises:
            InvalidVersionError: If an identifier has invalid characters
        """
        return dataclasses.replace(self, release_words=_clean_words(release))

    def with_build(self, build: str) -> Version:
        """Return a copy with the build metadata set (see :meth:`with_release`)."""
        return dataclasses.replace(self, build_words=_clean_words(build))

    def key(self) -> Version:
        """Return a copy without build metadata, for use as a mapping key.

        ``a.key() == b.key()`` exactly when ``a.equiv(b)``.
        """
        return dataclasses.replace(self, build_words=())


def new(major: int, minor: int, patch: int) -> Version:
    """Construct a Version with no release or build label.

    Raises:
        ValueError: If any argument is negative
    """
    return Version(major, minor, patch)


def to_string(version: Version) -> str:
    """Return the canonical string form of ``version``."""
    return str(version)


def precedence(version1: Version, version2: Version) -> int:
    """Compare two versions in semantic version order.

    Returns -1, 0 or 1. Build metadata is ignored. See
    :func:`semver_label.compare`, which also accepts strings.
    """
    for attr in CORE_FIELDS:
        c = _cmp(getattr(version1, attr), getattr(version2, attr))
        if c != 0:
            return c
    return _compare_release(version1.release_words, version2.release_words)


def parse(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The input must match the grammar exactly; surrounding whitespace or a
    leading "v" are rejected (see :func:`semver_label.clean`). Checks run in
    a fixed order and the first failure is reported: core field count, then
    major, minor and patch, then the release label, then the build label.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-release][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning
        TypeError: If ``version_string`` is not a string

    Examples:
        >>> parse("1.2.3")
        Version(major=1, minor=2, patch=3, release_words=(), build_words=())

        >>> str(parse("2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'
    """
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")

    core, release, build = version_string, None, None
    marker = _LABEL_MARKER.search(version_string)
    if marker:
        core, rest = version_string[: marker.start()], version_string[marker.end() :]
        if marker.group() == "-":
            release, plus, tail = rest.partition("+")
            if plus:
                build = tail
        else:
            build = rest

    fields = _split_words(core)
    if len(fields) != 3:
        raise InvalidVersionError(version_string, ParseErrorDetail.syntax(len(fields)))
    for name, text in zip(CORE_FIELDS, fields):
        reason = _check_number(text)
        if reason is not None:
            raise InvalidVersionError(
                version_string, ParseErrorDetail.numeric_field(name, reason)
            )

    return Version(
        major=int(fields[0]),
        minor=int(fields[1]),
        patch=int(fields[2]),
        release_words=_parse_label(version_string, "release", release),
        build_words=_parse_label(version_string, "build", build),
    )


def must_parse(version_string: str) -> Version:
    """Parse a version that is known to be valid, such as a literal.

    Intended for module-level constants and program initialization. Use
    :func:`parse` for anything that comes from users.

    Raises:
        RuntimeError: If ``version_string`` is not a valid version
    """
    try:
        return parse(version_string)
    except InvalidVersionError as err:
        raise RuntimeError(f"parse {version_string!r}: {err}") from err


def is_valid(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid("1.0.0-alpha")
        True
        >>> is_valid("1.0")
        False
        >>> is_valid("v1.0.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse(version_string)
    except InvalidVersionError:
        return False
    return True


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _compare_word(a: str, b: str) -> int:
    """Compare two identifiers.

    Identifiers made only of ASCII digits are compared by numeric value;
    any other pair is compared as plain strings.
    """
    if _DIGITS.fullmatch(a) and _DIGITS.fullmatch(b):
        return _cmp(int(a), int(b))
    return _cmp(a, b)


def _compare_release(words1: Sequence[str], words2: Sequence[str]) -> int:
    # No release > any release
    if not words1 and not words2:
        return 0
    if not words1:
        return 1
    if not words2:
        return -1

    for w1, w2 in zip(words1, words2):
        c = _compare_word(w1, w2)
        if c != 0:
            return c

    # All shared identifiers equal - the shorter label orders first
    return _cmp(len(words1), len(words2))


def _clean_words(text: str) -> tuple[str, ...]:
    """Split ``text`` on dots, discarding empty words."""
    return tuple(word for word in text.split(".") if word)


def _split_words(text: str) -> list[str]:
    # "" has no words at all, rather than one empty word
    if not text:
        return []
    return text.split(".")


def _check_core_value(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} version must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"negative {name} version: {value}")


def _check_number(text: str) -> Optional[ErrorReason]:
    if not _DIGITS.fullmatch(text):
        return ErrorReason.NOT_A_NUMBER
    if text[0] == "0" and len(text) > 1:
        return ErrorReason.LEADING_ZEROES
    return None


def _check_words(label: str, words: Sequence[str]) -> Optional[ParseErrorDetail]:
    """Return the first problem with ``words``, or None if all are valid."""
    for position, word in enumerate(words, start=1):
        if not word:
            reason = ErrorReason.EMPTY_WORD
        elif not _WORD.fullmatch(word):
            reason = ErrorReason.INVALID_CHAR
        else:
            continue
        return ParseErrorDetail.identifier(label, ".".join(words), position, reason)
    return None


def _parse_label(version_string: str, label: str, text: Optional[str]) -> tuple[str, ...]:
    if text is None:
        return ()
    if not text:
        raise InvalidVersionError(version_string, ParseErrorDetail.empty_label(label))
    words = text.split(".")
    detail = _check_words(label, words)
    if detail is not None:
        raise InvalidVersionError(version_string, detail)
    return tuple(words)
