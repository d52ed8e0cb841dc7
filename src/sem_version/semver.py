# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta-2, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101

Parsing is permissive about leading zeros (``01.2.3`` parses as ``1.2.3``)
unless ``strict=True`` is passed.
"""

from __future__ import annotations

import logging
import string
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Characters permitted in the pre-release and build metadata sections
ALLOWED_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-.")

SECTION_NORMAL = "normal"
SECTION_PRERELEASE = "prerelease"
SECTION_META = "meta"


class InvalidVersionError(ValueError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class VersionParseError(InvalidVersionError):
    """Base class for failures detected while parsing a version string."""


class MultipleMetadataSegmentsError(VersionParseError):
    """Raised when a version string contains more than one ``+``."""

    def __init__(self, version: str):
        super().__init__(version, "only one +meta is allowed")


class BadFormatError(VersionParseError):
    """Raised when the normal version is not exactly major.minor.patch."""

    def __init__(self, version: str):
        super().__init__(version, "major.minor.patch must be specified")


class InvalidCharacterError(VersionParseError):
    """Raised when a section contains a character outside its allowed class.

    Attributes:
        section: One of "normal", "prerelease" or "meta"
        char: The offending character
        position: Zero-based index of the character within its section
    """

    def __init__(self, version: str, section: str, char: str, position: int):
        self.section = section
        self.char = char
        self.position = position
        super().__init__(
            version, f"bad {section} character: '{char}', in position {position}"
        )


class NumberConversionError(VersionParseError):
    """Raised when a digit-only normal segment cannot be converted to an int.

    The underlying ``ValueError`` is available as ``__cause__``.
    """

    def __init__(self, version: str, segment: str):
        self.segment = segment
        super().__init__(version, f"invalid normal version number: {segment!r}")


class LeadingZeroError(VersionParseError):
    """Raised in strict mode when a numeric identifier has a leading zero."""

    def __init__(self, version: str, section: str, identifier: str, position: int):
        self.section = section
        self.identifier = identifier
        self.position = position
        super().__init__(
            version,
            f"leading zero in {section} identifier {identifier!r}, in position {position}",
        )


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Attributes:
        normal: The (major, minor, patch) triple
        prerelease: Pre-release identifiers in order (e.g. ("rc", "1")); empty
            for a release
        meta: Raw build metadata (e.g. "build.123"); empty when absent. It has
            no effect on precedence.
    """

    normal: tuple[int, int, int]
    prerelease: tuple[str, ...] = ()
    meta: str = ""

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(self)

    @property
    def major(self) -> int:
        return self.normal[0]

    @property
    def minor(self) -> int:
        return self.normal[1]

    @property
    def patch(self) -> int:
        return self.normal[2]

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return len(self.prerelease) > 0

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _find_invalid_character(section: str) -> int:
    """Return the index of the first disallowed character, or -1."""
    for i, char in enumerate(section):
        if char not in ALLOWED_CHARACTERS:
            return i
    return -1


def _reject(error: VersionParseError) -> VersionParseError:
    logger.debug("Rejected version %r: %s", error.version, error.message)
    return error


def _parse_normal(version_string: str, normal: str, strict: bool) -> tuple[int, int, int]:
    segments = normal.split(".")
    if len(segments) != 3:
        raise _reject(BadFormatError(version_string))

    numbers = []
    offset = 0
    for segment in segments:
        for j, char in enumerate(segment):
            if not "0" <= char <= "9":
                raise _reject(
                    InvalidCharacterError(version_string, SECTION_NORMAL, char, offset + j)
                )
        if strict and len(segment) > 1 and segment.startswith("0"):
            raise _reject(LeadingZeroError(version_string, SECTION_NORMAL, segment, offset))
        try:
            numbers.append(int(segment))
        except ValueError as exc:
            raise _reject(NumberConversionError(version_string, segment)) from exc
        offset += len(segment) + 1

    return numbers[0], numbers[1], numbers[2]


def _parse_prerelease(version_string: str, prerelease: str, strict: bool) -> tuple[str, ...]:
    position = _find_invalid_character(prerelease)
    if position >= 0:
        raise _reject(
            InvalidCharacterError(
                version_string, SECTION_PRERELEASE, prerelease[position], position
            )
        )

    identifiers = tuple(prerelease.split("."))
    if strict:
        offset = 0
        for identifier in identifiers:
            if len(identifier) > 1 and identifier.isdigit() and identifier.startswith("0"):
                raise _reject(
                    LeadingZeroError(version_string, SECTION_PRERELEASE, identifier, offset)
                )
            offset += len(identifier) + 1
    return identifiers


def parse_version(version_string: str, *, strict: bool = False) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+meta])
        strict: Reject numeric identifiers with leading zeros instead of
            normalising them

    Returns:
        A Version object with parsed components

    Raises:
        MultipleMetadataSegmentsError: If the string contains more than one "+"
        BadFormatError: If the normal version is not major.minor.patch
        InvalidCharacterError: If any section contains a disallowed character
        NumberConversionError: If a normal segment is empty
        LeadingZeroError: If ``strict`` and a numeric identifier has a leading zero
        InvalidVersionError: If the input is not a string

    Examples:
        >>> parse_version("1.2.3")
        Version(normal=(1, 2, 3), prerelease=(), meta='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(normal=(2, 0, 0), prerelease=('rc', '1'), meta='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    segments = version_string.split("+")
    if len(segments) > 2:
        raise _reject(MultipleMetadataSegmentsError(version_string))

    meta = ""
    if len(segments) == 2:
        meta = segments[1]
        position = _find_invalid_character(meta)
        if position >= 0:
            raise _reject(
                InvalidCharacterError(version_string, SECTION_META, meta[position], position)
            )

    normal, _, prerelease = segments[0].partition("-")
    numbers = _parse_normal(version_string, normal, strict)

    if not prerelease:
        return Version(normal=numbers, meta=meta)

    return Version(
        normal=numbers,
        prerelease=_parse_prerelease(version_string, prerelease, strict),
        meta=meta,
    )


def format_version(version: Version) -> str:
    """Render a Version back to its canonical string.

    Leading zeros are not reproduced, but parsing the result always yields a
    Version equal to the one formatted.

    Examples:
        >>> format_version(Version(normal=(1, 0, 0), prerelease=("beta", "1"), meta="sha.5114f85"))
        '1.0.0-beta.1+sha.5114f85'
    """
    major, minor, patch = version.normal
    result = f"{major}.{minor}.{patch}"
    prerelease = ".".join(version.prerelease)
    if prerelease:
        result += f"-{prerelease}"
    if version.meta:
        result += f"+{version.meta}"
    return result


def is_valid_semver(version_string: str, *, strict: bool = False) -> bool:
    """Check if a string is a valid semantic version.

    Args:
        version_string: The string to validate
        strict: Apply the same leading-zero rule as ``parse_version``

    Returns:
        True if the string is a valid semantic version, False otherwise

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("01.0.0", strict=True)
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string, strict=strict)
    except VersionParseError:
        return False
    return True
