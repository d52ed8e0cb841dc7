# SPDX-License-Identifier: MIT
"""Semantic version parsing and precedence checks.

This package parses and formats versions following the SemVer 2.0.0
specification and answers minimum-version questions such as "does this
plugin's version satisfy the required one?".

Example:
    >>> from sem_version import parse_version, is_at_least
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> is_at_least(version, parse_version("1.2.3-alpha"))
    True
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    format_version,
    is_valid_semver,
    InvalidVersionError,
    VersionParseError,
    MultipleMetadataSegmentsError,
    BadFormatError,
    InvalidCharacterError,
    NumberConversionError,
    LeadingZeroError,
    ALLOWED_CHARACTERS,
    SECTION_NORMAL,
    SECTION_PRERELEASE,
    SECTION_META,
)
from .compare import (
    is_at_least,
    compare_versions,
    version_key,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "format_version",
    "is_valid_semver",
    "ALLOWED_CHARACTERS",
    "SECTION_NORMAL",
    "SECTION_PRERELEASE",
    "SECTION_META",
    # Errors
    "InvalidVersionError",
    "VersionParseError",
    "MultipleMetadataSegmentsError",
    "BadFormatError",
    "InvalidCharacterError",
    "NumberConversionError",
    "LeadingZeroError",
    # Version comparison
    "is_at_least",
    "compare_versions",
    "version_key",
]
