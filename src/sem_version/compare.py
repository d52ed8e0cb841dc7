# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 ordering.

Normal versions are compared numerically, a release has higher precedence
than any of its pre-releases, and pre-release identifiers are compared one
at a time. Build metadata is ignored.
"""

from __future__ import annotations

from typing import Optional, Union

from .semver import Version, parse_version


def _as_version(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _numeric_identifier(identifier: str) -> Optional[tuple[int, str]]:
    """Return an ordering key if the identifier is a non-negative integer.

    With leading zeros stripped, a longer digit string is the larger number
    and equal lengths compare lexically, so no int conversion is needed.
    """
    if identifier and identifier.isascii() and identifier.isdigit():
        digits = identifier.lstrip("0")
        return (len(digits), digits)
    return None


def is_at_least(version: Union[str, Version], minimum: Union[str, Version]) -> bool:
    """Report whether ``version`` has equal or greater precedence than ``minimum``.

    Args:
        version: The version being checked (string or Version object)
        minimum: The minimum required version (string or Version object)

    Returns:
        True if ``version`` is the same as or newer than ``minimum``

    Raises:
        InvalidVersionError: If either argument is an invalid version string

    Examples:
        >>> is_at_least("1.0.1", "1.0.0")
        True
        >>> is_at_least("1.0.0-beta", "1.0.0")
        False
        >>> is_at_least("1.0.0-1", "1.0.0-beta")
        False
    """
    v = _as_version(version)
    m = _as_version(minimum)

    for v_part, m_part in zip(v.normal, m.normal):
        if v_part != m_part:
            return v_part > m_part

    # A release has higher precedence than any of its pre-releases
    if not v.prerelease or not m.prerelease:
        return not v.prerelease

    for i, m_ident in enumerate(m.prerelease):
        if len(v.prerelease) <= i:
            # Shorter list loses when all previous identifiers are equal
            return False
        v_ident = v.prerelease[i]

        v_num = _numeric_identifier(v_ident)
        m_num = _numeric_identifier(m_ident)
        if v_num is not None and m_num is not None:
            if v_num != m_num:
                return v_num > m_num
            continue

        # Alphanumeric identifiers have higher precedence than numeric ones
        if m_num is not None:
            return True
        if v_num is not None:
            return False

        if v_ident != m_ident:
            return v_ident > m_ident

    # minimum's identifiers are a prefix of version's, or they are the same
    return True


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
        >>> compare_versions("1.0.0-rc.1", "1.0.0-alpha")
        1
    """
    v1 = _as_version(version1)
    v2 = _as_version(version2)

    at_least = is_at_least(v1, v2)
    at_most = is_at_least(v2, v1)
    if at_least and at_most:
        return 0
    return 1 if at_least else -1


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key ordering versions by precedence.

    Examples:
        >>> sorted(["1.0.0", "1.0.0-beta", "1.0.0-alpha.1", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0-alpha.1', '1.0.0-beta', '1.0.0']
    """
    v = _as_version(version)

    # Release becomes (1,) to sort after every pre-release
    # Numeric identifiers sort before alphanumeric ones
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for identifier in v.prerelease:
            number = _numeric_identifier(identifier)
            if number is not None:
                parts.append((0, number, ""))
            else:
                parts.append((1, (0, ""), identifier))
        prerelease_key = (0, tuple(parts))

    return (*v.normal, prerelease_key)
