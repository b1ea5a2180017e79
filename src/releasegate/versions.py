# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

r"""Semantic versions: parsing, ordering and bump arithmetic.

Grammar (`SemVer 2.0.0 <https://semver.org/spec/v2.0.0.html>`_)::

    version     = core ["-" prerelease] ["+" build]
    core        = number "." number "." number
    number      = "0" / (non-zero digit *digit)
    prerelease  = identifier *("." identifier)
    build       = 1*[0-9A-Za-z-] *("." 1*[0-9A-Za-z-])

Precedence:

- ``(major, minor, patch)`` compare numerically, left to right.
- For equal cores, a version **with** a prerelease sorts **before**
  the same core without one (``1.0.0-rc.1 < 1.0.0``).
- Prerelease identifiers compare one by one: numeric identifiers
  numerically, alphanumeric ones in ASCII order, numeric before
  alphanumeric, and a longer list wins if all shared identifiers are
  equal (``1.0.0-alpha < 1.0.0-alpha.1``).
- Build metadata never affects precedence.

Bump arithmetic::

    major  →  (major + 1).0.0
    minor  →  major.(minor + 1).0
    patch  →  major.minor.(patch + 1)
    none   →  InvalidBumpError

A bump always yields a final release: prerelease and build metadata
are dropped.

Usage::

    from releasegate.versions import apply_bump, parse_version

    v = parse_version('1.4.2-rc.1')
    assert str(apply_bump(v, 'minor')) == '1.5.0'
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from releasegate.commit_parsing import BumpType
from releasegate.errors import InvalidBumpError, MalformedVersionError

__all__ = [
    'SEMVER_PATTERN',
    'SemanticVersion',
    'apply_bump',
    'coerce_bump',
    'compare_versions',
    'format_tag',
    'is_valid_semver',
    'parse_version',
]

_NUMBER = r'0|[1-9][0-9]*'
_PRERELEASE_ID = r'0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*'

SEMVER_PATTERN: re.Pattern[str] = re.compile(
    rf'^(?P<major>{_NUMBER})\.(?P<minor>{_NUMBER})\.(?P<patch>{_NUMBER})'
    rf'(?:-(?P<prerelease>(?:{_PRERELEASE_ID})(?:\.(?:{_PRERELEASE_ID}))*))?'
    r'(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$',
    re.ASCII,
)


@dataclass(frozen=True)
class SemanticVersion:
    """A parsed ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` version.

    Equality is structural (build metadata included); the ordering
    operators follow SemVer precedence, which ignores build metadata.

    Attributes:
        major: Major component.
        minor: Minor component.
        patch: Patch component.
        prerelease: Dot-separated prerelease identifiers, or ``None``.
        build: Dot-separated build metadata, or ``None``.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    def __post_init__(self) -> None:
        """Reject negative components; store empty tags as ``None``."""
        if min(self.major, self.minor, self.patch) < 0:
            raise MalformedVersionError(f'{self.major}.{self.minor}.{self.patch}')
        # Frozen: bypass __setattr__.
        if self.prerelease == '':
            object.__setattr__(self, 'prerelease', None)
        if self.build == '':
            object.__setattr__(self, 'build', None)

    def __str__(self) -> str:
        """Return the canonical version string."""
        text = f'{self.major}.{self.minor}.{self.patch}'
        if self.prerelease:
            text += f'-{self.prerelease}'
        if self.build:
            text += f'+{self.build}'
        return text

    @property
    def core(self) -> tuple[int, int, int]:
        """The ``(major, minor, patch)`` triple."""
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        """``True`` if the version carries a prerelease tag."""
        return bool(self.prerelease)

    def finalize(self) -> SemanticVersion:
        """Return the same core without prerelease or build metadata."""
        return SemanticVersion(self.major, self.minor, self.patch)

    def compare(self, other: SemanticVersion) -> int:
        """Return -1, 0 or 1 as *self* precedes, equals or follows *other*."""
        if self.core != other.core:
            return -1 if self.core < other.core else 1
        return _compare_prerelease(self.prerelease, other.prerelease)

    def __lt__(self, other: SemanticVersion) -> bool:
        """Precedence less-than."""
        return self.compare(other) < 0

    def __le__(self, other: SemanticVersion) -> bool:
        """Precedence less-than-or-equal."""
        return self.compare(other) <= 0

    def __gt__(self, other: SemanticVersion) -> bool:
        """Precedence greater-than."""
        return self.compare(other) > 0

    def __ge__(self, other: SemanticVersion) -> bool:
        """Precedence greater-than-or-equal."""
        return self.compare(other) >= 0


def _compare_identifiers(a: str, b: str) -> int:
    a_num, b_num = a.isascii() and a.isdigit(), b.isascii() and b.isdigit()
    if a_num and b_num:
        x, y = int(a), int(b)
        return (x > y) - (x < y)
    if a_num != b_num:
        # Numeric identifiers have lower precedence.
        return -1 if a_num else 1
    return (a > b) - (a < b)


def _compare_prerelease(a: str | None, b: str | None) -> int:
    if a == b:
        return 0
    if not a:
        return 1
    if not b:
        return -1
    a_ids, b_ids = a.split('.'), b.split('.')
    for x, y in zip(a_ids, b_ids):
        result = _compare_identifiers(x, y)
        if result:
            return result
    return (len(a_ids) > len(b_ids)) - (len(a_ids) < len(b_ids))


def is_valid_semver(version: str) -> bool:
    """Return ``True`` if *version* is a strict SemVer 2.0 string.

    >>> is_valid_semver('1.0.0-beta.1+exp.sha.5114f85')
    True
    >>> is_valid_semver('01.0.0')
    False
    """
    return SEMVER_PATTERN.fullmatch(version) is not None


def parse_version(version: str | SemanticVersion, argument: str = 'version') -> SemanticVersion:
    """Parse a version string.

    Args:
        version: Version string, or an already parsed version (returned
            unchanged).
        argument: Name reported in the error when parsing fails.

    Returns:
        The :class:`SemanticVersion`.

    Raises:
        MalformedVersionError: If *version* violates the grammar.
    """
    if isinstance(version, SemanticVersion):
        return version
    if not isinstance(version, str):
        raise MalformedVersionError(repr(version), argument)
    m = SEMVER_PATTERN.fullmatch(version)
    if m is None:
        raise MalformedVersionError(version, argument)
    return SemanticVersion(
        major=int(m.group('major')),
        minor=int(m.group('minor')),
        patch=int(m.group('patch')),
        prerelease=m.group('prerelease'),
        build=m.group('build'),
    )


def compare_versions(a: str | SemanticVersion, b: str | SemanticVersion) -> int:
    """Compare two versions by SemVer precedence.

    Returns:
        ``-1`` if ``a < b``, ``0`` if they have equal precedence,
        ``1`` if ``a > b``.

    Raises:
        MalformedVersionError: If either argument is not a valid version.
    """
    return parse_version(a, 'a').compare(parse_version(b, 'b'))


def coerce_bump(bump: BumpType | str) -> BumpType:
    """Convert a bump name such as ``"minor"`` to a :class:`BumpType`.

    Raises:
        InvalidBumpError: If *bump* names no known directive.
    """
    if isinstance(bump, BumpType):
        return bump
    try:
        return BumpType(str(bump).strip().lower())
    except ValueError as exc:
        raise InvalidBumpError(bump) from exc


def apply_bump(current: str | SemanticVersion, bump: BumpType | str) -> SemanticVersion:
    """Apply a bump directive to a version.

    Args:
        current: The current version.
        bump: ``major``, ``minor`` or ``patch``.

    Returns:
        The next final (non-prerelease) version.

    Raises:
        MalformedVersionError: If *current* is not a valid version.
        InvalidBumpError: If *bump* is ``none`` or unknown. Callers must
            handle the "no release" case before calling this.
    """
    version = parse_version(current, 'current')
    directive = coerce_bump(bump)

    if directive is BumpType.MAJOR:
        return SemanticVersion(version.major + 1, 0, 0)
    if directive is BumpType.MINOR:
        return SemanticVersion(version.major, version.minor + 1, 0)
    if directive is BumpType.PATCH:
        return SemanticVersion(version.major, version.minor, version.patch + 1)
    raise InvalidBumpError(directive.value)


def format_tag(version: str | SemanticVersion, prefix: str = 'v') -> str:
    """Return the VCS tag name for *version*, e.g. ``v1.2.3``."""
    return f'{prefix}{parse_version(version)}'
