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

"""Gate a proposed version against the version it replaces.

:func:`validate_increment` answers one question: is ``candidate`` shaped
like a single legitimate bump over ``base``? It does not know *why* the
version changed, so it is stricter than the bump resolver and is the
authoritative check on a proposed version (e.g. in a pull request).

Accepted transitions (``base → candidate``)::

    1.2.3 → 2.0.0        major (minor and patch reset)
    1.2.3 → 1.3.0        minor (patch reset)
    1.2.3 → 1.2.4        patch
    1.2.3-rc.1 → 1.2.3   prerelease promoted to its final release

Rejected transitions::

    1.2.3 → 1.2.3        not greater than base (identical version)
    1.2.3 → 1.2.2        not greater than base (went backward)
    1.2.3 → 3.0.0        major jumped by 2
    1.2.3 → 1.4.0        minor jumped by 2
    1.2.3 → 1.2.5        patch jumped by 2
    1.2.3 → 2.1.0        major bump did not reset minor
    1.2.3 → 1.3.1        minor bump did not reset patch

A rejected transition is a normal outcome and is *returned*, never
raised. Malformed version strings, on the other hand, raise
:class:`~releasegate.errors.MalformedVersionError` naming the argument.
"""

from __future__ import annotations

from dataclasses import dataclass

from releasegate.commit_parsing import BumpType
from releasegate.versions import SemanticVersion, parse_version

__all__ = [
    'VersionTransition',
    'validate_increment',
]


@dataclass(frozen=True)
class VersionTransition:
    """Outcome of :func:`validate_increment`.

    Attributes:
        valid: Whether the transition is a single legitimate bump.
        reason: Human-readable explanation.
        candidate: The proposed version string.
        base: The version being replaced.
        component: The offending component (``"order"``, ``"major"``,
            ``"minor"`` or ``"patch"``), empty when valid.
        bump: The bump the transition represents when valid
            (``NONE`` for a prerelease promotion); ``None`` when invalid.
    """

    valid: bool
    reason: str
    candidate: str
    base: str
    component: str = ''
    bump: BumpType | None = None

    def __bool__(self) -> bool:
        """Truthiness mirrors :attr:`valid`."""
        return self.valid


def _rejected(c: SemanticVersion, b: SemanticVersion, component: str, reason: str) -> VersionTransition:
    return VersionTransition(valid=False, reason=reason, candidate=str(c), base=str(b), component=component)


def _accepted(c: SemanticVersion, b: SemanticVersion, bump: BumpType, reason: str) -> VersionTransition:
    return VersionTransition(valid=True, reason=reason, candidate=str(c), base=str(b), bump=bump)


def validate_increment(candidate: str | SemanticVersion, base: str | SemanticVersion) -> VersionTransition:
    """Check that *candidate* is a single-step increment over *base*.

    Args:
        candidate: The proposed version.
        base: The current (released) version.

    Returns:
        A :class:`VersionTransition`.

    Raises:
        MalformedVersionError: If either argument is not a valid
            semantic version; ``argument`` is ``"candidate"`` or
            ``"base"``.
    """
    c = parse_version(candidate, 'candidate')
    b = parse_version(base, 'base')

    order = c.compare(b)
    if order < 0:
        return _rejected(c, b, 'order', f'Version {c} is not greater than base {b} (went backward)')
    if order == 0:
        return _rejected(
            c,
            b,
            'order',
            f'Version {c} is not greater than base {b} (identical version); the version must be incremented',
        )

    major_delta = c.major - b.major
    minor_delta = c.minor - b.minor
    patch_delta = c.patch - b.patch

    if major_delta > 0:
        if major_delta > 1:
            return _rejected(c, b, 'major', f'Major version jumped by {major_delta} ({b} -> {c}); it must increase by 1')
        if c.minor != 0:
            return _rejected(c, b, 'minor', f'Major version bump must reset minor and patch to 0, got {c}')
        if c.patch != 0:
            return _rejected(c, b, 'patch', f'Major version bump must reset minor and patch to 0, got {c}')
        return _accepted(c, b, BumpType.MAJOR, f'Major version bump from {b} to {c}')

    if minor_delta > 0:
        if minor_delta > 1:
            return _rejected(c, b, 'minor', f'Minor version jumped by {minor_delta} ({b} -> {c}); it must increase by 1')
        if c.patch != 0:
            return _rejected(c, b, 'patch', f'Minor version bump must reset patch to 0, got {c}')
        return _accepted(c, b, BumpType.MINOR, f'Minor version bump from {b} to {c}')

    if patch_delta > 0:
        if patch_delta > 1:
            return _rejected(c, b, 'patch', f'Patch version jumped by {patch_delta} ({b} -> {c}); it must increase by 1')
        return _accepted(c, b, BumpType.PATCH, f'Patch version bump from {b} to {c}')

    # Same core, higher precedence: the base was a prerelease.
    return _accepted(c, b, BumpType.NONE, f'Prerelease {b} advanced to {c}')
