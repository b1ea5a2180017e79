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

"""Error taxonomy for releasegate.

Every error raised by releasegate carries a stable machine-readable
code (see :class:`E`), a human message, and an optional hint telling
the operator how to fix the problem::

    ┌──────────────────────────┬─────────────────────────────────────────┐
    │ Error                    │ When                                    │
    ├──────────────────────────┼─────────────────────────────────────────┤
    │ MalformedVersionError    │ A version string violates SemVer 2.0.   │
    │                          │ Fatal: a corrupted manifest must halt   │
    │                          │ the release computation.                │
    ├──────────────────────────┼─────────────────────────────────────────┤
    │ InvalidBumpError         │ Version arithmetic called with ``none`` │
    │                          │ (or an unknown bump name). Fix the      │
    │                          │ call site, do not retry.                │
    ├──────────────────────────┼─────────────────────────────────────────┤
    │ InvalidDateError         │ Changelog date is not ``YYYY-MM-DD``.   │
    ├──────────────────────────┼─────────────────────────────────────────┤
    │ ConfigError              │ ``releasegate.toml`` is missing or      │
    │                          │ contains invalid keys/values.           │
    └──────────────────────────┴─────────────────────────────────────────┘

Rejected version *transitions* are not errors: they are reported as a
:class:`~releasegate.validation.VersionTransition` value.
"""

from __future__ import annotations

import enum

__all__ = [
    'ConfigError',
    'E',
    'InvalidBumpError',
    'InvalidDateError',
    'InvalidVersionError',
    'MalformedVersionError',
    'ReleaseGateError',
]


class E(str, enum.Enum):
    """Stable error codes."""

    VERSION_INVALID = 'RG-VERSION-INVALID'
    BUMP_INVALID = 'RG-BUMP-INVALID'
    DATE_INVALID = 'RG-DATE-INVALID'
    CONFIG_INVALID = 'RG-CONFIG-INVALID'
    CONFIG_NOT_FOUND = 'RG-CONFIG-NOT-FOUND'


class ReleaseGateError(Exception):
    """Base class for all releasegate errors.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable description of the problem.
        hint: Optional remediation hint.
    """

    def __init__(self, *, code: E, message: str, hint: str = '') -> None:
        """Initialize with an error code, message, and optional hint."""
        self.code = code
        self.message = message
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        """Return ``[code] message`` with the hint on a second line."""
        text = f'[{self.code.value}] {self.message}'
        if self.hint:
            text += f'\n  hint: {self.hint}'
        return text


class MalformedVersionError(ReleaseGateError, ValueError):
    """Raised when a version string is not a valid semantic version.

    Attributes:
        version: The offending version string.
        argument: Name of the argument that failed (e.g. ``"candidate"``).
    """

    def __init__(self, version: str, argument: str = 'version') -> None:
        """Initialize with the rejected version and the argument name."""
        self.version = version
        self.argument = argument
        super().__init__(
            code=E.VERSION_INVALID,
            message=f'{argument} {version!r} is not a valid semantic version',
            hint='Expected MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD], e.g. 1.2.3, 2.0.0-rc.1, 1.0.0+build.5.',
        )


# Name used by version arithmetic for the same failure.
InvalidVersionError = MalformedVersionError


class InvalidBumpError(ReleaseGateError, ValueError):
    """Raised when version arithmetic receives ``none`` or an unknown bump.

    Attributes:
        bump: The rejected bump value.
    """

    def __init__(self, bump: object) -> None:
        """Initialize with the rejected bump value."""
        self.bump = bump
        super().__init__(
            code=E.BUMP_INVALID,
            message=f'cannot apply bump {bump!r} to a version',
            hint='Handle the "no release" case before computing the next version.',
        )


class InvalidDateError(ReleaseGateError, ValueError):
    """Raised when a changelog date is not an ISO-8601 calendar date."""

    def __init__(self, value: object) -> None:
        """Initialize with the rejected date value."""
        self.value = value
        super().__init__(
            code=E.DATE_INVALID,
            message=f'release date {value!r} is not an ISO-8601 calendar date',
            hint='Use the YYYY-MM-DD format, e.g. 2024-01-15.',
        )


class ConfigError(ReleaseGateError):
    """Raised when configuration cannot be found or fails validation."""
