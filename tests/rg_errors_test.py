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

"""Tests for releasegate.errors."""

from __future__ import annotations

import releasegate
from releasegate.errors import (
    ConfigError,
    E,
    InvalidBumpError,
    InvalidDateError,
    InvalidVersionError,
    MalformedVersionError,
    ReleaseGateError,
)


class TestReleaseGateError:
    """Tests for the base error."""

    def test_str_with_hint(self) -> None:
        """The hint is rendered on its own line."""
        err = ConfigError(code=E.CONFIG_INVALID, message='bad key', hint='fix it')
        assert str(err) == '[RG-CONFIG-INVALID] bad key\n  hint: fix it'

    def test_str_without_hint(self) -> None:
        """No hint line when the hint is empty."""
        err = ConfigError(code=E.CONFIG_NOT_FOUND, message='missing')
        assert str(err) == '[RG-CONFIG-NOT-FOUND] missing'

    def test_attributes(self) -> None:
        """Code, message and hint are exposed."""
        err = InvalidDateError('nope')
        assert err.code is E.DATE_INVALID
        assert 'nope' in err.message
        assert err.hint
        assert err.value == 'nope'


class TestHierarchy:
    """Tests for the exception hierarchy."""

    def test_all_derive_from_base(self) -> None:
        """Every error is a ReleaseGateError."""
        for cls in (ConfigError, InvalidBumpError, InvalidDateError, MalformedVersionError):
            assert issubclass(cls, ReleaseGateError)

    def test_value_errors(self) -> None:
        """Input errors are also ValueErrors."""
        for cls in (InvalidBumpError, InvalidDateError, MalformedVersionError):
            assert issubclass(cls, ValueError)

    def test_invalid_version_alias(self) -> None:
        """InvalidVersionError and MalformedVersionError are the same class."""
        assert InvalidVersionError is MalformedVersionError

    def test_malformed_version_fields(self) -> None:
        """The version and argument are recorded."""
        err = MalformedVersionError('1.2', 'base')
        assert err.version == '1.2'
        assert err.argument == 'base'
        assert err.message == "base '1.2' is not a valid semantic version"

    def test_bump_field(self) -> None:
        """The rejected bump is recorded."""
        assert InvalidBumpError('none').bump == 'none'

    def test_exported_from_package(self) -> None:
        """The main errors are importable from the package root."""
        assert releasegate.MalformedVersionError is MalformedVersionError
        assert releasegate.InvalidBumpError is InvalidBumpError
