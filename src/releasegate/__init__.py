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

"""Conventional-commit driven version resolution and changelog synthesis.

Components, leaf-first::

    commit_parsing.classify   raw message      → ClassifiedCommit
    bump.resolve              commits          → BumpType
    versions.apply_bump       version + bump   → SemanticVersion
    validation.validate_increment  candidate vs base → VersionTransition
    changelog.render          version + date + commits → markdown section
    merge.merge               document + section → document

All six are pure functions over in-memory data. Reading git history,
manifests and ``CHANGELOG.md`` is left to the caller;
:func:`releasegate.release.plan_release` wires the pieces together.
"""

from __future__ import annotations

from releasegate._types import CommitRecord
from releasegate.bump import resolve
from releasegate.changelog import render
from releasegate.commit_parsing import BumpType, ClassifiedCommit, classify
from releasegate.errors import (
    InvalidBumpError,
    InvalidVersionError,
    MalformedVersionError,
    ReleaseGateError,
)
from releasegate.merge import merge
from releasegate.validation import VersionTransition, validate_increment
from releasegate.versions import SemanticVersion, apply_bump, parse_version

__version__ = '0.1.0'

__all__ = [
    'BumpType',
    'ClassifiedCommit',
    'CommitRecord',
    'InvalidBumpError',
    'InvalidVersionError',
    'MalformedVersionError',
    'ReleaseGateError',
    'SemanticVersion',
    'VersionTransition',
    'apply_bump',
    'classify',
    'merge',
    'parse_version',
    'render',
    'resolve',
    'validate_increment',
]
