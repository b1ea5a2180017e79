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

"""Pure types for commit message classification.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass, enum, or protocol with no I/O, no
logging, no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class BumpType(Enum):
    """Semver bump directives, ordered by precedence (highest first).

    The "strongest" bump wins across a batch of commits. For example,
    if a batch has both a ``feat:`` and a ``fix:`` commit, the bump is
    ``MINOR`` (not ``PATCH``).
    """

    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'
    NONE = 'none'

    def __str__(self) -> str:
        """Return the lowercase directive name."""
        return self.value


# Bump precedence: lower index = higher precedence.
BUMP_PRECEDENCE: list[BumpType] = [
    BumpType.MAJOR,
    BumpType.MINOR,
    BumpType.PATCH,
    BumpType.NONE,
]


def max_bump(a: BumpType, b: BumpType) -> BumpType:
    """Return the higher-precedence bump type.

    >>> max_bump(BumpType.MINOR, BumpType.PATCH)
    <BumpType.MINOR: 'minor'>
    >>> max_bump(BumpType.NONE, BumpType.MAJOR)
    <BumpType.MAJOR: 'major'>
    """
    a_idx = BUMP_PRECEDENCE.index(a)
    b_idx = BUMP_PRECEDENCE.index(b)
    return BUMP_PRECEDENCE[min(a_idx, b_idx)]


@dataclass(frozen=True)
class ClassifiedCommit:
    """A commit message split into its Conventional Commit parts.

    Messages that do not follow the ``type(scope)!: description``
    grammar are still represented: ``type`` and ``scope`` are ``None``
    and ``description`` holds the whole subject line.

    Attributes:
        id: Opaque commit identifier (usually the full SHA).
        type: Lower-cased commit type, or ``None`` when unclassified.
        scope: Scope without parentheses, or ``None``.
        breaking: ``True`` for a ``!`` header or a ``BREAKING CHANGE:``
            / ``BREAKING-CHANGE:`` marker anywhere in the message.
        description: Subject text after ``type(scope)!:``.
        body: Everything after the subject line, trimmed.
        breaking_description: Text following the first breaking-change
            marker, or empty.
    """

    id: str
    type: str | None
    scope: str | None
    breaking: bool
    description: str
    body: str = ''
    breaking_description: str = ''

    @property
    def is_conventional(self) -> bool:
        """``True`` if the subject matched the Conventional Commit grammar."""
        return self.type is not None


@runtime_checkable
class CommitClassifier(Protocol):
    """Protocol for commit message classifiers.

    A classifier never rejects input: malformed messages degrade to an
    unclassified :class:`ClassifiedCommit` instead of raising.

    Built-in implementations:

    - :class:`~releasegate.commit_parsing.ConventionalCommitClassifier`
    """

    def classify(self, raw_message: str, commit_id: str = '') -> ClassifiedCommit:
        """Classify a raw commit message.

        Args:
            raw_message: Full commit message (subject plus body).
            commit_id: Identifier of the commit (for reference).

        Returns:
            The :class:`ClassifiedCommit`.
        """
        ...
